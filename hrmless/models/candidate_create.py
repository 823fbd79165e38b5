"""Caller-supplied subset of the candidate record, used on create."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from hrmless.types.host import FieldDescriptorTD
from hrmless.utils.fields import build_field, build_key_and_label, input_value

MAPPED_FIELDS = ("name", "email", "phone", "language")


def fields(
    prefix: str = "", is_input: bool = True, is_array_child: bool = False
) -> list[FieldDescriptorTD]:
    """Required candidate fields for creation."""
    key_prefix, _ = build_key_and_label(prefix, is_input, is_array_child)

    return [
        build_field(
            f"{key_prefix}name",
            "Candidate name",
            is_input=is_input,
            required=True,
            help_text="The full name of the candidate. (e.g. 'John Doe')",
        ),
        build_field(
            f"{key_prefix}email",
            "Candidate email",
            is_input=is_input,
            required=True,
            help_text="The email address of the candidate. (e.g. 'john.doe@example.com')",
        ),
        build_field(
            f"{key_prefix}phone",
            "Candidate phone",
            is_input=is_input,
            required=True,
            help_text="The phone number of the candidate. (e.g. '+1234567890')",
        ),
        build_field(
            f"{key_prefix}language",
            "Candidate language",
            is_input=is_input,
            required=True,
            default="en",
            help_text="The language preference of the candidate. (e.g. 'en' for English)",
        ),
    ]


def mapping(bundle: Mapping[str, Any], prefix: str = "") -> dict[str, Any]:
    key_prefix, _ = build_key_and_label(prefix)
    return {name: input_value(bundle, f"{key_prefix}{name}") for name in MAPPED_FIELDS}
