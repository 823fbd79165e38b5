"""Candidate field schema and payload mapping."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from hrmless.types.host import FieldDescriptorTD
from hrmless.utils.fields import build_field, build_key_and_label, input_value

CANDIDATE_STATES = [
    "not_invited_yet",
    "invited",
    "attempted",
    "completed",
    "rejected",
    "graded",
    "passed",
    "calendar_link_sent",
]

MAPPED_FIELDS = (
    "id",
    "name",
    "email",
    "phone",
    "state",
    "score",
    "feedback",
    "language",
    "invited_at",
    "completed_at",
    "created_at",
    "updated_at",
    "position_id",
    "organization_id",
)


def fields(
    prefix: str = "", is_input: bool = True, is_array_child: bool = False
) -> list[FieldDescriptorTD]:
    """Full candidate record, as returned by the read endpoints."""
    key_prefix, label_prefix = build_key_and_label(prefix, is_input, is_array_child)

    return [
        build_field(f"{key_prefix}id", "ID", is_input=is_input),
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
            f"{key_prefix}state",
            "Candidate state",
            is_input=is_input,
            help_text="The current state of the candidate in the interview process.",
            choices=CANDIDATE_STATES,
        ),
        build_field(
            f"{key_prefix}score",
            "Candidate score",
            is_input=is_input,
            field_type="integer",
            help_text="The score of the candidate's interview",
        ),
        build_field(
            f"{key_prefix}feedback",
            "Candidate feedback",
            is_input=is_input,
            help_text="Feedback provided for the candidate by HRMLESS AI.",
        ),
        build_field(
            f"{key_prefix}language",
            "Candidate language",
            is_input=is_input,
            required=True,
            default="en",
            help_text="The language preference of the candidate. (e.g. 'en' for English)",
        ),
        build_field(
            f"{key_prefix}invited_at",
            f"[{label_prefix}invited_at]",
            is_input=is_input,
            help_text="INTERNAL USE: The timestamp when the candidate was invited.",
        ),
        build_field(
            f"{key_prefix}completed_at",
            f"[{label_prefix}completed_at]",
            is_input=is_input,
            help_text="INTERNAL USE: The timestamp when the candidate completed the interview.",
        ),
        build_field(
            f"{key_prefix}created_at",
            f"[{label_prefix}created_at]",
            is_input=is_input,
            help_text="INTERNAL USE: The timestamp when the candidate record was created.",
        ),
        build_field(
            f"{key_prefix}updated_at",
            f"[{label_prefix}updated_at]",
            is_input=is_input,
            help_text="INTERNAL USE: The timestamp when the candidate record was last updated.",
        ),
        build_field(
            f"{key_prefix}position_id",
            f"[{label_prefix}position_id]",
            is_input=is_input,
            required=True,
            help_text="The ID of the position the candidate is applied for.",
        ),
        build_field(
            f"{key_prefix}organization_id",
            f"[{label_prefix}organization_id]",
            is_input=is_input,
            required=True,
            help_text="The ID of the organization the candidate belongs to.",
        ),
    ]


def mapping(bundle: Mapping[str, Any], prefix: str = "") -> dict[str, Any]:
    """Rebuild a candidate payload from flat input keys."""
    key_prefix, _ = build_key_and_label(prefix)
    return {name: input_value(bundle, f"{key_prefix}{name}") for name in MAPPED_FIELDS}
