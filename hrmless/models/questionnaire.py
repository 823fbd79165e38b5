"""Screening question schema, used as an array child of position."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from hrmless.types.host import FieldDescriptorTD
from hrmless.utils.fields import build_field, build_key_and_label, input_value


def fields(
    prefix: str = "", is_input: bool = True, is_array_child: bool = False
) -> list[FieldDescriptorTD]:
    key_prefix, label_prefix = build_key_and_label(prefix, is_input, is_array_child)

    result: list[FieldDescriptorTD] = []
    if not is_input:
        result.append(build_field(f"{key_prefix}id", f"[{label_prefix}id]", is_input=is_input))

    result.append(
        build_field(
            f"{key_prefix}name",
            "Question name",
            is_input=is_input,
            required=False,
            help_text="A short name to identify the question. (e.g. 'Question 1')",
        )
    )
    result.append(
        build_field(
            f"{key_prefix}value",
            "Question",
            is_input=is_input,
            required=False,
            help_text="The text of the question being asked. "
            "(e.g. 'What is your greatest strength?')",
        )
    )
    return result


def mapping(bundle: Mapping[str, Any], prefix: str = "") -> dict[str, Any]:
    key_prefix, _ = build_key_and_label(prefix)
    return {
        "id": input_value(bundle, f"{key_prefix}id"),
        "name": input_value(bundle, f"{key_prefix}name"),
        "value": input_value(bundle, f"{key_prefix}value"),
    }
