"""Position field schema and payload mapping.

A position owns an ordered list of screening questions ("questionaire",
spelled as the API spells it). In forms that list is one group field whose
children are the question schema built as an array child.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from hrmless.models import questionnaire
from hrmless.types.host import FieldDescriptorTD
from hrmless.utils.fields import (
    build_field,
    build_group,
    build_key_and_label,
    child_mapping,
    input_value,
)

POSITION_STATES = ["active", "draft", "inactive"]
QUESTIONS_KEY = "questionaire"

MAPPED_FIELDS = (
    "id",
    "name",
    "state",
    "department",
    "location",
    "min_score",
    "role_description",
    "position_calender_link",
    "created_at",
    "updated_at",
    "agent_id",
)


def fields(
    prefix: str = "", is_input: bool = True, is_array_child: bool = False
) -> list[FieldDescriptorTD]:
    """Position schema; server-generated fields appear in output mode only."""
    key_prefix, label_prefix = build_key_and_label(prefix, is_input, is_array_child)

    result: list[FieldDescriptorTD] = []
    if not is_input:
        result.append(build_field(f"{key_prefix}id", f"[{label_prefix}id]", is_input=is_input))

    result.extend(
        [
            build_field(
                f"{key_prefix}name",
                "Position name",
                is_input=is_input,
                required=True,
                help_text="The name of the position.",
            ),
            build_field(
                f"{key_prefix}state",
                "Position state",
                is_input=is_input,
                help_text="The state of the position.",
                choices=POSITION_STATES,
            ),
            build_field(
                f"{key_prefix}department",
                "Position department",
                is_input=is_input,
                help_text="The department for the position.",
            ),
            build_field(
                f"{key_prefix}location",
                "Position location",
                is_input=is_input,
                help_text="The location of the position.",
            ),
            build_field(
                f"{key_prefix}min_score",
                "Minimum passing",
                is_input=is_input,
                field_type="integer",
                help_text="The minimum passing score for the position (0-10).",
                default="5",
            ),
            build_field(
                f"{key_prefix}role_description",
                "Position role description",
                is_input=is_input,
                help_text="The role description of the position.",
            ),
            build_field(
                f"{key_prefix}position_calender_link",
                "Position calendar link",
                is_input=is_input,
                help_text="The calendar link of the position.",
            ),
            build_group(
                f"{key_prefix}{QUESTIONS_KEY}",
                "Position questions",
                questionnaire.fields(f"{key_prefix}{QUESTIONS_KEY}[]", is_input, True),
            ),
        ]
    )

    if not is_input:
        for name in ("created_at", "updated_at", "agent_id"):
            result.append(
                build_field(f"{key_prefix}{name}", f"[{label_prefix}{name}]", is_input=is_input)
            )

    return result


def mapping(bundle: Mapping[str, Any], prefix: str = "") -> dict[str, Any]:
    key_prefix, _ = build_key_and_label(prefix)
    payload = {name: input_value(bundle, f"{key_prefix}{name}") for name in MAPPED_FIELDS}
    payload[QUESTIONS_KEY] = child_mapping(
        input_value(bundle, f"{key_prefix}{QUESTIONS_KEY}"),
        f"{key_prefix}{QUESTIONS_KEY}",
        questionnaire.mapping,
    )
    return payload
