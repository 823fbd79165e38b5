"""Organization field schema and payload mapping."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from hrmless.types.host import FieldDescriptorTD
from hrmless.utils.fields import build_field, build_key_and_label, input_value

# is_active is accepted by the API but not offered in the form
MAPPED_FIELDS = (
    "id",
    "name",
    "contact_email",
    "contact_phone",
    "address",
    "is_active",
    "contact_name",
    "calendar_link",
)


def fields(
    prefix: str = "", is_input: bool = True, is_array_child: bool = False
) -> list[FieldDescriptorTD]:
    key_prefix, label_prefix = build_key_and_label(prefix, is_input, is_array_child)

    def field(name: str, help_text: str, required: bool | None = None) -> FieldDescriptorTD:
        return build_field(
            f"{key_prefix}{name}",
            f"[{label_prefix}{name}]",
            is_input=is_input,
            required=required,
            help_text=help_text,
        )

    return [
        field("id", "The unique identifier of the organization."),
        field("name", "The name of the organization.", required=True),
        field("contact_email", "The contact email of the organization.", required=True),
        field("contact_phone", "The contact phone number of the organization.", required=True),
        field("address", "The address of the organization."),
        field("contact_name", "The contact name of the organization."),
        field("calendar_link", "The default calendar link of the organization."),
    ]


def mapping(bundle: Mapping[str, Any], prefix: str = "") -> dict[str, Any]:
    key_prefix, _ = build_key_and_label(prefix)
    return {name: input_value(bundle, f"{key_prefix}{name}") for name in MAPPED_FIELDS}
