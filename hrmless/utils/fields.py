"""Helpers shared by the schema builders, mappers and actions."""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from typing import Any, NamedTuple
from urllib.parse import quote

from hrmless.core.errors import MissingParameterError
from hrmless.types.host import BundleTD, FieldDescriptorTD

PATH_PARAM_RE = re.compile(r"{([^{}]+)}")

NESTED_SEPARATOR = "."
ARRAY_OUTPUT_SEPARATOR = "__"


class KeyLabelPrefix(NamedTuple):
    """Key and label prefixes for one level of nesting."""

    key_prefix: str
    label_prefix: str


def build_key_and_label(
    prefix: str, is_input: bool = True, is_array_child: bool = False
) -> KeyLabelPrefix:
    """
    Compute flat-key and label prefixes for nested fields.

    Output fields inside an array use "__" so their flattened keys never
    collide with dotted nested-object keys. Labels always use dots.

    Example:
        build_key_and_label("parent", is_input=False, is_array_child=True)
        -> KeyLabelPrefix(key_prefix="parent__", label_prefix="parent.")
    """
    if not prefix:
        return KeyLabelPrefix("", "")

    if not is_input and is_array_child:
        separator = ARRAY_OUTPUT_SEPARATOR
    else:
        separator = NESTED_SEPARATOR

    key_prefix = f"{prefix}{separator}"
    return KeyLabelPrefix(key_prefix, key_prefix.replace(ARRAY_OUTPUT_SEPARATOR, "."))


def build_field(
    key: str,
    label: str,
    *,
    is_input: bool,
    field_type: str = "string",
    required: bool | None = None,
    help_text: str | None = None,
    choices: list[str] | None = None,
    default: str | None = None,
) -> FieldDescriptorTD:
    """Build one field descriptor; form guidance is attached to inputs only."""
    field: FieldDescriptorTD = {"key": key, "label": label, "type": field_type}
    if required is not None:
        field["required"] = required

    if is_input:
        if help_text:
            field["helpText"] = help_text
        if choices:
            field["choices"] = list(choices)
        if default is not None:
            field["default"] = default

    return field


def build_group(key: str, label: str, children: list[FieldDescriptorTD]) -> FieldDescriptorTD:
    """Build a repeatable group; groups carry no type of their own."""
    return {"key": key, "label": label, "children": children}


def input_value(bundle: Mapping[str, Any], key: str) -> Any:
    """Read a flat key from bundle inputData (None when absent)."""
    input_data = bundle.get("inputData") or {}
    return input_data.get(key)


def child_mapping(
    items: list[dict[str, Any]] | None,
    prefix: str,
    mapping: Callable[[Mapping[str, Any], str], dict[str, Any]],
) -> list[dict[str, Any]] | None:
    """Map every element of a nested array through the child's mapper.

    Returns None when the array is absent so the parent omits the key.
    """
    if items is None:
        return None
    return [mapping({"inputData": item}, prefix) for item in items]


def remove_if_empty(obj: dict[str, Any] | None) -> dict[str, Any] | None:
    """Return None if the object has no member with a value."""
    if not obj or all(value is None for value in obj.values()):
        return None
    return obj


def is_missing(value: Any) -> bool:
    """Values never sent over the wire: None and empty strings."""
    return value is None or value == ""


def strip_missing(value: Any) -> Any:
    """Drop missing members from nested objects, including objects inside lists."""
    if isinstance(value, Mapping):
        return {key: strip_missing(item) for key, item in value.items() if not is_missing(item)}
    if isinstance(value, list):
        return [strip_missing(item) for item in value]
    return value


def remove_missing_values(values: Mapping[str, Any] | None) -> dict[str, Any]:
    """Drop missing entries at every depth; [], {}, False and 0 are kept."""
    if not values:
        return {}
    return strip_missing(values)


def render_path(template: str, bundle: BundleTD) -> str:
    """
    Substitute {name} path parameters from the bundle.

    org_id comes from authData, every other name from inputData.

    Raises:
        MissingParameterError: If a parameter has no value
    """

    def substitute(match: re.Match[str]) -> str:
        name = match.group(1)
        source = bundle.get("authData") if name == "org_id" else bundle.get("inputData")
        value = (source or {}).get(name)
        if is_missing(value):
            raise MissingParameterError(f"Missing value for path parameter '{name}'")
        return quote(str(value), safe="")

    return PATH_PARAM_RE.sub(substitute, template)
