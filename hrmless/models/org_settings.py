"""Organization settings serializer: the organization nested under "org"."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from hrmless.models import organization
from hrmless.types.host import FieldDescriptorTD
from hrmless.utils.fields import build_key_and_label, remove_if_empty

WRAPPER_KEY = "org"


def fields(
    prefix: str = "", is_input: bool = True, is_array_child: bool = False
) -> list[FieldDescriptorTD]:
    key_prefix, _ = build_key_and_label(prefix, is_input, is_array_child)
    return organization.fields(f"{key_prefix}{WRAPPER_KEY}", is_input)


def mapping(bundle: Mapping[str, Any], prefix: str = "") -> dict[str, Any]:
    """Never sends {"org": {}}: an empty organization becomes None."""
    key_prefix, _ = build_key_and_label(prefix)
    return {
        WRAPPER_KEY: remove_if_empty(organization.mapping(bundle, f"{key_prefix}{WRAPPER_KEY}")),
    }
