"""Candidate update payload.

The editable fields are the create subset. Position and organization ids
are taken from the action's own inputs and the connection, not from the
prefixed key space.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from hrmless.models import candidate_create
from hrmless.types.host import FieldDescriptorTD


def fields(
    prefix: str = "", is_input: bool = True, is_array_child: bool = False
) -> list[FieldDescriptorTD]:
    return candidate_create.fields(prefix, is_input, is_array_child)


def mapping(bundle: Mapping[str, Any], prefix: str = "") -> dict[str, Any]:
    payload = candidate_create.mapping(bundle, prefix)
    payload["position_id"] = (bundle.get("inputData") or {}).get("position_id")
    payload["organization_id"] = (bundle.get("authData") or {}).get("org_id")
    return payload
