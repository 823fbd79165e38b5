"""Type definitions for the automation host's payloads.

Keys mirror the host's wire format (camelCase), not Python naming.
"""

from typing import Any, NotRequired, TypedDict


class AuthDataTD(TypedDict, total=False):
    """Stored connection credentials."""

    access_token: str
    refresh_token: str
    org_id: str


class BundleTD(TypedDict):
    """Per-invocation input envelope."""

    authData: AuthDataTD
    inputData: dict[str, Any]


class FieldDescriptorTD(TypedDict):
    """One form field, or a nested group when it has children."""

    key: str
    label: str
    type: NotRequired[str]  # "string", "integer", "boolean"; absent on groups
    required: NotRequired[bool]
    default: NotRequired[str]
    helpText: NotRequired[str]
    choices: NotRequired[list[str]]
    dynamic: NotRequired[str]  # "<triggerKey>.<valueField>.<labelField>"
    children: NotRequired[list["FieldDescriptorTD"]]


class RequestOptionsTD(TypedDict):
    """Outbound request before middleware runs."""

    method: str
    url: str
    headers: dict[str, str]
    params: NotRequired[dict[str, Any]]
    body: NotRequired[dict[str, Any] | None]  # JSON body
    form: NotRequired[dict[str, Any] | None]  # form-encoded body
    remove_missing_values: NotRequired[bool]
