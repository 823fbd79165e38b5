"""Action descriptors and the shared request/response handling."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Collection
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel
from structlog import get_logger

from hrmless.core.config import settings
from hrmless.core.errors import NotFoundError, UnauthorizedError
from hrmless.types.host import BundleTD, RequestOptionsTD
from hrmless.utils.fields import render_path

if TYPE_CHECKING:
    from hrmless.clients.hrmless import HrmlessClient, HttpResponse

logger = get_logger()

POSITION_SELECTOR = "orgPositionAction.id.name"
CANDIDATE_INTERNAL_FIELDS = ("communications", "hired", "tags")


class ActionKind(StrEnum):
    """Which host collection an action belongs to."""

    SEARCH = "search"
    CREATE = "create"
    TRIGGER = "trigger"


class ResultShape(StrEnum):
    """How a response body becomes the action result."""

    OBJECT = "object"  # body as-is
    FIRST_ITEM = "first_item"  # list -> first element
    SEARCH_ITEM = "search_item"  # single record as a one-element list
    COLLECTION = "collection"  # list, {"items": [...]} or a bare object
    OPTIONS = "options"  # [{id, name}] projection for dropdowns
    SUCCESS = "success"  # empty body -> {"success": True}


class ActionDisplay(BaseModel):
    """How the host presents an action."""

    label: str
    description: str
    hidden: bool = False

    class Config:
        """Pydantic configuration."""

        frozen = True


class ActionOperation(BaseModel):
    """Fields, sample and the perform coroutine of an action."""

    input_fields: list[dict[str, Any]]
    output_fields: list[dict[str, Any]]
    perform: Callable[..., Awaitable[Any]]
    sample: dict[str, Any]
    clean_input_data: bool = False

    class Config:
        """Pydantic configuration."""

        frozen = True


class ActionDescriptor(BaseModel):
    """One callable operation exposed to the host."""

    key: str
    noun: str
    kind: ActionKind
    display: ActionDisplay
    operation: ActionOperation

    class Config:
        """Pydantic configuration."""

        frozen = True

    async def run(self, client: HrmlessClient, bundle: BundleTD) -> Any:
        """Invoke perform; exactly one outbound request."""
        logger.info("action_perform_started", action=self.key, kind=self.kind.value)
        result = await self.operation.perform(client, bundle)
        logger.info("action_perform_completed", action=self.key)
        return result

    def to_host_dict(self) -> dict[str, Any]:
        """Serialize to the host's definition format (perform excluded)."""
        return {
            "key": self.key,
            "noun": self.noun,
            "display": self.display.model_dump(),
            "operation": {
                "inputFields": self.operation.input_fields,
                "outputFields": self.operation.output_fields,
                "sample": self.operation.sample,
                "cleanInputData": self.operation.clean_input_data,
            },
        }


def position_id_field() -> dict[str, Any]:
    """Position selector backed by the list-positions trigger."""
    return {
        "key": "position_id",
        "label": "Position",
        "type": "string",
        "required": True,
        "dynamic": POSITION_SELECTOR,
    }


def candidate_id_field() -> dict[str, Any]:
    return {
        "key": "candidate_id",
        "label": "Candidate ID",
        "type": "string",
        "required": True,
    }


def headers_for(method: str, has_body: bool) -> dict[str, str]:
    """Content negotiation headers; empty values are dropped before sending."""
    return {
        "Content-Type": "application/json" if has_body else "",
        "Accept": "" if method == "DELETE" else "application/json",
    }


def without_fields(result: Any, names: Collection[str]) -> Any:
    """Strip internal-only members from one object or each object of a list."""
    if not names:
        return result
    if isinstance(result, list):
        return [without_fields(item, names) for item in result]
    if isinstance(result, dict):
        return {key: value for key, value in result.items() if key not in names}
    return result


def shape_result(shape: ResultShape, data: Any) -> Any:
    """Apply an endpoint's declared result shape to a parsed body."""
    if shape is ResultShape.OBJECT:
        return data

    if shape is ResultShape.FIRST_ITEM:
        if isinstance(data, list):
            return data[0] if data else {}
        return data

    if shape is ResultShape.SEARCH_ITEM:
        if isinstance(data, list):
            return data[:1]
        return [data] if data is not None else []

    if shape is ResultShape.COLLECTION:
        if isinstance(data, list):
            return data
        if isinstance(data, dict) and isinstance(data.get("items"), list):
            return data["items"]
        return [data] if data is not None else []

    if shape is ResultShape.OPTIONS:
        items = data if isinstance(data, list) else (data or {}).get("items") or []
        return [{"id": item.get("id"), "name": item.get("name")} for item in items]

    if shape is ResultShape.SUCCESS:
        return data or {"success": True}

    raise ValueError(f"Unknown result shape: {shape}")


def check_status(response: HttpResponse, not_found: str | None) -> None:
    """
    Map error statuses to error kinds.

    Raises:
        NotFoundError: On 404, when the action names what to verify
        UnauthorizedError: On 401, same condition
        HttpFailureError: On any other status >= 400
    """
    if not_found is not None:
        if response.status == 404:
            raise NotFoundError(not_found)
        if response.status == 401:
            raise UnauthorizedError()
    response.raise_for_status()


async def perform_request(
    client: HrmlessClient,
    bundle: BundleTD,
    *,
    method: str,
    path: str,
    shape: ResultShape,
    not_found: str | None,
    body: dict[str, Any] | None = None,
    strip: Collection[str] = (),
) -> Any:
    """
    Build, send and interpret one API request.

    Args:
        client: HTTP client (middleware injects the bearer token)
        bundle: Invocation bundle; path parameters come from here
        method: HTTP verb
        path: Path template relative to the API base URL, e.g. "/org/{org_id}/position"
        shape: Result shape of this endpoint
        not_found: 404 message; None skips the 404/401 mapping
        body: JSON body, None for bodyless verbs
        strip: Internal fields removed from the result

    Returns:
        Shaped result for the host
    """
    options: RequestOptionsTD = {
        "method": method,
        "url": f"{settings.base_url}{render_path(path, bundle)}",
        "headers": headers_for(method, body is not None),
        "params": {},
        "body": body,
        "remove_missing_values": True,
    }

    response = await client.request(options, bundle)
    check_status(response, not_found)

    if shape is ResultShape.SUCCESS and (response.status == 204 or not response.content):
        return {"success": True}

    return without_fields(shape_result(shape, response.json()), strip)
