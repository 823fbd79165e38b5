"""Host endpoints for action definitions and invocation."""

from __future__ import annotations

from typing import Any, Literal

from fastapi import APIRouter, HTTPException
from structlog import get_logger

from hrmless.actions.base import ActionDescriptor
from hrmless.actions.router import app_definition, get_action
from hrmless.api.payloads import BundlePayload, ErrorResponse
from hrmless.clients import hrmless as hrmless_api

logger = get_logger()
router = APIRouter(tags=["actions"])


def require_action(key: str) -> ActionDescriptor:
    action = get_action(key)
    if action is None:
        logger.warning("unknown_action", action=key)
        raise HTTPException(status_code=404, detail=f"Unknown action: {key}")
    return action


@router.get("/definition")
async def get_definition() -> dict[str, Any]:
    """Full connector definition: auth config plus all actions."""
    return app_definition()


@router.get("/actions/{key}/fields")
async def get_action_fields(
    key: str, mode: Literal["input", "output"] = "input"
) -> list[dict[str, Any]]:
    """Input or output field schema of one action."""
    action = require_action(key)
    if mode == "output":
        return action.operation.output_fields
    return action.operation.input_fields


@router.post(
    "/actions/{key}/perform",
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)
async def perform_action(key: str, payload: BundlePayload) -> Any:
    """
    Run one action against the HRMLESS API.

    Domain errors propagate to the app's HrmlessError handler.
    """
    action = require_action(key)
    return await action.run(hrmless_api.hrmless_client, payload.to_bundle())
