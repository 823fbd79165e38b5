"""Host endpoints for the OAuth2 lifecycle."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter
from structlog import get_logger

from hrmless.api.payloads import BundlePayload
from hrmless.auth import get_access_token, refresh_access_token, verify_connection
from hrmless.clients import hrmless as hrmless_api

logger = get_logger()
router = APIRouter(prefix="/oauth", tags=["oauth"])


@router.post("/token")
async def exchange_code(payload: BundlePayload) -> dict[str, Any]:
    """Exchange an authorization code for a session."""
    logger.info("oauth_token_exchange_requested")
    return await get_access_token(hrmless_api.hrmless_client, payload.to_bundle())


@router.post("/refresh")
async def refresh_session(payload: BundlePayload) -> dict[str, Any]:
    """Refresh an expired session."""
    logger.info("oauth_refresh_requested")
    return await refresh_access_token(hrmless_api.hrmless_client, payload.to_bundle())


@router.post("/test")
async def check_connection(payload: BundlePayload) -> Any:
    """Verify stored credentials still work."""
    return await verify_connection(hrmless_api.hrmless_client, payload.to_bundle())
