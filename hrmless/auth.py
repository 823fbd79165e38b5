"""OAuth2 authentication: code exchange, refresh, bearer injection, connection test."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from structlog import get_logger

from hrmless.core.config import settings
from hrmless.core.errors import AuthenticationTestError, HttpFailureError
from hrmless.types.hrmless import AuthSessionTD
from hrmless.types.host import BundleTD, RequestOptionsTD

if TYPE_CHECKING:
    from hrmless.clients.hrmless import HrmlessClient, HttpResponse

logger = get_logger()

FORM_HEADERS = {"Content-Type": "application/x-www-form-urlencoded"}


def include_bearer_token(request: RequestOptionsTD, bundle: BundleTD) -> RequestOptionsTD:
    """Before-request middleware: add the session's bearer token if there is one."""
    access_token = (bundle.get("authData") or {}).get("access_token")
    if access_token:
        request["headers"]["Authorization"] = f"Bearer {access_token}"
    return request


async def verify_connection(client: HrmlessClient, bundle: BundleTD) -> Any:
    """
    Verify the connection with a lightweight authenticated call.

    Returns:
        The org id lookup response

    Raises:
        AuthenticationTestError: Wrapping whatever went wrong
    """
    try:
        response = await client.request(
            {"method": "GET", "url": f"{settings.base_url}/org_id", "headers": {}},
            bundle,
        )
        response.raise_for_status()
        return response.json()
    except Exception as e:
        logger.exception("auth_test_failed", error=str(e))
        raise AuthenticationTestError(
            f"Authentication test failed: {str(e) or 'Unknown error'}"
        ) from e


def read_token_pair(
    response: HttpResponse, refresh_fallback: str | None = None
) -> AuthSessionTD:
    """
    Pull the token pair out of a token endpoint response.

    Raises:
        HttpFailureError: If a token is missing from the response
    """
    tokens = response.json()
    if not isinstance(tokens, dict):
        tokens = {}

    session: AuthSessionTD = {
        "access_token": tokens.get("access_token"),
        "refresh_token": tokens.get("refresh_token") or refresh_fallback,
    }
    for name, value in session.items():
        if not value:
            raise HttpFailureError(
                response.status, f"Token response has no {name}", response.url
            )
    return session


async def fetch_org_id(client: HrmlessClient, access_token: str) -> str:
    """Resolve the organization of the token's user."""
    response = await client.request(
        {
            "method": "GET",
            "url": f"{settings.base_url}/org_id",
            "headers": {"Authorization": f"Bearer {access_token}"},
        }
    )
    response.raise_for_status()
    return str(response.json()["org_id"])


async def get_access_token(client: HrmlessClient, bundle: BundleTD) -> AuthSessionTD:
    """
    Exchange an authorization code (with PKCE verifier) for tokens.

    The org id is looked up right away and stored with the session. If that
    lookup fails the token pair is still returned, without org_id.

    Args:
        client: HTTP client
        bundle: inputData carries code, redirect_uri and code_verifier

    Returns:
        access_token, refresh_token and, when resolved, org_id
    """
    input_data = bundle.get("inputData") or {}

    response = await client.request(
        {
            "method": "POST",
            "url": settings.token_url,
            "headers": dict(FORM_HEADERS),
            "form": {
                "code": input_data.get("code"),
                "client_id": settings.oauth_client_id,
                "redirect_uri": input_data.get("redirect_uri"),
                "grant_type": "authorization_code",
                "code_verifier": input_data.get("code_verifier"),
            },
            "remove_missing_values": True,
        },
        bundle,
    )
    response.raise_for_status()
    session = read_token_pair(response)

    try:
        session["org_id"] = await fetch_org_id(client, session["access_token"])
    except Exception as e:
        logger.warning("org_id_fetch_failed", error=str(e))

    logger.info("access_token_obtained", has_org_id="org_id" in session)
    return session


async def refresh_access_token(client: HrmlessClient, bundle: BundleTD) -> AuthSessionTD:
    """
    Trade the refresh token for a new pair; the host persists it.

    Providers that do not rotate refresh tokens omit it, so the current one
    is kept.
    """
    auth_data = bundle.get("authData") or {}

    response = await client.request(
        {
            "method": "POST",
            "url": settings.token_url,
            "headers": dict(FORM_HEADERS),
            "form": {
                "refresh_token": auth_data.get("refresh_token"),
                "client_id": settings.oauth_client_id,
                "grant_type": "refresh_token",
            },
            "remove_missing_values": True,
        },
        bundle,
    )
    response.raise_for_status()
    session = read_token_pair(response, auth_data.get("refresh_token"))

    logger.info("access_token_refreshed")
    return session


def authentication_config() -> dict[str, Any]:
    """OAuth2 configuration for the host's connection setup."""
    return {
        "type": "oauth2",
        "connectionLabel": "HRMLESS Account ({{bundle.authData.org_id}})",
        "oauth2Config": {
            "authorizeUrl": {
                "method": "GET",
                "url": settings.authorize_url,
                "params": {
                    "client_id": settings.oauth_client_id,
                    "state": "{{bundle.inputData.state}}",
                    "redirect_uri": "{{bundle.inputData.redirect_uri}}",
                    "response_type": "code",
                },
            },
            "autoRefresh": True,
            "scope": settings.oauth_scope,
            "enablePkce": True,
        },
    }
