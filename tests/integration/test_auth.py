"""Integration tests for the OAuth2 flow."""

import aiohttp
import pytest

from hrmless.auth import (
    authentication_config,
    get_access_token,
    include_bearer_token,
    refresh_access_token,
    verify_connection,
)
from hrmless.core.config import settings
from hrmless.core.errors import AuthenticationTestError, HttpFailureError
from tests.fixtures.factories import ACCESS_TOKEN, ORG_ID, REFRESH_TOKEN


def code_bundle(**input_data):
    data = {"code": "auth_code", "redirect_uri": "https://host.example/cb", "code_verifier": "v"}
    data.update(input_data)
    return {"authData": {}, "inputData": data}


class TestGetAccessToken:
    """Tests for the authorization code exchange."""

    @pytest.mark.asyncio
    async def test_exchange_resolves_org_id(self, mock_client):
        """Test that tokens and the org id come back as one session."""
        mock_client.add_response(
            200, {"access_token": "new_access", "refresh_token": "new_refresh", "expires_in": 300}
        )
        mock_client.add_response(200, {"org_id": ORG_ID})

        session = await get_access_token(mock_client, code_bundle())

        assert session == {
            "access_token": "new_access",
            "refresh_token": "new_refresh",
            "org_id": ORG_ID,
        }
        assert mock_client.get_call_count() == 2

        token_call, org_call = mock_client.calls
        assert token_call["method"] == "POST"
        assert token_call["url"] == settings.token_url
        assert token_call["headers"] == {"Content-Type": "application/x-www-form-urlencoded"}
        assert token_call["form"] == {
            "code": "auth_code",
            "client_id": "zapier",
            "redirect_uri": "https://host.example/cb",
            "grant_type": "authorization_code",
            "code_verifier": "v",
        }

        assert org_call["url"] == f"{settings.base_url}/org_id"
        assert org_call["headers"]["Authorization"] == "Bearer new_access"

    @pytest.mark.asyncio
    async def test_missing_verifier_is_not_sent(self, mock_client):
        mock_client.add_response(200, {"access_token": "a", "refresh_token": "r"})
        mock_client.add_response(200, {"org_id": ORG_ID})

        await get_access_token(mock_client, code_bundle(code_verifier=None))

        assert "code_verifier" not in mock_client.calls[0]["form"]

    @pytest.mark.asyncio
    async def test_org_lookup_failure_keeps_tokens(self, mock_client):
        """Test that a failed org lookup still yields a usable session."""
        mock_client.add_response(200, {"access_token": "a", "refresh_token": "r"})
        mock_client.add_response(404, {"detail": "Not found"})

        session = await get_access_token(mock_client, code_bundle())

        assert session == {"access_token": "a", "refresh_token": "r"}

    @pytest.mark.asyncio
    async def test_org_lookup_transport_error_keeps_tokens(self, mock_client):
        mock_client.add_response(200, {"access_token": "a", "refresh_token": "r"})
        mock_client.add_exception(aiohttp.ClientError("connection reset"))

        session = await get_access_token(mock_client, code_bundle())

        assert "org_id" not in session

    @pytest.mark.asyncio
    async def test_token_endpoint_failure_raises(self, mock_client):
        mock_client.add_response(400, {"error": "invalid_grant"})

        with pytest.raises(HttpFailureError) as exc_info:
            await get_access_token(mock_client, code_bundle())

        assert exc_info.value.status == 400
        assert mock_client.get_call_count() == 1


    @pytest.mark.asyncio
    async def test_missing_refresh_token_is_a_domain_error(self, mock_client):
        """Test that an incomplete token response names the missing member."""
        mock_client.add_response(200, {"access_token": "a"})

        with pytest.raises(HttpFailureError, match="refresh_token"):
            await get_access_token(mock_client, code_bundle())

        assert mock_client.get_call_count() == 1


class TestRefreshAccessToken:
    """Tests for token refresh."""

    @pytest.mark.asyncio
    async def test_refresh(self, mock_client, bundle):
        mock_client.add_response(200, {"access_token": "fresh", "refresh_token": "fresh_r"})

        session = await refresh_access_token(mock_client, bundle())

        assert session == {"access_token": "fresh", "refresh_token": "fresh_r"}
        call = mock_client.get_last_call()
        assert call["url"] == settings.token_url
        assert call["form"] == {
            "refresh_token": REFRESH_TOKEN,
            "client_id": "zapier",
            "grant_type": "refresh_token",
        }


    @pytest.mark.asyncio
    async def test_refresh_keeps_token_when_not_rotated(self, mock_client, bundle):
        mock_client.add_response(200, {"access_token": "fresh"})

        session = await refresh_access_token(mock_client, bundle())

        assert session == {"access_token": "fresh", "refresh_token": REFRESH_TOKEN}

    @pytest.mark.asyncio
    async def test_refresh_without_access_token(self, mock_client, bundle):
        mock_client.add_response(200, {"refresh_token": "fresh_r"})

        with pytest.raises(HttpFailureError, match="access_token"):
            await refresh_access_token(mock_client, bundle())


class TestVerifyConnection:
    """Tests for the connection test."""

    @pytest.mark.asyncio
    async def test_success_returns_lookup(self, mock_client, bundle):
        mock_client.add_response(200, {"org_id": ORG_ID})

        result = await verify_connection(mock_client, bundle())

        assert result == {"org_id": ORG_ID}
        call = mock_client.get_last_call()
        assert call["method"] == "GET"
        assert call["headers"]["Authorization"] == f"Bearer {ACCESS_TOKEN}"

    @pytest.mark.asyncio
    async def test_http_failure_is_wrapped(self, mock_client, bundle):
        mock_client.add_response(401, {"detail": "Invalid token"})

        with pytest.raises(AuthenticationTestError, match="Authentication test failed"):
            await verify_connection(mock_client, bundle())

    @pytest.mark.asyncio
    async def test_transport_failure_is_wrapped(self, mock_client, bundle):
        mock_client.add_exception(aiohttp.ClientError("dns failure"))

        with pytest.raises(AuthenticationTestError) as exc_info:
            await verify_connection(mock_client, bundle())

        assert "dns failure" in exc_info.value.message
        assert exc_info.value.kind == "AuthenticationTestFailure"


class TestIncludeBearerToken:
    """Tests for the bearer-token middleware."""

    def test_adds_authorization_header(self):
        request = {"method": "GET", "url": "https://x", "headers": {"Accept": "application/json"}}

        result = include_bearer_token(request, {"authData": {"access_token": "t"}, "inputData": {}})

        assert result["headers"] == {"Accept": "application/json", "Authorization": "Bearer t"}

    def test_leaves_request_alone_without_token(self):
        request = {"method": "GET", "url": "https://x", "headers": {}}

        result = include_bearer_token(request, {"authData": {}, "inputData": {}})

        assert "Authorization" not in result["headers"]

    def test_explicit_header_is_replaced_by_session_token(self, mock_client):
        """Test that middleware runs on every request built with a bundle."""
        prepared = mock_client.prepare_request(
            {"method": "GET", "url": "https://x", "headers": {"Authorization": "Bearer old"}},
            {"authData": {"access_token": "current"}, "inputData": {}},
        )

        assert prepared["headers"]["Authorization"] == "Bearer current"


class TestAuthenticationConfig:
    """Tests for the OAuth2 configuration handed to the host."""

    def test_oauth2_config(self):
        config = authentication_config()

        assert config["type"] == "oauth2"
        assert "{{bundle.authData.org_id}}" in config["connectionLabel"]

        oauth2 = config["oauth2Config"]
        assert oauth2["autoRefresh"] is True
        assert oauth2["enablePkce"] is True
        assert oauth2["scope"] == "openid profile email"
        assert oauth2["authorizeUrl"]["url"] == settings.authorize_url
        assert oauth2["authorizeUrl"]["params"]["response_type"] == "code"
        assert oauth2["authorizeUrl"]["params"]["client_id"] == "zapier"
