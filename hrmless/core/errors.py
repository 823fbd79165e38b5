"""Error kinds raised by actions and the auth flow."""

from __future__ import annotations

from typing import Any


class HrmlessError(Exception):
    """Base error surfaced to the host, tagged with a kind."""

    kind = "Error"

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status = status

    def to_dict(self) -> dict[str, Any]:
        """Serialize for the host error payload."""
        return {"detail": self.message, "error_code": self.kind}


class NotFoundError(HrmlessError):
    """Remote resource missing (HTTP 404)."""

    kind = "NotFound"

    def __init__(self, message: str) -> None:
        super().__init__(message, status=404)


class UnauthorizedError(HrmlessError):
    """Remote API rejected the credentials (HTTP 401)."""

    kind = "Unauthorized"

    def __init__(
        self,
        message: str = "Unauthorized. Please verify your organization ID and OAUTH credentials.",
    ) -> None:
        super().__init__(message, status=401)


class HttpFailureError(HrmlessError):
    """Any other non-2xx response."""

    kind = "HttpFailure"

    def __init__(self, status: int, body: str = "", url: str | None = None) -> None:
        message = f"Got {status} calling {url}" if url else f"Got {status}"
        if body:
            message = f"{message}: {body}"
        super().__init__(message, status=status)
        self.body = body
        self.url = url


class AuthenticationTestError(HrmlessError):
    """Connection test failed."""

    kind = "AuthenticationTestFailure"


class MissingParameterError(HrmlessError):
    """A URL path parameter has no value in the bundle."""

    kind = "MissingParameter"
