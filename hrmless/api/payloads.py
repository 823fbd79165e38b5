"""Pydantic models for host requests."""

from typing import Any, cast

from pydantic import BaseModel

from hrmless.types.host import BundleTD


class BundlePayload(BaseModel):
    """
    Invocation bundle as posted by the host.

    Minimal validation: both sections are free-form mappings.
    """

    authData: dict[str, Any] = {}
    inputData: dict[str, Any] = {}

    class Config:
        """Pydantic configuration."""

        extra = "allow"  # Host may send extra context (meta, subscription data)

    def to_bundle(self) -> BundleTD:
        return cast(BundleTD, {"authData": dict(self.authData), "inputData": dict(self.inputData)})


class ErrorResponse(BaseModel):
    """Standard error response."""

    detail: str
    error_code: str | None = None
