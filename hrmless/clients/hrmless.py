"""HRMLESS API client: one outbound request per call, after middleware."""

from __future__ import annotations

import json
from collections.abc import Callable, Sequence
from typing import Any

import aiohttp
from structlog import get_logger

from hrmless.auth import include_bearer_token
from hrmless.core.errors import HttpFailureError
from hrmless.types.host import BundleTD, RequestOptionsTD
from hrmless.utils.fields import remove_missing_values

logger = get_logger()

BeforeRequest = Callable[[RequestOptionsTD, BundleTD], RequestOptionsTD]


class HttpResponse:
    """Buffered HTTP response."""

    def __init__(
        self,
        status: int,
        content: bytes = b"",
        headers: dict[str, str] | None = None,
        url: str | None = None,
    ) -> None:
        self.status = status
        self.content = content
        self.headers = headers or {}
        self.url = url

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")

    def json(self) -> Any:
        """
        Parse the body; None for an empty body.

        Raises:
            HttpFailureError: If the body is not JSON
        """
        if not self.content.strip():
            return None
        try:
            return json.loads(self.content)
        except ValueError as e:
            raise HttpFailureError(self.status, self.text, self.url) from e

    def raise_for_status(self) -> None:
        """
        Raise for any status >= 400.

        Raises:
            HttpFailureError: With status, body and URL
        """
        if self.status >= 400:
            raise HttpFailureError(self.status, self.text, self.url)


class HrmlessClient:
    """HTTP client for the HRMLESS API and identity provider."""

    def __init__(self, before_request: Sequence[BeforeRequest] = ()) -> None:
        self.before_request = list(before_request)

    def prepare_request(
        self, options: RequestOptionsTD, bundle: BundleTD | None = None
    ) -> RequestOptionsTD:
        """
        Run middleware and drop missing values.

        Empty header values are removed so bodyless verbs send no
        Content-Type at all.
        """
        request: RequestOptionsTD = {
            "method": options["method"],
            "url": options["url"],
            "headers": dict(options.get("headers") or {}),
            "params": dict(options.get("params") or {}),
            "body": options.get("body"),
            "form": options.get("form"),
            "remove_missing_values": options.get("remove_missing_values", False),
        }

        context: BundleTD = bundle or {"authData": {}, "inputData": {}}
        for middleware in self.before_request:
            request = middleware(request, context)

        if request.get("remove_missing_values"):
            request["params"] = remove_missing_values(request.get("params"))
            if request.get("body") is not None:
                request["body"] = remove_missing_values(request["body"])
            if request.get("form") is not None:
                request["form"] = remove_missing_values(request["form"])

        request["headers"] = {
            name: value for name, value in request["headers"].items() if value
        }
        return request

    async def request(
        self, options: RequestOptionsTD, bundle: BundleTD | None = None
    ) -> HttpResponse:
        """
        Send one request.

        Args:
            options: Method, URL, headers, params and body
            bundle: Invocation bundle, handed to middleware

        Returns:
            Buffered response; status is not checked here
        """
        request = self.prepare_request(options, bundle)

        logger.info("hrmless_api_request", method=request["method"], url=request["url"])

        response = await self._send(request)

        if not response.ok:
            logger.warning(
                "hrmless_api_error",
                method=request["method"],
                url=request["url"],
                status=response.status,
            )

        return response

    async def _send(self, request: RequestOptionsTD) -> HttpResponse:
        body = request.get("body")
        form = request.get("form")

        async with aiohttp.ClientSession() as session:
            async with session.request(
                request["method"],
                request["url"],
                headers=request["headers"],
                params=request.get("params") or None,
                json=body if body else None,
                data=form if form else None,
            ) as response:
                content = await response.read()
                return HttpResponse(
                    response.status,
                    content,
                    dict(response.headers),
                    str(response.url),
                )


# Module-level singleton
hrmless_client = HrmlessClient(before_request=[include_bearer_token])
