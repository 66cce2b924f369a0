"""HTTP client wrapping httpx with auth headers and typed decoding."""

from __future__ import annotations

import logging
from typing import Any, Sequence, TypeVar

import httpx
from pydantic import BaseModel

from tweetkit.decoding import decode_response
from tweetkit.errors import TwitterAPIError
from tweetkit.routes import Route

log = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.twitter.com"

T = TypeVar("T", bound=BaseModel)


class HTTPClient:
    """Async HTTP client for the Twitter v2 REST API."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        token: str | None = None,
        *,
        timeout: float = 30.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._token = token
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
        )

    @property
    def token(self) -> str | None:
        return self._token

    @token.setter
    def token(self, value: str | None) -> None:
        self._token = value

    def _headers(self) -> dict[str, str]:
        h: dict[str, str] = {}
        if self._token:
            h["Authorization"] = f"Bearer {self._token}"
        return h

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Sequence[tuple[str, str]] | None = None,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Make a single API request. Transport errors propagate unchanged."""
        merged_headers = self._headers()
        if content is not None:
            merged_headers["Content-Type"] = "application/json"
        if headers:
            merged_headers.update(headers)

        response = await self._client.request(
            method,
            path,
            params=list(params) if params else None,
            content=content,
            headers=merged_headers,
        )
        log.debug("%s %s -> %d", method, path, response.status_code)
        return response

    async def call(
        self,
        route: Route,
        shape: type[T],
        *,
        method: str = "GET",
        params: Sequence[tuple[str, str]] | None = None,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> T:
        """Resolve ``route``, perform the request and decode the body into ``shape``."""
        path = route.resolve()
        response = await self.request(
            method, path, params=params, content=content, headers=headers
        )
        try:
            return decode_response(response.content, shape, status=response.status_code)
        except TwitterAPIError as exc:
            exc.response = response
            raise

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> HTTPClient:
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()
