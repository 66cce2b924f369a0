"""Async iterator for token-based pagination."""

from __future__ import annotations

from typing import Any, AsyncIterator, Sequence, TypeVar

from tweetkit.http import HTTPClient
from tweetkit.models.envelopes import DataIncludesMetaEnvelope
from tweetkit.query import validate_max_results
from tweetkit.routes import Route

T = TypeVar("T")


class PaginatedIterator(AsyncIterator[T]):
    """Yields items across paginated API responses.

    Each page is decoded into ``shape`` (a ``DataIncludesMetaEnvelope`` whose
    ``data`` is a list); ``meta.next_token`` is sent back as
    ``pagination_token`` until the server stops returning one.
    """

    def __init__(
        self,
        http: HTTPClient,
        route: Route,
        shape: type[DataIncludesMetaEnvelope[list[T], Any, Any]],
        *,
        params: Sequence[tuple[str, str]] | None = None,
        max_results: int = 100,
        pagination_token: str | None = None,
    ) -> None:
        self._http = http
        self._route = route
        self._shape = shape
        self._params = [(k, v) for k, v in (params or ()) if k not in ("max_results", "pagination_token")]
        self._max_results = validate_max_results(max_results)
        self._buffer: list[T] = []
        self._cursor: str | None = pagination_token
        self._exhausted = False
        self.pages = 0

    def __aiter__(self) -> AsyncIterator[T]:
        return self

    async def __anext__(self) -> T:
        if self._buffer:
            return self._buffer.pop(0)
        if self._exhausted:
            raise StopAsyncIteration
        await self._fetch_page()
        if not self._buffer:
            raise StopAsyncIteration
        return self._buffer.pop(0)

    async def _fetch_page(self) -> None:
        params = [("max_results", str(self._max_results))]
        if self._cursor:
            params.append(("pagination_token", self._cursor))
        params.extend(self._params)
        page = await self._http.call(self._route, self._shape, params=params)
        self.pages += 1
        self._buffer = list(page.data)
        self._cursor = page.meta.next_token if page.meta else None
        if not self._cursor or not self._buffer:
            self._exhausted = True

    async def flatten(self) -> list[T]:
        """Consume the full iterator into a list."""
        result: list[T] = []
        async for item in self:
            result.append(item)
        return result
