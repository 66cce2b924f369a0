"""High-level client composing the HTTP layer and API groups."""

from __future__ import annotations

from typing import Any

from tweetkit.http import DEFAULT_BASE_URL, HTTPClient


class Client:
    """Top-level SDK client.

    Usage::

        async with Client(bearer_token="...") as client:
            page = await client.blocks.get_blocked_users("12", max_results=50)
            await client.blocks.block_user("12", "34")
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        bearer_token: str | None = None,
        *,
        timeout: float = 30.0,
    ) -> None:
        self.http = HTTPClient(base_url, bearer_token, timeout=timeout)
        self._blocks: Any = None

    @property
    def blocks(self) -> Any:
        if self._blocks is None:
            from tweetkit.api.blocks import BlocksAPI
            self._blocks = BlocksAPI(self.http)
        return self._blocks

    async def close(self) -> None:
        await self.http.close()

    async def __aenter__(self) -> Client:
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()
