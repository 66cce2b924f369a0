"""Blocks API methods."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from tweetkit.models.enums import TweetField, UserExpansion, UserField
from tweetkit.models.envelopes import DataEnvelope, DataIncludesMetaEnvelope
from tweetkit.models.users import BlockResponse, Meta, User, UserIncludes
from tweetkit.pagination import PaginatedIterator
from tweetkit.query import block_body, build_query
from tweetkit.routes import Endpoint, Route, validate_identifier

if TYPE_CHECKING:
    from tweetkit.http import HTTPClient

BlockedUsersPage = DataIncludesMetaEnvelope[list[User], UserIncludes, Meta]
BlockStatus = DataEnvelope[BlockResponse]


class BlocksAPI:
    def __init__(self, http: HTTPClient) -> None:
        self._http = http

    async def get_blocked_users(
        self,
        user_id: str,
        *,
        user_fields: Iterable[UserField | str] = (),
        expansions: Iterable[UserExpansion | str] = (),
        tweet_fields: Iterable[TweetField | str] = (),
        pagination_token: str | None = None,
        max_results: int = 100,
    ) -> BlockedUsersPage:
        """List the users blocked by ``user_id``.

        ``GET /2/users/:id/blocking``. Pinned tweets requested through
        ``expansions`` land in ``includes.tweets``; pass ``meta.next_token``
        back as ``pagination_token`` to fetch the next page.
        """
        params = build_query(
            user_fields=user_fields,
            tweet_fields=tweet_fields,
            expansions=expansions,
            pagination_token=pagination_token,
            max_results=max_results,
        )
        return await self._http.call(Route.blocking(user_id), BlockedUsersPage, params=params)

    def iter_blocked_users(
        self,
        user_id: str,
        *,
        user_fields: Iterable[UserField | str] = (),
        expansions: Iterable[UserExpansion | str] = (),
        tweet_fields: Iterable[TweetField | str] = (),
        max_results: int = 100,
    ) -> PaginatedIterator[User]:
        params = build_query(
            user_fields=user_fields, tweet_fields=tweet_fields, expansions=expansions
        )
        return PaginatedIterator(
            self._http,
            Route.blocking(user_id),
            BlockedUsersPage,
            params=params,
            max_results=max_results,
        )

    async def block_user(self, source_user_id: str, target_user_id: str) -> BlockStatus:
        """Block ``target_user_id`` on behalf of the authenticated ``source_user_id``.

        ``POST /2/users/:id/blocking``.
        """
        target = validate_identifier(Endpoint.blocking.value, "target_user_id", target_user_id)
        return await self._http.call(
            Route.blocking(source_user_id),
            BlockStatus,
            method="POST",
            content=block_body(target),
        )

    async def unblock_user(self, source_user_id: str, target_user_id: str) -> BlockStatus:
        """``DELETE /2/users/:source_user_id/blocking/:target_user_id``."""
        return await self._http.call(
            Route.delete_block(source_user_id, target_user_id),
            BlockStatus,
            method="DELETE",
        )
