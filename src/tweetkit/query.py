"""Query parameter and request body encoding."""

from __future__ import annotations

import json
from enum import Enum
from typing import Iterable, Mapping, TypeVar

from tweetkit.errors import RangeOutOfBoundsError
from tweetkit.models.enums import TweetField, UserExpansion, UserField

MAX_RESULTS_MIN = 1
MAX_RESULTS_MAX = 1000

E = TypeVar("E", bound=Enum)

QueryItems = list[tuple[str, str]]


def validate_max_results(max_results: int) -> int:
    if (
        isinstance(max_results, bool)
        or not isinstance(max_results, int)
        or not MAX_RESULTS_MIN <= max_results <= MAX_RESULTS_MAX
    ):
        raise RangeOutOfBoundsError(
            min=MAX_RESULTS_MIN,
            max=MAX_RESULTS_MAX,
            field_name="max_results",
            actual=max_results,
        )
    return max_results


def join_selection(enum_type: type[E], values: Iterable[E | str]) -> str | None:
    """Comma-join a selection set, sorted and de-duplicated.

    Returns None for an empty set so the caller can omit the parameter.
    """
    names = {enum_type(v).value for v in values}
    if not names:
        return None
    return ",".join(sorted(names))


def build_query(
    *,
    user_fields: Iterable[UserField | str] = (),
    tweet_fields: Iterable[TweetField | str] = (),
    expansions: Iterable[UserExpansion | str] = (),
    pagination_token: str | None = None,
    max_results: int | None = None,
) -> QueryItems:
    items: QueryItems = []
    if max_results is not None:
        items.append(("max_results", str(validate_max_results(max_results))))
    if pagination_token is not None:
        items.append(("pagination_token", pagination_token))

    for key, enum_type, values in (
        ("expansions", UserExpansion, expansions),
        ("tweet.fields", TweetField, tweet_fields),
        ("user.fields", UserField, user_fields),
    ):
        joined = join_selection(enum_type, values)
        if joined is not None:
            items.append((key, joined))
    return items


def encode_body(fields: Mapping[str, str]) -> bytes:
    return json.dumps(dict(fields), separators=(",", ":")).encode()


def block_body(target_user_id: str) -> bytes:
    return encode_body({"target_user_id": target_user_id})
