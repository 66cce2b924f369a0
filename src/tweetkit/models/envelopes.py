"""Generic response envelopes shared by every endpoint."""

from typing import Generic, TypeVar

from tweetkit.models.base import TweetkitModel

T = TypeVar("T")
I = TypeVar("I")  # noqa: E741
M = TypeVar("M")


class DataEnvelope(TweetkitModel, Generic[T]):
    data: T


class DataIncludesEnvelope(TweetkitModel, Generic[T, I]):
    data: T
    includes: I | None = None


class DataIncludesMetaEnvelope(TweetkitModel, Generic[T, I, M]):
    data: T
    includes: I | None = None
    meta: M | None = None
