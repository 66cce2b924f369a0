from datetime import datetime
from typing import Any

from tweetkit.models.base import TweetkitModel
from tweetkit.models.tweets import Tweet


class UserPublicMetrics(TweetkitModel):
    followers_count: int = 0
    following_count: int = 0
    tweet_count: int = 0
    listed_count: int = 0


class User(TweetkitModel):
    id: str
    name: str
    username: str
    created_at: datetime | None = None
    description: str | None = None
    location: str | None = None
    pinned_tweet_id: str | None = None
    profile_image_url: str | None = None
    protected: bool | None = None
    url: str | None = None
    verified: bool | None = None
    public_metrics: UserPublicMetrics | None = None
    entities: dict[str, Any] | None = None
    withheld: dict[str, Any] | None = None


class UserIncludes(TweetkitModel):
    """Entities expanded alongside users, e.g. pinned tweets."""

    tweets: list[Tweet] = []


class Meta(TweetkitModel):
    result_count: int | None = None
    next_token: str | None = None
    previous_token: str | None = None


class BlockResponse(TweetkitModel):
    blocking: bool
