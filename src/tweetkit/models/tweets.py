from datetime import datetime
from typing import Any

from tweetkit.models.base import TweetkitModel


class TweetPublicMetrics(TweetkitModel):
    retweet_count: int = 0
    reply_count: int = 0
    like_count: int = 0
    quote_count: int = 0


class ReferencedTweet(TweetkitModel):
    type: str
    id: str


class Tweet(TweetkitModel):
    id: str
    text: str
    author_id: str | None = None
    conversation_id: str | None = None
    created_at: datetime | None = None
    in_reply_to_user_id: str | None = None
    lang: str | None = None
    possibly_sensitive: bool | None = None
    reply_settings: str | None = None
    source: str | None = None
    public_metrics: TweetPublicMetrics | None = None
    referenced_tweets: list[ReferencedTweet] | None = None
    attachments: dict[str, Any] | None = None
    entities: dict[str, Any] | None = None
    geo: dict[str, Any] | None = None
    withheld: dict[str, Any] | None = None
