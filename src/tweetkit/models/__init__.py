"""SDK response models."""

from tweetkit.models.base import TweetkitModel
from tweetkit.models.enums import TweetField, UserExpansion, UserField
from tweetkit.models.envelopes import (
    DataEnvelope,
    DataIncludesEnvelope,
    DataIncludesMetaEnvelope,
)
from tweetkit.models.errors import APIErrorDetail
from tweetkit.models.tweets import ReferencedTweet, Tweet, TweetPublicMetrics
from tweetkit.models.users import (
    BlockResponse,
    Meta,
    User,
    UserIncludes,
    UserPublicMetrics,
)

__all__ = [
    "TweetkitModel",
    "APIErrorDetail",
    # enums
    "TweetField",
    "UserExpansion",
    "UserField",
    # envelopes
    "DataEnvelope",
    "DataIncludesEnvelope",
    "DataIncludesMetaEnvelope",
    # tweets
    "ReferencedTweet",
    "Tweet",
    "TweetPublicMetrics",
    # users
    "BlockResponse",
    "Meta",
    "User",
    "UserIncludes",
    "UserPublicMetrics",
]
