"""tweetkit: typed async client for the Twitter API v2 blocks endpoints."""

from tweetkit.client import Client
from tweetkit.errors import (
    DecodingError,
    ErrorKind,
    MalformedRouteError,
    RangeOutOfBoundsError,
    TweetkitError,
    TwitterAPIError,
)

__all__ = [
    "Client",
    "DecodingError",
    "ErrorKind",
    "MalformedRouteError",
    "RangeOutOfBoundsError",
    "TweetkitError",
    "TwitterAPIError",
]
