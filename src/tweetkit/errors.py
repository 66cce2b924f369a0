"""SDK exception hierarchy."""

from __future__ import annotations

from enum import Enum
from typing import Any

import httpx

from tweetkit.models.errors import APIErrorDetail


class ErrorKind(str, Enum):
    range_out_of_bounds = "range_out_of_bounds"
    malformed_route = "malformed_route"
    api_error = "api_error"
    decoding_error = "decoding_error"


class TweetkitError(Exception):
    """Base class for every error raised by the SDK itself."""

    kind: ErrorKind


class RangeOutOfBoundsError(TweetkitError):
    """Raised locally when a numeric argument falls outside its allowed range."""

    kind = ErrorKind.range_out_of_bounds

    def __init__(self, *, min: int, max: int, field_name: str, actual: Any) -> None:
        self.min = min
        self.max = max
        self.field_name = field_name
        self.actual = actual
        super().__init__(f"{field_name} must be between {min} and {max}, got {actual!r}")


class MalformedRouteError(TweetkitError):
    """Raised locally when a path parameter is missing or not a valid identifier."""

    kind = ErrorKind.malformed_route

    def __init__(self, endpoint: str, parameter: str, value: Any, reason: str) -> None:
        self.endpoint = endpoint
        self.parameter = parameter
        self.value = value
        self.reason = reason
        super().__init__(f"{endpoint}: path parameter {parameter!r} {reason} (got {value!r})")


class TwitterAPIError(TweetkitError):
    """Raised when the API answers with a structured error payload."""

    kind = ErrorKind.api_error

    def __init__(
        self,
        errors: list[APIErrorDetail],
        status: int | None = None,
        response: httpx.Response | None = None,
    ) -> None:
        self.errors = errors
        self.status = status
        self.response = response
        first = errors[0] if errors else None
        code = first.code if first and first.code is not None else "UNKNOWN"
        msg = first.description if first else "no error detail"
        extra = f" (+{len(errors) - 1} more)" if len(errors) > 1 else ""
        super().__init__(f"[{status if status is not None else '?'}] {code}: {msg}{extra}")

    @property
    def code(self) -> int | None:
        return self.errors[0].code if self.errors else None

    @property
    def message(self) -> str | None:
        return self.errors[0].description if self.errors else None


class DecodingError(TweetkitError):
    """Raised when a response body matches neither the expected shape nor an error payload."""

    kind = ErrorKind.decoding_error

    def __init__(self, message: str, *, content: bytes = b"", status: int | None = None) -> None:
        self.content = content
        self.status = status
        super().__init__(message)
