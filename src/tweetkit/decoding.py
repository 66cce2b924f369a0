"""Turns raw response bytes into a typed envelope or a typed error."""

from __future__ import annotations

import json
import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from tweetkit.errors import DecodingError, TwitterAPIError
from tweetkit.models.errors import APIErrorDetail

log = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

# Keys of the problem-details shape the API uses for auth and transport-level rejections
_PROBLEM_KEYS = ("title", "detail", "type")


def _api_errors(body: dict[str, Any], content: bytes, status: int | None) -> list[APIErrorDetail] | None:
    """Return the structured error list if ``body`` is an error payload, else None."""
    if "data" in body:
        return None
    if "errors" in body:
        raw = body["errors"]
        if not isinstance(raw, list) or not raw or not all(isinstance(e, dict) for e in raw):
            raise DecodingError(
                "error payload has a malformed 'errors' list", content=content, status=status
            )
        try:
            return [APIErrorDetail.model_validate(e) for e in raw]
        except ValidationError as exc:
            raise DecodingError(
                f"error payload could not be decoded: {exc}", content=content, status=status
            ) from exc
    if any(k in body for k in _PROBLEM_KEYS):
        try:
            return [APIErrorDetail.model_validate(body)]
        except ValidationError as exc:
            raise DecodingError(
                f"problem payload could not be decoded: {exc}", content=content, status=status
            ) from exc
    return None


def decode_response(content: bytes, shape: type[T], *, status: int | None = None) -> T:
    """Decode ``content`` into ``shape``.

    Raises :class:`TwitterAPIError` when the body is an API error payload and
    :class:`DecodingError` when it matches neither that nor ``shape``.
    """
    try:
        body = json.loads(content)
    except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as exc:
        log.debug("Undecodable response body (status=%s): %r", status, content[:200])
        raise DecodingError(
            f"response is not valid JSON: {exc}", content=content, status=status
        ) from exc

    if not isinstance(body, dict):
        raise DecodingError(
            f"expected a JSON object, got {type(body).__name__}", content=content, status=status
        )

    errors = _api_errors(body, content, status)
    if errors is not None:
        log.debug("API reported %d error(s) (status=%s)", len(errors), status)
        raise TwitterAPIError(errors, status=status)

    if status is not None and status >= 400:
        raise DecodingError(
            f"HTTP {status} with an unrecognised body", content=content, status=status
        )

    try:
        return shape.model_validate(body)
    except ValidationError as exc:
        log.debug("Response did not match %s: %s", shape.__name__, exc)
        raise DecodingError(
            f"response does not match {shape.__name__}: {exc}", content=content, status=status
        ) from exc
