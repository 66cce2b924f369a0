from typing import Any

from tweetkit.models.base import TweetkitModel


class APIErrorDetail(TweetkitModel):
    """One entry of an API-reported error list.

    The remote schema varies between endpoints, so every field is optional.
    """

    code: int | None = None
    message: str | None = None
    title: str | None = None
    detail: str | None = None
    type: str | None = None
    status: int | None = None
    parameter: str | None = None
    parameters: dict[str, Any] | None = None
    value: Any = None
    resource_type: str | None = None
    resource_id: str | None = None
    section: str | None = None

    @property
    def description(self) -> str:
        return self.message or self.detail or self.title or "unknown error"
