"""Logical operations and their path templates."""

from __future__ import annotations

import re
import string
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

from tweetkit.errors import MalformedRouteError

_IDENTIFIER = re.compile(r"^[A-Za-z0-9_-]+$")


class Endpoint(str, Enum):
    blocking = "blocking"
    delete_block = "delete_block"


_TEMPLATES: dict[Endpoint, str] = {
    Endpoint.blocking: "/2/users/{id}/blocking",
    Endpoint.delete_block: "/2/users/{source_user_id}/blocking/{target_user_id}",
}


def _placeholders(template: str) -> list[str]:
    return [name for _, name, _, _ in string.Formatter().parse(template) if name]


def validate_identifier(endpoint: str, parameter: str, value: Any) -> str:
    """Return ``value`` if it is a usable user identifier, else raise MalformedRouteError."""
    if not isinstance(value, str):
        raise MalformedRouteError(endpoint, parameter, value, "must be a string")
    if not value:
        raise MalformedRouteError(endpoint, parameter, value, "is empty")
    if not _IDENTIFIER.match(value):
        raise MalformedRouteError(endpoint, parameter, value, "is not a valid identifier")
    return value


@dataclass(frozen=True)
class Route:
    """An endpoint plus the path parameters needed to address it."""

    endpoint: Endpoint
    params: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    def __hash__(self) -> int:
        return hash((self.endpoint, tuple(sorted(self.params.items()))))

    @classmethod
    def blocking(cls, user_id: str) -> Route:
        return cls(Endpoint.blocking, {"id": user_id})

    @classmethod
    def delete_block(cls, source_user_id: str, target_user_id: str) -> Route:
        return cls(
            Endpoint.delete_block,
            {"source_user_id": source_user_id, "target_user_id": target_user_id},
        )

    @property
    def template(self) -> str:
        return _TEMPLATES[self.endpoint]

    def resolve(self) -> str:
        """Substitute every placeholder, validating each identifier first."""
        values: dict[str, str] = {}
        for name in _placeholders(self.template):
            if name not in self.params:
                raise MalformedRouteError(self.endpoint.value, name, None, "is missing")
            values[name] = validate_identifier(self.endpoint.value, name, self.params[name])
        return self.template.format(**values)
