"""A user comment on an extension, as returned by the extensions website."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

_MIN_RATING = -1
_MAX_RATING = 5


def _string(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _nested_string(data: Mapping[str, Any], name: str, member: str) -> str | None:
    node = data[name]
    if not isinstance(node, Mapping):
        raise ValueError(f"comment member {name!r} must be a JSON object")
    return _string(node.get(member))


def _rating(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return _MIN_RATING
    number = int(value)
    return number if _MIN_RATING <= number <= _MAX_RATING else _MIN_RATING


@dataclass(frozen=True)
class Comment:
    """One comment; a rating of -1 means the comment carries no rating."""

    is_extension_creator: bool = False
    comment: str | None = None
    author: str | None = None
    rating: int = _MIN_RATING
    date: str | None = None

    @classmethod
    def from_json(cls, data: Any) -> Comment:
        """Build a comment from a decoded JSON object.

        The author is read from ``author.username`` and the date from
        ``date.timestamp``; unknown members are ignored.
        """
        if not isinstance(data, Mapping):
            raise ValueError("comment must be a JSON object")

        values: dict[str, Any] = {}
        if "is_extension_creator" in data:
            values["is_extension_creator"] = bool(data["is_extension_creator"])
        if "comment" in data:
            values["comment"] = _string(data["comment"])
        if "author" in data:
            values["author"] = _nested_string(data, "author", "username")
        if "rating" in data:
            values["rating"] = _rating(data["rating"])
        if "date" in data:
            values["date"] = _nested_string(data, "date", "timestamp")
        return cls(**values)