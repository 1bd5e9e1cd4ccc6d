"""An extension record as returned by the extensions website."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .shell_version_map import ShellVersionMap

_MAX_INT = 2**31 - 1
_STRING_FIELDS = (
    "uuid",
    "name",
    "creator",
    "icon",
    "screenshot",
    "url",
    "link",
    "description",
)


def _string(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _bounded_int(value: Any, default: int) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    number = int(value)
    return number if 0 <= number <= _MAX_INT else default


@dataclass(frozen=True)
class SearchResult:
    """Metadata of one extension."""

    uuid: str | None = None
    name: str | None = None
    creator: str | None = None
    icon: str | None = None
    screenshot: str | None = None
    url: str | None = None
    donation_urls: tuple[str, ...] = ()
    link: str | None = None
    description: str | None = None
    pk: int = 0
    downloads: int = 0
    shell_version_map: ShellVersionMap | None = field(default=None, compare=False)

    @classmethod
    def from_json(cls, data: Any) -> SearchResult:
        """Build a result from a decoded JSON object; unknown members are ignored."""
        if not isinstance(data, Mapping):
            raise ValueError("search result must be a JSON object")

        values: dict[str, Any] = {
            name: _string(data[name]) for name in _STRING_FIELDS if name in data
        }

        donation_urls = data.get("donation_urls")
        if isinstance(donation_urls, list):
            values["donation_urls"] = tuple(
                url for url in donation_urls if isinstance(url, str)
            )

        values["pk"] = _bounded_int(data.get("pk"), 0)
        values["downloads"] = _bounded_int(data.get("downloads"), 0)

        version_map = data.get("shell_version_map")
        if version_map is not None:
            values["shell_version_map"] = ShellVersionMap.from_json(version_map)

        return cls(**values)

    def supports_shell_version(self, shell_version: str) -> bool:
        """Whether this extension has a release for `shell_version`."""
        if shell_version is None:
            raise ValueError("shell_version must not be None")
        if self.shell_version_map is None:
            return False
        return self.shell_version_map.supports(shell_version)