"""Mapping of shell versions to the extension releases that support them."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any


def _split_version(shell_version: str) -> tuple[str, str | None]:
    major, _, minor = shell_version.partition(".")
    return major, (minor if "." in shell_version else None)


@dataclass(frozen=True)
class MapEntry:
    """One shell version and the extension release published for it."""

    shell_major_version: str
    shell_minor_version: str | None
    extension_package: int
    extension_version: float


@dataclass
class ShellVersionMap:
    """Ordered collection of shell version entries for one extension."""

    entries: list[MapEntry] = field(default_factory=list)

    def __iter__(self) -> Iterator[MapEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def add(self, shell_version: str, package: int, version: float) -> None:
        """Record that `package` at `version` supports `shell_version`."""
        major, minor = _split_version(shell_version)
        self.entries.append(MapEntry(major, minor, package, version))

    def supports(self, shell_version: str) -> bool:
        """Whether any entry supports `shell_version`.

        The major versions must match; the queried minor version must be
        equal to, or more specific than, the minor version of the entry.
        An empty map supports nothing.
        """
        if not self.entries:
            return False

        major, minor = _split_version(shell_version)
        for entry in self.entries:
            if entry.shell_major_version != major:
                continue
            if entry.shell_minor_version is None:
                return True
            if minor is not None and minor.startswith(entry.shell_minor_version):
                return True
        return False

    @classmethod
    def from_json(cls, data: Any) -> ShellVersionMap:
        """Build a map from a decoded JSON object of version -> {pk, version}."""
        if not isinstance(data, Mapping):
            raise ValueError("shell version map must be a JSON object")

        version_map = cls()
        for shell_version, info in data.items():
            if not isinstance(info, Mapping):
                raise ValueError(
                    f"entry for shell version {shell_version!r} must be a JSON object"
                )
            version_map.add(
                str(shell_version),
                int(info.get("pk", 0) or 0),
                float(info.get("version", 0.0) or 0.0),
            )
        return version_map