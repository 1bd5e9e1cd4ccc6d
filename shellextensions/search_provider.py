"""Searches the extensions website."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

import requests

from .request_handler import EXTENSIONS_URL, RequestHandler
from .search_result import SearchResult

log = logging.getLogger(__name__)

DEFAULT_SHELL_VERSION = "42"


class SearchSort(IntEnum):
    """Ordering of search results."""

    RELEVANCE = 0
    DOWNLOADS = 1
    RECENT = 2
    NAME = 3


_SORT_STRINGS = {
    SearchSort.DOWNLOADS: "downloads",
    SearchSort.RECENT: "created",
    SearchSort.NAME: "name",
    SearchSort.RELEVANCE: "relevance",
}


def sort_string(sort_type: Any) -> str:
    """Return the query parameter value for `sort_type`; unknown sorts mean relevance."""
    try:
        return _SORT_STRINGS[SearchSort(sort_type)]
    except ValueError:
        return _SORT_STRINGS[SearchSort.RELEVANCE]


@dataclass(frozen=True)
class SearchPage:
    """One page of search results and the total number of pages."""

    results: list[SearchResult] = field(default_factory=list)
    num_pages: int = 0


class SearchProvider(RequestHandler):
    """Runs extension queries, optionally restricted to one shell version."""

    def __init__(
        self,
        shell_version: str = DEFAULT_SHELL_VERSION,
        show_unsupported: bool = False,
        session: requests.Session | None = None,
    ) -> None:
        super().__init__(session)
        self.shell_version = shell_version
        self.show_unsupported = show_unsupported

    def query(
        self, query: str, page: int = 1, sort_type: SearchSort = SearchSort.RELEVANCE
    ) -> SearchPage:
        """Return page `page` of the results for `query` in the order `sort_type`."""
        sort = sort_string(sort_type)
        base = f"{EXTENSIONS_URL}extension-query/?search={query}&sort={sort}"
        if self.show_unsupported:
            url = f"{base}&page={int(page)}"
        else:
            url = f"{base}&shell_version={self.shell_version}&page={int(page)}"
        return self.request(url)

    def handle_response(self, content: bytes) -> SearchPage:
        """Decode a JSON object holding ``extensions`` and ``numpages``."""
        root = json.loads(content)
        if not isinstance(root, dict):
            raise ValueError("search response must be a JSON object")
        for member in ("extensions", "numpages"):
            if member not in root:
                raise ValueError(f"search response lacks member {member!r}")

        extensions = root["extensions"]
        if not isinstance(extensions, list):
            raise ValueError("search response member 'extensions' must be an array")

        num_pages = int(root["numpages"] or 0)
        log.info("Num Pages: %d", num_pages)

        return SearchPage(
            results=[SearchResult.from_json(item) for item in extensions],
            num_pages=num_pages,
        )