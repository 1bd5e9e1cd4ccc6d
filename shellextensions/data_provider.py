"""Fetches the metadata of a single extension by UUID."""

from __future__ import annotations

import json

from .request_handler import EXTENSIONS_URL, RequestHandler
from .search_result import SearchResult


class DataProvider(RequestHandler):
    """Retrieves extension information from the extensions website."""

    def get(self, uuid: str) -> SearchResult:
        """Return the record of the extension identified by `uuid`."""
        return self.request(f"{EXTENSIONS_URL}extension-info/?uuid={uuid}")

    def handle_response(self, content: bytes) -> SearchResult:
        """Decode a single JSON extension object."""
        root = json.loads(content)
        if not isinstance(root, dict):
            raise ValueError("extension info response must be a JSON object")
        return SearchResult.from_json(root)