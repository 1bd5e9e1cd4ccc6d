"""Fetches the comments posted on an extension."""

from __future__ import annotations

import json

from .comment import Comment
from .request_handler import EXTENSIONS_URL, RequestHandler


class CommentProvider(RequestHandler):
    """Retrieves comments from the extensions website."""

    def get_comments(self, extension_id: int, retrieve_all: bool = False) -> list[Comment]:
        """Return the comments of the extension with package id `extension_id`."""
        all_str = "true" if retrieve_all else "false"
        url = f"{EXTENSIONS_URL}comments/all/?pk={int(extension_id)}&all={all_str}"
        return self.request(url)

    def handle_response(self, content: bytes) -> list[Comment]:
        """Decode a JSON array of comment objects."""
        root = json.loads(content)
        if not isinstance(root, list):
            raise ValueError("comment response must be a JSON array")
        return [Comment.from_json(item) for item in root]