"""Downloads images stored on the extensions website."""

from __future__ import annotations

import threading
from urllib.parse import urljoin

import requests

from .request_handler import EXTENSIONS_URL, REQUEST_TIMEOUT, RequestError


def resolve_url(rel_path: str) -> str:
    """Resolve `rel_path` against the extensions website."""
    return urljoin(EXTENSIONS_URL, rel_path)


class ImageResolver:
    """Fetches image data by path relative to the extensions website."""

    def __init__(self, session: requests.Session | None = None) -> None:
        self.session = session if session is not None else requests.Session()
        self._lock = threading.Lock()

    def resolve(self, rel_path: str | None) -> bytes | None:
        """Return the raw image bytes at `rel_path`, or None when no path is given."""
        if rel_path is None:
            return None

        url = resolve_url(rel_path)
        try:
            with self._lock:
                response = self.session.get(url, timeout=REQUEST_TIMEOUT)
        except (
            requests.exceptions.MissingSchema,
            requests.exceptions.InvalidSchema,
            requests.exceptions.InvalidURL,
        ) as exc:
            raise RequestError(f"Could not construct message for uri: {url}") from exc
        except requests.RequestException as exc:
            raise RequestError(str(exc)) from exc

        if response.status_code >= 400:
            raise RequestError(
                f"Could not load image from {url}", response.status_code
            )
        if not response.content:
            raise RequestError(f"Empty image data from {url}", response.status_code)
        return response.content