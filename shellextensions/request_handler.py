"""Base class for fetching and decoding resources from the extensions website."""

from __future__ import annotations

import logging
from typing import Any

import requests

log = logging.getLogger(__name__)

EXTENSIONS_URL = "https://extensions.gnome.org/"
REQUEST_TIMEOUT = 30

_CLIENT_ERROR_MESSAGE = "Check your network status and try again"
_SERVER_ERROR_MESSAGE = "Check GNOME infrastructure status and try again later"


class RequestError(Exception):
    """A request failed; `status_code` is set when the server answered."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class RequestHandler:
    """Performs GET requests and hands the body to `handle_response`."""

    def __init__(self, session: requests.Session | None = None) -> None:
        self.session = session if session is not None else requests.Session()

    def request(self, url: str) -> Any:
        """Fetch `url` and return what `handle_response` makes of the body."""
        try:
            response = self.session.get(url, timeout=REQUEST_TIMEOUT)
        except (
            requests.exceptions.MissingSchema,
            requests.exceptions.InvalidSchema,
            requests.exceptions.InvalidURL,
        ) as exc:
            raise RequestError(f"Could not construct message for uri: {url}") from exc
        except requests.RequestException as exc:
            raise RequestError(str(exc)) from exc

        status = response.status_code
        if status >= 400:
            message = _SERVER_ERROR_MESSAGE if status >= 500 else _CLIENT_ERROR_MESSAGE
            raise RequestError(message, status)

        return self.handle_response(response.content)

    def handle_response(self, content: bytes) -> Any:
        """Decode a response body; subclasses override this."""
        log.warning(
            "handle_response is not overridden for %s; nothing will happen",
            type(self).__name__,
        )
        return None