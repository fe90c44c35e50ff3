from __future__ import annotations

from typing import Any, Optional
from urllib.parse import quote

from .base import WeatherProvider

# Kept literal on top of the unreserved set quote() already leaves alone.
_QUERY_SAFE = "!*'()"


def build_path(query: str) -> str:
    if not isinstance(query, str) or not query:
        raise ValueError("query must be a non-empty string")
    return quote(query, safe=_QUERY_SAFE)


class WttrProvider(WeatherProvider):
    """Client for the wttr.in JSON (``format=j1``) endpoint."""

    name = "wttr"
    base_url = "https://wttr.in"

    def __init__(self, base_url: Optional[str] = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.base_url = (base_url or self.base_url).rstrip("/")

    # Public API ---------------------------------------------------------
    def build_url(self, query: str) -> str:
        return f"{self.base_url}/{build_path(query)}"

    def fetch(self, query: str) -> Any:
        """Return the raw provider document for ``query``.

        Issues exactly one request; nothing is cached between calls.
        """
        url = self.build_url(query)
        response = self._request("GET", url, params={"format": "j1"})
        return self._json(response)


__all__ = ["WttrProvider", "build_path"]
