from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import requests
from requests import Response


class ProviderError(RuntimeError):
    """A weather lookup failed while fetching or reading the provider document."""

    def __init__(self, message: str, *, query: Optional[str] = None) -> None:
        super().__init__(message)
        self.query = query

    def for_query(self, query: str) -> "ProviderError":
        """Return an error of the same kind describing the failed lookup."""
        return self.__class__(f"Failed to get weather for {query}: {self}", query=query)


class NetworkError(ProviderError):
    """Raised when the provider cannot be reached or reports a server failure."""


class ParseError(ProviderError):
    """Raised when the provider response body is not valid JSON."""


class MalformedPayloadError(ProviderError):
    """Raised when valid JSON lacks the entries the normalizer relies on."""


@dataclass
class RequestConfig:
    timeout: float = 10.0
    user_agent: str = "curl/7.68.0"
    verify_ssl: bool = True


class WeatherProvider:
    """Base class that issues single-attempt HTTP requests for providers."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self.request_config = request_config or RequestConfig()
        self.session = session
        self._log = logging.getLogger(self.__class__.__name__)
        if not self.request_config.verify_ssl:
            self._log.warning("TLS certificate validation is disabled for %s", self.__class__.__name__)

    def _handle_response(self, response: Response) -> Response:
        if response.status_code >= 400:
            self._log.warning("Provider returned %s: %s", response.status_code, response.text[:200])
        return response

    def _request(self, method: str, url: str, **kwargs: Any) -> Response:
        http = self.session or requests
        headers = {"User-Agent": self.request_config.user_agent}
        headers.update(kwargs.pop("headers", None) or {})
        try:
            response = http.request(
                method,
                url,
                headers=headers,
                timeout=self.request_config.timeout,
                verify=self.request_config.verify_ssl,
                **kwargs,
            )
        except requests.Timeout as exc:
            self._log.error("Request timed out", exc_info=exc)
            raise NetworkError(
                f"Network error: request timed out after {self.request_config.timeout}s"
            ) from exc
        except requests.RequestException as exc:
            self._log.error("Request failed", exc_info=exc)
            raise NetworkError(f"Network error: {exc}") from exc
        return self._handle_response(response)

    def _json(self, response: Response) -> Any:
        # An unparseable body is a parse failure whatever the status code.
        try:
            data = response.json()
        except ValueError as exc:
            self._log.error("Failed to decode JSON", exc_info=exc)
            raise ParseError(f"Failed to parse weather data: {exc}") from exc
        if response.status_code >= 500:
            raise NetworkError(f"Network error: provider returned HTTP {response.status_code}")
        return data


__all__ = [
    "WeatherProvider",
    "ProviderError",
    "NetworkError",
    "ParseError",
    "MalformedPayloadError",
    "RequestConfig",
]
