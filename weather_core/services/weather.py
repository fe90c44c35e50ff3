from __future__ import annotations

import logging
from typing import Any, Optional, Union

from ..entities import DetailLevel, NormalizedWeather
from ..normalizer import normalize
from ..providers.base import ProviderError


class WeatherService:
    """Fetch-then-normalize pipeline shared by every adapter.

    Holds no per-request state: each call performs one provider round trip
    and returns a fresh value object.
    """

    def __init__(
        self,
        *,
        provider: Any,
        detail: Union[DetailLevel, str, None] = DetailLevel.FULL,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.provider = provider
        self.detail = DetailLevel.parse(detail)
        self._log = logger or logging.getLogger(self.__class__.__name__)

    # Public API ---------------------------------------------------------
    def get_weather(
        self,
        city: str,
        detail: Union[DetailLevel, str, None] = None,
    ) -> NormalizedWeather:
        level = DetailLevel.parse(detail) if detail is not None else self.detail
        if not isinstance(city, str) or not city:
            raise ValueError("City name is required")
        try:
            payload = self.provider.fetch(city)
            return normalize(payload, level)
        except ProviderError as exc:
            error = exc.for_query(city)
            self._log.warning("Weather lookup failed: %s", error)
            raise error from exc


__all__ = ["WeatherService"]
