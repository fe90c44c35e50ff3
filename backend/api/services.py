"""Construction of the weather service from Django settings."""
from __future__ import annotations

from functools import lru_cache

from django.conf import settings

from weather_core.providers.base import RequestConfig
from weather_core.providers.wttr import WttrProvider
from weather_core.services.weather import WeatherService


@lru_cache(maxsize=1)
def get_weather_service() -> WeatherService:
    provider = WttrProvider(
        base_url=settings.WTTR_BASE_URL,
        request_config=RequestConfig(
            timeout=settings.WTTR_TIMEOUT,
            user_agent=settings.WTTR_USER_AGENT,
            verify_ssl=settings.WTTR_VERIFY_SSL,
        ),
    )
    return WeatherService(provider=provider, detail=settings.WEATHER_DETAIL)
