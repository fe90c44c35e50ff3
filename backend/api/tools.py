"""Tool-invocation surface: catalog, dispatcher and text rendering.

``call_tool`` is the transport-agnostic handler a tool server plugs into: it
takes a tool name plus an arguments mapping and always answers with a
:class:`ToolResult`, never an exception, so a failing lookup reaches the caller
as an error result carrying the diagnostic.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional

from backend.api.services import get_weather_service
from weather_core.entities import NormalizedWeather
from weather_core.providers.base import ProviderError
from weather_core.services.weather import WeatherService

logger = logging.getLogger(__name__)

GET_WEATHER = "get_weather"

TOOL_DEFINITIONS: List[Dict[str, Any]] = [
    {
        "name": GET_WEATHER,
        "description": "Get current weather and forecast for a specific city",
        "inputSchema": {
            "type": "object",
            "properties": {
                "city": {
                    "type": "string",
                    "description": 'City name (e.g., "New York", "London", "Tokyo")',
                },
            },
            "required": ["city"],
        },
    },
]


@dataclass
class ToolResult:
    content: List[Dict[str, str]] = field(default_factory=list)
    structured_content: Optional[Dict[str, Any]] = None
    is_error: bool = False

    @classmethod
    def error(cls, message: str) -> "ToolResult":
        return cls(content=[{"type": "text", "text": message}], is_error=True)

    def as_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"content": list(self.content), "isError": self.is_error}
        if self.structured_content is not None:
            payload["structuredContent"] = self.structured_content
        return payload


def list_tools() -> List[Dict[str, Any]]:
    return [dict(tool) for tool in TOOL_DEFINITIONS]


def rest_tool_catalog() -> List[Dict[str, Any]]:
    """Describe the tools as REST operations for ``GET /api/tools``."""
    return [
        {
            "name": GET_WEATHER,
            "description": "Get weather for a city",
            "method": "GET",
            "endpoint": "/api/weather/:city",
            "parameters": {
                "city": {"type": "string", "description": "City name", "required": True},
            },
        }
    ]


def call_tool(
    name: str,
    arguments: Optional[Mapping[str, Any]] = None,
    *,
    service: Optional[WeatherService] = None,
) -> ToolResult:
    handler = _HANDLERS.get(name)
    if handler is None:
        return ToolResult.error(f"Unknown tool: {name}")
    return handler(dict(arguments or {}), service or get_weather_service())


def format_weather_report(weather: NormalizedWeather) -> str:
    location = weather.location
    current = weather.current
    lines = [
        f"Weather for {location.city}, {location.country}:",
        "",
        f"Current Temperature: {current.temperature_c}°C ({current.temperature_f}°F)",
    ]
    if current.feels_like_c is not None:
        lines.append(f"Feels Like: {current.feels_like_c}°C ({current.feels_like_f}°F)")
    lines.append(f"Condition: {current.condition}")
    lines.append(f"Humidity: {current.humidity_pct}%")
    if current.wind_speed_mph is not None:
        lines.append(f"Wind: {current.wind_speed_kmh} km/h ({current.wind_speed_mph} mph)")
    else:
        lines.append(f"Wind: {current.wind_speed_kmh} km/h")
    if current.wind_direction_deg is not None:
        lines.append(f"Wind Direction: {current.wind_direction_deg}°")
    if current.pressure is not None:
        lines.append(f"Pressure: {current.pressure} hPa")
    if current.visibility is not None:
        lines.append(f"Visibility: {current.visibility} km")
    if current.uv_index is not None:
        lines.append(f"UV Index: {current.uv_index}")
    if weather.forecast:
        lines.extend(["", f"{len(weather.forecast)}-Day Forecast:"])
        for day in weather.forecast:
            lines.append(
                f"{day.date}: {day.min_temp_c}°C - {day.max_temp_c}°C "
                f"({day.min_temp_f}°F - {day.max_temp_f}°F) - {day.condition}"
            )
    lines.extend(["", "Raw Data:", json.dumps(weather.to_dict(), indent=2, ensure_ascii=False)])
    return "\n".join(lines)


# handlers -----------------------------------------------------------
def _get_weather(arguments: Dict[str, Any], service: WeatherService) -> ToolResult:
    city = arguments.get("city")
    if not isinstance(city, str) or not city:
        return ToolResult.error("City name is required")
    try:
        weather = service.get_weather(city)
    except ProviderError as exc:
        logger.info("Tool %s failed for %s", GET_WEATHER, city)
        return ToolResult.error(str(exc))
    return ToolResult(
        content=[{"type": "text", "text": format_weather_report(weather)}],
        structured_content=weather.to_dict(),
    )


_HANDLERS: Dict[str, Callable[[Dict[str, Any], WeatherService], ToolResult]] = {
    GET_WEATHER: _get_weather,
}


__all__ = [
    "GET_WEATHER",
    "TOOL_DEFINITIONS",
    "ToolResult",
    "call_tool",
    "format_weather_report",
    "list_tools",
    "rest_tool_catalog",
]
