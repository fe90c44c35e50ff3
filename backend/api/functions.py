"""AI function-calling integration for the weather lookup.

The chat loop talks to an OpenAI-compatible chat-completions endpoint, lets the
model request ``get_weather`` and feeds the JSON result back as a tool message.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional

import requests
from django.conf import settings

from backend.api.services import get_weather_service
from backend.api.tools import GET_WEATHER
from weather_core.providers.base import ProviderError
from weather_core.services.weather import WeatherService

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = "You are a helpful assistant that can get weather information."
MAX_TOOL_ROUNDS = 3

WEATHER_FUNCTION: Dict[str, Any] = {
    "name": GET_WEATHER,
    "description": "Get current weather for a city",
    "parameters": {
        "type": "object",
        "properties": {
            "city": {
                "type": "string",
                "description": "The city name",
            },
        },
        "required": ["city"],
    },
}


def execute_function_call(
    name: Optional[str],
    arguments: Optional[str],
    *,
    service: Optional[WeatherService] = None,
) -> str:
    """Run a model-requested function and return its JSON-encoded result."""
    if name != GET_WEATHER:
        return json.dumps({"error": f"Unknown function: {name}"})
    try:
        parsed = json.loads(arguments or "{}")
    except json.JSONDecodeError as exc:
        return json.dumps({"error": f"Invalid function arguments: {exc.msg}"})
    city = parsed.get("city") if isinstance(parsed, dict) else None
    if not isinstance(city, str) or not city:
        return json.dumps({"error": "City name is required"})

    logger.info("Executing %s for %s", name, city)
    try:
        weather = (service or get_weather_service()).get_weather(city)
    except ProviderError as exc:
        return json.dumps({"error": str(exc)})
    return json.dumps(weather.to_dict())


def chat_with_weather_tool(
    message: str,
    *,
    session: Optional[requests.Session] = None,
    service: Optional[WeatherService] = None,
) -> str:
    """Answer ``message``, letting the model call the weather function."""
    messages: List[Dict[str, Any]] = [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": message},
    ]
    for _ in range(MAX_TOOL_ROUNDS + 1):
        reply = _complete(messages, session=session)
        tool_calls = reply.get("tool_calls") or []
        if not tool_calls:
            return (reply.get("content") or "").strip()
        messages.append(reply)
        for call in tool_calls:
            function = call.get("function") or {}
            result = execute_function_call(function.get("name"), function.get("arguments"), service=service)
            messages.append({"role": "tool", "tool_call_id": call.get("id"), "content": result})
    raise RuntimeError("Assistant kept requesting functions without answering")


def _complete(messages: List[Dict[str, Any]], *, session: Optional[requests.Session]) -> Dict[str, Any]:
    api_key = settings.OPENAI_API_KEY
    if not api_key:
        raise RuntimeError("OpenAI credentials are not configured")

    headers = {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }
    payload = {
        "model": settings.OPENAI_MODEL,
        "messages": messages,
        "tools": [{"type": "function", "function": WEATHER_FUNCTION}],
        "tool_choice": "auto",
    }

    http = session or requests
    response = http.post(settings.OPENAI_API_URL, headers=headers, json=payload, timeout=settings.OPENAI_TIMEOUT)
    response.raise_for_status()
    data = response.json()
    try:
        reply = data["choices"][0]["message"]
    except (KeyError, IndexError, TypeError) as exc:
        raise RuntimeError("Unexpected chat completion response structure") from exc
    if not isinstance(reply, dict):
        raise RuntimeError("Unexpected chat completion response structure")
    return reply


__all__ = [
    "MAX_TOOL_ROUNDS",
    "SYSTEM_PROMPT",
    "WEATHER_FUNCTION",
    "chat_with_weather_tool",
    "execute_function_call",
]
