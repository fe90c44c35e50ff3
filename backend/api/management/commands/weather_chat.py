"""Ask the function-calling assistant a weather question."""
from __future__ import annotations

from typing import Any

import requests
from django.core.management.base import BaseCommand, CommandError

from backend.api.functions import chat_with_weather_tool


class Command(BaseCommand):
    help = "Chat with an assistant that can call the get_weather function"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("message", type=str, help="Question, e.g. \"What's the weather like in Tokyo?\"")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        try:
            answer = chat_with_weather_tool(options["message"])
        except (RuntimeError, requests.RequestException) as exc:
            raise CommandError(str(exc)) from exc
        self.stdout.write(answer)
