"""Management command to fetch weather using the same stack as the API."""
from __future__ import annotations

import json
from typing import Any

from django.core.management.base import BaseCommand, CommandError

from backend.api.services import get_weather_service
from backend.api.tools import format_weather_report
from weather_core.entities import DetailLevel
from weather_core.providers.base import ProviderError


class Command(BaseCommand):
    help = "Fetch current weather (and forecast) for the provided city"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("--city", type=str, required=True, help="City name, e.g. London")
        parser.add_argument(
            "--detail",
            choices=[level.value for level in DetailLevel],
            help="Normalization detail level (defaults to WEATHER_DETAIL)",
        )
        parser.add_argument("--text", action="store_true", help="Print a human readable report instead of JSON")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        city = options["city"]
        try:
            weather = get_weather_service().get_weather(city, detail=options.get("detail"))
        except (ValueError, ProviderError) as exc:
            raise CommandError(str(exc)) from exc

        if options.get("text"):
            self.stdout.write(format_weather_report(weather))
        else:
            self.stdout.write(json.dumps(weather.to_dict(), ensure_ascii=False))
