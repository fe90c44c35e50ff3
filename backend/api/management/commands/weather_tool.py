"""Invoke a tool by name and print its result envelope."""
from __future__ import annotations

import json
from typing import Any

from django.core.management.base import BaseCommand, CommandError

from backend.api.tools import call_tool, list_tools


class Command(BaseCommand):
    help = "Call a weather tool with JSON arguments, or list the available tools"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("name", nargs="?", help="Tool name, e.g. get_weather")
        parser.add_argument("arguments", nargs="?", default="{}", help='JSON arguments, e.g. \'{"city": "London"}\'')
        parser.add_argument("--list", action="store_true", help="List tool definitions and exit")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        if options.get("list"):
            self.stdout.write(json.dumps({"tools": list_tools()}, indent=2))
            return
        name = options.get("name")
        if not name:
            raise CommandError("A tool name is required unless --list is given")
        try:
            arguments = json.loads(options["arguments"])
        except json.JSONDecodeError as exc:
            raise CommandError(f"Tool arguments must be valid JSON: {exc.msg}") from exc
        if not isinstance(arguments, dict):
            raise CommandError("Tool arguments must be a JSON object")

        result = call_tool(name, arguments)
        self.stdout.write(json.dumps(result.as_dict(), indent=2, ensure_ascii=False))
        if result.is_error:
            raise CommandError(f"Tool {name} returned an error")
