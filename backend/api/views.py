"""REST API views for weather information."""
from __future__ import annotations

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from backend.api.services import get_weather_service
from backend.api.tools import rest_tool_catalog
from weather_core.entities import DetailLevel
from weather_core.providers.base import ProviderError


class WeatherView(APIView):
    """Provide normalized weather data for the requested city."""

    permission_classes = [AllowAny]

    def get(self, request, city: str, *args, **kwargs):  # noqa: D401
        """Return the weather document wrapped in a success envelope."""
        detail = request.query_params.get("detail")
        try:
            level = DetailLevel.parse(detail) if detail else None
        except ValueError as exc:
            return Response({"success": False, "error": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        try:
            weather = get_weather_service().get_weather(city, detail=level)
        except ValueError as exc:
            return Response({"success": False, "error": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        except ProviderError as exc:
            return Response(
                {"success": False, "error": str(exc)},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        return Response({"success": True, "data": weather.to_dict()}, status=status.HTTP_200_OK)


class ToolCatalogView(APIView):
    """List the operations exposed by this API."""

    permission_classes = [AllowAny]

    def get(self, request, *args, **kwargs):
        return Response({"success": True, "tools": rest_tool_catalog()})


class HealthView(APIView):
    permission_classes = [AllowAny]

    def get(self, request, *args, **kwargs):
        return Response({"status": "healthy"})
