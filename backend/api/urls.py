"""API URL configuration."""
from __future__ import annotations

from django.urls import path

from backend.api.views import ToolCatalogView, WeatherView

urlpatterns = [
    path("weather/<str:city>", WeatherView.as_view(), name="weather"),
    path("tools", ToolCatalogView.as_view(), name="tools"),
]
