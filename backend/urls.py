"""Root URL configuration."""
from __future__ import annotations

from django.urls import include, path

from backend.api.views import HealthView

urlpatterns = [
    path("api/", include("backend.api.urls")),
    path("health", HealthView.as_view(), name="health"),
]
