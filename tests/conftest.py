from __future__ import annotations

import copy
from typing import Any, Callable, Dict, List, Optional

import pytest
from django.conf import settings


def _day(date: str, max_c: str, min_c: str, max_f: str, min_f: str, first_hour: str) -> Dict[str, Any]:
    return {
        "date": date,
        "maxtempC": max_c,
        "mintempC": min_c,
        "maxtempF": max_f,
        "mintempF": min_f,
        "avgtempC": "12",
        "sunHour": "6.5",
        "hourly": [
            {"time": "0", "tempC": min_c, "weatherDesc": [{"value": first_hour}]},
            {"time": "1200", "tempC": max_c, "weatherDesc": [{"value": "Sunny"}]},
        ],
    }


LONDON_PAYLOAD: Dict[str, Any] = {
    "current_condition": [
        {
            "temp_C": "15",
            "temp_F": "59",
            "FeelsLikeC": "14",
            "FeelsLikeF": "57",
            "humidity": "70",
            "weatherDesc": [{"value": "Cloudy"}],
            "weatherCode": "119",
            "windspeedKmph": "11",
            "windspeedMiles": "7",
            "winddirDegree": "240",
            "winddir16Point": "WSW",
            "pressure": "1015",
            "visibility": "10",
            "uvIndex": "3",
            "cloudcover": "75",
        }
    ],
    "nearest_area": [
        {
            "areaName": [{"value": "London"}],
            "country": [{"value": "United Kingdom"}],
            "region": [{"value": "City of London, Greater London"}],
            "latitude": "51.517",
            "longitude": "-0.106",
        }
    ],
    "weather": [
        _day("2024-05-01", "17", "9", "63", "48", "Patchy rain possible"),
        _day("2024-05-02", "19", "10", "66", "50", "Partly cloudy"),
        _day("2024-05-03", "16", "8", "61", "46", "Overcast"),
    ],
}

LONDON_FULL: Dict[str, Any] = {
    "location": {
        "city": "London",
        "country": "United Kingdom",
        "region": "City of London, Greater London",
    },
    "current": {
        "temperature_c": 15,
        "temperature_f": 59,
        "condition": "Cloudy",
        "humidity_pct": 70,
        "wind_speed_kmh": 11,
        "feels_like_c": 14,
        "feels_like_f": 57,
        "wind_speed_mph": 7,
        "wind_direction_deg": 240,
        "pressure": 1015,
        "visibility": 10,
        "uv_index": 3,
    },
    "forecast": [
        {
            "date": "2024-05-01",
            "max_temp_c": 17,
            "min_temp_c": 9,
            "max_temp_f": 63,
            "min_temp_f": 48,
            "condition": "Patchy rain possible",
        },
        {
            "date": "2024-05-02",
            "max_temp_c": 19,
            "min_temp_c": 10,
            "max_temp_f": 66,
            "min_temp_f": 50,
            "condition": "Partly cloudy",
        },
        {
            "date": "2024-05-03",
            "max_temp_c": 16,
            "min_temp_c": 8,
            "max_temp_f": 61,
            "min_temp_f": 46,
            "condition": "Overcast",
        },
    ],
}


@pytest.fixture
def london_payload() -> Dict[str, Any]:
    return copy.deepcopy(LONDON_PAYLOAD)


@pytest.fixture
def london_full() -> Dict[str, Any]:
    return copy.deepcopy(LONDON_FULL)


@pytest.fixture
def london_minimal() -> Dict[str, Any]:
    return {
        "location": dict(LONDON_FULL["location"]),
        "current": {
            "temperature_c": 15,
            "temperature_f": 59,
            "condition": "Cloudy",
            "humidity_pct": 70,
            "wind_speed_kmh": 11,
        },
    }


@pytest.fixture
def make_day() -> Callable[..., Dict[str, Any]]:
    return _day


@pytest.fixture
def wttr_url() -> Callable[[str], str]:
    def build(path: str) -> str:
        return f"{settings.WTTR_BASE_URL}/{path}"

    return build


class StaticProvider:
    """Provider double returning a fixed document without touching the network."""

    def __init__(self, payload: Any = None, error: Optional[Exception] = None) -> None:
        self.payload = payload
        self.error = error
        self.queries: List[str] = []

    def fetch(self, query: str) -> Any:
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return copy.deepcopy(self.payload)


@pytest.fixture
def static_provider() -> Callable[..., StaticProvider]:
    return StaticProvider
