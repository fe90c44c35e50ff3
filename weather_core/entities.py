from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union


Number = Union[int, float]


class DetailLevel(str, Enum):
    """How much of the provider payload the normalizer projects."""

    MINIMAL = "minimal"
    FULL = "full"

    @classmethod
    def parse(cls, value: Union["DetailLevel", str, None]) -> "DetailLevel":
        if value is None:
            return cls.FULL
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(level.value for level in cls)
            raise ValueError(f"detail must be one of: {choices}") from None


@dataclass(frozen=True)
class Location:
    city: str
    country: str
    region: str


@dataclass(frozen=True)
class CurrentConditions:
    """Present weather at the resolved location.

    Units follow the provider: temperatures in Celsius/Fahrenheit, wind in
    km/h and mph, wind direction in degrees, pressure in hPa, visibility in km.
    The fields defaulting to ``None`` are only filled at full detail.
    """

    temperature_c: Number
    temperature_f: Number
    condition: str
    humidity_pct: Number
    wind_speed_kmh: Number
    feels_like_c: Optional[Number] = None
    feels_like_f: Optional[Number] = None
    wind_speed_mph: Optional[Number] = None
    wind_direction_deg: Optional[Number] = None
    pressure: Optional[Number] = None
    visibility: Optional[Number] = None
    uv_index: Optional[Number] = None


@dataclass(frozen=True)
class ForecastDay:
    date: str
    max_temp_c: Number
    min_temp_c: Number
    max_temp_f: Number
    min_temp_f: Number
    condition: str


@dataclass(frozen=True)
class NormalizedWeather:
    """Provider-independent weather document shared by every adapter."""

    location: Location
    current: CurrentConditions
    forecast: Optional[Tuple[ForecastDay, ...]] = None

    def to_dict(self) -> Dict[str, Any]:
        current = {
            field.name: getattr(self.current, field.name)
            for field in fields(self.current)
            if getattr(self.current, field.name) is not None
        }
        payload: Dict[str, Any] = {"location": asdict(self.location), "current": current}
        if self.forecast is not None:
            payload["forecast"] = [asdict(day) for day in self.forecast]
        return payload


__all__ = [
    "CurrentConditions",
    "DetailLevel",
    "ForecastDay",
    "Location",
    "NormalizedWeather",
    "Number",
]
