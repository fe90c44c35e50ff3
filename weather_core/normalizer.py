from __future__ import annotations

import math
from typing import Any, Optional, Sequence, Tuple, TypeVar, Union

from pydantic import ValidationError

from .entities import CurrentConditions, DetailLevel, ForecastDay, Location, NormalizedWeather, Number
from .providers.base import MalformedPayloadError
from .schemas import CurrentCondition, DailyForecast, NearestArea, ProviderPayload, ValueItem

T = TypeVar("T")

FORECAST_DAYS = 3


def first_of(sequence: Optional[Sequence[T]], what: str) -> T:
    """Return the first element of a provider collection.

    The provider wraps single values in one-element lists, so every such
    access goes through here.
    """
    if not sequence:
        raise MalformedPayloadError(f"missing {what} in weather data")
    return sequence[0]


def normalize(
    payload: Any,
    detail: Union[DetailLevel, str, None] = DetailLevel.FULL,
) -> NormalizedWeather:
    """Project a raw provider document onto :class:`NormalizedWeather`."""
    level = DetailLevel.parse(detail)
    try:
        document = ProviderPayload.model_validate(payload)
    except ValidationError as exc:
        raise MalformedPayloadError(f"unexpected weather data structure: {exc.error_count()} invalid field(s)") from exc

    current = first_of(document.current_condition, "current_condition")
    area = first_of(document.nearest_area, "nearest_area")

    location = _location(area)
    if level is DetailLevel.MINIMAL:
        return NormalizedWeather(location=location, current=_minimal_current(current))
    return NormalizedWeather(
        location=location,
        current=_full_current(current),
        forecast=_forecast(document.weather),
    )


# helpers ------------------------------------------------------------
def _location(area: NearestArea) -> Location:
    return Location(
        city=_text(area.area_name, "nearest_area.areaName"),
        country=_text(area.country, "nearest_area.country"),
        region=_text(area.region, "nearest_area.region"),
    )


def _minimal_current(current: CurrentCondition) -> CurrentConditions:
    return CurrentConditions(
        temperature_c=_number(current.temp_c, "temp_C"),
        temperature_f=_number(current.temp_f, "temp_F"),
        condition=_text(current.weather_desc, "current_condition.weatherDesc"),
        humidity_pct=_number(current.humidity, "humidity"),
        wind_speed_kmh=_number(current.windspeed_kmph, "windspeedKmph"),
    )


def _full_current(current: CurrentCondition) -> CurrentConditions:
    return CurrentConditions(
        temperature_c=_number(current.temp_c, "temp_C"),
        temperature_f=_number(current.temp_f, "temp_F"),
        feels_like_c=_number(current.feels_like_c, "FeelsLikeC"),
        feels_like_f=_number(current.feels_like_f, "FeelsLikeF"),
        condition=_text(current.weather_desc, "current_condition.weatherDesc"),
        humidity_pct=_number(current.humidity, "humidity"),
        wind_speed_kmh=_number(current.windspeed_kmph, "windspeedKmph"),
        wind_speed_mph=_number(current.windspeed_miles, "windspeedMiles"),
        wind_direction_deg=_number(current.winddir_degree, "winddirDegree"),
        pressure=_number(current.pressure, "pressure"),
        visibility=_number(current.visibility, "visibility"),
        uv_index=_number(current.uv_index, "uvIndex"),
    )


def _forecast(days: Sequence[DailyForecast]) -> Tuple[ForecastDay, ...]:
    result = []
    for index, day in enumerate(days[:FORECAST_DAYS]):
        if not day.date:
            raise MalformedPayloadError(f"missing weather[{index}].date in weather data")
        # No per-day summary exists; the first hourly reading stands in for the day.
        first_hour = first_of(day.hourly, f"weather[{index}].hourly")
        result.append(
            ForecastDay(
                date=day.date,
                max_temp_c=_number(day.max_temp_c, f"weather[{index}].maxtempC"),
                min_temp_c=_number(day.min_temp_c, f"weather[{index}].mintempC"),
                max_temp_f=_number(day.max_temp_f, f"weather[{index}].maxtempF"),
                min_temp_f=_number(day.min_temp_f, f"weather[{index}].mintempF"),
                condition=_text(first_hour.weather_desc, f"weather[{index}].hourly[0].weatherDesc"),
            )
        )
    return tuple(result)


def _text(values: Sequence[ValueItem], what: str) -> str:
    return first_of(values, what).value


def _number(value: Union[int, float, str, None], what: str) -> Number:
    if value is None:
        raise MalformedPayloadError(f"missing {what} in weather data")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        number = value
    else:
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            raise MalformedPayloadError(f"{what} is not numeric: {value!r}") from None
    # nan and inf parse as floats but have no JSON representation.
    if not math.isfinite(number):
        raise MalformedPayloadError(f"{what} is not numeric: {value!r}")
    return number


__all__ = ["FORECAST_DAYS", "first_of", "normalize"]
