"""Pydantic models describing the subset of the wttr.in ``format=j1`` payload we read.

Every scalar the provider reports arrives as text, and descriptive attributes
(``weatherDesc``, ``areaName``, ...) are wrapped in one-element lists of
``{"value": ...}`` objects.  The models keep that shape; unwrapping and number
parsing happen in :mod:`weather_core.normalizer`.
"""
from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "CurrentCondition",
    "DailyForecast",
    "HourlyReading",
    "NearestArea",
    "ProviderPayload",
    "ValueItem",
]

Scalar = Union[int, float, str]


class _ProviderModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class ValueItem(_ProviderModel):
    value: str


class CurrentCondition(_ProviderModel):
    temp_c: Optional[Scalar] = Field(default=None, alias="temp_C")
    temp_f: Optional[Scalar] = Field(default=None, alias="temp_F")
    feels_like_c: Optional[Scalar] = Field(default=None, alias="FeelsLikeC")
    feels_like_f: Optional[Scalar] = Field(default=None, alias="FeelsLikeF")
    humidity: Optional[Scalar] = Field(default=None)
    weather_desc: List[ValueItem] = Field(default_factory=list, alias="weatherDesc")
    windspeed_kmph: Optional[Scalar] = Field(default=None, alias="windspeedKmph")
    windspeed_miles: Optional[Scalar] = Field(default=None, alias="windspeedMiles")
    winddir_degree: Optional[Scalar] = Field(default=None, alias="winddirDegree")
    pressure: Optional[Scalar] = Field(default=None)
    visibility: Optional[Scalar] = Field(default=None)
    uv_index: Optional[Scalar] = Field(default=None, alias="uvIndex")


class NearestArea(_ProviderModel):
    area_name: List[ValueItem] = Field(default_factory=list, alias="areaName")
    country: List[ValueItem] = Field(default_factory=list)
    region: List[ValueItem] = Field(default_factory=list)


class HourlyReading(_ProviderModel):
    weather_desc: List[ValueItem] = Field(default_factory=list, alias="weatherDesc")


class DailyForecast(_ProviderModel):
    date: Optional[str] = Field(default=None)
    max_temp_c: Optional[Scalar] = Field(default=None, alias="maxtempC")
    min_temp_c: Optional[Scalar] = Field(default=None, alias="mintempC")
    max_temp_f: Optional[Scalar] = Field(default=None, alias="maxtempF")
    min_temp_f: Optional[Scalar] = Field(default=None, alias="mintempF")
    hourly: List[HourlyReading] = Field(default_factory=list)


class ProviderPayload(_ProviderModel):
    current_condition: List[CurrentCondition] = Field(default_factory=list)
    nearest_area: List[NearestArea] = Field(default_factory=list)
    weather: List[DailyForecast] = Field(default_factory=list)
