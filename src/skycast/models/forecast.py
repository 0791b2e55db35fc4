"""Daily and hourly forecast models."""

from __future__ import annotations

from skycast.models._base import OutputModel
from skycast.models.weather import Precipitation, WeatherSummary, Wind


class DailyTemperature(OutputModel):
    max: float | None = None
    min: float | None = None
    feels_like_max: float | None = None
    feels_like_min: float | None = None


class DailyPrecipitation(OutputModel):
    sum: float | None = None
    rain: float | None = None
    showers: float | None = None
    snowfall: float | None = None
    hours: float | None = None
    probability: float | None = None


class DailyWind(OutputModel):
    max_speed: float | None = None
    max_gust: float | None = None
    direction: float | None = None


class DailyForecastEntry(OutputModel):
    """One forecast day."""

    date: str | None = None
    temperature: DailyTemperature
    weather: WeatherSummary
    precipitation: DailyPrecipitation
    wind: DailyWind


class HourlyTemperature(OutputModel):
    current: float | None = None
    feels_like: float | None = None


class HourlyForecastEntry(OutputModel):
    """One forecast hour."""

    timestamp: str | None = None
    temperature: HourlyTemperature
    humidity: float | None = None
    pressure: float | None = None
    weather: WeatherSummary
    wind: Wind
    clouds: float | None = None
    precipitation: Precipitation
