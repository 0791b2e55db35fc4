"""Current conditions models."""

from __future__ import annotations

from skycast.models._base import OutputModel


class WeatherSummary(OutputModel):
    """Weather-code derived condition."""

    main: str
    description: str
    icon: str


class Wind(OutputModel):
    speed: float | None = None
    direction: float | None = None
    gust: float | None = None


class Precipitation(OutputModel):
    rain: float = 0
    showers: float = 0
    snowfall: float = 0


class UnitLabels(OutputModel):
    """Display labels for the unit system a report was produced in."""

    temperature: str
    wind_speed: str
    precipitation: str
    pressure: str


class CurrentWeather(OutputModel):
    """Current conditions at a location."""

    temperature: float | None = None
    feels_like: float | None = None
    humidity: float | None = None
    pressure: float | None = None
    visibility: float | None = None
    uv_index: float | None = None
    weather: WeatherSummary
    wind: Wind
    clouds: float | None = None
    precipitation: Precipitation
    timestamp: str
