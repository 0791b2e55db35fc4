"""skycast data models."""

from skycast.models.alerts import WeatherAlert
from skycast.models.forecast import (
    DailyForecastEntry,
    DailyPrecipitation,
    DailyTemperature,
    DailyWind,
    HourlyForecastEntry,
    HourlyTemperature,
)
from skycast.models.geocoding import GeocodingResult, PlaceSearchResult
from skycast.models.location import GeoPoint, LocationInfo, ResolvedLocation
from skycast.models.reports import (
    AlertReport,
    ComparisonEntry,
    ComparisonReport,
    CurrentReport,
    ForecastReport,
    WeatherReport,
)
from skycast.models.request import RequestKind, WeatherRequest
from skycast.models.weather import CurrentWeather, Precipitation, UnitLabels, WeatherSummary, Wind

__all__ = [
    "AlertReport",
    "ComparisonEntry",
    "ComparisonReport",
    "CurrentReport",
    "CurrentWeather",
    "DailyForecastEntry",
    "DailyPrecipitation",
    "DailyTemperature",
    "DailyWind",
    "ForecastReport",
    "GeoPoint",
    "GeocodingResult",
    "HourlyForecastEntry",
    "HourlyTemperature",
    "LocationInfo",
    "PlaceSearchResult",
    "Precipitation",
    "RequestKind",
    "ResolvedLocation",
    "UnitLabels",
    "WeatherAlert",
    "WeatherReport",
    "WeatherRequest",
    "WeatherSummary",
    "Wind",
]
