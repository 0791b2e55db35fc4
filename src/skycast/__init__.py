"""skycast: location-resolving, normalizing weather client."""

from skycast.classifier import CityName, Coordinates, PostalCode, classify
from skycast.client import AsyncWeatherClient, PipelineStage, WeatherClient
from skycast.config import WeatherSettings, get_settings
from skycast.exceptions import (
    InvalidCoordinatesError,
    InvalidDateFormatError,
    InvalidDaysError,
    InvalidUnitsError,
    LocationNotFoundError,
    SkycastError,
    UpstreamAPIError,
    UpstreamConnectionError,
    UpstreamTimeoutError,
    UpstreamUnavailableError,
    ValidationError,
)
from skycast.models import (
    AlertReport,
    ComparisonEntry,
    ComparisonReport,
    CurrentReport,
    ForecastReport,
    RequestKind,
    ResolvedLocation,
    WeatherRequest,
)
from skycast.units import UnitSystem

__all__ = [
    "AlertReport",
    "AsyncWeatherClient",
    "CityName",
    "ComparisonEntry",
    "ComparisonReport",
    "Coordinates",
    "CurrentReport",
    "ForecastReport",
    "InvalidCoordinatesError",
    "InvalidDateFormatError",
    "InvalidDaysError",
    "InvalidUnitsError",
    "LocationNotFoundError",
    "PipelineStage",
    "PostalCode",
    "RequestKind",
    "ResolvedLocation",
    "SkycastError",
    "UnitSystem",
    "UpstreamAPIError",
    "UpstreamConnectionError",
    "UpstreamTimeoutError",
    "UpstreamUnavailableError",
    "ValidationError",
    "WeatherClient",
    "WeatherRequest",
    "WeatherSettings",
    "classify",
    "get_settings",
]

__version__ = "0.1.0"
