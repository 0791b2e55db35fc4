"""Raw weather data retrieval from the forecast provider."""

from __future__ import annotations

import re
from datetime import date
from typing import Any

from skycast._http import AsyncTransport, SyncTransport
from skycast._logging import log_provider_call
from skycast._params import build_query_params
from skycast.exceptions import InvalidDateFormatError, InvalidDaysError, ValidationError
from skycast.units import UnitSystem, policy_for

MIN_FORECAST_DAYS = 1
MAX_FORECAST_DAYS = 16

CURRENT_FIELDS = (
    "temperature_2m",
    "relative_humidity_2m",
    "apparent_temperature",
    "precipitation",
    "rain",
    "showers",
    "snowfall",
    "weather_code",
    "cloud_cover",
    "pressure_msl",
    "surface_pressure",
    "wind_speed_10m",
    "wind_direction_10m",
    "wind_gusts_10m",
)

DAILY_FIELDS = (
    "weather_code",
    "temperature_2m_max",
    "temperature_2m_min",
    "apparent_temperature_max",
    "apparent_temperature_min",
    "precipitation_sum",
    "rain_sum",
    "showers_sum",
    "snowfall_sum",
    "precipitation_hours",
    "precipitation_probability_max",
    "wind_speed_10m_max",
    "wind_gusts_10m_max",
    "wind_direction_10m_dominant",
)

HOURLY_FIELDS = tuple(field for field in CURRENT_FIELDS if field != "surface_pressure")

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def validate_days(days: int) -> int:
    if isinstance(days, bool) or not isinstance(days, int):
        raise InvalidDaysError(f"Forecast days must be an integer between 1 and 16 (got {days!r})")
    if days < MIN_FORECAST_DAYS or days > MAX_FORECAST_DAYS:
        raise InvalidDaysError(f"Forecast days must be between 1 and 16 (got {days})")
    return days


def validate_date(value: str, field: str = "date") -> str:
    """Require a real calendar date written as YYYY-MM-DD."""
    if not isinstance(value, str) or not _ISO_DATE.match(value):
        raise InvalidDateFormatError(f"{field} must be in YYYY-MM-DD format (got {value!r})")
    try:
        date.fromisoformat(value)
    except ValueError:
        raise InvalidDateFormatError(f"{field} is not a valid calendar date (got {value!r})") from None
    return value


def validate_date_range(start_date: str | None, end_date: str | None) -> tuple[str | None, str | None]:
    """Require both ends or neither, each a real date, start not after end."""
    if start_date is not None:
        validate_date(start_date, "Start date")
    if end_date is not None:
        validate_date(end_date, "End date")
    if (start_date is None) != (end_date is None):
        raise ValidationError("A date range needs both a start date and an end date")
    if start_date is not None and end_date is not None and start_date > end_date:
        raise ValidationError(f"Start date {start_date} is after end date {end_date}")
    return start_date, end_date


def current_params(lat: float, lon: float, units: str | UnitSystem) -> list[tuple[str, str]]:
    return build_query_params(
        latitude=lat,
        longitude=lon,
        current=CURRENT_FIELDS,
        **policy_for(units).provider_params(),
    )


def forecast_params(
    lat: float,
    lon: float,
    days: int,
    units: str | UnitSystem,
    start_date: str | None = None,
    end_date: str | None = None,
) -> list[tuple[str, str]]:
    """Validate forecast arguments and build the provider query.

    ``forecast_days`` is only sent without a date range; the provider rejects
    both together.
    """
    validate_days(days)
    validate_date_range(start_date, end_date)
    has_range = start_date is not None
    return build_query_params(
        latitude=lat,
        longitude=lon,
        daily=DAILY_FIELDS,
        hourly=HOURLY_FIELDS,
        timezone="auto",
        forecast_days=None if has_range else days,
        start_date=start_date,
        end_date=end_date,
        **policy_for(units).provider_params(),
    )


def alerts_params(lat: float, lon: float) -> list[tuple[str, str]]:
    return build_query_params(latitude=lat, longitude=lon, alerts="temperature", timezone="auto")


class WeatherFetcher:
    """Fetches raw provider payloads for resolved coordinates.

    Usage:
        fetcher = WeatherFetcher(forecast_transport)
        raw = fetcher.fetch_forecast(48.85, 2.35, days=3, units="metric")
    """

    def __init__(self, transport: SyncTransport) -> None:
        self._transport = transport

    @log_provider_call
    def fetch_current(self, lat: float, lon: float, units: str | UnitSystem = UnitSystem.METRIC) -> dict[str, Any]:
        return self._transport.get("/forecast", current_params(lat, lon, units))

    @log_provider_call
    def fetch_forecast(
        self,
        lat: float,
        lon: float,
        days: int = 5,
        units: str | UnitSystem = UnitSystem.METRIC,
        start_date: str | None = None,
        end_date: str | None = None,
    ) -> dict[str, Any]:
        params = forecast_params(lat, lon, days, units, start_date, end_date)
        return self._transport.get("/forecast", params)

    @log_provider_call
    def fetch_alerts(self, lat: float, lon: float) -> dict[str, Any]:
        return self._transport.get("/forecast", alerts_params(lat, lon))


class AsyncWeatherFetcher:
    """Asynchronous counterpart of WeatherFetcher."""

    def __init__(self, transport: AsyncTransport) -> None:
        self._transport = transport

    @log_provider_call
    async def fetch_current(
        self, lat: float, lon: float, units: str | UnitSystem = UnitSystem.METRIC,
    ) -> dict[str, Any]:
        return await self._transport.get("/forecast", current_params(lat, lon, units))

    @log_provider_call
    async def fetch_forecast(
        self,
        lat: float,
        lon: float,
        days: int = 5,
        units: str | UnitSystem = UnitSystem.METRIC,
        start_date: str | None = None,
        end_date: str | None = None,
    ) -> dict[str, Any]:
        params = forecast_params(lat, lon, days, units, start_date, end_date)
        return await self._transport.get("/forecast", params)

    @log_provider_call
    async def fetch_alerts(self, lat: float, lon: float) -> dict[str, Any]:
        return await self._transport.get("/forecast", alerts_params(lat, lon))
