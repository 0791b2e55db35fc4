"""Normalization of raw forecast-provider payloads into report models.

Every function here is pure apart from the explicit ``timestamp`` fields,
whose clock can be pinned with ``now``. Missing blocks, missing series and
short series all degrade to ``None``/defaults; nothing in this module raises
on a malformed payload.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from skycast.codes import lookup
from skycast.models.alerts import WeatherAlert
from skycast.models.forecast import (
    DailyForecastEntry,
    DailyPrecipitation,
    DailyTemperature,
    DailyWind,
    HourlyForecastEntry,
    HourlyTemperature,
)
from skycast.models.location import (
    UNKNOWN_COUNTRY,
    UNKNOWN_LOCATION_NAME,
    GeoPoint,
    LocationInfo,
    ResolvedLocation,
)
from skycast.models.reports import AlertReport, CurrentReport, ForecastReport
from skycast.models.weather import (
    CurrentWeather,
    Precipitation,
    UnitLabels,
    WeatherSummary,
    Wind,
)
from skycast.units import UnitSystem, policy_for

HOURS_SHOWN = 24


def _block(raw: Any, key: str) -> dict[str, Any]:
    value = raw.get(key) if isinstance(raw, dict) else None
    return value if isinstance(value, dict) else {}


def _number(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def _amount(value: Any) -> float:
    """Precipitation amounts: missing means none fell."""
    number = _number(value)
    return 0 if number is None else number


def _text(value: Any) -> str | None:
    return value if isinstance(value, str) and value else None


def _series(block: dict[str, Any], key: str) -> list[Any]:
    value = block.get(key)
    return value if isinstance(value, list) else []


def _at(series: list[Any], index: int) -> Any:
    return series[index] if index < len(series) else None


def _timestamp(now: datetime | None) -> str:
    return (now or datetime.now(UTC)).isoformat()


def summarize_code(code: Any) -> WeatherSummary:
    condition = lookup(code)
    return WeatherSummary(main=condition.main, description=condition.description, icon=condition.icon)


def unit_labels(units: str | UnitSystem) -> UnitLabels:
    return UnitLabels(**policy_for(units).labels())


def location_info(raw: Any, location: ResolvedLocation) -> LocationInfo:
    """Build the location echo.

    A resolved name wins, then a ``location`` echo in the payload, then the
    "Unknown Location"/"Unknown" defaults. Coordinates echo the request.
    """
    echo = _block(raw, "location")
    return LocationInfo(
        name=location.name or _text(echo.get("name")) or UNKNOWN_LOCATION_NAME,
        country=location.country or _text(echo.get("country")) or UNKNOWN_COUNTRY,
        coordinates=GeoPoint(lat=location.latitude, lon=location.longitude),
    )


def normalize_current(
    raw: Any,
    location: ResolvedLocation,
    units: str | UnitSystem = UnitSystem.METRIC,
    now: datetime | None = None,
) -> CurrentReport:
    current = _block(raw, "current")
    return CurrentReport(
        location=location_info(raw, location),
        units=unit_labels(units),
        current=CurrentWeather(
            temperature=_number(current.get("temperature_2m")),
            feels_like=_number(current.get("apparent_temperature")),
            humidity=_number(current.get("relative_humidity_2m")),
            pressure=_number(current.get("pressure_msl")),
            visibility=None,
            uv_index=None,
            weather=summarize_code(current.get("weather_code")),
            wind=Wind(
                speed=_number(current.get("wind_speed_10m")),
                direction=_number(current.get("wind_direction_10m")),
                gust=_number(current.get("wind_gusts_10m")),
            ),
            clouds=_number(current.get("cloud_cover")),
            precipitation=Precipitation(
                rain=_amount(current.get("rain")),
                showers=_amount(current.get("showers")),
                snowfall=_amount(current.get("snowfall")),
            ),
            timestamp=_timestamp(now),
        ),
    )


def normalize_daily(daily: dict[str, Any], days: int) -> list[DailyForecastEntry]:
    """First ``min(days, len(daily.time))`` days, in provider order."""
    dates = _series(daily, "time")
    columns = {key: _series(daily, key) for key in daily if key != "time"}

    def col(key: str, index: int) -> float | None:
        return _number(_at(columns.get(key, []), index))

    entries: list[DailyForecastEntry] = []
    for i in range(min(max(days, 0), len(dates))):
        entries.append(
            DailyForecastEntry(
                date=_text(dates[i]),
                temperature=DailyTemperature(
                    max=col("temperature_2m_max", i),
                    min=col("temperature_2m_min", i),
                    feels_like_max=col("apparent_temperature_max", i),
                    feels_like_min=col("apparent_temperature_min", i),
                ),
                weather=summarize_code(_at(columns.get("weather_code", []), i)),
                precipitation=DailyPrecipitation(
                    sum=col("precipitation_sum", i),
                    rain=col("rain_sum", i),
                    showers=col("showers_sum", i),
                    snowfall=col("snowfall_sum", i),
                    hours=col("precipitation_hours", i),
                    probability=col("precipitation_probability_max", i),
                ),
                wind=DailyWind(
                    max_speed=col("wind_speed_10m_max", i),
                    max_gust=col("wind_gusts_10m_max", i),
                    direction=col("wind_direction_10m_dominant", i),
                ),
            )
        )
    return entries


def normalize_hourly(hourly: dict[str, Any]) -> list[HourlyForecastEntry]:
    """First ``min(24, len(hourly.time))`` hours, whatever span was requested."""
    times = _series(hourly, "time")
    columns = {key: _series(hourly, key) for key in hourly if key != "time"}

    def col(key: str, index: int) -> float | None:
        return _number(_at(columns.get(key, []), index))

    entries: list[HourlyForecastEntry] = []
    for i in range(min(HOURS_SHOWN, len(times))):
        entries.append(
            HourlyForecastEntry(
                timestamp=_text(times[i]),
                temperature=HourlyTemperature(
                    current=col("temperature_2m", i),
                    feels_like=col("apparent_temperature", i),
                ),
                humidity=col("relative_humidity_2m", i),
                pressure=col("pressure_msl", i),
                weather=summarize_code(_at(columns.get("weather_code", []), i)),
                wind=Wind(
                    speed=col("wind_speed_10m", i),
                    direction=col("wind_direction_10m", i),
                    gust=col("wind_gusts_10m", i),
                ),
                clouds=col("cloud_cover", i),
                precipitation=Precipitation(
                    rain=_amount(_at(columns.get("rain", []), i)),
                    showers=_amount(_at(columns.get("showers", []), i)),
                    snowfall=_amount(_at(columns.get("snowfall", []), i)),
                ),
            )
        )
    return entries


def normalize_forecast(
    raw: Any,
    days: int,
    location: ResolvedLocation,
    units: str | UnitSystem = UnitSystem.METRIC,
) -> ForecastReport:
    timezone = raw.get("timezone") if isinstance(raw, dict) else None
    return ForecastReport(
        location=location_info(raw, location),
        units=unit_labels(units),
        timezone=_text(timezone),
        daily=normalize_daily(_block(raw, "daily"), days),
        hourly=normalize_hourly(_block(raw, "hourly")),
    )


def _string_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(item) for item in value if item is not None]


def normalize_alert(alert: dict[str, Any]) -> WeatherAlert:
    defaults = WeatherAlert()
    return WeatherAlert(
        event=_text(alert.get("event")) or defaults.event,
        description=_text(alert.get("description")) or defaults.description,
        onset=_text(alert.get("onset")),
        expires=_text(alert.get("expires")),
        severity=_text(alert.get("severity")) or defaults.severity,
        certainty=_text(alert.get("certainty")) or defaults.certainty,
        urgency=_text(alert.get("urgency")) or defaults.urgency,
        areas=_string_list(alert.get("areas")),
        tags=_string_list(alert.get("tags")),
    )


def normalize_alerts(
    raw: Any,
    location: ResolvedLocation,
    units: str | UnitSystem = UnitSystem.METRIC,
    now: datetime | None = None,
) -> AlertReport:
    items = raw.get("alerts") if isinstance(raw, dict) else None
    alerts = [normalize_alert(a) for a in items if isinstance(a, dict)] if isinstance(items, list) else []
    return AlertReport(
        location=location_info(raw, location),
        units=unit_labels(units),
        alerts=alerts,
        alert_count=len(alerts),
        has_alerts=bool(alerts),
        timestamp=_timestamp(now),
    )
