"""Formatting helpers for the weather dashboard."""

from __future__ import annotations

import datetime

from skycast.models import ComparisonReport, ForecastReport, WeatherSummary, Wind

from .constants import COMPASS_POINTS, CONDITION_ICONS

DASH = "\u2014"


def format_value(value: float | None, unit: str = "", digits: int = 1) -> str:
    """Format a reading with its unit label, or '\u2014' if None."""
    if value is None:
        return DASH
    text = f"{value:.{digits}f}"
    return f"{text} {unit}" if unit else text


def format_percent(value: float | None) -> str:
    return DASH if value is None else f"{value:.0f}%"


def compass(degrees: float | None) -> str:
    """16-point compass direction for a bearing in degrees."""
    if degrees is None:
        return ""
    index = int((degrees % 360) / 22.5 + 0.5) % 16
    return COMPASS_POINTS[index]


def format_wind(wind: Wind, unit: str) -> str:
    if wind.speed is None:
        return DASH
    text = format_value(wind.speed, unit)
    direction = compass(wind.direction)
    return f"{text} {direction}" if direction else text


def format_condition(weather: WeatherSummary) -> str:
    icon = CONDITION_ICONS.get(weather.main, CONDITION_ICONS["Unknown"])
    return f"{icon} {weather.description}"


def format_date(value: str | None) -> str:
    """'2024-01-15' -> 'Mon 15 Jan'. Unparseable values pass through."""
    if not value:
        return DASH
    try:
        return datetime.date.fromisoformat(value).strftime("%a %d %b")
    except ValueError:
        return value


def format_hour(value: str | None) -> str:
    """'2024-01-15T13:00' -> '13:00'."""
    if not value:
        return DASH
    _, sep, clock = value.partition("T")
    return clock if sep else value


def hourly_rows(report: ForecastReport) -> list[dict[str, str]]:
    """Table rows for the hourly section of a forecast."""
    units = report.units
    rows = []
    for hour in report.hourly:
        rows.append({
            "Time": format_hour(hour.timestamp),
            "Condition": format_condition(hour.weather),
            "Temp": format_value(hour.temperature.current, units.temperature),
            "Feels Like": format_value(hour.temperature.feels_like, units.temperature),
            "Humidity": format_percent(hour.humidity),
            "Wind": format_wind(hour.wind, units.wind_speed),
            "Rain": format_value(hour.precipitation.rain, units.precipitation),
        })
    return rows


def comparison_rows(report: ComparisonReport) -> list[dict[str, str]]:
    """Table rows for a comparison; failed locations show their error."""
    rows = []
    for entry in report.comparison:
        if not entry.success or entry.data is None:
            rows.append({
                "Location": entry.location,
                "Condition": DASH,
                "Temp": DASH,
                "Humidity": DASH,
                "Wind": DASH,
                "Status": f"{entry.error_kind}: {entry.error}",
            })
            continue
        current = entry.data.current
        units = entry.data.units
        rows.append({
            "Location": f"{entry.data.location.name}, {entry.data.location.country}",
            "Condition": format_condition(current.weather),
            "Temp": format_value(current.temperature, units.temperature),
            "Humidity": format_percent(current.humidity),
            "Wind": format_wind(current.wind, units.wind_speed),
            "Status": "OK",
        })
    return rows
