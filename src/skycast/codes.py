"""WMO weather code lookup table."""

from __future__ import annotations

from typing import Any, NamedTuple


class WeatherCondition(NamedTuple):
    main: str
    description: str
    icon: str


WEATHER_CODES: dict[int, WeatherCondition] = {
    0: WeatherCondition("Clear", "Clear sky", "01d"),
    1: WeatherCondition("Clear", "Mainly clear", "02d"),
    2: WeatherCondition("Clear", "Partly cloudy", "03d"),
    3: WeatherCondition("Clear", "Overcast", "04d"),
    45: WeatherCondition("Fog", "Fog", "50d"),
    48: WeatherCondition("Fog", "Depositing rime fog", "50d"),
    51: WeatherCondition("Drizzle", "Light drizzle", "09d"),
    53: WeatherCondition("Drizzle", "Moderate drizzle", "09d"),
    55: WeatherCondition("Drizzle", "Dense drizzle", "09d"),
    56: WeatherCondition("Drizzle", "Light freezing drizzle", "09d"),
    57: WeatherCondition("Drizzle", "Dense freezing drizzle", "09d"),
    61: WeatherCondition("Rain", "Slight rain", "10d"),
    63: WeatherCondition("Rain", "Moderate rain", "10d"),
    65: WeatherCondition("Rain", "Heavy rain", "10d"),
    66: WeatherCondition("Rain", "Light freezing rain", "10d"),
    67: WeatherCondition("Rain", "Heavy freezing rain", "10d"),
    71: WeatherCondition("Snow", "Slight snow", "13d"),
    73: WeatherCondition("Snow", "Moderate snow", "13d"),
    75: WeatherCondition("Snow", "Heavy snow", "13d"),
    77: WeatherCondition("Snow", "Snow grains", "13d"),
    80: WeatherCondition("Rain", "Slight rain showers", "09d"),
    81: WeatherCondition("Rain", "Moderate rain showers", "09d"),
    82: WeatherCondition("Rain", "Violent rain showers", "09d"),
    85: WeatherCondition("Snow", "Slight snow showers", "13d"),
    86: WeatherCondition("Snow", "Heavy snow showers", "13d"),
    95: WeatherCondition("Thunderstorm", "Thunderstorm", "11d"),
    96: WeatherCondition("Thunderstorm", "Thunderstorm with slight hail", "11d"),
    99: WeatherCondition("Thunderstorm", "Thunderstorm with heavy hail", "11d"),
}

UNKNOWN_CONDITION = WeatherCondition("Unknown", "Unknown weather", "01d")


def lookup(code: Any) -> WeatherCondition:
    """Map a provider weather code to its condition; unknown codes never raise."""
    if isinstance(code, bool) or not isinstance(code, (int, float)):
        return UNKNOWN_CONDITION
    if isinstance(code, float) and not code.is_integer():
        return UNKNOWN_CONDITION
    return WEATHER_CODES.get(int(code), UNKNOWN_CONDITION)
