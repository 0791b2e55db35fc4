"""Shared test fixtures and sample provider responses."""

from __future__ import annotations

import copy
import logging
from typing import Any

import pytest

from skycast.config import WeatherSettings

FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
PLACE_SEARCH_URL = "https://nominatim.openstreetmap.org/search"
GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"


SAMPLE_PLACE_SEARCH = [
    {
        "place_id": 88066702,
        "lat": "48.8588897",
        "lon": "2.3200410",
        "name": "Paris",
        "display_name": "Paris, Île-de-France, France métropolitaine, France",
        "address": {
            "city": "Paris",
            "state": "Île-de-France",
            "country": "France",
            "country_code": "fr",
        },
    },
]

SAMPLE_GEOCODING = {
    "results": [
        {
            "id": 5128581,
            "name": "New York",
            "latitude": 40.71427,
            "longitude": -74.00597,
            "country_code": "US",
            "country": "United States",
            "admin1": "New York",
            "timezone": "America/New_York",
            "postcodes": ["10001"],
        },
    ],
    "generationtime_ms": 0.61,
}

SAMPLE_CURRENT = {
    "latitude": 40.710335,
    "longitude": -73.99307,
    "timezone": "GMT",
    "current_units": {"temperature_2m": "°C", "wind_speed_10m": "km/h"},
    "current": {
        "time": "2024-01-15T12:00",
        "interval": 900,
        "temperature_2m": 3.4,
        "relative_humidity_2m": 61,
        "apparent_temperature": -1.2,
        "precipitation": 0.0,
        "rain": 0.0,
        "showers": 0.0,
        "snowfall": 0.0,
        "weather_code": 3,
        "cloud_cover": 100,
        "pressure_msl": 1021.4,
        "surface_pressure": 1019.9,
        "wind_speed_10m": 14.8,
        "wind_direction_10m": 290,
        "wind_gusts_10m": 31.3,
    },
}

SAMPLE_ALERTS = {
    "latitude": 40.710335,
    "longitude": -73.99307,
    "timezone": "America/New_York",
    "alerts": [
        {
            "event": "Heat Advisory",
            "description": "Heat index values up to 105 expected.",
            "onset": "2024-07-15T12:00:00-04:00",
            "expires": "2024-07-15T20:00:00-04:00",
            "severity": "Moderate",
            "certainty": "Likely",
            "urgency": "Expected",
            "areas": ["Manhattan", "Brooklyn"],
            "tags": ["heat"],
        },
        {},
    ],
}

_DAILY_CODES = [0, 1, 2, 3, 45, 61, 63, 71, 95, 99, 80, 81, 82, 85, 86, 96]


def make_forecast_payload(days: int = 10, hours: int = 48) -> dict[str, Any]:
    """Build an Open-Meteo style forecast payload with ``days`` days and ``hours`` hours."""
    daily = {
        "time": [f"2024-01-{15 + i:02d}" for i in range(days)],
        "weather_code": [_DAILY_CODES[i % len(_DAILY_CODES)] for i in range(days)],
        "temperature_2m_max": [10.0 + i for i in range(days)],
        "temperature_2m_min": [1.0 + i for i in range(days)],
        "apparent_temperature_max": [8.5 + i for i in range(days)],
        "apparent_temperature_min": [-1.5 + i for i in range(days)],
        "precipitation_sum": [0.2 * i for i in range(days)],
        "rain_sum": [0.1 * i for i in range(days)],
        "showers_sum": [0.0 for _ in range(days)],
        "snowfall_sum": [0.0 for _ in range(days)],
        "precipitation_hours": [float(i % 5) for i in range(days)],
        "precipitation_probability_max": [10 * (i % 10) for i in range(days)],
        "wind_speed_10m_max": [20.0 + i for i in range(days)],
        "wind_gusts_10m_max": [35.0 + i for i in range(days)],
        "wind_direction_10m_dominant": [(30 * i) % 360 for i in range(days)],
    }
    hourly = {
        "time": [f"2024-01-{15 + i // 24:02d}T{i % 24:02d}:00" for i in range(hours)],
        "temperature_2m": [2.0 + (i % 24) * 0.5 for i in range(hours)],
        "relative_humidity_2m": [60 + i % 20 for i in range(hours)],
        "apparent_temperature": [-1.0 + (i % 24) * 0.5 for i in range(hours)],
        "precipitation": [0.0 for _ in range(hours)],
        "rain": [0.0 if i % 6 else 0.3 for i in range(hours)],
        "showers": [0.0 for _ in range(hours)],
        "snowfall": [0.0 for _ in range(hours)],
        "weather_code": [3 if i % 6 else 61 for i in range(hours)],
        "cloud_cover": [80 for _ in range(hours)],
        "pressure_msl": [1020.0 + i * 0.1 for i in range(hours)],
        "wind_speed_10m": [12.0 for _ in range(hours)],
        "wind_direction_10m": [270 for _ in range(hours)],
        "wind_gusts_10m": [25.0 for _ in range(hours)],
    }
    return {
        "latitude": 48.86,
        "longitude": 2.3399997,
        "timezone": "Europe/Paris",
        "daily": daily,
        "hourly": hourly,
    }


@pytest.fixture
def settings() -> WeatherSettings:
    """Default settings, isolated from any SKYCAST_* environment or .env file."""
    return WeatherSettings(_env_file=None)


@pytest.fixture
def current_payload() -> dict[str, Any]:
    return copy.deepcopy(SAMPLE_CURRENT)


@pytest.fixture
def forecast_payload() -> dict[str, Any]:
    return make_forecast_payload()


@pytest.fixture
def alerts_payload() -> dict[str, Any]:
    return copy.deepcopy(SAMPLE_ALERTS)


@pytest.fixture(autouse=True)
def _api_log_dir(tmp_path):
    """Redirect the api call log to tmp_path and reset the cached logger."""
    import skycast._logging as mod

    old_logger = mod._logger
    old_dir = mod._LOG_DIR
    old_file = mod._LOG_FILE

    named_logger = logging.getLogger("skycast.api")
    named_logger.handlers.clear()

    mod._logger = None
    mod._LOG_DIR = str(tmp_path / "logs")
    mod._LOG_FILE = str(tmp_path / "logs" / "api_calls.log")

    yield tmp_path / "logs"

    # Close file handlers to release file locks (important on Windows)
    if mod._logger is not None:
        for h in mod._logger.handlers[:]:
            h.close()
            mod._logger.removeHandler(h)
    for h in named_logger.handlers[:]:
        h.close()
        named_logger.removeHandler(h)
    mod._logger = old_logger
    mod._LOG_DIR = old_dir
    mod._LOG_FILE = old_file
