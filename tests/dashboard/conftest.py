"""Shared fixtures for dashboard tests."""

from __future__ import annotations

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# ── Mock streamlit before any dashboard imports ──────────────────────────────

_mock_st = MagicMock()
_mock_st.cache_data = lambda **kw: (lambda fn: fn)  # passthrough decorator
_mock_st.cache_resource = lambda **kw: (lambda fn: fn)  # passthrough decorator
_mock_st.session_state = {}
sys.modules.setdefault("streamlit", _mock_st)

# Add dashboard to path so `shared` is importable
_dashboard_dir = str(Path(__file__).resolve().parent.parent.parent / "dashboard")
if _dashboard_dir not in sys.path:
    sys.path.insert(0, _dashboard_dir)

from skycast.models import (  # noqa: E402
    ComparisonEntry,
    ComparisonReport,
    CurrentReport,
    CurrentWeather,
    DailyForecastEntry,
    DailyPrecipitation,
    DailyTemperature,
    DailyWind,
    ForecastReport,
    GeoPoint,
    HourlyForecastEntry,
    HourlyTemperature,
    LocationInfo,
    Precipitation,
    UnitLabels,
    WeatherSummary,
    Wind,
)

METRIC = UnitLabels(temperature="°C", wind_speed="km/h", precipitation="mm", pressure="hPa")
OVERCAST = WeatherSummary(main="Clear", description="Overcast", icon="04d")
RAIN = WeatherSummary(main="Rain", description="Slight rain", icon="10d")


# ── Sample report factories ──────────────────────────────────────────────────


def _make_current(name: str = "Paris", temperature: float | None = 3.4) -> CurrentReport:
    return CurrentReport(
        location=LocationInfo(name=name, country="France", coordinates=GeoPoint(lat=48.86, lon=2.34)),
        units=METRIC,
        current=CurrentWeather(
            temperature=temperature,
            feels_like=-1.2,
            humidity=61,
            pressure=1021.4,
            weather=OVERCAST,
            wind=Wind(speed=14.8, direction=290, gust=31.3),
            clouds=100,
            precipitation=Precipitation(),
            timestamp="2024-01-15T12:00:00+00:00",
        ),
    )


def _make_day(i: int) -> DailyForecastEntry:
    return DailyForecastEntry(
        date=f"2024-01-{15 + i:02d}",
        temperature=DailyTemperature(max=10.0 + i, min=1.0 + i, feels_like_max=8.5 + i, feels_like_min=-1.5 + i),
        weather=RAIN if i % 2 else OVERCAST,
        precipitation=DailyPrecipitation(sum=0.2 * i, probability=10 * i),
        wind=DailyWind(max_speed=20.0, max_gust=35.0, direction=180),
    )


def _make_hour(i: int) -> HourlyForecastEntry:
    return HourlyForecastEntry(
        timestamp=f"2024-01-15T{i:02d}:00",
        temperature=HourlyTemperature(current=2.0 + i * 0.5, feels_like=-1.0 + i * 0.5),
        humidity=70,
        pressure=1020.0,
        weather=OVERCAST,
        wind=Wind(speed=12.0, direction=270, gust=25.0),
        clouds=80,
        precipitation=Precipitation(rain=0.3 if i == 0 else 0),
    )


@pytest.fixture
def current_report() -> CurrentReport:
    return _make_current()


@pytest.fixture
def forecast_report() -> ForecastReport:
    return ForecastReport(
        location=LocationInfo(name="Paris", country="France", coordinates=GeoPoint(lat=48.86, lon=2.34)),
        units=METRIC,
        timezone="Europe/Paris",
        daily=[_make_day(i) for i in range(3)],
        hourly=[_make_hour(i) for i in range(24)],
    )


@pytest.fixture
def comparison_report() -> ComparisonReport:
    return ComparisonReport(
        comparison=[
            ComparisonEntry(location="Paris, FR", success=True, data=_make_current("Paris", 3.4)),
            ComparisonEntry(location="Nowhereville12345xyz", success=False,
                            error="Location not found: 'Nowhereville12345xyz'. Please check the city name.",
                            error_kind="LocationNotFound"),
            ComparisonEntry(location="Lyon", success=True, data=_make_current("Lyon", 5.0)),
        ],
        units="metric",
        timestamp="2024-01-15T12:00:00+00:00",
    )


@pytest.fixture
def make_current():
    """Factory fixture for creating current reports."""
    return _make_current
