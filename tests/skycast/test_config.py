"""Tests for WeatherSettings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError as PydanticValidationError

from skycast.config import WeatherSettings, get_settings
from skycast.units import UnitSystem


class TestWeatherSettings:
    def test_defaults(self, settings: WeatherSettings) -> None:
        assert settings.forecast_base_url == "https://api.open-meteo.com/v1"
        assert settings.geocoding_base_url == "https://geocoding-api.open-meteo.com/v1"
        assert settings.place_search_base_url == "https://nominatim.openstreetmap.org"
        assert settings.timeout == 10.0
        assert settings.default_units == "metric"
        assert settings.default_forecast_days == 5

    def test_env_override(self, monkeypatch) -> None:
        monkeypatch.setenv("SKYCAST_TIMEOUT", "2.5")
        monkeypatch.setenv("SKYCAST_FORECAST_BASE_URL", "http://localhost:8080/v1")
        settings = WeatherSettings(_env_file=None)
        assert settings.timeout == 2.5
        assert settings.forecast_base_url == "http://localhost:8080/v1"

    def test_frozen(self, settings: WeatherSettings) -> None:
        with pytest.raises(Exception):
            settings.timeout = 1.0  # type: ignore[misc]

    def test_forecast_days_bounds(self) -> None:
        with pytest.raises(Exception):
            WeatherSettings(_env_file=None, default_forecast_days=17)

    def test_default_units_parsed_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("SKYCAST_DEFAULT_UNITS", " Imperial ")
        settings = WeatherSettings(_env_file=None)
        assert settings.default_units is UnitSystem.IMPERIAL

    def test_unknown_default_units_rejected_at_load(self, monkeypatch) -> None:
        monkeypatch.setenv("SKYCAST_DEFAULT_UNITS", "rankine")
        with pytest.raises(PydanticValidationError, match="metric, imperial, kelvin"):
            WeatherSettings(_env_file=None)

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()
