"""Configuration settings for the skycast client."""

from __future__ import annotations

import functools

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from skycast.exceptions import InvalidUnitsError
from skycast.units import UnitSystem


class WeatherSettings(BaseSettings):
    """Provider endpoints and request defaults.

    Read from ``SKYCAST_*`` environment variables (or a ``.env`` file) once,
    then passed to a client at construction. Instances are immutable.
    """

    model_config = SettingsConfigDict(
        env_prefix="SKYCAST_",
        env_file=".env",
        extra="ignore",
        frozen=True,
    )

    forecast_base_url: str = "https://api.open-meteo.com/v1"
    geocoding_base_url: str = "https://geocoding-api.open-meteo.com/v1"
    place_search_base_url: str = "https://nominatim.openstreetmap.org"
    timeout: float = Field(default=10.0, gt=0)
    default_units: UnitSystem = UnitSystem.METRIC
    default_forecast_days: int = Field(default=5, ge=1, le=16)
    user_agent: str = "skycast/0.1.0"
    compare_max_workers: int = Field(default=8, ge=1)

    @field_validator("default_units", mode="before")
    @classmethod
    def parse_default_units(cls, value: str | UnitSystem) -> UnitSystem:
        try:
            return UnitSystem.parse(value)
        except InvalidUnitsError as exc:
            raise ValueError(str(exc)) from None


@functools.lru_cache(maxsize=1)
def get_settings() -> WeatherSettings:
    """Return the process-wide settings instance."""
    return WeatherSettings()
