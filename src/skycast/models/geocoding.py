"""Geocoding provider candidate models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class PlaceSearchResult(BaseModel):
    """Free-text place search candidate (Nominatim ``/search``).

    Nominatim returns coordinates as strings; pydantic coerces them to float.
    """

    model_config = ConfigDict(frozen=True)

    lat: float
    lon: float
    name: str | None = None
    display_name: str | None = None
    address: dict[str, Any] | None = None

    def place_name(self) -> str | None:
        address = self.address or {}
        for key in ("city", "town", "village", "municipality", "hamlet", "county", "state"):
            if address.get(key):
                return str(address[key])
        if self.name:
            return self.name
        if self.display_name:
            return self.display_name.split(",")[0].strip()
        return None

    def country_name(self) -> str | None:
        address = self.address or {}
        country = address.get("country")
        return str(country) if country else None


class GeocodingResult(BaseModel):
    """Structured geocoder candidate (Open-Meteo geocoding ``/search``)."""

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float
    name: str | None = None
    country: str | None = None
    country_code: str | None = None
    admin1: str | None = None
    timezone: str | None = None
    postcodes: list[str] | None = None
