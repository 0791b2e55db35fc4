"""Location models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from skycast.models._base import OutputModel

UNKNOWN_LOCATION_NAME = "Unknown Location"
UNKNOWN_COUNTRY = "Unknown"


class ResolvedLocation(BaseModel):
    """A location resolved to range-checked coordinates."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    name: str | None = None
    country: str | None = None


class GeoPoint(OutputModel):
    lat: float
    lon: float


class LocationInfo(OutputModel):
    """Location echo included in every report."""

    name: str = UNKNOWN_LOCATION_NAME
    country: str = UNKNOWN_COUNTRY
    coordinates: GeoPoint
