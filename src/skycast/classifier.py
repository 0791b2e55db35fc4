"""Classification of free-form location strings."""

from __future__ import annotations

import re
from dataclasses import dataclass

_COORDINATES = re.compile(r"^(-?\d+(?:\.\d+)?),(-?\d+(?:\.\d+)?)$")
_POSTAL_CODE = re.compile(r"^\d+$")
_TRAILING_COUNTRY = re.compile(r"^(.+?)\s+([A-Z]{2})$")


@dataclass(frozen=True)
class Coordinates:
    """A raw ``lat,lon`` pair. Not range-checked."""

    lat: float
    lon: float


@dataclass(frozen=True)
class PostalCode:
    value: str


@dataclass(frozen=True)
class CityName:
    value: str
    country: str | None = None


LocationVariant = Coordinates | PostalCode | CityName


def classify(raw: str) -> LocationVariant:
    """Classify a location string as coordinates, a postal code or a city name.

    Rules, first match wins:
        "40.7128,-74.0060"  -> Coordinates(40.7128, -74.006)
        "10001"             -> PostalCode("10001")
        "Paris, FR"         -> CityName("Paris", "FR")   (split on first comma)
        "Paris FR"          -> CityName("Paris", "FR")   (trailing country code)
        "Paris"             -> CityName("Paris")

    Coordinates and postal codes must match the whole, untrimmed string, so
    "40.7128, -74.0060" and " 10001 " are city names. Never raises.
    """
    match = _COORDINATES.fullmatch(raw)
    if match:
        return Coordinates(lat=float(match.group(1)), lon=float(match.group(2)))

    if _POSTAL_CODE.fullmatch(raw):
        return PostalCode(value=raw)

    text = raw.strip()
    if "," in text:
        city, _, country = text.partition(",")
        return CityName(value=city.strip(), country=country.strip() or None)

    match = _TRAILING_COUNTRY.match(text)
    if match:
        return CityName(value=match.group(1).strip(), country=match.group(2))

    return CityName(value=text)
