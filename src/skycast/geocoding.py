"""Resolution of postal codes and city names to coordinates."""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import TypeAdapter

from skycast._http import AsyncTransport, SyncTransport
from skycast._logging import log_provider_call
from skycast._params import build_query_params
from skycast.classifier import CityName, PostalCode
from skycast.exceptions import LocationNotFoundError, UpstreamUnavailableError
from skycast.models.geocoding import GeocodingResult, PlaceSearchResult
from skycast.models.location import ResolvedLocation

PLACE_SEARCH_PROVIDER = "place search provider"
GEOCODING_PROVIDER = "geocoding provider"

T = TypeVar("T")


def _validate_list(model_type: type[T], data: Any, provider: str) -> list[T]:
    """Validate a list of candidate dicts against a Pydantic model."""
    try:
        adapter = TypeAdapter(list[model_type])
        return adapter.validate_python(data)
    except Exception as exc:
        raise UpstreamUnavailableError(
            f"Unexpected {model_type.__name__} payload from {provider}"
        ) from exc


def _to_resolved(
    latitude: float,
    longitude: float,
    name: str | None,
    country: str | None,
    provider: str,
) -> ResolvedLocation:
    try:
        return ResolvedLocation(latitude=latitude, longitude=longitude, name=name, country=country)
    except ValueError as exc:
        raise UpstreamUnavailableError(f"{provider} returned out-of-range coordinates") from exc


def city_search_params(name: str, country: str | None = None) -> list[tuple[str, str]]:
    query = f"{name}, {country}" if country else name
    return build_query_params(q=query, format="json", limit=1, addressdetails=1)


def postal_search_params(code: str, country: str | None = None) -> list[tuple[str, str]]:
    return build_query_params(name=code, count=1, language="en", countryCode=country)


def parse_city_results(data: Any, name: str, country: str | None = None) -> ResolvedLocation:
    """Take the first place-search candidate; an empty list is LocationNotFound."""
    if not data:
        raise LocationNotFoundError(f"Location not found: {name!r}. Please check the city name.")
    candidates = _validate_list(PlaceSearchResult, data, PLACE_SEARCH_PROVIDER)
    top = candidates[0]
    return _to_resolved(
        top.lat,
        top.lon,
        top.place_name() or name,
        top.country_name() or country,
        PLACE_SEARCH_PROVIDER,
    )


def parse_postal_results(data: Any, code: str, country: str | None = None) -> ResolvedLocation:
    """Take the first structured-geocoder candidate; no results is LocationNotFound."""
    results = data.get("results") if isinstance(data, dict) else None
    if not results:
        raise LocationNotFoundError(f"Location not found: {code!r}. Please check the postal code.")
    candidates = _validate_list(GeocodingResult, results, GEOCODING_PROVIDER)
    top = candidates[0]
    return _to_resolved(
        top.latitude,
        top.longitude,
        top.name or code,
        top.country or top.country_code or country,
        GEOCODING_PROVIDER,
    )


class GeocodingResolver:
    """Resolves postal codes and city names using two geocoding providers.

    Usage:
        resolver = GeocodingResolver(place_search_transport, geocoding_transport)
        paris = resolver.resolve_city("Paris", "FR")
        nyc = resolver.resolve_postal_code("10001", "US")

    The first candidate always wins; there is no disambiguation.
    """

    def __init__(self, place_search: SyncTransport, geocoding: SyncTransport) -> None:
        self._place_search = place_search
        self._geocoding = geocoding

    @log_provider_call
    def resolve_city(self, name: str, country: str | None = None) -> ResolvedLocation:
        data = self._place_search.get("/search", city_search_params(name, country))
        return parse_city_results(data, name, country)

    @log_provider_call
    def resolve_postal_code(self, code: str, country: str | None = None) -> ResolvedLocation:
        data = self._geocoding.get("/search", postal_search_params(code, country))
        return parse_postal_results(data, code, country)

    def resolve(self, location: PostalCode | CityName, country: str | None = None) -> ResolvedLocation:
        """Dispatch on the classified variant; ``country`` overrides a parsed one."""
        if isinstance(location, PostalCode):
            return self.resolve_postal_code(location.value, country)
        return self.resolve_city(location.value, country or location.country)


class AsyncGeocodingResolver:
    """Asynchronous counterpart of GeocodingResolver."""

    def __init__(self, place_search: AsyncTransport, geocoding: AsyncTransport) -> None:
        self._place_search = place_search
        self._geocoding = geocoding

    @log_provider_call
    async def resolve_city(self, name: str, country: str | None = None) -> ResolvedLocation:
        data = await self._place_search.get("/search", city_search_params(name, country))
        return parse_city_results(data, name, country)

    @log_provider_call
    async def resolve_postal_code(self, code: str, country: str | None = None) -> ResolvedLocation:
        data = await self._geocoding.get("/search", postal_search_params(code, country))
        return parse_postal_results(data, code, country)

    async def resolve(self, location: PostalCode | CityName, country: str | None = None) -> ResolvedLocation:
        if isinstance(location, PostalCode):
            return await self.resolve_postal_code(location.value, country)
        return await self.resolve_city(location.value, country or location.country)
