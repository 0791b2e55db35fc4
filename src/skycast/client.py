"""Public client classes: classify, resolve, fetch and normalize weather requests."""

from __future__ import annotations

import asyncio
import uuid
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum
from typing import Any, cast

from skycast._http import AsyncTransport, SyncTransport
from skycast._logging import log_pipeline_call, log_stage
from skycast.classifier import Coordinates, LocationVariant, classify
from skycast.config import WeatherSettings, get_settings
from skycast.exceptions import (
    InvalidCoordinatesError,
    SkycastError,
    UpstreamUnavailableError,
    ValidationError,
)
from skycast.fetcher import AsyncWeatherFetcher, WeatherFetcher, validate_date_range, validate_days
from skycast.geocoding import (
    GEOCODING_PROVIDER,
    PLACE_SEARCH_PROVIDER,
    AsyncGeocodingResolver,
    GeocodingResolver,
)
from skycast.models.location import ResolvedLocation
from skycast.models.reports import (
    AlertReport,
    ComparisonEntry,
    ComparisonReport,
    CurrentReport,
    ForecastReport,
    WeatherReport,
)
from skycast.models.request import RequestKind, WeatherRequest
from skycast.normalizer import normalize_alerts, normalize_current, normalize_forecast
from skycast.units import UnitSystem

FORECAST_PROVIDER = "weather provider"


class PipelineStage(str, Enum):
    """States a request moves through; FAILED is reachable from any of them."""

    RECEIVED = "received"
    CLASSIFIED = "classified"
    RESOLVING = "resolving"
    RESOLVED = "resolved"
    FETCHING = "fetching"
    NORMALIZING = "normalizing"
    DONE = "done"
    FAILED = "failed"


class _Trace:
    """Tracks and logs the stage of one request."""

    def __init__(self) -> None:
        self.request_id = uuid.uuid4().hex[:8]
        self.stage = PipelineStage.RECEIVED
        log_stage(self.request_id, self.stage.value)

    def advance(self, stage: PipelineStage, detail: str = "") -> None:
        self.stage = stage
        log_stage(self.request_id, stage.value, detail)

    def fail(self, error: SkycastError) -> None:
        error.stage = self.stage.value
        log_stage(self.request_id, PipelineStage.FAILED.value, f"{error.kind} during {self.stage.value}")


@dataclass(frozen=True)
class _Plan:
    """A validated, classified request. Built before any network call."""

    variant: LocationVariant
    country: str | None
    units: UnitSystem
    kind: RequestKind
    days: int
    start_date: str | None
    end_date: str | None


def _plan(request: WeatherRequest, settings: WeatherSettings) -> _Plan:
    if not isinstance(request.location, str) or not request.location.strip():
        raise ValidationError("A location (city, postal code or lat,lon) is required")
    kind = RequestKind.parse(request.kind)
    units = UnitSystem.parse(request.units or settings.default_units)
    days = validate_days(request.days) if request.days is not None else settings.default_forecast_days
    start_date, end_date = validate_date_range(request.start_date or None, request.end_date or None)
    country = request.country.strip() if request.country and request.country.strip() else None
    return _Plan(
        variant=classify(request.location),
        country=country,
        units=units,
        kind=kind,
        days=days,
        start_date=start_date,
        end_date=end_date,
    )


def _coordinates_location(coords: Coordinates) -> ResolvedLocation:
    if not -90 <= coords.lat <= 90:
        raise InvalidCoordinatesError(f"Latitude must be between -90 and 90 (got {coords.lat})")
    if not -180 <= coords.lon <= 180:
        raise InvalidCoordinatesError(f"Longitude must be between -180 and 180 (got {coords.lon})")
    return ResolvedLocation(latitude=coords.lat, longitude=coords.lon)


def _normalize(plan: _Plan, raw: Any, location: ResolvedLocation) -> WeatherReport:
    if plan.kind is RequestKind.FORECAST:
        return normalize_forecast(raw, plan.days, location, plan.units)
    if plan.kind is RequestKind.ALERTS:
        return normalize_alerts(raw, location, plan.units)
    return normalize_current(raw, location, plan.units)


def _unexpected(exc: Exception) -> UpstreamUnavailableError:
    return UpstreamUnavailableError(f"Weather service error: {type(exc).__name__}")


def _comparison_inputs(
    locations: Sequence[str],
    countries: Sequence[str | None] | None,
    units: str | None,
    settings: WeatherSettings,
) -> tuple[list[str | None], UnitSystem]:
    if not locations:
        raise ValidationError("At least one location is required for a comparison")
    padded = list(countries or [])[: len(locations)]
    padded += [None] * (len(locations) - len(padded))
    return padded, UnitSystem.parse(units or settings.default_units)


def _comparison_entry(location: str, result: CurrentReport | SkycastError) -> ComparisonEntry:
    if isinstance(result, SkycastError):
        return ComparisonEntry(location=location, success=False, error=result.message, error_kind=result.kind)
    return ComparisonEntry(location=location, success=True, data=result)


class WeatherClient:
    """Synchronous weather client.

    Usage:
        with WeatherClient() as client:
            report = client.current("Paris, FR")
            forecast = client.forecast("10001", country="US", days=3)
            payload = client.respond(WeatherRequest("40.7128,-74.0060"))

    Failures raise a SkycastError subclass whose ``kind`` is one of the
    public error kinds; ``respond`` turns them into ``{errorKind, message}``.
    """

    def __init__(self, settings: WeatherSettings | None = None) -> None:
        self._settings = settings or get_settings()
        s = self._settings
        self._forecast = SyncTransport(s.forecast_base_url, FORECAST_PROVIDER, s.timeout, s.user_agent)
        self._place_search = SyncTransport(s.place_search_base_url, PLACE_SEARCH_PROVIDER, s.timeout, s.user_agent)
        self._geocoding = SyncTransport(s.geocoding_base_url, GEOCODING_PROVIDER, s.timeout, s.user_agent)
        self._resolver = GeocodingResolver(self._place_search, self._geocoding)
        self._fetcher = WeatherFetcher(self._forecast)

    def __enter__(self) -> WeatherClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    @property
    def settings(self) -> WeatherSettings:
        return self._settings

    def close(self) -> None:
        """Close the underlying HTTP connections."""
        self._forecast.close()
        self._place_search.close()
        self._geocoding.close()

    def _fetch(self, plan: _Plan, location: ResolvedLocation) -> Any:
        lat, lon = location.latitude, location.longitude
        if plan.kind is RequestKind.FORECAST:
            return self._fetcher.fetch_forecast(lat, lon, plan.days, plan.units, plan.start_date, plan.end_date)
        if plan.kind is RequestKind.ALERTS:
            return self._fetcher.fetch_alerts(lat, lon)
        return self._fetcher.fetch_current(lat, lon, plan.units)

    @log_pipeline_call
    def request(self, request: WeatherRequest) -> WeatherReport:
        """Run one request through classify, resolve, fetch and normalize."""
        trace = _Trace()
        try:
            plan = _plan(request, self._settings)
            trace.advance(PipelineStage.CLASSIFIED, type(plan.variant).__name__)
            if isinstance(plan.variant, Coordinates):
                location = _coordinates_location(plan.variant)
            else:
                trace.advance(PipelineStage.RESOLVING)
                location = self._resolver.resolve(plan.variant, plan.country)
            trace.advance(PipelineStage.RESOLVED)
            trace.advance(PipelineStage.FETCHING, plan.kind.value)
            raw = self._fetch(plan, location)
            trace.advance(PipelineStage.NORMALIZING)
            report = _normalize(plan, raw, location)
            trace.advance(PipelineStage.DONE)
            return report
        except SkycastError as exc:
            trace.fail(exc)
            raise
        except Exception as exc:
            error = _unexpected(exc)
            trace.fail(error)
            raise error from exc

    def respond(self, request: WeatherRequest) -> dict[str, Any]:
        """Return the report as a camelCase dict, or ``{errorKind, message}``."""
        try:
            return self.request(request).to_dict()
        except SkycastError as exc:
            return exc.to_dict()

    def current(self, location: str, country: str | None = None, units: str | None = None) -> CurrentReport:
        """Get current conditions for a city, postal code or ``lat,lon``."""
        request = WeatherRequest(location, country=country, units=units, kind=RequestKind.CURRENT.value)
        return cast(CurrentReport, self.request(request))

    def forecast(
        self,
        location: str,
        country: str | None = None,
        days: int | None = None,
        units: str | None = None,
        start_date: str | None = None,
        end_date: str | None = None,
    ) -> ForecastReport:
        """Get a daily forecast (1-16 days) plus the first 24 forecast hours."""
        request = WeatherRequest(
            location,
            country=country,
            units=units,
            kind=RequestKind.FORECAST.value,
            days=days,
            start_date=start_date,
            end_date=end_date,
        )
        return cast(ForecastReport, self.request(request))

    def alerts(self, location: str, country: str | None = None) -> AlertReport:
        """Get weather alerts for a location."""
        request = WeatherRequest(location, country=country, kind=RequestKind.ALERTS.value)
        return cast(AlertReport, self.request(request))

    def _compare_one(self, location: str, country: str | None, units: UnitSystem) -> ComparisonEntry:
        try:
            result: CurrentReport | SkycastError = self.current(location, country, units.value)
        except SkycastError as exc:
            result = exc
        return _comparison_entry(location, result)

    @log_pipeline_call
    def compare(
        self,
        locations: Sequence[str],
        countries: Sequence[str | None] | None = None,
        units: str | None = None,
    ) -> ComparisonReport:
        """Fetch current weather for several locations concurrently.

        One location failing never aborts the others: every location gets an
        entry tagged ``success`` True or False.
        """
        padded, unit_system = _comparison_inputs(locations, countries, units, self._settings)
        workers = min(len(locations), self._settings.compare_max_workers)
        with ThreadPoolExecutor(max_workers=workers) as pool:
            entries = list(pool.map(self._compare_one, locations, padded, [unit_system] * len(locations)))
        return ComparisonReport(
            comparison=entries,
            units=unit_system.value,
            timestamp=datetime.now(UTC).isoformat(),
        )


class AsyncWeatherClient:
    """Asynchronous weather client.

    Usage:
        async with AsyncWeatherClient() as client:
            report = await client.current("Paris, FR")
            comparison = await client.compare(["Miami", "Seattle", "10001"])
    """

    def __init__(self, settings: WeatherSettings | None = None) -> None:
        self._settings = settings or get_settings()
        s = self._settings
        self._forecast = AsyncTransport(s.forecast_base_url, FORECAST_PROVIDER, s.timeout, s.user_agent)
        self._place_search = AsyncTransport(s.place_search_base_url, PLACE_SEARCH_PROVIDER, s.timeout, s.user_agent)
        self._geocoding = AsyncTransport(s.geocoding_base_url, GEOCODING_PROVIDER, s.timeout, s.user_agent)
        self._resolver = AsyncGeocodingResolver(self._place_search, self._geocoding)
        self._fetcher = AsyncWeatherFetcher(self._forecast)

    async def __aenter__(self) -> AsyncWeatherClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    @property
    def settings(self) -> WeatherSettings:
        return self._settings

    async def close(self) -> None:
        """Close the underlying HTTP connections."""
        await self._forecast.close()
        await self._place_search.close()
        await self._geocoding.close()

    async def _fetch(self, plan: _Plan, location: ResolvedLocation) -> Any:
        lat, lon = location.latitude, location.longitude
        if plan.kind is RequestKind.FORECAST:
            return await self._fetcher.fetch_forecast(lat, lon, plan.days, plan.units, plan.start_date, plan.end_date)
        if plan.kind is RequestKind.ALERTS:
            return await self._fetcher.fetch_alerts(lat, lon)
        return await self._fetcher.fetch_current(lat, lon, plan.units)

    @log_pipeline_call
    async def request(self, request: WeatherRequest) -> WeatherReport:
        """Run one request through classify, resolve, fetch and normalize."""
        trace = _Trace()
        try:
            plan = _plan(request, self._settings)
            trace.advance(PipelineStage.CLASSIFIED, type(plan.variant).__name__)
            if isinstance(plan.variant, Coordinates):
                location = _coordinates_location(plan.variant)
            else:
                trace.advance(PipelineStage.RESOLVING)
                location = await self._resolver.resolve(plan.variant, plan.country)
            trace.advance(PipelineStage.RESOLVED)
            trace.advance(PipelineStage.FETCHING, plan.kind.value)
            raw = await self._fetch(plan, location)
            trace.advance(PipelineStage.NORMALIZING)
            report = _normalize(plan, raw, location)
            trace.advance(PipelineStage.DONE)
            return report
        except SkycastError as exc:
            trace.fail(exc)
            raise
        except Exception as exc:
            error = _unexpected(exc)
            trace.fail(error)
            raise error from exc

    async def respond(self, request: WeatherRequest) -> dict[str, Any]:
        """Return the report as a camelCase dict, or ``{errorKind, message}``."""
        try:
            report = await self.request(request)
        except SkycastError as exc:
            return exc.to_dict()
        return report.to_dict()

    async def current(self, location: str, country: str | None = None, units: str | None = None) -> CurrentReport:
        request = WeatherRequest(location, country=country, units=units, kind=RequestKind.CURRENT.value)
        return cast(CurrentReport, await self.request(request))

    async def forecast(
        self,
        location: str,
        country: str | None = None,
        days: int | None = None,
        units: str | None = None,
        start_date: str | None = None,
        end_date: str | None = None,
    ) -> ForecastReport:
        request = WeatherRequest(
            location,
            country=country,
            units=units,
            kind=RequestKind.FORECAST.value,
            days=days,
            start_date=start_date,
            end_date=end_date,
        )
        return cast(ForecastReport, await self.request(request))

    async def alerts(self, location: str, country: str | None = None) -> AlertReport:
        request = WeatherRequest(location, country=country, kind=RequestKind.ALERTS.value)
        return cast(AlertReport, await self.request(request))

    async def _compare_one(self, location: str, country: str | None, units: UnitSystem) -> ComparisonEntry:
        try:
            result: CurrentReport | SkycastError = await self.current(location, country, units.value)
        except SkycastError as exc:
            result = exc
        return _comparison_entry(location, result)

    @log_pipeline_call
    async def compare(
        self,
        locations: Sequence[str],
        countries: Sequence[str | None] | None = None,
        units: str | None = None,
    ) -> ComparisonReport:
        """Fetch current weather for several locations concurrently."""
        padded, unit_system = _comparison_inputs(locations, countries, units, self._settings)
        entries = await asyncio.gather(
            *(self._compare_one(loc, country, unit_system) for loc, country in zip(locations, padded))
        )
        return ComparisonReport(
            comparison=list(entries),
            units=unit_system.value,
            timestamp=datetime.now(UTC).isoformat(),
        )
