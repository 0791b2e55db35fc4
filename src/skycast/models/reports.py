"""Normalized report models returned by the client."""

from __future__ import annotations

from skycast.models._base import OutputModel
from skycast.models.alerts import WeatherAlert
from skycast.models.forecast import DailyForecastEntry, HourlyForecastEntry
from skycast.models.location import LocationInfo
from skycast.models.weather import CurrentWeather, UnitLabels


class CurrentReport(OutputModel):
    location: LocationInfo
    units: UnitLabels
    current: CurrentWeather


class ForecastReport(OutputModel):
    location: LocationInfo
    units: UnitLabels
    timezone: str | None = None
    daily: list[DailyForecastEntry]
    hourly: list[HourlyForecastEntry]


class AlertReport(OutputModel):
    location: LocationInfo
    units: UnitLabels
    alerts: list[WeatherAlert]
    alert_count: int
    has_alerts: bool
    timestamp: str


WeatherReport = CurrentReport | ForecastReport | AlertReport


class ComparisonEntry(OutputModel):
    """Outcome for one location of a comparison; failures do not abort others."""

    location: str
    success: bool
    data: CurrentReport | None = None
    error: str | None = None
    error_kind: str | None = None


class ComparisonReport(OutputModel):
    comparison: list[ComparisonEntry]
    units: str
    timestamp: str

    @property
    def succeeded(self) -> list[ComparisonEntry]:
        return [entry for entry in self.comparison if entry.success]

    @property
    def failed(self) -> list[ComparisonEntry]:
        return [entry for entry in self.comparison if not entry.success]
