"""Request model accepted by the client."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from skycast.exceptions import ValidationError


class RequestKind(str, Enum):
    CURRENT = "current"
    FORECAST = "forecast"
    ALERTS = "alerts"

    @classmethod
    def parse(cls, value: str | RequestKind) -> RequestKind:
        if isinstance(value, RequestKind):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValidationError(
                f"Request kind must be one of: current, forecast, alerts (got {value!r})"
            ) from None


@dataclass(frozen=True)
class WeatherRequest:
    """A single weather request for an ambiguous location string.

    Usage:
        WeatherRequest("Paris, FR")
        WeatherRequest("10001", country="US", kind="forecast", days=3)
        WeatherRequest("40.7128,-74.0060", units="imperial")

    ``units=None`` and ``days=None`` fall back to the client's settings.
    """

    location: str
    country: str | None = None
    units: str | None = None
    kind: str = RequestKind.CURRENT.value
    days: int | None = None
    start_date: str | None = None
    end_date: str | None = None
