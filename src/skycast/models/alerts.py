"""Weather alert model."""

from __future__ import annotations

from skycast.models._base import OutputModel


class WeatherAlert(OutputModel):
    """A single alert. Absent text fields default to sentinel strings."""

    event: str = "Weather Alert"
    description: str = "No description available"
    onset: str | None = None
    expires: str | None = None
    severity: str = "Unknown"
    certainty: str = "Unknown"
    urgency: str = "Unknown"
    areas: list[str] = []
    tags: list[str] = []
