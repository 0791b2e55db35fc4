"""Error taxonomy for the skycast client."""

from __future__ import annotations

from typing import Any


class SkycastError(Exception):
    """Base exception for all skycast errors.

    ``kind`` is the stable error identifier surfaced to callers, ``stage`` is
    the pipeline stage the request was in when it failed (set by the client).
    """

    kind = "SkycastError"

    def __init__(self, message: str) -> None:
        self.message = message
        self.stage: str | None = None
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {"errorKind": self.kind, "message": self.message}


class ValidationError(SkycastError):
    """Raised when request input has a bad shape or range."""

    kind = "ValidationError"


class InvalidCoordinatesError(ValidationError):
    """Raised when latitude/longitude fall outside their valid ranges."""

    kind = "InvalidCoordinates"


class InvalidDateFormatError(ValidationError):
    """Raised when a date is not a real YYYY-MM-DD calendar date."""

    kind = "InvalidDateFormat"


class InvalidDaysError(ValidationError):
    """Raised when the forecast day count is outside 1-16."""

    kind = "InvalidDays"


class InvalidUnitsError(ValidationError):
    """Raised when the unit system is not metric, imperial or kelvin."""

    kind = "InvalidUnits"


class LocationNotFoundError(SkycastError):
    """Raised when a geocoding provider answered with zero candidates."""

    kind = "LocationNotFound"


class UpstreamUnavailableError(SkycastError):
    """Raised when an external provider cannot serve the request."""

    kind = "UpstreamUnavailable"


class UpstreamConnectionError(UpstreamUnavailableError):
    """Raised when the client cannot connect to a provider."""


class UpstreamTimeoutError(UpstreamUnavailableError):
    """Raised when a request to a provider times out."""


_STATUS_MESSAGES = {
    400: "Invalid request parameters. Please check your input.",
    404: "The requested resource was not found at the provider.",
    429: "API rate limit exceeded. Please try again later.",
}


class UpstreamAPIError(UpstreamUnavailableError):
    """Raised when a provider returns an error response (4xx/5xx).

    The provider's response body is deliberately not part of the message.
    """

    def __init__(self, status_code: int, provider: str) -> None:
        self.status_code = status_code
        self.provider = provider
        if status_code in _STATUS_MESSAGES:
            detail = _STATUS_MESSAGES[status_code]
        elif status_code >= 500:
            detail = "Service is temporarily unavailable."
        else:
            detail = "Unexpected provider error."
        super().__init__(f"{provider} returned HTTP {status_code}: {detail}")
