"""Unit systems and their provider/display unit tokens."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from skycast.exceptions import InvalidUnitsError


class UnitSystem(str, Enum):
    """Supported unit systems."""

    METRIC = "metric"
    IMPERIAL = "imperial"
    KELVIN = "kelvin"

    @classmethod
    def parse(cls, value: str | UnitSystem) -> UnitSystem:
        if isinstance(value, UnitSystem):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidUnitsError(
                f"Units must be one of: metric, imperial, kelvin (got {value!r})"
            ) from None


@dataclass(frozen=True)
class UnitPolicy:
    """Provider unit tokens plus the labels shown next to values."""

    temperature_unit: str
    wind_speed_unit: str
    precipitation_unit: str
    temperature_label: str
    wind_speed_label: str
    precipitation_label: str
    pressure_label: str = "hPa"

    def provider_params(self) -> dict[str, str]:
        return {
            "temperature_unit": self.temperature_unit,
            "wind_speed_unit": self.wind_speed_unit,
            "precipitation_unit": self.precipitation_unit,
        }

    def labels(self) -> dict[str, str]:
        return {
            "temperature": self.temperature_label,
            "wind_speed": self.wind_speed_label,
            "precipitation": self.precipitation_label,
            "pressure": self.pressure_label,
        }


# "kelvin" asks the provider for Celsius and only relabels the temperature.
UNIT_POLICIES: dict[UnitSystem, UnitPolicy] = {
    UnitSystem.METRIC: UnitPolicy("celsius", "kmh", "mm", "°C", "km/h", "mm"),
    UnitSystem.IMPERIAL: UnitPolicy("fahrenheit", "mph", "inch", "°F", "mph", "in"),
    UnitSystem.KELVIN: UnitPolicy("celsius", "kmh", "mm", "K", "km/h", "mm"),
}


def policy_for(units: str | UnitSystem) -> UnitPolicy:
    """Return the unit policy for a unit system name."""
    return UNIT_POLICIES[UnitSystem.parse(units)]
