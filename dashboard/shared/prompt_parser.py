"""Best-effort parsing of free-text weather questions.

Turns "What's the weather in Paris, FR for 3 days in fahrenheit?" into a
WeatherRequest. This only has to be good enough for the ask box; anything it
gets wrong the user can fix in the sidebar form.
"""

from __future__ import annotations

import re

from skycast.exceptions import ValidationError
from skycast.models import RequestKind, WeatherRequest

DAYS_IN_WEEK = 7

_DAYS = re.compile(r"(\d+)\s*-?\s*days?\b", re.IGNORECASE)

# Time spans and unit words, with an optional leading preposition
_NOISE = re.compile(
    r"\b(?:(?:for|in|over|using|with)\s+)?(?:the\s+)?(?:next\s+)?"
    r"(?:\d+\s*-?\s*days?|a\s+week|this\s+week|next\s+week|week|today|tonight|tomorrow|now|"
    r"fahrenheit|celsius|kelvin|imperial|metric)(?:\s+units)?\b",
    re.IGNORECASE,
)

_PLACE = re.compile(r"\b(?:in|for|at|near)\s+(?P<place>.+)", re.IGNORECASE)
_CITY_COUNTRY = re.compile(r"^(?P<city>.+?)\s*,\s*(?P<country>[A-Za-z]{2})$")

_STOP_WORDS = {
    "what", "what's", "whats", "how", "how's", "hows", "is", "the", "show", "me",
    "weather", "forecast", "current", "conditions", "alerts", "alert", "like",
    "will", "it", "rain", "be", "today", "tomorrow", "week", "please",
}


def _kind(lower: str) -> RequestKind:
    if "alert" in lower or "warning" in lower:
        return RequestKind.ALERTS
    if "forecast" in lower or "days" in lower or "week" in lower or _DAYS.search(lower):
        return RequestKind.FORECAST
    return RequestKind.CURRENT


def _days(lower: str) -> int | None:
    match = _DAYS.search(lower)
    if match:
        return int(match.group(1))
    if "week" in lower:
        return DAYS_IN_WEEK
    return None


def _units(lower: str) -> str | None:
    if "fahrenheit" in lower or "imperial" in lower:
        return "imperial"
    if "kelvin" in lower:
        return "kelvin"
    if "celsius" in lower or "metric" in lower:
        return "metric"
    return None


def _clean(text: str) -> str:
    return text.strip().strip("?!.;:'\" ").strip()


def _place(prompt: str) -> str:
    stripped = _NOISE.sub(" ", prompt)
    match = _PLACE.search(stripped)
    if match:
        place = _clean(match.group("place"))
        if place:
            return re.sub(r"\s+", " ", place)
    # No preposition: keep the words that are not question filler
    words = [
        _clean(word)
        for word in stripped.split()
        if _clean(word) and _clean(word).lower() not in _STOP_WORDS
    ]
    return " ".join(words)


def parse_prompt(prompt: str) -> WeatherRequest:
    """Parse a free-text question into a WeatherRequest.

    Raises ValidationError when no location can be found.
    """
    lower = prompt.lower()
    kind = _kind(lower)
    place = _place(prompt)
    if not place:
        raise ValidationError(f"Could not find a location in {prompt!r}")

    country = None
    match = _CITY_COUNTRY.match(place)
    if match:
        place = match.group("city").strip()
        country = match.group("country").upper()

    return WeatherRequest(
        place,
        country=country,
        units=_units(lower),
        kind=kind.value,
        days=_days(lower) if kind is RequestKind.FORECAST else None,
    )
