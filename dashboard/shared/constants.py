"""Shared constants for the weather dashboard."""

from __future__ import annotations

ACCENT = "#1F77B4"

UNIT_OPTIONS = ["metric", "imperial", "kelvin"]
KIND_OPTIONS = ["current", "forecast", "alerts"]

# Daily chart series
TEMP_MAX_COLOR = "#FF7043"
TEMP_MIN_COLOR = "#42A5F5"
FEELS_LIKE_COLOR = "#BBBBBB"
PRECIP_COLOR = "#26A69A"

CONDITION_ICONS: dict[str, str] = {
    "Clear": "\u2600\ufe0f",
    "Fog": "\U0001f32b\ufe0f",
    "Drizzle": "\U0001f326\ufe0f",
    "Rain": "\U0001f327\ufe0f",
    "Snow": "\u2744\ufe0f",
    "Thunderstorm": "\u26c8\ufe0f",
    "Unknown": "\u2753",
}

COMPASS_POINTS = [
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
]

PLOTLY_LAYOUT_DEFAULTS = dict(
    paper_bgcolor="rgba(0,0,0,0)",
    plot_bgcolor="rgba(0,0,0,0)",
    font_color="#F0F0F0",
    margin=dict(l=40, r=20, t=40, b=40),
)

# Bar colors for comparison charts, cycled per location
COMPARISON_COLORS: list[str] = [
    "#00D2BE",  # teal
    "#FF8700",  # orange
    "#BF00FF",  # purple
    "#FFD700",  # gold
]
