"""Shared dashboard utilities."""

# --- Constants & formatting ---
from .constants import (
    ACCENT,
    COMPARISON_COLORS,
    CONDITION_ICONS,
    KIND_OPTIONS,
    PLOTLY_LAYOUT_DEFAULTS,
    UNIT_OPTIONS,
)
from .formatters import (
    comparison_rows,
    compass,
    format_condition,
    format_date,
    format_hour,
    format_percent,
    format_value,
    format_wind,
    hourly_rows,
)

# --- Charts ---
from .charts import comparison_figure, daily_temperature_figure, hourly_temperature_figure

# --- Requests ---
from .client import get_client
from .prompt_parser import parse_prompt

# --- UI components ---
from .sidebar import render_request_sidebar

__all__ = [
    "ACCENT",
    "COMPARISON_COLORS",
    "CONDITION_ICONS",
    "KIND_OPTIONS",
    "PLOTLY_LAYOUT_DEFAULTS",
    "UNIT_OPTIONS",
    "compass",
    "comparison_figure",
    "comparison_rows",
    "daily_temperature_figure",
    "format_condition",
    "format_date",
    "format_hour",
    "format_percent",
    "format_value",
    "format_wind",
    "get_client",
    "hourly_rows",
    "hourly_temperature_figure",
    "parse_prompt",
    "render_request_sidebar",
]
