"""Plotly figures for forecast and comparison reports."""

from __future__ import annotations

import plotly.graph_objects as go

from skycast.models import ComparisonReport, ForecastReport

from .constants import (
    COMPARISON_COLORS,
    FEELS_LIKE_COLOR,
    PLOTLY_LAYOUT_DEFAULTS,
    PRECIP_COLOR,
    TEMP_MAX_COLOR,
    TEMP_MIN_COLOR,
)
from .formatters import format_date, format_hour

_LEGEND = dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1)


def daily_temperature_figure(report: ForecastReport) -> go.Figure:
    """High/low lines per day with precipitation probability bars behind them."""
    days = report.daily
    labels = [format_date(d.date) for d in days]
    unit = report.units.temperature

    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=labels,
        y=[d.precipitation.probability for d in days],
        name="Precip. chance",
        marker_color=PRECIP_COLOR,
        opacity=0.35,
        yaxis="y2",
        hovertemplate="%{y:.0f}%<extra></extra>",
    ))
    fig.add_trace(go.Scatter(
        x=labels,
        y=[d.temperature.max for d in days],
        mode="lines+markers",
        name="High",
        line=dict(color=TEMP_MAX_COLOR, width=2),
        hovertemplate=f"High %{{y:.1f}} {unit}<extra></extra>",
    ))
    fig.add_trace(go.Scatter(
        x=labels,
        y=[d.temperature.min for d in days],
        mode="lines+markers",
        name="Low",
        line=dict(color=TEMP_MIN_COLOR, width=2),
        hovertemplate=f"Low %{{y:.1f}} {unit}<extra></extra>",
    ))
    fig.add_trace(go.Scatter(
        x=labels,
        y=[d.temperature.feels_like_max for d in days],
        mode="lines",
        name="Feels like (high)",
        line=dict(color=FEELS_LIKE_COLOR, width=1, dash="dash"),
        hovertemplate=f"Feels like %{{y:.1f}} {unit}<extra></extra>",
    ))

    fig.update_layout(
        **PLOTLY_LAYOUT_DEFAULTS,
        yaxis=dict(title=f"Temperature ({unit})"),
        yaxis2=dict(title="Precip. chance (%)", overlaying="y", side="right", range=[0, 100], showgrid=False),
        legend=_LEGEND,
        height=400,
    )
    return fig


def hourly_temperature_figure(report: ForecastReport) -> go.Figure:
    hours = report.hourly
    unit = report.units.temperature
    x = [format_hour(h.timestamp) for h in hours]

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=x,
        y=[h.temperature.current for h in hours],
        mode="lines",
        name="Temperature",
        line=dict(color=TEMP_MAX_COLOR, width=2),
        hovertemplate=f"%{{x}}<br>%{{y:.1f}} {unit}<extra></extra>",
    ))
    fig.add_trace(go.Scatter(
        x=x,
        y=[h.temperature.feels_like for h in hours],
        mode="lines",
        name="Feels like",
        line=dict(color=FEELS_LIKE_COLOR, width=1, dash="dot"),
        hovertemplate=f"%{{x}}<br>%{{y:.1f}} {unit}<extra></extra>",
    ))
    fig.update_layout(
        **PLOTLY_LAYOUT_DEFAULTS,
        xaxis_title="Hour",
        yaxis_title=f"Temperature ({unit})",
        legend=_LEGEND,
        height=300,
    )
    return fig


def comparison_figure(report: ComparisonReport) -> go.Figure:
    """Current temperature per successfully fetched location.

    Failed locations are left out of the chart; the table still lists them.
    """
    entries = [e for e in report.succeeded if e.data is not None]
    unit = entries[0].data.units.temperature if entries else ""

    fig = go.Figure()
    for i, entry in enumerate(entries):
        color = COMPARISON_COLORS[i % len(COMPARISON_COLORS)]
        current = entry.data.current
        fig.add_trace(go.Bar(
            x=[entry.location],
            y=[current.temperature],
            name=entry.location,
            marker_color=color,
            text=[current.weather.description],
            textposition="outside",
            hovertemplate=f"{entry.location}<br>%{{y:.1f}} {unit}<extra></extra>",
        ))
        fig.add_trace(go.Scatter(
            x=[entry.location],
            y=[current.feels_like],
            mode="markers",
            name=f"{entry.location} feels like",
            marker=dict(size=12, color="rgba(0,0,0,0)", line=dict(color=color, width=2), symbol="diamond-open"),
            showlegend=False,
            hovertemplate=f"Feels like %{{y:.1f}} {unit}<extra></extra>",
        ))

    fig.update_layout(
        **PLOTLY_LAYOUT_DEFAULTS,
        yaxis_title=f"Temperature ({unit})" if unit else "Temperature",
        showlegend=False,
        height=400,
    )
    return fig
