"""Weather dashboard: Streamlit + Plotly on top of the skycast client."""

from __future__ import annotations

import streamlit as st

from skycast.exceptions import SkycastError
from skycast.models import AlertReport, CurrentReport, ForecastReport

from shared import (
    ACCENT,
    daily_temperature_figure,
    format_condition,
    format_date,
    format_percent,
    format_value,
    format_wind,
    get_client,
    hourly_rows,
    hourly_temperature_figure,
    render_request_sidebar,
)

# ── Page config ──────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Weather",
    page_icon="\U0001f324\ufe0f",
    layout="wide",
)


# ── Sidebar ──────────────────────────────────────────────────────────────────

st.sidebar.title("Weather Dashboard")

submitted = render_request_sidebar()
if submitted is not None:
    st.session_state["request"] = submitted

request = st.session_state.get("request")
if request is None:
    st.info("Ask a question or fill in the request form in the sidebar.")
    st.stop()


# ── Fetch ────────────────────────────────────────────────────────────────────

with st.spinner("Fetching weather..."):
    try:
        report = get_client().request(request)
    except SkycastError as exc:
        st.error(f"{exc.kind}: {exc.message}")
        st.stop()


# ── Header ───────────────────────────────────────────────────────────────────

location = report.location
st.markdown(
    f"# {location.name}, {location.country}"
    f"  \n{location.coordinates.lat:.4f}, {location.coordinates.lon:.4f}"
)
st.markdown(
    f'<div style="height:4px;background:{ACCENT};border-radius:2px;'
    f'margin-bottom:1rem"></div>',
    unsafe_allow_html=True,
)
units = report.units


# ── Current conditions ───────────────────────────────────────────────────────

if isinstance(report, CurrentReport):
    current = report.current
    st.subheader(format_condition(current.weather))

    kpi1, kpi2, kpi3, kpi4 = st.columns(4)
    kpi1.metric("Temperature", format_value(current.temperature, units.temperature))
    kpi2.metric("Feels Like", format_value(current.feels_like, units.temperature))
    kpi3.metric("Humidity", format_percent(current.humidity))
    kpi4.metric("Wind", format_wind(current.wind, units.wind_speed))

    kpi5, kpi6, kpi7, kpi8 = st.columns(4)
    kpi5.metric("Pressure", format_value(current.pressure, units.pressure, digits=0))
    kpi6.metric("Cloud Cover", format_percent(current.clouds))
    kpi7.metric("Gusts", format_value(current.wind.gust, units.wind_speed))
    kpi8.metric(
        "Precipitation",
        format_value(
            current.precipitation.rain + current.precipitation.showers,
            units.precipitation,
        ),
    )
    st.caption(f"Updated {current.timestamp}")


# ── Forecast ─────────────────────────────────────────────────────────────────

elif isinstance(report, ForecastReport):
    st.subheader(f"{len(report.daily)}-Day Forecast")
    if report.timezone:
        st.caption(f"Times in {report.timezone}")

    if not report.daily:
        st.warning("No daily forecast data available.")
    else:
        st.plotly_chart(daily_temperature_figure(report), use_container_width=True)

        day_cols = st.columns(min(len(report.daily), 7))
        for col, day in zip(day_cols, report.daily):
            col.markdown(
                f"**{format_date(day.date)}**  \n{format_condition(day.weather)}"
                f"  \n{format_value(day.temperature.max, units.temperature)}"
                f" / {format_value(day.temperature.min, units.temperature)}"
            )

    st.subheader("Next 24 Hours")
    if not report.hourly:
        st.info("No hourly data available.")
    else:
        st.plotly_chart(hourly_temperature_figure(report), use_container_width=True)
        st.table(hourly_rows(report))


# ── Alerts ───────────────────────────────────────────────────────────────────

elif isinstance(report, AlertReport):
    st.subheader(f"Alerts ({report.alert_count})")
    if not report.has_alerts:
        st.success("No active weather alerts.")
    for alert in report.alerts:
        with st.expander(f"{alert.event} \u2014 {alert.severity}", expanded=True):
            st.write(alert.description)
            st.markdown(
                f"**Onset:** {alert.onset or 'unknown'}  \n"
                f"**Expires:** {alert.expires or 'unknown'}  \n"
                f"**Certainty:** {alert.certainty} | **Urgency:** {alert.urgency}"
            )
            if alert.areas:
                st.caption("Areas: " + ", ".join(alert.areas))
