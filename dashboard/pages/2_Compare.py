"""Compare current weather across several locations side-by-side."""

from __future__ import annotations

import streamlit as st

from skycast.exceptions import SkycastError

from shared import (
    UNIT_OPTIONS,
    comparison_figure,
    comparison_rows,
    get_client,
)

# ── Page config ──────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Weather Comparison",
    page_icon="\U0001f324\ufe0f",
    layout="wide",
)

# ── Sidebar ──────────────────────────────────────────────────────────────────

st.sidebar.title("Compare Locations")

raw_locations = st.sidebar.text_area(
    "Locations (one per line)",
    value="New York\nLondon, GB\n40.7128,-74.0060",
    height=150,
)
units = st.sidebar.selectbox("Units", UNIT_OPTIONS)

locations = [line.strip() for line in raw_locations.splitlines() if line.strip()]
if not locations:
    st.sidebar.warning("Enter at least one location.")
    st.stop()

if not st.sidebar.button("Compare", type="primary"):
    st.info("Enter locations and press Compare.")
    st.stop()


# ── Fetch ────────────────────────────────────────────────────────────────────

with st.spinner(f"Fetching weather for {len(locations)} locations..."):
    try:
        report = get_client().compare(locations, units=units)
    except SkycastError as exc:
        st.error(f"{exc.kind}: {exc.message}")
        st.stop()


# ── Results ──────────────────────────────────────────────────────────────────

st.markdown(f"# Comparison ({report.units})")

kpi1, kpi2 = st.columns(2)
kpi1.metric("Succeeded", len(report.succeeded))
kpi2.metric("Failed", len(report.failed))

if report.succeeded:
    st.plotly_chart(comparison_figure(report), use_container_width=True)
else:
    st.warning("No location could be fetched.")

st.table(comparison_rows(report))

for entry in report.failed:
    st.caption(f"{entry.location}: {entry.error}")
