"""Shared sidebar rendering for weather requests."""

from __future__ import annotations

import datetime

import streamlit as st

from skycast.exceptions import SkycastError
from skycast.models import WeatherRequest

from .constants import KIND_OPTIONS, UNIT_OPTIONS
from .prompt_parser import parse_prompt


def _optional_date(label: str, key: str) -> str | None:
    if not st.sidebar.checkbox(f"Set {label.lower()}", key=f"{key}_enabled"):
        return None
    value = st.sidebar.date_input(label, value=datetime.date.today(), key=key)
    return value.isoformat() if value else None


def render_request_sidebar() -> WeatherRequest | None:
    """Render the ask box and request form in the sidebar.

    A submitted question wins over the form. Returns None until the user
    submits one or the other; a question that cannot be parsed shows an
    error and also returns None.
    """
    st.sidebar.subheader("Ask")
    question = st.sidebar.text_input(
        "Question",
        placeholder="What's the weather in Paris, FR for 3 days?",
    )
    if st.sidebar.button("Ask") and question.strip():
        try:
            return parse_prompt(question)
        except SkycastError as exc:
            st.sidebar.error(exc.message)
            return None

    st.sidebar.divider()
    st.sidebar.subheader("Request")
    location = st.sidebar.text_input("Location", placeholder="City, postal code or lat,lon")
    country = st.sidebar.text_input("Country (optional)", max_chars=2)
    kind = st.sidebar.selectbox("Kind", KIND_OPTIONS)
    units = st.sidebar.selectbox("Units", UNIT_OPTIONS)

    days = None
    start_date = end_date = None
    if kind == "forecast":
        days = st.sidebar.slider("Days", min_value=1, max_value=16, value=5)
        start_date = _optional_date("Start date", "start_date")
        end_date = _optional_date("End date", "end_date")

    if not st.sidebar.button("Get weather", type="primary"):
        return None
    if not location.strip():
        st.sidebar.warning("Enter a location.")
        return None

    return WeatherRequest(
        location.strip(),
        country=country.strip().upper() or None,
        units=units,
        kind=kind,
        days=days,
        start_date=start_date,
        end_date=end_date,
    )
