"""Process-wide weather client for the dashboard.

Only the client object is cached; every report is fetched fresh.
"""

from __future__ import annotations

import streamlit as st

from skycast import WeatherClient


@st.cache_resource(show_spinner=False)
def get_client() -> WeatherClient:
    return WeatherClient()
