"""
Station Plot Renderer - Streamlit Interface.

Run with:  streamlit run main.py
"""

import sys
import os

# Ensure the project root is on the Python path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import streamlit as st
import streamlit.components.v1 as components

from data.decoder import DecodeError
from data.extractor import extract
from models.plot_data import display_text
from utils.logger_setup import setup_logging
from visualization.station_plot import render

logger = setup_logging()

EXAMPLE_REPORT = "METAR KXYZ 191853Z 27012G25KT 10SM -RA BR FEW040 22/15 Q1013"

# ── Page Config ──────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Station Plot Renderer",
    page_icon="🌬️",
    layout="wide",
)

st.title("Station Plot Renderer")
st.markdown(
    "Turns a raw METAR report into a standard station-plot diagram: "
    "temperature, dew point, visibility, present weather and a wind barb "
    "with the gust drawn in red."
)

# ── Sidebar ──────────────────────────────────────────────────────────────────

st.sidebar.header("Output Size")
width = st.sidebar.text_input("Width (CSS)", value="400px")
height = st.sidebar.text_input("Height (CSS)", value="400px")

# ── Report Input ─────────────────────────────────────────────────────────────

raw_report = st.text_area("Raw METAR", value=EXAMPLE_REPORT, height=80)

if raw_report.strip():
    try:
        plot = extract(raw_report)
    except DecodeError as e:
        logger.error(f"Could not decode report {raw_report!r}: {e}")
        st.error(f"Could not decode report: {e}")
        st.stop()

    svg = render(plot, width, height)

    col_plot, col_values = st.columns([2, 1])
    with col_plot:
        components.html(svg, height=420)
    with col_values:
        st.subheader("Decoded values")
        st.table({
            "Field": [
                "Station", "Visibility (SM)", "Temperature (°C)", "Dew point (°C)",
                "Wind direction (°)", "Wind speed (kt)", "Gust (kt)",
                "Pressure (encoded)", "Weather",
            ],
            "Value": [
                display_text(plot.station),
                display_text(plot.visibility),
                display_text(plot.temperature),
                display_text(plot.dew_point),
                "" if plot.is_calm else display_text(plot.wind_direction),
                display_text(plot.wind_speed),
                display_text(plot.gust_speed),
                display_text(plot.pressure),
                plot.weather_codes,
            ],
        })
        st.download_button(
            "Download SVG",
            data=svg,
            file_name=f"{plot.station or 'station'}.svg",
            mime="image/svg+xml",
        )
