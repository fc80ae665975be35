"""Shared fixtures for the Station Plot Renderer test suite."""

import sys
import os
import xml.etree.ElementTree as ET
import pytest

# Ensure project root is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from config import SVG_NAMESPACE
from data.decoder import DecodedObservation, Phenomenon, WindReport
from models.plot_data import PlotData

NS = {"svg": SVG_NAMESPACE}


def parse_svg(document: str) -> ET.Element:
    """Parse a rendered document back into an element tree."""
    return ET.fromstring(document)


def find_id(root: ET.Element, element_id: str):
    return root.find(f".//*[@id='{element_id}']")


def ids_in(element: ET.Element) -> list:
    return [e.get("id") for e in element.iter() if e.get("id")]


@pytest.fixture
def kxyz_plot():
    """Moderate west wind, no gust: the reference end-to-end scenario."""
    return PlotData(
        visibility=10,
        temperature=22,
        dew_point=15,
        station="KXYZ",
        wind_direction=270,
        wind_speed=12,
    )


@pytest.fixture
def gusty_plot():
    """East wind at 15 kt gusting 25 kt."""
    return PlotData(
        visibility=3.5,
        temperature=-4.5,
        dew_point=-7,
        station="KGST",
        wind_direction=90,
        wind_speed=15,
        gust_speed=25,
        weather_codes="-SN",
    )


@pytest.fixture
def full_observation():
    """A decoded record with every optional group present."""
    return DecodedObservation(
        station="KXYZ",
        visibility=10.0,
        temperature=22.0,
        dewpoint=15.0,
        wind=WindReport(direction=270.0, speed=12.0, gust=25.0),
        altimeter=1013.2,
        weather_phenomena=[Phenomenon("-RA"), Phenomenon("BR")],
    )


@pytest.fixture
def empty_observation():
    """A decoded record with every optional group absent."""
    return DecodedObservation()
