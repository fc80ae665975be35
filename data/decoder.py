"""
Decoder adapter for raw METAR text.

Wraps the python-metar parser and exposes the handful of groups the
station plot needs as plain dataclasses, so the rest of the code never
touches the library's unit-bearing value objects.

Parse failures are raised as ``metar.Metar.ParserError`` and are not
wrapped; ``DecodeError`` is the same class re-exported under the name
callers of this module use.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from metar import Metar

from config import (
    PRESSURE_DECIMALS,
    PRESSURE_UNITS,
    TEMPERATURE_UNITS,
    VISIBILITY_DECIMALS,
    VISIBILITY_UNITS,
    WIND_UNITS,
)

logger = logging.getLogger(__name__)

DecodeError = Metar.ParserError


@dataclass(frozen=True)
class Phenomenon:
    """One present-weather group, e.g. ``-RA`` or ``TSGR``."""

    abbreviation: str


@dataclass(frozen=True)
class WindReport:
    """Wind group.  ``direction`` is None for variable or missing direction."""

    direction: Optional[float] = None
    speed: Optional[float] = None       # knots
    gust: Optional[float] = None        # knots


@dataclass(frozen=True)
class DecodedObservation:
    """The decoded groups of one report that a station plot can use."""

    station: Optional[str] = None
    visibility: Optional[float] = None  # statute miles
    temperature: Optional[float] = None  # deg C
    dewpoint: Optional[float] = None    # deg C
    wind: WindReport = field(default_factory=WindReport)
    altimeter: Optional[float] = None   # hPa
    weather_phenomena: List[Phenomenon] = field(default_factory=list)


def _value(quantity, units: str) -> Optional[float]:
    """Read a python-metar value object in ``units``, or None if absent."""
    if quantity is None:
        return None
    return quantity.value(units)


def _rounded(value: Optional[float], ndigits: int) -> Optional[float]:
    return None if value is None else round(value, ndigits)


def _phenomena(weather: list) -> List[Phenomenon]:
    # Each group is an (intensity, descriptor, precipitation, obscuration,
    # other) tuple; unused slots are None or "".
    return [
        Phenomenon(abbreviation="".join(part for part in group if part))
        for group in weather
        if any(group)
    ]


def decode(raw: str) -> DecodedObservation:
    """
    Parse a raw METAR report.

    Args:
        raw: Report text, with or without the leading ``METAR``/``SPECI``.

    Returns:
        DecodedObservation with every group the report omitted set to None.

    Raises:
        DecodeError: If the text is not a parseable report.
    """
    obs = Metar.Metar(raw.strip())

    direction = obs.wind_dir.value() if obs.wind_dir is not None else None
    decoded = DecodedObservation(
        station=obs.station_id,
        visibility=_rounded(_value(obs.vis, VISIBILITY_UNITS), VISIBILITY_DECIMALS),
        temperature=_value(obs.temp, TEMPERATURE_UNITS),
        dewpoint=_value(obs.dewpt, TEMPERATURE_UNITS),
        wind=WindReport(
            direction=direction,
            speed=_value(obs.wind_speed, WIND_UNITS),
            gust=_value(obs.wind_gust, WIND_UNITS),
        ),
        altimeter=_rounded(_value(obs.press, PRESSURE_UNITS), PRESSURE_DECIMALS),
        weather_phenomena=_phenomena(obs.weather),
    )
    logger.debug(f"Decoded report for {decoded.station}: {decoded}")
    return decoded
