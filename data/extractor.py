"""
Observation extractor.

Projects a decoded report onto the flat PlotData the renderer consumes.
The projection never validates ranges and never substitutes zero for a
missing group; the only failure is the decoder's own parse error, which
propagates unchanged.
"""

import logging
import re
from typing import Optional, Union

from data.decoder import DecodedObservation, decode
from models.plot_data import PlotData, display_text

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_leading_int(text: str) -> Optional[int]:
    """Parse the leading decimal digits of ``text``; None if there are none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


def encode_pressure(altimeter: Optional[float]) -> Optional[Union[int, str]]:
    """
    Encode an altimeter reading for display on the plot.

    The decimal separator and the leading digit are dropped and the
    remaining digits read as an integer::

        1013.2 -> "10132" -> "0132" -> 132
        30.12  -> "3012"  -> "012"  -> 12

    Args:
        altimeter: Reading with its decimal point, or None if not reported.

    Returns:
        The encoded integer, None when no reading was reported, or the
        leftover text itself when it holds no digits to parse.
    """
    if altimeter is None:
        return None
    digits = display_text(altimeter).replace(".", "")[1:]
    encoded = parse_leading_int(digits)
    if encoded is None:
        logger.debug(f"Pressure {altimeter!r} left no digits to encode")
        return digits
    return encoded


def plot_data_from_observation(decoded: DecodedObservation) -> PlotData:
    """Project a decoded observation onto PlotData."""
    wind = decoded.wind
    direction = wind.direction
    if isinstance(direction, bool) or not isinstance(direction, (int, float)):
        # Variable ("VRB") or missing direction
        direction = None

    plot = PlotData(
        visibility=decoded.visibility,
        temperature=decoded.temperature,
        dew_point=decoded.dewpoint,
        station=decoded.station,
        wind_direction=direction,
        wind_speed=wind.speed,
        gust_speed=wind.gust,
        pressure=encode_pressure(decoded.altimeter),
        weather_codes="".join(p.abbreviation for p in decoded.weather_phenomena),
    )
    logger.debug(f"Extracted plot data: {plot}")
    return plot


def extract(raw_observation: str) -> PlotData:
    """
    Decode a raw METAR report and project it onto PlotData.

    Raises:
        DecodeError: Propagated unchanged from the decoder.
    """
    return plot_data_from_observation(decode(raw_observation))
