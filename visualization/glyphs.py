"""
Present-weather symbol lookup.

Maps the concatenated weather abbreviations of a report (e.g. ``-RABR``
or ``+TSRA``) to a row of text glyphs placed left of the station.
Intensity prefixes restyle the following glyph; descriptors and
phenomena without a symbol here are skipped.  Lookup never fails:
unknown codes simply draw nothing.
"""

import logging
import xml.etree.ElementTree as ET
from typing import List, Optional, Tuple

from config import WX_COLOR, WX_GLYPH_SPACING, WX_ORIGIN

logger = logging.getLogger(__name__)

# Two-letter code -> symbol, loosely after the WMO present-weather chart
WEATHER_GLYPHS = {
    # Descriptors
    "TS": "Ϟ",    # thunderstorm
    "SH": "▽",    # shower
    "FZ": "∼",    # freezing
    # Precipitation
    "DZ": ",",
    "RA": "•",
    "SN": "*",
    "SG": "▵",
    "IC": "↔",
    "PL": "▲",
    "GR": "△",
    "GS": "▴",
    "UP": "?",
    # Obscuration
    "BR": "=",
    "FG": "≡",
    "FU": "ξ",
    "VA": "Λ",
    "DU": "S",
    "SA": "S",
    "HZ": "∞",
    "PY": "≈",
    # Other
    "PO": "§",
    "SQ": "∀",
    "FC": ")(",
    "SS": "⇒",
    "DS": "⇒",
}

INTENSITY_STYLES = {
    "-": {"fill-opacity": "0.6"},
    "+": {"font-weight": "bold"},
}


def tokenize(weather_codes: str) -> List[Tuple[Optional[str], str]]:
    """
    Split concatenated abbreviations into ``(intensity, code)`` pairs.

    ``"-RABR"`` -> ``[("-", "RA"), (None, "BR")]``.  An intensity sign
    applies to the code right after it.
    """
    tokens = []
    intensity = None
    i = 0
    while i < len(weather_codes):
        char = weather_codes[i]
        if char in INTENSITY_STYLES:
            intensity = char
            i += 1
            continue
        if char.isspace():
            i += 1
            continue
        tokens.append((intensity, weather_codes[i:i + 2]))
        intensity = None
        i += 2
    return tokens


def glyphs_for(weather_codes: str) -> ET.Element:
    """Build the ``<g id="wx">`` group for a report's weather codes."""
    group = ET.Element("g", {"id": "wx"})
    x0, y = WX_ORIGIN
    for intensity, code in tokenize(weather_codes or ""):
        symbol = WEATHER_GLYPHS.get(code)
        if symbol is None:
            logger.debug(f"No glyph for weather code {code!r}")
            continue
        index = len(group)
        attrs = {
            "id": f"wx-{index + 1}-{code}",
            "class": "wx txt",
            "fill": WX_COLOR,
            "x": str(x0 + index * WX_GLYPH_SPACING),
            "y": str(y),
            "text-anchor": "start",
        }
        attrs.update(INTENSITY_STYLES.get(intensity, {}))
        text = ET.SubElement(group, "text", attrs)
        text.text = symbol
    return group
