"""
Station plot renderer.

Assembles the complete SVG document for one observation: the wind barb
(or calm circle), the present-weather glyphs and five fixed-position text
fields, on a 500 x 500 logical canvas centred on the station at
(250, 250).  The caller's width/height only size the outer box.

The document is built as an element tree and serialized once, so equal
PlotData always yields byte-identical output.
"""

import logging
import xml.etree.ElementTree as ET

from config import (
    CANVAS_SIZE,
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    FONT_SIZE_PX,
    SVG_NAMESPACE,
    TEXT_COLOR,
    TEXT_POSITIONS,
)
from data.extractor import extract
from models.plot_data import PlotData, display_text
from visualization.glyphs import glyphs_for
from visualization.wind_barb import wind_elements

logger = logging.getLogger(__name__)

XML_SPACE = "{http://www.w3.org/XML/1998/namespace}space"

STYLESHEET = f"""
.txt{{ font-size: {display_text(FONT_SIZE_PX)}px; font-family: sans-serif; }}
.tmp{{ fill: red; }}
.sta{{ fill: grey }}
.dew{{ fill: blue }}
.vis{{ fill: violet }}
"""


def _text_field(parent: ET.Element, field_name: str, value) -> ET.Element:
    css_class, x, y = TEXT_POSITIONS[field_name]
    text = ET.SubElement(parent, "text", {
        "class": css_class,
        "fill": TEXT_COLOR,
        "stroke": "#000",
        "stroke-width": "0",
        "x": str(x),
        "y": str(y),
        "text-anchor": "start",
        XML_SPACE: "preserve",
    })
    text.text = display_text(value)
    return text


def text_group(plot: PlotData) -> ET.Element:
    """The five text fields.  The altimeter slot is reserved and left blank."""
    group = ET.Element("g", {"id": "text"})
    _text_field(group, "visibility", plot.visibility)
    _text_field(group, "temperature", plot.temperature)
    _text_field(group, "dew_point", plot.dew_point)
    _text_field(group, "station", plot.station)
    _text_field(group, "altimeter", None)
    return group


def build_document(plot: PlotData, width: str, height: str) -> ET.Element:
    """Build the root ``<svg>`` element for ``plot``."""
    root = ET.Element("svg", {
        "xmlns": SVG_NAMESPACE,
        "width": str(width),
        "height": str(height),
        "viewBox": f"0 0 {CANVAS_SIZE} {CANVAS_SIZE}",
    })
    style = ET.SubElement(root, "style")
    style.text = STYLESHEET
    root.extend(wind_elements(plot))
    root.append(glyphs_for(plot.weather_codes))
    root.append(text_group(plot))
    return root


def render(
    plot: PlotData,
    width: str = DEFAULT_WIDTH,
    height: str = DEFAULT_HEIGHT,
) -> str:
    """
    Render a station plot as an SVG document.

    Args:
        plot: Values to draw; any field may be absent.
        width: CSS width placed verbatim on the root element.
        height: CSS height placed verbatim on the root element.

    Returns:
        The serialized SVG document.
    """
    logger.debug(f"Rendering station plot for {plot.station or '<unknown>'}")
    return ET.tostring(build_document(plot, width, height), encoding="unicode")


def raw_metar_to_svg(
    raw_metar: str,
    width: str = DEFAULT_WIDTH,
    height: str = DEFAULT_HEIGHT,
) -> str:
    """
    Decode a raw METAR report and render its station plot.

    Raises:
        DecodeError: If the report cannot be decoded; nothing is rendered.
    """
    return render(extract(raw_metar), width, height)
