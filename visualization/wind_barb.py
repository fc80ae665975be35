"""
Wind Barb Generator.

Builds the staff-and-feather glyph that encodes wind speed and direction
on the station plot.  The barb is drawn pointing straight up from the
station (north) and the whole group is rotated about the plot centre by
the reported direction.

Five feather positions ("tiers") sit at fixed distances along the staff.
Each tier is evaluated independently against its own band table:

    tier  short                        long                 flag
    1     -                            [10, 50)             [50, inf)
    2     (-inf, 10) [15, 20) [55, 60) (15, 50) [60, inf)   -
    3     [25, 30) [65, 70)            (25, 50) [70, inf)   -
    4     [35, 40) [75, 80)            (35, 50) [80, inf)   -
    5     [45, 50) [85, 90)            -                    -

Long bands are tested before short ones and the first match wins.  The
long bands open just above their lower bound, so 15 kt gives a short
tier-2 mark while 16-19 kt give a long one.  A flags/tens/fives modulo
formula does not reproduce the table inside the (15, 20), (25, 30), ...
bands.

A gust, when reported, is drawn as a second feather set with the same
table and the same rotation, without the staff, in a thinner secondary
stroke.  Calm wind (speed 0 or absent) replaces everything with a circle.
"""

import logging
import math
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from config import (
    BARB_ANGLE_DEG,
    CALM_FILL,
    CALM_RADIUS,
    CALM_STROKE,
    CENTER_X,
    CENTER_Y,
    FLAG_POINTS,
    GUST_COLOR,
    GUST_STROKE_WIDTH,
    LONG_MARK_LENGTH,
    SHORT_MARK_LENGTH,
    STAFF_END_Y,
    STAFF_START_Y,
    STAFF_WIDTH,
    TIER_OFFSETS_Y,
    WIND_COLOR,
    WIND_STROKE_WIDTH,
)
from models.plot_data import PlotData, display_text

logger = logging.getLogger(__name__)


class BarbShape(Enum):
    """What a single tier draws."""

    NONE = "none"
    SHORT = "short"
    LONG = "long"
    FLAG = "flag"


@dataclass(frozen=True)
class Band:
    """Speed interval ``[low, high)`` (or ``(low, high)``) mapped to a shape."""

    shape: BarbShape
    low: float = -math.inf
    high: float = math.inf
    include_low: bool = True

    def contains(self, speed: float) -> bool:
        above = speed >= self.low if self.include_low else speed > self.low
        return above and speed < self.high


def _short(low: float, high: float) -> Band:
    return Band(BarbShape.SHORT, low, high)


TIER_BANDS: Dict[int, Tuple[Band, ...]] = {
    1: (
        Band(BarbShape.LONG, 10, 50),
        Band(BarbShape.FLAG, 50),
    ),
    2: (
        Band(BarbShape.LONG, 15, 50, include_low=False),
        Band(BarbShape.LONG, 60),
        Band(BarbShape.SHORT, high=10),
        _short(15, 20),
        _short(55, 60),
    ),
    3: (
        Band(BarbShape.LONG, 25, 50, include_low=False),
        Band(BarbShape.LONG, 70),
        _short(25, 30),
        _short(65, 70),
    ),
    4: (
        Band(BarbShape.LONG, 35, 50, include_low=False),
        Band(BarbShape.LONG, 80),
        _short(35, 40),
        _short(75, 80),
    ),
    5: (
        _short(45, 50),
        _short(85, 90),
    ),
}


@dataclass(frozen=True)
class TraceStyle:
    """Stroke styling and id prefix shared by every element of one trace."""

    tag: str
    color: str
    width: int


WIND_STYLE = TraceStyle(tag="ws", color=WIND_COLOR, width=WIND_STROKE_WIDTH)
GUST_STYLE = TraceStyle(tag="gs", color=GUST_COLOR, width=GUST_STROKE_WIDTH)


def tier_shape(
    tier: int,
    speed: float,
    bands: Dict[int, Tuple[Band, ...]] = TIER_BANDS,
) -> BarbShape:
    """Return the shape tier ``tier`` draws at ``speed`` (first matching band)."""
    for band in bands[tier]:
        if band.contains(speed):
            return band.shape
    return BarbShape.NONE


def barb_shapes(speed: Optional[float]) -> Tuple[BarbShape, ...]:
    """Shapes for tiers 1..5 at ``speed``; an absent speed counts as 0."""
    speed = speed or 0
    return tuple(tier_shape(tier, speed) for tier in sorted(TIER_BANDS))


def rotation(direction: Optional[float]) -> str:
    """SVG rotate() about the plot centre; absent direction means north."""
    return f"rotate({display_text(direction or 0)}, {CENTER_X}, {CENTER_Y})"


def tier_element(
    tier: int,
    shape: BarbShape,
    style: TraceStyle,
    offsets: Dict[int, int] = TIER_OFFSETS_Y,
) -> Optional[ET.Element]:
    """
    Build the SVG element for one tier.

    Args:
        tier: Tier number, 1 (outer end of the staff) to 5.
        shape: Shape the tier's bands selected.
        style: Sustained or gust trace styling.
        offsets: y coordinate of each tier's root on the (unrotated) staff.

    Returns:
        A ``<line>`` for marks, a ``<polygon>`` for the flag, or None.
    """
    element_id = f"{style.tag}-barb-{tier}-{shape.value}"
    if shape is BarbShape.FLAG:
        return ET.Element("polygon", {
            "id": element_id,
            "points": FLAG_POINTS,
            "fill": style.color,
        })
    if shape is BarbShape.NONE:
        return None

    y = offsets[tier]
    length = LONG_MARK_LENGTH if shape is BarbShape.LONG else SHORT_MARK_LENGTH
    return ET.Element("line", {
        "id": element_id,
        "stroke-width": str(style.width),
        "x1": str(CENTER_X),
        "y1": str(y),
        "x2": str(CENTER_X + length),
        "y2": str(y),
        "stroke": style.color,
        "transform": f"rotate({BARB_ANGLE_DEG}, {CENTER_X}, {y})",
    })


def trace_elements(speed: Optional[float], gust: bool) -> List[ET.Element]:
    """Feather elements for one trace, outermost tier (1) first."""
    style = GUST_STYLE if gust else WIND_STYLE
    shapes = barb_shapes(speed)
    logger.debug(
        f"{style.tag} {display_text(speed)} kt -> "
        f"{[shape.value for shape in shapes]}"
    )
    elements = []
    for tier, shape in zip(sorted(TIER_BANDS), shapes):
        element = tier_element(tier, shape, style)
        if element is not None:
            elements.append(element)
    return elements


def calm_group() -> ET.Element:
    group = ET.Element("g", {"id": "calm"})
    ET.SubElement(group, "ellipse", {
        "id": "calm-marker",
        "stroke": CALM_STROKE,
        "fill": CALM_FILL,
        "cx": str(CENTER_X),
        "cy": str(CENTER_Y),
        "rx": str(CALM_RADIUS),
        "ry": str(CALM_RADIUS),
    })
    return group


def staff_element() -> ET.Element:
    return ET.Element("line", {
        "stroke-width": str(STAFF_WIDTH),
        "x1": str(CENTER_X),
        "y1": str(STAFF_START_Y),
        "x2": str(CENTER_X),
        "y2": str(STAFF_END_Y),
        "stroke": WIND_COLOR,
        "fill": "none",
    })


def wind_elements(plot: PlotData) -> List[ET.Element]:
    """
    Build the complete wind sub-drawing for a plot.

    Returns:
        ``[calm group]`` for calm wind, otherwise ``[gust group, wind group]``
        or just ``[wind group]`` when no gust was reported.  The gust group
        comes first so the sustained barb is painted over it.
    """
    if plot.is_calm:
        return [calm_group()]

    transform = rotation(plot.wind_direction)
    groups = []
    if plot.has_gust:
        gust_group = ET.Element("g", {"id": "gustBarb", "transform": transform})
        gust_group.extend(trace_elements(plot.gust_speed, gust=True))
        groups.append(gust_group)

    wind_group = ET.Element("g", {"id": "windBarb", "transform": transform})
    wind_group.append(staff_element())
    wind_group.extend(trace_elements(plot.wind_speed, gust=False))
    groups.append(wind_group)
    return groups
