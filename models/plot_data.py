"""
Plot data model for a single station plot.

A flat, immutable projection of one decoded observation holding only the
values the station plot displays.  Every numeric field is optional: the
source report may omit any group, and an omitted group must render as an
empty field rather than as zero.
"""

import math
from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class PlotData:
    """Values drawn around one station symbol.

    Args:
        visibility: Visibility in statute miles.
        temperature: Air temperature (deg C).
        dew_point: Dew point (deg C).
        station: Station identifier, display only.
        wind_direction: Meteorological direction the wind blows FROM (degrees).
            Ignored when the wind is calm.
        wind_speed: Sustained wind speed (knots).
        gust_speed: Gust speed (knots), only when a gust was reported.
        pressure: Encoded altimeter digits, display only.
        weather_codes: Concatenated present-weather abbreviations in report
            order, empty when none were reported.
    """

    visibility: Optional[float] = None
    temperature: Optional[float] = None
    dew_point: Optional[float] = None
    station: Optional[str] = None
    wind_direction: Optional[float] = None
    wind_speed: Optional[float] = None
    gust_speed: Optional[float] = None
    pressure: Optional[Union[int, str]] = None
    weather_codes: str = ""

    @property
    def is_calm(self) -> bool:
        """True when no wind (or no wind group) was reported."""
        return not self.wind_speed

    @property
    def has_gust(self) -> bool:
        return self.gust_speed is not None


def display_text(value: Optional[Union[float, int, str]]) -> str:
    """Text for one plot field.

    None becomes an empty string.  Integral floats drop their fractional
    part (``22.0 -> "22"``) and other floats use their shortest repr, so a
    field reads the way the report wrote it.  NaN is not a displayable
    number and renders empty.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, float):
        if math.isnan(value):
            return ""
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)
