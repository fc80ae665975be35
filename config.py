"""
Global configuration and constants for the Station Plot Renderer.
"""

import os

# --- Canvas ---
CANVAS_SIZE = 500              # Logical width/height of the SVG viewBox
CENTER_X = 250                 # Plot centre, station position
CENTER_Y = 250
SVG_NAMESPACE = "http://www.w3.org/2000/svg"
DEFAULT_WIDTH = "250px"        # Outer sizing tokens when the caller gives none
DEFAULT_HEIGHT = "250px"

# --- Wind Barb ---
STAFF_START_Y = 230            # Staff runs from just above the centre...
STAFF_END_Y = 50               # ...out to the outermost tier
STAFF_WIDTH = 3
BARB_ANGLE_DEG = -35           # Feather rotation about its root on the staff
LONG_MARK_LENGTH = 50          # 10 kt
SHORT_MARK_LENGTH = 25         # 5 kt
FLAG_POINTS = "248,60 290,30 248,30"   # 50 kt pennant, replaces tier 1
CALM_RADIUS = 35

# Distance along the staff, innermost tier first in evaluation order
TIER_OFFSETS_Y = {1: 50, 2: 70, 3: 90, 4: 110, 5: 130}

# Sustained wind vs. gust trace styling
WIND_COLOR = "#000"
WIND_STROKE_WIDTH = 4
GUST_COLOR = "red"
GUST_STROKE_WIDTH = 2
CALM_STROKE = "#000"
CALM_FILL = "#00000000"

# --- Text Fields ---
FONT_SIZE_PX = 47.5
TEXT_COLOR = "#000000"

# (css class, x, y) per field; "alt" is a reserved, always-blank slot
TEXT_POSITIONS = {
    "visibility": ("vis txt", 80, 260),
    "temperature": ("tmp txt", 160, 220),
    "dew_point": ("dew txt", 160, 315),
    "station": ("sta txt", 270, 315),
    "altimeter": ("alt txt", 270, 220),
}

# --- Present Weather Glyphs ---
WX_ORIGIN = (160, 270)         # Baseline start of the glyph row, left of the station
WX_GLYPH_SPACING = 28
WX_COLOR = "#008000"

# --- Extraction ---
VISIBILITY_UNITS = "SM"
TEMPERATURE_UNITS = "C"
WIND_UNITS = "KT"
PRESSURE_UNITS = "MB"          # hPa; encoded by dropping separator and leading digit
VISIBILITY_DECIMALS = 2
PRESSURE_DECIMALS = 1

# --- Logging ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE")
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024  # 10 MB
LOG_FILE_BACKUP_COUNT = 5
