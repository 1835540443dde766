"""Configuration constants for wind rose layouts."""
from types import MappingProxyType

from windrose_layout.models.primitives import BinStyle

DEGREES_IN_CIRCLE = 360

# Reserved first-level key holding the calm frequency
CALM_KEY = "calm"

# 16-point compass, clockwise from north
COMPASS_16 = (
    "N", "NNE", "NE", "ENE",
    "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW",
    "W", "WNW", "NW", "NNW",
)
COMPASS_8 = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")

# Frequency rose: fill colour per wind speed bin
FREQUENCY_BIN_STYLES = MappingProxyType({
    "0-10": BinStyle(fill="#FFFF99"),
    "10-20": BinStyle(fill="#FFFF33"),
    "20-30": BinStyle(fill="#FFCC00"),
    ">30": BinStyle(fill="#FF9900"),
})

# Telescope (BOM-style) rose: fill colour and bar width per wind speed bin
TELESCOPE_BIN_STYLES = MappingProxyType({
    "0-10": BinStyle(fill="#FFFF99", width=4),
    "10-20": BinStyle(fill="#FFFF33", width=8),
    "20-30": BinStyle(fill="#FFCC00", width=12),
    ">30": BinStyle(fill="#FF9900", width=16),
})

# Bars are laid out pointing down (+y) and rotated about the center
TELESCOPE_ROTATIONS = MappingProxyType({
    "N": 180,
    "NE": -90 - 45,
    "E": -90,
    "SE": -45,
    "S": 0,
    "SW": 45,
    "W": 90,
    "NW": 90 + 45,
})

# Reference circles and chunk styling
AXIS_FILL = "white"
AXIS_STROKE = "#C8C8C8"
CHUNK_STROKE = "black"
CHUNK_OPACITY = 0.5
LABEL_FILL = "#C0C0C0"
LABEL_FONT_SIZE = "5pt"
LABEL_FONT_FAMILY = "Arial"
LABEL_ROTATION = -22.5

# Mean directional rose: fixed speed axes, independent of the data
MEAN_SPEED_AXIS_MAX = 80
MEAN_SPEED_AXIS_MIN = 5
MEAN_SLICE_FILL = "green"

# Radial axes step and lower bounds
AXIS_STEP = 10
FREQUENCY_AXIS_MIN = 5
TELESCOPE_AXIS_MIN = 10

# Defaults used when a draw call omits them
DEFAULT_CENTER = (100, 80)
DEFAULT_SURFACE_WIDTH = 300
DEFAULT_SURFACE_HEIGHT = 300

SAMPLE_FREQUENCY_DATA = {
    "calm": 8,
    "N": {"0-10": 3, "10-20": 12, "20-30": 0, ">30": 0},
    "NNE": {"0-10": 4, "10-20": 9, "20-30": 2, ">30": 0},
    "NE": {"0-10": 0, "10-20": 20, "20-30": 0, ">30": 0},
    "ENE": {"0-10": 0, "10-20": 2, "20-30": 0, ">30": 0},
    "E": {"0-10": 0, "10-20": 5, "20-30": 0, ">30": 0},
    "ESE": {"0-10": 0, "10-20": 5, "20-30": 0, ">30": 0},
    "SE": {"0-10": 0, "10-20": 0, "20-30": 0, ">30": 0},
    "SSE": {"0-10": 0, "10-20": 0, "20-30": 0, ">30": 0},
    "S": {"0-10": 20, "10-20": 30, "20-30": 10, ">30": 10},
    "SSW": {"0-10": 23, "10-20": 0, "20-30": 0, ">30": 0},
    "SW": {"0-10": 23, "10-20": 0, "20-30": 0, ">30": 0},
    "WSW": {"0-10": 0, "10-20": 11, "20-30": 0, ">30": 0},
    "W": {"0-10": 0, "10-20": 11, "20-30": 0, ">30": 0},
    "WNW": {"0-10": 0, "10-20": 11, "20-30": 0, ">30": 0},
    "NW": {"0-10": 0, "10-20": 0, "20-30": 0, ">30": 0},
    "NNW": {"0-10": 0, "10-20": 0, "20-30": 0, ">30": 0},
}

SAMPLE_TELESCOPE_DATA = {
    "calm": 8,
    "N": {"0-10": 10, "10-20": 10, "20-30": 10, ">30": 10},
    "NE": {"0-10": 10, "10-20": 10, "20-30": 10, ">30": 10},
    "E": {"0-10": 10, "10-20": 10, "20-30": 10, ">30": 10},
    "SE": {"0-10": 10, "10-20": 10, "20-30": 10, ">30": 10},
    "S": {"0-10": 20, "10-20": 30, "20-30": 10, ">30": 10},
    "SW": {"0-10": 10, "10-20": 10, "20-30": 10, ">30": 10},
    "W": {"0-10": 10, "10-20": 10, "20-30": 10, ">30": 10},
    "NW": {"0-10": 10, "10-20": 10, "20-30": 10, ">30": 10},
}

SAMPLE_MEAN_DIRECTIONAL_DATA = {
    "N": 10,
    "NE": 20,
    "E": 30,
    "SE": 40,
    "S": 50,
    "SW": 60,
    "W": 70,
    "NW": 80,
}
