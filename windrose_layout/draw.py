"""Entry points that lay out a wind rose and paint it on a surface.

Each function accepts optional data, center and surface. Omitted data falls
back to the style's sample dataset, an omitted center to (100, 80) and an
omitted surface to a new 300x300 one. The whole layout is computed before
anything is painted, so invalid data leaves the surface untouched.
"""
from numbers import Real
from typing import List, Mapping, Optional, Tuple, Union
import math

from windrose_layout.config import DEFAULT_CENTER
from windrose_layout.exceptions import InvalidInput
from windrose_layout.models.geometry import Point
from windrose_layout.models.primitives import Primitive
from windrose_layout.services.layouts import (
    FREQUENCY,
    MEAN_DIRECTIONAL,
    SAMPLE_DATA,
    TELESCOPE,
    RoseLayout,
    get_layout,
)
from windrose_layout.services.renderer import Surface

CenterLike = Union[Point, Tuple[float, float], Mapping]


def to_point(center: Optional[CenterLike]) -> Point:
    """Accept a Point, an (x, y) pair or an {"x", "y"} mapping."""
    if center is None:
        return Point(*DEFAULT_CENTER)
    if isinstance(center, Point):
        return center
    try:
        if isinstance(center, Mapping):
            x, y = center["x"], center["y"]
        else:
            x, y = center
    except (KeyError, TypeError, ValueError):
        raise InvalidInput(f"Center must be an (x, y) pair or an x/y mapping, got {center!r}")
    for value in (x, y):
        if isinstance(value, bool) or not isinstance(value, Real) or not math.isfinite(value):
            raise InvalidInput(f"Center coordinates must be finite numbers, got {center!r}")
    return Point(x=x, y=y)


def draw_rose(
    layout: RoseLayout,
    data: Mapping,
    center: Optional[CenterLike] = None,
    surface: Optional[Surface] = None,
) -> Surface:
    """Lay out data with the given layout and paint it on surface."""
    primitives: List[Primitive] = layout.layout(data, to_point(center))
    if surface is None:
        surface = Surface()
    surface.draw_all(primitives)
    return surface


def draw_frequency_rose(
    data: Optional[Mapping] = None,
    center: Optional[CenterLike] = None,
    surface: Optional[Surface] = None,
) -> Surface:
    """Draw the standard frequency wind rose."""
    if data is None:
        data = SAMPLE_DATA[FREQUENCY]
    return draw_rose(get_layout(FREQUENCY), data, center, surface)


def draw_telescope_rose(
    data: Optional[Mapping] = None,
    center: Optional[CenterLike] = None,
    surface: Optional[Surface] = None,
) -> Surface:
    """Draw the BOM-style telescope wind rose."""
    if data is None:
        data = SAMPLE_DATA[TELESCOPE]
    return draw_rose(get_layout(TELESCOPE), data, center, surface)


def draw_mean_directional_rose(
    data: Optional[Mapping] = None,
    center: Optional[CenterLike] = None,
    surface: Optional[Surface] = None,
) -> Surface:
    """Draw the mean directional speed rose."""
    if data is None:
        data = SAMPLE_DATA[MEAN_DIRECTIONAL]
    return draw_rose(get_layout(MEAN_DIRECTIONAL), data, center, surface)


DRAW_FUNCTIONS = {
    FREQUENCY: draw_frequency_rose,
    TELESCOPE: draw_telescope_rose,
    MEAN_DIRECTIONAL: draw_mean_directional_rose,
}
