"""Angle and radial domain calculations shared by all rose styles."""
from typing import Dict, List, Mapping, Optional, Sequence
import math

from windrose_layout.config import AXIS_STEP, CALM_KEY, DEGREES_IN_CIRCLE
from windrose_layout.exceptions import InvalidInput
from windrose_layout.models.geometry import AngleSpan


def rad(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * (math.pi / 180)


def get_directions(data: Mapping) -> List[str]:
    """Return the direction keys of a dataset in data order, without calm."""
    return [key for key in data if key != CALM_KEY]


def get_calm(data: Mapping) -> float:
    """Calm frequency of a dataset; a missing calm key counts as 0."""
    return data.get(CALM_KEY, 0)


def get_angles(directions: Sequence[str]) -> Dict[str, AngleSpan]:
    """
    Split the circle into one slice per direction.

    Slice i spans sliceWidth * (i - 0.5) to sliceWidth * (i + 0.5), so the
    first direction is centered on north instead of starting there.

    Args:
        directions: Ordered, distinct direction labels

    Returns:
        Dict mapping each direction to its AngleSpan, in input order
    """
    slices = len(directions)
    if slices == 0:
        raise InvalidInput("At least one direction is required to compute angles")
    if len(set(directions)) != slices:
        raise InvalidInput(f"Directions must be distinct, got {list(directions)}")

    slice_width = DEGREES_IN_CIRCLE / slices
    return {
        direction: AngleSpan(start=slice_width * (i - 0.5), end=slice_width * (i + 0.5))
        for i, direction in enumerate(directions)
    }


def arm_lengths(data: Mapping) -> Dict[str, float]:
    """Length of each directional arm: the sum of its bins plus calm."""
    calm = get_calm(data)
    return {
        direction: sum(data[direction].values()) + calm
        for direction in get_directions(data)
    }


def max_length(data: Mapping) -> float:
    """Maximum length of a directional arm, 0 when there are no directions."""
    return max(arm_lengths(data).values(), default=0)


def direction_with_minimum_length(data: Mapping) -> Optional[str]:
    """Direction with the shortest arm; the first one in data order on ties."""
    lengths = arm_lengths(data)
    if not lengths:
        return None
    return min(lengths, key=lengths.get)


def domain(data: Mapping) -> int:
    """Outer radial axis value: the longest arm rounded up to a multiple of 10."""
    return int(math.ceil(max_length(data) / AXIS_STEP) * AXIS_STEP)
