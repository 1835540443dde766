"""Geometry values shared by the wind rose layouts."""
from attrs import define
import math


@define(frozen=True)
class Point:
    """Center of a wind rose in surface coordinates (y grows downward)."""

    x: float
    y: float


@define(frozen=True)
class AngleSpan:
    """Start and end angle of one direction's slice, in degrees.

    0 degrees points north and angles grow clockwise.
    """

    start: float
    end: float

    @property
    def width(self) -> float:
        """Angular width of the slice."""
        return self.end - self.start

    @property
    def mid(self) -> float:
        """Bearing the slice is centered on."""
        return (self.start + self.end) / 2

    @property
    def start_radians(self) -> float:
        return math.radians(self.start)

    @property
    def end_radians(self) -> float:
        return math.radians(self.end)
