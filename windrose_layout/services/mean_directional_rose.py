"""Layout for the mean directional wind rose."""
from typing import List, Mapping
import logging

from windrose_layout.config import (
    AXIS_FILL,
    AXIS_STEP,
    AXIS_STROKE,
    CHUNK_OPACITY,
    CHUNK_STROKE,
    MEAN_SLICE_FILL,
    MEAN_SPEED_AXIS_MAX,
    MEAN_SPEED_AXIS_MIN,
)
from windrose_layout.models.geometry import Point
from windrose_layout.models.primitives import ArcSector, Circle, Primitive
from windrose_layout.services.geometry import get_angles, get_directions
from windrose_layout.services.validation import validate_scalar
from windrose_layout.utils.format_utils import format_number

log = logging.getLogger("windrose.layout.mean_directional")


class MeanDirectionalLayout:
    """One pie slice per direction, its radius the direction's mean speed."""

    def __init__(self, fill: str = MEAN_SLICE_FILL):
        self.fill = fill

    def speed_circles(self, center: Point) -> List[Circle]:
        """Fixed speed axes from 80 down to 5, whatever the data."""
        circles = []
        speed = MEAN_SPEED_AXIS_MAX
        while speed >= MEAN_SPEED_AXIS_MIN:
            circles.append(Circle(
                cx=center.x, cy=center.y, r=speed, fill=AXIS_FILL, stroke=AXIS_STROKE,
            ))
            speed -= AXIS_STEP
        return circles

    def layout(self, data: Mapping, center: Point) -> List[Primitive]:
        """
        Produce the primitives of a mean directional rose.

        Args:
            data: Mapping of direction -> mean speed; a "calm" key is ignored
            center: Center of the rose

        Returns:
            Primitives in paint order: speed axes, then one slice per direction
        """
        validate_scalar(data)

        directions = get_directions(data)
        angles = get_angles(directions)

        primitives: List[Primitive] = list(self.speed_circles(center))
        for direction in directions:
            speed = data[direction]
            span = angles[direction]
            primitives.append(ArcSector(
                cx=center.x,
                cy=center.y,
                inner_radius=0,
                outer_radius=speed,
                start_angle=span.start,
                end_angle=span.end,
                fill=self.fill,
                fill_opacity=CHUNK_OPACITY,
                stroke=CHUNK_STROKE,
                title=f"{direction} average wind speed is {format_number(speed)}m/s",
            ))

        log.debug("Mean directional rose: %d directions, %d primitives", len(directions), len(primitives))
        return primitives
