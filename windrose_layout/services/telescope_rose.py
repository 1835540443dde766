"""Layout for the BOM-style (telescope arm) wind rose."""
from typing import List, Mapping
import logging

from windrose_layout.config import (
    AXIS_FILL,
    AXIS_STEP,
    AXIS_STROKE,
    CHUNK_STROKE,
    COMPASS_8,
    TELESCOPE_AXIS_MIN,
    TELESCOPE_BIN_STYLES,
    TELESCOPE_ROTATIONS,
)
from windrose_layout.models.geometry import Point
from windrose_layout.models.primitives import BinStyle, Circle, Primitive, Rectangle
from windrose_layout.services.geometry import domain, get_calm, get_directions
from windrose_layout.services.validation import validate_binned
from windrose_layout.utils.format_utils import format_number

log = logging.getLogger("windrose.layout.telescope")


class TelescopeRoseLayout:
    """Draws each direction as fixed-width bars stacked outward from calm.

    Bars are laid out pointing down from the center (+y) and then rotated
    about the center toward the direction's bearing, so offsets accumulate in
    the unrotated frame. Higher speed bins use wider bars.
    """

    def __init__(
        self,
        bin_styles: Mapping[str, BinStyle] = None,
        rotations: Mapping[str, float] = None,
    ):
        """Initialize layout with bin styles (fill and width) and bar rotations."""
        self.bin_styles = bin_styles if bin_styles is not None else TELESCOPE_BIN_STYLES
        self.rotations = rotations if rotations is not None else TELESCOPE_ROTATIONS

    def radii_circles(self, outer: int, center: Point) -> List[Circle]:
        """Radial axes from the domain inward to 10."""
        circles = []
        radius = outer
        while radius >= TELESCOPE_AXIS_MIN:
            circles.append(Circle(
                cx=center.x, cy=center.y, r=radius, fill=AXIS_FILL, stroke=AXIS_STROKE,
            ))
            radius -= AXIS_STEP
        return circles

    def calm_circle(self, calm: float, center: Point) -> Circle:
        """Center disk representing the calm frequency."""
        return Circle(
            cx=center.x,
            cy=center.y,
            r=calm,
            fill=AXIS_FILL,
            stroke=CHUNK_STROKE,
            title=f"Calm: {format_number(calm)}%",
        )

    def bar(self, direction: str, bin_label: str, freq: float, offset: float, center: Point) -> Rectangle:
        """Telescope bar for one speed bin, starting at offset (unrotated frame)."""
        style = self.bin_styles[bin_label]
        return Rectangle(
            x=center.x - style.width / 2,
            y=offset,
            width=style.width,
            height=freq,
            rotation=self.rotations[direction],
            rotation_cx=center.x,
            rotation_cy=center.y,
            fill=style.fill,
            stroke=CHUNK_STROKE,
            title=(
                f"Direction: {direction} Wind speed bin: {bin_label} km/h "
                f"Frequency: {format_number(freq)}%"
            ),
        )

    def layout(self, data: Mapping, center: Point) -> List[Primitive]:
        """
        Produce the primitives of a telescope rose.

        Args:
            data: Mapping of 8-point direction -> {speed bin: frequency}, plus "calm"
            center: Center of the rose

        Returns:
            Primitives in paint order: radial axes, calm disk, then bars
        """
        allowed = [direction for direction in COMPASS_8 if direction in self.rotations]
        validate_binned(data, allowed_directions=allowed, known_bins=self.bin_styles.keys())

        calm = get_calm(data)
        primitives: List[Primitive] = list(self.radii_circles(domain(data), center))
        primitives.append(self.calm_circle(calm, center))

        start = center.y + calm
        directions = get_directions(data)
        for direction in directions:
            offset = start
            for bin_label, freq in data[direction].items():
                primitives.append(self.bar(direction, bin_label, freq, offset, center))
                offset += freq

        log.debug("Telescope rose: %d directions, %d primitives", len(directions), len(primitives))
        return primitives
