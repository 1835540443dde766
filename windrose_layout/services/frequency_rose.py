"""Layout for the standard frequency wind rose."""
from typing import List, Mapping
import logging

from windrose_layout.config import (
    AXIS_FILL,
    AXIS_STEP,
    AXIS_STROKE,
    CHUNK_OPACITY,
    CHUNK_STROKE,
    FREQUENCY_AXIS_MIN,
    FREQUENCY_BIN_STYLES,
    LABEL_FILL,
    LABEL_FONT_FAMILY,
    LABEL_FONT_SIZE,
    LABEL_ROTATION,
)
from windrose_layout.models.geometry import AngleSpan, Point
from windrose_layout.models.primitives import ArcSector, BinStyle, Circle, Primitive, Text
from windrose_layout.services.geometry import domain, get_angles, get_calm, get_directions
from windrose_layout.services.validation import validate_binned
from windrose_layout.utils.format_utils import format_number

log = logging.getLogger("windrose.layout.frequency")


class FrequencyRoseLayout:
    """Stacks each direction's speed bins as concentric arc 'chunks'.

    Every arm starts at the calm frequency, so the calm area sits inside all
    arms, and grows outward one bin at a time in the data's bin order.
    """

    def __init__(self, bin_styles: Mapping[str, BinStyle] = None):
        """Initialize layout with the fill colour table for speed bins."""
        self.bin_styles = bin_styles if bin_styles is not None else FREQUENCY_BIN_STYLES

    def frequency_circles(self, outer: int, center: Point) -> List[Primitive]:
        """Radial axes from the domain inward, each with a rotated % label."""
        primitives: List[Primitive] = []
        freq = outer
        while freq >= FREQUENCY_AXIS_MIN:
            label = f"{freq}%"
            primitives.append(Circle(
                cx=center.x,
                cy=center.y,
                r=freq,
                fill=AXIS_FILL,
                stroke=AXIS_STROKE,
                title=label,
            ))
            primitives.append(Text(
                x=center.x,
                y=center.y + freq,
                text=label,
                fill=LABEL_FILL,
                font_size=LABEL_FONT_SIZE,
                font_family=LABEL_FONT_FAMILY,
                rotation=LABEL_ROTATION,
                rotation_cx=center.x,
                rotation_cy=center.y,
            ))
            freq -= AXIS_STEP
        return primitives

    def chunk(
        self,
        direction: str,
        bin_label: str,
        freq: float,
        offset: float,
        center: Point,
        span: AngleSpan,
    ) -> ArcSector:
        """Arc for one speed bin of one direction, starting at offset."""
        return ArcSector(
            cx=center.x,
            cy=center.y,
            inner_radius=offset,
            outer_radius=offset + freq,
            start_angle=span.start,
            end_angle=span.end,
            fill=self.bin_styles[bin_label].fill,
            fill_opacity=CHUNK_OPACITY,
            stroke=CHUNK_STROKE,
            title=f"{direction} {bin_label} m/s {format_number(freq)}%",
        )

    def layout(self, data: Mapping, center: Point) -> List[Primitive]:
        """
        Produce the primitives of a frequency rose.

        Args:
            data: Mapping of direction -> {speed bin: frequency}, plus "calm"
            center: Center of the rose

        Returns:
            Primitives in paint order: radial axes first, then chunks
        """
        validate_binned(data, known_bins=self.bin_styles.keys())

        directions = get_directions(data)
        angles = get_angles(directions)
        calm = get_calm(data)

        primitives = self.frequency_circles(domain(data), center)
        for direction in directions:
            offset = calm
            for bin_label, freq in data[direction].items():
                primitives.append(
                    self.chunk(direction, bin_label, freq, offset, center, angles[direction])
                )
                offset += freq

        log.debug("Frequency rose: %d directions, %d primitives", len(directions), len(primitives))
        return primitives
