"""Service for wind rose layout and rendering."""
from typing import Dict, List, Mapping, Optional, Tuple
import logging

from windrose_layout.draw import draw_rose
from windrose_layout.models.geometry import Point
from windrose_layout.services.layouts import SAMPLE_DATA, STYLES, get_layout
from windrose_layout.services.renderer import Surface

log = logging.getLogger("windrose.api")


class WindRoseService:
    """Service for wind rose operations."""

    def __init__(
        self,
        default_center: Tuple[float, float] = (100.0, 80.0),
        surface_size: Tuple[int, int] = (300, 300),
    ):
        """Initialize service with rendering defaults."""
        self.default_center = Point(*default_center)
        self.surface_size = surface_size

    def has_style(self, style: str) -> bool:
        """Check if a rose style is known."""
        return style in STYLES

    def _resolve(self, style: str, data: Optional[Mapping], center: Optional[Point]):
        if data is None:
            data = SAMPLE_DATA[style]
        return data, center or self.default_center

    def get_sample(self, style: str) -> Mapping:
        """Sample dataset of a style."""
        return SAMPLE_DATA[style]

    def get_layout(
        self,
        style: str,
        data: Optional[Mapping] = None,
        center: Optional[Point] = None,
    ) -> List[Dict]:
        """
        Compute the primitives of a rose without painting them.

        Returns:
            List of primitive dicts in paint order
        """
        data, center = self._resolve(style, data, center)
        primitives = get_layout(style).layout(data, center)
        return [primitive.to_dict() for primitive in primitives]

    def render_svg(
        self,
        style: str,
        data: Optional[Mapping] = None,
        center: Optional[Point] = None,
    ) -> str:
        """Render a rose on a fresh surface and return it as SVG."""
        data, center = self._resolve(style, data, center)
        surface = draw_rose(get_layout(style), data, center, Surface(*self.surface_size))
        log.info("Rendered %s rose with %d primitives", style, len(surface.primitives))
        return surface.to_svg()
