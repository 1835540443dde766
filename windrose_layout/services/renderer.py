"""Matplotlib adapter that paints layout primitives onto a surface."""
from io import StringIO
from pathlib import Path
from typing import List, Union
import logging

from matplotlib import patches
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.transforms import Affine2D

from windrose_layout.config import DEFAULT_SURFACE_HEIGHT, DEFAULT_SURFACE_WIDTH
from windrose_layout.models.primitives import ArcSector, Circle, Primitive, Rectangle, Text

log = logging.getLogger("windrose.renderer")

# Surfaces are sized in pixels; one figure inch holds DPI of them
DPI = 100


def _font_points(font_size: str) -> float:
    """Parse a CSS-like font size ('5pt', '7px', '6') into points."""
    value = font_size.strip().lower()
    if value.endswith("pt"):
        return float(value[:-2])
    if value.endswith("px"):
        return float(value[:-2]) * 72 / DPI
    return float(value)


class MatplotlibRenderer:
    """Translates primitives into matplotlib artists.

    Primitive geometry uses screen coordinates (y grows downward, 0 degrees
    is north, angles clockwise); the axes are flipped to match, so a bearing
    maps to matplotlib's theta as bearing - 90.
    """

    def __init__(self, ax: Axes):
        self.ax = ax

    def _rotation(self, angle: float, cx: float, cy: float):
        return Affine2D().rotate_deg_around(cx, cy, angle) + self.ax.transData

    def paint(self, primitive: Primitive, zorder: int) -> None:
        """Paint one primitive above everything painted before it."""
        if isinstance(primitive, Circle):
            self._paint_circle(primitive, zorder)
        elif isinstance(primitive, ArcSector):
            self._paint_arc(primitive, zorder)
        elif isinstance(primitive, Rectangle):
            self._paint_rectangle(primitive, zorder)
        elif isinstance(primitive, Text):
            self._paint_text(primitive, zorder)
        else:
            raise TypeError(f"Cannot paint {type(primitive).__name__}")

    def _paint_circle(self, circle: Circle, zorder: int) -> None:
        self.ax.add_patch(patches.Circle(
            (circle.cx, circle.cy),
            circle.r,
            facecolor=circle.fill,
            edgecolor=circle.stroke,
            label=circle.title,
            zorder=zorder,
        ))

    def _paint_arc(self, arc: ArcSector, zorder: int) -> None:
        ring = arc.outer_radius - arc.inner_radius
        self.ax.add_patch(patches.Wedge(
            (arc.cx, arc.cy),
            arc.outer_radius,
            arc.start_angle - 90,
            arc.end_angle - 90,
            width=ring if arc.inner_radius > 0 else None,
            facecolor=arc.fill,
            alpha=arc.fill_opacity,
            edgecolor=arc.stroke,
            label=arc.title,
            zorder=zorder,
        ))

    def _paint_rectangle(self, rect: Rectangle, zorder: int) -> None:
        self.ax.add_patch(patches.Rectangle(
            (rect.x, rect.y),
            rect.width,
            rect.height,
            transform=self._rotation(rect.rotation, rect.rotation_cx, rect.rotation_cy),
            facecolor=rect.fill,
            edgecolor=rect.stroke,
            label=rect.title,
            zorder=zorder,
        ))

    def _paint_text(self, text: Text, zorder: int) -> None:
        self.ax.text(
            text.x,
            text.y,
            text.text,
            color=text.fill,
            fontsize=_font_points(text.font_size),
            fontfamily=text.font_family,
            transform=self._rotation(text.rotation, text.rotation_cx, text.rotation_cy),
            zorder=zorder,
        )


class Surface:
    """A width x height drawing surface backed by a headless matplotlib figure.

    Every drawn primitive is kept in `primitives` in paint order.
    """

    def __init__(self, width: int = DEFAULT_SURFACE_WIDTH, height: int = DEFAULT_SURFACE_HEIGHT):
        self.width = width
        self.height = height
        self.primitives: List[Primitive] = []

        self.figure = Figure(figsize=(width / DPI, height / DPI), dpi=DPI)
        self.ax = self.figure.add_axes((0, 0, 1, 1))
        self.ax.set_xlim(0, width)
        self.ax.set_ylim(height, 0)
        self.ax.set_axis_off()
        self.renderer = MatplotlibRenderer(self.ax)

    def draw(self, primitive: Primitive) -> None:
        """Record and paint a primitive."""
        self.renderer.paint(primitive, zorder=len(self.primitives) + 1)
        self.primitives.append(primitive)

    def draw_all(self, primitives: List[Primitive]) -> None:
        """Paint primitives in order."""
        for primitive in primitives:
            self.draw(primitive)
        log.debug("Painted %d primitives on %dx%d surface", len(primitives), self.width, self.height)

    def to_svg(self) -> str:
        """Render the surface as an SVG document."""
        buffer = StringIO()
        self.figure.savefig(buffer, format="svg")
        return buffer.getvalue()

    def save(self, file_path: Union[str, Path]) -> None:
        """Save the surface; the format follows the file suffix."""
        file_path = Path(file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        self.figure.savefig(file_path)
