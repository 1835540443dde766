"""Drawable primitives emitted by the wind rose layouts."""
from attrs import asdict, define
from typing import Optional, Union


@define(frozen=True)
class BinStyle:
    """Styling of one wind speed bin."""

    fill: str
    width: Optional[float] = None  # Bar width, telescope rose only


@define(frozen=True)
class Circle:
    """Circle centered on (cx, cy)."""

    cx: float
    cy: float
    r: float
    fill: str
    stroke: str
    title: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to serializable dictionary."""
        return {"kind": "circle", **asdict(self)}


@define(frozen=True)
class ArcSector:
    """Annular sector (a 'chunk') between two radii and two bearings.

    Angles are in degrees, 0 pointing north and growing clockwise. An inner
    radius of 0 makes a solid pie slice.
    """

    cx: float
    cy: float
    inner_radius: float
    outer_radius: float
    start_angle: float
    end_angle: float
    fill: str
    fill_opacity: float
    stroke: str
    title: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to serializable dictionary."""
        return {"kind": "arc", **asdict(self)}


@define(frozen=True)
class Rectangle:
    """Rectangle laid out unrotated, then rotated about (rotation_cx, rotation_cy)."""

    x: float
    y: float
    width: float
    height: float
    rotation: float
    rotation_cx: float
    rotation_cy: float
    fill: str
    stroke: str
    title: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to serializable dictionary."""
        return {"kind": "rect", **asdict(self)}


@define(frozen=True)
class Text:
    """Text label anchored at (x, y), rotated about (rotation_cx, rotation_cy)."""

    x: float
    y: float
    text: str
    fill: str
    font_size: str
    font_family: str
    rotation: float = 0.0
    rotation_cx: float = 0.0
    rotation_cy: float = 0.0

    def to_dict(self) -> dict:
        """Convert to serializable dictionary."""
        return {"kind": "text", **asdict(self)}


Primitive = Union[Circle, ArcSector, Rectangle, Text]
