"""
Command line entry point for rendering wind roses to image files.

Reads a wind rose dataset from a JSON file (or uses the style's sample data),
lays it out and saves the drawing; the format follows the output suffix.
"""
from pathlib import Path
from typing import Optional
import json
import logging

from windrose_layout.config import DEFAULT_CENTER, DEFAULT_SURFACE_HEIGHT, DEFAULT_SURFACE_WIDTH
from windrose_layout.draw import DRAW_FUNCTIONS
from windrose_layout.exceptions import InvalidInput
from windrose_layout.models.geometry import Point
from windrose_layout.services.layouts import FREQUENCY, STYLES
from windrose_layout.services.renderer import Surface

log = logging.getLogger("windrose.cli")


def load_dataset(file_path: Path) -> dict:
    """Load a wind rose dataset from a JSON file, keeping key order."""
    with open(file_path, "r", encoding="utf-8") as f:
        return json.load(f)


def render(
    style: str,
    output: Path,
    data_file: Optional[Path] = None,
    center: Optional[Point] = None,
    width: int = DEFAULT_SURFACE_WIDTH,
    height: int = DEFAULT_SURFACE_HEIGHT,
) -> Surface:
    """Render one rose to output and return the surface it was drawn on."""
    data = load_dataset(data_file) if data_file else None
    surface = DRAW_FUNCTIONS[style](data=data, center=center, surface=Surface(width, height))
    surface.save(output)
    log.info("Saved %s rose with %d primitives to %s", style, len(surface.primitives), output)
    return surface


def main(argv=None) -> int:
    """Render a wind rose."""
    import argparse

    parser = argparse.ArgumentParser(description="Render a wind rose diagram")
    parser.add_argument(
        "--style",
        choices=STYLES,
        default=FREQUENCY,
        help="Rose style (default: frequency)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        required=True,
        help="Output file, e.g. rose.svg or rose.png",
    )
    parser.add_argument(
        "--data",
        type=Path,
        default=None,
        help="JSON dataset; the style's sample data is used when omitted",
    )
    parser.add_argument("--center-x", type=float, default=DEFAULT_CENTER[0])
    parser.add_argument("--center-y", type=float, default=DEFAULT_CENTER[1])
    parser.add_argument("--width", type=int, default=DEFAULT_SURFACE_WIDTH)
    parser.add_argument("--height", type=int, default=DEFAULT_SURFACE_HEIGHT)
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        render(
            style=args.style,
            output=args.output,
            data_file=args.data,
            center=Point(args.center_x, args.center_y),
            width=args.width,
            height=args.height,
        )
    except InvalidInput as e:
        log.error("Invalid wind rose data: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
