"""Tests for the frequency rose layout."""
import pytest

from windrose_layout.config import SAMPLE_FREQUENCY_DATA
from windrose_layout.exceptions import InvalidInput
from windrose_layout.models.geometry import Point
from windrose_layout.models.primitives import ArcSector, BinStyle, Circle, Text
from windrose_layout.services.frequency_rose import FrequencyRoseLayout

CENTER = Point(100, 80)


def _arcs(primitives):
    return [p for p in primitives if isinstance(p, ArcSector)]


class TestFrequencyRoseLayout:
    """Tests for FrequencyRoseLayout."""

    def test_chunks_stack_from_calm(self):
        """Test that bins stack outward from the calm offset in bin order."""
        data = {"calm": 8, "N": {"0-10": 3, "10-20": 12, "20-30": 0, ">30": 0}}
        arcs = _arcs(FrequencyRoseLayout().layout(data, CENTER))

        radii = [(a.inner_radius, a.outer_radius) for a in arcs]
        assert radii == [(8, 11), (11, 23), (23, 23), (23, 23)]

    def test_offset_resets_per_direction(self):
        """Test that every direction starts again at calm."""
        data = {"calm": 2, "N": {"0-10": 5}, "S": {"0-10": 7}}
        arcs = _arcs(FrequencyRoseLayout().layout(data, CENTER))
        assert [(a.inner_radius, a.outer_radius) for a in arcs] == [(2, 7), (2, 9)]

    def test_chunk_angles_and_style(self):
        """Test chunk angles, fill and tooltip."""
        data = {"N": {"0-10": 3}, "E": {"10-20": 2.5}, "S": {"0-10": 1}, "W": {">30": 4}}
        arcs = _arcs(FrequencyRoseLayout().layout(data, CENTER))

        north, east = arcs[0], arcs[1]
        assert (north.start_angle, north.end_angle) == (-45, 45)
        assert (east.start_angle, east.end_angle) == (45, 135)
        assert north.fill == "#FFFF99"
        assert east.fill == "#FFFF33"
        assert north.fill_opacity == 0.5
        assert north.stroke == "black"
        assert (north.cx, north.cy) == (100, 80)
        assert north.title == "N 0-10 m/s 3%"
        assert east.title == "E 10-20 m/s 2.5%"

    def test_arm_length_matches_domain(self):
        """Test that the outermost chunk equals calm plus all bins."""
        layout = FrequencyRoseLayout()
        primitives = layout.layout(SAMPLE_FREQUENCY_DATA, CENTER)
        south = [a for a in _arcs(primitives) if a.title.startswith("S ")]
        assert south[-1].outer_radius == 8 + 20 + 30 + 10 + 10

    def test_frequency_circles(self):
        """Test radial axes from the domain down to 5 with labels."""
        primitives = FrequencyRoseLayout().layout(SAMPLE_FREQUENCY_DATA, CENTER)
        circles = [p for p in primitives if isinstance(p, Circle)]
        labels = [p for p in primitives if isinstance(p, Text)]

        # Longest arm is S: 8 + 70 = 78 -> domain 80
        assert [c.r for c in circles] == [80, 70, 60, 50, 40, 30, 20, 10]
        assert circles[0].title == "80%"
        assert circles[0].stroke == "#C8C8C8"
        assert [t.text for t in labels] == [f"{c.r}%" for c in circles]
        assert labels[0].y == CENTER.y + 80
        assert labels[0].rotation == -22.5
        assert (labels[0].rotation_cx, labels[0].rotation_cy) == (100, 80)

    def test_axes_painted_before_chunks(self):
        """Test paint order: circles and labels first, then chunks."""
        primitives = FrequencyRoseLayout().layout(SAMPLE_FREQUENCY_DATA, CENTER)
        kinds = [isinstance(p, ArcSector) for p in primitives]
        first_arc = kinds.index(True)
        assert all(kinds[first_arc:])
        assert len(_arcs(primitives)) == 16 * 4

    def test_no_axes_when_domain_zero(self):
        """Test that an all-zero dataset emits no radial axes."""
        primitives = FrequencyRoseLayout().layout({"N": {"0-10": 0}}, CENTER)
        assert not [p for p in primitives if isinstance(p, Circle)]
        assert len(primitives) == 1

    def test_empty_bin_styles_not_replaced(self):
        """Test that an empty style table is kept, so every bin is unstyled."""
        layout = FrequencyRoseLayout(bin_styles={})
        assert layout.bin_styles == {}
        with pytest.raises(InvalidInput):
            layout.layout({"N": {"0-10": 1}}, CENTER)

    def test_custom_bin_styles(self):
        """Test that an overriding style table is used."""
        layout = FrequencyRoseLayout(bin_styles={"calm-ish": BinStyle(fill="#000000")})
        arcs = _arcs(layout.layout({"N": {"calm-ish": 1}}, CENTER))
        assert arcs[0].fill == "#000000"

    def test_idempotent(self):
        """Test that repeated layouts are identical."""
        layout = FrequencyRoseLayout()
        assert layout.layout(SAMPLE_FREQUENCY_DATA, CENTER) == layout.layout(SAMPLE_FREQUENCY_DATA, CENTER)

    def test_invalid_data(self):
        """Test that negative frequencies are rejected."""
        with pytest.raises(InvalidInput):
            FrequencyRoseLayout().layout({"N": {"0-10": -1}}, CENTER)
