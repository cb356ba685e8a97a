#!/usr/bin/env python3
"""
Tests for dimension annotation rendering.

Tests cover:
- Extension lines, dimension line and tick mark geometry
- Offset to either side of the measured segment
- Label text: override, per-dimension unit, drawing unit
- Text rotation normalisation
- Degenerate dimensions
"""

import xml.etree.ElementTree as ET

import pytest

from sketchdraw.drawing_generator.dimensions import (
    DimensionStyle,
    dimension_label,
    normalize_text_angle,
    render_dimension,
)
from sketchdraw.models import DimensionElement


def _dim(**overrides) -> DimensionElement:
    values = dict(id="d1", x1=0, y1=0, x2=1000, y2=0, value=1000, offset=500)
    values.update(overrides)
    return DimensionElement(**values)


def _parse(svg: str) -> ET.Element:
    return ET.fromstring(svg)


def _line_coords(line: ET.Element) -> tuple[float, float, float, float]:
    return tuple(float(line.get(k)) for k in ("x1", "y1", "x2", "y2"))


# =============================================================================
# GEOMETRY
# =============================================================================


class TestDimensionGeometry:
    """Horizontal dimension at scale 0.1 with a 500 mm offset."""

    def test_structure(self):
        group = _parse(render_dimension(_dim(), 0.1, "mm"))
        assert group.tag == "g"
        assert group.get("data-id") == "d1"
        assert group.get("data-type") == "dimension"
        assert group.get("class").split() == ["drawing-element", "dimension-element"]

        # 2 extension lines, 1 dimension line, 2 ticks
        assert len(group.findall("line")) == 5
        assert len(group.findall("rect")) == 1
        assert len(group.findall("text")) == 1

    def test_extension_lines(self):
        lines = _parse(render_dimension(_dim(), 0.1, "mm")).findall("line")
        # Normal of a left-to-right segment points down (+y); gap 3, overshoot 6
        assert _line_coords(lines[0]) == pytest.approx((0, 3, 0, 56))
        assert _line_coords(lines[1]) == pytest.approx((100, 3, 100, 56))

    def test_dimension_line_is_offset(self):
        lines = _parse(render_dimension(_dim(), 0.1, "mm")).findall("line")
        assert _line_coords(lines[2]) == pytest.approx((0, 50, 100, 50))

    def test_tick_marks_cross_line_ends(self):
        lines = _parse(render_dimension(_dim(), 0.1, "mm")).findall("line")
        assert _line_coords(lines[3]) == pytest.approx((0, 46, 0, 54))
        assert _line_coords(lines[4]) == pytest.approx((100, 46, 100, 54))

    def test_label_box_centred_on_midpoint(self):
        rect = _parse(render_dimension(_dim(), 0.1, "mm")).find("rect")
        assert float(rect.get("x")) == pytest.approx(26)
        assert float(rect.get("y")) == pytest.approx(42)
        assert float(rect.get("width")) == pytest.approx(48)
        assert float(rect.get("height")) == pytest.approx(16)

    def test_negative_offset_flips_side(self):
        lines = _parse(render_dimension(_dim(offset=-500), 0.1, "mm")).findall("line")
        assert _line_coords(lines[2]) == pytest.approx((0, -50, 100, -50))
        # Extension lines still start clear of the feature and overshoot the line
        assert _line_coords(lines[0]) == pytest.approx((0, -3, 0, -56))

    def test_geometry_ignores_value(self):
        """Changing the value only changes the label text."""
        a = render_dimension(_dim(value=1000), 0.1, "mm").splitlines()
        b = render_dimension(_dim(value=2750), 0.1, "mm").splitlines()
        differing = [i for i, (la, lb) in enumerate(zip(a, b)) if la != lb]
        assert len(a) == len(b)
        assert len(differing) == 1
        assert "<text" in a[differing[0]]

    def test_custom_style(self):
        style = DimensionStyle(line_color="#000000")
        svg = render_dimension(_dim(), 0.1, "mm", style)
        assert 'stroke="#000000"' in svg
        assert "#e63946" not in svg


class TestDegenerateDimension:
    def test_zero_length_renders_nothing(self):
        assert render_dimension(_dim(x2=0, y2=0), 0.1, "mm") == ""

    def test_zero_scale_renders_nothing(self):
        assert render_dimension(_dim(), 0, "mm") == ""


# =============================================================================
# LABEL
# =============================================================================


class TestDimensionLabel:
    def test_uses_value_not_geometric_span(self):
        assert dimension_label(_dim(value=2500), "mm") == "2500mm"

    def test_dimension_unit_overrides_drawing_unit(self):
        assert dimension_label(_dim(unit="cm"), "mm") == "100.0cm"

    def test_drawing_unit_used_when_absent(self):
        assert dimension_label(_dim(value=3000), "m") == "3.00m"

    def test_override_label(self):
        assert dimension_label(_dim(label="approx 1m"), "mm") == "approx 1m"

    def test_label_is_escaped(self):
        text = _parse(render_dimension(_dim(label="A & B"), 0.1, "mm")).find("text")
        assert text.text == "A & B"


# =============================================================================
# TEXT ROTATION
# =============================================================================


class TestTextRotation:
    @pytest.mark.parametrize(
        "angle,expected",
        [
            (0, 0),
            (45, 45),
            (90, 90),
            (170, -10),
            (180, 0),
            (-170, 10),
            (-90, 90),
            (-89, -89),
            (135, -45),
        ],
    )
    def test_normalize_text_angle(self, angle, expected):
        result = normalize_text_angle(angle)
        assert result == pytest.approx(expected)
        assert -90 < result <= 90

    @pytest.mark.parametrize(
        "x1,y1,x2,y2,expected",
        [
            (0, 0, 1000, 0, "0.00"),
            (1000, 0, 0, 0, "0.00"),
            (0, 0, 0, 1000, "90.00"),
            (0, 1000, 0, 0, "90.00"),
        ],
    )
    def test_rendered_rotation(self, x1, y1, x2, y2, expected):
        text = _parse(render_dimension(_dim(x1=x1, y1=y1, x2=x2, y2=y2), 0.1, "mm")).find("text")
        assert text.get("transform").startswith(f"rotate({expected},")
