"""
Dimension annotations for sketch drawings.

Each dimension element is drawn as an aligned dimension:
- Two extension lines from the measured feature out past the dimension line
- The dimension line, offset from the feature along the segment normal
- Architectural tick marks crossing both ends of the dimension line
- The label on a background box at the midpoint, rotated with the line

The label shows the element's stored value (or its override label), not the
measured distance between the endpoints. The two are allowed to differ.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..models import DimensionElement
from .constants import (
    DIMENSION_CLASS,
    DIMENSION_COLOR,
    DIMENSION_FONT_SIZE,
    DIMENSION_TEXT_BASELINE,
    ELEMENT_CLASS,
    EXTENSION_LINE_GAP,
    EXTENSION_LINE_OVERSHOOT,
    LABEL_BOX_HEIGHT,
    LABEL_BOX_RADIUS,
    LABEL_BOX_WIDTH,
    TICK_HALF_LENGTH,
)
from .geometry import segment_frame
from .svg_utils import element_attrs, escape, fmt
from .units import format_length


@dataclass
class DimensionStyle:
    """
    Styling for dimension annotations.

    The geometric values (gap, overshoot, tick, label box) default to the
    fixed drawing constants; override them only for experiments, since
    viewers rely on the standard look.
    """
    line_color: str = DIMENSION_COLOR
    extension_stroke_width: float = 0.7
    line_stroke_width: float = 0.8
    tick_stroke_width: float = 1.2
    extension_line_gap: float = EXTENSION_LINE_GAP
    extension_line_overshoot: float = EXTENSION_LINE_OVERSHOOT
    tick_half_length: float = TICK_HALF_LENGTH

    label_box_width: float = LABEL_BOX_WIDTH
    label_box_height: float = LABEL_BOX_HEIGHT
    label_box_radius: float = LABEL_BOX_RADIUS
    label_box_fill: str = "white"

    font_family: str = "monospace"
    font_size: float = DIMENSION_FONT_SIZE
    font_weight: str = "600"
    text_baseline: float = DIMENSION_TEXT_BASELINE


def normalize_text_angle(angle: float) -> float:
    """
    Fold an angle in degrees into (-90, 90] so text never reads upside-down.

    170 -> -10, -170 -> 10, -90 -> 90.
    """
    while angle > 90:
        angle -= 180
    while angle <= -90:
        angle += 180
    return angle


def dimension_label(dim: DimensionElement, unit: str) -> str:
    """Override label if set, otherwise the value in the dimension's own unit or `unit`."""
    if dim.label:
        return dim.label
    return format_length(dim.value, dim.unit or unit)


def render_dimension(
    dim: DimensionElement,
    scale: float,
    unit: str,
    style: DimensionStyle | None = None,
) -> str:
    """
    Render a dimension element as an SVG group.

    Args:
        dim: Dimension element (model coordinates in mm)
        scale: Canvas units per mm
        unit: Drawing display unit, used when the dimension has none
        style: DimensionStyle configuration

    Returns:
        SVG string, or "" when the dimension's endpoints coincide
    """
    if style is None:
        style = DimensionStyle()

    frame = segment_frame(dim.x1 * scale, dim.y1 * scale, dim.x2 * scale, dim.y2 * scale)
    if frame is None:
        return ""

    n = frame.normal
    p1, p2 = frame.start, frame.end
    d1, d2 = frame.offset(dim.offset * scale)

    # Extension lines run toward whichever side the dimension line is on
    side = n if dim.offset >= 0 else -n
    gap = side * style.extension_line_gap
    overshoot = side * style.extension_line_overshoot
    tick = n * style.tick_half_length
    color = style.line_color

    parts: list[str] = [
        f'<g {element_attrs(dim.id, dim.type, f"{ELEMENT_CLASS} {DIMENSION_CLASS}")} '
        f'style="cursor:pointer">'
    ]

    # Extension lines
    for base, dim_end in ((p1, d1), (p2, d2)):
        start = base + gap
        end = dim_end + overshoot
        parts.append(
            f'  <line x1="{fmt(start[0])}" y1="{fmt(start[1])}" '
            f'x2="{fmt(end[0])}" y2="{fmt(end[1])}" '
            f'stroke="{color}" stroke-width="{style.extension_stroke_width}"/>'
        )

    # Dimension line
    parts.append(
        f'  <line x1="{fmt(d1[0])}" y1="{fmt(d1[1])}" '
        f'x2="{fmt(d2[0])}" y2="{fmt(d2[1])}" '
        f'stroke="{color}" stroke-width="{style.line_stroke_width}"/>'
    )

    # Tick marks
    for end in (d1, d2):
        a = end - tick
        b = end + tick
        parts.append(
            f'  <line x1="{fmt(a[0])}" y1="{fmt(a[1])}" '
            f'x2="{fmt(b[0])}" y2="{fmt(b[1])}" '
            f'stroke="{color}" stroke-width="{style.tick_stroke_width}"/>'
        )

    # Label on a background box, both rotated about the midpoint
    mx, my = (d1 + d2) / 2
    angle = normalize_text_angle(frame.angle_degrees)
    rotate = f'rotate({fmt(angle)}, {fmt(mx)}, {fmt(my)})'
    text = escape(dimension_label(dim, unit))

    parts.append(
        f'  <rect x="{fmt(mx - style.label_box_width / 2)}" y="{fmt(my - style.label_box_height / 2)}" '
        f'width="{style.label_box_width}" height="{style.label_box_height}" rx="{style.label_box_radius}" '
        f'fill="{style.label_box_fill}" stroke="none" transform="{rotate}"/>'
    )
    parts.append(
        f'  <text x="{fmt(mx)}" y="{fmt(my + style.text_baseline)}" '
        f'text-anchor="middle" font-size="{style.font_size}" font-family="{style.font_family}" '
        f'fill="{color}" font-weight="{style.font_weight}" transform="{rotate}">{text}</text>'
    )
    parts.append("</g>")

    return "\n".join(parts)
