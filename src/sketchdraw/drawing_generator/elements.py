"""
Element renderers.

One function per element kind, each mapping a model element (mm) to SVG at
a given scale. Every coordinate is multiplied by the scale before geometry
is built. Elements whose defining segment has zero length render as "".

The root node of every rendered element carries `data-id`, `data-type` and
the shared `drawing-element` class so viewers can hit-test shapes back to
the model.
"""

from __future__ import annotations

from ..models import (
    DimensionElement,
    DoorElement,
    DrawingElement,
    LineElement,
    NoteElement,
    RectElement,
    StairsElement,
    StructuralElement,
    WallElement,
    WindowElement,
)
from .constants import (
    CUT_COLOR,
    INK_COLOR,
    LABEL_COLOR,
    LINE_STROKE_WIDTH,
    MIN_VISUAL_THICKNESS,
    NOTE_COLOR,
    NOTE_FONT_SIZE,
    OPENING_CUT_MIN_WIDTH,
    OPENING_CUT_WIDTH_PER_SCALE,
    SLIDING_LEAF_OFFSET,
    SLIDING_LEAF_OVERLAP_START,
    SLIDING_LEAF_SPLIT,
    STAIR_ARROW_INSET,
    STRUCTURAL_FILLS,
    STRUCTURAL_LABEL_GAP,
    TIMBER_STROKE,
    WALL_FILL,
    WALL_STROKE_WIDTH,
    WINDOW_SILL_OFFSET,
)
from .dimensions import DimensionStyle, render_dimension
from .geometry import oriented_rect
from .svg_utils import element_attrs, escape, fmt, points_attr


def _opening_cut(width: float, scale: float) -> str:
    """White stroke that blanks out the wall behind a door or window."""
    cut_width = max(OPENING_CUT_MIN_WIDTH, OPENING_CUT_WIDTH_PER_SCALE * scale)
    return (
        f'  <line x1="0" y1="0" x2="{fmt(width)}" y2="0" '
        f'stroke="{CUT_COLOR}" stroke-width="{fmt(cut_width)}"/>'
    )


def _local_frame(x: float, y: float, angle: float) -> str:
    return f"translate({fmt(x)}, {fmt(y)}) rotate({fmt(angle)})"


def render_wall(wall: WallElement, scale: float) -> str:
    """Wall as a filled polygon: the segment thickened to the wall thickness."""
    thickness = max(wall.thickness * scale, MIN_VISUAL_THICKNESS)
    corners = oriented_rect(
        wall.x1 * scale, wall.y1 * scale, wall.x2 * scale, wall.y2 * scale, thickness
    )
    if corners is None:
        return ""

    return (
        f'<polygon {element_attrs(wall.id, wall.type)} '
        f'points="{points_attr(corners)}" '
        f'fill="{WALL_FILL}" stroke="{INK_COLOR}" stroke-width="{WALL_STROKE_WIDTH}"/>'
    )


def render_door(door: DoorElement, scale: float) -> str:
    """
    Door in its local frame (anchor at origin, width along +x).

    Sliding doors get two overlapping leaves and no arc. Swinging doors get
    a leaf and a quarter-circle swing arc; "right" swings clockwise, every
    other swing counter-clockwise.
    """
    w = door.width * scale
    if w == 0:
        return ""

    parts = [
        f'<g {element_attrs(door.id, door.type)} '
        f'transform="{_local_frame(door.x * scale, door.y * scale, door.angle)}">',
        _opening_cut(w, scale),
    ]

    if door.swing == "sliding":
        leaf_offset = SLIDING_LEAF_OFFSET
        parts.append(
            f'  <line x1="0" y1="{-leaf_offset}" x2="{fmt(w * SLIDING_LEAF_SPLIT)}" y2="{-leaf_offset}" '
            f'stroke="{INK_COLOR}" stroke-width="2"/>'
        )
        parts.append(
            f'  <line x1="{fmt(w * SLIDING_LEAF_OVERLAP_START)}" y1="{leaf_offset}" '
            f'x2="{fmt(w)}" y2="{leaf_offset}" '
            f'stroke="{INK_COLOR}" stroke-width="2" stroke-dasharray="4,2"/>'
        )
    else:
        clockwise = door.swing == "right"
        leaf_end = w if clockwise else -w
        sweep = 1 if clockwise else 0
        parts.append(
            f'  <line x1="0" y1="0" x2="0" y2="{fmt(leaf_end)}" '
            f'stroke="{INK_COLOR}" stroke-width="1.5"/>'
        )
        parts.append(
            f'  <path d="M 0 {fmt(leaf_end)} A {fmt(w)} {fmt(w)} 0 0 {sweep} {fmt(w)} 0" '
            f'fill="none" stroke="{INK_COLOR}" stroke-width="1" stroke-dasharray="4,2"/>'
        )

    parts.append("</g>")
    return "\n".join(parts)


def render_window(window: WindowElement, scale: float) -> str:
    """Window schematic: double sill, two end caps and a mid mullion."""
    w = window.width * scale
    if w == 0:
        return ""

    s = WINDOW_SILL_OFFSET
    mid = fmt(w / 2)
    end = fmt(w)
    return "\n".join([
        f'<g {element_attrs(window.id, window.type)} '
        f'transform="{_local_frame(window.x * scale, window.y * scale, window.angle)}">',
        _opening_cut(w, scale),
        f'  <line x1="0" y1="{-s}" x2="{end}" y2="{-s}" stroke="{INK_COLOR}" stroke-width="1.5"/>',
        f'  <line x1="0" y1="{s}" x2="{end}" y2="{s}" stroke="{INK_COLOR}" stroke-width="1.5"/>',
        f'  <line x1="0" y1="{-s}" x2="0" y2="{s}" stroke="{INK_COLOR}" stroke-width="1"/>',
        f'  <line x1="{end}" y1="{-s}" x2="{end}" y2="{s}" stroke="{INK_COLOR}" stroke-width="1"/>',
        f'  <line x1="{mid}" y1="{-s}" x2="{mid}" y2="{s}" stroke="{INK_COLOR}" stroke-width="0.5"/>',
        "</g>",
    ])


def render_note(note: NoteElement, scale: float) -> str:
    font_size = note.font_size or NOTE_FONT_SIZE
    return "\n".join([
        f'<g {element_attrs(note.id, note.type)}>',
        f'  <text x="{fmt(note.x * scale)}" y="{fmt(note.y * scale)}" font-size="{font_size}" '
        f'font-family="sans-serif" fill="{NOTE_COLOR}" font-style="italic">{escape(note.text)}</text>',
        "</g>",
    ])


def render_line(line: LineElement, scale: float) -> str:
    x1, y1 = line.x1 * scale, line.y1 * scale
    x2, y2 = line.x2 * scale, line.y2 * scale
    if x1 == x2 and y1 == y2:
        return ""

    dash = ' stroke-dasharray="6,3"' if line.dashed else ""
    return (
        f'<line {element_attrs(line.id, line.type)} '
        f'x1="{fmt(x1)}" y1="{fmt(y1)}" x2="{fmt(x2)}" y2="{fmt(y2)}" '
        f'stroke="{INK_COLOR}" stroke-width="{line.stroke_width or LINE_STROKE_WIDTH}"{dash}/>'
    )


def render_rect(rect: RectElement, scale: float) -> str:
    x, y = rect.x * scale, rect.y * scale
    w, h = rect.width * scale, rect.height * scale

    parts = [
        f'<g {element_attrs(rect.id, rect.type)}>',
        f'  <rect x="{fmt(x)}" y="{fmt(y)}" width="{fmt(w)}" height="{fmt(h)}" '
        f'fill="{escape(rect.fill or "none")}" stroke="{INK_COLOR}" stroke-width="1"/>',
    ]
    if rect.label:
        parts.append(
            f'  <text x="{fmt(x + w / 2)}" y="{fmt(y + h / 2 + 4)}" text-anchor="middle" '
            f'font-size="9" fill="{LABEL_COLOR}">{escape(rect.label)}</text>'
        )
    parts.append("</g>")
    return "\n".join(parts)


def render_structural(member: StructuralElement, scale: float) -> str:
    """
    Beam, joist or stud: wall-style oriented rectangle keyed by member type.

    A dashed line along the member axis marks it as timber.
    """
    x1, y1 = member.x1 * scale, member.y1 * scale
    x2, y2 = member.x2 * scale, member.y2 * scale
    w = member.width * scale

    corners = oriented_rect(x1, y1, x2, y2, w)
    if corners is None:
        return ""

    fill = STRUCTURAL_FILLS.get(member.type, STRUCTURAL_FILLS["stud"])
    parts = [
        f'<g {element_attrs(member.id, member.type)}>',
        f'  <polygon points="{points_attr(corners)}" fill="{fill}" fill-opacity="0.3" '
        f'stroke="{TIMBER_STROKE}" stroke-width="1"/>',
        f'  <line x1="{fmt(x1)}" y1="{fmt(y1)}" x2="{fmt(x2)}" y2="{fmt(y2)}" '
        f'stroke="{TIMBER_STROKE}" stroke-width="0.5" stroke-dasharray="2,4"/>',
    ]
    if member.label:
        label_y = (y1 + y2) / 2 - w / 2 - STRUCTURAL_LABEL_GAP
        parts.append(
            f'  <text x="{fmt((x1 + x2) / 2)}" y="{fmt(label_y)}" text-anchor="middle" '
            f'font-size="8" fill="{TIMBER_STROKE}">{escape(member.label)}</text>'
        )
    parts.append("</g>")
    return "\n".join(parts)


def render_stairs(stairs: StairsElement, scale: float) -> str:
    """
    Stair flight with treads, a direction arrow and an UP/DN label.

    The group rotates about the flight's centre, not its anchor corner.
    """
    steps = int(stairs.steps)
    if steps < 1:
        return ""

    x, y = stairs.x * scale, stairs.y * scale
    w, l = stairs.width * scale, stairs.length * scale
    step_depth = l / steps
    cx, cy = x + w / 2, y + l / 2

    parts = [
        f'<g {element_attrs(stairs.id, stairs.type)} '
        f'transform="rotate({fmt(stairs.angle)}, {fmt(cx)}, {fmt(cy)})">',
        f'  <rect x="{fmt(x)}" y="{fmt(y)}" width="{fmt(w)}" height="{fmt(l)}" '
        f'fill="none" stroke="{INK_COLOR}" stroke-width="1"/>',
    ]

    for i in range(steps + 1):
        tread_y = y + i * step_depth
        parts.append(
            f'  <line x1="{fmt(x)}" y1="{fmt(tread_y)}" x2="{fmt(x + w)}" y2="{fmt(tread_y)}" '
            f'stroke="{INK_COLOR}" stroke-width="0.8"/>'
        )

    going_up = stairs.direction == "up"
    arrow_y = y + STAIR_ARROW_INSET if going_up else y + l - STAIR_ARROW_INSET
    parts.append(
        f'  <line x1="{fmt(cx)}" y1="{fmt(cy)}" x2="{fmt(cx)}" y2="{fmt(arrow_y)}" '
        f'stroke="{INK_COLOR}" stroke-width="1.5" marker-end="url(#arrowhead)"/>'
    )
    parts.append(
        f'  <text x="{fmt(cx)}" y="{fmt(cy)}" text-anchor="middle" font-size="8" '
        f'fill="{LABEL_COLOR}">{"UP" if going_up else "DN"}</text>'
    )
    parts.append("</g>")
    return "\n".join(parts)


_RENDERERS = {
    "wall": render_wall,
    "door": render_door,
    "window": render_window,
    "note": render_note,
    "line": render_line,
    "rect": render_rect,
    "beam": render_structural,
    "joist": render_structural,
    "stud": render_structural,
    "stairs": render_stairs,
}


def render_element(
    element: DrawingElement,
    scale: float,
    unit: str,
    dimension_style: DimensionStyle | None = None,
) -> str:
    """Render any element by its type tag; unrecognised types render as ""."""
    if isinstance(element, DimensionElement):
        return render_dimension(element, scale, unit, dimension_style)
    renderer = _RENDERERS.get(element.type)
    if renderer is None:
        return ""
    return renderer(element, scale)
