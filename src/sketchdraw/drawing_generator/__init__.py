"""
Drawing Generator Module

Renders sketch drawings (walls, doors, windows, dimensions, structural
members, stairs, notes) as scaled SVG for display and measurement editing.

Features:
- Single fit-to-viewport scale from the drawing's nominal extent
- Aligned dimensions with extension lines, tick marks and upright labels
- Title block, border and background grid
- data-id / data-type attributes on every element for hit-testing

Usage:
    from sketchdraw.drawing_generator import render

    svg = render(drawing, 1200, 900)
"""

from .constants import (
    CANVAS_PADDING,
    EXTENSION_LINE_GAP,
    EXTENSION_LINE_OVERSHOOT,
    LABEL_BOX_HEIGHT,
    LABEL_BOX_WIDTH,
    MIN_VISUAL_THICKNESS,
    TICK_HALF_LENGTH,
)
from .dimensions import DimensionStyle, normalize_text_angle, render_dimension
from .drawing import SketchDrawing, render, z_ordered
from .elements import (
    render_door,
    render_element,
    render_line,
    render_note,
    render_rect,
    render_stairs,
    render_structural,
    render_wall,
    render_window,
)
from .geometry import calculate_scale, oriented_rect, segment_frame
from .title_block import TitleBlock, TitleBlockInfo
from .units import UNITS, format_length
from .view_area import ViewArea

__all__ = [
    # Main classes
    'SketchDrawing',
    'DimensionStyle',
    'ViewArea',
    'TitleBlock',
    'TitleBlockInfo',
    # Functions
    'render',
    'format_length',
    'calculate_scale',
    'render_element',
    'render_wall',
    'render_door',
    'render_window',
    'render_dimension',
    'render_note',
    'render_line',
    'render_rect',
    'render_structural',
    'render_stairs',
    'normalize_text_angle',
    'segment_frame',
    'oriented_rect',
    'z_ordered',
    # Constants
    'UNITS',
    'CANVAS_PADDING',
    'EXTENSION_LINE_GAP',
    'EXTENSION_LINE_OVERSHOOT',
    'TICK_HALF_LENGTH',
    'LABEL_BOX_WIDTH',
    'LABEL_BOX_HEIGHT',
    'MIN_VISUAL_THICKNESS',
]
