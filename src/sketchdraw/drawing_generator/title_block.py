"""
Title block generator for sketch drawings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from ..models import Drawing
from .constants import (
    INK_COLOR,
    LABEL_COLOR,
    TITLE_BLOCK_HEIGHT,
    TITLE_BLOCK_MARGIN,
    TITLE_BLOCK_ROW_HEIGHT,
    TITLE_BLOCK_WIDTH,
)
from .svg_utils import escape, fmt
from .view_area import ViewArea

DEFAULT_AUTHOR = "SketchTool"


def format_drawing_type(drawing_type: str) -> str:
    """floor_plan -> FLOOR PLAN"""
    return drawing_type.replace("_", " ").upper()


def format_date(timestamp: str) -> str:
    """Date part of an ISO-8601 timestamp as YYYY-MM-DD; unparsable input is returned as is."""
    if not timestamp:
        return ""
    try:
        # fromisoformat only accepts a trailing Z from Python 3.11 on
        parsed = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
    except ValueError:
        return timestamp
    return parsed.strftime("%Y-%m-%d")


@dataclass
class TitleBlockInfo:
    """Information displayed in the title block."""
    title: str = ""
    scale_text: str = ""
    unit: str = ""
    drawing_type: str = ""
    drawn_by: str = DEFAULT_AUTHOR
    updated_date: str = ""

    @classmethod
    def from_drawing(cls, drawing: Drawing) -> TitleBlockInfo:
        return cls(
            title=drawing.title,
            scale_text=drawing.scale,
            unit=drawing.unit,
            drawing_type=format_drawing_type(drawing.type),
            drawn_by=drawing.drawn_by or DEFAULT_AUTHOR,
            updated_date=format_date(drawing.updated_at),
        )


@dataclass
class TitleBlock:
    """
    A fixed-size title panel anchored to the bottom-right of the canvas.

    Three rows: title; scale / units / drawing type; author / date. Nothing
    in it depends on the drawing's geometry.
    """
    info: TitleBlockInfo
    canvas: ViewArea
    area: ViewArea = field(init=False)

    def __post_init__(self):
        self.area = self.canvas.anchor_bottom_right(
            TITLE_BLOCK_WIDTH, TITLE_BLOCK_HEIGHT, margin=TITLE_BLOCK_MARGIN
        )

    def generate_svg(self) -> str:
        """Generate SVG content for the title block."""
        x, y = self.area.x, self.area.y
        w = self.area.width
        row = TITLE_BLOCK_ROW_HEIGHT
        info = self.info

        left = fmt(x + 6)
        center = fmt(x + w / 2)
        right = fmt(x + w - 6)
        row2_text = fmt(y + row + 13)
        row3_text = fmt(y + 2 * row + 13)

        return "\n".join([
            '<g class="title-block">',
            "  " + self.area.svg_rect(stroke=INK_COLOR, stroke_width=1.5, fill="white"),
            f'  <line x1="{fmt(x)}" y1="{fmt(y + row)}" x2="{fmt(x + w)}" y2="{fmt(y + row)}" '
            f'stroke="{INK_COLOR}" stroke-width="0.5"/>',
            f'  <line x1="{fmt(x)}" y1="{fmt(y + 2 * row)}" x2="{fmt(x + w)}" y2="{fmt(y + 2 * row)}" '
            f'stroke="{INK_COLOR}" stroke-width="0.5"/>',
            f'  <text x="{center}" y="{fmt(y + 14)}" text-anchor="middle" font-size="11" '
            f'font-weight="bold" fill="{INK_COLOR}">{escape(info.title)}</text>',
            f'  <text x="{left}" y="{row2_text}" font-size="8" fill="{LABEL_COLOR}">'
            f'Scale: {escape(info.scale_text)}</text>',
            f'  <text x="{center}" y="{row2_text}" font-size="8" fill="{LABEL_COLOR}">'
            f'Units: {escape(info.unit)}</text>',
            f'  <text x="{right}" y="{row2_text}" text-anchor="end" font-size="8" fill="{LABEL_COLOR}">'
            f'{escape(info.drawing_type)}</text>',
            f'  <text x="{left}" y="{row3_text}" font-size="8" fill="{LABEL_COLOR}">'
            f'{escape(info.drawn_by)}</text>',
            f'  <text x="{right}" y="{row3_text}" text-anchor="end" font-size="8" fill="{LABEL_COLOR}">'
            f'{escape(info.updated_date)}</text>',
            "</g>",
        ])
