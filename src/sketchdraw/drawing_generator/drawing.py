"""
Main sketch drawing generator.

Assembles a complete SVG document from a Drawing: one fit-to-viewport scale,
all element renderings in z-order, the canvas border, a background grid and
the title block.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..models import DimensionElement, Drawing, DrawingElement
from .constants import (
    BORDER_INSET,
    BORDER_WIDTH,
    CANVAS_PADDING,
    GRID_COLOR,
    GRID_INSET,
    GRID_SIZE,
    INK_COLOR,
)
from .dimensions import DimensionStyle
from .elements import render_element
from .geometry import calculate_scale
from .title_block import TitleBlock, TitleBlockInfo
from .view_area import ViewArea


def z_ordered(elements) -> list[DrawingElement]:
    """
    Elements in draw order.

    Everything except dimensions keeps its input order; dimensions always
    come last so they sit on top and stay clickable.
    """
    others = [e for e in elements if not isinstance(e, DimensionElement)]
    dims = [e for e in elements if isinstance(e, DimensionElement)]
    return others + dims


@dataclass
class SketchDrawing:
    """
    Generates the SVG for one drawing at one viewport size.

    Attributes:
        drawing: The drawing to render (never modified)
        viewport_width: Canvas width in SVG user units
        viewport_height: Canvas height in SVG user units
        dimension_style: Styling for dimension annotations
    """
    drawing: Drawing
    viewport_width: float
    viewport_height: float
    dimension_style: DimensionStyle = field(default_factory=DimensionStyle)

    # Internal state - initialized in __post_init__
    _svg_content: str = field(default="", init=False, repr=False)
    _canvas: ViewArea = field(init=False, repr=False)
    _title_block: TitleBlock = field(init=False, repr=False)

    def __post_init__(self):
        self._canvas = ViewArea.canvas(self.viewport_width, self.viewport_height)
        self._title_block = TitleBlock(
            info=TitleBlockInfo.from_drawing(self.drawing),
            canvas=self._canvas,
        )

    @property
    def scale(self) -> float:
        """Canvas units per millimetre."""
        return calculate_scale(
            self.drawing.width,
            self.drawing.height,
            self.viewport_width,
            self.viewport_height,
            CANVAS_PADDING,
        )

    @property
    def svg_content(self) -> str:
        if not self._svg_content:
            self.generate()
        return self._svg_content

    def _create_defs(self) -> str:
        """Arrowhead marker and background grid pattern."""
        return f'''  <defs>
    <marker id="arrowhead" markerWidth="8" markerHeight="6" refX="8" refY="3" orient="auto">
      <polygon points="0 0, 8 3, 0 6" fill="{INK_COLOR}"/>
    </marker>
    <pattern id="grid" width="{GRID_SIZE}" height="{GRID_SIZE}" patternUnits="userSpaceOnUse">
      <path d="M {GRID_SIZE} 0 L 0 0 0 {GRID_SIZE}" fill="none" stroke="{GRID_COLOR}" stroke-width="0.5"/>
    </pattern>
  </defs>'''

    def _create_border(self) -> str:
        border = self._canvas.inset(BORDER_INSET)
        return "  " + border.svg_rect(stroke=INK_COLOR, stroke_width=BORDER_WIDTH, fill="white")

    def _create_grid(self) -> str:
        grid = self._canvas.inset(GRID_INSET)
        return "  " + grid.svg_rect(fill="url(#grid)")

    def _create_content(self) -> str:
        """All elements, scaled, inside the padded content group."""
        scale = self.scale
        unit = self.drawing.unit
        rendered = [
            render_element(el, scale, unit, self.dimension_style)
            for el in z_ordered(self.drawing.elements)
        ]
        lines = [f'  <g transform="translate({CANVAS_PADDING}, {CANVAS_PADDING})">']
        for svg in rendered:
            if svg:
                lines.append("    " + svg.replace("\n", "\n    "))
        lines.append("  </g>")
        return "\n".join(lines)

    def generate(self) -> str:
        """Generate the complete drawing as SVG."""
        w = f"{self.viewport_width:g}"
        h = f"{self.viewport_height:g}"

        svg_header = (
            f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {w} {h}" '
            f'width="{w}" height="{h}" class="sketch-svg">'
        )

        svg_content = [
            svg_header,
            self._create_defs(),
            self._create_border(),
            self._create_grid(),
            self._create_content(),
            "  " + self._title_block.generate_svg().replace("\n", "\n  "),
            "</svg>",
        ]

        self._svg_content = "\n".join(svg_content)
        return self._svg_content


def render(
    drawing: Drawing,
    viewport_width: float,
    viewport_height: float,
    dimension_style: DimensionStyle | None = None,
) -> str:
    """
    Render a drawing to a self-contained SVG string sized to the viewport.

    Pure: the same drawing and viewport always produce identical output.
    """
    return SketchDrawing(
        drawing=drawing,
        viewport_width=viewport_width,
        viewport_height=viewport_height,
        dimension_style=dimension_style or DimensionStyle(),
    ).generate()
