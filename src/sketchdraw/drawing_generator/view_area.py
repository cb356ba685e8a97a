"""
ViewArea class for managing rectangular regions of the canvas.
"""

from __future__ import annotations

from dataclasses import dataclass

from .svg_utils import fmt


@dataclass(frozen=True)
class ViewArea:
    """
    A rectangular region of the canvas.

    Attributes:
        x: Left edge position (canvas units)
        y: Top edge position (canvas units)
        width: Width of the region
        height: Height of the region
    """
    x: float
    y: float
    width: float
    height: float

    @classmethod
    def canvas(cls, width: float, height: float) -> ViewArea:
        """The full viewport."""
        return cls(x=0, y=0, width=width, height=height)

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def inset(self, margin: float) -> ViewArea:
        """Return a new ViewArea inset by the given margin on all sides."""
        return ViewArea(
            x=self.x + margin,
            y=self.y + margin,
            width=self.width - 2 * margin,
            height=self.height - 2 * margin,
        )

    def anchor_bottom_right(self, width: float, height: float, margin: float = 0) -> ViewArea:
        """A width x height region tucked into the bottom-right corner."""
        return ViewArea(
            x=self.right - width - margin,
            y=self.bottom - height - margin,
            width=width,
            height=height,
        )

    def svg_rect(self, stroke: str = "none", stroke_width: float = 0, fill: str = "none") -> str:
        """Generate an SVG rect element for this area."""
        return (f'<rect x="{fmt(self.x)}" y="{fmt(self.y)}" width="{fmt(self.width)}" '
                f'height="{fmt(self.height)}" fill="{fill}" stroke="{stroke}" '
                f'stroke-width="{stroke_width}"/>')
