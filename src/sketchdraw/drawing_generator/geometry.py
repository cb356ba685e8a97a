"""
Scale fitting and 2D segment geometry.

Model coordinates are millimetres with the origin at the top-left and y
increasing downward (SVG convention), so no axis flip is needed between
model and canvas.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from .constants import CANVAS_PADDING

Point = tuple[float, float]


def calculate_scale(
    drawing_width: float,
    drawing_height: float,
    viewport_width: float,
    viewport_height: float,
    padding: float = CANVAS_PADDING,
) -> float:
    """
    Compute the uniform scale factor that fits a drawing into a viewport.

    The tighter of the two axes wins, so the aspect ratio is preserved and the
    whole nominal extent fits inside the padded viewport. Drawing dimensions
    must be positive; a zero extent raises ZeroDivisionError.
    """
    available_w = viewport_width - padding * 2
    available_h = viewport_height - padding * 2
    scale_x = available_w / drawing_width
    scale_y = available_h / drawing_height
    return min(scale_x, scale_y)


@dataclass(frozen=True, eq=False)
class SegmentFrame:
    """
    A directed segment with its length, direction and left-hand normal.

    Attributes:
        start: Segment start point
        end: Segment end point
        length: Euclidean length (> 0)
        direction: Unit vector from start to end
        normal: Unit normal (-dy, dx) / length
    """
    start: np.ndarray
    end: np.ndarray
    length: float
    direction: np.ndarray
    normal: np.ndarray

    @property
    def angle_degrees(self) -> float:
        """Direction angle in degrees, in (-180, 180]."""
        return math.degrees(math.atan2(self.direction[1], self.direction[0]))

    def offset(self, distance: float) -> tuple[np.ndarray, np.ndarray]:
        """Both endpoints shifted along the normal by `distance`."""
        shift = self.normal * distance
        return self.start + shift, self.end + shift


def segment_frame(x1: float, y1: float, x2: float, y2: float) -> SegmentFrame | None:
    """Build the frame of a segment, or None when its endpoints coincide."""
    start = np.array([x1, y1], dtype=float)
    end = np.array([x2, y2], dtype=float)
    delta = end - start
    length = float(np.hypot(delta[0], delta[1]))
    if length == 0:
        return None
    direction = delta / length
    normal = np.array([-direction[1], direction[0]])
    return SegmentFrame(start=start, end=end, length=length, direction=direction, normal=normal)


def oriented_rect(
    x1: float, y1: float, x2: float, y2: float, thickness: float
) -> list[Point] | None:
    """
    Four corners of a thick line centred on the segment.

    Corners run start+n, end+n, end-n, start-n where n is the normal scaled
    to half the thickness. Returns None for a zero-length segment.
    """
    frame = segment_frame(x1, y1, x2, y2)
    if frame is None:
        return None
    half = frame.normal * (thickness / 2)
    corners = [frame.start + half, frame.end + half, frame.end - half, frame.start - half]
    return [(float(c[0]), float(c[1])) for c in corners]
