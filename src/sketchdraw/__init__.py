"""
sketchdraw - scaled SVG rendering of construction sketch drawings.

Usage:
    from sketchdraw import load_drawing, render

    drawing = load_drawing("kitchen.json")
    svg = render(drawing, 1200, 900)
"""

from .drawing_generator import DimensionStyle, SketchDrawing, calculate_scale, format_length, render
from .models import (
    DimensionElement,
    DoorElement,
    Drawing,
    DrawingElement,
    LineElement,
    NoteElement,
    RectElement,
    StairsElement,
    StructuralElement,
    UnknownElement,
    WallElement,
    WindowElement,
    element_from_dict,
    element_to_dict,
    load_drawing,
    save_drawing,
    update_dimension_value,
)

__version__ = "0.1.0"

__all__ = [
    "render",
    "format_length",
    "calculate_scale",
    "SketchDrawing",
    "DimensionStyle",
    "Drawing",
    "DrawingElement",
    "WallElement",
    "DoorElement",
    "WindowElement",
    "DimensionElement",
    "NoteElement",
    "LineElement",
    "RectElement",
    "StructuralElement",
    "StairsElement",
    "UnknownElement",
    "element_from_dict",
    "element_to_dict",
    "load_drawing",
    "save_drawing",
    "update_dimension_value",
]
