"""Shared SVG helpers used across drawing modules."""

from __future__ import annotations

from xml.sax.saxutils import escape as _xml_escape

from .constants import ELEMENT_CLASS

_ATTR_ENTITIES = {'"': "&quot;", "'": "&apos;"}


def escape(text) -> str:
    """Escape XML special characters for text content and attribute values."""
    return _xml_escape(str(text), _ATTR_ENTITIES)


def fmt(value: float) -> str:
    """Format a coordinate with two decimals, never emitting negative zero."""
    text = f"{value:.2f}"
    return "0.00" if text == "-0.00" else text


def points_attr(points) -> str:
    """Serialise (x, y) pairs for a polygon `points` attribute."""
    return " ".join(f"{fmt(x)},{fmt(y)}" for x, y in points)


def element_attrs(element_id: str, element_type: str, css_class: str = ELEMENT_CLASS) -> str:
    """Hit-test attributes carried by every rendered element's root node."""
    return (
        f'data-id="{escape(element_id)}" data-type="{escape(element_type)}" '
        f'class="{css_class}"'
    )
