"""
Drawing data model.

A Drawing is an ordered collection of tagged elements. Every positional or
size field is in millimetres, whatever display unit the drawing uses. The
data normally arrives as JSON from an external generator, in camelCase; it
can also be loaded from YAML files written by hand.

Elements are immutable. Edits replace a whole element and produce a new
Drawing (see `update_dimension_value`).
"""

from __future__ import annotations

import json
import math
import warnings
from dataclasses import MISSING, dataclass, field, fields, replace
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, ClassVar, Literal, Union

import yaml

DimensionUnit = Literal["mm", "cm", "m", "in", "ft"]
DrawingType = Literal["floor_plan", "elevation", "section", "detail", "site_plan"]
DoorSwing = Literal["left", "right", "double", "sliding"]
StairDirection = Literal["up", "down"]
StructuralType = Literal["beam", "joist", "stud"]

STRUCTURAL_TYPES = ("beam", "joist", "stud")

# Generator defaults for fields missing from incoming drawing data
DEFAULT_DRAWING_TYPE = "floor_plan"
DEFAULT_TITLE = "Untitled Drawing"
DEFAULT_UNIT = "mm"
DEFAULT_SCALE = "1:50"
DEFAULT_WIDTH = 6000
DEFAULT_HEIGHT = 4000

# camelCase keys used on the wire -> dataclass field names
_WIRE_TO_FIELD = {
    "fontSize": "font_size",
    "strokeWidth": "stroke_width",
    "wallId": "wall_id",
}
_FIELD_TO_WIRE = {v: k for k, v in _WIRE_TO_FIELD.items()}


# =============================================================================
# ELEMENTS
# =============================================================================

@dataclass(frozen=True)
class WallElement:
    """A wall drawn as a thick line between two points."""
    type: ClassVar[str] = "wall"
    id: str
    x1: float
    y1: float
    x2: float
    y2: float
    thickness: float
    label: str | None = None


@dataclass(frozen=True)
class DoorElement:
    """
    A door anchored at (x, y).

    The door is drawn along its local +x axis and rotated by `angle` degrees
    about the anchor.
    """
    type: ClassVar[str] = "door"
    id: str
    x: float
    y: float
    width: float
    swing: DoorSwing = "left"
    angle: float = 0
    wall_id: str | None = None


@dataclass(frozen=True)
class WindowElement:
    """A window anchored at (x, y), rotated by `angle` degrees about the anchor."""
    type: ClassVar[str] = "window"
    id: str
    x: float
    y: float
    width: float
    angle: float = 0
    wall_id: str | None = None


@dataclass(frozen=True)
class DimensionElement:
    """
    A linear dimension annotation.

    Attributes:
        x1, y1, x2, y2: Measured feature endpoints
        value: Displayed measurement in mm. This is authoritative and may
            differ from the distance between the endpoints.
        offset: Distance from the measured feature to the dimension line,
            along the segment's left-hand normal. Negative values flip sides.
        unit: Display unit; None uses the drawing's unit
        label: Override text shown instead of the formatted value
    """
    type: ClassVar[str] = "dimension"
    id: str
    x1: float
    y1: float
    x2: float
    y2: float
    value: float
    offset: float = 0
    unit: DimensionUnit | None = None
    label: str | None = None


@dataclass(frozen=True)
class NoteElement:
    type: ClassVar[str] = "note"
    id: str
    x: float
    y: float
    text: str
    font_size: float | None = None


@dataclass(frozen=True)
class LineElement:
    type: ClassVar[str] = "line"
    id: str
    x1: float
    y1: float
    x2: float
    y2: float
    stroke_width: float | None = None
    dashed: bool = False
    label: str | None = None


@dataclass(frozen=True)
class RectElement:
    type: ClassVar[str] = "rect"
    id: str
    x: float
    y: float
    width: float
    height: float
    label: str | None = None
    fill: str | None = None


@dataclass(frozen=True)
class StructuralElement:
    """
    A timber member (beam, joist or stud) seen in plan.

    `width` is the thickness drawn across the member's axis; `depth` is
    carried for completeness but has no 2D projection.
    """
    type: StructuralType
    id: str
    x1: float
    y1: float
    x2: float
    y2: float
    width: float
    depth: float = 0
    label: str | None = None


@dataclass(frozen=True)
class StairsElement:
    """
    A straight flight of stairs.

    (x, y) is the top-left corner of the unrotated `width` x `length`
    footprint; `angle` rotates the flight about its own centre.
    """
    type: ClassVar[str] = "stairs"
    id: str
    x: float
    y: float
    width: float
    length: float
    steps: int
    angle: float = 0
    direction: StairDirection = "up"


@dataclass(frozen=True)
class UnknownElement:
    """An element with an unrecognised type tag, kept verbatim so it round-trips."""
    type: str
    id: str
    data: dict[str, Any] = field(default_factory=dict, compare=False)


DrawingElement = Union[
    WallElement,
    DoorElement,
    WindowElement,
    DimensionElement,
    NoteElement,
    LineElement,
    RectElement,
    StructuralElement,
    StairsElement,
    UnknownElement,
]

ELEMENT_TYPES: dict[str, type] = {
    "wall": WallElement,
    "door": DoorElement,
    "window": WindowElement,
    "dimension": DimensionElement,
    "note": NoteElement,
    "line": LineElement,
    "rect": RectElement,
    "beam": StructuralElement,
    "joist": StructuralElement,
    "stud": StructuralElement,
    "stairs": StairsElement,
}


def element_from_dict(data: dict[str, Any], index: int = 0) -> DrawingElement:
    """
    Build an element from its wire (camelCase) dictionary.

    Elements without an id get `el-<index>`. Unrecognised types are kept as
    UnknownElement with a warning.

    Raises:
        ValueError: A required field for a known type is missing
    """
    kind = data.get("type")
    element_id = str(data.get("id") or f"el-{index}")
    cls = ELEMENT_TYPES.get(kind)

    if cls is None:
        warnings.warn(
            f"Unrecognized element type {kind!r} (id {element_id!r}); it will not be rendered.",
            stacklevel=2,
        )
        return UnknownElement(type=str(kind), id=element_id, data=dict(data))

    names = {f.name for f in fields(cls)}
    kwargs: dict[str, Any] = {}
    for key, value in data.items():
        name = _WIRE_TO_FIELD.get(key, key)
        if name in names and name not in ("id", "type"):
            kwargs[name] = value

    if cls is StructuralElement:
        kwargs["type"] = kind

    missing = [
        f.name for f in fields(cls)
        if f.name not in ("id", "type")
        and f.default is MISSING and f.default_factory is MISSING
        and f.name not in kwargs
    ]
    if missing:
        raise ValueError(
            f"Element {element_id!r} of type {kind!r} is missing required fields: {', '.join(missing)}"
        )

    return cls(id=element_id, **kwargs)


def element_to_dict(element: DrawingElement) -> dict[str, Any]:
    """Convert an element back to its wire dictionary, omitting unset optionals."""
    if isinstance(element, UnknownElement):
        return dict(element.data)

    result: dict[str, Any] = {"type": element.type, "id": element.id}
    for f in fields(element):
        if f.name in ("id", "type"):
            continue
        value = getattr(element, f.name)
        if value is None or (f.name == "dashed" and value is False):
            continue
        result[_FIELD_TO_WIRE.get(f.name, f.name)] = value
    return result


# =============================================================================
# DRAWING
# =============================================================================

def utc_timestamp(moment: datetime | None = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a Z suffix."""
    moment = moment or datetime.now(timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class Drawing:
    """
    A complete technical drawing.

    Attributes:
        id: Drawing identifier
        type: Drawing type (floor_plan, elevation, section, detail, site_plan)
        title: Drawing title shown in the title block
        unit: Display unit for dimension labels
        scale: Descriptive scale label (e.g. "1:50"); not used in geometry
        elements: Elements in insertion order (default z-order)
        width: Nominal drawn extent in mm, used to fit the canvas
        height: Nominal drawn extent in mm, used to fit the canvas
        created_at: ISO-8601 creation timestamp
        updated_at: ISO-8601 timestamp of the last edit
        description: Optional longer description
        project_name: Optional project name
        drawn_by: Author shown in the title block
        notes: General notes
    """
    id: str = ""
    type: DrawingType = DEFAULT_DRAWING_TYPE
    title: str = DEFAULT_TITLE
    unit: DimensionUnit = DEFAULT_UNIT
    scale: str = DEFAULT_SCALE
    elements: tuple[DrawingElement, ...] = ()
    width: float = DEFAULT_WIDTH
    height: float = DEFAULT_HEIGHT
    created_at: str = ""
    updated_at: str = ""
    description: str | None = None
    project_name: str | None = None
    drawn_by: str | None = None
    notes: tuple[str, ...] = ()

    def __post_init__(self):
        # Lists from JSON/YAML loading
        if isinstance(self.elements, list):
            object.__setattr__(self, "elements", tuple(self.elements))
        if isinstance(self.notes, list):
            object.__setattr__(self, "notes", tuple(self.notes))

    def get_element(self, element_id: str) -> DrawingElement | None:
        """Find an element by id."""
        for element in self.elements:
            if element.id == element_id:
                return element
        return None

    def dimensions(self) -> list[DimensionElement]:
        """Dimension elements in their original order."""
        return [e for e in self.elements if isinstance(e, DimensionElement)]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Drawing:
        """Build a Drawing from generator output, filling in the generator defaults."""
        now = utc_timestamp()
        elements = [
            element_from_dict(el, i) for i, el in enumerate(data.get("elements") or [])
        ]
        return cls(
            id=str(data.get("id") or ""),
            type=data.get("type") or DEFAULT_DRAWING_TYPE,
            title=data.get("title") or DEFAULT_TITLE,
            unit=data.get("unit") or DEFAULT_UNIT,
            scale=data.get("scale") or DEFAULT_SCALE,
            elements=tuple(elements),
            width=data.get("width") or DEFAULT_WIDTH,
            height=data.get("height") or DEFAULT_HEIGHT,
            created_at=data.get("createdAt") or now,
            updated_at=data.get("updatedAt") or now,
            description=data.get("description"),
            project_name=data.get("projectName"),
            drawn_by=data.get("drawnBy"),
            notes=tuple(data.get("notes") or ()),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the wire dictionary (camelCase keys)."""
        result: dict[str, Any] = {
            "id": self.id,
            "type": self.type,
            "title": self.title,
            "unit": self.unit,
            "scale": self.scale,
            "width": self.width,
            "height": self.height,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
            "elements": [element_to_dict(e) for e in self.elements],
        }
        if self.description:
            result["description"] = self.description
        if self.project_name:
            result["projectName"] = self.project_name
        if self.drawn_by:
            result["drawnBy"] = self.drawn_by
        if self.notes:
            result["notes"] = list(self.notes)
        return result

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> Drawing:
        """Load a drawing from a YAML file."""
        with open(yaml_path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as exc:
                raise ValueError(f"Invalid YAML in {yaml_path}: {exc}") from exc
        return cls._from_loaded(data, yaml_path)

    @classmethod
    def from_json(cls, json_path: str | Path) -> Drawing:
        """Load a drawing from a JSON file."""
        with open(json_path) as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as exc:
                raise ValueError(f"Invalid JSON in {json_path}: {exc}") from exc
        return cls._from_loaded(data, json_path)

    @classmethod
    def _from_loaded(cls, data: Any, path: str | Path) -> Drawing:
        if not isinstance(data, dict):
            raise ValueError(f"{path} does not contain a drawing object")
        # Some generators wrap the payload as {"drawing": {...}}
        if "drawing" in data and isinstance(data["drawing"], dict):
            data = data["drawing"]
        return cls.from_dict(data)

    def to_yaml(self, yaml_path: str | Path) -> None:
        """Save the drawing to a YAML file."""
        with open(yaml_path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    def to_json(self, json_path: str | Path) -> None:
        """Save the drawing to a JSON file."""
        with open(json_path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)
            f.write("\n")


def load_drawing(path: str | Path) -> Drawing:
    """Load a drawing from a .json, .yaml or .yml file."""
    path = Path(path)
    if path.suffix.lower() == ".json":
        return Drawing.from_json(path)
    if path.suffix.lower() in (".yaml", ".yml"):
        return Drawing.from_yaml(path)
    raise ValueError(f"Unsupported drawing file type: {path.suffix or path.name}")


def save_drawing(drawing: Drawing, path: str | Path) -> None:
    """Save a drawing as JSON or YAML depending on the file suffix."""
    path = Path(path)
    if path.suffix.lower() == ".json":
        drawing.to_json(path)
    elif path.suffix.lower() in (".yaml", ".yml"):
        drawing.to_yaml(path)
    else:
        raise ValueError(f"Unsupported drawing file type: {path.suffix or path.name}")


def update_dimension_value(
    drawing: Drawing,
    element_id: str,
    value: float,
    now: datetime | None = None,
) -> Drawing:
    """
    Replace one dimension's displayed value.

    Returns a new Drawing; the input is left untouched. Only the matching
    dimension element and `updated_at` change.

    Raises:
        ValueError: `value` is not a positive number
        KeyError: No dimension element has `element_id`
    """
    value = float(value)
    if math.isnan(value) or value <= 0:
        raise ValueError(f"Dimension value must be a positive number, got {value}")

    found = False
    elements = []
    for element in drawing.elements:
        if isinstance(element, DimensionElement) and element.id == element_id:
            element = replace(element, value=value)
            found = True
        elements.append(element)

    if not found:
        raise KeyError(element_id)

    return replace(drawing, elements=tuple(elements), updated_at=utc_timestamp(now))
