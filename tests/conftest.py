"""Shared fixtures: a small floor plan in the generator's wire format."""

import copy

import pytest

from sketchdraw.models import Drawing

SAMPLE_DRAWING_DATA = {
    "id": "drw-1",
    "type": "floor_plan",
    "title": "Kitchen - Floor Plan",
    "unit": "mm",
    "scale": "1:50",
    "width": 6000,
    "height": 4000,
    "createdAt": "2026-03-01T09:00:00.000Z",
    "updatedAt": "2026-03-01T10:00:00.000Z",
    "drawnBy": "J. Carpenter",
    "notes": ["All dimensions in mm"],
    "elements": [
        {"type": "wall", "id": "w1", "x1": 0, "y1": 0, "x2": 6000, "y2": 0, "thickness": 230},
        {"type": "dimension", "id": "d1", "x1": 0, "y1": 0, "x2": 6000, "y2": 0,
         "value": 6000, "unit": "mm", "offset": -400},
        {"type": "wall", "id": "w2", "x1": 6000, "y1": 0, "x2": 6000, "y2": 4000, "thickness": 230},
        {"type": "door", "id": "door1", "x": 1000, "y": 4000, "width": 820, "swing": "right", "angle": 0},
        {"type": "dimension", "id": "d2", "x1": 6000, "y1": 0, "x2": 6000, "y2": 4000,
         "value": 4000, "unit": "mm", "offset": 400},
        {"type": "window", "id": "win1", "x": 2500, "y": 0, "width": 1200, "angle": 0},
        {"type": "note", "id": "n1", "x": 3000, "y": 2000, "text": "Bench", "fontSize": 12},
        {"type": "stairs", "id": "s1", "x": 4000, "y": 1000, "width": 900, "length": 2500,
         "steps": 12, "angle": 90, "direction": "up"},
        {"type": "joist", "id": "j1", "x1": 0, "y1": 2000, "x2": 6000, "y2": 2000,
         "width": 45, "depth": 190, "label": "J1"},
    ],
}


@pytest.fixture
def sample_data() -> dict:
    return copy.deepcopy(SAMPLE_DRAWING_DATA)


@pytest.fixture
def sample_drawing(sample_data) -> Drawing:
    return Drawing.from_dict(sample_data)
