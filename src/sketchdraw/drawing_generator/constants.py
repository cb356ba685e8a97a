"""
Drawing generator constants.

Canvas layout, annotation geometry, and styling constants for sketch drawings.
Values are in canvas units (SVG user units) unless noted as millimetres.
"""

# =============================================================================
# CANVAS LAYOUT CONSTANTS
# =============================================================================

# Padding between the viewport edge and the scaled drawing extent
CANVAS_PADDING = 60

# Outer border rect is inset from the viewport edge; the grid sits 1 unit inside it
BORDER_INSET = 5
GRID_INSET = 6
GRID_SIZE = 20

# Title block - fixed panel anchored to the bottom-right corner
TITLE_BLOCK_WIDTH = 220
TITLE_BLOCK_HEIGHT = 60
TITLE_BLOCK_MARGIN = 10
TITLE_BLOCK_ROW_HEIGHT = 20


# =============================================================================
# ELEMENT GEOMETRY
# =============================================================================

# Walls thinner than this (after scaling) are drawn at this thickness
MIN_VISUAL_THICKNESS = 2

# Doors and windows paint a white "cut" over the wall they sit in
OPENING_CUT_MIN_WIDTH = 4
OPENING_CUT_WIDTH_PER_SCALE = 8

# Sliding door leaves overlap: first leaf covers 60%, second starts at 40%
SLIDING_LEAF_SPLIT = 0.6
SLIDING_LEAF_OVERLAP_START = 0.4
SLIDING_LEAF_OFFSET = 2

# Window sill lines sit this far either side of the window axis
WINDOW_SILL_OFFSET = 3

NOTE_FONT_SIZE = 10
LINE_STROKE_WIDTH = 1

# Structural label sits this far beyond the member's half-width
STRUCTURAL_LABEL_GAP = 4

# Stair direction arrow stops this far short of the rectangle edge
STAIR_ARROW_INSET = 10


# =============================================================================
# DIMENSION ANNOTATION CONSTANTS
# =============================================================================

EXTENSION_LINE_GAP = 3         # clearance between geometry and extension line start
EXTENSION_LINE_OVERSHOOT = 6   # extension past the dimension line
TICK_HALF_LENGTH = 4           # half-length of the perpendicular tick marks
LABEL_BOX_WIDTH = 48           # background box behind the dimension label
LABEL_BOX_HEIGHT = 16
LABEL_BOX_RADIUS = 2
DIMENSION_FONT_SIZE = 11
DIMENSION_TEXT_BASELINE = 4    # baseline drop so text centres on the line


# =============================================================================
# SVG STYLING
# =============================================================================

INK_COLOR = "#1a1a1a"
WALL_FILL = "#2d2d2d"
WALL_STROKE_WIDTH = 0.5
CUT_COLOR = "#fff"
NOTE_COLOR = "#457b9d"
LABEL_COLOR = "#666"
DIMENSION_COLOR = "#e63946"
GRID_COLOR = "#e8e8e8"
BORDER_WIDTH = 2

TIMBER_STROKE = "#8b6914"
STRUCTURAL_FILLS = {
    "beam": "#d4a574",
    "joist": "#c9a96e",
    "stud": "#b8956a",
}

# Shared marker class for hit-testing rendered shapes back to model elements
ELEMENT_CLASS = "drawing-element"
DIMENSION_CLASS = "dimension-element"
