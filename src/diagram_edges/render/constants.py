"""Render constants used across render modules.

Theme-dependent values remain in style.py.
"""

# ---------------------------------------------------------------------------
# Canvas
# ---------------------------------------------------------------------------
CANVAS_PADDING: float = 40.0
"""Default padding around the diagram content."""

TITLE_HEIGHT: float = 40.0
"""Space reserved above the content for the diagram title."""

# ---------------------------------------------------------------------------
# Curves
# ---------------------------------------------------------------------------
QUADRATIC_BEND: float = 0.25
"""Sideways offset of the quadratic control point, as a fraction of the chord."""

ARROW_MARKER_ID: str = "arrow"
"""Element id of the arrowhead marker referenced by marker-end."""

# ---------------------------------------------------------------------------
# Nodes
# ---------------------------------------------------------------------------
NODE_CORNER_RADIUS: float = 6.0
"""Corner radius of node rectangles."""

# ---------------------------------------------------------------------------
# Element tagging
# ---------------------------------------------------------------------------
EDGE_CLASS: str = "dm-edge"
PATH_CLASS: str = "dm-path"
PATH_INNER_CLASS: str = "dm-path-inner"
PATH_OUTER_CLASS: str = "dm-path-outer"
SELECTED_CLASS: str = "dm-selected"

EDGE_DATA_TYPE: str = "DiagramMaker.Edge"
POTENTIAL_EDGE_DATA_TYPE: str = "DiagramMaker.PotentialEdge"
NODE_DATA_TYPE: str = "DiagramMaker.Node"
