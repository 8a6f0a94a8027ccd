"""Edge routing subpackage.

Public API:
- simple_manhattan: Orthogonal waypoints between two connectors
- pad_connector: Connector pushed out of its node along the face normal
- Direction: Compass heading of the router's walk
- SUPPORTED_PLACEMENTS: Placements the orthogonal router can route
"""

from diagram_edges.layout.routing.direction import (
    Direction,
    rotate_clockwise,
    rotate_counter_clockwise,
)
from diagram_edges.layout.routing.manhattan import (
    SUPPORTED_PLACEMENTS,
    pad_connector,
    simple_manhattan,
)

__all__ = [
    "Direction",
    "SUPPORTED_PLACEMENTS",
    "pad_connector",
    "rotate_clockwise",
    "rotate_counter_clockwise",
    "simple_manhattan",
]
