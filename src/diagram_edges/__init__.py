"""diagram-edges: connector routing and edge rendering for node diagrams."""

__version__ = "0.1.0"

from diagram_edges.config import DiagramConfig
from diagram_edges.layout.routing import simple_manhattan
from diagram_edges.parser.model import ConnectorPlacement, Position
from diagram_edges.render.curves import EdgeStyle, edge_curve

__all__ = [
    "ConnectorPlacement",
    "DiagramConfig",
    "EdgeStyle",
    "Position",
    "__version__",
    "edge_curve",
    "simple_manhattan",
]
