"""Layout: node placement, connector geometry and edge routing."""

from diagram_edges.layout.connectors import connector_point, edge_endpoints
from diagram_edges.layout.layers import assign_layers, place_nodes
from diagram_edges.layout.routing import simple_manhattan

__all__ = [
    "assign_layers",
    "connector_point",
    "edge_endpoints",
    "place_nodes",
    "simple_manhattan",
]
