"""Connector geometry: where on a node an edge attaches."""

from __future__ import annotations

from diagram_edges.config import ConnectorPlacementProvider, connector_placement_for
from diagram_edges.parser.model import (
    ConnectorPlacement,
    Diagram,
    DiagramEdge,
    DiagramNode,
    Position,
)


def connector_point(
    node: DiagramNode,
    placement: ConnectorPlacement,
    outgoing: bool,
    toward: Position | None = None,
) -> Position:
    """Return the point on ``node`` where an edge attaches.

    Outgoing edges leave from the right (``LEFT_RIGHT``) or bottom
    (``TOP_BOTTOM``) face; incoming edges arrive on the left or top face.
    ``BOUNDARY`` attaches where the line from the node center to
    ``toward`` crosses the node outline.
    """
    x, y = node.position.x, node.position.y
    if placement is ConnectorPlacement.LEFT_RIGHT:
        return Position(x + node.width if outgoing else x, y + node.height / 2)
    if placement is ConnectorPlacement.TOP_BOTTOM:
        return Position(x + node.width / 2, y + node.height if outgoing else y)
    if placement is ConnectorPlacement.BOUNDARY and toward is not None:
        return boundary_point(node, toward)
    return node.center


def boundary_point(node: DiagramNode, toward: Position) -> Position:
    """Intersect the ray from the node center towards ``toward`` with its outline."""
    center = node.center
    dx = toward.x - center.x
    dy = toward.y - center.y
    if dx == 0 and dy == 0:
        return center

    scales = []
    if dx != 0:
        scales.append((node.width / 2) / abs(dx))
    if dy != 0:
        scales.append((node.height / 2) / abs(dy))
    t = min(scales)
    return Position(center.x + dx * t, center.y + dy * t)


def edge_endpoints(
    diagram: Diagram,
    edge: DiagramEdge,
    config: ConnectorPlacementProvider,
) -> tuple[Position, Position]:
    """Return the (source, destination) connector points of an edge."""
    src = diagram.nodes[edge.source]
    dest = diagram.nodes[edge.target]
    src_point = connector_point(
        src, connector_placement_for(config, src), outgoing=True, toward=dest.center
    )
    dest_point = connector_point(
        dest, connector_placement_for(config, dest), outgoing=False, toward=src.center
    )
    return src_point, dest_point
