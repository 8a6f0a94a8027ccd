"""Diagram-wide configuration and the connector placement capability."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from diagram_edges.parser.model import ConnectorPlacement, NodeRef

if TYPE_CHECKING:
    from diagram_edges.render.curves import EdgeStyle

ROUTE_PADDING: float = 20.0
"""Clearance between a node face and the first/last orthogonal waypoint."""


class ConnectorPlacementProvider(Protocol):
    """Answers which sides of a node carry its connectors."""

    def get_connector_placement(self) -> ConnectorPlacement: ...

    def get_connector_placement_for_node_type(
        self, type_id: str
    ) -> ConnectorPlacement: ...


@dataclass
class DiagramConfig:
    """Rendering and routing settings for one diagram.

    ``type_placements`` overrides ``connector_placement`` per node type.
    ``edge_style`` of None means the style follows the source node's
    placement (see ``resolve_edge_style``).
    """

    connector_placement: ConnectorPlacement = ConnectorPlacement.LEFT_RIGHT
    type_placements: dict[str, ConnectorPlacement] = field(default_factory=dict)
    edge_style: EdgeStyle | None = None
    padding: float = ROUTE_PADDING
    show_arrowhead: bool = True

    def get_connector_placement(self) -> ConnectorPlacement:
        return self.connector_placement

    def get_connector_placement_for_node_type(
        self, type_id: str
    ) -> ConnectorPlacement:
        return self.type_placements.get(type_id, self.connector_placement)


def connector_placement_for(
    provider: ConnectorPlacementProvider,
    node: NodeRef,
) -> ConnectorPlacement:
    """Look up a node's placement by its type, or the diagram default."""
    if not node.type_id:
        return provider.get_connector_placement()
    return provider.get_connector_placement_for_node_type(node.type_id)
