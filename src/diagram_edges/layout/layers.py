"""Automatic placement for nodes without explicit coordinates.

Uses longest-path layering on a topological sort so that every edge goes
from a lower layer to a higher layer, in the flow direction implied by
the diagram's default connector placement.
"""

from __future__ import annotations

__all__ = ["assign_layers", "place_nodes"]

import logging

import networkx as nx

from diagram_edges.config import ConnectorPlacementProvider
from diagram_edges.layout.constants import (
    LAYER_SPACING,
    TRACK_SPACING,
    X_OFFSET,
    Y_OFFSET,
)
from diagram_edges.parser.model import ConnectorPlacement, Diagram, Position

logger = logging.getLogger(__name__)


def assign_layers(diagram: Diagram) -> dict[str, int]:
    """Assign each node to a layer.

    Each node's layer is 1 + the maximum layer of its predecessors.
    Raises ValueError if the edges form a cycle.

    Returns a dict mapping node_id -> layer number (0-based).
    """
    G = nx.DiGraph()
    G.add_nodes_from(diagram.nodes)
    for edge in diagram.edges:
        G.add_edge(edge.source, edge.target)

    try:
        topo_order = list(nx.topological_sort(G))
    except nx.NetworkXUnfeasible as e:
        cycle = " -> ".join(u for u, _v in nx.find_cycle(G))
        raise ValueError(
            f"Cannot place nodes automatically, edges form a cycle: {cycle}"
        ) from e

    layers: dict[str, int] = {}
    for node in topo_order:
        preds = list(G.predecessors(node))
        if not preds:
            layers[node] = 0
        else:
            layers[node] = max(layers[p] for p in preds) + 1

    return layers


def place_nodes(
    diagram: Diagram,
    config: ConnectorPlacementProvider,
    layer_spacing: float = LAYER_SPACING,
    track_spacing: float = TRACK_SPACING,
) -> None:
    """Give every unpositioned node a position from its layer.

    Layers advance along X for ``LEFT_RIGHT`` diagrams and along Y
    otherwise. Nodes sharing a layer are stacked across the flow in
    definition order. Nodes with explicit positions are left alone.
    """
    pending = [node for node in diagram.nodes.values() if not node.positioned]
    if not pending:
        return

    layers = assign_layers(diagram)
    horizontal = config.get_connector_placement() is ConnectorPlacement.LEFT_RIGHT

    tracks: dict[int, int] = {}
    for node in diagram.nodes.values():
        layer = layers[node.id]
        track = tracks.get(layer, 0)
        tracks[layer] = track + 1
        if node.positioned:
            continue

        along = layer * layer_spacing
        across = track * track_spacing
        if horizontal:
            node.position = Position(X_OFFSET + along, Y_OFFSET + across)
        else:
            node.position = Position(X_OFFSET + across, Y_OFFSET + along)
        node.positioned = True

    logger.debug(f"Placed {len(pending)} nodes across {len(tracks)} layers")
