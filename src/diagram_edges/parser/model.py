"""Data model for diagram nodes, edges and connector placement."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol

NODE_WIDTH: float = 120.0
"""Default node width when the definition gives no size."""

NODE_HEIGHT: float = 48.0
"""Default node height when the definition gives no size."""


@dataclass(frozen=True)
class Position:
    """A point in diagram space."""

    x: float
    y: float


class ConnectorPlacement(Enum):
    """Sides of a node on which its connectors are placed."""

    LEFT_RIGHT = "left_right"
    TOP_BOTTOM = "top_bottom"
    CENTERED = "centered"
    BOUNDARY = "boundary"


class NodeRef(Protocol):
    """The view of a node the router needs: its type and anchor position."""

    @property
    def type_id(self) -> str | None: ...

    @property
    def position(self) -> Position: ...


@dataclass
class DiagramNode:
    """A rectangular node. ``position`` is its top-left corner."""

    id: str
    label: str
    type_id: str | None = None
    position: Position = Position(0.0, 0.0)
    width: float = NODE_WIDTH
    height: float = NODE_HEIGHT
    # False until the definition or the auto placement gives coordinates
    positioned: bool = False

    @property
    def center(self) -> Position:
        return Position(
            self.position.x + self.width / 2,
            self.position.y + self.height / 2,
        )


@dataclass
class DiagramEdge:
    """A directed edge from one node's connector to another's."""

    id: str
    source: str
    target: str
    selected: bool = False


@dataclass
class PreviewEdge:
    """An edge being dragged out of ``source``; it ends at the cursor."""

    source: str
    cursor: Position


@dataclass
class Diagram:
    """Complete diagram definition."""

    title: str = ""
    nodes: dict[str, DiagramNode] = field(default_factory=dict)
    edges: list[DiagramEdge] = field(default_factory=list)
    preview: PreviewEdge | None = None

    def add_node(self, node: DiagramNode) -> None:
        self.nodes[node.id] = node

    def add_edge(self, edge: DiagramEdge) -> None:
        self.edges.append(edge)

    def ensure_node(self, node_id: str) -> DiagramNode:
        """Return the node with ``node_id``, creating a bare one if missing."""
        node = self.nodes.get(node_id)
        if node is None:
            node = DiagramNode(id=node_id, label=node_id)
            self.add_node(node)
        return node

    def node_edges(self, node_id: str) -> list[DiagramEdge]:
        """Return edges that start or end at a node."""
        return [
            edge for edge in self.edges
            if edge.source == node_id or edge.target == node_id
        ]
