"""Diagram data model and definition parser.

Import the text parser from ``diagram_edges.parser.definition``.
"""

from diagram_edges.parser.model import (
    ConnectorPlacement,
    Diagram,
    DiagramEdge,
    DiagramNode,
    NodeRef,
    Position,
    PreviewEdge,
)

__all__ = [
    "ConnectorPlacement",
    "Diagram",
    "DiagramEdge",
    "DiagramNode",
    "NodeRef",
    "Position",
    "PreviewEdge",
]
