"""Parser for line-based diagram definitions with %%diagram directives.

Example::

    %%diagram title: Order flow
    %%diagram placement: left_right
    %%diagram placement: decision | top_bottom
    %%diagram style: angled_manhattan
    %%diagram padding: 20
    %%diagram arrowhead: on
    %%diagram preview: check | 520,300

    receive[Receive order]
    check[In stock?]:decision @ 240,120 120x60
    receive --> check
    check -->|restock| supplier

Nodes are ``id[Label]:type @ x,y WxH`` with every part after the id
optional. Edges are ``src --> dst`` or ``src -->|edge_id| dst``; nodes an
edge mentions are created if not defined. Other ``%%`` lines are comments.
"""

from __future__ import annotations

import logging
import math
import re

from diagram_edges.config import DiagramConfig
from diagram_edges.parser.model import (
    ConnectorPlacement,
    Diagram,
    DiagramEdge,
    DiagramNode,
    Position,
    PreviewEdge,
)
from diagram_edges.render.curves import EdgeStyle

logger = logging.getLogger(__name__)

_NUM = r"-?\d+(?:\.\d+)?"

_NODE_PATTERN = re.compile(
    r"^(?P<id>\w+)"
    r"(?:\[(?P<label>[^\]]*)\])?"
    r"(?::(?P<type>\w+))?"
    rf"(?:\s*@\s*(?P<x>{_NUM})\s*,\s*(?P<y>{_NUM}))?"
    r"(?:\s+(?P<w>\d+(?:\.\d+)?)x(?P<h>\d+(?:\.\d+)?))?\s*$"
)

_EDGE_PATTERN = re.compile(
    r"^(?P<src>\w+)\s*-->\s*(?:\|(?P<id>[^|]+)\|\s*)?(?P<dst>\w+)\s*$"
)

_POINT_PATTERN = re.compile(rf"^\s*(?P<x>{_NUM})\s*,\s*(?P<y>{_NUM})\s*$")

_TRUE_VALUES = ("on", "true", "yes", "1")
_FALSE_VALUES = ("off", "false", "no", "0")


def parse_diagram(text: str) -> tuple[Diagram, DiagramConfig]:
    """Parse a diagram definition into a Diagram and its configuration.

    Raises ValueError (with the offending line number) for lines that
    are neither nodes, edges, comments nor valid directives.
    """
    diagram = Diagram()
    config = DiagramConfig()

    for lineno, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped:
            continue

        if stripped.startswith("%%diagram"):
            _parse_directive(stripped, diagram, config, lineno)
            continue

        # Plain comments
        if stripped.startswith("%%"):
            continue

        if "-->" in stripped and not _NODE_PATTERN.match(stripped):
            _parse_edge(stripped, diagram, lineno)
            continue

        _parse_node(stripped, diagram, lineno)

    if diagram.preview and diagram.preview.source not in diagram.nodes:
        raise ValueError(
            f"Preview edge starts at unknown node '{diagram.preview.source}'"
        )

    return diagram, config


def parse_placement(value: str) -> ConnectorPlacement:
    """Parse a placement name such as ``left_right`` or ``TOP-BOTTOM``."""
    key = value.strip().lower().replace("-", "_")
    try:
        return ConnectorPlacement(key)
    except ValueError:
        choices = ", ".join(p.value for p in ConnectorPlacement)
        raise ValueError(
            f"Unknown connector placement '{value.strip()}' (expected one of: {choices})"
        ) from None


def parse_edge_style(value: str) -> EdgeStyle:
    """Parse an edge style name such as ``angled_manhattan``."""
    key = value.strip().lower().replace("-", "_")
    try:
        return EdgeStyle(key)
    except ValueError:
        choices = ", ".join(s.value for s in EdgeStyle)
        raise ValueError(
            f"Unknown edge style '{value.strip()}' (expected one of: {choices})"
        ) from None


def parse_padding(value: str) -> float:
    """Parse a non-negative routing padding."""
    try:
        padding = float(value)
    except ValueError:
        raise ValueError(f"Padding must be a number, got '{value.strip()}'") from None
    if not math.isfinite(padding):
        raise ValueError(f"Padding must be finite, got '{value.strip()}'")
    if padding < 0:
        raise ValueError(f"Padding must be non-negative, got {padding:g}")
    return padding


def _parse_directive(
    line: str,
    diagram: Diagram,
    config: DiagramConfig,
    lineno: int,
) -> None:
    """Parse a %%diagram directive line."""
    content = line[len("%%diagram"):].strip()
    key, sep, value = content.partition(":")
    key = key.strip().lower()
    value = value.strip()
    if not sep:
        raise ValueError(f"line {lineno}: directive needs 'key: value', got '{line}'")

    try:
        if key == "title":
            diagram.title = value
        elif key == "placement":
            parts = value.split("|")
            if len(parts) == 2:
                config.type_placements[parts[0].strip()] = parse_placement(parts[1])
            else:
                config.connector_placement = parse_placement(value)
        elif key == "style":
            config.edge_style = parse_edge_style(value)
        elif key == "padding":
            config.padding = parse_padding(value)
        elif key == "arrowhead":
            lowered = value.lower()
            if lowered in _TRUE_VALUES:
                config.show_arrowhead = True
            elif lowered in _FALSE_VALUES:
                config.show_arrowhead = False
            else:
                raise ValueError(f"Arrowhead must be on or off, got '{value}'")
        elif key == "preview":
            diagram.preview = _parse_preview(value)
        else:
            logger.warning(f"line {lineno}: ignoring unknown directive '{key}'")
    except ValueError as e:
        raise ValueError(f"line {lineno}: {e}") from e


def _parse_preview(value: str) -> PreviewEdge:
    source, sep, point = value.partition("|")
    match = _POINT_PATTERN.match(point)
    if not sep or not source.strip() or not match:
        raise ValueError(f"Preview must be 'node | x,y', got '{value}'")
    return PreviewEdge(
        source=source.strip(),
        cursor=Position(float(match.group("x")), float(match.group("y"))),
    )


def _parse_edge(line: str, diagram: Diagram, lineno: int) -> None:
    """Parse an edge line, creating any nodes it mentions."""
    match = _EDGE_PATTERN.match(line)
    if not match:
        raise ValueError(f"line {lineno}: cannot parse edge '{line}'")

    src = match.group("src")
    dst = match.group("dst")
    diagram.ensure_node(src)
    diagram.ensure_node(dst)

    edge_id = (match.group("id") or "").strip() or _unique_edge_id(diagram, src, dst)
    if any(edge.id == edge_id for edge in diagram.edges):
        raise ValueError(f"line {lineno}: duplicate edge id '{edge_id}'")
    diagram.add_edge(DiagramEdge(id=edge_id, source=src, target=dst))


def _unique_edge_id(diagram: Diagram, src: str, dst: str) -> str:
    existing = {edge.id for edge in diagram.edges}
    base = f"{src}-{dst}"
    edge_id = base
    n = 2
    while edge_id in existing:
        edge_id = f"{base}-{n}"
        n += 1
    return edge_id


def _parse_node(line: str, diagram: Diagram, lineno: int) -> None:
    """Parse a node definition, updating a node an earlier edge created."""
    match = _NODE_PATTERN.match(line)
    if not match:
        raise ValueError(f"line {lineno}: cannot parse node '{line}'")

    node = diagram.nodes.get(match.group("id"))
    if node is None:
        node = DiagramNode(id=match.group("id"), label=match.group("id"))
        diagram.add_node(node)

    if match.group("label") is not None:
        node.label = match.group("label").strip()
    if match.group("type"):
        node.type_id = match.group("type")
    if match.group("x") is not None:
        node.position = Position(float(match.group("x")), float(match.group("y")))
        node.positioned = True
    if match.group("w") is not None:
        node.width = float(match.group("w"))
        node.height = float(match.group("h"))
