"""Curve strategies: turn edge endpoints into SVG path data.

Every generator shares the signature
``(src, dest, waypoints=None, marker_end=None) -> PathDescriptor`` so the
dispatcher can pick one by ``EdgeStyle`` alone. Only the angled
(orthogonal) style reads the waypoints.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum

from diagram_edges.parser.model import Position
from diagram_edges.render.constants import ARROW_MARKER_ID, QUADRATIC_BEND


class EdgeStyle(Enum):
    """How an edge is drawn between its connectors.

    The two cubic bezier styles differ in which axis the curve leaves
    its endpoints along, matching side- or top/bottom-mounted connectors.
    """

    LEFT_RIGHT_BEZIER = "left_right_bezier"
    TOP_BOTTOM_BEZIER = "top_bottom_bezier"
    STRAIGHT = "straight"
    QUADRATIC_BEZIER = "quadratic_bezier"
    ANGLED_MANHATTAN = "angled_manhattan"


@dataclass(frozen=True)
class PathDescriptor:
    """SVG path data plus an optional end marker reference."""

    d: str
    marker_end: str | None = None


CurveGenerator = Callable[
    [Position, Position, "Sequence[Position] | None", "str | None"], PathDescriptor
]


def _pt(p: Position) -> str:
    return f"{p.x:.2f} {p.y:.2f}"


def get_inflection_point(src: Position, dest: Position) -> Position:
    """Control point bending a quadratic curve between two points.

    The chord midpoint, pushed sideways (to the left of travel) by a
    quarter of the chord length.
    """
    mx = (src.x + dest.x) / 2
    my = (src.y + dest.y) / 2
    dx = dest.x - src.x
    dy = dest.y - src.y
    return Position(mx + dy * QUADRATIC_BEND, my - dx * QUADRATIC_BEND)


def quadratic_bezier_path(
    src: Position,
    dest: Position,
    waypoints: Sequence[Position] | None = None,
    marker_end: str | None = None,
) -> PathDescriptor:
    control = get_inflection_point(src, dest)
    return PathDescriptor(f"M {_pt(src)} Q {_pt(control)} {_pt(dest)}", marker_end)


def left_right_bezier_path(
    src: Position,
    dest: Position,
    waypoints: Sequence[Position] | None = None,
    marker_end: str | None = None,
) -> PathDescriptor:
    """S-curve whose tangents at both ends are horizontal."""
    half_width = abs(dest.x - src.x) / 2
    c1 = Position(src.x + half_width, src.y)
    c2 = Position(dest.x - half_width, dest.y)
    return PathDescriptor(
        f"M {_pt(src)} C {_pt(c1)} {_pt(c2)} {_pt(dest)}", marker_end
    )


def top_bottom_bezier_path(
    src: Position,
    dest: Position,
    waypoints: Sequence[Position] | None = None,
    marker_end: str | None = None,
) -> PathDescriptor:
    """S-curve whose tangents at both ends are vertical."""
    half_height = abs(dest.y - src.y) / 2
    c1 = Position(src.x, src.y + half_height)
    c2 = Position(dest.x, dest.y - half_height)
    return PathDescriptor(
        f"M {_pt(src)} C {_pt(c1)} {_pt(c2)} {_pt(dest)}", marker_end
    )


def straight_path(
    src: Position,
    dest: Position,
    waypoints: Sequence[Position] | None = None,
    marker_end: str | None = None,
) -> PathDescriptor:
    return PathDescriptor(f"M {_pt(src)} L {_pt(dest)}", marker_end)


def angled_manhattan_path(
    src: Position,
    dest: Position,
    waypoints: Sequence[Position] | None = None,
    marker_end: str | None = None,
) -> PathDescriptor:
    """Polyline through the router's waypoints.

    Without waypoints this is the same path as ``straight_path``.
    """
    parts = [f"M {_pt(src)}"]
    for point in waypoints or ():
        parts.append(f"L {_pt(point)}")
    parts.append(f"L {_pt(dest)}")
    return PathDescriptor(" ".join(parts), marker_end)


_GENERATORS: dict[EdgeStyle, CurveGenerator] = {
    EdgeStyle.LEFT_RIGHT_BEZIER: left_right_bezier_path,
    EdgeStyle.TOP_BOTTOM_BEZIER: top_bottom_bezier_path,
    EdgeStyle.STRAIGHT: straight_path,
    EdgeStyle.QUADRATIC_BEZIER: quadratic_bezier_path,
    EdgeStyle.ANGLED_MANHATTAN: angled_manhattan_path,
}


def edge_curve(
    src: Position,
    dest: Position,
    style: EdgeStyle,
    show_arrowhead: bool = False,
    waypoints: Sequence[Position] | None = None,
) -> PathDescriptor:
    """Build the path for an edge in the given style.

    Unrecognized styles are drawn as a left-right bezier.
    """
    marker_end = f"url(#{ARROW_MARKER_ID})" if show_arrowhead else None
    generator = _GENERATORS.get(style, left_right_bezier_path)
    return generator(src, dest, waypoints, marker_end)


def path_length(src: Position, dest: Position, waypoints: Sequence[Position]) -> float:
    """Length of the polyline src -> waypoints -> dest."""
    points = [src, *waypoints, dest]
    return sum(
        math.hypot(b.x - a.x, b.y - a.y) for a, b in zip(points, points[1:])
    )
