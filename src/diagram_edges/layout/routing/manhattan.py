"""Orthogonal (Manhattan) routing between two node connectors.

The router walks from the padded source connector to the padded
destination connector along the X and Y axes, recording a waypoint at
every move. Padding pushes both ends out of the node body along the
connector's normal, so a route always leaves and enters a node
perpendicular to its surface.

Only ``LEFT_RIGHT`` and ``TOP_BOTTOM`` placements can be routed. For any
other placement the router returns an empty list and the caller falls
back to a smooth curve.
"""

from __future__ import annotations

import logging

from diagram_edges.config import ConnectorPlacementProvider, connector_placement_for
from diagram_edges.layout.routing.direction import (
    DIRECTION_VECTORS,
    Direction,
    is_horizontal,
    rotate_clockwise,
    rotate_counter_clockwise,
    translate_point,
)
from diagram_edges.parser.model import ConnectorPlacement, NodeRef, Position

logger = logging.getLogger(__name__)

SUPPORTED_PLACEMENTS = frozenset(
    {ConnectorPlacement.LEFT_RIGHT, ConnectorPlacement.TOP_BOTTOM}
)

_INITIAL_DIRECTIONS = {
    ConnectorPlacement.LEFT_RIGHT: Direction.POS_X,
    ConnectorPlacement.TOP_BOTTOM: Direction.NEG_Y,
}


def pad_connector(
    connector: Position,
    node: NodeRef,
    placement: ConnectorPlacement,
    padding: float,
) -> Position:
    """Push a connector ``padding`` units away from its node's face.

    A connector whose coordinate equals the node anchor's on the face
    axis sits on the near (left/top) face and moves towards negative
    values; any other connector moves towards positive values.
    """
    anchor = node.position
    if placement is ConnectorPlacement.LEFT_RIGHT:
        outward = Direction.NEG_X if connector.x == anchor.x else Direction.POS_X
    elif placement is ConnectorPlacement.TOP_BOTTOM:
        outward = Direction.NEG_Y if connector.y == anchor.y else Direction.POS_Y
    else:
        return connector
    return translate_point(connector, outward, padding)


def are_axis_collinear(a: Position, b: Position, c: Position) -> bool:
    """True if the three points share an X or share a Y coordinate."""
    return (a.x == b.x == c.x) or (a.y == b.y == c.y)


def _turn_towards(direction: Direction, dx: float, dy: float) -> Direction:
    """Rotate onto the other axis, facing the remaining delta on it.

    Turns counter-clockwise when there is nothing left to cover on the
    new axis; the following step then turns back onto the original axis
    facing the other way.
    """
    remaining = dy if is_horizontal(direction) else dx
    clockwise = rotate_clockwise(direction)
    cx, cy = DIRECTION_VECTORS[clockwise]
    if remaining * (cy if is_horizontal(direction) else cx) > 0:
        return clockwise
    return rotate_counter_clockwise(direction)


def _advance(current: Position, direction: Direction, target: Position) -> Position:
    """Move along ``direction`` until level with ``target`` on that axis."""
    if is_horizontal(direction):
        return Position(target.x, current.y)
    return Position(current.x, target.y)


def walk(start: Position, end: Position, direction: Direction) -> list[Position]:
    """Greedy axis-aligned walk from ``start`` to ``end``.

    Keeps the current heading while it reduces the remaining delta and
    turns 90 degrees otherwise. Every move zeroes one axis of the delta,
    so the walk makes at most two moves.
    """
    vertices = [start]
    current = start
    dx = end.x - current.x
    dy = end.y - current.y
    while dx != 0 or dy != 0:
        vx, vy = DIRECTION_VECTORS[direction]
        if dx * vx > 0 or dy * vy > 0:
            nxt = _advance(current, direction, end)
            if nxt != vertices[-1]:
                vertices.append(nxt)
            current = nxt
        else:
            direction = _turn_towards(direction, dx, dy)
        dx = end.x - current.x
        dy = end.y - current.y
    return vertices


def simple_manhattan(
    src: NodeRef,
    dest: NodeRef | None,
    src_coordinates: Position,
    dest_coordinates: Position,
    padding: float,
    config: ConnectorPlacementProvider,
) -> list[Position]:
    """Compute orthogonal waypoints from a source to a destination connector.

    Parameters
    ----------
    src : NodeRef
        Node owning the source connector.
    dest : NodeRef or None
        Node owning the destination connector. None while an edge is being
        dragged, in which case ``dest_coordinates`` is the cursor and is
        used as-is.
    src_coordinates, dest_coordinates : Position
        Connector points in diagram space.
    padding : float
        Clearance between each node face and the first/last waypoint.
    config : ConnectorPlacementProvider
        Resolves each node's connector placement.

    Returns
    -------
    list[Position]
        Waypoints starting at the padded source connector. Consecutive
        points are axis-aligned. Empty when either placement cannot be
        routed orthogonally or the padded ends coincide.
    """
    src_placement = connector_placement_for(config, src)
    dest_placement = connector_placement_for(config, dest) if dest is not None else None
    if src_placement not in SUPPORTED_PLACEMENTS or (
        dest is not None and dest_placement not in SUPPORTED_PLACEMENTS
    ):
        logger.debug(
            f"Not routing orthogonally: placements {src_placement} -> {dest_placement}"
        )
        return []

    padded_src = pad_connector(src_coordinates, src, src_placement, padding)
    padded_dest = dest_coordinates
    if dest is not None:
        padded_dest = pad_connector(dest_coordinates, dest, dest_placement, padding)

    vertices = walk(padded_src, padded_dest, _INITIAL_DIRECTIONS[src_placement])
    if len(vertices) < 2:
        logger.debug(f"Padded connectors coincide at {padded_src}, no route")
        return []

    # The edge is drawn on to dest_coordinates anyway, so a padded end that
    # lies on the same line as the segment before it adds nothing.
    if (
        dest is not None
        and len(vertices) > 2
        and are_axis_collinear(dest_coordinates, vertices[-2], vertices[-1])
    ):
        vertices.pop()

    logger.debug(f"Routed {src_coordinates} -> {dest_coordinates}: {vertices}")
    return vertices
