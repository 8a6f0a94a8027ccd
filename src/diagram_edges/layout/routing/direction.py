"""Compass headings for the orthogonal router.

::

                ^
                | NEG_Y
                |
    NEG_X <----------> POS_X
                |
                | POS_Y
                v

Screen coordinates grow downwards, so stepping the index by +1 turns
counter-clockwise and stepping it by -1 turns clockwise (mod 4).
"""

from __future__ import annotations

from enum import IntEnum

from diagram_edges.parser.model import Position


class Direction(IntEnum):
    """Heading of the router's walk."""

    POS_X = 0
    NEG_Y = 1
    NEG_X = 2
    POS_Y = 3


DIRECTION_VECTORS: dict[Direction, tuple[int, int]] = {
    Direction.POS_X: (1, 0),
    Direction.NEG_Y: (0, -1),
    Direction.NEG_X: (-1, 0),
    Direction.POS_Y: (0, 1),
}

NUM_DIRECTIONS = len(Direction)


def rotate_clockwise(direction: Direction) -> Direction:
    return Direction((direction - 1) % NUM_DIRECTIONS)


def rotate_counter_clockwise(direction: Direction) -> Direction:
    return Direction((direction + 1) % NUM_DIRECTIONS)


def is_horizontal(direction: Direction) -> bool:
    return DIRECTION_VECTORS[direction][1] == 0


def translate_point(point: Position, direction: Direction, units: float) -> Position:
    """Move ``point`` by ``units`` along ``direction``."""
    vx, vy = DIRECTION_VECTORS[direction]
    return Position(point.x + vx * units, point.y + vy * units)
