"""Tests for the orthogonal (Manhattan) router."""

from __future__ import annotations

import pytest

from diagram_edges.config import DiagramConfig
from diagram_edges.layout.connectors import connector_point
from diagram_edges.layout.routing.manhattan import (
    are_axis_collinear,
    pad_connector,
    simple_manhattan,
    walk,
)
from diagram_edges.layout.routing.direction import Direction
from diagram_edges.parser.model import ConnectorPlacement, DiagramNode, Position

LR = ConnectorPlacement.LEFT_RIGHT
TB = ConnectorPlacement.TOP_BOTTOM

CONFIG = DiagramConfig(
    connector_placement=LR,
    type_placements={
        "tb": TB,
        "centered": ConnectorPlacement.CENTERED,
        "boundary": ConnectorPlacement.BOUNDARY,
    },
)


def _node(node_id, x, y, w=100.0, h=40.0, type_id=None):
    return DiagramNode(
        id=node_id,
        label=node_id,
        type_id=type_id,
        position=Position(x, y),
        width=w,
        height=h,
        positioned=True,
    )


def _placement(node):
    return CONFIG.get_connector_placement_for_node_type(node.type_id) if node.type_id else LR


def _route(src, dest, padding=10.0, cursor=None):
    src_point = connector_point(src, _placement(src), outgoing=True)
    if dest is None:
        dest_point = cursor
    else:
        dest_point = connector_point(dest, _placement(dest), outgoing=False)
    return simple_manhattan(src, dest, src_point, dest_point, padding, CONFIG)


def _assert_axis_aligned(points):
    for a, b in zip(points, points[1:]):
        assert (a.x == b.x) != (a.y == b.y), f"{a} -> {b} is not axis-aligned"


# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------


def test_straight_horizontal_route_keeps_two_points():
    """Side-by-side nodes: a straight run, never trimmed below two points."""
    src = _node("a", -100, -20)  # right connector at (0, 0)
    dest = _node("b", 100, -20)  # left connector at (100, 0)
    route = _route(src, dest, padding=10)
    assert route == [Position(10, 0), Position(90, 0)]


def test_l_shape_between_side_and_top_connectors():
    src = _node("a", -100, -20)  # right connector at (0, 0)
    dest = _node("b", -40, 100, w=80, type_id="tb")  # top connector at (0, 100)
    route = _route(src, dest, padding=5)
    assert route == [Position(5, 0), Position(5, 95), Position(0, 95)]
    _assert_axis_aligned(route)


def test_route_to_cursor_without_destination_node():
    src = _node("a", -100, -20)
    route = _route(src, None, padding=10, cursor=Position(50, 80))
    assert route == [Position(10, 0), Position(50, 0), Position(50, 80)]
    # The cursor is used unpadded
    assert route[-1] == Position(50, 80)


def test_redundant_final_waypoint_is_trimmed():
    """Destination, penultimate and last waypoint on one vertical line."""
    src = _node("a", -100, -20)  # right connector at (0, 0)
    dest = _node("b", 10, 100, w=80, type_id="tb")  # top connector at (50, 100)
    route = _route(src, dest, padding=10)
    assert route == [Position(10, 0), Position(50, 0)]


def test_final_waypoint_kept_when_not_collinear():
    src = _node("a", -100, -20)
    dest = _node("b", -40, 100, w=80, type_id="tb")
    route = _route(src, dest, padding=5)
    assert route[-1] == Position(0, 95)


def test_top_bottom_source_to_lower_left_destination_terminates():
    """A bottom connector heading for a target below and to the left."""
    src = _node("a", 200, 0, type_id="tb")  # bottom connector at (250, 40)
    dest = _node("b", 0, 200)  # left connector at (0, 220)
    route = _route(src, dest, padding=10)
    assert route == [Position(250, 50), Position(-10, 50), Position(-10, 220)]


def test_coinciding_padded_ends_give_no_route():
    src = _node("a", 0, 0)  # right connector (100, 20) -> padded (110, 20)
    dest = _node("b", 120, 0)  # left connector (120, 20) -> padded (110, 20)
    assert _route(src, dest, padding=10) == []


def test_zero_padding_starts_on_connector():
    src = _node("a", -100, -20)
    dest = _node("b", 100, 60)
    route = _route(src, dest, padding=0)
    assert route[0] == Position(0, 0)
    _assert_axis_aligned(route)


# ---------------------------------------------------------------------------
# Guard
# ---------------------------------------------------------------------------


class TestUnsupportedPlacement:
    def test_unsupported_source(self):
        src = _node("a", 0, 0, type_id="centered")
        dest = _node("b", 300, 0)
        assert _route(src, dest) == []

    def test_unsupported_destination(self):
        src = _node("a", 0, 0)
        dest = _node("b", 300, 0, type_id="centered")
        assert _route(src, dest) == []

    def test_supported_source_with_boundary_destination(self):
        """Both endpoints need a supported placement, not just the source."""
        src = _node("a", 0, 0)
        dest = _node("b", 300, 100, type_id="boundary")
        dest_point = connector_point(
            dest, ConnectorPlacement.BOUNDARY, outgoing=False, toward=src.center
        )
        assert simple_manhattan(src, dest, Position(100, 20), dest_point, 10, CONFIG) == []

    def test_unsupported_source_without_destination(self):
        src = _node("a", 0, 0, type_id="boundary")
        assert _route(src, None, cursor=Position(300, 300)) == []

    def test_untyped_nodes_use_diagram_default(self):
        config = DiagramConfig(connector_placement=ConnectorPlacement.CENTERED)
        src = _node("a", 0, 0)
        dest = _node("b", 300, 0)
        assert simple_manhattan(src, dest, Position(100, 20), Position(300, 20), 10, config) == []


# ---------------------------------------------------------------------------
# Properties over many layouts
# ---------------------------------------------------------------------------

_DEST_POSITIONS = [
    (-300, -200), (-300, 200), (300, -200), (300, 200),
    (0, 300), (0, -300), (300, 0), (-300, 0), (30, 150),
]


@pytest.mark.parametrize("src_type", [None, "tb"])
@pytest.mark.parametrize("dest_type", [None, "tb"])
@pytest.mark.parametrize("dest_pos", _DEST_POSITIONS)
class TestRouteProperties:
    def _nodes(self, src_type, dest_type, dest_pos):
        return _node("a", 0, 0, type_id=src_type), _node("b", *dest_pos, type_id=dest_type)

    def test_axis_aligned_and_non_trivial(self, src_type, dest_type, dest_pos):
        src, dest = self._nodes(src_type, dest_type, dest_pos)
        route = _route(src, dest, padding=15)
        assert len(route) >= 2
        _assert_axis_aligned(route)

    def test_first_waypoint_is_padded_source(self, src_type, dest_type, dest_pos):
        src, dest = self._nodes(src_type, dest_type, dest_pos)
        placement = _placement(src)
        src_point = connector_point(src, placement, outgoing=True)
        route = _route(src, dest, padding=15)
        first = route[0]
        if placement is LR:
            assert first.y == src_point.y
            assert abs(first.x - src_point.x) == 15
        else:
            assert first.x == src_point.x
            assert abs(first.y - src_point.y) == 15

    def test_last_waypoint_is_padded_destination_or_trimmed(
        self, src_type, dest_type, dest_pos
    ):
        src, dest = self._nodes(src_type, dest_type, dest_pos)
        placement = _placement(dest)
        dest_point = connector_point(dest, placement, outgoing=False)
        padded = pad_connector(dest_point, dest, placement, 15)
        route = _route(src, dest, padding=15)
        if route[-1] != padded:
            # Dropped because it was collinear with the destination
            assert are_axis_collinear(dest_point, route[-1], padded)

    def test_deterministic(self, src_type, dest_type, dest_pos):
        src, dest = self._nodes(src_type, dest_type, dest_pos)
        assert _route(src, dest) == _route(src, dest)

    def test_inputs_not_mutated(self, src_type, dest_type, dest_pos):
        src, dest = self._nodes(src_type, dest_type, dest_pos)
        before = (src.position, dest.position)
        _route(src, dest)
        assert (src.position, dest.position) == before


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class TestPadConnector:
    def test_left_face_moves_left(self):
        node = _node("a", 0, 0)
        assert pad_connector(Position(0, 20), node, LR, 10) == Position(-10, 20)

    def test_right_face_moves_right(self):
        node = _node("a", 0, 0)
        assert pad_connector(Position(100, 20), node, LR, 10) == Position(110, 20)

    def test_top_face_moves_up(self):
        node = _node("a", 0, 0)
        assert pad_connector(Position(50, 0), node, TB, 10) == Position(50, -10)

    def test_bottom_face_moves_down(self):
        node = _node("a", 0, 0)
        assert pad_connector(Position(50, 40), node, TB, 10) == Position(50, 50)

    def test_other_placements_unchanged(self):
        node = _node("a", 0, 0)
        point = Position(50, 20)
        assert pad_connector(point, node, ConnectorPlacement.CENTERED, 10) == point


class TestWalk:
    def test_already_there(self):
        assert walk(Position(1, 1), Position(1, 1), Direction.POS_X) == [Position(1, 1)]

    def test_reverses_heading(self):
        """Heading +X towards a target straight behind turns around."""
        assert walk(Position(0, 0), Position(-50, 0), Direction.POS_X) == [
            Position(0, 0),
            Position(-50, 0),
        ]

    def test_fractional_coordinates_land_exactly(self):
        route = walk(Position(0.1, 0.2), Position(0.3, 0.7), Direction.POS_X)
        assert route[-1] == Position(0.3, 0.7)
        assert len(route) == 3


def test_are_axis_collinear():
    assert are_axis_collinear(Position(0, 0), Position(0, 5), Position(0, 9))
    assert are_axis_collinear(Position(1, 3), Position(5, 3), Position(9, 3))
    assert not are_axis_collinear(Position(0, 0), Position(1, 1), Position(2, 2))
