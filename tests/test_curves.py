"""Tests for the curve strategies and style dispatch."""

from __future__ import annotations

import pytest

from diagram_edges.parser.model import Position
from diagram_edges.render.curves import (
    EdgeStyle,
    PathDescriptor,
    angled_manhattan_path,
    edge_curve,
    get_inflection_point,
    left_right_bezier_path,
    path_length,
    quadratic_bezier_path,
    straight_path,
    top_bottom_bezier_path,
)

SRC = Position(0, 0)
DEST = Position(100, 50)


def test_straight_path():
    assert straight_path(SRC, DEST) == PathDescriptor("M 0.00 0.00 L 100.00 50.00")


def test_left_right_bezier_extends_horizontally():
    path = left_right_bezier_path(SRC, DEST)
    assert path.d == "M 0.00 0.00 C 50.00 0.00 50.00 50.00 100.00 50.00"


def test_left_right_bezier_backwards_loops_outward():
    """Leaving to the right and arriving from the left when dest is behind."""
    path = left_right_bezier_path(Position(100, 0), Position(0, 50))
    assert path.d == "M 100.00 0.00 C 150.00 0.00 -50.00 50.00 0.00 50.00"


def test_top_bottom_bezier_extends_vertically():
    path = top_bottom_bezier_path(Position(0, 0), Position(50, 100))
    assert path.d == "M 0.00 0.00 C 0.00 50.00 50.00 50.00 50.00 100.00"


def test_quadratic_bezier_uses_inflection_point():
    path = quadratic_bezier_path(Position(0, 0), Position(100, 0))
    assert path.d == "M 0.00 0.00 Q 50.00 -25.00 100.00 0.00"


class TestInflectionPoint:
    def test_offset_from_midpoint(self):
        assert get_inflection_point(Position(0, 0), Position(100, 0)) == Position(50, -25)

    def test_vertical_chord(self):
        assert get_inflection_point(Position(0, 0), Position(0, 100)) == Position(25, 50)

    def test_zero_length_chord(self):
        assert get_inflection_point(Position(7, 3), Position(7, 3)) == Position(7, 3)


class TestAngledManhattan:
    def test_through_waypoints(self):
        waypoints = [Position(10, 0), Position(10, 20)]
        path = angled_manhattan_path(SRC, Position(30, 20), waypoints)
        assert path.d == "M 0.00 0.00 L 10.00 0.00 L 10.00 20.00 L 30.00 20.00"

    @pytest.mark.parametrize("waypoints", [None, []])
    def test_without_waypoints_matches_straight(self, waypoints):
        assert angled_manhattan_path(SRC, DEST, waypoints) == straight_path(SRC, DEST)

    def test_other_styles_ignore_waypoints(self):
        waypoints = [Position(10, 0)]
        assert straight_path(SRC, DEST, waypoints) == straight_path(SRC, DEST)


class TestEdgeCurve:
    @pytest.mark.parametrize(
        ("style", "generator"),
        [
            (EdgeStyle.LEFT_RIGHT_BEZIER, left_right_bezier_path),
            (EdgeStyle.TOP_BOTTOM_BEZIER, top_bottom_bezier_path),
            (EdgeStyle.STRAIGHT, straight_path),
            (EdgeStyle.QUADRATIC_BEZIER, quadratic_bezier_path),
            (EdgeStyle.ANGLED_MANHATTAN, angled_manhattan_path),
        ],
    )
    def test_dispatch(self, style, generator):
        assert edge_curve(SRC, DEST, style) == generator(SRC, DEST)

    def test_waypoints_reach_angled_generator(self):
        waypoints = [Position(50, 0), Position(50, 50)]
        path = edge_curve(SRC, DEST, EdgeStyle.ANGLED_MANHATTAN, waypoints=waypoints)
        assert path == angled_manhattan_path(SRC, DEST, waypoints)

    def test_unknown_style_falls_back_to_left_right_bezier(self):
        assert edge_curve(SRC, DEST, "zigzag") == left_right_bezier_path(SRC, DEST)

    def test_no_marker_by_default(self):
        assert edge_curve(SRC, DEST, EdgeStyle.STRAIGHT).marker_end is None

    @pytest.mark.parametrize("style", list(EdgeStyle))
    def test_arrowhead_marker(self, style):
        path = edge_curve(SRC, DEST, style, show_arrowhead=True)
        assert path.marker_end == "url(#arrow)"

    def test_arrowhead_does_not_change_geometry(self):
        plain = edge_curve(SRC, DEST, EdgeStyle.QUADRATIC_BEZIER)
        arrowed = edge_curve(SRC, DEST, EdgeStyle.QUADRATIC_BEZIER, show_arrowhead=True)
        assert plain.d == arrowed.d


def test_path_length():
    waypoints = [Position(30, 0), Position(30, 40)]
    assert path_length(SRC, Position(60, 40), waypoints) == pytest.approx(100.0)
