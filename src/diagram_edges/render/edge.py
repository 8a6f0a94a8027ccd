"""drawsvg elements for edges, preview edges and the arrowhead marker."""

from __future__ import annotations

from collections.abc import Sequence

import drawsvg as draw

from diagram_edges.parser.model import DiagramEdge, Position
from diagram_edges.render.constants import (
    ARROW_MARKER_ID,
    EDGE_CLASS,
    EDGE_DATA_TYPE,
    PATH_CLASS,
    PATH_INNER_CLASS,
    PATH_OUTER_CLASS,
    POTENTIAL_EDGE_DATA_TYPE,
    SELECTED_CLASS,
)
from diagram_edges.render.curves import EdgeStyle, PathDescriptor, edge_curve
from diagram_edges.render.style import Theme


def arrow_marker(theme: Theme) -> draw.Marker:
    """Triangular arrowhead, oriented along the path's last segment."""
    marker = draw.Marker(
        -0.1, -0.5, 0.9, 0.5,
        scale=theme.edge_width * 2,
        orient="auto",
        id=ARROW_MARKER_ID,
    )
    marker.append(draw.Lines(
        -0.1, -0.5,
        -0.1, 0.5,
        0.9, 0,
        close=True,
        fill=theme.arrow_color or theme.edge_color,
    ))
    return marker


def _classes(*names: str | None) -> str:
    return " ".join(name for name in names if name)


def _path(descriptor: PathDescriptor, class_name: str, **attrs) -> draw.Path:
    if descriptor.marker_end:
        attrs["marker_end"] = descriptor.marker_end
    return draw.Path(
        d=descriptor.d,
        class_=_classes(PATH_CLASS, class_name),
        fill="none",
        **attrs,
    )


def edge_group(
    edge: DiagramEdge,
    src: Position,
    dest: Position,
    style: EdgeStyle,
    theme: Theme,
    show_arrowhead: bool = False,
    waypoints: Sequence[Position] | None = None,
    src_type: str | None = None,
    dest_type: str | None = None,
    class_name: str | None = None,
) -> draw.Group:
    """Render a connected edge.

    Two paths share the same geometry: a wide transparent hit area
    underneath and the visible stroke on top. Only the visible stroke
    carries the arrowhead.
    """
    attrs = {
        "class_": _classes(EDGE_CLASS, class_name, SELECTED_CLASS if edge.selected else None),
        "data_id": edge.id,
        "data_type": EDGE_DATA_TYPE,
    }
    if src_type:
        attrs["data_edge_source_type"] = src_type
    if dest_type:
        attrs["data_edge_dest_type"] = dest_type
    group = draw.Group(**attrs)

    hit_area = edge_curve(src, dest, style, show_arrowhead=False, waypoints=waypoints)
    visible = edge_curve(src, dest, style, show_arrowhead=show_arrowhead, waypoints=waypoints)

    group.append(_path(
        hit_area, PATH_INNER_CLASS,
        stroke=theme.hit_area_color,
        stroke_width=theme.hit_area_width,
    ))
    group.append(_path(
        visible, PATH_OUTER_CLASS,
        stroke=theme.selected_edge_color if edge.selected else theme.edge_color,
        stroke_width=theme.edge_width,
    ))
    return group


def potential_edge_group(
    src: Position,
    dest: Position,
    style: EdgeStyle,
    theme: Theme,
    show_arrowhead: bool = False,
    waypoints: Sequence[Position] | None = None,
    class_name: str | None = None,
) -> draw.Group:
    """Render an edge still being dragged: one dashed path, no identity."""
    group = draw.Group(
        class_=_classes(EDGE_CLASS, class_name),
        data_type=POTENTIAL_EDGE_DATA_TYPE,
    )
    curve = edge_curve(src, dest, style, show_arrowhead=show_arrowhead, waypoints=waypoints)
    group.append(_path(
        curve, PATH_INNER_CLASS,
        stroke=theme.preview_edge_color or theme.edge_color,
        stroke_width=theme.edge_width,
        stroke_dasharray=theme.preview_dasharray,
    ))
    return group
