"""SVG generation for diagrams using drawsvg."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import drawsvg as draw

from diagram_edges.config import DiagramConfig, connector_placement_for
from diagram_edges.layout.connectors import connector_point, edge_endpoints
from diagram_edges.layout.routing.manhattan import simple_manhattan
from diagram_edges.parser.model import (
    ConnectorPlacement,
    Diagram,
    DiagramEdge,
    DiagramNode,
    Position,
    PreviewEdge,
)
from diagram_edges.render.constants import (
    CANVAS_PADDING,
    NODE_CORNER_RADIUS,
    NODE_DATA_TYPE,
    TITLE_HEIGHT,
)
from diagram_edges.render.curves import EdgeStyle
from diagram_edges.render.edge import arrow_marker, edge_group, potential_edge_group
from diagram_edges.render.style import Theme

logger = logging.getLogger(__name__)

_SMOOTH_STYLES = {
    ConnectorPlacement.LEFT_RIGHT: EdgeStyle.LEFT_RIGHT_BEZIER,
    ConnectorPlacement.TOP_BOTTOM: EdgeStyle.TOP_BOTTOM_BEZIER,
}


@dataclass
class EdgeGeometry:
    """Everything needed to draw one edge."""

    src: Position
    dest: Position
    style: EdgeStyle
    waypoints: list[Position] | None = None


def smooth_style_for(placement: ConnectorPlacement) -> EdgeStyle:
    """The curve that suits a placement when no orthogonal route is drawn."""
    return _SMOOTH_STYLES.get(placement, EdgeStyle.STRAIGHT)


def resolve_edge_style(config: DiagramConfig, placement: ConnectorPlacement) -> EdgeStyle:
    """The configured edge style, or the smooth style implied by placement."""
    if config.edge_style is not None:
        return config.edge_style
    return smooth_style_for(placement)


def _geometry(
    src_node: DiagramNode,
    dest_node: DiagramNode | None,
    src: Position,
    dest: Position,
    config: DiagramConfig,
) -> EdgeGeometry:
    placement = connector_placement_for(config, src_node)
    style = resolve_edge_style(config, placement)
    if style is not EdgeStyle.ANGLED_MANHATTAN:
        return EdgeGeometry(src, dest, style)

    waypoints = simple_manhattan(src_node, dest_node, src, dest, config.padding, config)
    if not waypoints:
        fallback = smooth_style_for(placement)
        logger.debug(f"No orthogonal route from {src_node.id!r}, drawing {fallback.value}")
        return EdgeGeometry(src, dest, fallback)
    return EdgeGeometry(src, dest, style, waypoints)


def edge_geometry(
    diagram: Diagram,
    edge: DiagramEdge,
    config: DiagramConfig,
) -> EdgeGeometry:
    """Connector points, style and (for orthogonal edges) waypoints of an edge."""
    src, dest = edge_endpoints(diagram, edge, config)
    return _geometry(
        diagram.nodes[edge.source], diagram.nodes[edge.target], src, dest, config
    )


def preview_geometry(
    diagram: Diagram,
    preview: PreviewEdge,
    config: DiagramConfig,
) -> EdgeGeometry:
    """Geometry of an edge dragged from a node to the cursor."""
    src_node = diagram.nodes[preview.source]
    src = connector_point(
        src_node,
        connector_placement_for(config, src_node),
        outgoing=True,
        toward=preview.cursor,
    )
    return _geometry(src_node, None, src, preview.cursor, config)


def _bounds(
    diagram: Diagram,
    geometries: list[EdgeGeometry],
) -> tuple[float, float, float, float]:
    xs: list[float] = []
    ys: list[float] = []
    for node in diagram.nodes.values():
        xs.extend((node.position.x, node.position.x + node.width))
        ys.extend((node.position.y, node.position.y + node.height))
    for geom in geometries:
        for point in (geom.src, geom.dest, *(geom.waypoints or ())):
            xs.append(point.x)
            ys.append(point.y)
    return min(xs), min(ys), max(xs), max(ys)


def render_svg(
    diagram: Diagram,
    theme: Theme,
    config: DiagramConfig | None = None,
    padding: float = CANVAS_PADDING,
) -> str:
    """Render a diagram to an SVG string.

    Every node must have a position (see ``layout.place_nodes``).
    """
    if not diagram.nodes:
        return '<svg xmlns="http://www.w3.org/2000/svg"></svg>'

    config = config or DiagramConfig()

    edge_geoms = [
        (edge, edge_geometry(diagram, edge, config)) for edge in diagram.edges
    ]
    preview_geom = None
    if diagram.preview is not None:
        preview_geom = preview_geometry(diagram, diagram.preview, config)

    all_geoms = [geom for _edge, geom in edge_geoms]
    if preview_geom is not None:
        all_geoms.append(preview_geom)
    min_x, min_y, max_x, max_y = _bounds(diagram, all_geoms)

    title_height = TITLE_HEIGHT if diagram.title else 0.0
    origin_x = min_x - padding
    origin_y = min_y - padding - title_height
    svg_width = int(max_x - min_x + padding * 2)
    svg_height = int(max_y - min_y + padding * 2 + title_height)

    d = draw.Drawing(svg_width, svg_height, origin=(origin_x, origin_y))

    d.append(draw.Rectangle(
        origin_x, origin_y, svg_width, svg_height, fill=theme.background_color,
    ))

    if config.show_arrowhead:
        d.append_def(arrow_marker(theme))

    if diagram.title:
        d.append(draw.Text(
            diagram.title,
            theme.title_font_size,
            origin_x + padding, origin_y + padding,
            fill=theme.title_color,
            font_family=theme.label_font_family,
            font_weight="bold",
        ))

    # Edges behind nodes
    for edge, geom in edge_geoms:
        d.append(edge_group(
            edge,
            geom.src,
            geom.dest,
            geom.style,
            theme,
            show_arrowhead=config.show_arrowhead,
            waypoints=geom.waypoints,
            src_type=diagram.nodes[edge.source].type_id,
            dest_type=diagram.nodes[edge.target].type_id,
        ))

    _render_nodes(d, diagram, theme)

    if preview_geom is not None:
        d.append(potential_edge_group(
            preview_geom.src,
            preview_geom.dest,
            preview_geom.style,
            theme,
            show_arrowhead=config.show_arrowhead,
            waypoints=preview_geom.waypoints,
        ))

    logger.info(
        f"Rendered {len(diagram.nodes)} nodes and {len(diagram.edges)} edges "
        f"({svg_width}x{svg_height})"
    )
    return d.as_svg()


def _render_nodes(d: draw.Drawing, diagram: Diagram, theme: Theme) -> None:
    """Render nodes as rounded rectangles with centered labels."""
    for node in diagram.nodes.values():
        group = draw.Group(
            class_="dm-node",
            data_id=node.id,
            data_type=NODE_DATA_TYPE,
        )
        group.append(draw.Rectangle(
            node.position.x, node.position.y,
            node.width, node.height,
            rx=NODE_CORNER_RADIUS, ry=NODE_CORNER_RADIUS,
            fill=theme.node_fill,
            stroke=theme.node_stroke,
            stroke_width=theme.node_stroke_width,
        ))
        center = node.center
        group.append(draw.Text(
            node.label,
            theme.label_font_size,
            center.x, center.y,
            fill=theme.label_color,
            font_family=theme.label_font_family,
            text_anchor="middle",
            dominant_baseline="central",
        ))
        d.append(group)
