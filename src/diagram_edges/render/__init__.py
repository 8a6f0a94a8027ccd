"""Rendering: curve strategies, edge elements and SVG output."""

from diagram_edges.render.curves import EdgeStyle, PathDescriptor, edge_curve
from diagram_edges.render.svg import render_svg

__all__ = ["EdgeStyle", "PathDescriptor", "edge_curve", "render_svg"]
