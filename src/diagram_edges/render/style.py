"""Theme and style constants for diagram rendering."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Theme:
    """Visual theme for a diagram."""

    name: str
    background_color: str
    node_fill: str
    node_stroke: str
    node_stroke_width: float
    label_color: str
    label_font_family: str
    label_font_size: float
    title_color: str
    title_font_size: float
    edge_color: str
    edge_width: float
    # Transparent, wider stroke under each edge that catches pointer events
    hit_area_width: float = 12.0
    hit_area_color: str = "transparent"
    selected_edge_color: str = "#1e88e5"
    preview_edge_color: str = ""  # empty = inherit edge_color
    preview_dasharray: str = "6,4"
    arrow_color: str = ""  # empty = inherit edge_color
