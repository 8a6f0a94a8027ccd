"""Dark grey theme."""

from diagram_edges.render.style import Theme

DARK_THEME = Theme(
    name="dark",
    background_color="#2b2b2b",
    node_fill="#3c3f41",
    node_stroke="#a9b7c6",
    node_stroke_width=1.5,
    label_color="#e0e0e0",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    label_font_size=13.0,
    title_color="#ffffff",
    title_font_size=20.0,
    edge_color="#bbbbbb",
    edge_width=2.0,
    selected_edge_color="#ffc66d",
    preview_edge_color="#6897bb",
)
