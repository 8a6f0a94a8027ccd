"""Light theme."""

from diagram_edges.render.style import Theme

LIGHT_THEME = Theme(
    name="light",
    background_color="none",
    node_fill="#ffffff",
    node_stroke="#555555",
    node_stroke_width=1.5,
    label_color="#222222",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    label_font_size=13.0,
    title_color="#111111",
    title_font_size=20.0,
    edge_color="#666666",
    edge_width=2.0,
)
