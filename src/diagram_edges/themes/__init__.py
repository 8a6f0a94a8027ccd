"""Theme definitions for diagrams."""

from diagram_edges.themes.dark import DARK_THEME
from diagram_edges.themes.light import LIGHT_THEME

THEMES = {
    "light": LIGHT_THEME,
    "dark": DARK_THEME,
}

__all__ = ["THEMES", "DARK_THEME", "LIGHT_THEME"]
