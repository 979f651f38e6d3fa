"""Theme definitions for charts."""

from beaned_charts.themes.dark import DARK_THEME
from beaned_charts.themes.light import LIGHT_THEME

THEMES = {
    "light": LIGHT_THEME,
    "dark": DARK_THEME,
}

__all__ = ["THEMES", "LIGHT_THEME", "DARK_THEME"]
