"""Theme definitions for dashboard previews."""

from widget_grid.themes.dark import DARK_THEME
from widget_grid.themes.light import LIGHT_THEME

THEMES = {
    "dark": DARK_THEME,
    "light": LIGHT_THEME,
}

__all__ = ["THEMES", "DARK_THEME", "LIGHT_THEME"]
