"""Theme definitions for layout box diagrams."""

from flex_dump.themes.dark import DARK_THEME
from flex_dump.themes.light import LIGHT_THEME

THEMES = {
    "dark": DARK_THEME,
    "light": LIGHT_THEME,
}

__all__ = ["THEMES", "DARK_THEME", "LIGHT_THEME"]
