"""Theme definitions for route diagrams."""

from bus_diagram.themes.kmb import KMB_THEME
from bus_diagram.themes.night import NIGHT_THEME

THEMES = {
    "kmb": KMB_THEME,
    "night": NIGHT_THEME,
}

__all__ = ["THEMES", "KMB_THEME", "NIGHT_THEME"]
