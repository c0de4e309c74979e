"""Route diagram rendering: text measurement, bitmap/SVG painters and export."""

from bus_diagram.render.export import export_png, write_png
from bus_diagram.render.fonts import TextMeasurer
from bus_diagram.render.raster import render_diagram
from bus_diagram.render.style import Theme
from bus_diagram.render.svg import render_svg

__all__ = [
    "TextMeasurer",
    "Theme",
    "export_png",
    "render_diagram",
    "render_svg",
    "write_png",
]
