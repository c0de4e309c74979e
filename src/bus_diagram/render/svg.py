"""SVG generation for route diagrams using drawsvg."""

from __future__ import annotations

import drawsvg as draw

from bus_diagram.layout.config import DiagramConfig
from bus_diagram.layout.engine import (
    DiagramLayout,
    TextPlacement,
    VerticalAnchor,
    compute_diagram_layout,
)
from bus_diagram.parser.model import RouteItem
from bus_diagram.render.constants import SVG_DOMINANT_BASELINE_MIDDLE
from bus_diagram.render.fonts import TextMeasurer
from bus_diagram.render.style import Theme


def render_svg(
    items: list[RouteItem],
    config: DiagramConfig | None = None,
    theme: Theme | None = None,
    *,
    route: str = "",
    fare: str = "",
    footer: str = "",
    measurer: TextMeasurer | None = None,
) -> str:
    """Render a route diagram to an SVG string.

    Uses the same layout as the bitmap renderer; label widths are still
    measured with the locally installed fonts.
    """
    config = config or DiagramConfig()
    theme = theme or Theme()
    measurer = measurer or TextMeasurer()

    layout = compute_diagram_layout(
        items, config, measurer, route=route, fare=fare, footer=footer
    )
    return paint_svg(layout, theme)


def paint_svg(layout: DiagramLayout, theme: Theme) -> str:
    """Paint a computed layout as SVG."""
    config = layout.config
    d = draw.Drawing(layout.width, layout.height)

    # Background
    d.append(draw.Rectangle(0, 0, layout.width, layout.height, fill=theme.background_color))

    for band in (layout.header, layout.footer):
        if band is None:
            continue
        d.append(draw.Rectangle(0, band.y, layout.width, band.height, fill=theme.accent_color))

    if layout.line is not None:
        d.append(draw.Line(
            layout.line.x, layout.line.y1,
            layout.line.x, layout.line.y2,
            stroke=theme.accent_color,
            stroke_width=config.line_width,
        ))

    for marker in layout.markers:
        d.append(draw.Circle(
            marker.x, marker.y, marker.radius,
            fill=theme.marker_fill,
            stroke=theme.accent_color,
            stroke_width=config.marker_stroke_width,
        ))

    for placement in layout.texts:
        d.append(_text_element(placement, theme))

    if config.frame_width > 0:
        inset = config.frame_width / 2
        d.append(draw.Rectangle(
            inset, inset,
            layout.width - config.frame_width, layout.height - config.frame_width,
            fill="none",
            stroke=theme.frame_color,
            stroke_width=config.frame_width,
        ))

    return d.as_svg()


def _text_element(placement: TextPlacement, theme: Theme) -> draw.Text:
    """Build a text element; compressed text is scaled about its left edge."""
    attrs = {
        "fill": theme.text_color(placement.role),
        "font_family": placement.font.family,
        "font_weight": "bold" if placement.font.bold else "normal",
    }
    if placement.anchor is VerticalAnchor.MIDDLE:
        attrs["dominant_baseline"] = SVG_DOMINANT_BASELINE_MIDDLE

    if placement.horizontal_scale < 1.0:
        return draw.Text(
            placement.text,
            placement.font.size,
            0, 0,
            transform=(
                f"translate({placement.x:g},{placement.y:g}) "
                f"scale({placement.horizontal_scale:.4f},1)"
            ),
            **attrs,
        )

    return draw.Text(
        placement.text,
        placement.font.size,
        placement.x, placement.y,
        **attrs,
    )
