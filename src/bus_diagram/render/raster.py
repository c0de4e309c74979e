"""Bitmap rendering of route diagrams using Pillow."""

from __future__ import annotations

import math

from PIL import Image, ImageColor, ImageDraw

from bus_diagram.layout.config import DiagramConfig
from bus_diagram.layout.engine import (
    DiagramLayout,
    TextPlacement,
    VerticalAnchor,
    compute_diagram_layout,
)
from bus_diagram.parser.model import RouteItem
from bus_diagram.render.constants import (
    ANCHOR_BASELINE,
    ANCHOR_MIDDLE,
    COMPRESS_RESAMPLE,
    IMAGE_MODE,
)
from bus_diagram.render.fonts import TextMeasurer
from bus_diagram.render.style import Theme


def render_diagram(
    items: list[RouteItem],
    config: DiagramConfig | None = None,
    theme: Theme | None = None,
    *,
    route: str = "",
    fare: str = "",
    footer: str = "",
    measurer: TextMeasurer | None = None,
) -> Image.Image:
    """Render a route diagram to a new Pillow image.

    Every call paints a fresh image, so rendering the same inputs again
    gives a pixel-identical result.
    """
    config = config or DiagramConfig()
    theme = theme or Theme()
    measurer = measurer or TextMeasurer()

    layout = compute_diagram_layout(
        items, config, measurer, route=route, fare=fare, footer=footer
    )
    return paint_raster(layout, theme, measurer)


def paint_raster(
    layout: DiagramLayout,
    theme: Theme,
    measurer: TextMeasurer,
) -> Image.Image:
    """Paint a computed layout onto a new image."""
    config = layout.config
    image = Image.new(IMAGE_MODE, (layout.width, layout.height), theme.background_color)
    d = ImageDraw.Draw(image)

    # Header and footer bands
    for band in (layout.header, layout.footer):
        if band is None:
            continue
        d.rectangle(
            (0, band.y, layout.width - 1, band.y + band.height - 1),
            fill=theme.accent_color,
        )

    # Route line behind the markers
    if layout.line is not None:
        d.line(
            [(layout.line.x, layout.line.y1), (layout.line.x, layout.line.y2)],
            fill=theme.accent_color,
            width=round(config.line_width),
        )

    for marker in layout.markers:
        d.ellipse(
            (
                marker.x - marker.radius, marker.y - marker.radius,
                marker.x + marker.radius, marker.y + marker.radius,
            ),
            fill=theme.marker_fill,
            outline=theme.accent_color,
            width=round(config.marker_stroke_width),
        )

    for placement in layout.texts:
        _draw_text(image, d, placement, theme.text_color(placement.role), measurer)

    if config.frame_width > 0:
        d.rectangle(
            (0, 0, layout.width - 1, layout.height - 1),
            outline=theme.frame_color,
            width=round(config.frame_width),
        )

    return image


def _draw_text(
    image: Image.Image,
    d: ImageDraw.ImageDraw,
    placement: TextPlacement,
    color: str,
    measurer: TextMeasurer,
) -> None:
    font = measurer.load_font(placement.font)

    if placement.anchor is VerticalAnchor.BASELINE:
        d.text((placement.x, placement.y), placement.text,
               font=font, fill=color, anchor=ANCHOR_BASELINE)
        return

    if placement.horizontal_scale >= 1.0:
        d.text((placement.x, placement.y), placement.text,
               font=font, fill=color, anchor=ANCHOR_MIDDLE)
        return

    _draw_compressed_text(image, placement, font, color)


def _draw_compressed_text(
    image: Image.Image,
    placement: TextPlacement,
    font,
    color: str,
) -> None:
    """Draw text squeezed horizontally by placement.horizontal_scale.

    The text is rasterized into a coverage mask at full width, the mask is
    resized horizontally, then the text color is pasted through it.
    """
    left, top, right, bottom = font.getbbox(placement.text, anchor=ANCHOR_MIDDLE)
    width = math.ceil(right - left)
    height = math.ceil(bottom - top)
    if width <= 0 or height <= 0:
        return

    mask = Image.new("L", (width, height), 0)
    ImageDraw.Draw(mask).text(
        (-left, -top), placement.text, font=font, fill=255, anchor=ANCHOR_MIDDLE
    )

    scale = placement.horizontal_scale
    scaled_width = max(1, round(width * scale))
    mask = mask.resize((scaled_width, height), COMPRESS_RESAMPLE)

    x0 = round(placement.x + left * scale)
    y0 = round(placement.y + top)
    image.paste(
        ImageColor.getrgb(color),
        (x0, y0, x0 + scaled_width, y0 + height),
        mask,
    )
