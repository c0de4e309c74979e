"""Font resolution and text measurement.

Family names are resolved to font files with matplotlib's font manager and
loaded with Pillow, so the width used for layout is the width Pillow draws.
When no family in a FontSpec can be found, Pillow's built-in default font
is used at the requested size and a warning is logged.
"""

from __future__ import annotations

import logging

from matplotlib import font_manager
from PIL import ImageFont

from bus_diagram.parser.model import FontSpec

logger = logging.getLogger(__name__)

PillowFont = ImageFont.FreeTypeFont | ImageFont.ImageFont


def find_font_file(family: str, bold: bool = False) -> str | None:
    """Return the font file for a single family name, or None if missing."""
    props = font_manager.FontProperties(
        family=family, weight="bold" if bold else "normal"
    )
    try:
        return font_manager.findfont(props, fallback_to_default=False)
    except ValueError:
        return None


class TextMeasurer:
    """Measures text in canvas pixels.

    Loaded fonts are cached per instance; create one measurer per render
    (or share one between renders on the same thread).
    """

    def __init__(self) -> None:
        self._fonts: dict[FontSpec, PillowFont] = {}

    def load_font(self, spec: FontSpec) -> PillowFont:
        """Return the Pillow font for spec, falling back to the default font."""
        font = self._fonts.get(spec)
        if font is None:
            font = self._resolve(spec)
            self._fonts[spec] = font
        return font

    def measure(self, text: str, spec: FontSpec) -> float:
        """Rendered width of text in pixels. Zero for the empty string."""
        if not text:
            return 0.0
        return float(self.load_font(spec).getlength(text))

    def text_height(self, spec: FontSpec) -> int:
        """Ascent plus descent of the resolved font."""
        font = self.load_font(spec)
        if isinstance(font, ImageFont.FreeTypeFont):
            ascent, descent = font.getmetrics()
            return ascent + descent
        left, top, right, bottom = font.getbbox("Ay")
        return bottom - top

    def _resolve(self, spec: FontSpec) -> PillowFont:
        for family in spec.families():
            path = find_font_file(family, spec.bold)
            if path is None:
                continue
            try:
                font = ImageFont.truetype(path, spec.size)
            except OSError as e:
                logger.debug("Could not load %s for %r: %s", path, family, e)
                continue
            logger.debug("Resolved font %r (bold=%s) to %s", family, spec.bold, path)
            return font

        logger.warning(
            "No font found for %r; using the default font at %spx",
            spec.family, spec.size,
        )
        return ImageFont.load_default(size=spec.size)
