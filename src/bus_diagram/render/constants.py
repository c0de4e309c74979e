"""Render constants used across render modules.

Theme-dependent values remain in style.py.
"""

from PIL import Image

# ---------------------------------------------------------------------------
# Raster output
# ---------------------------------------------------------------------------
IMAGE_MODE: str = "RGB"
"""Pillow mode of rendered diagrams."""

COMPRESS_RESAMPLE = Image.Resampling.LANCZOS
"""Filter used to squeeze horizontally compressed labels."""

PNG_COMPRESS_LEVEL: int = 6
"""zlib level for exported PNGs."""

# ---------------------------------------------------------------------------
# Pillow text anchors (see Pillow's "Text anchors" documentation)
# ---------------------------------------------------------------------------
ANCHOR_BASELINE: str = "ls"
"""Left edge, baseline."""

ANCHOR_MIDDLE: str = "lm"
"""Left edge, vertical middle."""

# ---------------------------------------------------------------------------
# SVG output
# ---------------------------------------------------------------------------
SVG_DOMINANT_BASELINE_MIDDLE: str = "central"
"""dominant-baseline used for vertically centered labels."""
