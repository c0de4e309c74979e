"""PNG export of rendered diagrams."""

from __future__ import annotations

import io
from pathlib import Path

from PIL import Image

from bus_diagram.errors import EmptyCanvasError
from bus_diagram.render.constants import PNG_COMPRESS_LEVEL


def export_png(image: Image.Image) -> bytes:
    """Serialize a rendered image to PNG bytes without re-rendering it."""
    width, height = image.size
    if width == 0 or height == 0:
        raise EmptyCanvasError(image.size)

    buffer = io.BytesIO()
    image.save(buffer, format="PNG", compress_level=PNG_COMPRESS_LEVEL)
    return buffer.getvalue()


def write_png(image: Image.Image, path: Path) -> int:
    """Write a rendered image to path as PNG. Returns the bytes written."""
    data = export_png(image)
    Path(path).write_bytes(data)
    return len(data)
