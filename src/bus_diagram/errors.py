"""Exception types raised by bus-diagram."""

from __future__ import annotations


class BusDiagramError(Exception):
    """Base class for bus-diagram errors."""


class EmptyCanvasError(BusDiagramError):
    """Raised when exporting a canvas with zero width or height."""

    def __init__(self, size: tuple[int, int]) -> None:
        self.size = size
        super().__init__(
            f"Cannot export an empty canvas ({size[0]}x{size[1]} pixels)"
        )


class StopListError(BusDiagramError, ValueError):
    """Raised for malformed lines in a stop-list file."""

    def __init__(self, message: str, line_number: int) -> None:
        self.line_number = line_number
        super().__init__(f"line {line_number}: {message}")
