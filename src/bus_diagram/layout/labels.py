"""Label layout for route items.

Each item gets a one- or two-line label that should fit within
``max_label_width``. Three layouts are tried in order:

1. Primary and secondary name combined on one line.
2. Primary and secondary name on separate lines at full width.
3. Both lines compressed horizontally by a shared factor, floored at
   ``min_horizontal_scale``. Names are never truncated, so very long names
   can still overflow at the floor.
"""

from __future__ import annotations

from typing import Protocol

from bus_diagram.layout.config import DiagramConfig
from bus_diagram.parser.model import FontSpec, LabelLine, LayoutResult


class Measurer(Protocol):
    """Anything that can report the rendered width of a string."""

    def measure(self, text: str, font: FontSpec) -> float: ...


def decide_layout(
    primary: str,
    secondary: str,
    config: DiagramConfig,
    measurer: Measurer,
) -> LayoutResult:
    """Arrange a primary and optional secondary name into label lines."""
    primary_font = config.font_primary
    secondary_font = config.font_secondary
    max_width = config.max_label_width

    if not secondary:
        return (LabelLine(primary, primary_font),)

    primary_w = measurer.measure(primary, primary_font)
    combined_w = (
        primary_w
        + measurer.measure(" ", primary_font)
        + measurer.measure(secondary, primary_font)
    )
    if combined_w <= max_width:
        return (LabelLine(f"{primary} {secondary}", primary_font),)

    secondary_w = measurer.measure(secondary, secondary_font)
    if primary_w <= max_width and secondary_w <= max_width:
        return (
            LabelLine(primary, primary_font),
            LabelLine(secondary, secondary_font),
        )

    scale = compression_scale(primary_w, secondary_w, max_width, config.min_horizontal_scale)
    return (
        LabelLine(primary, primary_font, scale),
        LabelLine(secondary, secondary_font, scale),
    )


def compression_scale(
    primary_width: float,
    secondary_width: float,
    max_width: float,
    min_scale: float,
) -> float:
    """Shared horizontal scale that fits the wider line, floored at min_scale."""
    ratios = [1.0]
    if primary_width > 0:
        ratios.append(max_width / primary_width)
    if secondary_width > 0:
        ratios.append(max_width / secondary_width)
    return max(min_scale, min(ratios))


def line_center_offsets(lines: LayoutResult, line_height: float) -> list[float]:
    """Y offsets of each line's center relative to the item anchor.

    The block is centered on the anchor, so a two-line label puts the
    anchor halfway between the two line centers.
    """
    n = len(lines)
    return [(i - (n - 1) / 2) * line_height for i in range(n)]
