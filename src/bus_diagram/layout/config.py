"""Geometry and typography settings for a route diagram."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from enum import Enum

from bus_diagram.layout.constants import (
    CANVAS_PADDING,
    CANVAS_WIDTH,
    CIRCLE_RADIUS,
    FARE_FONT_SIZE,
    FARE_TEMPLATE,
    FIRST_ITEM_OFFSET,
    FOOTER_FONT_SIZE,
    FOOTER_HEIGHT,
    FRAME_WIDTH,
    HEADER_HEIGHT,
    LABEL_FONT_FAMILY,
    LINE_HEIGHT,
    LINE_WIDTH,
    LINE_X,
    MARKER_STROKE_WIDTH,
    MAX_LABEL_WIDTH,
    MIN_HORIZONTAL_SCALE,
    PRIMARY_FONT_SIZE,
    ROUTE_FONT_SIZE,
    SECONDARY_FONT_SIZE,
    STOP_SPACING,
    TEXT_X,
)
from bus_diagram.parser.model import FontSpec


class SpacingMode(Enum):
    """How items are distributed vertically."""

    FIXED = "fixed"  # stop_spacing between consecutive items
    FAN = "fan"  # total_usable_height split evenly across the gaps


# Geometry that may be zero to switch the feature off
_OPTIONAL_GEOMETRY = ("footer_height", "frame_width")

_REQUIRED_GEOMETRY = (
    "canvas_width",
    "header_height",
    "padding",
    "line_x",
    "text_x",
    "first_item_offset",
    "stop_spacing",
    "circle_radius",
    "marker_stroke_width",
    "line_width",
    "max_label_width",
    "line_height",
)


@dataclass(frozen=True)
class DiagramConfig:
    """Settings for one route diagram render.

    canvas_height=None derives the height from the item count (fixed
    spacing) so every item fits. total_usable_height=None in fan mode
    spreads items over whatever the canvas leaves below the header.
    """

    canvas_width: int = CANVAS_WIDTH
    canvas_height: int | None = None
    header_height: float = HEADER_HEIGHT
    footer_height: float = FOOTER_HEIGHT
    padding: float = CANVAS_PADDING
    frame_width: float = FRAME_WIDTH
    line_x: float = LINE_X
    text_x: float = TEXT_X
    first_item_offset: float = FIRST_ITEM_OFFSET
    spacing_mode: SpacingMode = SpacingMode.FIXED
    stop_spacing: float = STOP_SPACING
    total_usable_height: float | None = None
    circle_radius: float = CIRCLE_RADIUS
    marker_stroke_width: float = MARKER_STROKE_WIDTH
    line_width: float = LINE_WIDTH
    max_label_width: float = MAX_LABEL_WIDTH
    min_horizontal_scale: float = MIN_HORIZONTAL_SCALE
    line_height: float = LINE_HEIGHT
    font_primary: FontSpec = field(
        default_factory=lambda: FontSpec(LABEL_FONT_FAMILY, PRIMARY_FONT_SIZE, bold=True)
    )
    font_secondary: FontSpec = field(
        default_factory=lambda: FontSpec(LABEL_FONT_FAMILY, SECONDARY_FONT_SIZE)
    )
    font_route: FontSpec = field(
        default_factory=lambda: FontSpec(LABEL_FONT_FAMILY, ROUTE_FONT_SIZE, bold=True)
    )
    font_fare: FontSpec = field(
        default_factory=lambda: FontSpec(LABEL_FONT_FAMILY, FARE_FONT_SIZE)
    )
    font_footer: FontSpec = field(
        default_factory=lambda: FontSpec(LABEL_FONT_FAMILY, FOOTER_FONT_SIZE, bold=True)
    )
    fare_template: str = FARE_TEMPLATE
    number_stops: bool = True

    def __post_init__(self) -> None:
        for name in _REQUIRED_GEOMETRY:
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        for name in _OPTIONAL_GEOMETRY:
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must not be negative, got {getattr(self, name)}")
        if self.canvas_height is not None and self.canvas_height <= 0:
            raise ValueError(f"canvas_height must be positive, got {self.canvas_height}")
        if self.total_usable_height is not None and self.total_usable_height <= 0:
            raise ValueError(
                f"total_usable_height must be positive, got {self.total_usable_height}"
            )
        if self.max_label_width >= self.canvas_width:
            raise ValueError(
                f"max_label_width ({self.max_label_width}) must be smaller than "
                f"canvas_width ({self.canvas_width})"
            )
        if not 0 < self.min_horizontal_scale <= 1:
            raise ValueError(
                f"min_horizontal_scale must be in (0, 1], got {self.min_horizontal_scale}"
            )
        for spec in (self.font_primary, self.font_secondary, self.font_route,
                     self.font_fare, self.font_footer):
            if spec.size <= 0:
                raise ValueError(f"font size must be positive, got {spec.size}")

    @property
    def items_top(self) -> float:
        """Y of the first item."""
        return self.header_height + self.first_item_offset

    def with_overrides(self, **overrides) -> DiagramConfig:
        """Return a copy with the given fields replaced.

        None values are ignored so CLI options can be passed straight through.
        """
        known = {f.name for f in fields(self)}
        unknown = set(overrides) - known
        if unknown:
            raise ValueError(f"Unknown config option(s): {', '.join(sorted(unknown))}")
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)
