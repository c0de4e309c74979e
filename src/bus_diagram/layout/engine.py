"""Layout coordinator: turns route items into drawable geometry.

The result is plain data (bands, a line, markers and text placements) that
the raster and SVG painters draw without further decisions, so both outputs
always agree.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from bus_diagram.layout.config import DiagramConfig
from bus_diagram.layout.constants import (
    FARE_BASELINE_RATIO,
    FARE_TEXT_X,
    HEADER_TEXT_GAP,
    ROUTE_BASELINE_RATIO,
    ROUTE_TEXT_X,
)
from bus_diagram.layout.labels import Measurer, decide_layout, line_center_offsets
from bus_diagram.layout.positions import canvas_height, item_positions
from bus_diagram.parser.model import FontSpec, ItemKind, RouteItem


class TextRole(Enum):
    """What a piece of text is, which decides its color."""

    ROUTE = "route"
    FARE = "fare"
    FOOTER = "footer"
    PRIMARY = "primary"
    SECONDARY = "secondary"
    WAYPOINT = "waypoint"


class VerticalAnchor(Enum):
    """Which part of the text sits on the placement's y."""

    BASELINE = "baseline"
    MIDDLE = "middle"


@dataclass
class Band:
    """A filled rectangle spanning the canvas width."""

    y: float
    height: float


@dataclass
class RouteLine:
    """The vertical route line."""

    x: float
    y1: float
    y2: float


@dataclass
class Marker:
    """A stop marker (filled, outlined circle)."""

    x: float
    y: float
    radius: float


@dataclass
class TextPlacement:
    """Left-aligned text at (x, y), possibly compressed horizontally."""

    text: str
    font: FontSpec
    x: float
    y: float
    role: TextRole
    anchor: VerticalAnchor = VerticalAnchor.MIDDLE
    horizontal_scale: float = 1.0


@dataclass
class DiagramLayout:
    """Complete geometry of one route diagram."""

    width: int
    height: int
    config: DiagramConfig
    header: Band
    footer: Band | None = None
    line: RouteLine | None = None
    markers: list[Marker] = field(default_factory=list)
    texts: list[TextPlacement] = field(default_factory=list)
    item_ys: list[float] = field(default_factory=list)


def compute_diagram_layout(
    items: list[RouteItem],
    config: DiagramConfig,
    measurer: Measurer,
    route: str = "",
    fare: str = "",
    footer: str = "",
) -> DiagramLayout:
    """Compute the geometry of a route diagram.

    Fewer than two items produce only the static frame (header, footer,
    border): there is nothing to connect.
    """
    width = config.canvas_width
    height = canvas_height(len(items), config)

    layout = DiagramLayout(
        width=width,
        height=height,
        config=config,
        header=Band(0.0, config.header_height),
    )

    _place_header_text(layout, measurer, route, fare)

    if config.footer_height > 0:
        layout.footer = Band(height - config.footer_height, config.footer_height)
        if footer:
            layout.texts.append(TextPlacement(
                footer,
                config.font_footer,
                ROUTE_TEXT_X,
                height - config.footer_height / 2,
                TextRole.FOOTER,
            ))

    if len(items) < 2:
        return layout

    ys = item_positions(len(items), config)
    layout.item_ys = ys
    layout.line = RouteLine(config.line_x, ys[0], ys[-1])

    stop_number = 0
    for item, y in zip(items, ys):
        name = item.display_name
        if item.kind is ItemKind.STOP:
            stop_number += 1
            layout.markers.append(Marker(config.line_x, y, config.circle_radius))
            if config.number_stops:
                name = f"{stop_number}. {name}"
        _place_label(layout, item, name, y, measurer)

    return layout


def _place_header_text(
    layout: DiagramLayout,
    measurer: Measurer,
    route: str,
    fare: str,
) -> None:
    config = layout.config
    middle = config.header_height / 2

    fare_x = FARE_TEXT_X
    if route:
        layout.texts.append(TextPlacement(
            route,
            config.font_route,
            ROUTE_TEXT_X,
            middle + config.font_route.size * ROUTE_BASELINE_RATIO,
            TextRole.ROUTE,
            anchor=VerticalAnchor.BASELINE,
        ))
        route_right = ROUTE_TEXT_X + measurer.measure(route, config.font_route)
        fare_x = max(fare_x, route_right + HEADER_TEXT_GAP)

    if fare:
        layout.texts.append(TextPlacement(
            config.fare_template.format(fare=fare),
            config.font_fare,
            fare_x,
            middle + config.font_fare.size * FARE_BASELINE_RATIO,
            TextRole.FARE,
            anchor=VerticalAnchor.BASELINE,
        ))


def _place_label(
    layout: DiagramLayout,
    item: RouteItem,
    name: str,
    y: float,
    measurer: Measurer,
) -> None:
    """Lay out an item's label and center the block on the item's y."""
    config = layout.config
    lines = decide_layout(name, item.secondary_name, config, measurer)
    offsets = line_center_offsets(lines, config.line_height)

    for index, (line, dy) in enumerate(zip(lines, offsets)):
        if item.kind is ItemKind.WAYPOINT:
            role = TextRole.WAYPOINT
        elif index == 0:
            role = TextRole.PRIMARY
        else:
            role = TextRole.SECONDARY
        layout.texts.append(TextPlacement(
            line.text,
            line.font,
            config.text_x,
            y + dy,
            role,
            horizontal_scale=line.horizontal_scale,
        ))
