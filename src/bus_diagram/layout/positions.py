"""Vertical placement of route items and canvas sizing."""

from __future__ import annotations

from bus_diagram.layout.config import DiagramConfig, SpacingMode


def canvas_height(n_items: int, config: DiagramConfig) -> int:
    """Canvas height for n_items, honoring an explicit config height."""
    if config.canvas_height is not None:
        return config.canvas_height

    if config.spacing_mode is SpacingMode.FAN and config.total_usable_height is not None:
        span = config.total_usable_height
    else:
        span = max(n_items - 1, 0) * config.stop_spacing

    return int(round(config.items_top + span + config.padding + config.footer_height))


def usable_height(n_items: int, config: DiagramConfig) -> float:
    """Vertical span from the first to the last item in fan mode."""
    if config.total_usable_height is not None:
        return config.total_usable_height
    if config.canvas_height is None:
        return max(n_items - 1, 0) * config.stop_spacing
    span = config.canvas_height - config.items_top - config.padding - config.footer_height
    return max(span, 0.0)


def item_positions(n_items: int, config: DiagramConfig) -> list[float]:
    """Return the y coordinate of each item, top to bottom.

    Fixed mode steps by stop_spacing from the first item. Fan mode divides
    the usable height evenly across the n_items - 1 gaps. Stops and
    waypoints are spaced alike.
    """
    if n_items <= 0:
        return []

    top = config.items_top
    if n_items == 1:
        return [top]

    if config.spacing_mode is SpacingMode.FAN:
        step = usable_height(n_items, config) / (n_items - 1)
    else:
        step = config.stop_spacing

    return [top + i * step for i in range(n_items)]
