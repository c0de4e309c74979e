"""Transit API clients that produce route items."""

from bus_diagram.api.kmb import KmbClient, RouteVariant, StopNames

__all__ = ["KmbClient", "RouteVariant", "StopNames"]
