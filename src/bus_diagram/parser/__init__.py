"""Stop-list parsing and the route diagram data model."""

from bus_diagram.parser.model import (
    FontSpec,
    ItemKind,
    LabelLine,
    LayoutResult,
    RouteDiagram,
    RouteItem,
)
from bus_diagram.parser.stoplist import format_stop_list, parse_stop_list

__all__ = [
    "FontSpec",
    "ItemKind",
    "LabelLine",
    "LayoutResult",
    "RouteDiagram",
    "RouteItem",
    "format_stop_list",
    "parse_stop_list",
]
