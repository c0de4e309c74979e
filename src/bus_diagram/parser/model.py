"""Data model for route diagrams."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ItemKind(Enum):
    """Kind of node on a route diagram."""

    STOP = "stop"
    WAYPOINT = "waypoint"


@dataclass(frozen=True)
class RouteItem:
    """A stop or a non-stop waypoint on the route, in travel order."""

    kind: ItemKind
    primary_name: str
    secondary_name: str = ""
    # Raw identifier from the transit API, used when a name is missing
    stop_id: str = ""

    @property
    def is_stop(self) -> bool:
        return self.kind is ItemKind.STOP

    @property
    def display_name(self) -> str:
        """Primary name, or the raw stop identifier when no name is known."""
        name = self.primary_name.strip()
        return name if name else self.stop_id


@dataclass
class RouteDiagram:
    """Complete content of one stop list: header fields plus ordered items."""

    route: str = ""
    fare: str = ""
    destination: str = ""
    items: list[RouteItem] = field(default_factory=list)

    @property
    def stop_count(self) -> int:
        return sum(1 for item in self.items if item.is_stop)

    @property
    def waypoint_count(self) -> int:
        return len(self.items) - self.stop_count


@dataclass(frozen=True)
class FontSpec:
    """Font request: a CSS-style family list, a pixel size and a weight."""

    family: str
    size: float
    bold: bool = False

    def families(self) -> list[str]:
        """Split the family list, dropping quotes and blanks."""
        names = [part.strip().strip("'\"") for part in self.family.split(",")]
        return [name for name in names if name]


@dataclass(frozen=True)
class LabelLine:
    """One printed line of a label, possibly compressed horizontally."""

    text: str
    font: FontSpec
    horizontal_scale: float = 1.0


# A label is one or two printed lines, top to bottom.
LayoutResult = tuple[LabelLine, ...]
