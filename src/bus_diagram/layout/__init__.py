"""Layout engine for route diagrams."""

from bus_diagram.layout.config import DiagramConfig, SpacingMode
from bus_diagram.layout.engine import DiagramLayout, compute_diagram_layout
from bus_diagram.layout.labels import decide_layout

__all__ = [
    "DiagramConfig",
    "DiagramLayout",
    "SpacingMode",
    "compute_diagram_layout",
    "decide_layout",
]
