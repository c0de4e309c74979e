"""bus-diagram: Render vertical bus route diagrams from stop lists."""

__version__ = "0.3.0"
