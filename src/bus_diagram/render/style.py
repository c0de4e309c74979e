"""Theme and style constants for route diagram rendering."""

from __future__ import annotations

from dataclasses import dataclass, replace

from bus_diagram.layout.engine import TextRole


@dataclass(frozen=True)
class Theme:
    """Visual theme for a route diagram.

    Colors are CSS hex strings so the same theme works for Pillow and SVG.
    Defaults reproduce the red-on-white KMB look.
    """

    name: str = "kmb"
    background_color: str = "#ffffff"
    # Route line, header band, footer band and marker outline
    accent_color: str = "#e60012"
    header_text_color: str = "#ffffff"
    marker_fill: str = "#ffffff"
    label_color: str = "#333333"
    secondary_label_color: str = "#666666"
    waypoint_label_color: str = "#999999"
    frame_color: str = "#e60012"

    def with_accent(self, color: str | None) -> Theme:
        """Copy of the theme with a different accent (and frame) color."""
        if not color:
            return self
        return replace(self, accent_color=color, frame_color=color)

    def text_color(self, role: TextRole) -> str:
        """Color for a piece of text by its role."""
        if role in (TextRole.ROUTE, TextRole.FARE, TextRole.FOOTER):
            return self.header_text_color
        if role is TextRole.SECONDARY:
            return self.secondary_label_color
        if role is TextRole.WAYPOINT:
            return self.waypoint_label_color
        return self.label_color
