"""Layout constants used across layout modules.

Default geometry for DiagramConfig. Colors and other theme-dependent
values live in bus_diagram.themes.
"""

# ---------------------------------------------------------------------------
# Canvas
# ---------------------------------------------------------------------------
CANVAS_WIDTH: int = 500
"""Default canvas width in pixels."""

HEADER_HEIGHT: float = 80.0
"""Height of the colored header band holding route number and fare."""

FOOTER_HEIGHT: float = 0.0
"""Height of the optional footer band. Zero disables the footer."""

CANVAS_PADDING: float = 50.0
"""Space below the last item when the canvas height is derived."""

FRAME_WIDTH: float = 0.0
"""Width of the border drawn around the canvas. Zero disables the frame."""

# ---------------------------------------------------------------------------
# Route line and markers
# ---------------------------------------------------------------------------
LINE_X: float = 60.0
"""Horizontal position of the route line."""

TEXT_X: float = 100.0
"""Left edge of item labels."""

FIRST_ITEM_OFFSET: float = 50.0
"""Distance from the bottom of the header band to the first item."""

STOP_SPACING: float = 60.0
"""Vertical distance between consecutive items in fixed spacing mode."""

CIRCLE_RADIUS: float = 10.0
"""Radius of stop markers."""

MARKER_STROKE_WIDTH: float = 4.0
"""Width of the outline drawn around stop markers."""

LINE_WIDTH: float = 5.0
"""Width of the route line."""

# ---------------------------------------------------------------------------
# Labels
# ---------------------------------------------------------------------------
MAX_LABEL_WIDTH: float = 360.0
"""Width budget for one label line before it wraps or compresses."""

LABEL_RIGHT_MARGIN: float = 40.0
"""Space kept right of labels when the label width follows the canvas width."""

MIN_HORIZONTAL_SCALE: float = 0.6
"""Labels are never compressed horizontally below this factor."""

LINE_HEIGHT: float = 22.0
"""Vertical distance between the lines of a two-line label."""

LABEL_FONT_FAMILY: str = (
    "'Microsoft JhengHei', 'Noto Sans CJK TC', 'Noto Sans TC', "
    "'PingFang TC', 'DejaVu Sans', sans-serif"
)
"""Family list tried in order for all diagram text."""

PRIMARY_FONT_SIZE: float = 18.0
"""Font size of primary (Chinese) names."""

SECONDARY_FONT_SIZE: float = 14.0
"""Font size of secondary (English) names."""

# ---------------------------------------------------------------------------
# Header / footer text
# ---------------------------------------------------------------------------
ROUTE_FONT_SIZE: float = 40.0
"""Font size of the route number in the header."""

FARE_FONT_SIZE: float = 20.0
"""Font size of the fare text in the header."""

FOOTER_FONT_SIZE: float = 18.0
"""Font size of the footer text."""

ROUTE_TEXT_X: float = 20.0
"""Left edge of the route number (and of the footer text)."""

FARE_TEXT_X: float = 150.0
"""Left edge of the fare text, unless a long route number pushes it right."""

HEADER_TEXT_GAP: float = 20.0
"""Minimum gap between the route number and the fare text."""

ROUTE_BASELINE_RATIO: float = 0.375
"""Route number baseline below the band's middle, as a fraction of its size."""

FARE_BASELINE_RATIO: float = 0.5
"""Fare text baseline below the band's middle, as a fraction of its size."""

FARE_TEMPLATE: str = "全程收費: ${fare}"
"""Header fare text; ``{fare}`` is replaced by the fare value."""

DESTINATION_TEMPLATE: str = "往 {destination}"
"""Footer text naming the destination."""
