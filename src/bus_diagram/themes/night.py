"""Night theme: light text on a dark background."""

from bus_diagram.render.style import Theme

NIGHT_THEME = Theme(
    name="night",
    background_color="#1f2328",
    accent_color="#f2b705",
    header_text_color="#1f2328",
    marker_fill="#1f2328",
    label_color="#f0f0f0",
    secondary_label_color="#b8b8b8",
    waypoint_label_color="#7d8590",
    frame_color="#f2b705",
)
