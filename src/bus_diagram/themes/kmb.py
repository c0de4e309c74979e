"""KMB red-on-white theme (matching the printed route boards)."""

from bus_diagram.render.style import Theme

KMB_THEME = Theme(
    name="kmb",
    background_color="#ffffff",
    accent_color="#e60012",
    header_text_color="#ffffff",
    marker_fill="#ffffff",
    label_color="#333333",
    secondary_label_color="#666666",
    waypoint_label_color="#999999",
    frame_color="#e60012",
)
