"""Dark theme (default for line charts)."""

from beaned_charts.render.style import Theme

DARK_THEME = Theme(
    name="dark",
    background_color="#1a1a1a",
    grid_color="#333333",
    axis_color="#cccccc",
    text_color="#ffffff",
    tooltip_background_color="#2a2a2a",
    tooltip_text_color="#ffffff",
    tooltip_border_color="#555555",
    crosshair_color="#666666",
)
