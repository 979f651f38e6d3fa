"""Light theme."""

from beaned_charts.render.style import Theme

LIGHT_THEME = Theme(
    name="light",
    background_color="#ffffff",
    grid_color="#e5e5e5",
    axis_color="#666666",
    text_color="#333333",
    tooltip_background_color="#ffffff",
    tooltip_text_color="#333333",
    tooltip_border_color="#e1e5e9",
    crosshair_color="#cccccc",
)
