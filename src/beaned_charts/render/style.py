"""Theme definitions for chart rendering."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_FONT_FAMILY = (
    '-apple-system, BlinkMacSystemFont, "Segoe UI", "Roboto", '
    '"Helvetica Neue", Arial, sans-serif'
)


@dataclass
class Theme:
    """Visual theme for a chart.

    Supplies the colors a chart falls back to when its configuration leaves
    them unset.
    """

    name: str
    background_color: str
    grid_color: str
    axis_color: str
    text_color: str
    tooltip_background_color: str
    tooltip_text_color: str
    tooltip_border_color: str
    crosshair_color: str
    font_family: str = DEFAULT_FONT_FAMILY
