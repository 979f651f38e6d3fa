"""Drawing helpers shared by the bar, line and pie renderers."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import drawsvg as draw

from beaned_charts.config import ChartConfig
from beaned_charts.data.model import Box, TooltipBox
from beaned_charts.layout.geometry import grid_ticks
from beaned_charts.render.constants import (
    BACKGROUND_RADIUS,
    TOOLTIP_BORDER_WIDTH,
    TOOLTIP_RADIUS,
    Y_LABEL_GAP,
)

Formatter = Callable[[Any], str]


@dataclass
class Formatters:
    """Caller-supplied ``(value) -> str`` mappings for displayed text.

    Each is optional; unset formatters fall back to ``str``.
    """

    x_label: Formatter | None = None
    y_label: Formatter | None = None
    tooltip_label: Formatter | None = None
    tooltip_value: Formatter | None = None
    tooltip_percentage: Formatter | None = None
    tooltip_date: Formatter | None = None

    def apply(self, name: str, value: Any) -> str:
        func = getattr(self, name)
        return func(value) if func is not None else str(value)

    def value_text(self, value: float) -> str:
        """Tooltip text for a data value."""
        if self.tooltip_value is not None:
            return self.tooltip_value(value)
        return format_number(value)


def format_number(value: float) -> str:
    """Render a data value the way it was written (``5`` not ``5.0``)."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


def new_drawing(config: ChartConfig, stylesheet: str) -> draw.Drawing:
    """Create a drawing with the embedded stylesheet and background."""
    d = draw.Drawing(config.width, config.height)
    d.append(draw.Raw(f"<style>\n{stylesheet}\n</style>"))
    if config.show_background:
        d.append(draw.Rectangle(
            0, 0, config.width, config.height,
            rx=BACKGROUND_RADIUS,
            fill=config.background_color,
        ))
    return d


def render_grid(
    parent: draw.Group,
    config: ChartConfig,
    range_min: float,
    range_max: float,
    area: Box,
    formatters: Formatters,
) -> None:
    """Render horizontal grid lines and y-axis labels.

    The baseline tick gets a grid line but no label.
    """
    if not (config.show_grid or config.show_y_axis):
        return

    for i, (y, value) in enumerate(grid_ticks(range_min, range_max, area, config.grid_lines)):
        if config.show_grid:
            parent.append(draw.Line(
                area.x, y, area.right, y,
                class_="grid-line",
            ))
        if config.show_y_axis and i > 0:
            parent.append(draw.Text(
                formatters.apply("y_label", round(value)),
                config.axis_label_font_size,
                area.x - Y_LABEL_GAP, y,
                class_="axis-label y-axis-label",
                text_anchor="end",
                dominant_baseline="middle",
            ))


def render_tooltip(
    parent: draw.Group,
    box: TooltipBox,
    label_text: str,
    value_text: str,
    config: ChartConfig,
) -> None:
    """Render a hidden tooltip group revealed by the stylesheet on hover."""
    group = draw.Group(class_=f"tooltip tooltip-{box.placement}")
    group.append(draw.Rectangle(
        box.x, box.y, box.width, box.height,
        rx=TOOLTIP_RADIUS,
        fill=config.tooltip_background_color,
        stroke=config.tooltip_border_color,
        stroke_width=TOOLTIP_BORDER_WIDTH,
    ))
    group.append(draw.Text(
        label_text,
        config.tooltip_font_size,
        box.text_x, box.label_y,
        fill=config.tooltip_text_color,
        text_anchor="middle",
        font_weight="500",
    ))
    group.append(draw.Text(
        value_text,
        config.tooltip_font_size + 1,
        box.text_x, box.value_y,
        fill=config.tooltip_text_color,
        text_anchor="middle",
        font_weight="600",
    ))
    parent.append(group)
