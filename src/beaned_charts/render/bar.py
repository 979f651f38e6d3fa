"""Bar chart rendering."""

from __future__ import annotations

__all__ = ["render_bar_chart"]

from collections.abc import Mapping, Sequence
from typing import Any

import drawsvg as draw

from beaned_charts.config import ChartConfig, ensure_config
from beaned_charts.data.loader import coerce_series
from beaned_charts.data.model import DataPoint
from beaned_charts.layout.bars import compute_bar_layout
from beaned_charts.layout.tooltips import place_tooltip
from beaned_charts.render.common import (
    Formatters,
    format_number,
    new_drawing,
    render_grid,
    render_tooltip,
)
from beaned_charts.render.constants import (
    GRADIENT_END_OPACITY,
    VALUE_LABEL_OFFSET,
    X_LABEL_OFFSET,
)
from beaned_charts.render.css import bar_stylesheet
from beaned_charts.render.palette import get_color


def render_bar_chart(
    series: Sequence[DataPoint] | Sequence[Any],
    config: ChartConfig | Mapping[str, Any] | None = None,
    formatters: Formatters | None = None,
) -> str:
    """Render a bar chart to an SVG string."""
    config = ensure_config("bar", config)
    formatters = formatters or Formatters()
    series = coerce_series(series)
    layout = compute_bar_layout(series, config)

    d = new_drawing(config, bar_stylesheet(config))
    chart = draw.Group(class_="bar-chart")
    render_grid(chart, config, layout.range_min, layout.range_max, layout.area, formatters)

    for index, (point, rect) in enumerate(zip(series, layout.rects)):
        color = get_color(index, config.colors, config.bar_color)
        gradient = draw.LinearGradient(rect.x, rect.y, rect.x, rect.bottom)
        gradient.add_stop(0, color, config.bar_opacity)
        gradient.add_stop(1, color, config.bar_opacity * GRADIENT_END_OPACITY)

        group = draw.Group(class_="bar-group")
        group.append(draw.Rectangle(
            rect.x, rect.y, rect.width, rect.height,
            rx=config.bar_border_radius,
            fill=gradient,
            class_="bar",
        ))

        if config.hover_effects:
            group.append(draw.Text(
                format_number(point.value),
                config.tooltip_font_size,
                rect.center_x, rect.y - VALUE_LABEL_OFFSET,
                class_="value-label",
                text_anchor="middle",
                dominant_baseline="middle",
            ))

        if config.show_tooltips:
            label_text = formatters.apply("tooltip_label", point.label or f"Item {index + 1}")
            value_text = formatters.value_text(point.value)
            box = place_tooltip(label_text, value_text, rect)
            render_tooltip(group, box, label_text, value_text, config)

        if config.show_x_axis and config.show_labels and point.label:
            group.append(draw.Text(
                formatters.apply("x_label", point.label),
                config.axis_label_font_size,
                rect.center_x, layout.area.bottom + X_LABEL_OFFSET,
                class_="axis-label x-axis-label",
                text_anchor="middle",
            ))

        chart.append(group)

    d.append(chart)
    return d.as_svg()
