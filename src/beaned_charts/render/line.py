"""Line chart rendering."""

from __future__ import annotations

__all__ = ["render_line_chart"]

from collections.abc import Mapping, Sequence
from typing import Any

import drawsvg as draw

from beaned_charts.config import ChartConfig, ensure_config
from beaned_charts.data.model import Box, DataPoint
from beaned_charts.layout.curves import compute_line_layout, interpolate_curve
from beaned_charts.layout.tooltips import place_tooltip
from beaned_charts.render.common import (
    Formatters,
    new_drawing,
    render_grid,
    render_tooltip,
)
from beaned_charts.render.constants import LINE_X_LABEL_OFFSET
from beaned_charts.render.css import line_stylesheet


def render_line_chart(
    series: Sequence[DataPoint] | Sequence[Any],
    config: ChartConfig | Mapping[str, Any] | None = None,
    formatters: Formatters | None = None,
) -> str:
    """Render a line chart to an SVG string."""
    config = ensure_config("line", config)
    formatters = formatters or Formatters()
    layout = compute_line_layout(series, config)
    points = layout.points
    area = layout.area

    d = new_drawing(config, line_stylesheet(config))
    chart = draw.Group(class_="line-chart")
    render_grid(chart, config, layout.range_min, layout.range_max, area, formatters)

    chart.append(draw.Path(
        d=interpolate_curve(points, smooth=config.smooth),
        class_="chart-line",
    ))

    for point in points:
        group = draw.Group(class_="point-group")
        if config.show_crosshair:
            group.append(draw.Line(
                point.x, area.y, point.x, area.bottom,
                class_="crosshair-line",
            ))
        if config.show_points:
            group.append(draw.Circle(
                point.x, point.y, config.point_radius,
                class_="data-point",
            ))
        if config.show_tooltips:
            value_text = formatters.value_text(point.value)
            label_text = formatters.apply("tooltip_date", point.date)
            r = config.point_radius
            marker = Box(point.x - r, point.y - r, 2 * r, 2 * r)
            box = place_tooltip(label_text, value_text, marker)
            render_tooltip(group, box, label_text, value_text, config)
        chart.append(group)

    if config.show_x_axis and config.show_labels:
        for point in points:
            if point.index < len(config.x_axis_labels) and config.x_axis_labels[point.index]:
                text = config.x_axis_labels[point.index]
            else:
                text = point.date
            chart.append(draw.Text(
                formatters.apply("x_label", text),
                config.axis_label_font_size,
                point.x, area.bottom + LINE_X_LABEL_OFFSET,
                class_="axis-label x-axis-label",
                text_anchor="middle",
            ))

    d.append(chart)
    return d.as_svg()
