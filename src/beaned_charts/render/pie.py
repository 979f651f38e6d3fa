"""Pie and donut chart rendering."""

from __future__ import annotations

__all__ = ["render_pie_chart"]

from collections.abc import Mapping, Sequence
from typing import Any

import drawsvg as draw

from beaned_charts.config import ChartConfig, ensure_config
from beaned_charts.data.model import DataPoint
from beaned_charts.layout.arcs import compute_pie_layout, slice_label_position
from beaned_charts.layout.tooltips import place_tooltip
from beaned_charts.render.common import (
    Formatters,
    format_number,
    new_drawing,
    render_tooltip,
)
from beaned_charts.render.constants import (
    CENTER_LABEL_MIN_FRACTION,
    PERCENT_LABEL_MIN_FRACTION,
)
from beaned_charts.render.css import pie_stylesheet
from beaned_charts.render.palette import get_color


def render_pie_chart(
    series: Sequence[DataPoint] | Sequence[Any],
    config: ChartConfig | Mapping[str, Any] | None = None,
    formatters: Formatters | None = None,
) -> str:
    """Render a pie (or donut, when ``hole_size`` > 0) chart to an SVG string."""
    config = ensure_config("pie", config)
    formatters = formatters or Formatters()
    layout = compute_pie_layout(series, config)

    d = new_drawing(config, pie_stylesheet(config, layout.center_x, layout.center_y))
    chart = draw.Group(class_="pie-chart")

    for slice_ in layout.slices:
        point = slice_.point
        percent = round(slice_.fraction * 100)
        group = draw.Group(class_="slice-group")

        group.append(draw.Path(
            d=slice_.path,
            fill=get_color(slice_.index, config.colors, config.slice_color),
            stroke=config.slice_border_color,
            stroke_width=config.slice_border_width,
            class_="slice explode" if config.explode_slices else "slice",
        ))

        if config.show_labels and slice_.fraction > PERCENT_LABEL_MIN_FRACTION:
            lx, ly = slice_label_position(slice_)
            group.append(draw.Text(
                f"{percent}%",
                config.percentage_font_size,
                lx, ly,
                class_="percentage-label",
                text_anchor="middle",
                dominant_baseline="middle",
            ))

        label = point.label or f"Item {slice_.index + 1}"

        if (
            config.show_center_label
            and config.hover_effects
            and layout.hole_radius > 0
            and slice_.fraction > CENTER_LABEL_MIN_FRACTION
        ):
            center_text = config.center_label_text or f"{label}: {format_number(point.value)}"
            group.append(draw.Text(
                center_text,
                config.center_label_font_size,
                layout.center_x, layout.center_y,
                class_="center-label",
                text_anchor="middle",
                dominant_baseline="middle",
            ))

        if config.show_tooltips:
            label_text = formatters.apply("tooltip_label", label)
            value_text = formatters.value_text(point.value)
            if formatters.tooltip_percentage is not None:
                percent_text = formatters.tooltip_percentage(percent)
            else:
                percent_text = f"{percent}%"
            value_text = f"{value_text} ({percent_text})"
            box = place_tooltip(label_text, value_text, slice_)
            render_tooltip(group, box, label_text, value_text, config)

        chart.append(group)

    d.append(chart)
    return d.as_svg()
