"""Chart-kind dispatch for the render layer."""

from __future__ import annotations

__all__ = ["RENDERERS", "render_chart"]

from collections.abc import Mapping, Sequence
from typing import Any

from beaned_charts.config import resolve_config
from beaned_charts.data.model import DataPoint
from beaned_charts.render.bar import render_bar_chart
from beaned_charts.render.common import Formatters
from beaned_charts.render.line import render_line_chart
from beaned_charts.render.pie import render_pie_chart

RENDERERS = {
    "bar": render_bar_chart,
    "line": render_line_chart,
    "pie": render_pie_chart,
}


def render_chart(
    kind: str,
    series: Sequence[DataPoint] | Sequence[Any],
    options: Mapping[str, Any] | None = None,
    formatters: Formatters | None = None,
) -> str:
    """Render a chart of the given kind to an SVG string."""
    config = resolve_config(kind, options)
    return RENDERERS[kind](series, config, formatters)
