"""beaned-charts: self-contained SVG bar, line and pie charts."""

from loguru import logger

from beaned_charts.config import ChartConfig, resolve_config
from beaned_charts.data.model import DataPoint, InvalidInputError
from beaned_charts.layout.arcs import compute_slice_geometry
from beaned_charts.layout.bars import compute_bar_layout
from beaned_charts.layout.curves import (
    compute_line_layout,
    compute_line_points,
    interpolate_curve,
)
from beaned_charts.layout.tooltips import place_tooltip
from beaned_charts.render.bar import render_bar_chart
from beaned_charts.render.chart import render_chart
from beaned_charts.render.common import Formatters
from beaned_charts.render.line import render_line_chart
from beaned_charts.render.pie import render_pie_chart

__version__ = "0.1.0"

# Library code stays silent unless the application opts in
logger.disable("beaned_charts")

__all__ = [
    "ChartConfig",
    "DataPoint",
    "Formatters",
    "InvalidInputError",
    "compute_bar_layout",
    "compute_line_layout",
    "compute_line_points",
    "compute_slice_geometry",
    "interpolate_curve",
    "place_tooltip",
    "render_bar_chart",
    "render_chart",
    "render_line_chart",
    "render_pie_chart",
    "resolve_config",
]
