"""Chart data model and loaders."""

from beaned_charts.data.loader import (
    ChartDocument,
    check_series,
    coerce_series,
    parse_chart_document,
)
from beaned_charts.data.model import (
    BarLayout,
    Box,
    DataPoint,
    FontMetrics,
    InvalidInputError,
    LineLayout,
    PieLayout,
    Point2D,
    SliceGeometry,
    TooltipBox,
)

__all__ = [
    "BarLayout",
    "Box",
    "ChartDocument",
    "DataPoint",
    "FontMetrics",
    "InvalidInputError",
    "LineLayout",
    "PieLayout",
    "Point2D",
    "SliceGeometry",
    "TooltipBox",
    "check_series",
    "coerce_series",
    "parse_chart_document",
]
