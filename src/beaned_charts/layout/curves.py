"""Line chart geometry: point mapping and Catmull-Rom curve interpolation."""

from __future__ import annotations

__all__ = [
    "catmull_rom_segments",
    "compute_line_layout",
    "compute_line_points",
    "interpolate_curve",
]

from collections.abc import Mapping, Sequence
from typing import Any

from loguru import logger

from beaned_charts.config import ChartConfig, ensure_config
from beaned_charts.data.loader import check_series, coerce_series
from beaned_charts.data.model import Box, DataPoint, InvalidInputError, LineLayout, Point2D
from beaned_charts.layout.constants import SPLINE_TENSION
from beaned_charts.layout.geometry import fmt_num, normalize, value_range

Segment = tuple[tuple[float, float], tuple[float, float], tuple[float, float]]


def compute_line_layout(
    series: Sequence[DataPoint] | Sequence[Any],
    config: ChartConfig | Mapping[str, Any] | None = None,
) -> LineLayout:
    """Map a series onto the padded chart area.

    Indices are spread evenly across the chart width (a single point sits
    on the left edge); values go through the shared value range and are
    flipped so larger values are higher on the canvas. The range is
    returned with the points so grid lines use the same mapping.
    """
    config = ensure_config("line", config)
    series = coerce_series(series)
    check_series(series)

    range_min, range_max = value_range(
        [p.value for p in series],
        config.min_value,
        config.max_value,
        config.value_padding,
    )
    area = Box(config.padding, config.padding, config.chart_width, config.chart_height)
    last = len(series) - 1

    points = [
        Point2D(
            x=area.x + normalize(i, 0, last, 0, area.width),
            y=area.bottom - normalize(p.value, range_min, range_max, 0, area.height),
            value=p.value,
            index=i,
            label=p.label,
            date=p.date or p.label or f"Point {i + 1}",
        )
        for i, p in enumerate(series)
    ]
    logger.debug("Line layout: {} points, range=[{}, {}]", len(points), range_min, range_max)
    return LineLayout(points=points, range_min=range_min, range_max=range_max, area=area)


def compute_line_points(
    series: Sequence[DataPoint] | Sequence[Any],
    config: ChartConfig | Mapping[str, Any] | None = None,
) -> list[Point2D]:
    """Return only the mapped points of :func:`compute_line_layout`."""
    return compute_line_layout(series, config).points


def catmull_rom_segments(
    points: Sequence[Point2D],
    tension: float = SPLINE_TENSION,
) -> list[Segment]:
    """Return ``(control1, control2, end)`` for each cubic segment.

    Missing neighbours at either end are replaced by the nearest endpoint,
    so the curve is clamped rather than periodic.
    """
    segments: list[Segment] = []
    n = len(points)
    for i in range(n - 1):
        p0 = points[i - 1] if i > 0 else points[i]
        p1 = points[i]
        p2 = points[i + 1]
        p3 = points[i + 2] if i + 2 < n else p2

        cp1 = (
            p1.x + (p2.x - p0.x) * tension / 6,
            p1.y + (p2.y - p0.y) * tension / 6,
        )
        cp2 = (
            p2.x - (p3.x - p1.x) * tension / 6,
            p2.y - (p3.y - p1.y) * tension / 6,
        )
        segments.append((cp1, cp2, (p2.x, p2.y)))
    return segments


def _xy(x: float, y: float) -> str:
    return f"{fmt_num(x)},{fmt_num(y)}"


def interpolate_curve(
    points: Sequence[Point2D],
    smooth: bool = True,
    tension: float = SPLINE_TENSION,
) -> str:
    """Build SVG path data through ``points`` in order.

    One point gives a lone move command and two points a straight line in
    either mode. With three or more points, ``smooth`` selects Catmull-Rom
    cubic segments; otherwise the result is a polyline.
    """
    if not points:
        raise InvalidInputError("Cannot interpolate a curve through zero points")

    first = points[0]
    start = f"M {_xy(first.x, first.y)}"
    if len(points) == 1:
        return start
    if len(points) == 2 or not smooth:
        return start + "".join(f" L {_xy(p.x, p.y)}" for p in points[1:])

    parts = [start]
    for cp1, cp2, end in catmull_rom_segments(points, tension):
        parts.append(f"C {_xy(*cp1)} {_xy(*cp2)} {_xy(*end)}")
    return " ".join(parts)
