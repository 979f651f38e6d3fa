"""Bar layout: sizing and horizontal packing of bars in the chart area.

Bars are centered as a group: the width left over after the bars is split
into ``n + 1`` equal gaps placed before, between and after them.
"""

from __future__ import annotations

__all__ = ["compute_bar_layout", "resolve_sizes"]

from collections.abc import Mapping, Sequence
from typing import Any

from loguru import logger

from beaned_charts.config import ChartConfig, ensure_config
from beaned_charts.data.loader import check_series, coerce_series
from beaned_charts.data.model import BarLayout, Box, DataPoint, InvalidInputError
from beaned_charts.layout.geometry import normalize, value_range


def _clamp(value: float, low: float, high: float | None) -> float:
    if high is not None:
        value = min(value, high)
    return max(low, value)


def resolve_sizes(
    explicit: float | Sequence[float] | None,
    count: int,
    minimum: float,
    maximum: float | None,
    name: str,
) -> list[float] | None:
    """Clamp explicit per-bar sizes, or return None when none were given.

    A list must have exactly one entry per bar; a scalar applies to every
    bar. Negative sizes are rejected rather than clamped so that bad input
    never silently misrepresents the data.
    """
    if explicit is None:
        return None

    if isinstance(explicit, (int, float)) and not isinstance(explicit, bool):
        sizes = [float(explicit)] * count
    else:
        sizes = [float(s) for s in explicit]
        if len(sizes) != count:
            raise InvalidInputError(
                f"{name} has {len(sizes)} entries but the series has {count} points"
            )

    for i, size in enumerate(sizes):
        if size < 0:
            raise InvalidInputError(f"{name}[{i}] is negative ({size})")

    return [_clamp(s, minimum, maximum) for s in sizes]


def compute_bar_layout(
    series: Sequence[DataPoint] | Sequence[Any],
    config: ChartConfig | Mapping[str, Any] | None = None,
) -> BarLayout:
    """Compute one rectangle per data point.

    Rectangles are in SVG coordinates: ``x`` and ``y`` are the top-left
    corner and bars grow upward from the bottom of the padded chart area.
    """
    config = ensure_config("bar", config)
    series = coerce_series(series)
    check_series(series)

    count = len(series)
    area = Box(config.padding, config.padding, config.chart_width, config.chart_height)

    range_min, range_max = value_range(
        [p.value for p in series],
        config.min_value,
        config.max_value,
        config.value_padding,
    )

    widths = resolve_sizes(
        config.bar_width, count, config.min_bar_width, config.max_bar_width, "bar_width"
    )
    if widths is None:
        auto = (area.width / count) * (1 - config.bar_spacing)
        widths = [max(config.min_bar_width, auto)] * count

    top = max(config.max_bar_height or area.height, config.min_bar_height)
    heights = resolve_sizes(
        config.bar_height, count, config.min_bar_height, config.max_bar_height, "bar_height"
    )
    if heights is None:
        heights = [
            min(max(normalize(p.value, range_min, range_max, config.min_bar_height, top), 0.0), top)
            for p in series
        ]

    spacing = (area.width - sum(widths)) / (count + 1)
    if spacing < 0:
        logger.warning(
            "Bars need {} px but the chart area is {} px wide; removing gaps",
            sum(widths), area.width,
        )
        spacing = 0.0

    rects = [
        Box(
            x=area.x + spacing * (i + 1) + sum(widths[:i]),
            y=area.bottom - heights[i],
            width=widths[i],
            height=heights[i],
        )
        for i in range(count)
    ]

    logger.debug(
        "Bar layout: {} bars, spacing={:.2f}, range=[{}, {}]",
        count, spacing, range_min, range_max,
    )
    return BarLayout(
        rects=rects,
        spacing=spacing,
        range_min=range_min,
        range_max=range_max,
        area=area,
    )
