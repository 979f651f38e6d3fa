"""Shared geometry helpers: range mapping, polar coordinates and arcs.

Angles follow the chart convention used everywhere in this package:
degrees, 0 at 12 o'clock, increasing clockwise.
"""

from __future__ import annotations

__all__ = [
    "describe_arc",
    "fmt_num",
    "grid_ticks",
    "normalize",
    "polar_to_cartesian",
    "value_range",
]

import math
from collections.abc import Sequence

from beaned_charts.data.model import Box, InvalidInputError
from beaned_charts.layout.constants import (
    COORD_PRECISION,
    HALF_CIRCLE,
    RANGE_EPSILON,
    VALUE_PADDING,
)


def normalize(
    value: float,
    source_min: float,
    source_max: float,
    target_min: float,
    target_max: float,
) -> float:
    """Map ``value`` from the source range onto the target range.

    A zero-width source range maps everything to ``target_min``.
    """
    if source_max == source_min:
        return target_min
    return (value - source_min) / (source_max - source_min) * (
        target_max - target_min
    ) + target_min


def polar_to_cartesian(
    center_x: float,
    center_y: float,
    radius: float,
    angle_degrees: float,
) -> tuple[float, float]:
    """Convert a chart angle (0 = up, clockwise) to SVG coordinates."""
    radians = math.radians(angle_degrees - 90.0)
    return (
        center_x + radius * math.cos(radians),
        center_y + radius * math.sin(radians),
    )


def fmt_num(value: float) -> str:
    """Format a coordinate compactly and deterministically."""
    text = f"{value:.{COORD_PRECISION}f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


def describe_arc(
    x: float,
    y: float,
    radius: float,
    start_angle: float,
    end_angle: float,
) -> str:
    """Describe the outer arc between two angles, without closing it.

    The path runs from ``end_angle`` back to ``start_angle`` so it can be
    stroked as a decoration independent of slice fills.
    """
    sx, sy = polar_to_cartesian(x, y, radius, end_angle)
    ex, ey = polar_to_cartesian(x, y, radius, start_angle)
    large_arc = 0 if end_angle - start_angle <= HALF_CIRCLE else 1
    return (
        f"M {fmt_num(sx)} {fmt_num(sy)} "
        f"A {fmt_num(radius)} {fmt_num(radius)} 0 {large_arc} 0 "
        f"{fmt_num(ex)} {fmt_num(ey)}"
    )


def value_range(
    values: Sequence[float],
    min_value: float | None = None,
    max_value: float | None = None,
    padding: float = VALUE_PADDING,
) -> tuple[float, float]:
    """Compute the displayed value range.

    Explicit bounds win. Otherwise the data span is widened by ``padding``
    of itself on both sides. A zero-width result is widened by a small
    epsilon so downstream mapping stays well-defined.
    """
    data_min = min(values)
    data_max = max(values)
    span = data_max - data_min

    range_min = min_value if min_value is not None else data_min - span * padding
    range_max = max_value if max_value is not None else data_max + span * padding

    if range_min > range_max:
        raise InvalidInputError(
            f"min_value ({range_min}) must not exceed max_value ({range_max})"
        )
    if range_max - range_min == 0:
        range_min -= RANGE_EPSILON
        range_max += RANGE_EPSILON
    return range_min, range_max


def grid_ticks(
    range_min: float,
    range_max: float,
    area: Box,
    count: int,
) -> list[tuple[float, float]]:
    """Return ``count + 1`` evenly spaced ``(y, value)`` grid positions.

    The first tick sits on the baseline (bottom of ``area``) at
    ``range_min``; the last sits on the top edge at ``range_max``.
    """
    if count < 1:
        return []
    step_y = area.height / count
    step_v = (range_max - range_min) / count
    return [
        (area.bottom - i * step_y, range_min + i * step_v)
        for i in range(count + 1)
    ]
