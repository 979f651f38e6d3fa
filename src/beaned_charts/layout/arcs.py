"""Pie and donut slice geometry.

Slices are laid out clockwise from 12 o'clock. Each slice's start and end
angles are derived from the running value total, so consecutive slices share
their boundary angle exactly and the last slice ends at exactly 360 degrees.
"""

from __future__ import annotations

__all__ = [
    "compute_pie_layout",
    "compute_slice_geometry",
    "slice_label_position",
    "slice_path",
]

from collections.abc import Mapping, Sequence
from typing import Any

from loguru import logger

from beaned_charts.config import ChartConfig, ensure_config
from beaned_charts.data.loader import check_series, coerce_series
from beaned_charts.data.model import (
    DataPoint,
    InvalidInputError,
    PieLayout,
    SliceGeometry,
)
from beaned_charts.layout.constants import (
    EXPLODE_OFFSET,
    FULL_CIRCLE,
    HALF_CIRCLE,
    PIE_LABEL_RADIUS_RATIO,
    PIE_RADIUS_INSET,
)
from beaned_charts.layout.geometry import fmt_num, polar_to_cartesian


def _pt(p: tuple[float, float]) -> str:
    return f"{fmt_num(p[0])} {fmt_num(p[1])}"


def slice_path(
    center_x: float,
    center_y: float,
    outer_radius: float,
    inner_radius: float,
    start_angle: float,
    end_angle: float,
) -> str:
    """Build the closed outline of a pie wedge or donut segment.

    Donut segments trace the outer arc clockwise, then the inner arc back.
    A full turn is drawn as two half arcs since a single SVG arc with equal
    endpoints renders nothing.
    """
    sweep = end_angle - start_angle
    ro = fmt_num(outer_radius)
    ri = fmt_num(inner_radius)

    if sweep >= FULL_CIRCLE:
        mid_angle = start_angle + HALF_CIRCLE
        o_start = polar_to_cartesian(center_x, center_y, outer_radius, start_angle)
        o_mid = polar_to_cartesian(center_x, center_y, outer_radius, mid_angle)
        outer = (
            f"M {_pt(o_start)} A {ro} {ro} 0 0 1 {_pt(o_mid)} "
            f"A {ro} {ro} 0 0 1 {_pt(o_start)} Z"
        )
        if inner_radius <= 0:
            return outer
        i_start = polar_to_cartesian(center_x, center_y, inner_radius, start_angle)
        i_mid = polar_to_cartesian(center_x, center_y, inner_radius, mid_angle)
        return (
            f"{outer} M {_pt(i_start)} A {ri} {ri} 0 0 0 {_pt(i_mid)} "
            f"A {ri} {ri} 0 0 0 {_pt(i_start)} Z"
        )

    large_arc = 1 if sweep > HALF_CIRCLE else 0
    start = polar_to_cartesian(center_x, center_y, outer_radius, start_angle)
    end = polar_to_cartesian(center_x, center_y, outer_radius, end_angle)

    if inner_radius <= 0:
        return (
            f"M {fmt_num(center_x)} {fmt_num(center_y)} L {_pt(start)} "
            f"A {ro} {ro} 0 {large_arc} 1 {_pt(end)} Z"
        )

    inner_end = polar_to_cartesian(center_x, center_y, inner_radius, end_angle)
    inner_start = polar_to_cartesian(center_x, center_y, inner_radius, start_angle)
    return (
        f"M {_pt(start)} A {ro} {ro} 0 {large_arc} 1 {_pt(end)} "
        f"L {_pt(inner_end)} A {ri} {ri} 0 {large_arc} 0 {_pt(inner_start)} Z"
    )


def compute_slice_geometry(
    series: Sequence[DataPoint] | Sequence[Any],
    hole_radius_ratio: float = 0.0,
    explode: bool = False,
    *,
    center_x: float = 200.0,
    center_y: float = 200.0,
    radius: float = 180.0,
    explode_offset: float = EXPLODE_OFFSET,
) -> list[SliceGeometry]:
    """Compute slice angles and outlines for the positive values of a series.

    Zero and negative values are dropped entirely; each slice keeps the
    index of its point in the original series. With ``explode`` each
    slice's center is pushed ``explode_offset`` pixels along its bisector
    before the outline is built; the angles are unaffected.
    """
    series = coerce_series(series)
    check_series(series)
    if not 0.0 <= hole_radius_ratio < 1.0:
        raise InvalidInputError(
            f"hole_radius_ratio must be in [0, 1), got {hole_radius_ratio}"
        )

    kept = [(i, p) for i, p in enumerate(series) if p.value > 0]
    dropped = len(series) - len(kept)
    if dropped:
        logger.warning("Dropping {} non-positive value(s) from pie series", dropped)
    if not kept:
        raise InvalidInputError("Pie series has no positive values")

    cumulative = [0.0]
    for _, p in kept:
        cumulative.append(cumulative[-1] + p.value)
    total = cumulative[-1]
    inner_radius = radius * hole_radius_ratio

    slices: list[SliceGeometry] = []
    for i, (series_index, point) in enumerate(kept):
        start_angle = FULL_CIRCLE * cumulative[i] / total
        end_angle = FULL_CIRCLE * cumulative[i + 1] / total
        mid_angle = (start_angle + end_angle) / 2

        if explode:
            cx, cy = polar_to_cartesian(center_x, center_y, explode_offset, mid_angle)
        else:
            cx, cy = center_x, center_y

        slices.append(SliceGeometry(
            index=series_index,
            point=point,
            start_angle=start_angle,
            end_angle=end_angle,
            outer_radius=radius,
            inner_radius=inner_radius,
            center_x=cx,
            center_y=cy,
            fraction=point.value / total,
            large_arc_flag=1 if end_angle - start_angle > HALF_CIRCLE else 0,
            path=slice_path(cx, cy, radius, inner_radius, start_angle, end_angle),
        ))

    logger.debug("Pie layout: {} slices, total={}", len(slices), total)
    return slices


def compute_pie_layout(
    series: Sequence[DataPoint] | Sequence[Any],
    config: ChartConfig | Mapping[str, Any] | None = None,
) -> PieLayout:
    """Lay out a pie/donut chart centered in the canvas."""
    config = ensure_config("pie", config)
    center_x = config.width / 2
    center_y = config.height / 2
    radius = min(config.width, config.height) / 2 - PIE_RADIUS_INSET
    if radius <= 0:
        raise InvalidInputError(
            f"Canvas {config.width}x{config.height} is too small for a pie chart"
        )

    slices = compute_slice_geometry(
        series,
        config.hole_size,
        config.explode_slices,
        center_x=center_x,
        center_y=center_y,
        radius=radius,
        explode_offset=config.explode_offset,
    )
    return PieLayout(
        slices=slices,
        center_x=center_x,
        center_y=center_y,
        radius=radius,
        hole_radius=radius * config.hole_size,
        total=sum(s.point.value for s in slices),
    )


def slice_label_position(slice_: SliceGeometry) -> tuple[float, float]:
    """Anchor for a slice's percentage label.

    Donut labels sit mid-band; pie labels sit at a fixed fraction of the
    outer radius.
    """
    if slice_.inner_radius > 0:
        label_radius = (slice_.outer_radius + slice_.inner_radius) / 2
    else:
        label_radius = slice_.outer_radius * PIE_LABEL_RADIUS_RATIO
    return polar_to_cartesian(
        slice_.center_x, slice_.center_y, label_radius, slice_.mid_angle
    )
