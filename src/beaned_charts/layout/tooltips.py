"""Tooltip sizing and placement.

Text size is estimated from character counts (no font measurement), so the
result is approximate but fully deterministic for a given input.
"""

from __future__ import annotations

__all__ = ["estimate_tooltip_size", "place_tooltip"]

import math

from beaned_charts.data.model import Box, FontMetrics, SliceGeometry, TooltipBox
from beaned_charts.layout.arcs import slice_label_position
from beaned_charts.layout.constants import (
    TOOLTIP_FIT_MARGIN,
    TOOLTIP_GAP,
    TOOLTIP_RADIAL_OFFSET,
    TOOLTIP_WIDTH_MARGIN,
)
from beaned_charts.layout.geometry import polar_to_cartesian


def _wrapped_lines(text: str, metrics: FontMetrics) -> int:
    return max(1, math.ceil(len(text) / metrics.max_chars_per_line))


def estimate_tooltip_size(
    label_text: str,
    value_text: str,
    metrics: FontMetrics | None = None,
) -> tuple[float, float, float, int]:
    """Return ``(box_width, box_height, text_width, label_lines)``."""
    metrics = metrics or FontMetrics()
    label_lines = _wrapped_lines(label_text, metrics)
    total_lines = label_lines + _wrapped_lines(value_text, metrics)

    text_width = max(len(label_text), len(value_text)) * metrics.char_width + metrics.text_margin
    height = (
        metrics.base_height
        + (total_lines - 1) * metrics.line_height
        + metrics.padding
    )
    return max(text_width, metrics.min_width), height, text_width, label_lines


def place_tooltip(
    label_text: str,
    value_text: str,
    container: Box | SliceGeometry,
    metrics: FontMetrics | None = None,
) -> TooltipBox:
    """Size a tooltip and place it inside or outside its container.

    Boxes (bars, point markers) hold the tooltip centered inside when they
    are larger than it by a margin; otherwise it goes above the box.
    Slices hold it at their label anchor when the chord and radial band
    are large enough; otherwise it sits radially outside the slice.
    """
    metrics = metrics or FontMetrics()
    width, height, _, label_lines = estimate_tooltip_size(
        label_text, value_text, metrics
    )

    if isinstance(container, SliceGeometry):
        placement, cx, cy = _slice_anchor(container, width, height)
        x = cx - width / 2
        y = cy - height / 2
    else:
        cx = container.center_x
        fits = (
            container.height > height + TOOLTIP_FIT_MARGIN
            and container.width > width + TOOLTIP_WIDTH_MARGIN
        )
        x = cx - width / 2
        if fits:
            placement = "inside"
            y = container.center_y - height / 2
        else:
            placement = "outside"
            y = container.y - height - TOOLTIP_GAP

    label_y = y + metrics.first_baseline
    return TooltipBox(
        x=x,
        y=y,
        width=width,
        height=height,
        placement=placement,
        text_x=cx,
        label_y=label_y,
        value_y=label_y + label_lines * metrics.line_height,
        label_lines=label_lines,
    )


def _slice_anchor(
    slice_: SliceGeometry,
    width: float,
    height: float,
) -> tuple[str, float, float]:
    lx, ly = slice_label_position(slice_)
    label_radius = math.hypot(lx - slice_.center_x, ly - slice_.center_y)
    half_sweep = math.radians(min(slice_.sweep, 180.0) / 2)
    chord = 2 * label_radius * math.sin(half_sweep)
    band = slice_.outer_radius - slice_.inner_radius

    if chord > width + TOOLTIP_FIT_MARGIN and band > height + TOOLTIP_FIT_MARGIN:
        return "inside", lx, ly

    ox, oy = polar_to_cartesian(
        slice_.center_x,
        slice_.center_y,
        slice_.outer_radius + TOOLTIP_RADIAL_OFFSET,
        slice_.mid_angle,
    )
    return "outside", ox, oy
