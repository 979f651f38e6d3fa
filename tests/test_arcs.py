"""Tests for pie and donut slice geometry."""

from __future__ import annotations

import math

import pytest

from beaned_charts.data.model import DataPoint, InvalidInputError
from beaned_charts.layout.arcs import (
    compute_pie_layout,
    compute_slice_geometry,
    slice_label_position,
    slice_path,
)


def _series(*values):
    return [DataPoint(value=v, label=f"S{i}") for i, v in enumerate(values)]


# ---------------------------------------------------------------------------
# Angles
# ---------------------------------------------------------------------------


def test_zero_values_are_dropped():
    slices = compute_slice_geometry(_series(5, 0, 5))
    assert len(slices) == 2
    assert (slices[0].start_angle, slices[0].end_angle) == (0, 180)
    assert (slices[1].start_angle, slices[1].end_angle) == (180, 360)


def test_negative_values_are_dropped():
    slices = compute_slice_geometry(_series(-3, 2, 2))
    assert [s.point.value for s in slices] == [2, 2]
    assert [s.index for s in slices] == [1, 2]


def test_slices_keep_series_index_across_gaps():
    slices = compute_slice_geometry(_series(5, 0, 5, -1, 2))
    assert [s.index for s in slices] == [0, 2, 4]
    assert [s.point.label for s in slices] == ["S0", "S2", "S4"]


def test_slices_are_contiguous_and_close_the_circle():
    slices = compute_slice_geometry(_series(1, 2, 3, 4, 5, 6, 7))
    assert slices[0].start_angle == 0
    for prev, cur in zip(slices, slices[1:]):
        assert cur.start_angle == prev.end_angle
    assert slices[-1].end_angle == 360.0
    assert sum(s.sweep for s in slices) == pytest.approx(360)


def test_fractions_sum_to_one():
    slices = compute_slice_geometry(_series(1, 1, 2))
    assert [s.fraction for s in slices] == pytest.approx([0.25, 0.25, 0.5])


def test_large_arc_flag():
    big, small = compute_slice_geometry(_series(3, 1))
    assert (big.start_angle, big.end_angle) == (0, 270)
    assert big.large_arc_flag == 1
    assert small.large_arc_flag == 0


def test_exact_half_is_not_large():
    first, second = compute_slice_geometry(_series(1, 1))
    assert first.large_arc_flag == 0
    assert second.large_arc_flag == 0


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------


def test_pie_path_starts_at_center():
    first, _ = compute_slice_geometry(_series(1, 1))
    assert first.path.startswith("M 200 200 L 200 20 A 180 180 0 0 1 ")
    assert first.path.endswith(" Z")


def test_donut_path_has_two_arcs():
    first, _ = compute_slice_geometry(_series(1, 1), hole_radius_ratio=0.5)
    assert first.inner_radius == 90
    assert first.path.startswith("M 200 20 A 180 180 0 0 1 ")
    assert " A 90 90 0 0 0 " in first.path
    assert first.path.count(" A ") == 2


def test_single_value_draws_full_circle():
    (only,) = compute_slice_geometry(_series(42))
    assert only.sweep == 360
    assert only.fraction == 1
    assert only.path.count("A ") == 2
    assert "L " not in only.path


def test_single_value_donut_draws_ring():
    (only,) = compute_slice_geometry(_series(42), hole_radius_ratio=0.4)
    assert only.path.count("A ") == 4
    assert only.path.count("M ") == 2


def test_slice_path_matches_geometry():
    slices = compute_slice_geometry(_series(2, 3), hole_radius_ratio=0.25)
    for s in slices:
        assert s.path == slice_path(
            s.center_x, s.center_y, s.outer_radius, s.inner_radius,
            s.start_angle, s.end_angle,
        )


# ---------------------------------------------------------------------------
# Explode
# ---------------------------------------------------------------------------


def test_explode_offsets_along_bisector():
    first, second = compute_slice_geometry(_series(1, 1), explode=True)
    # first slice bisects at 90 degrees (3 o'clock), second at 270 (9 o'clock)
    assert first.center_x == pytest.approx(205)
    assert first.center_y == pytest.approx(200)
    assert second.center_x == pytest.approx(195)
    assert second.center_y == pytest.approx(200)


def test_explode_keeps_angles():
    plain = compute_slice_geometry(_series(2, 5, 3))
    exploded = compute_slice_geometry(_series(2, 5, 3), explode=True)
    for a, b in zip(plain, exploded):
        assert (a.start_angle, a.end_angle) == (b.start_angle, b.end_angle)
        assert a.path != b.path


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


def test_all_zero_rejected():
    with pytest.raises(InvalidInputError, match="no positive values"):
        compute_slice_geometry(_series(0, 0, -1))


def test_empty_rejected():
    with pytest.raises(InvalidInputError):
        compute_slice_geometry([])


@pytest.mark.parametrize("ratio", [-0.1, 1.0, 1.5])
def test_hole_ratio_out_of_range(ratio):
    with pytest.raises(InvalidInputError, match="hole_radius_ratio"):
        compute_slice_geometry(_series(1, 2), hole_radius_ratio=ratio)


# ---------------------------------------------------------------------------
# Pie layout and labels
# ---------------------------------------------------------------------------


def test_pie_layout_fits_canvas():
    layout = compute_pie_layout(_series(1, 2, 3))
    assert (layout.center_x, layout.center_y) == (200, 200)
    assert layout.radius == 180
    assert layout.hole_radius == 0
    assert layout.total == 6


def test_pie_layout_uses_short_side():
    layout = compute_pie_layout(_series(1), {"width": 600, "height": 300, "hole_size": 0.5})
    assert layout.radius == 130
    assert layout.hole_radius == 65


def test_tiny_canvas_rejected():
    with pytest.raises(InvalidInputError, match="too small"):
        compute_pie_layout(_series(1), {"width": 30, "height": 30})


def test_pie_label_position():
    first, _ = compute_slice_geometry(_series(1, 1))
    x, y = slice_label_position(first)
    assert x == pytest.approx(200 + 180 * 0.7)
    assert y == pytest.approx(200)


def test_donut_label_sits_mid_band():
    first, _ = compute_slice_geometry(_series(1, 1), hole_radius_ratio=0.5)
    x, y = slice_label_position(first)
    assert math.hypot(x - 200, y - 200) == pytest.approx(135)
