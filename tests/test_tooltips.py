"""Tests for tooltip sizing and placement."""

from __future__ import annotations

import math

import pytest

from beaned_charts.data.model import Box, DataPoint, FontMetrics
from beaned_charts.layout.arcs import compute_slice_geometry
from beaned_charts.layout.tooltips import estimate_tooltip_size, place_tooltip


class TestEstimateSize:
    def test_short_text_uses_min_width(self):
        width, height, text_width, lines = estimate_tooltip_size("A", "1")
        assert width == 80
        assert text_width == 26
        assert height == 42
        assert lines == 1

    def test_long_label_wraps(self):
        width, height, text_width, lines = estimate_tooltip_size("x" * 25, "1")
        assert lines == 3
        assert height == 70
        assert text_width == 25 * 6 + 20
        assert width == text_width

    def test_custom_metrics(self):
        metrics = FontMetrics(char_width=10, min_width=0)
        width, _, _, _ = estimate_tooltip_size("abcd", "1", metrics)
        assert width == 60


class TestBoxPlacement:
    def test_inside_large_box(self):
        tip = place_tooltip("A", "1", Box(0, 0, 200, 200))
        assert tip.placement == "inside"
        assert (tip.width, tip.height) == (80, 42)
        assert (tip.x, tip.y) == (60, 79)

    def test_text_baselines(self):
        tip = place_tooltip("A", "1", Box(0, 0, 200, 200))
        assert tip.text_x == 100
        assert tip.label_y == 94
        assert tip.value_y == 108

    def test_outside_small_box(self):
        tip = place_tooltip("A", "1", Box(0, 100, 30, 20))
        assert tip.placement == "outside"
        assert tip.y == 100 - 42 - 5
        assert tip.x == 15 - 40

    def test_box_narrower_than_min_width_goes_outside(self):
        # text is only 26px wide but the drawn box is 80px
        tip = place_tooltip("A", "5", Box(0, 0, 50, 200))
        assert tip.width == 80
        assert tip.placement == "outside"
        assert tip.y == -42 - 5

    def test_box_must_exceed_tooltip_width_plus_margin(self):
        assert place_tooltip("A", "5", Box(0, 0, 100, 200)).placement == "outside"
        assert place_tooltip("A", "5", Box(0, 0, 101, 200)).placement == "inside"

    def test_narrow_tall_box_goes_outside(self):
        tip = place_tooltip("A long label", "12345", Box(0, 0, 40, 300))
        assert tip.placement == "outside"
        assert tip.y + tip.height < 0

    def test_outside_tooltip_does_not_overlap(self):
        box = Box(50, 120, 20, 30)
        tip = place_tooltip("Q1", "120", box)
        assert tip.y + tip.height <= box.y

    def test_inside_tooltip_is_contained(self):
        box = Box(10, 10, 300, 150)
        tip = place_tooltip("Revenue", "1,200", box)
        assert tip.placement == "inside"
        assert tip.x >= box.x and tip.x + tip.width <= box.right
        assert tip.y >= box.y and tip.y + tip.height <= box.bottom

    def test_deterministic(self):
        box = Box(3, 4, 100, 60)
        assert place_tooltip("a", "b", box) == place_tooltip("a", "b", box)


class TestSlicePlacement:
    def test_inside_wide_slice(self):
        first, _ = compute_slice_geometry([DataPoint(1), DataPoint(1)])
        tip = place_tooltip("A", "1", first)
        assert tip.placement == "inside"
        assert tip.text_x == pytest.approx(200 + 126)
        assert tip.x == pytest.approx(326 - 40)
        assert tip.y == pytest.approx(200 - 21)

    def test_outside_thin_slice(self):
        thin, _ = compute_slice_geometry([DataPoint(1), DataPoint(99)])
        tip = place_tooltip("A", "1", thin)
        assert tip.placement == "outside"
        anchor_y = tip.y + tip.height / 2
        distance = math.hypot(tip.text_x - thin.center_x, anchor_y - thin.center_y)
        assert distance == pytest.approx(180 + 30)

    def test_thin_donut_band_goes_outside(self):
        first, _ = compute_slice_geometry(
            [DataPoint(1), DataPoint(1)], hole_radius_ratio=0.9
        )
        tip = place_tooltip("A", "1", first)
        assert tip.placement == "outside"
