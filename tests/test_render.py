"""Tests for SVG rendering."""

from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from beaned_charts import (
    DataPoint,
    Formatters,
    InvalidInputError,
    render_bar_chart,
    render_chart,
    render_line_chart,
    render_pie_chart,
)
from beaned_charts.render.common import format_number
from beaned_charts.render.palette import get_color

SVG_NS = "{http://www.w3.org/2000/svg}"

SALES = [
    DataPoint(value=120, label="Q1"),
    DataPoint(value=180, label="Q2"),
    DataPoint(value=150, label="Q3"),
    DataPoint(value=210, label="Q4"),
]


def _parse(svg: str) -> ET.Element:
    root = ET.fromstring(svg)
    assert root.tag == f"{SVG_NS}svg"
    return root


def _with_class(root: ET.Element, name: str) -> list[ET.Element]:
    return [el for el in root.iter() if name in (el.get("class") or "").split()]


def _texts(root: ET.Element) -> list[str]:
    return [el.text for el in root.iter(f"{SVG_NS}text") if el.text]


# ---------------------------------------------------------------------------
# Bar
# ---------------------------------------------------------------------------


class TestBarChart:
    def test_well_formed_with_one_bar_per_point(self):
        root = _parse(render_bar_chart(SALES))
        assert len(_with_class(root, "bar")) == 4
        assert len(_with_class(root, "bar-group")) == 4
        assert len(root.findall(f"{SVG_NS}style")) == 1

    def test_canvas_size(self):
        root = _parse(render_bar_chart(SALES, {"width": 480, "height": 320}))
        assert float(root.get("width")) == 480
        assert float(root.get("height")) == 320

    def test_labels_and_tooltips(self):
        root = _parse(render_bar_chart(SALES))
        texts = _texts(root)
        for label in ("Q1", "Q2", "Q3", "Q4"):
            assert label in texts
        assert "210" in texts
        assert len(_with_class(root, "tooltip")) == 4

    def test_tooltips_can_be_disabled(self):
        root = _parse(render_bar_chart(SALES, {"show_tooltips": False}))
        assert _with_class(root, "tooltip") == []

    def test_grid_lines(self):
        root = _parse(render_bar_chart(SALES, {"grid_lines": 4}))
        assert len(_with_class(root, "grid-line")) == 5

    def test_no_grid(self):
        root = _parse(render_bar_chart(SALES, {"show_grid": False}))
        assert _with_class(root, "grid-line") == []

    def test_formatters(self):
        formatters = Formatters(
            x_label=lambda s: s.lower(),
            tooltip_value=lambda v: f"${v:,.0f}",
        )
        root = _parse(render_bar_chart(SALES, formatters=formatters))
        texts = _texts(root)
        assert "q1" in texts
        assert "$120" in texts

    def test_gradients_use_palette(self):
        svg = render_bar_chart(SALES)
        assert get_color(0) in svg
        assert get_color(3) in svg

    def test_rejects_empty(self):
        with pytest.raises(InvalidInputError):
            render_bar_chart([])


# ---------------------------------------------------------------------------
# Line
# ---------------------------------------------------------------------------


class TestLineChart:
    def test_smooth_line_uses_curves(self):
        root = _parse(render_line_chart([3, 1, 4, 1, 5]))
        (line,) = _with_class(root, "chart-line")
        assert " C " in line.get("d")

    def test_straight_line(self):
        root = _parse(render_line_chart([3, 1, 4, 1, 5], {"smooth": False}))
        (line,) = _with_class(root, "chart-line")
        assert " C " not in line.get("d")
        assert line.get("d").count(" L ") == 4

    def test_points_and_crosshairs(self):
        root = _parse(render_line_chart([3, 1, 4]))
        assert len(_with_class(root, "data-point")) == 3
        assert len(_with_class(root, "crosshair-line")) == 3

    def test_hidden_points(self):
        root = _parse(render_line_chart([3, 1, 4], {"show_points": False}))
        assert _with_class(root, "data-point") == []

    def test_x_axis_labels_override_dates(self):
        series = [DataPoint(1, date="d1"), DataPoint(2, date="d2")]
        root = _parse(render_line_chart(series, {"x_axis_labels": ["Mon", ""]}))
        labels = [el.text for el in _with_class(root, "x-axis-label")]
        assert labels == ["Mon", "d2"]

    def test_grid_labels_follow_value_range(self):
        root = _parse(render_line_chart([10, 90], {"min_value": 0, "max_value": 100}))
        labels = [el.text for el in _with_class(root, "y-axis-label")]
        assert labels == ["20", "40", "60", "80", "100"]

    def test_tooltip_shows_point_data(self):
        series = [DataPoint(10, date="Mar 1"), DataPoint(12.5, date="Mar 2")]
        root = _parse(render_line_chart(series))
        texts = _texts(root)
        assert "Mar 2" in texts
        assert "12.5" in texts


# ---------------------------------------------------------------------------
# Pie
# ---------------------------------------------------------------------------


class TestPieChart:
    def test_one_path_per_positive_value(self):
        root = _parse(render_pie_chart([5, 0, 5]))
        assert len(_with_class(root, "slice")) == 2

    def test_dropped_value_keeps_colors_and_labels_aligned(self):
        series = [{"value": 5}, {"value": 0}, {"value": 5}]
        colors = ["#aa0000", "#00bb00", "#0000cc"]
        root = _parse(render_pie_chart(series, {"colors": colors}))
        fills = [el.get("fill") for el in _with_class(root, "slice")]
        assert fills == ["#aa0000", "#0000cc"]
        texts = _texts(root)
        assert "Item 1" in texts
        assert "Item 3" in texts
        assert "Item 2" not in texts

    def test_percentage_labels(self):
        root = _parse(render_pie_chart([1, 1, 2]))
        labels = [el.text for el in _with_class(root, "percentage-label")]
        assert labels == ["25%", "25%", "50%"]

    def test_small_slices_have_no_percentage(self):
        root = _parse(render_pie_chart([1, 99]))
        labels = [el.text for el in _with_class(root, "percentage-label")]
        assert labels == ["99%"]

    def test_donut_center_labels(self):
        series = [DataPoint(3, label="A"), DataPoint(1, label="B")]
        root = _parse(render_pie_chart(series, {"hole_size": 0.5}))
        centers = [el.text for el in _with_class(root, "center-label")]
        assert centers == ["A: 3", "B: 1"]

    def test_plain_pie_has_no_center_label(self):
        root = _parse(render_pie_chart([3, 1]))
        assert _with_class(root, "center-label") == []

    def test_explode_class(self):
        root = _parse(render_pie_chart([3, 1], {"explode_slices": True}))
        assert len(_with_class(root, "explode")) == 2

    def test_tooltip_includes_percentage(self):
        series = [DataPoint(3, label="A"), DataPoint(1, label="B")]
        root = _parse(render_pie_chart(series))
        assert "3 (75%)" in _texts(root)

    def test_percentage_formatter(self):
        formatters = Formatters(tooltip_percentage=lambda p: f"{p} pct")
        root = _parse(render_pie_chart([3, 1], formatters=formatters))
        assert "1 (25 pct)" in _texts(root)

    def test_single_slice_renders_full_circle(self):
        root = _parse(render_pie_chart([7]))
        (path,) = _with_class(root, "slice")
        assert path.get("d").count("A ") == 2

    def test_rejects_all_zero(self):
        with pytest.raises(InvalidInputError):
            render_pie_chart([0, 0])


# ---------------------------------------------------------------------------
# Dispatch and helpers
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("kind", ["bar", "line", "pie"])
def test_render_chart_dispatch(kind):
    svg = render_chart(kind, [1, 2, 3])
    _parse(svg)


def test_render_chart_unknown_kind():
    with pytest.raises(InvalidInputError, match="Unknown chart kind"):
        render_chart("radar", [1, 2])


def test_rendering_is_deterministic():
    assert render_pie_chart([2, 3, 5]) == render_pie_chart([2, 3, 5])


def test_format_number():
    assert format_number(5.0) == "5"
    assert format_number(2.5) == "2.5"
    assert format_number(-3) == "-3"
