"""Data model for chart series and computed chart geometry."""

from __future__ import annotations

from dataclasses import dataclass, field


class InvalidInputError(ValueError):
    """Raised when a series or configuration cannot be laid out."""


@dataclass(frozen=True)
class DataPoint:
    """A single value in a series, with optional display metadata."""

    value: float
    label: str | None = None
    date: str | None = None


@dataclass(frozen=True)
class Point2D:
    """A data point mapped into SVG coordinates (line charts)."""

    x: float
    y: float
    value: float
    index: int
    label: str | None = None
    date: str | None = None


@dataclass
class Box:
    """An axis-aligned rectangle in SVG coordinates."""

    x: float
    y: float
    width: float
    height: float

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    @property
    def center_y(self) -> float:
        return self.y + self.height / 2

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def right(self) -> float:
        return self.x + self.width


@dataclass
class BarLayout:
    """Computed bar rectangles plus the values needed to re-derive them.

    ``area`` is the padded chart area; ``spacing`` is the gap placed before,
    between and after the bars.
    """

    rects: list[Box]
    spacing: float
    range_min: float
    range_max: float
    area: Box


@dataclass
class LineLayout:
    """Mapped line points plus the value range and area they were mapped into."""

    points: list[Point2D]
    range_min: float
    range_max: float
    area: Box


@dataclass
class SliceGeometry:
    """Geometry of one pie/donut slice.

    Angles are in degrees, measured clockwise from 12 o'clock.
    ``center_x``/``center_y`` is the (possibly exploded) center the path
    was built around. ``index`` is the point's position in the input
    series, counting dropped non-positive values.
    """

    index: int
    point: DataPoint
    start_angle: float
    end_angle: float
    outer_radius: float
    inner_radius: float
    center_x: float
    center_y: float
    fraction: float
    large_arc_flag: int
    path: str

    @property
    def sweep(self) -> float:
        return self.end_angle - self.start_angle

    @property
    def mid_angle(self) -> float:
        return self.start_angle + self.sweep / 2


@dataclass
class TooltipBox:
    """Placement of a tooltip box and the anchors of its two text rows."""

    x: float
    y: float
    width: float
    height: float
    placement: str  # "inside" or "outside"
    text_x: float = 0.0
    label_y: float = 0.0
    value_y: float = 0.0
    label_lines: int = 1


@dataclass
class FontMetrics:
    """Approximate text metrics used by the tooltip sizing heuristic."""

    char_width: float = 6.0
    line_height: float = 14.0
    max_chars_per_line: int = 12
    base_height: float = 20.0
    padding: float = 8.0
    text_margin: float = 20.0
    min_width: float = 80.0
    first_baseline: float = 15.0


@dataclass
class PieLayout:
    """All slices of a pie/donut chart plus the shared circle geometry."""

    slices: list[SliceGeometry] = field(default_factory=list)
    center_x: float = 0.0
    center_y: float = 0.0
    radius: float = 0.0
    hole_radius: float = 0.0
    total: float = 0.0
