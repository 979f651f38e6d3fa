"""Chart configuration: one fully-defaulted record shared by all chart kinds.

``resolve_config`` merges kind defaults, caller options and theme colors
and font into a :class:`ChartConfig`. Geometry and render functions only ever see
the resolved record, so no option can reach arithmetic as ``None`` unless
``None`` is its documented "not set" value (explicit range bounds, explicit
bar sizes, max clamps).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from typing import Any

from loguru import logger

from beaned_charts.data.model import InvalidInputError
from beaned_charts.layout.constants import (
    BAR_SPACING,
    EXPLODE_OFFSET,
    MIN_BAR_HEIGHT,
    MIN_BAR_WIDTH,
    VALUE_PADDING,
)
from beaned_charts.themes import THEMES

CHART_KINDS = ("bar", "line", "pie")

# Options whose unset value comes from the theme
_THEME_FIELDS = (
    "background_color",
    "grid_color",
    "axis_color",
    "text_color",
    "tooltip_background_color",
    "tooltip_text_color",
    "tooltip_border_color",
    "crosshair_color",
    "font_family",
)

KIND_DEFAULTS: dict[str, dict[str, Any]] = {
    "bar": {"width": 400.0, "height": 300.0, "theme": "light"},
    "line": {"width": 400.0, "height": 300.0, "theme": "dark"},
    "pie": {"width": 400.0, "height": 400.0, "theme": "light"},
}


@dataclass
class ChartConfig:
    """Resolved chart options. Field names double as option names."""

    kind: str = "bar"

    # Dimensions
    width: float = 400.0
    height: float = 300.0
    padding: float = 40.0

    # Colors and theme
    theme: str = "light"
    colors: list[str] = field(default_factory=list)
    background_color: str | None = None
    grid_color: str | None = None
    axis_color: str | None = None
    text_color: str | None = None
    tooltip_background_color: str | None = None
    tooltip_text_color: str | None = None
    tooltip_border_color: str | None = None
    crosshair_color: str | None = None

    # Fonts
    font_family: str | None = None
    font_size: float = 12.0
    axis_label_font_size: float = 10.0
    tooltip_font_size: float = 11.0

    # Display toggles
    show_background: bool = True
    show_grid: bool = True
    show_labels: bool = True
    show_tooltips: bool = True
    show_x_axis: bool = True
    show_y_axis: bool = True
    hover_effects: bool = True

    # Grid and axis
    grid_lines: int = 5
    grid_dash_array: str = "4,4"
    grid_opacity: float = 0.5
    axis_line_width: float = 1.0

    # Transitions
    animation_duration: float = 300.0
    animation_easing: str = "cubic-bezier(0.4, 0, 0.2, 1)"

    # Value range
    min_value: float | None = None
    max_value: float | None = None
    value_padding: float = VALUE_PADDING

    # Bars
    bar_color: str | None = None
    bar_width: float | list[float] | None = None
    bar_height: float | list[float] | None = None
    min_bar_width: float = MIN_BAR_WIDTH
    max_bar_width: float | None = None
    min_bar_height: float = MIN_BAR_HEIGHT
    max_bar_height: float | None = None
    bar_spacing: float = BAR_SPACING
    bar_border_radius: float = 3.0
    bar_opacity: float = 0.9
    bar_hover_opacity: float = 0.8

    # Lines
    line_color: str = "#90EE90"
    point_color: str | None = None
    point_stroke_color: str | None = None
    show_points: bool = True
    show_crosshair: bool = True
    stroke_width: float = 2.0
    line_opacity: float = 1.0
    line_dash_array: str | None = None
    smooth: bool = True
    point_radius: float = 4.0
    point_opacity: float = 1.0
    point_stroke_width: float = 2.0
    x_axis_labels: list[str] = field(default_factory=list)

    # Pie / donut
    slice_color: str | None = None
    hole_size: float = 0.0
    slice_border_width: float = 2.0
    slice_border_color: str = "#ffffff"
    slice_opacity: float = 1.0
    explode_slices: bool = False
    explode_offset: float = EXPLODE_OFFSET
    percentage_font_size: float = 12.0
    show_center_label: bool = True
    center_label_text: str | None = None
    center_label_font_size: float = 14.0
    center_label_color: str | None = None

    @property
    def chart_width(self) -> float:
        """Width of the padded chart area."""
        return self.width - 2 * self.padding

    @property
    def chart_height(self) -> float:
        """Height of the padded chart area."""
        return self.height - 2 * self.padding


OPTION_NAMES = frozenset(f.name for f in fields(ChartConfig)) - {"kind"}


def resolve_config(
    kind: str,
    options: Mapping[str, Any] | ChartConfig | None = None,
    **overrides: Any,
) -> ChartConfig:
    """Build a fully-defaulted :class:`ChartConfig` for a chart kind.

    ``options`` may be a mapping of option names or an already resolved
    config (in which case ``overrides`` are applied on top of it). Unknown
    option names and out-of-range ratios raise InvalidInputError.
    """
    if kind not in CHART_KINDS:
        raise InvalidInputError(
            f"Unknown chart kind '{kind}'; expected one of {', '.join(CHART_KINDS)}"
        )

    if isinstance(options, ChartConfig):
        merged = {f.name: getattr(options, f.name) for f in fields(ChartConfig)}
        merged.pop("kind")
    else:
        merged = dict(KIND_DEFAULTS[kind])
        merged.update(options or {})
    merged.update(overrides)

    unknown = sorted(set(merged) - OPTION_NAMES)
    if unknown:
        raise InvalidInputError(f"Unknown chart option(s): {', '.join(unknown)}")

    # None means "use the default" for every option
    merged = {k: v for k, v in merged.items() if v is not None}

    config = ChartConfig(kind=kind, **merged)

    theme = THEMES.get(config.theme)
    if theme is None:
        raise InvalidInputError(
            f"Unknown theme '{config.theme}'; expected one of {', '.join(THEMES)}"
        )
    fills = {
        name: getattr(theme, name)
        for name in _THEME_FIELDS
        if getattr(config, name) is None
    }
    if config.center_label_color is None:
        fills["center_label_color"] = config.text_color or theme.text_color
    config = replace(config, **fills)

    _check_ranges(config)
    logger.debug(
        "Resolved {} config: {}x{} padding={} theme={}",
        kind, config.width, config.height, config.padding, config.theme,
    )
    return config


def _check_ranges(config: ChartConfig) -> None:
    if not 0.0 <= config.bar_spacing <= 1.0:
        raise InvalidInputError(
            f"bar_spacing must be between 0 and 1, got {config.bar_spacing}"
        )
    if not 0.0 <= config.hole_size < 1.0:
        raise InvalidInputError(
            f"hole_size must be in [0, 1), got {config.hole_size}"
        )
    if config.value_padding < 0:
        raise InvalidInputError(
            f"value_padding must be non-negative, got {config.value_padding}"
        )
    if config.grid_lines < 1:
        raise InvalidInputError(f"grid_lines must be at least 1, got {config.grid_lines}")
    if config.width <= 0 or config.height <= 0:
        raise InvalidInputError(
            f"width and height must be positive, got {config.width}x{config.height}"
        )
    if config.padding < 0:
        raise InvalidInputError(f"padding must be non-negative, got {config.padding}")
    if config.kind != "pie" and (config.chart_width <= 0 or config.chart_height <= 0):
        raise InvalidInputError(
            f"padding {config.padding} leaves no chart area inside "
            f"{config.width}x{config.height}"
        )


def ensure_config(
    kind: str,
    config: Mapping[str, Any] | ChartConfig | None,
) -> ChartConfig:
    """Return ``config`` if it is already resolved for ``kind``, else resolve it."""
    if isinstance(config, ChartConfig) and config.kind == kind:
        return config
    return resolve_config(kind, config)
