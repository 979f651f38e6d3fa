"""Stylesheets embedded in chart SVGs.

Hover behaviour is CSS-only: tooltips, value labels and crosshair guides
are present in the markup with zero opacity and revealed when their group
is hovered.
"""

from __future__ import annotations

__all__ = ["bar_stylesheet", "line_stylesheet", "pie_stylesheet"]

from beaned_charts.config import ChartConfig


def _rule(selector: str, declarations: dict[str, object]) -> str:
    body = " ".join(f"{k}: {v};" for k, v in declarations.items() if v is not None)
    return f"{selector} {{ {body} }}"


def _transition(config: ChartConfig, prop: str = "all") -> str:
    return f"{prop} {config.animation_duration:g}ms {config.animation_easing}"


def _shared_rules(config: ChartConfig, container: str) -> list[str]:
    return [
        _rule(container, {
            "font-family": config.font_family,
            "font-size": f"{config.font_size:g}px",
            "color": config.text_color,
        }),
        _rule(".grid-line", {
            "stroke": config.grid_color,
            "stroke-width": config.axis_line_width,
            "stroke-dasharray": config.grid_dash_array,
            "opacity": config.grid_opacity,
        }),
        _rule(".axis-label", {
            "font-size": f"{config.axis_label_font_size:g}px",
            "fill": config.axis_color,
            "font-weight": 500,
        }),
        _rule(".tooltip", {
            "opacity": 0,
            "transition": _transition(config, "opacity"),
            "pointer-events": "none",
        }),
    ]


def bar_stylesheet(config: ChartConfig) -> str:
    """Stylesheet for bar charts."""
    hover = config.hover_effects
    rules = _shared_rules(config, ".bar-chart")
    rules += [
        _rule(".bar", {
            "transition": _transition(config),
            "cursor": "pointer" if hover else "default",
            "filter": "drop-shadow(0 1px 3px rgba(0,0,0,0.1))" if hover else "none",
            "fill-opacity": config.bar_opacity,
        }),
        _rule(".value-label", {
            "opacity": 0,
            "transition": _transition(config),
            "font-weight": 600,
            "font-size": f"{config.tooltip_font_size:g}px",
            "fill": config.text_color,
        }),
    ]
    if hover:
        rules += [
            _rule(".bar:hover", {
                "filter": "drop-shadow(0 3px 8px rgba(0,0,0,0.15))",
                "transform": "translateY(-2px)",
                "fill-opacity": config.bar_hover_opacity,
            }),
            _rule(".bar-group:hover .value-label", {
                "opacity": 1,
                "transform": "translateY(-8px)",
            }),
        ]
    if config.show_tooltips:
        rules.append(_rule(".bar-group:hover .tooltip", {"opacity": 1}))
    return "\n".join(rules)


def line_stylesheet(config: ChartConfig) -> str:
    """Stylesheet for line charts."""
    rules = _shared_rules(config, ".line-chart")
    rules += [
        _rule(".chart-line", {
            "fill": "none",
            "stroke": config.line_color,
            "stroke-width": config.stroke_width,
            "stroke-linecap": "round",
            "stroke-linejoin": "round",
            "stroke-opacity": config.line_opacity,
            "stroke-dasharray": config.line_dash_array,
        }),
        _rule(".data-point", {
            "fill": config.point_color or config.line_color,
            "stroke": config.point_stroke_color or config.axis_color,
            "stroke-width": config.point_stroke_width,
            "fill-opacity": config.point_opacity,
            "stroke-opacity": config.point_opacity,
            "transition": _transition(config),
        }),
        _rule(".crosshair-line", {
            "stroke": config.crosshair_color,
            "stroke-width": 1,
            "opacity": 0,
            "pointer-events": "none",
            "transition": _transition(config, "opacity"),
        }),
    ]
    if config.hover_effects:
        rules.append(_rule(".data-point:hover", {
            "r": f"{config.point_radius * 1.2:g}px",
        }))
    if config.show_crosshair:
        rules.append(_rule(".point-group:hover .crosshair-line", {"opacity": 0.8}))
    if config.show_tooltips:
        rules.append(_rule(".point-group:hover .tooltip", {"opacity": 1}))
    return "\n".join(rules)


def pie_stylesheet(config: ChartConfig, center_x: float, center_y: float) -> str:
    """Stylesheet for pie and donut charts."""
    hover = config.hover_effects
    rules = [
        _rule(".pie-chart", {
            "font-family": config.font_family,
            "font-size": f"{config.font_size:g}px",
            "color": config.text_color,
        }),
        _rule(".slice", {
            "transition": _transition(config),
            "cursor": "pointer" if hover else "default",
            "filter": "drop-shadow(0 1px 3px rgba(0,0,0,0.08))" if hover else "none",
            "stroke-linejoin": "round",
            "fill-opacity": config.slice_opacity,
        }),
        _rule(".tooltip", {
            "opacity": 0,
            "transition": _transition(config, "opacity"),
            "pointer-events": "none",
        }),
        _rule(".percentage-label", {
            "transition": _transition(config),
            "font-weight": 600,
            "pointer-events": "none",
            "fill": config.text_color,
            "font-size": f"{config.percentage_font_size:g}px",
        }),
        _rule(".center-label", {
            "opacity": 0,
            "transition": _transition(config, "opacity"),
            "font-weight": 600,
            "font-size": f"{config.center_label_font_size:g}px",
            "fill": config.center_label_color,
        }),
    ]
    if hover:
        scale = 1.08 if config.explode_slices else 1.05
        rules += [
            _rule(".slice:hover", {
                "filter": "drop-shadow(0 3px 8px rgba(0,0,0,0.25))",
                "transform-origin": f"{center_x:g}px {center_y:g}px",
                "transform": f"scale({scale})",
            }),
            _rule(".slice-group:hover .percentage-label", {
                "font-size": f"{config.percentage_font_size + 2:g}px",
            }),
        ]
        if config.show_center_label:
            rules.append(_rule(".slice-group:hover .center-label", {"opacity": 1}))
    if config.show_tooltips:
        rules.append(_rule(".slice-group:hover .tooltip", {"opacity": 1}))
    return "\n".join(rules)
