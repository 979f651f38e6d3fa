"""CLI for beaned-charts."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import click
from loguru import logger

from beaned_charts import __version__
from beaned_charts.config import CHART_KINDS, resolve_config
from beaned_charts.data.loader import ChartDocument, parse_chart_document
from beaned_charts.data.model import InvalidInputError
from beaned_charts.layout.arcs import compute_pie_layout
from beaned_charts.layout.bars import compute_bar_layout
from beaned_charts.layout.constants import VALUE_PADDING
from beaned_charts.layout.curves import compute_line_points
from beaned_charts.layout.geometry import value_range
from beaned_charts.render.chart import RENDERERS
from beaned_charts.themes import THEMES


def _load(input_file: Path) -> ChartDocument:
    try:
        return parse_chart_document(input_file.read_text())
    except InvalidInputError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)


def _parse_option(raw: str) -> tuple[str, Any]:
    """Split ``key=value``; values are read as JSON when they parse."""
    if "=" not in raw:
        raise click.BadParameter(f"expected KEY=VALUE, got '{raw}'")
    key, _, value = raw.partition("=")
    try:
        return key.strip(), json.loads(value)
    except json.JSONDecodeError:
        return key.strip(), value


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Log layout details to stderr.")
def cli(verbose: bool) -> None:
    """beaned-charts: Render bar, line and pie charts to self-contained SVG."""
    if verbose:
        logger.remove()
        logger.add(sys.stderr, level="DEBUG")
        logger.enable("beaned_charts")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-k", "--kind", type=click.Choice(CHART_KINDS), default=None,
              help="Chart kind (default: the document's 'kind', else bar)")
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output SVG file path. Defaults to <input>.svg")
@click.option("--theme", type=click.Choice(list(THEMES.keys())), default=None,
              help="Color theme (default: per chart kind)")
@click.option("--width", type=float, default=None, help="SVG width in pixels")
@click.option("--height", type=float, default=None, help="SVG height in pixels")
@click.option("--option", "extra", multiple=True, metavar="KEY=VALUE",
              help="Set any chart option, e.g. --option hole_size=0.5")
def render(
    input_file: Path,
    kind: str | None,
    output: Path | None,
    theme: str | None,
    width: float | None,
    height: float | None,
    extra: tuple[str, ...],
) -> None:
    """Render a JSON chart document to SVG."""
    doc = _load(input_file)
    kind = kind or doc.kind or "bar"

    options = dict(doc.options)
    options.update(_parse_option(raw) for raw in extra)
    for key, value in (("theme", theme), ("width", width), ("height", height)):
        if value is not None:
            options[key] = value

    try:
        config = resolve_config(kind, options)
        svg = RENDERERS[kind](doc.series, config)
    except InvalidInputError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    if output is None:
        output = input_file.with_suffix(".svg")

    output.write_text(svg if svg.endswith("\n") else svg + "\n")
    click.echo(f"Rendered {kind} chart with {len(doc.series)} points -> {output}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-k", "--kind", type=click.Choice(CHART_KINDS), default=None,
              help="Chart kind to validate against")
def validate(input_file: Path, kind: str | None) -> None:
    """Validate a JSON chart document by laying it out."""
    doc = _load(input_file)
    kind = kind or doc.kind or "bar"

    try:
        config = resolve_config(kind, doc.options)
        if kind == "bar":
            compute_bar_layout(doc.series, config)
        elif kind == "line":
            compute_line_points(doc.series, config)
        else:
            compute_pie_layout(doc.series, config)
    except InvalidInputError as e:
        click.echo(f"Validation error: {e}", err=True)
        raise SystemExit(1)

    click.echo(f"Valid: {kind} chart, {len(doc.series)} points")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def info(input_file: Path) -> None:
    """Show information about a JSON chart document."""
    doc = _load(input_file)

    click.echo(f"Title: {doc.title or '(none)'}")
    click.echo(f"Kind: {doc.kind or '(unspecified)'}")
    click.echo(f"Points: {len(doc.series)}")
    if doc.series:
        values = [p.value for p in doc.series]
        click.echo(f"Values: min {min(values):g}, max {max(values):g}")
        try:
            low, high = value_range(
                values,
                doc.options.get("min_value"),
                doc.options.get("max_value"),
                doc.options.get("value_padding", VALUE_PADDING),
            )
        except InvalidInputError as e:
            click.echo(f"Error: {e}", err=True)
            raise SystemExit(1)
        click.echo(f"Display range: {low:g} .. {high:g}")
    for i, point in enumerate(doc.series):
        click.echo(f"  [{i}] {point.label or '-'}: {point.value:g}")
    if doc.options:
        click.echo(f"Options: {', '.join(sorted(doc.options))}")
