"""Loading chart data from Python values and JSON documents.

A chart document is either a bare JSON list of points or an object::

    {"kind": "bar", "data": [...], "options": {...}}

Points may be numbers or objects with ``value`` and optional ``label`` and
``date`` keys.
"""

from __future__ import annotations

import json
import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from beaned_charts.data.model import DataPoint, InvalidInputError


@dataclass
class ChartDocument:
    """A parsed chart document."""

    series: tuple[DataPoint, ...]
    options: dict[str, Any] = field(default_factory=dict)
    kind: str | None = None
    title: str | None = None


def _coerce_point(item: Any, index: int) -> DataPoint:
    if isinstance(item, DataPoint):
        return item
    if isinstance(item, Mapping):
        if "value" not in item:
            raise InvalidInputError(f"Data point {index} has no 'value'")
        label = item.get("label")
        date = item.get("date")
        return DataPoint(
            value=_coerce_value(item["value"], index),
            label=str(label) if label is not None else None,
            date=str(date) if date is not None else None,
        )
    return DataPoint(value=_coerce_value(item, index))


def _coerce_value(raw: Any, index: int) -> float:
    # bool is an int subclass; reject it explicitly
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise InvalidInputError(
            f"Data point {index} has a non-numeric value: {raw!r}"
        )
    return float(raw)


def coerce_series(data: Iterable[Any]) -> tuple[DataPoint, ...]:
    """Convert numbers, mappings or DataPoints into an immutable series."""
    if isinstance(data, (str, bytes, Mapping)) or not isinstance(data, Iterable):
        raise InvalidInputError("Series must be a sequence of data points")
    return tuple(_coerce_point(item, i) for i, item in enumerate(data))


def check_series(series: tuple[DataPoint, ...] | list[DataPoint]) -> None:
    """Reject series that cannot be laid out (empty or non-finite)."""
    if not series:
        raise InvalidInputError("Series is empty; at least one data point is required")
    for i, point in enumerate(series):
        if not math.isfinite(point.value):
            raise InvalidInputError(
                f"Data point {i} has a non-finite value: {point.value!r}"
            )


def parse_chart_document(text: str) -> ChartDocument:
    """Parse a JSON chart document."""
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidInputError(f"Invalid JSON: {e}") from e

    if isinstance(raw, list):
        return ChartDocument(series=coerce_series(raw))

    if not isinstance(raw, dict):
        raise InvalidInputError(
            "Chart document must be a list of points or an object with 'data'"
        )
    if "data" not in raw:
        raise InvalidInputError("Chart document has no 'data' entry")

    options = raw.get("options") or {}
    if not isinstance(options, dict):
        raise InvalidInputError("'options' must be an object")

    kind = raw.get("kind")
    title = raw.get("title")
    return ChartDocument(
        series=coerce_series(raw["data"]),
        options=dict(options),
        kind=str(kind) if kind is not None else None,
        title=str(title) if title is not None else None,
    )
