"""Fill color selection per series index."""

from __future__ import annotations

__all__ = ["get_color"]

from collections.abc import Sequence

from beaned_charts.render.constants import DEFAULT_PALETTE


def get_color(
    index: int,
    colors: Sequence[str] | None = None,
    override: str | None = None,
) -> str:
    """Pick the fill for item ``index``.

    A single ``override`` color wins, then the caller's ``colors`` list
    (when it has an entry for this index), then the default palette,
    cycled.
    """
    if override:
        return override
    if colors and index < len(colors) and colors[index]:
        return colors[index]
    return DEFAULT_PALETTE[index % len(DEFAULT_PALETTE)]
