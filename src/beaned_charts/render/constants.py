"""Render constants used across render modules.

Centralizes magic numbers from bar.py, line.py, pie.py and common.py.
Theme-dependent values remain in style.py; geometry values in
beaned_charts.layout.constants.
"""

# ---------------------------------------------------------------------------
# Canvas
# ---------------------------------------------------------------------------
BACKGROUND_RADIUS: float = 8.0
"""Corner radius of the chart background rectangle."""

# ---------------------------------------------------------------------------
# Axes
# ---------------------------------------------------------------------------
Y_LABEL_GAP: float = 8.0
"""Horizontal gap between the y-axis labels and the chart area."""

X_LABEL_OFFSET: float = 15.0
"""Distance below the chart area for bar x-axis labels."""

LINE_X_LABEL_OFFSET: float = 20.0
"""Distance below the chart area for line x-axis labels."""

# ---------------------------------------------------------------------------
# Bars
# ---------------------------------------------------------------------------
VALUE_LABEL_OFFSET: float = 8.0
"""Distance above a bar for its hover value label."""

GRADIENT_END_OPACITY: float = 0.7
"""Bottom stop opacity of a bar gradient, relative to the bar opacity."""

# ---------------------------------------------------------------------------
# Pie
# ---------------------------------------------------------------------------
PERCENT_LABEL_MIN_FRACTION: float = 0.05
"""Slices below this fraction get no percentage label."""

CENTER_LABEL_MIN_FRACTION: float = 0.1
"""Slices below this fraction get no donut center label."""

# ---------------------------------------------------------------------------
# Tooltips
# ---------------------------------------------------------------------------
TOOLTIP_RADIUS: float = 8.0
"""Corner radius of tooltip boxes."""

TOOLTIP_BORDER_WIDTH: float = 1.0
"""Stroke width of tooltip box borders."""

# ---------------------------------------------------------------------------
# Palette
# ---------------------------------------------------------------------------
DEFAULT_PALETTE: tuple[str, ...] = (
    "#3b82f6",  # blue
    "#ef4444",  # red
    "#10b981",  # green
    "#f59e0b",  # amber
    "#8b5cf6",  # violet
    "#ec4899",  # pink
    "#14b8a6",  # teal
    "#f97316",  # orange
)
"""Round-robin fill colors used when a chart gives none."""
