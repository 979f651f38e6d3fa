"""Layout constants used across layout modules.

Centralizes magic numbers from geometry.py, bars.py, curves.py, arcs.py
and tooltips.py.
"""

# ---------------------------------------------------------------------------
# Value range
# ---------------------------------------------------------------------------
VALUE_PADDING: float = 0.1
"""Fraction of the data span added above and below the data range."""

RANGE_EPSILON: float = 1e-6
"""Half-width substituted for a zero-width value range."""

# ---------------------------------------------------------------------------
# Bars
# ---------------------------------------------------------------------------
MIN_BAR_WIDTH: float = 20.0
"""Default floor for bar widths."""

MIN_BAR_HEIGHT: float = 10.0
"""Default floor for bar heights."""

BAR_SPACING: float = 0.2
"""Fraction of each bar slot left empty when widths are automatic."""

# ---------------------------------------------------------------------------
# Curves
# ---------------------------------------------------------------------------
SPLINE_TENSION: float = 0.5
"""Catmull-Rom tension coefficient."""

# ---------------------------------------------------------------------------
# Pie / donut
# ---------------------------------------------------------------------------
PIE_RADIUS_INSET: float = 20.0
"""Distance between the outer radius and the nearest canvas edge."""

EXPLODE_OFFSET: float = 5.0
"""Default distance a slice is pushed out along its bisector."""

PIE_LABEL_RADIUS_RATIO: float = 0.7
"""Label radius as a fraction of the outer radius (pies without a hole)."""

FULL_CIRCLE: float = 360.0
"""Degrees in a full turn."""

HALF_CIRCLE: float = 180.0
"""Sweep above which an arc needs the large-arc flag."""

# ---------------------------------------------------------------------------
# Tooltips
# ---------------------------------------------------------------------------
TOOLTIP_FIT_MARGIN: float = 10.0
"""Extra height a bar needs beyond the tooltip to hold it inside."""

TOOLTIP_WIDTH_MARGIN: float = 20.0
"""Extra width a bar needs beyond the tooltip text to hold it inside."""

TOOLTIP_GAP: float = 5.0
"""Gap between a bar top and an outside tooltip."""

TOOLTIP_RADIAL_OFFSET: float = 30.0
"""Distance beyond the outer radius for outside slice tooltips."""

# ---------------------------------------------------------------------------
# Number formatting
# ---------------------------------------------------------------------------
COORD_PRECISION: int = 3
"""Decimal places kept when writing coordinates into path data."""
