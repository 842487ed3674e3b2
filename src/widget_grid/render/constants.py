"""Render constants used across render modules.

Centralizes magic numbers from svg.py. Theme-dependent values remain in
style.py.
"""

# ---------------------------------------------------------------------------
# Canvas
# ---------------------------------------------------------------------------
CANVAS_PADDING: float = 40.0
"""Default padding around the entire SVG canvas."""

TITLE_HEIGHT: float = 50.0
"""Vertical space reserved for the dashboard title when present."""

# ---------------------------------------------------------------------------
# Cells
# ---------------------------------------------------------------------------
CELL_SIZE: float = 160.0
"""Default width and height of one grid cell."""

CELL_GAP: float = 16.0
"""Gap between adjacent cells; spanned widgets also cover the gaps."""

CELL_RADIUS: float = 8.0
"""Corner radius of widget and empty-slot rectangles."""

WIDGET_TEXT_INSET: float = 14.0
"""Inset of the widget title from the widget's top-left corner."""

CONTENT_LINE_GAP: float = 8.0
"""Gap between widget title baseline and the first content line."""

# ---------------------------------------------------------------------------
# Row mode
# ---------------------------------------------------------------------------
ROW_LABEL_HEIGHT: float = 28.0
"""Height of the "Row N" header inside each row band."""

ROW_BAND_PADDING: float = 12.0
"""Padding between a row band's border and its slots."""

ROW_BAND_GAP: float = 20.0
"""Vertical gap between consecutive row bands."""
