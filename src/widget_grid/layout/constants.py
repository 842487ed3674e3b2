"""Layout constants used across layout modules.

Centralizes the grid growth margins and row-mode defaults used by
dimensions.py, placement.py and rows.py.
"""

# ---------------------------------------------------------------------------
# Grid mode
# ---------------------------------------------------------------------------
MIN_COLS: int = 3
"""Minimum number of grid columns, even when every widget is narrower."""

MIN_GROWTH_ROWS: int = 2
"""Minimum number of grid rows. The grid also keeps one trailing empty row
below the lowest widget so there is always somewhere to drop or add."""

TRAILING_ROWS: int = 1
"""Empty rows kept below the lowest widget edge."""

# ---------------------------------------------------------------------------
# Row mode
# ---------------------------------------------------------------------------
DEFAULT_ROW_COLUMNS: int = 3
"""Column count of a row that has not been configured explicitly."""

ROW_COLUMN_CHOICES: tuple[int, ...] = (1, 2, 3, 4)
"""Column counts a row may be switched to."""

ROW_BUFFER_OFFSET: int = 2
"""Offset from the highest occupied row at which "add row" creates a row.

Leaves one visible empty row between the last occupied row and the new one.
"""

MIN_ROW_GRID_HEIGHT: int = 3
"""Lower bound on the vertical extent used for down-expansion in row mode."""

# ---------------------------------------------------------------------------
# Drag and drop
# ---------------------------------------------------------------------------
DROP_TARGET_PREFIX: str = "cell"
"""Prefix of drop-target identifiers reported by the gesture layer
(``cell-<row>-<col>``)."""
