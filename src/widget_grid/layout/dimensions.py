"""Grid dimension calculation.

The grid has no stored size. Its extent is re-derived from the widgets on
every call so it can never drift from the actual occupancy.
"""

from __future__ import annotations

__all__ = ["dashboard_bounds", "dimensions"]

from collections.abc import Sequence

from widget_grid.layout.constants import MIN_COLS, MIN_GROWTH_ROWS, TRAILING_ROWS
from widget_grid.parser.model import Bounds, Dashboard, Widget


def dimensions(
    widgets: Sequence[Widget],
    min_cols: int = MIN_COLS,
    min_growth_rows: int = MIN_GROWTH_ROWS,
) -> Bounds:
    """Return the smallest grid containing every widget plus growth room.

    Columns are the widest right edge, at least ``min_cols``. Rows are the
    lowest bottom edge plus one trailing empty row, at least
    ``min_growth_rows``.
    """
    if not widgets:
        return Bounds(rows=min_growth_rows, cols=min_cols)

    max_right = max(w.col + w.col_span for w in widgets)
    max_bottom = max(w.row + w.row_span for w in widgets)
    return Bounds(
        rows=max(min_growth_rows, max_bottom + TRAILING_ROWS),
        cols=max(min_cols, max_right),
    )


def dashboard_bounds(dashboard: Dashboard) -> Bounds:
    """``dimensions`` using the dashboard's own settings where it has them."""
    return dimensions(
        dashboard.widgets,
        min_cols=dashboard.min_cols if dashboard.min_cols is not None else MIN_COLS,
        min_growth_rows=(
            dashboard.min_growth_rows
            if dashboard.min_growth_rows is not None
            else MIN_GROWTH_ROWS
        ),
    )
