"""Row mode: widgets partitioned into rows with their own column counts.

A widget belongs to the row equal to its anchor ``row``. Each row carries
a column count (default ``DEFAULT_ROW_COLUMNS``) that bounds the column
axis for placement queries in that row; the occupancy and expansion logic
itself is the shared placement advisor.

Row configs are created lazily: a row without a ``RowConfig`` behaves as
if it had the default column count.
"""

from __future__ import annotations

__all__ = [
    "RowSlot",
    "add_row",
    "can_delete_row",
    "change_columns",
    "columns_for_row",
    "delete_row",
    "first_free_cell_in_row",
    "group_by_row",
    "max_occupied_row",
    "row_bounds",
    "row_expandable",
    "row_grid_height",
    "row_slots",
    "row_widgets",
    "rows_to_show",
]

import logging
from collections import defaultdict
from collections.abc import Sequence
from dataclasses import dataclass, replace

from widget_grid.layout.constants import (
    DEFAULT_ROW_COLUMNS,
    MIN_ROW_GRID_HEIGHT,
    ROW_BUFFER_OFFSET,
    ROW_COLUMN_CHOICES,
)
from widget_grid.layout.occupancy import is_occupied
from widget_grid.layout.placement import expandable
from widget_grid.parser.model import Bounds, DirectionFlags, RowConfig, Widget

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RowSlot:
    """One column position in a rendered row.

    ``widget`` is set on the column where a widget is anchored. An empty
    slot (no widget) is a place to add one.
    """

    row: int
    col: int
    widget: Widget | None = None

    @property
    def is_empty(self) -> bool:
        return self.widget is None


def row_widgets(widgets: Sequence[Widget], row_index: int) -> list[Widget]:
    """Return the widgets anchored in ``row_index``, in collection order."""
    return [w for w in widgets if w.row == row_index]


def group_by_row(widgets: Sequence[Widget]) -> dict[int, list[Widget]]:
    """Partition widgets into row buckets keyed by anchor row."""
    buckets: dict[int, list[Widget]] = defaultdict(list)
    for w in widgets:
        buckets[w.row].append(w)
    return dict(buckets)


def max_occupied_row(widgets: Sequence[Widget]) -> int:
    """Highest anchor row of any widget, or 0 for an empty collection."""
    if not widgets:
        return 0
    return max(w.row for w in widgets)


def columns_for_row(row_configs: Sequence[RowConfig], row_index: int) -> int:
    for config in row_configs:
        if config.row_index == row_index:
            return config.columns
    return DEFAULT_ROW_COLUMNS


def change_columns(
    row_configs: Sequence[RowConfig],
    row_index: int,
    columns: int,
) -> list[RowConfig]:
    """Return configs with ``row_index`` switched to ``columns`` columns.

    Creates the row's config if it does not exist yet. Raises ValueError
    for a column count outside ``ROW_COLUMN_CHOICES``.
    """
    if columns not in ROW_COLUMN_CHOICES:
        choices = ", ".join(str(c) for c in ROW_COLUMN_CHOICES)
        raise ValueError(
            f"Row {row_index}: unsupported column count {columns} "
            f"(choose one of {choices})"
        )
    result = []
    found = False
    for config in row_configs:
        if config.row_index == row_index:
            result.append(replace(config, columns=columns))
            found = True
        else:
            result.append(config)
    if not found:
        result.append(RowConfig(row_index=row_index, columns=columns))
    return result


def rows_to_show(
    widgets: Sequence[Widget],
    row_configs: Sequence[RowConfig] = (),
) -> list[int]:
    """Row indexes to display, ascending.

    Always rows ``0..max_occupied_row + 1`` (one trailing empty row),
    plus any explicitly configured rows beyond that.
    """
    shown = set(range(max_occupied_row(widgets) + 2))
    shown.update(c.row_index for c in row_configs)
    return sorted(shown)


def row_grid_height(
    widgets: Sequence[Widget],
    row_configs: Sequence[RowConfig] = (),
) -> int:
    """Vertical extent used to bound downward expansion in row mode."""
    return max(MIN_ROW_GRID_HEIGHT, len(rows_to_show(widgets, row_configs)))


def row_bounds(
    widgets: Sequence[Widget],
    row_configs: Sequence[RowConfig],
    row_index: int,
) -> Bounds:
    """Bounds for placement queries in one row.

    The column axis is the row's own column count instead of the global
    grid width.
    """
    return Bounds(
        rows=row_grid_height(widgets, row_configs),
        cols=columns_for_row(row_configs, row_index),
    )


def row_expandable(
    widget: Widget,
    widgets: Sequence[Widget],
    row_configs: Sequence[RowConfig],
) -> DirectionFlags:
    """``placement.expandable`` bounded by the widget's row."""
    return expandable(widget, widgets, row_bounds(widgets, row_configs, widget.row))


def row_slots(
    widgets: Sequence[Widget],
    row_configs: Sequence[RowConfig],
    row_index: int,
) -> list[RowSlot]:
    """Lay out one row for display.

    Each column yields a slot holding the widget anchored there, or an
    empty slot. Columns covered by a wider widget's span yield nothing.
    """
    bucket = row_widgets(widgets, row_index)
    slots = []
    for col in range(columns_for_row(row_configs, row_index)):
        widget = next(
            (w for w in bucket if w.col <= col < w.col + w.col_span), None
        )
        if widget is None:
            slots.append(RowSlot(row=row_index, col=col))
        elif widget.col == col:
            slots.append(RowSlot(row=row_index, col=col, widget=widget))
    return slots


def first_free_cell_in_row(
    widgets: Sequence[Widget],
    row_configs: Sequence[RowConfig],
    row_index: int,
) -> tuple[int, int] | None:
    """First free column in ``row_index`` within the row's column count."""
    for col in range(columns_for_row(row_configs, row_index)):
        if not is_occupied(widgets, row_index, col):
            return row_index, col
    logger.debug("Row %d is full", row_index)
    return None


def can_delete_row(widgets: Sequence[Widget], row_index: int) -> bool:
    """A row can be deleted when no widget is anchored in it. Row 0 never can."""
    return row_index > 0 and not row_widgets(widgets, row_index)


def delete_row(
    widgets: Sequence[Widget],
    row_configs: Sequence[RowConfig],
    row_index: int,
) -> list[RowConfig]:
    """Return configs without ``row_index``; no-op if the row is not deletable."""
    if not can_delete_row(widgets, row_index):
        logger.debug("Row %d cannot be deleted", row_index)
        return list(row_configs)
    return [c for c in row_configs if c.row_index != row_index]


def add_row(
    widgets: Sequence[Widget],
    row_configs: Sequence[RowConfig],
) -> list[RowConfig]:
    """Append a row config at ``max_occupied_row + ROW_BUFFER_OFFSET``.

    The gap leaves one visible empty row before the new one, whether or not
    the rows in between are empty. No-op if that row is already configured.
    """
    new_index = max_occupied_row(widgets) + ROW_BUFFER_OFFSET
    if any(c.row_index == new_index for c in row_configs):
        return list(row_configs)
    return [*row_configs, RowConfig(row_index=new_index, columns=DEFAULT_ROW_COLUMNS)]
