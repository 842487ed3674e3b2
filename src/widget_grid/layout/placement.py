"""Placement advisor: which resizes and moves are legal.

Every function here is a read-only legality query. The matching mutations
in mutations.py apply changes unconditionally, so callers ask here first.
"""

from __future__ import annotations

__all__ = [
    "can_move",
    "expandable",
    "expansion_strip",
    "first_free_cell",
    "shrinkable",
]

import logging
from collections.abc import Sequence

from widget_grid.layout.geometry import cells
from widget_grid.layout.occupancy import build_cell_map, is_occupied
from widget_grid.parser.model import (
    Bounds,
    Direction,
    DirectionFlags,
    Rect,
    Widget,
)

logger = logging.getLogger(__name__)


def expansion_strip(widget: Widget, direction: Direction) -> list[tuple[int, int]]:
    """Return the cells a one-step expansion in ``direction`` would add.

    The strip is the single column (left/right) or row (up/down) adjacent
    to the widget's current edge.
    """
    if direction is Direction.RIGHT:
        col = widget.col + widget.col_span
        return [(widget.row + i, col) for i in range(widget.row_span)]
    if direction is Direction.LEFT:
        col = widget.col - 1
        return [(widget.row + i, col) for i in range(widget.row_span)]
    if direction is Direction.DOWN:
        row = widget.row + widget.row_span
        return [(row, widget.col + i) for i in range(widget.col_span)]
    row = widget.row - 1
    return [(row, widget.col + i) for i in range(widget.col_span)]


def _within_bounds(widget: Widget, direction: Direction, bounds: Bounds) -> bool:
    if direction is Direction.RIGHT:
        return widget.col + widget.col_span < bounds.cols
    if direction is Direction.DOWN:
        return widget.row + widget.row_span < bounds.rows
    if direction is Direction.LEFT:
        return widget.col > 0
    return widget.row > 0


def _can_expand(
    widget: Widget,
    widgets: Sequence[Widget],
    direction: Direction,
    bounds: Bounds,
) -> bool:
    if not _within_bounds(widget, direction, bounds):
        return False
    return not any(
        is_occupied(widgets, r, c, exclude_id=widget.id)
        for r, c in expansion_strip(widget, direction)
    )


def expandable(
    widget: Widget,
    widgets: Sequence[Widget],
    bounds: Bounds,
) -> DirectionFlags:
    """Return which one-cell expansions of ``widget`` are legal.

    A direction is legal when the grown widget stays inside ``bounds``
    and every newly covered cell is free of other widgets.
    """
    return DirectionFlags(
        right=_can_expand(widget, widgets, Direction.RIGHT, bounds),
        down=_can_expand(widget, widgets, Direction.DOWN, bounds),
        left=_can_expand(widget, widgets, Direction.LEFT, bounds),
        up=_can_expand(widget, widgets, Direction.UP, bounds),
    )


def shrinkable(widget: Widget) -> DirectionFlags:
    """Return which shrinks would actually change ``widget``.

    Horizontal shrinks need ``col_span > 1``, vertical ones
    ``row_span > 1``.
    """
    wide = widget.col_span > 1
    tall = widget.row_span > 1
    return DirectionFlags(right=wide, down=tall, left=wide, up=tall)


def first_free_cell(
    widgets: Sequence[Widget],
    bounds: Bounds,
) -> tuple[int, int] | None:
    """Find the first unoccupied cell scanning rows, then columns.

    Returns None when every cell inside ``bounds`` is covered.
    """
    occupied = build_cell_map(widgets)
    for row in range(bounds.rows):
        for col in range(bounds.cols):
            if (row, col) not in occupied:
                return row, col
    logger.debug("No free cell in %dx%d grid", bounds.rows, bounds.cols)
    return None


def can_move(
    widget: Widget,
    widgets: Sequence[Widget],
    bounds: Bounds,
    row: int,
    col: int,
    footprint: bool = True,
) -> bool:
    """Check whether ``widget`` may be re-anchored at (row, col).

    The anchor must lie inside ``bounds``. With ``footprint`` set, the
    widget's right edge must also stay within ``bounds.cols`` and every
    cell it would cover at the destination must be free of other widgets;
    without it only the anchor cell is checked, which lets a multi-cell
    widget land across a third widget or past the right edge.
    """
    if not (0 <= row < bounds.rows and 0 <= col < bounds.cols):
        return False
    if not footprint:
        return not is_occupied(widgets, row, col, exclude_id=widget.id)
    if col + widget.col_span > bounds.cols:
        return False
    target = Rect(row, col, widget.row_span, widget.col_span)
    return not any(
        is_occupied(widgets, r, c, exclude_id=widget.id) for r, c in cells(target)
    )
