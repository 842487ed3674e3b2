"""Mutation engine: apply one placement change to a widget collection.

Each function takes the whole collection and returns a new list; the input
is never modified. Unknown ids are no-ops that return an unchanged copy.

``expand_widget`` and ``move_widget`` do not re-check legality. Gate them
on ``placement.expandable`` / ``placement.can_move`` (or go through
``engine.apply_operation``), otherwise the result may overlap.
"""

from __future__ import annotations

__all__ = [
    "add_widget",
    "expand_widget",
    "move_widget",
    "next_widget_id",
    "remove_widget",
    "shrink_widget",
]

import logging
import re
from collections.abc import Callable, Sequence
from dataclasses import replace

from widget_grid.parser.model import Direction, Widget

logger = logging.getLogger(__name__)

_ID_SUFFIX_RE = re.compile(r"^widget-(\d+)$")


def next_widget_id(widgets: Sequence[Widget]) -> str:
    """Return an id of the form ``widget-<n>`` not used in ``widgets``."""
    n = len(widgets)
    for w in widgets:
        m = _ID_SUFFIX_RE.match(w.id)
        if m:
            n = max(n, int(m.group(1)))
    return f"widget-{n + 1}"


def _update(
    widgets: Sequence[Widget],
    widget_id: str,
    change: Callable[[Widget], Widget],
    action: str,
) -> list[Widget]:
    result = []
    found = False
    for w in widgets:
        if w.id == widget_id:
            found = True
            result.append(change(w))
        else:
            result.append(w)
    if not found:
        logger.debug("%s: no widget with id %r, nothing changed", action, widget_id)
    return result


def add_widget(
    widgets: Sequence[Widget],
    row: int,
    col: int,
    widget_id: str | None = None,
    title: str | None = None,
    content: str = "",
) -> list[Widget]:
    """Append a new 1x1 widget anchored at (row, col).

    Occupancy is not checked; pick the cell with ``first_free_cell``.
    """
    widget = Widget(
        id=widget_id if widget_id is not None else next_widget_id(widgets),
        title=title if title is not None else f"Widget {len(widgets) + 1}",
        content=content,
        row=row,
        col=col,
    )
    logger.debug("Adding %s at (%d, %d)", widget.id, row, col)
    return [*widgets, widget]


def remove_widget(widgets: Sequence[Widget], widget_id: str) -> list[Widget]:
    """Drop the widget with ``widget_id``; absent ids are a no-op."""
    return [w for w in widgets if w.id != widget_id]


def _expanded(widget: Widget, direction: Direction) -> Widget:
    if direction is Direction.RIGHT:
        return replace(widget, col_span=widget.col_span + 1)
    if direction is Direction.DOWN:
        return replace(widget, row_span=widget.row_span + 1)
    if direction is Direction.LEFT:
        return replace(widget, col=widget.col - 1, col_span=widget.col_span + 1)
    return replace(widget, row=widget.row - 1, row_span=widget.row_span + 1)


def _shrunk(widget: Widget, direction: Direction) -> Widget:
    # Left/up move the near edge in and keep the far edge fixed. At span 1
    # there is nothing to give up, so the widget stays where it is.
    if direction in (Direction.RIGHT, Direction.LEFT):
        if widget.col_span <= 1:
            return widget
        if direction is Direction.LEFT:
            return replace(widget, col=widget.col + 1, col_span=widget.col_span - 1)
        return replace(widget, col_span=widget.col_span - 1)
    if widget.row_span <= 1:
        return widget
    if direction is Direction.UP:
        return replace(widget, row=widget.row + 1, row_span=widget.row_span - 1)
    return replace(widget, row_span=widget.row_span - 1)


def expand_widget(
    widgets: Sequence[Widget],
    widget_id: str,
    direction: Direction | str,
) -> list[Widget]:
    """Grow the widget by one cell towards ``direction``.

    Right/down grow the span; left/up also move the anchor back by one.
    """
    d = Direction(direction)
    return _update(widgets, widget_id, lambda w: _expanded(w, d), "expand")


def shrink_widget(
    widgets: Sequence[Widget],
    widget_id: str,
    direction: Direction | str,
) -> list[Widget]:
    """Shrink the widget by one cell from ``direction``; spans floor at 1."""
    d = Direction(direction)
    return _update(widgets, widget_id, lambda w: _shrunk(w, d), "shrink")


def move_widget(
    widgets: Sequence[Widget],
    widget_id: str,
    new_row: int,
    new_col: int,
) -> list[Widget]:
    """Re-anchor the widget at (new_row, new_col), keeping its span."""
    return _update(
        widgets,
        widget_id,
        lambda w: replace(w, row=new_row, col=new_col),
        "move",
    )
