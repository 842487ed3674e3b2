"""Occupancy queries over a widget collection.

Queries are linear scans; dashboards hold tens of widgets, not thousands.
``build_cell_map`` gives a sparse index for callers that ask about every
cell, such as the renderer.
"""

from __future__ import annotations

__all__ = ["build_cell_map", "is_occupied", "occupant_at"]

from collections.abc import Iterable

from widget_grid.layout.geometry import cells, contains
from widget_grid.parser.model import Widget


def is_occupied(
    widgets: Iterable[Widget],
    row: int,
    col: int,
    exclude_id: str | None = None,
) -> bool:
    """Return True if a widget other than ``exclude_id`` covers (row, col)."""
    return any(
        w.id != exclude_id and contains(w, row, col) for w in widgets
    )


def occupant_at(widgets: Iterable[Widget], row: int, col: int) -> Widget | None:
    """Return the widget covering (row, col), or None.

    With the non-overlap invariant holding there is at most one; if the
    collection is already inconsistent the first in collection order wins.
    """
    for w in widgets:
        if contains(w, row, col):
            return w
    return None


def build_cell_map(widgets: Iterable[Widget]) -> dict[tuple[int, int], Widget]:
    """Map every covered cell to its widget.

    Consistent with ``occupant_at``: on overlap the earlier widget keeps
    the cell.
    """
    cell_map: dict[tuple[int, int], Widget] = {}
    for w in widgets:
        for cell in cells(w):
            cell_map.setdefault(cell, w)
    return cell_map
