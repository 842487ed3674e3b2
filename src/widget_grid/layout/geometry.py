"""Span geometry: containment and overlap of grid rectangles.

All intervals are half-open, so ``[row, row + row_span)`` touches but does
not overlap ``[row + row_span, ...)``.
"""

from __future__ import annotations

__all__ = ["cells", "contains", "overlaps"]

from collections.abc import Iterator

from widget_grid.parser.model import Rect, Widget


def _as_rect(shape: Rect | Widget) -> Rect:
    return shape.rect if isinstance(shape, Widget) else shape


def contains(shape: Rect | Widget, row: int, col: int) -> bool:
    """Return True if cell (row, col) lies inside the rectangle."""
    r = _as_rect(shape)
    return r.row <= row < r.bottom and r.col <= col < r.right


def overlaps(a: Rect | Widget, b: Rect | Widget) -> bool:
    """Return True if both the row and column intervals intersect."""
    ra, rb = _as_rect(a), _as_rect(b)
    return (
        ra.row < rb.bottom
        and rb.row < ra.bottom
        and ra.col < rb.right
        and rb.col < ra.right
    )


def cells(shape: Rect | Widget) -> Iterator[tuple[int, int]]:
    """Yield every (row, col) covered by the rectangle in row-major order."""
    r = _as_rect(shape)
    for row in range(r.row, r.bottom):
        for col in range(r.col, r.right):
            yield row, col
