"""Data model for widget grid layouts."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Direction(Enum):
    """Direction in which a widget can be expanded or shrunk."""

    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"
    UP = "up"


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle on the integer grid.

    Covers the half-open cell ranges ``[row, row + row_span)`` by
    ``[col, col + col_span)``.
    """

    row: int
    col: int
    row_span: int = 1
    col_span: int = 1

    @property
    def bottom(self) -> int:
        """Row index one past the last covered row."""
        return self.row + self.row_span

    @property
    def right(self) -> int:
        """Column index one past the last covered column."""
        return self.col + self.col_span


@dataclass(frozen=True)
class Widget:
    """A tile placed on the grid.

    The engine never changes ``id``, ``title`` or ``content``; placement
    changes produce a new Widget via ``dataclasses.replace``.
    """

    id: str
    title: str = ""
    content: str = ""
    row: int = 0
    col: int = 0
    row_span: int = 1
    col_span: int = 1

    @property
    def rect(self) -> Rect:
        return Rect(self.row, self.col, self.row_span, self.col_span)


@dataclass(frozen=True)
class Bounds:
    """Grid extent in cells. Always derived, never stored on the layout."""

    rows: int
    cols: int


@dataclass(frozen=True)
class DirectionFlags:
    """Per-direction legality answer from the placement advisor."""

    right: bool = False
    down: bool = False
    left: bool = False
    up: bool = False

    def __getitem__(self, direction: Direction | str) -> bool:
        return getattr(self, Direction(direction).value)

    def any(self) -> bool:
        return self.right or self.down or self.left or self.up

    def allowed(self) -> list[Direction]:
        """Return legal directions in right, down, left, up order."""
        return [d for d in Direction if self[d]]


@dataclass
class RowConfig:
    """Column setting for one row in row mode."""

    row_index: int
    columns: int


@dataclass
class Dashboard:
    """A complete layout as read from a layout file."""

    title: str = ""
    widgets: list[Widget] = field(default_factory=list)
    row_configs: list[RowConfig] = field(default_factory=list)
    # Dimension calculator overrides from the file's "settings" object;
    # None means the engine default.
    min_cols: int | None = None
    min_growth_rows: int | None = None

    def widget(self, widget_id: str) -> Widget | None:
        """Return the widget with the given id, or None."""
        for w in self.widgets:
            if w.id == widget_id:
                return w
        return None
