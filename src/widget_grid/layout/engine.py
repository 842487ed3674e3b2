"""Layout coordinator: legality check followed by mutation.

The primitives in mutations.py trust their caller. ``apply_operation`` and
``handle_drop`` run the matching placement query first and only mutate
when it passes, so every accepted operation keeps widgets non-overlapping.
Rejections are reported through ``OperationResult`` rather than raised.
"""

from __future__ import annotations

__all__ = [
    "Operation",
    "OperationKind",
    "OperationResult",
    "apply_operation",
    "handle_drop",
    "parse_drop_target",
]

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from widget_grid.layout.constants import (
    DROP_TARGET_PREFIX,
    MIN_COLS,
    MIN_GROWTH_ROWS,
)
from widget_grid.layout.dimensions import dimensions
from widget_grid.layout.mutations import (
    add_widget,
    expand_widget,
    move_widget,
    remove_widget,
    shrink_widget,
)
from widget_grid.layout.occupancy import is_occupied
from widget_grid.layout.placement import (
    can_move,
    expandable,
    first_free_cell,
    shrinkable,
)
from widget_grid.parser.model import Bounds, Direction, Widget

logger = logging.getLogger(__name__)


class OperationKind(Enum):
    ADD = "add"
    REMOVE = "remove"
    EXPAND = "expand"
    SHRINK = "shrink"
    MOVE = "move"


@dataclass(frozen=True)
class Operation:
    """A requested change to the widget collection.

    ``add`` uses ``row``/``col`` when both are given, otherwise the first
    free cell. ``expand``/``shrink`` need ``direction``; ``move`` needs
    ``row`` and ``col``.
    """

    kind: OperationKind
    widget_id: str | None = None
    row: int | None = None
    col: int | None = None
    direction: Direction | None = None
    title: str | None = None

    @classmethod
    def add(cls, row: int | None = None, col: int | None = None,
            title: str | None = None) -> Operation:
        return cls(OperationKind.ADD, row=row, col=col, title=title)

    @classmethod
    def remove(cls, widget_id: str) -> Operation:
        return cls(OperationKind.REMOVE, widget_id=widget_id)

    @classmethod
    def expand(cls, widget_id: str, direction: Direction | str) -> Operation:
        return cls(OperationKind.EXPAND, widget_id=widget_id,
                   direction=Direction(direction))

    @classmethod
    def shrink(cls, widget_id: str, direction: Direction | str) -> Operation:
        return cls(OperationKind.SHRINK, widget_id=widget_id,
                   direction=Direction(direction))

    @classmethod
    def move(cls, widget_id: str, row: int, col: int) -> Operation:
        return cls(OperationKind.MOVE, widget_id=widget_id, row=row, col=col)


@dataclass
class OperationResult:
    """Outcome of a gated operation.

    ``widgets`` is always a usable collection: the mutated one when
    ``applied`` is True, an unchanged copy of the input otherwise.
    """

    widgets: list[Widget]
    applied: bool
    bounds: Bounds
    reason: str = ""
    added: Widget | None = field(default=None, compare=False)


def _find(widgets: Sequence[Widget], widget_id: str | None) -> Widget | None:
    for w in widgets:
        if w.id == widget_id:
            return w
    return None


def apply_operation(
    widgets: Sequence[Widget],
    op: Operation,
    min_cols: int = MIN_COLS,
    min_growth_rows: int = MIN_GROWTH_ROWS,
    footprint: bool = True,
) -> OperationResult:
    """Check ``op`` against the current layout and apply it if legal.

    Raises ValueError only for a malformed operation (missing direction or
    coordinates); illegal but well-formed operations are rejected.
    """
    bounds = dimensions(widgets, min_cols, min_growth_rows)

    def rejected(reason: str) -> OperationResult:
        logger.debug("Rejected %s: %s", op.kind.value, reason)
        return OperationResult(list(widgets), False, bounds, reason)

    def accepted(new_widgets: list[Widget], added: Widget | None = None) -> OperationResult:
        new_bounds = dimensions(new_widgets, min_cols, min_growth_rows)
        return OperationResult(new_widgets, True, new_bounds, added=added)

    if op.kind is OperationKind.ADD:
        if op.row is None or op.col is None:
            cell = first_free_cell(widgets, bounds)
            if cell is None:
                return rejected("grid is full")
        else:
            cell = (op.row, op.col)
            if not (0 <= op.row < bounds.rows and 0 <= op.col < bounds.cols):
                return rejected(f"cell {cell} is outside the grid")
            if is_occupied(widgets, *cell):
                return rejected(f"cell {cell} is occupied")
        new_widgets = add_widget(widgets, cell[0], cell[1], title=op.title)
        return accepted(new_widgets, added=new_widgets[-1])

    widget = _find(widgets, op.widget_id)
    if widget is None:
        return rejected(f"unknown widget {op.widget_id!r}")

    if op.kind is OperationKind.REMOVE:
        return accepted(remove_widget(widgets, widget.id))

    if op.kind in (OperationKind.EXPAND, OperationKind.SHRINK):
        if op.direction is None:
            raise ValueError(f"{op.kind.value} operation needs a direction")
        if op.kind is OperationKind.EXPAND:
            if not expandable(widget, widgets, bounds)[op.direction]:
                return rejected(f"{widget.id} cannot expand {op.direction.value}")
            return accepted(expand_widget(widgets, widget.id, op.direction))
        if not shrinkable(widget)[op.direction]:
            return rejected(f"{widget.id} cannot shrink {op.direction.value}")
        return accepted(shrink_widget(widgets, widget.id, op.direction))

    if op.kind is OperationKind.MOVE:
        if op.row is None or op.col is None:
            raise ValueError("move operation needs a row and column")
        if not can_move(widget, widgets, bounds, op.row, op.col, footprint=footprint):
            return rejected(f"{widget.id} cannot move to ({op.row}, {op.col})")
        return accepted(move_widget(widgets, widget.id, op.row, op.col))

    raise ValueError(f"Unknown operation kind: {op.kind!r}")


def parse_drop_target(target_id: str) -> tuple[int, int] | None:
    """Parse a ``cell-<row>-<col>`` drop-target id into (row, col).

    Returns None for ids of any other shape.
    """
    parts = target_id.split("-")
    if len(parts) != 3 or parts[0] != DROP_TARGET_PREFIX:
        return None
    try:
        return int(parts[1]), int(parts[2])
    except ValueError:
        return None


def handle_drop(
    widgets: Sequence[Widget],
    dragged_id: str,
    target: str | tuple[int, int] | None,
    min_cols: int = MIN_COLS,
    min_growth_rows: int = MIN_GROWTH_ROWS,
    footprint: bool = True,
) -> OperationResult:
    """Turn the end of a drag gesture into a move, or a no-op.

    ``target`` is the cell the drag ended over, either as (row, col) or as
    a ``cell-<row>-<col>`` id. A None target (dropped outside the grid)
    or an unparseable id changes nothing.
    """
    if isinstance(target, str):
        target = parse_drop_target(target)
    if target is None:
        logger.debug("Drop of %r had no grid destination", dragged_id)
        bounds = dimensions(widgets, min_cols, min_growth_rows)
        return OperationResult(list(widgets), False, bounds, "no destination")
    row, col = target
    return apply_operation(
        widgets,
        Operation.move(dragged_id, row, col),
        min_cols=min_cols,
        min_growth_rows=min_growth_rows,
        footprint=footprint,
    )
