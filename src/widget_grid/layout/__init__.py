"""Grid layout engine: occupancy, legality queries and mutations."""

from widget_grid.layout.dimensions import dimensions
from widget_grid.layout.engine import (
    Operation,
    OperationKind,
    OperationResult,
    apply_operation,
    handle_drop,
)
from widget_grid.layout.mutations import (
    add_widget,
    expand_widget,
    move_widget,
    remove_widget,
    shrink_widget,
)
from widget_grid.layout.occupancy import is_occupied, occupant_at
from widget_grid.layout.placement import (
    can_move,
    expandable,
    first_free_cell,
    shrinkable,
)

__all__ = [
    "Operation",
    "OperationKind",
    "OperationResult",
    "add_widget",
    "apply_operation",
    "can_move",
    "dimensions",
    "expand_widget",
    "expandable",
    "first_free_cell",
    "handle_drop",
    "is_occupied",
    "move_widget",
    "occupant_at",
    "remove_widget",
    "shrink_widget",
    "shrinkable",
]
