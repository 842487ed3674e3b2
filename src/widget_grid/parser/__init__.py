"""Layout data model and layout-file reader."""

from widget_grid.parser.layout_file import dump_layout_json, parse_layout_json
from widget_grid.parser.model import (
    Bounds,
    Dashboard,
    Direction,
    DirectionFlags,
    Rect,
    RowConfig,
    Widget,
)

__all__ = [
    "Bounds",
    "Dashboard",
    "Direction",
    "DirectionFlags",
    "Rect",
    "RowConfig",
    "Widget",
    "dump_layout_json",
    "parse_layout_json",
]
