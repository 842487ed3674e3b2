"""Reader and writer for JSON layout files.

A layout file holds a title, optional dimension settings, row configs
for row mode and the widget list::

    {
      "title": "Ops dashboard",
      "settings": {"min_cols": 3, "min_growth_rows": 2},
      "rows": [{"row_index": 0, "columns": 3}],
      "widgets": [
        {"id": "1", "title": "Widget 1", "row": 0, "col": 0,
         "row_span": 1, "col_span": 1}
      ]
    }

camelCase keys (``rowSpan``, ``colSpan``, ``rowIndex``) are accepted as
well. Only structure is checked here; overlap and row-width problems are
reported by ``layout.validator``.
"""

from __future__ import annotations

import json

from widget_grid.parser.model import Dashboard, RowConfig, Widget

_ALIASES = {
    "rowSpan": "row_span",
    "colSpan": "col_span",
    "rowIndex": "row_index",
    "minCols": "min_cols",
    "minGrowthRows": "min_growth_rows",
}


def _normalize(obj: dict) -> dict:
    return {_ALIASES.get(k, k): v for k, v in obj.items()}


def _int_field(obj: dict, key: str, where: str, default: int | None = None,
               minimum: int = 0) -> int:
    value = obj.get(key, default)
    if value is None:
        raise ValueError(f"{where}: missing required field '{key}'")
    # bool is an int subclass; true/false in a layout file is a mistake
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{where}: '{key}' must be an integer, got {value!r}")
    if value < minimum:
        raise ValueError(f"{where}: '{key}' must be >= {minimum}, got {value}")
    return value


def _parse_widget(raw: object, index: int) -> Widget:
    where = f"widgets[{index}]"
    if not isinstance(raw, dict):
        raise ValueError(f"{where}: expected an object, got {type(raw).__name__}")
    obj = _normalize(raw)
    if "id" not in obj:
        raise ValueError(f"{where}: missing required field 'id'")
    return Widget(
        id=str(obj["id"]),
        title=str(obj.get("title", "")),
        content=str(obj.get("content", "")),
        row=_int_field(obj, "row", where),
        col=_int_field(obj, "col", where),
        row_span=_int_field(obj, "row_span", where, default=1, minimum=1),
        col_span=_int_field(obj, "col_span", where, default=1, minimum=1),
    )


def _parse_row_config(raw: object, index: int) -> RowConfig:
    where = f"rows[{index}]"
    if not isinstance(raw, dict):
        raise ValueError(f"{where}: expected an object, got {type(raw).__name__}")
    obj = _normalize(raw)
    return RowConfig(
        row_index=_int_field(obj, "row_index", where),
        columns=_int_field(obj, "columns", where, minimum=1),
    )


def parse_layout_json(text: str) -> Dashboard:
    """Parse a JSON layout file into a Dashboard.

    Raises ValueError with the offending location on malformed input.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Layout file is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ValueError("Layout file must contain a JSON object at the top level")

    dashboard = Dashboard(title=str(data.get("title", "")))

    settings = _normalize(data.get("settings") or {})
    if "min_cols" in settings:
        dashboard.min_cols = _int_field(settings, "min_cols", "settings", minimum=1)
    if "min_growth_rows" in settings:
        dashboard.min_growth_rows = _int_field(
            settings, "min_growth_rows", "settings", minimum=1
        )

    raw_widgets = data.get("widgets", [])
    if not isinstance(raw_widgets, list):
        raise ValueError("'widgets' must be a list")
    seen: set[str] = set()
    for i, raw in enumerate(raw_widgets):
        widget = _parse_widget(raw, i)
        if widget.id in seen:
            raise ValueError(f"widgets[{i}]: duplicate widget id '{widget.id}'")
        seen.add(widget.id)
        dashboard.widgets.append(widget)

    raw_rows = data.get("rows", [])
    if not isinstance(raw_rows, list):
        raise ValueError("'rows' must be a list")
    for i, raw in enumerate(raw_rows):
        dashboard.row_configs.append(_parse_row_config(raw, i))

    return dashboard


def dump_layout_json(dashboard: Dashboard) -> str:
    """Serialize a Dashboard back to layout-file JSON (trailing newline)."""
    data: dict = {"title": dashboard.title}
    settings = {}
    if dashboard.min_cols is not None:
        settings["min_cols"] = dashboard.min_cols
    if dashboard.min_growth_rows is not None:
        settings["min_growth_rows"] = dashboard.min_growth_rows
    if settings:
        data["settings"] = settings
    data["rows"] = [
        {"row_index": c.row_index, "columns": c.columns}
        for c in sorted(dashboard.row_configs, key=lambda c: c.row_index)
    ]
    data["widgets"] = [
        {
            "id": w.id,
            "title": w.title,
            "content": w.content,
            "row": w.row,
            "col": w.col,
            "row_span": w.row_span,
            "col_span": w.col_span,
        }
        for w in dashboard.widgets
    ]
    return json.dumps(data, indent=2) + "\n"
