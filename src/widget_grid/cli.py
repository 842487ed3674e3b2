"""CLI for widget-grid."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from widget_grid import __version__
from widget_grid.layout import (
    Operation,
    apply_operation,
    expandable,
    first_free_cell,
    handle_drop,
    shrinkable,
)
from widget_grid.layout.constants import MIN_COLS, MIN_GROWTH_ROWS
from widget_grid.layout.dimensions import dashboard_bounds
from widget_grid.layout.rows import (
    add_row,
    can_delete_row,
    change_columns,
    columns_for_row,
    delete_row,
    first_free_cell_in_row,
    rows_to_show,
)
from widget_grid.layout.validator import Severity, validate_layout
from widget_grid.parser import Dashboard, dump_layout_json, parse_layout_json
from widget_grid.render import render_svg
from widget_grid.render.constants import CELL_SIZE
from widget_grid.render.svg import RENDER_MODES
from widget_grid.themes import THEMES

logger = logging.getLogger(__name__)


def _load(input_file: Path) -> Dashboard:
    try:
        dashboard = parse_layout_json(input_file.read_text())
    except ValueError as e:
        click.echo(f"Parse error: {e}", err=True)
        raise SystemExit(1)
    logger.debug("Loaded %s: %d widgets, %d row configs", input_file,
                 len(dashboard.widgets), len(dashboard.row_configs))
    return dashboard


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Log engine decisions to stderr.")
def cli(verbose: bool) -> None:
    """widget-grid: lay out and rearrange dashboard widget tiles."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def info(input_file: Path) -> None:
    """Show the grid size and the legal moves for every widget."""
    dashboard = _load(input_file)
    bounds = dashboard_bounds(dashboard)

    click.echo(f"Title: {dashboard.title or '(none)'}")
    click.echo(f"Grid: {bounds.rows} rows x {bounds.cols} cols")
    click.echo(f"Widgets: {len(dashboard.widgets)}")
    for w in dashboard.widgets:
        grow = expandable(w, dashboard.widgets, bounds).allowed()
        shrink = shrinkable(w).allowed()
        click.echo(
            f"  {w.id} '{w.title}': ({w.row}, {w.col}) "
            f"{w.row_span}x{w.col_span}  "
            f"expand: {', '.join(d.value for d in grow) or '-'}  "
            f"shrink: {', '.join(d.value for d in shrink) or '-'}"
        )
    cell = first_free_cell(dashboard.widgets, bounds)
    click.echo(f"First free cell: {cell if cell is not None else '(grid full)'}")
    click.echo("Rows:")
    for row_index in rows_to_show(dashboard.widgets, dashboard.row_configs):
        deletable = "deletable" if can_delete_row(dashboard.widgets, row_index) else "locked"
        click.echo(
            f"  Row {row_index + 1}: "
            f"{columns_for_row(dashboard.row_configs, row_index)} columns, {deletable}"
        )


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def validate(input_file: Path) -> None:
    """Validate a layout file: no overlaps, sane anchors and spans."""
    dashboard = _load(input_file)
    violations = validate_layout(dashboard.widgets, dashboard.row_configs)
    errors = [v for v in violations if v.severity == Severity.ERROR]
    warnings = [v for v in violations if v.severity == Severity.WARNING]

    for v in warnings:
        click.echo(f"Warning: {v.message}", err=True)
    if errors:
        click.echo("Validation errors:", err=True)
        for v in errors:
            click.echo(f"  - {v.message}", err=True)
        raise SystemExit(1)

    bounds = dashboard_bounds(dashboard)
    click.echo(f"Valid: {len(dashboard.widgets)} widgets, "
               f"{bounds.rows}x{bounds.cols} grid, "
               f"{len(dashboard.row_configs)} configured rows")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output SVG file path. Defaults to <input>.svg")
@click.option("--theme", type=click.Choice(list(THEMES.keys())), default="dark",
              help="Visual theme (default: dark)")
@click.option("--mode", type=click.Choice(RENDER_MODES), default="grid",
              help="Grid or row presentation (default: grid)")
@click.option("--cell-size", type=float, default=CELL_SIZE,
              help=f"Cell size in pixels (default: {CELL_SIZE:g})")
@click.option("--min-cols", type=click.IntRange(min=1), default=None,
              help=f"Minimum grid columns (default: file setting or {MIN_COLS})")
@click.option("--min-rows", type=click.IntRange(min=1), default=None,
              help=f"Minimum grid rows (default: file setting or {MIN_GROWTH_ROWS})")
def render(
    input_file: Path,
    output: Path | None,
    theme: str,
    mode: str,
    cell_size: float,
    min_cols: int | None,
    min_rows: int | None,
) -> None:
    """Render a layout file to an SVG preview."""
    dashboard = _load(input_file)
    if min_cols is not None:
        dashboard.min_cols = min_cols
    if min_rows is not None:
        dashboard.min_growth_rows = min_rows

    svg = render_svg(dashboard, THEMES[theme], mode=mode, cell_size=cell_size)
    if not svg.endswith("\n"):
        svg += "\n"

    if output is None:
        output = input_file.with_suffix(".svg")

    output.write_text(svg)
    bounds = dashboard_bounds(dashboard)
    click.echo(f"Rendered {len(dashboard.widgets)} widgets "
               f"({bounds.rows}x{bounds.cols} grid, {mode} mode) -> {output}")


def _parse_cell(text: str) -> tuple[int, int]:
    try:
        row, col = (int(part) for part in text.split(","))
    except ValueError:
        raise ValueError(f"expected ROW,COL but got {text!r}") from None
    return row, col


def _run_operation(dashboard: Dashboard, op_text: str, footprint: bool) -> tuple[bool, str]:
    """Apply one operation string to ``dashboard`` in place.

    Returns (applied, message). Raises ValueError for a malformed operation.
    """
    name, _, arg = op_text.partition(":")
    bounds_kwargs = {}
    if dashboard.min_cols is not None:
        bounds_kwargs["min_cols"] = dashboard.min_cols
    if dashboard.min_growth_rows is not None:
        bounds_kwargs["min_growth_rows"] = dashboard.min_growth_rows

    if name == "add-row":
        before = len(dashboard.row_configs)
        dashboard.row_configs = add_row(dashboard.widgets, dashboard.row_configs)
        if len(dashboard.row_configs) == before:
            return False, "row already exists"
        return True, f"added row {dashboard.row_configs[-1].row_index + 1}"

    if name == "delete-row":
        row_index = int(arg)
        if not can_delete_row(dashboard.widgets, row_index):
            return False, f"row {row_index + 1} cannot be deleted"
        dashboard.row_configs = delete_row(dashboard.widgets, dashboard.row_configs, row_index)
        return True, f"deleted row {row_index + 1}"

    if name == "columns":
        row_text, _, columns_text = arg.partition(":")
        row_index, columns = int(row_text), int(columns_text)
        dashboard.row_configs = change_columns(dashboard.row_configs, row_index, columns)
        return True, f"row {row_index + 1} now has {columns} columns"

    if name == "row-add":
        row_index = int(arg)
        cell = first_free_cell_in_row(dashboard.widgets, dashboard.row_configs, row_index)
        if cell is None:
            return False, f"row {row_index + 1} is full"
        op = Operation.add(*cell)
    elif name == "add":
        op = Operation.add(*_parse_cell(arg)) if arg else Operation.add()
    elif name == "remove":
        op = Operation.remove(arg)
    elif name in ("expand", "shrink"):
        widget_id, _, direction = arg.rpartition(":")
        factory = Operation.expand if name == "expand" else Operation.shrink
        op = factory(widget_id, direction)
    elif name == "move":
        widget_id, _, cell_text = arg.rpartition(":")
        op = Operation.move(widget_id, *_parse_cell(cell_text))
    elif name == "drop":
        widget_id, _, target = arg.rpartition(":")
        result = handle_drop(dashboard.widgets, widget_id, target,
                             footprint=footprint, **bounds_kwargs)
        dashboard.widgets = result.widgets
        return result.applied, result.reason or f"dropped {widget_id} on {target}"
    else:
        raise ValueError(f"unknown operation {name!r}")

    result = apply_operation(dashboard.widgets, op, footprint=footprint, **bounds_kwargs)
    dashboard.widgets = result.widgets
    if not result.applied:
        return False, result.reason
    if result.added is not None:
        return True, f"added {result.added.id} at ({result.added.row}, {result.added.col})"
    return True, f"{name} {arg}"


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.argument("operations", nargs=-1, required=True)
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output layout file. Defaults to overwriting the input.")
@click.option("--anchor-only", is_flag=True,
              help="Validate moves on the anchor cell only, not the full footprint.")
def apply(
    input_file: Path,
    operations: tuple[str, ...],
    output: Path | None,
    anchor_only: bool,
) -> None:
    """Apply operations to a layout file, skipping illegal ones.

    \b
    Operations:
      add | add:ROW,COL | row-add:ROW
      remove:ID | expand:ID:DIR | shrink:ID:DIR
      move:ID:ROW,COL | drop:ID:cell-ROW-COL
      add-row | delete-row:ROW | columns:ROW:N
    DIR is one of right, down, left, up.
    """
    dashboard = _load(input_file)

    applied = 0
    for op_text in operations:
        try:
            ok, message = _run_operation(dashboard, op_text, footprint=not anchor_only)
        except ValueError as e:
            click.echo(f"Invalid operation '{op_text}': {e}", err=True)
            raise SystemExit(1)
        if ok:
            applied += 1
            click.echo(f"  ok       {op_text}: {message}")
        else:
            click.echo(f"  rejected {op_text}: {message}")

    if output is None:
        output = input_file
    output.write_text(dump_layout_json(dashboard))
    click.echo(f"Applied {applied}/{len(operations)} operations -> {output}")
