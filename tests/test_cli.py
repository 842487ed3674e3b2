"""Tests for the CLI entry points."""

import json
import shutil
from pathlib import Path

from click.testing import CliRunner

from widget_grid.cli import cli

FIXTURES = Path(__file__).resolve().parent / "fixtures"
DASHBOARD_JSON = FIXTURES / "dashboard.json"
OVERLAPPING_JSON = FIXTURES / "overlapping.json"
EMPTY_JSON = FIXTURES / "empty.json"


def _copy(tmp_path, src=DASHBOARD_JSON):
    dst = tmp_path / src.name
    shutil.copy(src, dst)
    return dst


def _widgets(path):
    return {w["id"]: w for w in json.loads(path.read_text())["widgets"]}


# --- render ---


def test_render_produces_svg(tmp_path):
    """render command produces an SVG file."""
    out = tmp_path / "output.svg"
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(DASHBOARD_JSON), "-o", str(out)])
    assert result.exit_code == 0, result.output
    assert "<svg" in out.read_text()


def test_render_default_output(tmp_path):
    """render command uses input stem + .svg when no -o given."""
    layout = _copy(tmp_path)
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(layout)])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "dashboard.svg").exists()


def test_render_rows_mode_light_theme(tmp_path):
    out = tmp_path / "rows.svg"
    runner = CliRunner()
    result = runner.invoke(
        cli, ["render", str(DASHBOARD_JSON), "-o", str(out),
              "--mode", "rows", "--theme", "light"]
    )
    assert result.exit_code == 0, result.output
    assert "rows mode" in result.output


def test_render_svg_ends_with_newline(tmp_path):
    out = tmp_path / "output.svg"
    runner = CliRunner()
    result = runner.invoke(cli, ["render", str(DASHBOARD_JSON), "-o", str(out)])
    assert result.exit_code == 0, result.output
    assert out.read_text().endswith("\n")


def test_render_min_cols_option(tmp_path):
    out = tmp_path / "wide.svg"
    runner = CliRunner()
    result = runner.invoke(
        cli, ["render", str(EMPTY_JSON), "-o", str(out), "--min-cols", "5"]
    )
    assert result.exit_code == 0, result.output
    assert "2x5 grid" in result.output


def test_render_nonexistent_file():
    runner = CliRunner()
    result = runner.invoke(cli, ["render", "/nonexistent/layout.json"])
    assert result.exit_code != 0


# --- validate / info ---


def test_validate_success():
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", str(DASHBOARD_JSON)])
    assert result.exit_code == 0
    assert "Valid: 3 widgets" in result.output


def test_validate_reports_overlap():
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", str(OVERLAPPING_JSON)])
    assert result.exit_code == 1
    assert "overlap" in result.output


def test_validate_parse_error(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("{not json")
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", str(bad)])
    assert result.exit_code == 1
    assert "Parse error" in result.output


def test_info_output():
    runner = CliRunner()
    result = runner.invoke(cli, ["info", str(DASHBOARD_JSON)])
    assert result.exit_code == 0, result.output
    assert "Title: Operations" in result.output
    assert "Grid: 3 rows x 3 cols" in result.output
    # widget-3 at (1,0) can grow right into (1,1) and down into (2,0)
    assert "widget-3 'Deploys': (1, 0) 1x1  expand: right, down  shrink: -" in result.output
    assert "First free cell: (1, 1)" in result.output
    assert "Row 1: 3 columns, locked" in result.output
    assert "Row 3: 3 columns, deletable" in result.output


def test_version():
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "version" in result.output.lower()


# --- apply ---


def test_apply_writes_accepted_operations(tmp_path):
    layout = _copy(tmp_path)
    runner = CliRunner()
    result = runner.invoke(
        cli, ["apply", str(layout), "expand:widget-3:right", "add", "shrink:widget-2:up"]
    )
    assert result.exit_code == 0, result.output
    assert "Applied 3/3 operations" in result.output
    widgets = _widgets(layout)
    assert widgets["widget-3"]["col_span"] == 2
    assert (widgets["widget-2"]["row"], widgets["widget-2"]["row_span"]) == (1, 1)
    assert widgets["widget-4"]["title"] == "Widget 4"


def test_apply_rejects_illegal_operations(tmp_path):
    layout = _copy(tmp_path)
    out = tmp_path / "out.json"
    runner = CliRunner()
    result = runner.invoke(
        cli, ["apply", str(layout), "-o", str(out),
              "expand:widget-1:right", "move:widget-3:0,0", "drop:widget-3:cell-2-2"]
    )
    assert result.exit_code == 0, result.output
    assert "rejected expand:widget-1:right" in result.output
    assert "rejected move:widget-3:0,0" in result.output
    assert "Applied 1/3 operations" in result.output
    assert (_widgets(out)["widget-3"]["row"], _widgets(out)["widget-3"]["col"]) == (2, 2)
    # Input left alone when -o is given
    assert _widgets(layout)["widget-3"]["row"] == 1


def test_apply_row_operations(tmp_path):
    layout = _copy(tmp_path)
    runner = CliRunner()
    result = runner.invoke(
        cli, ["apply", str(layout), "columns:1:4", "add-row", "delete-row:1", "row-add:1"]
    )
    assert result.exit_code == 0, result.output
    assert "rejected delete-row:1" in result.output
    rows = {r["row_index"]: r["columns"] for r in json.loads(layout.read_text())["rows"]}
    assert rows == {0: 3, 1: 4, 3: 3}
    added = _widgets(layout)["widget-4"]
    assert (added["row"], added["col"]) == (1, 1)


def test_apply_invalid_operation(tmp_path):
    layout = _copy(tmp_path)
    runner = CliRunner()
    result = runner.invoke(cli, ["apply", str(layout), "teleport:widget-1"])
    assert result.exit_code == 1
    assert "Invalid operation" in result.output


def test_apply_bad_direction(tmp_path):
    layout = _copy(tmp_path)
    runner = CliRunner()
    result = runner.invoke(cli, ["apply", str(layout), "expand:widget-1:sideways"])
    assert result.exit_code == 1


def test_verbose_flag(tmp_path):
    layout = _copy(tmp_path)
    runner = CliRunner()
    result = runner.invoke(cli, ["-v", "apply", str(layout), "remove:widget-1"])
    assert result.exit_code == 0, result.output
    assert "Applied 1/1 operations" in result.output
    assert "widget-1" not in _widgets(layout)


def test_apply_anchor_only_move(tmp_path):
    """Anchor-only validation ignores collisions past the anchor cell."""
    # widget-1 (1x2) at (1,1) would also cover (1,2), held by widget-2
    layout = _copy(tmp_path)
    runner = CliRunner()
    result = runner.invoke(cli, ["apply", str(layout), "move:widget-1:1,1"])
    assert "Applied 0/1 operations" in result.output

    result = runner.invoke(
        cli, ["apply", str(layout), "--anchor-only", "move:widget-1:1,1"]
    )
    assert result.exit_code == 0, result.output
    assert "Applied 1/1 operations" in result.output
    assert _widgets(layout)["widget-1"]["row"] == 1


def test_render_rejects_non_positive_min_cols(tmp_path):
    out = tmp_path / "bad.svg"
    runner = CliRunner()
    result = runner.invoke(
        cli, ["render", str(EMPTY_JSON), "-o", str(out), "--min-cols", "0"]
    )
    assert result.exit_code == 2
    assert not out.exists()
