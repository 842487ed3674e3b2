"""Tests for the row-mode layout variant."""

import pytest

from widget_grid.layout.constants import DEFAULT_ROW_COLUMNS, ROW_BUFFER_OFFSET
from widget_grid.layout.rows import (
    RowSlot,
    add_row,
    can_delete_row,
    change_columns,
    columns_for_row,
    delete_row,
    first_free_cell_in_row,
    group_by_row,
    max_occupied_row,
    row_bounds,
    row_expandable,
    row_grid_height,
    row_slots,
    row_widgets,
    rows_to_show,
)
from widget_grid.parser.model import Bounds, RowConfig, Widget


def _w(wid, row, col, row_span=1, col_span=1):
    return Widget(id=wid, title=wid, row=row, col=col,
                  row_span=row_span, col_span=col_span)


# --- Bucketing ---


def test_row_widgets_by_anchor_equality():
    a, b, c = _w("a", 0, 0, row_span=2), _w("b", 1, 1), _w("c", 0, 2)
    assert row_widgets([a, b, c], 0) == [a, c]
    # a spans into row 1 but is anchored in row 0
    assert row_widgets([a, b, c], 1) == [b]


def test_group_by_row():
    a, b, c = _w("a", 0, 0), _w("b", 2, 0), _w("c", 0, 1)
    assert group_by_row([a, b, c]) == {0: [a, c], 2: [b]}


def test_max_occupied_row():
    assert max_occupied_row([]) == 0
    assert max_occupied_row([_w("a", 0, 0), _w("b", 4, 0)]) == 4


# --- Column configuration ---


def test_columns_default_for_unconfigured_row():
    assert columns_for_row([], 5) == DEFAULT_ROW_COLUMNS


def test_change_columns_updates_existing():
    configs = [RowConfig(0, 3), RowConfig(1, 3)]
    result = change_columns(configs, 1, 4)
    assert result == [RowConfig(0, 3), RowConfig(1, 4)]
    # Input untouched
    assert configs[1].columns == 3


def test_change_columns_creates_row_lazily():
    result = change_columns([RowConfig(0, 3)], 2, 1)
    assert columns_for_row(result, 2) == 1


@pytest.mark.parametrize("columns", [0, 5, -1])
def test_change_columns_rejects_unsupported_counts(columns):
    with pytest.raises(ValueError, match="unsupported column count"):
        change_columns([], 0, columns)


# --- Rows shown and bounds ---


def test_rows_to_show_keeps_trailing_row():
    assert rows_to_show([]) == [0, 1]
    assert rows_to_show([_w("a", 2, 0)]) == [0, 1, 2, 3]


def test_rows_to_show_includes_added_rows():
    widgets = [_w("a", 0, 0)]
    configs = add_row(widgets, [RowConfig(0, 3)])
    assert rows_to_show(widgets, configs) == [0, 1, 2]


def test_row_grid_height_has_floor():
    assert row_grid_height([]) == 3
    assert row_grid_height([_w("a", 4, 0)]) == 6


def test_row_bounds_use_row_columns():
    widgets = [_w("a", 0, 0)]
    configs = [RowConfig(0, 2)]
    assert row_bounds(widgets, configs, 0) == Bounds(rows=3, cols=2)
    assert row_bounds(widgets, configs, 1) == Bounds(rows=3, cols=DEFAULT_ROW_COLUMNS)


def test_row_expand_right_bounded_by_row_columns():
    a = _w("a", 0, 1)
    assert not row_expandable(a, [a], [RowConfig(0, 2)]).right
    assert row_expandable(a, [a], [RowConfig(0, 4)]).right


def test_row_expand_respects_occupancy():
    a, b = _w("a", 0, 0), _w("b", 0, 1)
    flags = row_expandable(a, [a, b], [RowConfig(0, 4)])
    assert not flags.right
    assert flags.down


# --- Slots ---


def test_row_slots_mix_widgets_and_empty():
    a = _w("a", 0, 1, col_span=2)
    slots = row_slots([a], [RowConfig(0, 4)], 0)
    assert slots == [
        RowSlot(row=0, col=0),
        RowSlot(row=0, col=1, widget=a),
        RowSlot(row=0, col=3),
    ]
    assert slots[0].is_empty and not slots[1].is_empty


def test_row_slots_ignore_other_rows():
    slots = row_slots([_w("a", 1, 0)], [], 0)
    assert all(s.is_empty for s in slots)
    assert len(slots) == DEFAULT_ROW_COLUMNS


def test_first_free_cell_in_row():
    widgets = [_w("a", 1, 0), _w("b", 1, 1)]
    assert first_free_cell_in_row(widgets, [], 1) == (1, 2)


def test_first_free_cell_in_row_sees_tall_widgets_from_above():
    widgets = [_w("tall", 0, 0, row_span=2)]
    assert first_free_cell_in_row(widgets, [], 1) == (1, 1)


def test_first_free_cell_in_full_row():
    widgets = [_w("a", 0, 0, col_span=2)]
    assert first_free_cell_in_row(widgets, [RowConfig(0, 2)], 0) is None


# --- Row deletion and addition ---


def test_row_with_widget_cannot_be_deleted():
    assert not can_delete_row([_w("a", 2, 0)], 2)


def test_empty_row_can_be_deleted():
    assert can_delete_row([_w("a", 0, 0)], 1)


def test_row_zero_never_deletable():
    assert not can_delete_row([], 0)
    assert not can_delete_row([_w("a", 0, 0)], 0)


def test_delete_row_removes_config():
    configs = [RowConfig(0, 3), RowConfig(2, 4)]
    assert delete_row([], configs, 2) == [RowConfig(0, 3)]


def test_delete_locked_row_is_noop():
    configs = [RowConfig(0, 3), RowConfig(2, 4)]
    assert delete_row([_w("a", 2, 0)], configs, 2) == configs
    assert delete_row([], configs, 0) == configs


def test_add_row_leaves_buffer_row():
    widgets = [_w("a", 0, 0), _w("b", 3, 0)]
    configs = add_row(widgets, [RowConfig(0, 3)])
    assert configs[-1] == RowConfig(3 + ROW_BUFFER_OFFSET, DEFAULT_ROW_COLUMNS)


def test_add_row_ignores_empty_intervening_rows():
    configs = add_row([_w("a", 1, 0)], [])
    assert configs == [RowConfig(3, DEFAULT_ROW_COLUMNS)]


def test_add_row_twice_is_noop():
    configs = add_row([], [])
    assert add_row([], configs) == configs
