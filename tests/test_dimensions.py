"""Tests for grid dimension calculation."""

from widget_grid.layout.dimensions import dashboard_bounds, dimensions
from widget_grid.layout.mutations import expand_widget, remove_widget
from widget_grid.parser.model import Bounds, Dashboard, Widget


def test_empty_collection_uses_minimums():
    assert dimensions([]) == Bounds(rows=2, cols=3)
    assert dimensions([], min_cols=5, min_growth_rows=4) == Bounds(rows=4, cols=5)


def test_single_widget_keeps_trailing_row():
    assert dimensions([Widget(id="1")]) == Bounds(rows=2, cols=3)


def test_rows_grow_past_lowest_widget():
    widgets = [Widget(id="1", row=3, row_span=2)]
    # Bottom edge at 5, plus one trailing empty row
    assert dimensions(widgets).rows == 6


def test_cols_follow_widest_widget():
    widgets = [Widget(id="1", col=2, col_span=3)]
    assert dimensions(widgets).cols == 5


def test_cols_never_below_minimum():
    widgets = [Widget(id="1", col=0, col_span=1)]
    assert dimensions(widgets, min_cols=4).cols == 4


def test_shrinks_implicitly_after_remove():
    widgets = [Widget(id="1"), Widget(id="2", row=4, col=5)]
    before = dimensions(widgets)
    after = dimensions(remove_widget(widgets, "2"))
    assert before == Bounds(rows=6, cols=6)
    assert after == Bounds(rows=2, cols=3)


def test_expand_never_decreases():
    widgets = [Widget(id="1", col=2)]
    before = dimensions(widgets)
    after = dimensions(expand_widget(widgets, "1", "right"))
    assert after.rows >= before.rows
    assert after.cols >= before.cols


def test_dashboard_bounds_uses_settings():
    dashboard = Dashboard(widgets=[Widget(id="1")], min_cols=4, min_growth_rows=3)
    assert dashboard_bounds(dashboard) == Bounds(rows=3, cols=4)


def test_dashboard_bounds_defaults():
    assert dashboard_bounds(Dashboard()) == Bounds(rows=2, cols=3)
