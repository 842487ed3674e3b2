"""SVG preview of a dashboard layout using drawsvg."""

from __future__ import annotations

import drawsvg as draw

from widget_grid.layout.dimensions import dashboard_bounds
from widget_grid.layout.occupancy import build_cell_map
from widget_grid.layout.rows import columns_for_row, row_slots, rows_to_show
from widget_grid.parser.model import Dashboard, Widget
from widget_grid.render.constants import (
    CANVAS_PADDING,
    CELL_GAP,
    CELL_RADIUS,
    CELL_SIZE,
    CONTENT_LINE_GAP,
    ROW_BAND_GAP,
    ROW_BAND_PADDING,
    ROW_LABEL_HEIGHT,
    TITLE_HEIGHT,
    WIDGET_TEXT_INSET,
)
from widget_grid.render.style import Theme

RENDER_MODES = ("grid", "rows")


def render_svg(
    dashboard: Dashboard,
    theme: Theme,
    mode: str = "grid",
    cell_size: float = CELL_SIZE,
    padding: float = CANVAS_PADDING,
) -> str:
    """Render a dashboard layout to an SVG string.

    ``mode`` selects the presentation: ``grid`` draws the implicit 2-D
    grid, ``rows`` draws one band per row with that row's column count.
    """
    if mode not in RENDER_MODES:
        raise ValueError(f"Unknown render mode {mode!r}; expected one of {RENDER_MODES}")

    top = padding + (TITLE_HEIGHT if dashboard.title else 0.0)
    if mode == "grid":
        content_w, content_h = _grid_extent(dashboard, cell_size)
    else:
        content_w, content_h = _rows_extent(dashboard, cell_size)

    svg_width = int(content_w + padding * 2)
    svg_height = int(top + content_h + padding)
    d = draw.Drawing(svg_width, svg_height)
    d.append(draw.Rectangle(0, 0, svg_width, svg_height, fill=theme.background_color))

    if dashboard.title:
        d.append(draw.Text(
            dashboard.title,
            theme.title_font_size,
            padding, padding + theme.title_font_size,
            fill=theme.title_color,
            font_family=theme.font_family,
            font_weight="bold",
        ))

    if mode == "grid":
        _render_grid(d, dashboard, theme, padding, top, cell_size)
    else:
        _render_rows(d, dashboard, theme, padding, top, cell_size)

    return d.as_svg()


def _span_length(span: int, cell_size: float) -> float:
    return span * cell_size + (span - 1) * CELL_GAP


def _grid_extent(dashboard: Dashboard, cell_size: float) -> tuple[float, float]:
    bounds = dashboard_bounds(dashboard)
    return _span_length(bounds.cols, cell_size), _span_length(bounds.rows, cell_size)


def _render_grid(
    d: draw.Drawing,
    dashboard: Dashboard,
    theme: Theme,
    x0: float,
    y0: float,
    cell_size: float,
) -> None:
    """Draw empty cells, then each widget across its span."""
    bounds = dashboard_bounds(dashboard)
    occupied = build_cell_map(dashboard.widgets)
    pitch = cell_size + CELL_GAP

    for row in range(bounds.rows):
        for col in range(bounds.cols):
            if (row, col) in occupied:
                continue
            _render_empty_slot(d, theme, x0 + col * pitch, y0 + row * pitch,
                               cell_size, cell_size)

    for widget in dashboard.widgets:
        _render_widget(
            d, widget, theme,
            x0 + widget.col * pitch,
            y0 + widget.row * pitch,
            _span_length(widget.col_span, cell_size),
            _span_length(widget.row_span, cell_size),
        )


def _band_height(cell_size: float) -> float:
    return ROW_LABEL_HEIGHT + cell_size + ROW_BAND_PADDING * 2


def _rows_extent(dashboard: Dashboard, cell_size: float) -> tuple[float, float]:
    shown = rows_to_show(dashboard.widgets, dashboard.row_configs)
    widest = max(columns_for_row(dashboard.row_configs, r) for r in shown)
    width = _span_length(widest, cell_size) + ROW_BAND_PADDING * 2
    height = len(shown) * (_band_height(cell_size) + ROW_BAND_GAP) - ROW_BAND_GAP
    return width, height


def _render_rows(
    d: draw.Drawing,
    dashboard: Dashboard,
    theme: Theme,
    x0: float,
    y0: float,
    cell_size: float,
) -> None:
    """Draw one labelled band per shown row, slots sized to its column count."""
    band_w, _ = _rows_extent(dashboard, cell_size)
    inner_w = band_w - ROW_BAND_PADDING * 2
    band_h = _band_height(cell_size)

    for i, row_index in enumerate(rows_to_show(dashboard.widgets, dashboard.row_configs)):
        by = y0 + i * (band_h + ROW_BAND_GAP)
        d.append(draw.Rectangle(
            x0, by, band_w, band_h,
            rx=CELL_RADIUS, ry=CELL_RADIUS,
            fill=theme.row_band_fill,
            stroke=theme.row_band_stroke,
            stroke_width=1.0,
        ))
        d.append(draw.Text(
            f"Row {row_index + 1}",
            theme.row_label_font_size,
            x0 + ROW_BAND_PADDING, by + ROW_BAND_PADDING + theme.row_label_font_size,
            fill=theme.row_label_color,
            font_family=theme.font_family,
            font_weight="bold",
        ))

        columns = columns_for_row(dashboard.row_configs, row_index)
        slot_w = (inner_w - (columns - 1) * CELL_GAP) / columns
        sy = by + ROW_BAND_PADDING + ROW_LABEL_HEIGHT
        for slot in row_slots(dashboard.widgets, dashboard.row_configs, row_index):
            sx = x0 + ROW_BAND_PADDING + slot.col * (slot_w + CELL_GAP)
            if slot.widget is None:
                _render_empty_slot(d, theme, sx, sy, slot_w, cell_size)
                continue
            # Clip spans that run past the row's configured width
            span = min(slot.widget.col_span, columns - slot.col)
            w = span * slot_w + (span - 1) * CELL_GAP
            _render_widget(d, slot.widget, theme, sx, sy, w, cell_size)


def _render_empty_slot(
    d: draw.Drawing,
    theme: Theme,
    x: float,
    y: float,
    w: float,
    h: float,
) -> None:
    d.append(draw.Rectangle(
        x, y, w, h,
        rx=CELL_RADIUS, ry=CELL_RADIUS,
        fill=theme.empty_fill,
        stroke=theme.empty_stroke,
        stroke_width=1.5,
        stroke_dasharray=theme.empty_dasharray,
    ))
    d.append(draw.Text(
        theme.empty_label,
        theme.widget_font_size * 0.85,
        x + w / 2, y + h / 2,
        fill=theme.empty_label_color,
        font_family=theme.font_family,
        text_anchor="middle",
        dominant_baseline="central",
    ))


def _render_widget(
    d: draw.Drawing,
    widget: Widget,
    theme: Theme,
    x: float,
    y: float,
    w: float,
    h: float,
) -> None:
    d.append(draw.Rectangle(
        x, y, w, h,
        rx=CELL_RADIUS, ry=CELL_RADIUS,
        fill=theme.widget_fill,
        stroke=theme.widget_stroke,
        stroke_width=theme.widget_stroke_width,
    ))
    title_y = y + WIDGET_TEXT_INSET + theme.widget_font_size
    d.append(draw.Text(
        widget.title or widget.id,
        theme.widget_font_size,
        x + WIDGET_TEXT_INSET, title_y,
        fill=theme.widget_title_color,
        font_family=theme.font_family,
        font_weight="bold",
    ))
    if widget.content:
        d.append(draw.Text(
            widget.content,
            theme.widget_font_size * 0.85,
            x + WIDGET_TEXT_INSET, title_y + CONTENT_LINE_GAP + theme.widget_font_size,
            fill=theme.widget_content_color,
            font_family=theme.font_family,
        ))
