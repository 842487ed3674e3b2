"""Light theme."""

from widget_grid.render.style import Theme

LIGHT_THEME = Theme(
    name="light",
    background_color="none",
    widget_fill="#ffffff",
    widget_stroke="#c7cdd1",
    widget_stroke_width=1.0,
    widget_title_color="#2d3b45",
    widget_content_color="#6b7780",
    widget_font_size=15.0,
    font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    title_color="#111111",
    title_font_size=26.0,
    empty_fill="#fafafa",
    empty_stroke="#c7cdd1",
    empty_label_color="#6b7780",
    row_band_fill="rgba(0, 0, 0, 0.02)",
    row_band_stroke="rgba(0, 0, 0, 0.1)",
    row_label_color="#2d3b45",
    row_label_font_size=14.0,
)
