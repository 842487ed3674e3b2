"""Dark grey theme."""

from widget_grid.render.style import Theme

DARK_THEME = Theme(
    name="dark",
    background_color="#2b2b2b",
    widget_fill="#3a3f44",
    widget_stroke="#0084d1",
    widget_stroke_width=1.5,
    widget_title_color="#ffffff",
    widget_content_color="#c0c0c0",
    widget_font_size=14.0,
    font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    title_color="#ffffff",
    title_font_size=24.0,
    empty_fill="rgba(255, 255, 255, 0.03)",
    empty_stroke="rgba(255, 255, 255, 0.25)",
    empty_label_color="#888888",
    row_band_fill="rgba(255, 255, 255, 0.04)",
    row_band_stroke="rgba(255, 255, 255, 0.2)",
    row_label_color="#aaaaaa",
    row_label_font_size=13.0,
)
