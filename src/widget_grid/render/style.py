"""Theme and style constants for dashboard preview rendering."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Theme:
    """Visual theme for a dashboard preview."""

    name: str
    background_color: str
    widget_fill: str
    widget_stroke: str
    widget_stroke_width: float
    widget_title_color: str
    widget_content_color: str
    widget_font_size: float
    font_family: str
    title_color: str
    title_font_size: float
    empty_fill: str
    empty_stroke: str
    empty_label_color: str
    row_band_fill: str
    row_band_stroke: str
    row_label_color: str
    row_label_font_size: float
    # Dash pattern for empty-slot outlines
    empty_dasharray: str = "6,4"
    empty_label: str = "Empty"
