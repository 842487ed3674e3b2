"""SVG preview rendering for widget layouts."""

from widget_grid.render.svg import render_svg

__all__ = ["render_svg"]
