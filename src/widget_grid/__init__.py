"""widget-grid: layout engine for dashboards of resizable widget tiles."""

__version__ = "0.1.0"
