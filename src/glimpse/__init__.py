"""Glimpse - visual building blocks for a terminal database dashboard.

Subpackages:
- ui: sparkline encoder, panel chrome, colour themes, formatting, widgets
- config: palette loading and process settings
"""

__version__ = "1.0.0"

from glimpse.ui import panel_block, render_sparkline

__all__ = ["panel_block", "render_sparkline"]
