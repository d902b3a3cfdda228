"""Glimpse UI core: sparkline encoding, panel chrome and colour themes.

Usage:
    from glimpse.ui import panel_block, render_sparkline

    frame = panel_block("WAL & I/O")
    line = render_sparkline(history, width=40)
"""

from glimpse.ui.panels import BorderEmphasis, PanelFrame, panel_block
from glimpse.ui.sparkline import SPARKLINE_BLOCKS, render_sparkline, sparkline_levels
from glimpse.ui.theme import ColorTheme, Theme, default_theme, wait_event_color

__all__ = [
    # Sparkline
    "SPARKLINE_BLOCKS",
    "render_sparkline",
    "sparkline_levels",
    # Chrome
    "BorderEmphasis",
    "PanelFrame",
    "panel_block",
    # Theme
    "ColorTheme",
    "Theme",
    "default_theme",
    "wait_event_color",
]
