"""Glimpse TUI widgets."""
from glimpse.ui.widgets.sparkline_panel import SparklinePanel

__all__ = ["SparklinePanel"]
