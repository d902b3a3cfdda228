"""Sparkline panel widget for Glimpse dashboards.

A bordered, single-series history chart. The owning screen pushes one sample
per poll; the widget only keeps the bounded history and draws it.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from typing import Any

from rich.style import Style
from rich.text import Text
from textual.widgets import Static

from glimpse.config import GlimpseSettings
from glimpse.ui.panels import BorderEmphasis, panel_block
from glimpse.ui.sparkline import render_sparkline
from glimpse.ui.theme import Theme


class SparklinePanel(Static):
    """Rounded panel showing the most recent samples as a sparkline.

    Chrome comes from ``panel_block`` so every panel on screen shares one
    look; the line colour is one of the theme's graph colours.
    History length and palette default to ``GlimpseSettings``.
    """

    DEFAULT_CSS = """
    SparklinePanel {
        height: 3;
    }
    """

    def __init__(
        self,
        title: str,
        samples: Iterable[int] = (),
        *,
        history_length: int | None = None,
        theme: Theme | None = None,
        settings: GlimpseSettings | None = None,
        color: str | None = None,
        width: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        settings = settings or GlimpseSettings()
        self._palette = theme or settings.load_theme()
        self._panel_title = title
        self._line_color = color or self._palette.graph_connections
        self._fixed_width = width
        self.history: deque[int] = deque(samples, maxlen=history_length or settings.history_length)
        self.set_emphasis(BorderEmphasis.ACTIVE)

    def set_emphasis(self, emphasis: BorderEmphasis) -> None:
        """Recolour the border, e.g. when the panel gains or loses focus."""
        panel_block(self._panel_title, self._palette, emphasis=emphasis).apply(self)

    def push(self, value: int) -> None:
        """Append the newest sample and redraw."""
        self.history.append(value)
        self.refresh()

    def line_width(self) -> int:
        if self._fixed_width is not None:
            return self._fixed_width
        return max(self.content_size.width, 0)

    def render(self) -> Text:
        line = render_sparkline(self.history, self.line_width())
        return Text(line, style=Style(color=self._line_color), no_wrap=True)


__all__ = ["SparklinePanel"]
