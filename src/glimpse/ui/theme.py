"""Colour themes for Glimpse panels.

A Theme is a plain value: every renderer that needs colours receives one
explicitly instead of reading global state. Palettes are defined in the
packaged ``themes.yaml`` and validated by ``glimpse.config.ThemeConfig``.

Usage:
    from glimpse.ui.theme import ColorTheme, default_theme

    theme = default_theme()
    style = theme.title_style()
    nord = ColorTheme.NORD.load()
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from functools import lru_cache
from typing import TYPE_CHECKING

from rich.style import Style

if TYPE_CHECKING:
    from glimpse.config import ThemeConfig


class ColorTheme(str, Enum):
    """Built-in palettes, in cycling order."""

    TOKYO_NIGHT = "tokyo_night"
    DRACULA = "dracula"
    NORD = "nord"
    SOLARIZED_DARK = "solarized_dark"
    SOLARIZED_LIGHT = "solarized_light"
    CATPPUCCIN_LATTE = "catppuccin_latte"

    @property
    def label(self) -> str:
        return _LABELS[self]

    def next(self) -> ColorTheme:
        members = list(ColorTheme)
        return members[(members.index(self) + 1) % len(members)]

    def prev(self) -> ColorTheme:
        members = list(ColorTheme)
        return members[(members.index(self) - 1) % len(members)]

    def config(self) -> "ThemeConfig":
        from glimpse.config import ThemeConfig

        return ThemeConfig.from_profile(self.value)

    def load(self) -> Theme:
        """Build the Theme for this palette."""
        return _load_builtin(self)


_LABELS = {
    ColorTheme.TOKYO_NIGHT: "Tokyo Night",
    ColorTheme.DRACULA: "Dracula",
    ColorTheme.NORD: "Nord",
    ColorTheme.SOLARIZED_DARK: "Solarized Dark",
    ColorTheme.SOLARIZED_LIGHT: "Solarized Light",
    ColorTheme.CATPPUCCIN_LATTE: "Catppuccin Latte",
}


@dataclass(frozen=True)
class Theme:
    """Resolved palette. Colours are Rich colour strings (e.g. ``"#7dcfff"``)."""

    header_bg: str
    fg: str
    fg_dim: str
    border_active: str
    border_warn: str
    border_danger: str
    border_ok: str
    border_dim: str
    graph_connections: str
    graph_cache: str
    graph_latency: str
    duration_ok: str
    duration_warn: str
    duration_danger: str
    state_active: str
    state_idle_txn: str
    overlay_bg: str
    highlight_bg: str
    sql_keyword: str
    sql_string: str
    sql_number: str
    sql_comment: str

    @classmethod
    def color_fields(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def title_style(self) -> Style:
        return Style(color=self.fg, bold=True)

    def border_style(self, color: str) -> Style:
        return Style(color=color)

    def duration_color(self, secs: float, warn: float = 1.0, danger: float = 10.0) -> str:
        """Colour for a query/transaction age in seconds."""
        if secs < warn:
            return self.duration_ok
        if secs < danger:
            return self.duration_warn
        return self.duration_danger

    def state_color(self, state: str | None) -> str:
        """Colour for a backend state string."""
        if state == "active":
            return self.state_active
        if state in ("idle in transaction", "idle in transaction (aborted)"):
            return self.state_idle_txn
        return self.fg

    def hit_ratio_color(self, ratio_pct: float) -> str:
        if ratio_pct >= 99.0:
            return self.border_ok
        if ratio_pct >= 95.0:
            return self.border_warn
        return self.border_danger

    def lag_color(self, secs: float | None) -> str:
        if secs is not None and secs > 10.0:
            return self.border_danger
        if secs is not None and secs > 1.0:
            return self.border_warn
        return self.fg


# Wait-event classes keep fixed terminal colours across palettes.
_WAIT_EVENT_COLORS = {
    "Lock": "red",
    "IO": "yellow",
    "IPC": "magenta",
    "LWLock": "cyan",
    "Client": "white",
    "BufferPin": "bright_blue",
    "CPU/Running": "green",
    "Activity": "bright_black",
}


def wait_event_color(event_type: str) -> str:
    """Terminal colour name for a wait-event class."""
    return _WAIT_EVENT_COLORS.get(event_type, "grey50")


@lru_cache(maxsize=None)
def _load_builtin(name: ColorTheme) -> Theme:
    return name.config().to_theme()


def default_theme() -> Theme:
    """The Tokyo Night theme, loaded once per process."""
    return _load_builtin(ColorTheme.TOKYO_NIGHT)


__all__ = ["ColorTheme", "Theme", "default_theme", "wait_event_color"]
