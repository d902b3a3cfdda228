"""Tests for colour themes and semantic colour helpers."""

import pytest
from rich.color import Color
from rich.style import Style

from glimpse.ui.theme import ColorTheme, Theme, default_theme, wait_event_color


class TestColorTheme:
    """Tests for palette cycling and labels."""

    def test_default_is_tokyo_night(self):
        assert default_theme() == ColorTheme.TOKYO_NIGHT.load()

    def test_next_cycles(self):
        assert ColorTheme.TOKYO_NIGHT.next() is ColorTheme.DRACULA
        assert ColorTheme.SOLARIZED_LIGHT.next() is ColorTheme.CATPPUCCIN_LATTE
        assert ColorTheme.CATPPUCCIN_LATTE.next() is ColorTheme.TOKYO_NIGHT

    def test_prev_cycles(self):
        assert ColorTheme.TOKYO_NIGHT.prev() is ColorTheme.CATPPUCCIN_LATTE
        assert ColorTheme.DRACULA.prev() is ColorTheme.TOKYO_NIGHT

    def test_full_cycle_returns_home(self):
        current = ColorTheme.NORD
        for _ in ColorTheme:
            current = current.next()
        assert current is ColorTheme.NORD

    def test_labels(self):
        assert ColorTheme.TOKYO_NIGHT.label == "Tokyo Night"
        assert ColorTheme.CATPPUCCIN_LATTE.label == "Catppuccin Latte"

    @pytest.mark.parametrize("name", list(ColorTheme))
    def test_every_builtin_loads(self, name):
        theme = name.load()
        for field_name in Theme.color_fields():
            Color.parse(getattr(theme, field_name))

    def test_load_is_cached(self):
        assert ColorTheme.DRACULA.load() is ColorTheme.DRACULA.load()

    def test_palettes_differ(self):
        assert ColorTheme.DRACULA.load() != ColorTheme.NORD.load()


class TestStyles:
    """Tests for title and border styles."""

    def test_title_style_bold_fg(self, theme):
        assert theme.title_style() == Style(color="#c0caf5", bold=True)

    def test_border_style(self, theme):
        assert theme.border_style(theme.border_warn) == Style(color=theme.border_warn)


class TestSemanticColors:
    """Tests for threshold-driven colour helpers."""

    def test_duration_color(self, theme):
        assert theme.duration_color(0.5) == theme.duration_ok
        assert theme.duration_color(1.0) == theme.duration_warn
        assert theme.duration_color(9.99) == theme.duration_warn
        assert theme.duration_color(10.0) == theme.duration_danger

    def test_duration_color_custom_thresholds(self, theme):
        assert theme.duration_color(3.0, warn=5.0, danger=30.0) == theme.duration_ok
        assert theme.duration_color(31.0, warn=5.0, danger=30.0) == theme.duration_danger

    def test_state_color(self, theme):
        assert theme.state_color("active") == theme.state_active
        assert theme.state_color("idle in transaction") == theme.state_idle_txn
        assert theme.state_color("idle in transaction (aborted)") == theme.state_idle_txn
        assert theme.state_color("idle") == theme.fg
        assert theme.state_color(None) == theme.fg

    def test_hit_ratio_color(self, theme):
        assert theme.hit_ratio_color(99.5) == theme.border_ok
        assert theme.hit_ratio_color(99.0) == theme.border_ok
        assert theme.hit_ratio_color(96.0) == theme.border_warn
        assert theme.hit_ratio_color(80.0) == theme.border_danger

    def test_lag_color(self, theme):
        assert theme.lag_color(None) == theme.fg
        assert theme.lag_color(0.5) == theme.fg
        assert theme.lag_color(2.0) == theme.border_warn
        assert theme.lag_color(11.0) == theme.border_danger

    @pytest.mark.parametrize(
        "event_type, color",
        [
            ("Lock", "red"),
            ("IO", "yellow"),
            ("IPC", "magenta"),
            ("LWLock", "cyan"),
            ("Client", "white"),
            ("BufferPin", "bright_blue"),
            ("CPU/Running", "green"),
            ("Activity", "bright_black"),
            ("Extension", "grey50"),
        ],
    )
    def test_wait_event_color(self, event_type, color):
        assert wait_event_color(event_type) == color
        Color.parse(color)
