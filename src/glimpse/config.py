"""Glimpse configuration.

Pydantic models for the colour palette and the process settings that pick
one. Built-in palettes live in ``themes.yaml`` next to this module; a custom
palette can be supplied as a YAML file with the same keys.

Usage:
    # Load a built-in palette
    config = ThemeConfig.from_profile("nord")

    # Load with overrides
    config = ThemeConfig.from_profile("nord", {"border_active": "#ffffff"})

    # Load from a custom YAML file
    config = ThemeConfig.from_yaml("my_theme.yaml")

    # Resolve whatever the environment asks for
    theme = GlimpseSettings().load_theme()
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from rich.color import Color, ColorParseError

from glimpse.ui.theme import ColorTheme, Theme

_logger = logging.getLogger(__name__)

THEMES_PATH = Path(__file__).parent / "themes.yaml"


class ThemeConfig(BaseModel):
    """One colour palette, validated against Rich's colour parser.

    Every colour of ``glimpse.ui.theme.Theme`` is required; unknown keys are
    rejected so a typo in a custom palette fails at load time.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    profile_name: str = "custom"

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

    @field_validator(*Theme.color_fields())
    @classmethod
    def validate_color(cls, v: str) -> str:
        try:
            Color.parse(v)
        except ColorParseError as e:
            raise ValueError(f"Invalid colour {v!r}: {e}") from e
        return v

    @classmethod
    def from_yaml(cls, path: Path | str, overrides: dict[str, Any] | None = None) -> ThemeConfig:
        """Load a palette from a YAML file.

        Args:
            path: Path to a YAML file mapping colour names to colour strings.
            overrides: Optional dict of values to override.

        Returns:
            Validated ThemeConfig instance.

        Raises:
            ValueError: If the YAML file is empty, malformed, or not a mapping.
        """
        path = Path(path)
        with open(path) as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            raise ValueError(
                f"Theme YAML must be a mapping, got {type(data).__name__}: {path}"
            )

        if overrides:
            data = {**data, **overrides}

        _logger.debug("Loaded theme file %s", path)
        return cls(**data)

    @classmethod
    def from_profile(cls, name: str, overrides: dict[str, Any] | None = None) -> ThemeConfig:
        """Load a built-in palette by name.

        Args:
            name: Palette name (see ``ColorTheme`` values).
            overrides: Optional dict of values to override.

        Raises:
            ValueError: If the name is unknown or themes.yaml is malformed.
            FileNotFoundError: If themes.yaml does not exist.
        """
        if not THEMES_PATH.exists():
            raise FileNotFoundError(f"Theme file not found: {THEMES_PATH}")

        with open(THEMES_PATH) as f:
            all_themes = yaml.safe_load(f)

        if not isinstance(all_themes, dict):
            raise ValueError(
                f"themes.yaml must be a mapping, got {type(all_themes).__name__}"
            )

        if "themes" not in all_themes:
            raise ValueError(
                f"themes.yaml is missing required 'themes' key. "
                f"Found keys: {list(all_themes.keys())}"
            )

        themes = all_themes["themes"]
        if not isinstance(themes, dict):
            raise ValueError(
                f"'themes' key must be a mapping, got {type(themes).__name__}"
            )

        if name not in themes:
            available = list(themes.keys())
            raise ValueError(f"Unknown theme: {name}. Available: {available}")

        data = themes[name].copy()
        data["profile_name"] = name

        if overrides:
            data = {**data, **overrides}

        _logger.debug("Loaded built-in theme %s", name)
        return cls(**data)

    def to_theme(self) -> Theme:
        return Theme(**self.model_dump(exclude={"profile_name"}))

    def to_yaml(self, path: Path | str) -> None:
        """Save the palette to a YAML file."""
        path = Path(path)
        with open(path, "w") as f:
            yaml.dump(
                self.model_dump(exclude={"profile_name"}),
                f,
                default_flow_style=False,
                sort_keys=False,
            )


class GlimpseSettings(BaseSettings):
    """Process-level settings, read from ``GLIMPSE_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GLIMPSE_",
        env_file=".env",
        frozen=True,
        extra="ignore",
    )

    color_theme: ColorTheme = ColorTheme.TOKYO_NIGHT
    theme_file: Path | None = None
    warn_duration_secs: float = Field(default=1.0, gt=0)
    danger_duration_secs: float = Field(default=10.0, gt=0)
    history_length: int = Field(default=120, ge=1)

    @model_validator(mode="after")
    def validate_duration_thresholds(self) -> GlimpseSettings:
        if self.danger_duration_secs <= self.warn_duration_secs:
            raise ValueError(
                f"danger_duration_secs ({self.danger_duration_secs}) must be greater "
                f"than warn_duration_secs ({self.warn_duration_secs})"
            )
        return self

    def load_theme(self) -> Theme:
        """Resolve the configured palette; a theme file wins over the name."""
        if self.theme_file is not None:
            return ThemeConfig.from_yaml(self.theme_file).to_theme()
        return self.color_theme.load()

    def duration_color(self, theme: Theme, secs: float) -> str:
        """Colour for an age in seconds using the configured thresholds."""
        return theme.duration_color(
            secs, warn=self.warn_duration_secs, danger=self.danger_duration_secs
        )


__all__ = ["ThemeConfig", "GlimpseSettings", "THEMES_PATH"]
