"""Panel chrome: the title and rounded border drawn around each dashboard panel.

``panel_block`` returns a ``PanelFrame`` descriptor. Hosts either wrap a
renderable in a Rich ``Panel`` with it or paint a Textual widget's border.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from rich.box import ROUNDED, Box
from rich.markup import escape
from rich.panel import Panel
from rich.style import Style
from rich.text import Text

from glimpse.ui.theme import Theme, default_theme

if TYPE_CHECKING:
    from rich.console import RenderableType
    from textual.widget import Widget


class BorderEmphasis(str, Enum):
    """Border colour roles a panel can take."""

    ACTIVE = "active"
    WARN = "warn"
    DANGER = "danger"
    OK = "ok"
    DIM = "dim"

    def color(self, theme: Theme) -> str:
        return getattr(theme, f"border_{self.value}")


ALL_BORDERS = ("top", "right", "bottom", "left")


class _LabelPanel(Panel):
    """Rich Panel that draws its title label verbatim.

    Rich pads titles by one cell and drops empty ones; the label already
    carries its padding and an empty title still shows as two blank cells.
    """

    @property
    def _title(self) -> Text | None:
        if self.title is None:
            return None
        title = self.title.copy() if isinstance(self.title, Text) else Text(self.title)
        title.plain = title.plain.replace("\n", " ")
        title.end = ""
        title.no_wrap = True
        return title


@dataclass(frozen=True)
class PanelFrame:
    """Everything a host needs to draw a panel's chrome."""

    title: str
    title_style: Style
    border_color: str
    border_style: Style
    border_type: str = "round"
    borders: tuple[str, ...] = ALL_BORDERS

    @property
    def label(self) -> str:
        """Title as drawn on the border, padded by one cell each side."""
        return f" {self.title} "

    @property
    def box(self) -> Box:
        return ROUNDED

    def to_panel(self, renderable: RenderableType) -> Panel:
        """Wrap ``renderable`` in a Rich Panel drawn with this chrome."""
        return _LabelPanel(
            renderable,
            title=Text(self.label, style=self.title_style),
            title_align="left",
            box=self.box,
            border_style=self.border_style,
        )

    def apply(self, widget: Widget) -> None:
        """Paint this chrome onto a Textual widget's border."""
        widget.border_title = escape(self.title)
        widget.styles.border = (self.border_type, self.border_color)
        if self.title_style.color is not None:
            widget.styles.border_title_color = self.title_style.color.name
        if self.title_style.bold:
            widget.styles.border_title_style = "bold"


def panel_block(
    title: str,
    theme: Theme | None = None,
    *,
    emphasis: BorderEmphasis = BorderEmphasis.ACTIVE,
) -> PanelFrame:
    """Build the chrome for a panel titled ``title``.

    Args:
        title: Panel title, shown as-is (empty is allowed).
        theme: Palette to style with. Defaults to the built-in default theme.
        emphasis: Border colour role. Panels use ACTIVE unless the caller
            tracks focus or health itself.

    Returns:
        A PanelFrame with all four borders, rounded corners, bold title.
    """
    theme = theme or default_theme()
    border_color = emphasis.color(theme)
    return PanelFrame(
        title=title,
        title_style=theme.title_style(),
        border_color=border_color,
        border_style=theme.border_style(border_color),
    )


__all__ = ["ALL_BORDERS", "BorderEmphasis", "PanelFrame", "panel_block"]
