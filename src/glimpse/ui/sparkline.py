"""Sparkline encoding for dashboard panels.

Turns the most recent samples of a counter history into a single line of
Unicode block glyphs, one glyph per terminal column.

Usage:
    from glimpse.ui.sparkline import render_sparkline

    line = render_sparkline(history, width=area_width)
"""

from __future__ import annotations

from collections.abc import Iterable

# Index 0 is a blank cell; linear scaling only ever lands on 1..8.
SPARKLINE_BLOCKS = " ▁▂▃▄▅▆▇█"

EMPTY_LEVEL = 0
FLAT_LEVEL = 4
FULL_LEVEL = len(SPARKLINE_BLOCKS) - 1


def display_window(samples: Iterable[int], width: int) -> list[int]:
    """Return exactly ``width`` samples, most recent last.

    Longer histories keep their trailing ``width`` samples. Shorter ones are
    left-padded with zeros so a young panel still fills its whole row.

    Examples:
        >>> display_window([1, 2, 3, 4], 2)
        [3, 4]
        >>> display_window([7], 3)
        [0, 0, 7]
    """
    if width <= 0:
        return []
    values = list(samples)
    if len(values) >= width:
        return values[len(values) - width:]
    return [0] * (width - len(values)) + values


def sparkline_levels(samples: Iterable[int], width: int) -> list[int]:
    """Map the display window onto glyph levels 0-8.

    A flat window has no range to scale against: zeros stay empty and any
    nonzero value sits at the midpoint level. Otherwise values are scaled
    linearly into levels 1-8 so a small nonzero sample never reads as
    missing data.
    """
    window = display_window(samples, width)
    if not window:
        return []

    low = min(window)
    high = max(window)
    if high == low:
        return [EMPTY_LEVEL if v == 0 else FLAT_LEVEL for v in window]

    span = high - low
    return [min(round((v - low) / span * 7) + 1, FULL_LEVEL) for v in window]


def render_sparkline(samples: Iterable[int], width: int) -> str:
    """Render ``samples`` as a sparkline exactly ``width`` characters wide.

    Args:
        samples: Non-negative counters in chronological order. Any iterable
            works, including a ``deque`` history buffer.
        width: Number of columns to fill. Zero yields an empty string.

    Returns:
        One glyph per column, oldest sample first.

    Examples:
        >>> render_sparkline([0, 0, 0], 3)
        '   '
        >>> render_sparkline([5, 5], 2)
        '▄▄'
        >>> render_sparkline([1, 2, 3], 0)
        ''
    """
    if width == 0:
        return ""
    return "".join(SPARKLINE_BLOCKS[level] for level in sparkline_levels(samples, width))


__all__ = [
    "SPARKLINE_BLOCKS",
    "EMPTY_LEVEL",
    "FLAT_LEVEL",
    "FULL_LEVEL",
    "display_window",
    "sparkline_levels",
    "render_sparkline",
]
