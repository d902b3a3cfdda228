"""Shared formatting utilities for Glimpse panels.

Compact human-readable numbers for the cells that sit next to sparklines.

Usage:
    from glimpse.ui.formatting import format_bytes, format_duration
"""

from __future__ import annotations

KB = 1024
MB = 1024 * 1024
GB = 1024 * 1024 * 1024


def format_bytes(num_bytes: int) -> str:
    """Format a byte count with a binary unit.

    Examples:
        >>> format_bytes(512)
        '512 B'
        >>> format_bytes(1536)
        '2 KB'
        >>> format_bytes(5 * 1024 * 1024 + 512 * 1024)
        '5.5 MB'
    """
    if num_bytes >= GB:
        return f"{num_bytes / GB:.1f} GB"
    elif num_bytes >= MB:
        return f"{num_bytes / MB:.1f} MB"
    elif num_bytes >= KB:
        return f"{num_bytes / KB:.0f} KB"
    return f"{num_bytes} B"


def format_byte_rate(bytes_per_sec: float) -> str:
    """Format a throughput in bytes per second.

    Examples:
        >>> format_byte_rate(2048)
        '2 KB/s'
        >>> format_byte_rate(0)
        '0 B/s'
    """
    if bytes_per_sec >= GB:
        return f"{bytes_per_sec / GB:.1f} GB/s"
    elif bytes_per_sec >= MB:
        return f"{bytes_per_sec / MB:.1f} MB/s"
    elif bytes_per_sec >= KB:
        return f"{bytes_per_sec / KB:.0f} KB/s"
    elif bytes_per_sec > 0:
        return f"{bytes_per_sec:.0f} B/s"
    return "0 B/s"


def format_compact(n: int) -> str:
    """Format a large count with a K/M/B suffix.

    Examples:
        >>> format_compact(1_500)
        '1.5K'
        >>> format_compact(2_300_000)
        '2.3M'
        >>> format_compact(999)
        '999'
    """
    if n >= 1_000_000_000:
        return f"{n / 1_000_000_000:.1f}B"
    elif n >= 1_000_000:
        return f"{n / 1_000_000:.1f}M"
    elif n >= 1_000:
        return f"{n / 1_000:.1f}K"
    return str(n)


def format_rate(rate: float) -> str:
    """Format an events-per-second rate.

    Examples:
        >>> format_rate(1_500_000)
        '1.5M/s'
        >>> format_rate(42)
        '42/s'
        >>> format_rate(0.25)
        '0.2/s'
    """
    if rate >= 1_000_000:
        return f"{rate / 1_000_000:.1f}M/s"
    elif rate >= 1_000:
        return f"{rate / 1_000:.1f}K/s"
    elif rate >= 1:
        return f"{rate:.0f}/s"
    elif rate > 0:
        return f"{rate:.1f}/s"
    return "0/s"


def format_duration(secs: float) -> str:
    """Format a duration compactly: "250ms", "1.5s", "2m30s", "1h15m".

    Examples:
        >>> format_duration(0.25)
        '250ms'
        >>> format_duration(1.5)
        '1.5s'
        >>> format_duration(0)
        '0s'
    """
    if secs < 0.001:
        return "0s"
    elif secs < 1.0:
        return f"{secs * 1000:.0f}ms"
    elif secs < 60.0:
        return f"{secs:.1f}s"
    elif secs < 3600.0:
        return f"{secs // 60:.0f}m{secs % 60:.0f}s"
    return f"{secs // 3600:.0f}h{(secs % 3600) // 60:.0f}m"


def format_time_ms(ms: float) -> str:
    """Format a statement time given in milliseconds.

    Examples:
        >>> format_time_ms(0.5)
        '0.500 ms'
        >>> format_time_ms(12.34)
        '12.3 ms'
        >>> format_time_ms(2_500)
        '2.50 s'
    """
    if ms < 1.0:
        return f"{ms:.3f} ms"
    elif ms < 1_000.0:
        return f"{ms:.1f} ms"
    elif ms < 60_000.0:
        return f"{ms / 1_000:.2f} s"
    elif ms < 3_600_000.0:
        return f"{ms / 60_000:.1f} min"
    return f"{ms / 3_600_000:.1f} hr"


def format_lag(secs: float | None) -> str:
    """Format replication lag, "-" when unknown."""
    if secs is None:
        return "-"
    return f"{secs:.3f}s"


def truncate(text: str, max_len: int) -> str:
    """Truncate to ``max_len`` characters, ending with an ellipsis when cut.

    Examples:
        >>> truncate("pg_stat_statements", 8)
        'pg_stat…'
        >>> truncate("short", 10)
        'short'
    """
    if len(text) <= max_len:
        return text
    if max_len <= 1:
        return "…"
    return text[: max_len - 1] + "…"


__all__ = [
    "format_bytes",
    "format_byte_rate",
    "format_compact",
    "format_rate",
    "format_duration",
    "format_time_ms",
    "format_lag",
    "truncate",
]
