"""Formatting helpers for lap and gap times."""

from __future__ import annotations


def format_time(ms: int | None) -> str:
    """Format milliseconds as m:ss.fff or '-' if missing or not positive."""
    if ms is None or ms <= 0:
        return "-"
    minutes, rest = divmod(ms, 60_000)
    seconds, millis = divmod(rest, 1000)
    return f"{minutes}:{seconds:02d}.{millis:03d}"


def format_delta_time(ms: int | None) -> str:
    """Format a gap to the leader as +s.fff or '-' if missing."""
    if ms is None or ms < 0:
        return "-"
    seconds, millis = divmod(ms, 1000)
    return f"+{seconds}.{millis:03d}"
