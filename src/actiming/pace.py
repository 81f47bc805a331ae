"""Pace metrics of leaderboard entries relative to the fastest visible lap."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

from actiming.constants import DEFAULT_PACE_PERCENT_THRESHOLD, WARNING_BAND_OFFSET
from actiming.formatters import format_delta_time, format_time
from actiming.models.entry import ProcessedEntry


class BadgeSeverity(str, Enum):
    """Pace badge styling level."""

    NORMAL = "normal"
    WARNING = "warning"
    DESTRUCTIVE = "destructive"


@dataclass(frozen=True)
class EntryMetrics:
    """Derived pace and display values for a single entry."""

    percentage: float | None
    delta_to_leader_ms: int | None
    delta_text: str
    badge_severity: BadgeSeverity
    tooltip_text: str
    has_splits: bool


@dataclass(frozen=True)
class LeaderboardRow:
    """Entry with its 1-based position, registration flag and metrics."""

    entry: ProcessedEntry
    position: int
    is_registered: bool
    metrics: EntryMetrics


def best_overall_lap(entries: Iterable[ProcessedEntry]) -> int | None:
    """Fastest non-null best lap among *entries*, or None."""
    return min(
        (entry.best_lap for entry in entries if entry.best_lap is not None),
        default=None,
    )


def pace_percentage(best_lap: int | None, leader_lap: int | None) -> float | None:
    """Best lap as a percentage of the leader's lap."""
    if best_lap is None or leader_lap is None or leader_lap <= 0:
        return None
    return best_lap * 100 / leader_lap


def delta_to_leader(best_lap: int | None, leader_lap: int | None) -> int | None:
    """Non-negative gap to the leader in ms."""
    if best_lap is None or leader_lap is None:
        return None
    return max(0, best_lap - leader_lap)


def warning_threshold(
    pace_percent_threshold: int,
    band_offset: int = WARNING_BAND_OFFSET,
) -> int:
    return max(100, pace_percent_threshold - band_offset)


def badge_severity(
    percentage: float | None,
    pace_percent_threshold: int = DEFAULT_PACE_PERCENT_THRESHOLD,
    band_offset: int = WARNING_BAND_OFFSET,
) -> BadgeSeverity:
    """Classify a pace percentage against the threshold.

    Up to the warning threshold is normal, up to the pace threshold is a
    warning, anything slower is destructive. No percentage is normal.
    """
    if percentage is None:
        return BadgeSeverity.NORMAL
    if percentage > pace_percent_threshold:
        return BadgeSeverity.DESTRUCTIVE
    if percentage > warning_threshold(pace_percent_threshold, band_offset):
        return BadgeSeverity.WARNING
    return BadgeSeverity.NORMAL


def _format_splits(splits: Sequence[int | None]) -> str:
    return " | ".join(format_time(s) for s in splits)


def sector_tooltip(entry: ProcessedEntry) -> str:
    """Best-lap splits and theoretical splits, one line each."""
    lines = []
    if entry.best_lap_splits:
        lines.append(f"Best: {_format_splits(entry.best_lap_splits)}")
    if entry.splits:
        lines.append(f"Theor: {_format_splits(entry.splits)}")
    return "\n".join(lines) if lines else "No sector data"


def entry_metrics(
    entry: ProcessedEntry,
    leader_lap: int | None,
    pace_percent_threshold: int = DEFAULT_PACE_PERCENT_THRESHOLD,
) -> EntryMetrics:
    """Compute pace percentage, gap, badge and tooltip for one entry."""
    percentage = pace_percentage(entry.best_lap, leader_lap)
    delta = delta_to_leader(entry.best_lap, leader_lap)
    return EntryMetrics(
        percentage=percentage,
        delta_to_leader_ms=delta,
        delta_text=format_delta_time(delta),
        badge_severity=badge_severity(percentage, pace_percent_threshold),
        tooltip_text=sector_tooltip(entry),
        has_splits=entry.has_splits,
    )


def build_leaderboard_view(
    entries: Sequence[ProcessedEntry],
    is_registered: Callable[[ProcessedEntry], bool],
    pace_percent_threshold: int = DEFAULT_PACE_PERCENT_THRESHOLD,
) -> list[LeaderboardRow]:
    """Rows for the visible entries, measured against the fastest of them."""
    leader_lap = best_overall_lap(entries)
    return [
        LeaderboardRow(
            entry=entry,
            position=index,
            is_registered=is_registered(entry),
            metrics=entry_metrics(entry, leader_lap, pace_percent_threshold),
        )
        for index, entry in enumerate(entries, start=1)
    ]
