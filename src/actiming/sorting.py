"""Total ordering of leaderboard entries."""

from __future__ import annotations

import functools
from collections.abc import Iterable
from enum import Enum

from actiming.models.entry import ProcessedEntry


class SortField(str, Enum):
    """Selectable leaderboard sort keys."""

    LAP_TIME = "lapTime"
    DRIVER = "driver"
    LAPS = "laps"


def _compare_lap_time(left: ProcessedEntry, right: ProcessedEntry) -> int:
    if left.best_lap is None and right.best_lap is None:
        return 0
    if left.best_lap is None:
        return 1
    if right.best_lap is None:
        return -1
    return left.best_lap - right.best_lap


def _compare_driver(left: ProcessedEntry, right: ProcessedEntry) -> int:
    a, b = left.driver_name.casefold(), right.driver_name.casefold()
    if a == b:
        a, b = left.driver_name, right.driver_name
    return (a > b) - (a < b)


def compare_entries(
    left: ProcessedEntry,
    right: ProcessedEntry,
    sort_by: SortField = SortField.LAP_TIME,
    ascending: bool = True,
) -> int:
    """Compare two entries by the selected field.

    Lap time puts untimed entries last, laps sorts most laps first, and the
    direction flag negates the result for every field alike.
    """
    if sort_by is SortField.LAP_TIME:
        comparison = _compare_lap_time(left, right)
    elif sort_by is SortField.DRIVER:
        comparison = _compare_driver(left, right)
    else:
        comparison = right.lap_count - left.lap_count

    return comparison if ascending else -comparison


def sort_entries(
    entries: Iterable[ProcessedEntry],
    sort_by: SortField = SortField.LAP_TIME,
    ascending: bool = True,
) -> list[ProcessedEntry]:
    """Return a new sorted list; ties keep their input order."""
    sort_by = SortField(sort_by)
    key = functools.cmp_to_key(
        lambda left, right: compare_entries(left, right, sort_by, ascending)
    )
    return sorted(entries, key=key)
