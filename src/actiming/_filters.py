"""Client-side leaderboard filtering and sort selection."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from actiming.constants import ALL_CLASSES
from actiming.models.entry import ProcessedEntry
from actiming.sorting import SortField, sort_entries


def _normalize_search(value: str) -> str:
    return value.strip().lower()


def matches_search(entry: ProcessedEntry, query: str) -> bool:
    """True when *query* is empty or found in driver, team, car name or model."""
    if not query:
        return True
    return (
        query in entry.driver_name.lower()
        or query in entry.team_name.lower()
        or query in entry.car_name.lower()
        or query in entry.car_model.lower()
    )


def available_classes(
    entries: Iterable[ProcessedEntry],
    enable_class_grouping: bool = True,
) -> list[str]:
    """Class filter options: "All", then each class present in first-seen order."""
    if not enable_class_grouping:
        return [ALL_CLASSES]
    return [ALL_CLASSES, *dict.fromkeys(entry.car_class for entry in entries)]


@dataclass(frozen=True)
class LeaderboardFilter:
    """Filter and sort selection for the visible leaderboard.

    Usage:
        # Only GT3 entries, fastest first
        LeaderboardFilter(selected_class="GT3")

        # Registered drivers with "ivan" in any text field, most laps first
        LeaderboardFilter(registered_only=True, search_query="ivan", sort_by=SortField.LAPS)
    """

    selected_class: str = ALL_CLASSES
    registered_only: bool = False
    search_query: str = ""
    sort_by: SortField = SortField.LAP_TIME
    ascending: bool = True

    def effective_class(self, enable_class_grouping: bool = True) -> str:
        """The class filter in force; grouping off always means "All"."""
        return self.selected_class if enable_class_grouping else ALL_CLASSES

    def toggled(self) -> LeaderboardFilter:
        """Copy with the sort direction inverted."""
        return LeaderboardFilter(
            selected_class=self.selected_class,
            registered_only=self.registered_only,
            search_query=self.search_query,
            sort_by=self.sort_by,
            ascending=not self.ascending,
        )

    def apply(
        self,
        entries: Sequence[ProcessedEntry],
        is_registered: Callable[[ProcessedEntry], bool],
        enable_class_grouping: bool = True,
        enable_participants_filtering: bool = True,
    ) -> list[ProcessedEntry]:
        """Filter by class, registration and search text, then sort."""
        result = list(entries)

        selected = self.effective_class(enable_class_grouping)
        if selected != ALL_CLASSES:
            result = [e for e in result if e.car_class == selected]

        if self.registered_only and enable_participants_filtering:
            result = [e for e in result if is_registered(e)]

        query = _normalize_search(self.search_query)
        result = [e for e in result if matches_search(e, query)]

        return sort_entries(result, self.sort_by, self.ascending)
