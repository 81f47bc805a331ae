"""Registration matching of leaderboard entries against the roster."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import Enum

from actiming.constants import CAR_TOKEN_MIN_OVERLAP
from actiming.models.entry import ProcessedEntry
from actiming.models.participant import NormalizedParticipant
from actiming.names import has_car_token_overlap, normalize_text, to_car_tokens, to_name_key


class MatchMode(str, Enum):
    """How strictly an entry must agree with a roster row."""

    STRICT = "strict"
    NAME_ONLY = "name_only"

    @classmethod
    def from_flag(cls, match_by_driver_name_only: bool) -> MatchMode:
        return cls.NAME_ONLY if match_by_driver_name_only else cls.STRICT


def matches_participant_candidate(
    candidate: NormalizedParticipant,
    entry_class: str,
    entry_car_tokens: Sequence[str],
    min_overlap: int = CAR_TOKEN_MIN_OVERLAP,
) -> bool:
    """Class must match; a declared car must also share enough tokens."""
    if candidate.car_class != entry_class:
        return False
    if not candidate.has_declared_car:
        return True
    return has_car_token_overlap(candidate.car_tokens, entry_car_tokens, min_overlap)


class RegistrationMatcher:
    """Index of roster rows by name key, answering "is this entry registered?".

    A driver may appear on several rows (e.g. one per class), so every key
    maps to a list of candidates.

    Usage:
        matcher = RegistrationMatcher(normalize_participants(rows))
        matcher.is_registered(entry)
        matcher.is_registered(entry, MatchMode.NAME_ONLY)
    """

    def __init__(
        self,
        participants: Iterable[NormalizedParticipant] = (),
        min_overlap: int = CAR_TOKEN_MIN_OVERLAP,
    ) -> None:
        self._min_overlap = min_overlap
        self._by_name: dict[str, list[NormalizedParticipant]] = {}
        for participant in participants:
            self._by_name.setdefault(participant.name_key, []).append(participant)

    def __len__(self) -> int:
        return sum(len(candidates) for candidates in self._by_name.values())

    def candidates(self, driver_name: str) -> list[NormalizedParticipant]:
        """All roster rows sharing the driver's name key."""
        return list(self._by_name.get(to_name_key(driver_name), ()))

    def is_registered(
        self,
        entry: ProcessedEntry,
        mode: MatchMode = MatchMode.STRICT,
    ) -> bool:
        candidates = self._by_name.get(to_name_key(entry.driver_name))
        if not candidates:
            return False
        if mode is MatchMode.NAME_ONLY:
            return True

        entry_class = normalize_text(entry.car_class)
        entry_car_tokens = to_car_tokens(entry.car_name)
        return any(
            matches_participant_candidate(c, entry_class, entry_car_tokens, self._min_overlap)
            for c in candidates
        )


def is_registered(
    entry: ProcessedEntry,
    matcher: RegistrationMatcher,
    mode: MatchMode = MatchMode.STRICT,
) -> bool:
    return matcher.is_registered(entry, mode)
