"""Participants roster state with staleness-safe asynchronous loading."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from actiming.exceptions import ACTimingError
from actiming.matcher import MatchMode, RegistrationMatcher
from actiming.models.entry import ProcessedEntry
from actiming.models.participant import NormalizedParticipant, RawParticipant
from actiming.roster import normalize_participants

logger = logging.getLogger(__name__)

RosterFetcher = Callable[[str], Awaitable[list[RawParticipant]]]


class ParticipantRegistry:
    """Holds the current roster and the matcher built from it.

    Every load gets a request id when it is issued. When a load finishes,
    successfully or not, its result is applied only if no newer load has
    been issued since; older responses are dropped. State is always
    replaced as a whole, never merged.

    Usage:
        async with AsyncLiveTimingClient() as client:
            registry = ParticipantRegistry(client.participants)
            await registry.load(csv_url)
            registry.is_registered(entry)
    """

    def __init__(self, fetch: RosterFetcher) -> None:
        self._fetch = fetch
        self._request_id = 0
        self._participants: tuple[RawParticipant, ...] = ()
        self._normalized: tuple[NormalizedParticipant, ...] = ()
        self._matcher = RegistrationMatcher()
        self.loading = False
        self.error: ACTimingError | None = None

    @property
    def request_id(self) -> int:
        """Id of the most recently issued load."""
        return self._request_id

    @property
    def participants(self) -> tuple[RawParticipant, ...]:
        return self._participants

    @property
    def normalized(self) -> tuple[NormalizedParticipant, ...]:
        return self._normalized

    @property
    def matcher(self) -> RegistrationMatcher:
        return self._matcher

    def _apply(self, participants: list[RawParticipant], error: ACTimingError | None = None) -> None:
        normalized = normalize_participants(participants)
        self._participants = tuple(participants)
        self._normalized = tuple(normalized)
        self._matcher = RegistrationMatcher(normalized)
        self.error = error
        self.loading = False

    async def load(self, source_url: str | None) -> bool:
        """Load the roster from *source_url*.

        A blank URL clears the roster without a request. Returns True when
        this call's result was applied, False when a newer load superseded it.
        """
        self._request_id += 1
        request_id = self._request_id
        url = (source_url or "").strip()

        if not url:
            self._apply([])
            return True

        self.loading = True
        try:
            participants = await self._fetch(url)
        except ACTimingError as exc:
            if request_id != self._request_id:
                logger.debug("Discarding failed roster load %d (latest %d)", request_id, self._request_id)
                return False
            logger.warning("Error loading participants from %s: %s", url, exc)
            self._apply([], error=exc)
            return True
        finally:
            if request_id == self._request_id:
                self.loading = False

        if request_id != self._request_id:
            logger.debug("Discarding stale roster load %d (latest %d)", request_id, self._request_id)
            return False

        self._apply(participants)
        return True

    def is_registered(
        self,
        entry: ProcessedEntry,
        mode: MatchMode = MatchMode.STRICT,
    ) -> bool:
        return self._matcher.is_registered(entry, mode)
