"""Live timing session: settings, leaderboard refresh and roster in one place."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone

from actiming._filters import LeaderboardFilter, available_classes
from actiming.api_logging import log_service_call
from actiming.client import AsyncLiveTimingClient
from actiming.config import TimingSettings
from actiming.exceptions import ACTimingError
from actiming.models.entry import ProcessedEntry, ProcessedLeaderboard
from actiming.pace import LeaderboardRow, build_leaderboard_view
from actiming.registry import ParticipantRegistry

logger = logging.getLogger(__name__)


class LiveTimingSession:
    """Keeps the latest leaderboard and roster for one set of settings.

    Leaderboard refreshes use the same request-id rule as the roster: a
    response is stored only if no newer refresh was issued meanwhile.
    Overlapping periodic and manual refreshes are allowed.

    Usage:
        async with AsyncLiveTimingClient() as client:
            session = LiveTimingSession(client, TimingSettings())
            await session.reload_participants()
            await session.refresh()
            rows = session.view(LeaderboardFilter(selected_class="GT3"))
    """

    def __init__(self, client: AsyncLiveTimingClient, settings: TimingSettings | None = None) -> None:
        self._client = client
        self._settings = settings or TimingSettings()
        self._request_id = 0
        self.data: ProcessedLeaderboard | None = None
        self.error: ACTimingError | None = None
        self.registry = ParticipantRegistry(client.participants)

    @property
    def settings(self) -> TimingSettings:
        return self._settings

    @property
    def entries(self) -> tuple[ProcessedEntry, ...]:
        return self.data.leaderboard if self.data is not None else ()

    async def update_settings(self, settings: TimingSettings) -> None:
        """Swap settings; reload whatever the change affects."""
        previous = self._settings
        self._settings = settings
        if settings.participants_csv_url != previous.participants_csv_url:
            await self.reload_participants()
        if (
            settings.server_url != previous.server_url
            or settings.car_classes != previous.car_classes
        ):
            await self.refresh()

    @log_service_call
    async def reload_participants(self) -> bool:
        return await self.registry.load(self._settings.participants_csv_url)

    @log_service_call
    async def refresh(self) -> bool:
        """Fetch the leaderboard; return False if the result was superseded."""
        self._request_id += 1
        request_id = self._request_id
        settings = self._settings

        try:
            data = await self._client.leaderboard(settings.server_url, settings.car_classes)
        except ACTimingError as exc:
            if request_id != self._request_id:
                return False
            logger.warning("Error fetching leaderboard from %s: %s", settings.server_url, exc)
            self.error = exc
            self.data = ProcessedLeaderboard(
                error=str(exc) or "Failed to fetch leaderboard",
                last_update=datetime.now(timezone.utc),
            )
            return True

        if request_id != self._request_id:
            logger.debug("Discarding stale leaderboard %d (latest %d)", request_id, self._request_id)
            return False

        self.error = None
        self.data = data
        return True

    async def poll(self, interval: float | None = None) -> None:
        """Refresh forever at *interval* seconds until cancelled."""
        delay = interval if interval is not None else self._settings.refresh_interval
        while True:
            await self.refresh()
            await asyncio.sleep(delay)

    def is_registered(self, entry: ProcessedEntry) -> bool:
        return self.registry.is_registered(entry, self._settings.match_mode)

    def classes(self, enable_class_grouping: bool = True) -> list[str]:
        return available_classes(self.entries, enable_class_grouping)

    def view(
        self,
        leaderboard_filter: LeaderboardFilter | None = None,
        enable_class_grouping: bool = True,
    ) -> list[LeaderboardRow]:
        """Visible rows with pace metrics measured against the visible leader."""
        leaderboard_filter = leaderboard_filter or LeaderboardFilter()
        visible = leaderboard_filter.apply(
            self.entries,
            self.is_registered,
            enable_class_grouping=enable_class_grouping,
            enable_participants_filtering=bool(self._settings.participants_csv_url),
        )
        return build_leaderboard_view(
            visible, self.is_registered, self._settings.pace_percent_threshold,
        )
