"""Public client classes for the timing server and the roster host."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timezone
from typing import Any

from pydantic import ValidationError

from actiming._http import DEFAULT_TIMEOUT, AsyncTransport, SyncTransport
from actiming.api_logging import log_api_call
from actiming.exceptions import ACTimingValidationError
from actiming.models.entry import ProcessedLeaderboard
from actiming.models.participant import RawParticipant
from actiming.models.rules import CarClassRule
from actiming.models.telemetry import LeaderboardPayload
from actiming.names import normalize_driver_name
from actiming.roster import parse_roster
from actiming.transform import process_leaderboard


def _validate_payload(data: Any) -> LeaderboardPayload:
    """Validate decoded JSON against the telemetry payload model."""
    try:
        return LeaderboardPayload.model_validate(data)
    except ValidationError as exc:
        raise ACTimingValidationError(
            f"Failed to validate leaderboard response: {exc}"
        ) from exc


def _build_leaderboard(
    payload: LeaderboardPayload,
    rules: Sequence[CarClassRule],
) -> ProcessedLeaderboard:
    entries = [
        entry.model_copy(update={"driver_name": normalize_driver_name(entry.driver_name)})
        for entry in process_leaderboard(payload, rules)
    ]
    return ProcessedLeaderboard(
        leaderboard=tuple(entries),
        server_name=payload.server_name or "",
        track=payload.track or "",
        session_name=payload.name or "",
        last_update=datetime.now(timezone.utc),
    )


class LiveTimingClient:
    """Synchronous client for a live timing server and a participants roster.

    Usage:
        client = LiveTimingClient()
        board = client.leaderboard(server_url, rules)
        client.close()

        # Or as a context manager:
        with LiveTimingClient() as client:
            rows = client.participants(csv_url)
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._transport = SyncTransport(timeout=timeout)

    def __enter__(self) -> LiveTimingClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    def _get_json(self, url: str) -> Any:
        try:
            return self._transport.get_json(url)
        except ValueError as exc:
            raise ACTimingValidationError(f"Invalid JSON from {url}: {exc}") from exc

    @log_api_call
    def payload(self, server_url: str) -> LeaderboardPayload:
        """Get the raw telemetry document."""
        return _validate_payload(self._get_json(server_url))

    @log_api_call
    def leaderboard(
        self,
        server_url: str,
        rules: Sequence[CarClassRule] = (),
    ) -> ProcessedLeaderboard:
        """Get the classified leaderboard sorted by best lap."""
        return _build_leaderboard(self.payload(server_url), rules)

    @log_api_call
    def participants(self, csv_url: str) -> list[RawParticipant]:
        """Get the participants roster."""
        return parse_roster(self._transport.get_text(csv_url))


class AsyncLiveTimingClient:
    """Asynchronous client for a live timing server and a participants roster.

    Usage:
        async with AsyncLiveTimingClient() as client:
            board = await client.leaderboard(server_url, rules)
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._transport = AsyncTransport(timeout=timeout)

    async def __aenter__(self) -> AsyncLiveTimingClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP connection."""
        await self._transport.close()

    async def _get_json(self, url: str) -> Any:
        try:
            return await self._transport.get_json(url)
        except ValueError as exc:
            raise ACTimingValidationError(f"Invalid JSON from {url}: {exc}") from exc

    @log_api_call
    async def payload(self, server_url: str) -> LeaderboardPayload:
        """Get the raw telemetry document."""
        return _validate_payload(await self._get_json(server_url))

    @log_api_call
    async def leaderboard(
        self,
        server_url: str,
        rules: Sequence[CarClassRule] = (),
    ) -> ProcessedLeaderboard:
        """Get the classified leaderboard sorted by best lap."""
        return _build_leaderboard(await self.payload(server_url), rules)

    @log_api_call
    async def participants(self, csv_url: str) -> list[RawParticipant]:
        """Get the participants roster."""
        return parse_roster(await self._transport.get_text(csv_url))
