"""Canonical leaderboard entry models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ProcessedEntry(BaseModel):
    """One driver/car combination with lap times in milliseconds."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str
    driver_name: str
    car_name: str
    car_model: str
    car_class: str
    team_name: str = ""
    best_lap: int | None = None
    splits: tuple[int | None, ...] = ()
    best_lap_splits: tuple[int | None, ...] = ()
    theoretical_best_lap: int | None = None
    lap_count: int = 0

    @property
    def has_splits(self) -> bool:
        """True when either split array carries at least one sector."""
        return bool(self.splits or self.best_lap_splits)


class ProcessedLeaderboard(BaseModel):
    """Sorted entries plus session metadata, or an error state."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    leaderboard: tuple[ProcessedEntry, ...] = ()
    server_name: str = ""
    track: str = ""
    session_name: str = ""
    last_update: datetime | None = None
    error: str | None = None
