"""Raw telemetry payload models as served by the timing server."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SplitTime(BaseModel):
    """Single sector split, in nanoseconds. Some servers emit fractional values."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    split_time: float | None = Field(default=None, alias="SplitTime")


class CarInfo(BaseModel):
    """Identity block of a driver."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    driver_name: str | None = Field(default=None, alias="DriverName")
    team_name: str = Field(default="", alias="TeamName")
    driver_guid: str = Field(default="", alias="DriverGUID")

    @field_validator("team_name", "driver_guid", mode="before")
    @classmethod
    def _null_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class RawCar(BaseModel):
    """Per-car timing data of one driver."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    car_name: str | None = Field(default=None, alias="CarName")
    best_lap: float | None = Field(default=None, alias="BestLap")
    best_splits: dict[int, SplitTime | None] | None = Field(default=None, alias="BestSplits")
    best_lap_splits: dict[int, SplitTime | None] | None = Field(default=None, alias="BestLapSplits")
    num_laps: float | None = Field(default=None, alias="NumLaps")


class RawDriver(BaseModel):
    """Driver record with a mapping of car model key to car data."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    car_info: CarInfo | None = Field(default=None, alias="CarInfo")
    cars: dict[str, RawCar] | None = Field(default=None, alias="Cars")


class LeaderboardPayload(BaseModel):
    """Top-level leaderboard document."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    connected_drivers: list[RawDriver] | None = Field(default=None, alias="ConnectedDrivers")
    disconnected_drivers: list[RawDriver] | None = Field(default=None, alias="DisconnectedDrivers")
    server_name: str | None = Field(default=None, alias="ServerName")
    track: str | None = Field(default=None, alias="Track")
    name: str | None = Field(default=None, alias="Name")
