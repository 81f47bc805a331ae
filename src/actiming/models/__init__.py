"""Live timing data models."""

from actiming.models.entry import ProcessedEntry, ProcessedLeaderboard
from actiming.models.participant import NormalizedParticipant, RawParticipant
from actiming.models.rules import CarClassRule
from actiming.models.telemetry import CarInfo, LeaderboardPayload, RawCar, RawDriver, SplitTime

__all__ = [
    "CarClassRule",
    "CarInfo",
    "LeaderboardPayload",
    "NormalizedParticipant",
    "ProcessedEntry",
    "ProcessedLeaderboard",
    "RawCar",
    "RawDriver",
    "RawParticipant",
    "SplitTime",
]
