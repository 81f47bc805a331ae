"""actiming: live timing leaderboard engine for racing simulator servers."""

from actiming._filters import LeaderboardFilter, available_classes
from actiming.classify import get_car_class
from actiming.client import AsyncLiveTimingClient, LiveTimingClient
from actiming.config import TimingSettings
from actiming.exceptions import (
    ACTimingAPIError,
    ACTimingConnectionError,
    ACTimingError,
    ACTimingTimeoutError,
    ACTimingValidationError,
)
from actiming.matcher import MatchMode, RegistrationMatcher
from actiming.pace import BadgeSeverity, build_leaderboard_view, entry_metrics
from actiming.registry import ParticipantRegistry
from actiming.session import LiveTimingSession
from actiming.sorting import SortField, sort_entries
from actiming.transform import normalize_payload, process_leaderboard

__all__ = [
    "ACTimingAPIError",
    "ACTimingConnectionError",
    "ACTimingError",
    "ACTimingTimeoutError",
    "ACTimingValidationError",
    "AsyncLiveTimingClient",
    "BadgeSeverity",
    "LeaderboardFilter",
    "LiveTimingClient",
    "LiveTimingSession",
    "MatchMode",
    "ParticipantRegistry",
    "RegistrationMatcher",
    "SortField",
    "TimingSettings",
    "available_classes",
    "build_leaderboard_view",
    "entry_metrics",
    "get_car_class",
    "normalize_payload",
    "process_leaderboard",
    "sort_entries",
]

__version__ = "0.1.0"
