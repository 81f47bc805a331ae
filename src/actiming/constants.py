"""Shared constants for the live timing engine."""

from __future__ import annotations

from actiming.models.rules import CarClassRule

# Telemetry reports "no time" as roughly 2**31 seconds in nanoseconds
SENTINEL_NS = 2_147_483_647_000_000
NS_PER_MS = 1_000_000

OTHER_CLASS = "Other"
ALL_CLASSES = "All"
UNKNOWN_DRIVER = "Unknown"

DEFAULT_SERVER_URL = "https://ac8.yoklmnracing.ru/api/live-timings/leaderboard.json"
DEFAULT_PARTICIPANTS_CSV_URL = ""

DEFAULT_CLASS_RULES: tuple[CarClassRule, ...] = (
    CarClassRule(name="Серебро", patterns=("SUPER-PRODUCTION",)),
    CarClassRule(name="Бронза", patterns=("Concept C GT",)),
)

DEFAULT_PACE_PERCENT_THRESHOLD = 107
MIN_PACE_PERCENT_THRESHOLD = 101
MAX_PACE_PERCENT_THRESHOLD = 115

# Width of the amber band just below the pace threshold
WARNING_BAND_OFFSET = 2

# Shared car-name words needed before a declared car counts as a match
CAR_TOKEN_MIN_OVERLAP = 2

DEFAULT_REFRESH_INTERVAL = 5 * 60.0
