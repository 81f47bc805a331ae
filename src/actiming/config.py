"""Engine settings supplied by the host application."""

from __future__ import annotations

import logging
import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from actiming.constants import (
    DEFAULT_CLASS_RULES,
    DEFAULT_PACE_PERCENT_THRESHOLD,
    DEFAULT_PARTICIPANTS_CSV_URL,
    DEFAULT_REFRESH_INTERVAL,
    DEFAULT_SERVER_URL,
    MAX_PACE_PERCENT_THRESHOLD,
    MIN_PACE_PERCENT_THRESHOLD,
)
from actiming.matcher import MatchMode
from actiming.models.rules import CarClassRule

logger = logging.getLogger(__name__)

_RULES_ADAPTER = TypeAdapter(list[CarClassRule])


def normalize_threshold_value(value: Any) -> int:
    """Round a stored threshold into the allowed range, else use the default."""
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        return DEFAULT_PACE_PERCENT_THRESHOLD
    rounded = math.floor(value + 0.5)
    if rounded < MIN_PACE_PERCENT_THRESHOLD or rounded > MAX_PACE_PERCENT_THRESHOLD:
        return DEFAULT_PACE_PERCENT_THRESHOLD
    return rounded


def validate_pace_percent_threshold(value: str) -> str | None:
    """Validate threshold text input; return an error message or None."""
    trimmed = value.strip()
    if not trimmed:
        return "Threshold is required."

    try:
        numeric = float(trimmed)
    except ValueError:
        return "Threshold must be an integer."
    if not math.isfinite(numeric) or not numeric.is_integer():
        return "Threshold must be an integer."

    if numeric < MIN_PACE_PERCENT_THRESHOLD or numeric > MAX_PACE_PERCENT_THRESHOLD:
        return (
            f"Threshold must be between {MIN_PACE_PERCENT_THRESHOLD} "
            f"and {MAX_PACE_PERCENT_THRESHOLD}."
        )
    return None


def parse_threshold_input(value: str) -> int:
    """Committed threshold for text input; invalid text falls back to the default."""
    if validate_pace_percent_threshold(value) is not None:
        return DEFAULT_PACE_PERCENT_THRESHOLD
    return int(float(value.strip()))


def parse_class_rules(raw: str | None) -> list[CarClassRule]:
    """Parse a JSON list of class rules; malformed input yields no rules."""
    if not raw:
        return []
    try:
        return _RULES_ADAPTER.validate_json(raw)
    except ValidationError as exc:
        logger.warning("Failed to parse car class rules: %s", exc)
        return []


class TimingSettings(BaseModel):
    """Configuration consumed by the engine.

    Usage:
        settings = TimingSettings(participants_csv_url="https://example.com/roster.csv")
        settings.match_mode  # MatchMode.STRICT
    """

    model_config = ConfigDict(frozen=True)

    server_url: str = DEFAULT_SERVER_URL
    car_classes: tuple[CarClassRule, ...] = DEFAULT_CLASS_RULES
    participants_csv_url: str = DEFAULT_PARTICIPANTS_CSV_URL
    pace_percent_threshold: int = DEFAULT_PACE_PERCENT_THRESHOLD
    match_by_driver_name_only: bool = False
    refresh_interval: float = Field(default=DEFAULT_REFRESH_INTERVAL, gt=0)

    @field_validator("pace_percent_threshold", mode="before")
    @classmethod
    def _normalize_threshold(cls, value: Any) -> int:
        return normalize_threshold_value(value)

    @field_validator("server_url", "participants_csv_url", mode="before")
    @classmethod
    def _strip_url(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @property
    def match_mode(self) -> MatchMode:
        return MatchMode.from_flag(self.match_by_driver_name_only)
