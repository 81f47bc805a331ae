"""Roster participant models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class RawParticipant(BaseModel):
    """One roster row: driver, class, optional team and declared car."""

    model_config = ConfigDict(frozen=True)

    driver: str
    car_class: str
    team: str | None = None
    car: str = ""


class NormalizedParticipant(BaseModel):
    """Roster row reduced to the keys used for registration matching."""

    model_config = ConfigDict(frozen=True)

    name_key: str
    car_class: str
    has_declared_car: bool
    car_tokens: tuple[str, ...] = ()
