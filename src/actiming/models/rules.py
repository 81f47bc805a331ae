"""Car class rule model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class CarClassRule(BaseModel):
    """Named class with case-insensitive substrings matched against car name or model."""

    model_config = ConfigDict(frozen=True)

    name: str
    patterns: tuple[str, ...] = ()
