"""Car class resolution by ordered substring rules."""

from __future__ import annotations

from collections.abc import Sequence

from actiming.constants import OTHER_CLASS
from actiming.models.rules import CarClassRule


def get_car_class(
    car_name: str,
    car_model: str,
    rules: Sequence[CarClassRule] = (),
) -> str:
    """Return the name of the first rule matching the car, or "Other".

    Rules are scanned in the given order and the first hit wins, even if a
    later rule has a longer or more specific pattern. A pattern matches when
    it is a case-insensitive substring of either the display name or the
    model key.
    """
    name = (car_name or "").upper()
    model = (car_model or "").upper()

    for rule in rules:
        for pattern in rule.patterns:
            p = pattern.upper()
            if p in name or p in model:
                return rule.name

    return OTHER_CLASS
