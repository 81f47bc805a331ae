"""Roster CSV parsing and participant normalisation.

Expected columns (0-indexed), header row first::

    0: Position   1: Driver   2: Country   3: City
    4: Team ("-" or empty when none)   5: Class   6: Car
"""

from __future__ import annotations

from collections.abc import Iterable

from actiming.models.participant import NormalizedParticipant, RawParticipant
from actiming.names import has_declared_car, normalize_text, to_car_tokens, to_name_key

MIN_COLUMNS = 7

DRIVER_COL = 1
TEAM_COL = 4
CLASS_COL = 5
CAR_COL = 6


def parse_roster_line(line: str) -> RawParticipant | None:
    """Parse one data row, or None if it is short or has no driver."""
    cols = [c.strip() for c in line.split(",")]
    if len(cols) < MIN_COLUMNS:
        return None
    if not cols[DRIVER_COL]:
        return None
    team = cols[TEAM_COL]
    return RawParticipant(
        driver=cols[DRIVER_COL],
        team=None if not team or team == "-" else team,
        car_class=cols[CLASS_COL],
        car=cols[CAR_COL],
    )


def parse_roster(text: str) -> list[RawParticipant]:
    """Parse roster text, skipping the header and malformed rows.

    Fields are split on bare commas; quoted fields are not supported.
    """
    participants = []
    for line in text.split("\n")[1:]:
        participant = parse_roster_line(line)
        if participant is not None:
            participants.append(participant)
    return participants


def normalize_participant(participant: RawParticipant) -> NormalizedParticipant:
    return NormalizedParticipant(
        name_key=to_name_key(participant.driver),
        car_class=normalize_text(participant.car_class),
        has_declared_car=has_declared_car(participant.car),
        car_tokens=to_car_tokens(participant.car),
    )


def normalize_participants(
    participants: Iterable[RawParticipant],
) -> list[NormalizedParticipant]:
    return [normalize_participant(p) for p in participants]
