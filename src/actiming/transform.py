"""Transform raw telemetry payloads into canonical leaderboard entries."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping, Sequence

from actiming.classify import get_car_class
from actiming.constants import NS_PER_MS, SENTINEL_NS, UNKNOWN_DRIVER
from actiming.models.entry import ProcessedEntry
from actiming.models.rules import CarClassRule
from actiming.models.telemetry import LeaderboardPayload, RawCar, RawDriver, SplitTime
from actiming.sorting import sort_entries


def ns_to_ms(ns: float | None) -> int | None:
    """Convert nanoseconds to rounded milliseconds.

    Missing values and values at or above the sentinel mean "no time".
    Halves round up; fractional nanoseconds are accepted.
    """
    if ns is None or ns >= SENTINEL_NS:
        return None
    return math.floor(ns / NS_PER_MS + 0.5)


def collect_splits(
    splits: Mapping[int, SplitTime | None] | None,
) -> tuple[int | None, ...]:
    """Order sparse sector splits by numeric index and convert to ms.

    Missing or sentinel splits stay in place as None.
    """
    if not splits:
        return ()
    return tuple(
        ns_to_ms(split.split_time if split is not None else None)
        for _, split in sorted(splits.items())
    )


def theoretical_best(splits: Sequence[int | None]) -> int | None:
    """Sum of splits, or None if there are none or any is missing."""
    if not splits or any(s is None for s in splits):
        return None
    return sum(s for s in splits if s is not None)


def process_car(
    driver_name: str,
    team_name: str,
    driver_guid: str,
    car_model: str,
    car: RawCar,
    rules: Sequence[CarClassRule] = (),
) -> ProcessedEntry:
    """Build one leaderboard entry from a driver's car record."""
    car_name = car.car_name or car_model
    splits = collect_splits(car.best_splits)

    return ProcessedEntry(
        id=f"{driver_guid}_{car_model}",
        driver_name=driver_name,
        car_name=car_name,
        car_model=car_model,
        car_class=get_car_class(car_name, car_model, rules),
        team_name=team_name,
        best_lap=ns_to_ms(car.best_lap),
        splits=splits,
        best_lap_splits=collect_splits(car.best_lap_splits),
        theoretical_best_lap=theoretical_best(splits),
        lap_count=max(0, int(car.num_laps or 0)),
    )


def process_drivers(
    drivers: Iterable[RawDriver],
    rules: Sequence[CarClassRule] = (),
) -> list[ProcessedEntry]:
    """Flatten driver records into entries, one per car, without sorting."""
    results: list[ProcessedEntry] = []

    for driver in drivers:
        info = driver.car_info
        if info is None:
            driver_name, team_name, driver_guid = UNKNOWN_DRIVER, "", ""
        else:
            driver_name = info.driver_name if info.driver_name is not None else UNKNOWN_DRIVER
            team_name, driver_guid = info.team_name, info.driver_guid

        for car_model, car in (driver.cars or {}).items():
            results.append(
                process_car(driver_name, team_name, driver_guid, car_model, car, rules)
            )

    return results


def normalize_payload(
    payload: LeaderboardPayload,
    rules: Sequence[CarClassRule] = (),
) -> list[ProcessedEntry]:
    """Entries for connected then disconnected drivers, in payload order."""
    entries = process_drivers(payload.connected_drivers or (), rules)
    entries.extend(process_drivers(payload.disconnected_drivers or (), rules))
    return entries


def process_leaderboard(
    payload: LeaderboardPayload,
    rules: Sequence[CarClassRule] = (),
) -> list[ProcessedEntry]:
    """Normalize, classify and sort a payload by best lap, untimed entries last."""
    return sort_entries(normalize_payload(payload, rules))
