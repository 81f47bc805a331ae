"""Shared test fixtures and sample timing payloads."""

from __future__ import annotations

import logging

import pytest

from actiming.models.entry import ProcessedEntry
from actiming.models.rules import CarClassRule

SERVER_URL = "https://timing.example.com/api/live-timings/leaderboard.json"
ROSTER_URL = "https://roster.example.com/participants.csv"

SENTINEL = 2147483647000000


def _split(ns: int | None) -> dict:
    return {} if ns is None else {"SplitTime": ns}


SAMPLE_DRIVER_IVANOV = {
    "CarInfo": {
        "DriverName": "Ivan Ivanov",
        "TeamName": "Elbrus Motorsport",
        "DriverGUID": "76561190000000001",
    },
    "Cars": {
        "lada_vesta_ng_sp": {
            "CarName": "LADA Vesta NG Super-production",
            "BestLap": 95234000000,
            "BestSplits": {
                "0": _split(30000000000),
                "1": _split(31000000000),
                "2": _split(32000000000),
            },
            "BestLapSplits": {
                "0": _split(30100000000),
                "1": _split(31900000000),
                "2": _split(33234000000),
            },
            "NumLaps": 12,
        },
    },
}

SAMPLE_DRIVER_PETROV = {
    "CarInfo": {
        "DriverName": "petrov  PETR",
        "TeamName": "",
        "DriverGUID": "76561190000000002",
    },
    "Cars": {
        "ks_audi_r8_lms": {
            "CarName": "Audi R8 LMS Concept C GT",
            "BestLap": 93500000000,
            "BestSplits": {
                "2": _split(31000000000),
                "0": _split(30000000000),
                "1": _split(SENTINEL),
            },
            "NumLaps": 8,
        },
    },
}

SAMPLE_DRIVER_NO_TIME = {
    "CarInfo": {
        "DriverName": "Slow Starter",
        "TeamName": "Privateer",
        "DriverGUID": "76561190000000003",
    },
    "Cars": {
        "hyundai_elantra_n_tcr": {
            "CarName": "Hyundai Elantra N TCR",
            "BestLap": SENTINEL,
            "NumLaps": 0,
        },
    },
}

SAMPLE_PAYLOAD = {
    "ServerName": "Yoklmn Racing #8",
    "Track": "moscow_raceway",
    "Name": "Practice",
    "ConnectedDrivers": [SAMPLE_DRIVER_IVANOV, SAMPLE_DRIVER_NO_TIME],
    "DisconnectedDrivers": [SAMPLE_DRIVER_PETROV],
}

SAMPLE_ROSTER_CSV = "\n".join([
    "Pos,Driver,Country,City,Team,Class,Car",
    "1,Ivanov Ivan,Russia,Moscow,Elbrus Motorsport,Серебро,LADA Vesta NG Super-production",
    "2,Petrov Petr,Russia,Kazan,-,Бронза,-",
    "3,Broken Row,Russia",
    "4,,Russia,Kazan,-,GT3,-",
    "5,Sidorov Sidor,Russia,Sochi,,GT4,Porsche 718 Cayman GT4 2019",
])

RULES = (
    CarClassRule(name="Серебро", patterns=("SUPER-PRODUCTION",)),
    CarClassRule(name="Бронза", patterns=("Concept C GT",)),
)


def make_entry(
    entry_id: str = "guid_model",
    driver_name: str = "Ivan Ivanov",
    car_name: str = "LADA Vesta NG Super-production",
    car_model: str = "lada_vesta_ng_sp",
    car_class: str = "Серебро",
    team_name: str = "",
    best_lap: int | None = 100000,
    splits: tuple[int | None, ...] = (),
    best_lap_splits: tuple[int | None, ...] = (),
    lap_count: int = 1,
) -> ProcessedEntry:
    theoretical = sum(splits) if splits and None not in splits else None  # type: ignore[arg-type]
    return ProcessedEntry(
        id=entry_id,
        driver_name=driver_name,
        car_name=car_name,
        car_model=car_model,
        car_class=car_class,
        team_name=team_name,
        best_lap=best_lap,
        splits=splits,
        best_lap_splits=best_lap_splits,
        theoretical_best_lap=theoretical,
        lap_count=lap_count,
    )


@pytest.fixture
def server_url() -> str:
    return SERVER_URL


@pytest.fixture
def roster_url() -> str:
    return ROSTER_URL


@pytest.fixture(autouse=True)
def _isolated_api_log(tmp_path):
    """Reset the module-level call logger and redirect its file to tmp_path."""
    import actiming.api_logging as mod

    old_dir, old_file = mod._LOG_DIR, mod._LOG_FILE

    named_logger = logging.getLogger("actiming.api")
    for h in named_logger.handlers[:]:
        h.close()
        named_logger.removeHandler(h)
    named_logger.propagate = True

    mod._logger = None
    mod._LOG_DIR = str(tmp_path)
    mod._LOG_FILE = str(tmp_path / "api_calls.log")

    yield tmp_path

    if mod._logger is not None:
        for h in mod._logger.handlers[:]:
            h.close()
            mod._logger.removeHandler(h)
    logging.getLogger("actiming.api").propagate = True
    mod._logger = None
    mod._LOG_DIR, mod._LOG_FILE = old_dir, old_file
