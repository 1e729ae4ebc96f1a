"""Shared test fixtures and sample API responses."""

from __future__ import annotations

import copy
from typing import Any

import pytest

BASE_URL = "https://api.jolpi.ca/ergast/f1/current/last"
STANDINGS_URL = "https://api.jolpi.ca/ergast/f1/current"


def _driver(code: str) -> dict[str, str]:
    return {"driverId": code.lower(), "code": code, "givenName": "", "familyName": ""}


SAMPLE_QUALIFYING: dict[str, Any] = {
    "MRData": {
        "series": "f1",
        "RaceTable": {
            "season": "2024",
            "round": "8",
            "Races": [
                {
                    "season": "2024",
                    "round": "8",
                    "raceName": "Monaco Grand Prix",
                    "QualifyingResults": [
                        {
                            "number": "16",
                            "position": "1",
                            "Driver": _driver("LEC"),
                            "Q1": "1:11.584",
                            "Q2": "1:10.825",
                            "Q3": "1:10.270",
                        },
                        {
                            "number": "81",
                            "position": "2",
                            "Driver": _driver("PIA"),
                            "Q1": "1:11.500",
                            "Q2": "1:11.075",
                            "Q3": "1:10.424",
                        },
                        {
                            "number": "22",
                            "position": "11",
                            "Driver": _driver("TSU"),
                            "Q1": "1:11.482",
                            "Q2": "1:11.653",
                        },
                    ],
                }
            ],
        },
    }
}

SAMPLE_RESULTS: dict[str, Any] = {
    "MRData": {
        "series": "f1",
        "RaceTable": {
            "season": "2024",
            "round": "8",
            "Races": [
                {
                    "season": "2024",
                    "round": "8",
                    "raceName": "Monaco Grand Prix",
                    "Results": [
                        {
                            "number": "16",
                            "position": "1",
                            "points": "25",
                            "Driver": _driver("LEC"),
                            "status": "Finished",
                            "Time": {"millis": "8078867", "time": "2:23:15.554"},
                            "FastestLap": {
                                "rank": "4",
                                "lap": "66",
                                "Time": {"time": "1:14.947"},
                            },
                        },
                        {
                            "number": "81",
                            "position": "2",
                            "points": "18",
                            "Driver": _driver("PIA"),
                            "status": "Finished",
                            "Time": {"millis": "8086019", "time": "+7.152"},
                            "FastestLap": {
                                "rank": "6",
                                "lap": "68",
                                "Time": {"time": "1:15.075"},
                            },
                        },
                        {
                            "number": "11",
                            "position": "20",
                            "points": "0",
                            "Driver": _driver("PER"),
                            "status": "Accident",
                        },
                    ],
                }
            ],
        },
    }
}

SAMPLE_DRIVER_STANDINGS: dict[str, Any] = {
    "MRData": {
        "series": "f1",
        "StandingsTable": {
            "season": "2024",
            "round": "8",
            "StandingsLists": [
                {
                    "season": "2024",
                    "round": "8",
                    "DriverStandings": [
                        {
                            "position": "1",
                            "positionText": "1",
                            "points": "169",
                            "wins": "5",
                            "Driver": _driver("VER"),
                            "Constructors": [{"constructorId": "red_bull", "name": "Red Bull"}],
                        },
                        {
                            "position": "2",
                            "positionText": "2",
                            "points": "138",
                            "wins": "1",
                            "Driver": _driver("LEC"),
                            "Constructors": [{"constructorId": "ferrari", "name": "Ferrari"}],
                        },
                        {
                            "position": "20",
                            "positionText": "20",
                            "points": "0",
                            "wins": "0",
                            "Driver": _driver("BEA"),
                            "Constructors": [
                                {"constructorId": "ferrari", "name": "Ferrari"},
                                {"constructorId": "haas", "name": "Haas F1 Team"},
                            ],
                        },
                    ],
                }
            ],
        },
    }
}

SAMPLE_CONSTRUCTOR_STANDINGS: dict[str, Any] = {
    "MRData": {
        "series": "f1",
        "StandingsTable": {
            "season": "2024",
            "round": "8",
            "StandingsLists": [
                {
                    "season": "2024",
                    "round": "8",
                    "ConstructorStandings": [
                        {
                            "position": "1",
                            "points": "276",
                            "wins": "5",
                            "Constructor": {"constructorId": "red_bull", "name": "Red Bull"},
                        },
                        {
                            "position": "2",
                            "points": "252",
                            "wins": "2",
                            "Constructor": {"constructorId": "ferrari", "name": "Ferrari"},
                        },
                    ],
                }
            ],
        },
    }
}

SAMPLE_BETS_CSV = (
    "monaco,alice,LEC,PIA,SAI,30\n"
    "monaco,bob,VER,NOR,LEC,10\n"
    "\n"
    "monaco,carol,LEC,SAI,NOR,20\n"
)

SAMPLE_USERS_CSV = (
    "alice,Europe/Lisbon,42,#formula1:#motorsport\n"
    "bob,America/New_York,0,\n"
)

SAMPLE_EVENTS_CSV = (
    "[Formula 1],Monaco Grand Prix,Qualifying,2024-05-25 14:00:00 UTC,#formula1,,notify\n"
    "[Formula 2],Monaco,Feature Race,2024-05-26 08:40:00 UTC,#formula1,,\n"
    "[Formula 1],Monaco Grand Prix,Race,2024-05-26 13:00:00 UTC,#formula1,https://example.com/monaco,notify\n"
)


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def qualifying_payload() -> dict[str, Any]:
    return copy.deepcopy(SAMPLE_QUALIFYING)


@pytest.fixture
def results_payload() -> dict[str, Any]:
    return copy.deepcopy(SAMPLE_RESULTS)


@pytest.fixture
def driver_standings_payload() -> dict[str, Any]:
    return copy.deepcopy(SAMPLE_DRIVER_STANDINGS)


@pytest.fixture
def constructor_standings_payload() -> dict[str, Any]:
    return copy.deepcopy(SAMPLE_CONSTRUCTOR_STANDINGS)


@pytest.fixture
def data_dir(tmp_path):
    """A directory holding sample bets, users and events files."""
    (tmp_path / "bets.csv").write_text(SAMPLE_BETS_CSV, encoding="utf-8")
    (tmp_path / "users.csv").write_text(SAMPLE_USERS_CSV, encoding="utf-8")
    (tmp_path / "events.csv").write_text(SAMPLE_EVENTS_CSV, encoding="utf-8")
    return tmp_path
