"""Championship standings models."""

from __future__ import annotations

from typing import NamedTuple

from pydantic import BaseModel, ConfigDict


class DriverStanding(BaseModel):
    """One line of the drivers' championship. ``constructor`` is the current team."""

    model_config = ConfigDict(frozen=True)

    position: str = ""
    points: str = ""
    wins: str = ""
    driver: str = ""
    constructor: str = ""


class ConstructorStanding(BaseModel):
    """One line of the constructors' championship."""

    model_config = ConfigDict(frozen=True)

    position: str = ""
    points: str = ""
    wins: str = ""
    constructor: str = ""


class DriverStandings(NamedTuple):
    season: str
    round: str
    rows: list[DriverStanding]


class ConstructorStandings(NamedTuple):
    season: str
    round: str
    rows: list[ConstructorStanding]
