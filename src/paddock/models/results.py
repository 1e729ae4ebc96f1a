"""Qualifying and race result models."""

from __future__ import annotations

from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field


class ResultEntry(BaseModel):
    """Classification columns shared by every results listing."""

    model_config = ConfigDict(frozen=True)

    position: str = ""
    number: str = ""
    driver: str = ""


class QualifyingResultRow(BaseModel):
    """One driver's qualifying line. Missing session times stay empty."""

    model_config = ConfigDict(frozen=True)

    entry: ResultEntry = Field(default_factory=ResultEntry)
    q1: str = ""
    q2: str = ""
    q3: str = ""


class RaceResultRow(BaseModel):
    """One driver's race line. ``race_time`` is empty for lapped or retired cars."""

    model_config = ConfigDict(frozen=True)

    entry: ResultEntry = Field(default_factory=ResultEntry)
    fastest_lap_time: str = ""
    race_time: str = ""


class QualifyingResults(NamedTuple):
    race_name: str
    rows: list[QualifyingResultRow]


class RaceResults(NamedTuple):
    race_name: str
    rows: list[RaceResultRow]
