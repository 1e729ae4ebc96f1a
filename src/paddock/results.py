"""Extraction of last-race results from Ergast response documents.

Missing race metadata or missing per-driver values are tolerated and come
back as empty strings. A missing results array is not: without it there is
nothing to show, so :class:`~paddock.exceptions.MissingDataError` is raised.
"""

from __future__ import annotations

from typing import Any

from paddock._document import DocumentPath, lookup_text, require_list
from paddock.models.results import (
    QualifyingResultRow,
    QualifyingResults,
    RaceResultRow,
    RaceResults,
    ResultEntry,
)

RACE: DocumentPath = ("MRData", "RaceTable", "Races", 0)
RACE_NAME: DocumentPath = (*RACE, "raceName")
QUALIFYING_ROWS: DocumentPath = (*RACE, "QualifyingResults")
RACE_ROWS: DocumentPath = (*RACE, "Results")


def _entry(row: Any) -> ResultEntry:
    return ResultEntry(
        position=lookup_text(row, ("position",)),
        number=lookup_text(row, ("number",)),
        driver=lookup_text(row, ("Driver", "code")),
    )


def parse_qualifying_results(document: dict[str, Any]) -> QualifyingResults:
    """Build qualifying rows from a ``qualifying.json`` document."""
    rows = [
        QualifyingResultRow(
            entry=_entry(row),
            q1=lookup_text(row, ("Q1",)),
            q2=lookup_text(row, ("Q2",)),
            q3=lookup_text(row, ("Q3",)),
        )
        for row in require_list(document, QUALIFYING_ROWS)
    ]
    return QualifyingResults(lookup_text(document, RACE_NAME), rows)


def parse_race_results(document: dict[str, Any]) -> RaceResults:
    """Build race rows from a ``results.json`` document."""
    rows = [
        RaceResultRow(
            entry=_entry(row),
            fastest_lap_time=lookup_text(row, ("FastestLap", "Time", "time")),
            race_time=lookup_text(row, ("Time", "time")),
        )
        for row in require_list(document, RACE_ROWS)
    ]
    return RaceResults(lookup_text(document, RACE_NAME), rows)
