"""Extraction of championship standings from Ergast response documents.

Season and round metadata and per-line values are tolerated when missing;
a missing standings array raises :class:`~paddock.exceptions.MissingDataError`.
"""

from __future__ import annotations

from typing import Any

from paddock._document import DocumentPath, lookup, lookup_text, require_list
from paddock.models.standings import (
    ConstructorStanding,
    ConstructorStandings,
    DriverStanding,
    DriverStandings,
)

TABLE: DocumentPath = ("MRData", "StandingsTable")
SEASON: DocumentPath = (*TABLE, "season")
ROUND: DocumentPath = (*TABLE, "round")
DRIVER_ROWS: DocumentPath = (*TABLE, "StandingsLists", 0, "DriverStandings")
CONSTRUCTOR_ROWS: DocumentPath = (*TABLE, "StandingsLists", 0, "ConstructorStandings")


def _current_team(row: Any) -> str:
    # Drivers who changed teams list every constructor; the last is current
    teams = lookup(row, ("Constructors",))
    if isinstance(teams, list) and teams:
        return lookup_text(teams[-1], ("name",))
    return ""


def parse_driver_standings(document: dict[str, Any]) -> DriverStandings:
    """Build the drivers' table from a ``driverStandings.json`` document."""
    rows = [
        DriverStanding(
            position=lookup_text(row, ("position",)),
            points=lookup_text(row, ("points",)),
            wins=lookup_text(row, ("wins",)),
            driver=lookup_text(row, ("Driver", "code")),
            constructor=_current_team(row),
        )
        for row in require_list(document, DRIVER_ROWS)
    ]
    return DriverStandings(lookup_text(document, SEASON), lookup_text(document, ROUND), rows)


def parse_constructor_standings(document: dict[str, Any]) -> ConstructorStandings:
    """Build the constructors' table from a ``constructorStandings.json`` document."""
    rows = [
        ConstructorStanding(
            position=lookup_text(row, ("position",)),
            points=lookup_text(row, ("points",)),
            wins=lookup_text(row, ("wins",)),
            constructor=lookup_text(row, ("Constructor", "name")),
        )
        for row in require_list(document, CONSTRUCTOR_ROWS)
    ]
    return ConstructorStandings(lookup_text(document, SEASON), lookup_text(document, ROUND), rows)
