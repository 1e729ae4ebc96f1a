"""paddock data models."""

from paddock.models.bet import Bet
from paddock.models.event import Event
from paddock.models.results import (
    QualifyingResultRow,
    QualifyingResults,
    RaceResultRow,
    RaceResults,
    ResultEntry,
)
from paddock.models.standings import (
    ConstructorStanding,
    ConstructorStandings,
    DriverStanding,
    DriverStandings,
)
from paddock.models.user import User

__all__ = [
    "Bet",
    "ConstructorStanding",
    "ConstructorStandings",
    "DriverStanding",
    "DriverStandings",
    "Event",
    "QualifyingResultRow",
    "QualifyingResults",
    "RaceResultRow",
    "RaceResults",
    "ResultEntry",
    "User",
]
