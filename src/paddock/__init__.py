"""paddock: CSV-backed bets, users and events plus last-race F1 results."""

from paddock.client import AsyncErgastClient, ErgastClient
from paddock.exceptions import (
    ErgastAPIError,
    ErgastConnectionError,
    ErgastDecodeError,
    ErgastError,
    ErgastTimeoutError,
    MissingDataError,
    PaddockError,
    RecordFormatError,
    RecordLengthError,
)
from paddock.models import (
    Bet,
    ConstructorStanding,
    ConstructorStandings,
    DriverStanding,
    DriverStandings,
    Event,
    QualifyingResultRow,
    QualifyingResults,
    RaceResultRow,
    RaceResults,
    ResultEntry,
    User,
)
from paddock.schedule import find_next_event, resolve_search, users_to_notify
from paddock.scoring import score_bet, score_bets
from paddock.services import (
    fetch_bets,
    fetch_constructor_standings,
    fetch_driver_standings,
    fetch_events,
    fetch_qualifying_results,
    fetch_race_results,
    fetch_users,
)
from paddock.stores import BetStore, EventStore, UserStore

__all__ = [
    "AsyncErgastClient",
    "Bet",
    "BetStore",
    "ConstructorStanding",
    "ConstructorStandings",
    "DriverStanding",
    "DriverStandings",
    "ErgastAPIError",
    "ErgastClient",
    "ErgastConnectionError",
    "ErgastDecodeError",
    "ErgastError",
    "ErgastTimeoutError",
    "Event",
    "EventStore",
    "MissingDataError",
    "PaddockError",
    "QualifyingResultRow",
    "QualifyingResults",
    "RaceResultRow",
    "RaceResults",
    "RecordFormatError",
    "RecordLengthError",
    "ResultEntry",
    "User",
    "UserStore",
    "fetch_bets",
    "fetch_constructor_standings",
    "fetch_driver_standings",
    "fetch_events",
    "fetch_qualifying_results",
    "fetch_race_results",
    "fetch_users",
    "find_next_event",
    "resolve_search",
    "score_bet",
    "score_bets",
    "users_to_notify",
]

__version__ = "0.1.0"
