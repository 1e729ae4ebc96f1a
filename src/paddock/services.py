"""One-shot coroutines for the web layer.

Each call builds its own store or client and keeps nothing afterwards, so
concurrent calls share no state.
"""

from __future__ import annotations

import os

from paddock.client import AsyncErgastClient
from paddock.constants import DEFAULT_BASE_URL, DEFAULT_STANDINGS_URL, DEFAULT_TIMEOUT
from paddock.models.bet import Bet
from paddock.models.event import Event
from paddock.models.results import QualifyingResults, RaceResults
from paddock.models.standings import ConstructorStandings, DriverStandings
from paddock.models.user import User
from paddock.stores import BetStore, EventStore, UserStore


async def fetch_qualifying_results(
    *,
    base_url: str = DEFAULT_BASE_URL,
    timeout: float = DEFAULT_TIMEOUT,
) -> QualifyingResults:
    async with AsyncErgastClient(base_url=base_url, timeout=timeout) as f1:
        return await f1.qualifying_results()


async def fetch_race_results(
    *,
    base_url: str = DEFAULT_BASE_URL,
    timeout: float = DEFAULT_TIMEOUT,
) -> RaceResults:
    async with AsyncErgastClient(base_url=base_url, timeout=timeout) as f1:
        return await f1.race_results()


async def fetch_driver_standings(
    *,
    standings_url: str = DEFAULT_STANDINGS_URL,
    timeout: float = DEFAULT_TIMEOUT,
) -> DriverStandings:
    async with AsyncErgastClient(timeout=timeout, standings_url=standings_url) as f1:
        return await f1.driver_standings()


async def fetch_constructor_standings(
    *,
    standings_url: str = DEFAULT_STANDINGS_URL,
    timeout: float = DEFAULT_TIMEOUT,
) -> ConstructorStandings:
    async with AsyncErgastClient(timeout=timeout, standings_url=standings_url) as f1:
        return await f1.constructor_standings()


async def fetch_bets(path: str | os.PathLike[str] | None = None) -> list[Bet]:
    return await BetStore(path).fetch_all()


async def fetch_users(path: str | os.PathLike[str] | None = None) -> list[User]:
    return await UserStore(path).fetch_all()


async def fetch_events(path: str | os.PathLike[str] | None = None) -> list[Event]:
    return await EventStore(path).fetch_all()
