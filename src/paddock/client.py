"""Public client classes for the Ergast results API."""

from __future__ import annotations

from paddock._http import AsyncTransport, SyncTransport
from paddock.api_logging import log_api_call
from paddock.constants import (
    CONSTRUCTOR_STANDINGS_ENDPOINT,
    DEFAULT_BASE_URL,
    DEFAULT_STANDINGS_URL,
    DEFAULT_TIMEOUT,
    DRIVER_STANDINGS_ENDPOINT,
    QUALIFYING_ENDPOINT,
    RESULTS_ENDPOINT,
)
from paddock.models.results import QualifyingResults, RaceResults
from paddock.models.standings import ConstructorStandings, DriverStandings
from paddock.results import parse_qualifying_results, parse_race_results
from paddock.standings import parse_constructor_standings, parse_driver_standings


class ErgastClient:
    """Synchronous client for the current season: last race and standings.

    Usage:
        with ErgastClient() as f1:
            race_name, rows = f1.qualifying_results()
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        standings_url: str = DEFAULT_STANDINGS_URL,
    ) -> None:
        self._transport = SyncTransport(base_url=base_url, timeout=timeout)
        self._standings_url = standings_url.rstrip("/")

    def __enter__(self) -> ErgastClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    @log_api_call
    def qualifying_results(self) -> QualifyingResults:
        """Get the race name and Q1/Q2/Q3 times per driver."""
        return parse_qualifying_results(self._transport.get(QUALIFYING_ENDPOINT))

    @log_api_call
    def race_results(self) -> RaceResults:
        """Get the race name, race times and fastest laps per driver."""
        return parse_race_results(self._transport.get(RESULTS_ENDPOINT))

    @log_api_call
    def driver_standings(self) -> DriverStandings:
        """Get the current drivers' championship table."""
        url = self._standings_url + DRIVER_STANDINGS_ENDPOINT
        return parse_driver_standings(self._transport.get(url))

    @log_api_call
    def constructor_standings(self) -> ConstructorStandings:
        """Get the current constructors' championship table."""
        url = self._standings_url + CONSTRUCTOR_STANDINGS_ENDPOINT
        return parse_constructor_standings(self._transport.get(url))


class AsyncErgastClient:
    """Asynchronous client for the current season: last race and standings.

    Usage:
        async with AsyncErgastClient() as f1:
            race_name, rows = await f1.race_results()
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        standings_url: str = DEFAULT_STANDINGS_URL,
    ) -> None:
        self._transport = AsyncTransport(base_url=base_url, timeout=timeout)
        self._standings_url = standings_url.rstrip("/")

    async def __aenter__(self) -> AsyncErgastClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP connection."""
        await self._transport.close()

    @log_api_call
    async def qualifying_results(self) -> QualifyingResults:
        """Get the race name and Q1/Q2/Q3 times per driver."""
        return parse_qualifying_results(await self._transport.get(QUALIFYING_ENDPOINT))

    @log_api_call
    async def race_results(self) -> RaceResults:
        """Get the race name, race times and fastest laps per driver."""
        return parse_race_results(await self._transport.get(RESULTS_ENDPOINT))

    @log_api_call
    async def driver_standings(self) -> DriverStandings:
        """Get the current drivers' championship table."""
        url = self._standings_url + DRIVER_STANDINGS_ENDPOINT
        return parse_driver_standings(await self._transport.get(url))

    @log_api_call
    async def constructor_standings(self) -> ConstructorStandings:
        """Get the current constructors' championship table."""
        url = self._standings_url + CONSTRUCTOR_STANDINGS_ENDPOINT
        return parse_constructor_standings(await self._transport.get(url))
