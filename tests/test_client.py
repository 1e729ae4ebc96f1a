"""Tests for the Ergast client classes."""

from __future__ import annotations

import httpx
import pytest
import respx

from paddock import AsyncErgastClient, ErgastClient
from paddock.exceptions import ErgastAPIError, ErgastConnectionError, MissingDataError
from paddock.models import ConstructorStanding, DriverStanding, QualifyingResultRow, RaceResultRow
from tests.conftest import (
    SAMPLE_CONSTRUCTOR_STANDINGS,
    SAMPLE_DRIVER_STANDINGS,
    SAMPLE_QUALIFYING,
    SAMPLE_RESULTS,
    STANDINGS_URL,
)

BASE_URL = "https://api.jolpi.ca/ergast/f1/current/last"


class TestErgastClient:
    @respx.mock
    def test_qualifying_results(self) -> None:
        respx.get(f"{BASE_URL}/qualifying.json").mock(
            return_value=httpx.Response(200, json=SAMPLE_QUALIFYING)
        )
        with ErgastClient() as f1:
            race_name, rows = f1.qualifying_results()
        assert race_name == "Monaco Grand Prix"
        assert len(rows) == 3
        assert isinstance(rows[0], QualifyingResultRow)
        assert rows[2].q3 == ""

    @respx.mock
    def test_race_results(self) -> None:
        respx.get(f"{BASE_URL}/results.json").mock(
            return_value=httpx.Response(200, json=SAMPLE_RESULTS)
        )
        with ErgastClient() as f1:
            results = f1.race_results()
        assert results.race_name == "Monaco Grand Prix"
        assert isinstance(results.rows[0], RaceResultRow)
        assert results.rows[0].race_time == "2:23:15.554"

    @respx.mock
    def test_missing_results_array(self) -> None:
        respx.get(f"{BASE_URL}/qualifying.json").mock(
            return_value=httpx.Response(200, json={"MRData": {"RaceTable": {"Races": []}}})
        )
        with ErgastClient() as f1:
            with pytest.raises(MissingDataError):
                f1.qualifying_results()

    @respx.mock
    def test_api_error_propagates(self) -> None:
        respx.get(f"{BASE_URL}/results.json").mock(
            return_value=httpx.Response(503, text="Service Unavailable")
        )
        with ErgastClient() as f1:
            with pytest.raises(ErgastAPIError) as exc_info:
                f1.race_results()
        assert exc_info.value.status_code == 503

    @respx.mock
    def test_single_request_per_call(self) -> None:
        route = respx.get(f"{BASE_URL}/results.json").mock(
            return_value=httpx.Response(500, text="boom")
        )
        with ErgastClient() as f1:
            with pytest.raises(ErgastAPIError):
                f1.race_results()
        assert route.call_count == 1


    @respx.mock
    def test_driver_standings(self) -> None:
        respx.get(f"{STANDINGS_URL}/driverStandings.json").mock(
            return_value=httpx.Response(200, json=SAMPLE_DRIVER_STANDINGS)
        )
        with ErgastClient() as f1:
            standings = f1.driver_standings()
        assert standings.season == "2024"
        assert isinstance(standings.rows[0], DriverStanding)
        assert standings.rows[0].points == "169"

    @respx.mock
    def test_standings_and_results_share_client(self) -> None:
        results = respx.get(f"{BASE_URL}/results.json").mock(
            return_value=httpx.Response(200, json=SAMPLE_RESULTS)
        )
        standings = respx.get(f"{STANDINGS_URL}/constructorStandings.json").mock(
            return_value=httpx.Response(200, json=SAMPLE_CONSTRUCTOR_STANDINGS)
        )
        with ErgastClient() as f1:
            f1.race_results()
            f1.constructor_standings()
        assert results.call_count == 1
        assert standings.call_count == 1

    @respx.mock
    def test_custom_standings_url(self) -> None:
        route = respx.get("https://mirror.example.com/f1/2023/constructorStandings.json").mock(
            return_value=httpx.Response(200, json=SAMPLE_CONSTRUCTOR_STANDINGS)
        )
        with ErgastClient(standings_url="https://mirror.example.com/f1/2023/") as f1:
            f1.constructor_standings()
        assert route.called

    @respx.mock
    def test_missing_standings_array(self) -> None:
        respx.get(f"{STANDINGS_URL}/driverStandings.json").mock(
            return_value=httpx.Response(200, json={"MRData": {"StandingsTable": {"StandingsLists": []}}})
        )
        with ErgastClient() as f1:
            with pytest.raises(MissingDataError):
                f1.driver_standings()


class TestAsyncErgastClient:
    @respx.mock
    @pytest.mark.asyncio
    async def test_qualifying_results(self) -> None:
        respx.get(f"{BASE_URL}/qualifying.json").mock(
            return_value=httpx.Response(200, json=SAMPLE_QUALIFYING)
        )
        async with AsyncErgastClient() as f1:
            race_name, rows = await f1.qualifying_results()
        assert race_name == "Monaco Grand Prix"
        assert [r.entry.driver for r in rows] == ["LEC", "PIA", "TSU"]

    @respx.mock
    @pytest.mark.asyncio
    async def test_race_results(self) -> None:
        respx.get(f"{BASE_URL}/results.json").mock(
            return_value=httpx.Response(200, json=SAMPLE_RESULTS)
        )
        async with AsyncErgastClient() as f1:
            race_name, rows = await f1.race_results()
        assert race_name == "Monaco Grand Prix"
        assert rows[1].fastest_lap_time == "1:15.075"

    @respx.mock
    @pytest.mark.asyncio
    async def test_connection_error(self) -> None:
        respx.get(f"{BASE_URL}/results.json").mock(side_effect=httpx.ConnectError("fail"))
        async with AsyncErgastClient() as f1:
            with pytest.raises(ErgastConnectionError):
                await f1.race_results()

    @respx.mock
    @pytest.mark.asyncio
    async def test_driver_standings(self) -> None:
        respx.get(f"{STANDINGS_URL}/driverStandings.json").mock(
            return_value=httpx.Response(200, json=SAMPLE_DRIVER_STANDINGS)
        )
        async with AsyncErgastClient() as f1:
            _, _, rows = await f1.driver_standings()
        assert [r.constructor for r in rows] == ["Red Bull", "Ferrari", "Haas F1 Team"]

    @respx.mock
    @pytest.mark.asyncio
    async def test_constructor_standings(self) -> None:
        respx.get(f"{STANDINGS_URL}/constructorStandings.json").mock(
            return_value=httpx.Response(200, json=SAMPLE_CONSTRUCTOR_STANDINGS)
        )
        async with AsyncErgastClient() as f1:
            standings = await f1.constructor_standings()
        assert standings.rows[1] == ConstructorStanding(
            position="2", points="252", wins="2", constructor="Ferrari",
        )

    @pytest.mark.asyncio
    async def test_timeout_configures_client(self) -> None:
        async with AsyncErgastClient(timeout=0.5) as f1:
            assert f1._transport._client.timeout == httpx.Timeout(0.5)
