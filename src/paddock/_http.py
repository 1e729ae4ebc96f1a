"""Low-level HTTP transport layer wrapping httpx."""

from __future__ import annotations

from typing import Any

import httpx

from paddock.constants import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from paddock.exceptions import (
    ErgastAPIError,
    ErgastConnectionError,
    ErgastDecodeError,
    ErgastTimeoutError,
)


def _handle_response(response: httpx.Response) -> dict[str, Any]:
    """Validate response status and return the parsed JSON object."""
    if response.status_code >= 400:
        raise ErgastAPIError(
            status_code=response.status_code,
            message=response.text,
        )
    try:
        data = response.json()
    except ValueError as exc:
        raise ErgastDecodeError(f"Response from {response.url} is not JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ErgastDecodeError(
            f"Expected a JSON object from {response.url}, got {type(data).__name__}"
        )
    return data


class SyncTransport:
    """Synchronous HTTP transport using httpx.Client."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    def get(self, endpoint: str) -> dict[str, Any]:
        """Perform a GET request and return parsed JSON."""
        try:
            response = self._client.get(endpoint)
        except httpx.ConnectError as exc:
            raise ErgastConnectionError(str(exc)) from exc
        except httpx.TimeoutException as exc:
            raise ErgastTimeoutError(str(exc)) from exc
        return _handle_response(response)

    def close(self) -> None:
        self._client.close()


class AsyncTransport:
    """Asynchronous HTTP transport using httpx.AsyncClient."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    async def get(self, endpoint: str) -> dict[str, Any]:
        """Perform an async GET request and return parsed JSON."""
        try:
            response = await self._client.get(endpoint)
        except httpx.ConnectError as exc:
            raise ErgastConnectionError(str(exc)) from exc
        except httpx.TimeoutException as exc:
            raise ErgastTimeoutError(str(exc)) from exc
        return _handle_response(response)

    async def close(self) -> None:
        await self._client.aclose()
