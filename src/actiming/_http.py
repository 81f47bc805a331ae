"""Low-level HTTP transport layer wrapping httpx."""

from __future__ import annotations

from typing import Any

import httpx

from actiming.exceptions import (
    ACTimingAPIError,
    ACTimingConnectionError,
    ACTimingTimeoutError,
)

DEFAULT_TIMEOUT = 10.0
DEFAULT_HEADERS = {
    "Accept": "application/json, text/csv, text/plain",
    "User-Agent": "actiming/0.1",
}


def _check_status(response: httpx.Response) -> httpx.Response:
    """Raise ACTimingAPIError for 4xx/5xx responses."""
    if response.status_code >= 400:
        raise ACTimingAPIError(
            status_code=response.status_code,
            message=response.text,
        )
    return response


class SyncTransport:
    """Synchronous HTTP transport using httpx.Client.

    URLs are absolute: the timing server and the roster host are
    configured per request rather than per client.
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._client = httpx.Client(
            timeout=timeout,
            headers=DEFAULT_HEADERS,
            follow_redirects=True,
        )

    def _get(self, url: str) -> httpx.Response:
        try:
            response = self._client.get(url)
        except httpx.ConnectError as exc:
            raise ACTimingConnectionError(str(exc)) from exc
        except httpx.TimeoutException as exc:
            raise ACTimingTimeoutError(str(exc)) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise ACTimingConnectionError(str(exc)) from exc
        return _check_status(response)

    def get_json(self, url: str) -> Any:
        """Perform a GET request and return parsed JSON."""
        return self._get(url).json()

    def get_text(self, url: str) -> str:
        """Perform a GET request and return the decoded body."""
        return self._get(url).text

    def close(self) -> None:
        self._client.close()


class AsyncTransport:
    """Asynchronous HTTP transport using httpx.AsyncClient."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._client = httpx.AsyncClient(
            timeout=timeout,
            headers=DEFAULT_HEADERS,
            follow_redirects=True,
        )

    async def _get(self, url: str) -> httpx.Response:
        try:
            response = await self._client.get(url)
        except httpx.ConnectError as exc:
            raise ACTimingConnectionError(str(exc)) from exc
        except httpx.TimeoutException as exc:
            raise ACTimingTimeoutError(str(exc)) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise ACTimingConnectionError(str(exc)) from exc
        return _check_status(response)

    async def get_json(self, url: str) -> Any:
        """Perform an async GET request and return parsed JSON."""
        response = await self._get(url)
        return response.json()

    async def get_text(self, url: str) -> str:
        """Perform an async GET request and return the decoded body."""
        response = await self._get(url)
        return response.text

    async def close(self) -> None:
        await self._client.aclose()
