"""Low-level HTTP transport layer wrapping httpx."""

from __future__ import annotations

from typing import Any

import httpx

from skycast.exceptions import (
    UpstreamAPIError,
    UpstreamConnectionError,
    UpstreamTimeoutError,
    UpstreamUnavailableError,
)

DEFAULT_TIMEOUT = 10.0
DEFAULT_USER_AGENT = "skycast/0.1.0"


def _handle_response(response: httpx.Response, provider: str) -> Any:
    """Validate response status and return parsed JSON."""
    if response.status_code >= 400:
        raise UpstreamAPIError(status_code=response.status_code, provider=provider)
    try:
        return response.json()
    except ValueError as exc:
        raise UpstreamUnavailableError(f"{provider} returned a non-JSON response") from exc


def _headers(user_agent: str) -> dict[str, str]:
    return {"Accept": "application/json", "User-Agent": user_agent}


class SyncTransport:
    """Synchronous HTTP transport using httpx.Client."""

    def __init__(
        self,
        base_url: str,
        provider: str,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self.provider = provider
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            headers=_headers(user_agent),
        )

    def get(self, endpoint: str, params: list[tuple[str, str]]) -> Any:
        """Perform a GET request and return parsed JSON."""
        try:
            response = self._client.get(endpoint, params=params)
        except httpx.ConnectError as exc:
            raise UpstreamConnectionError(f"Unable to connect to {self.provider}") from exc
        except httpx.TimeoutException as exc:
            raise UpstreamTimeoutError(f"Request to {self.provider} timed out") from exc
        except httpx.RequestError as exc:
            raise UpstreamConnectionError(f"Request to {self.provider} failed") from exc
        return _handle_response(response, self.provider)

    def close(self) -> None:
        self._client.close()


class AsyncTransport:
    """Asynchronous HTTP transport using httpx.AsyncClient."""

    def __init__(
        self,
        base_url: str,
        provider: str,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self.provider = provider
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers=_headers(user_agent),
        )

    async def get(self, endpoint: str, params: list[tuple[str, str]]) -> Any:
        """Perform an async GET request and return parsed JSON."""
        try:
            response = await self._client.get(endpoint, params=params)
        except httpx.ConnectError as exc:
            raise UpstreamConnectionError(f"Unable to connect to {self.provider}") from exc
        except httpx.TimeoutException as exc:
            raise UpstreamTimeoutError(f"Request to {self.provider} timed out") from exc
        except httpx.RequestError as exc:
            raise UpstreamConnectionError(f"Request to {self.provider} failed") from exc
        return _handle_response(response, self.provider)

    async def close(self) -> None:
        await self._client.aclose()
