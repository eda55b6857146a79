"""HTTP transports implementing the client abstraction."""

from __future__ import annotations

import asyncio
from typing import Any

import aiohttp
import requests
from yarl import URL

from ...core.config import ClientConfig
from ...core.exceptions import TransportError
from .client import AsyncRestClient, RestClient, RestRequest, RestResponse, join_url


class _ConfiguredClient:
    """URL resolution and credentials shared by both transports."""

    def __init__(self, config: ClientConfig) -> None:
        self.config = config

    def rest_endpoint(self, endpoint: str) -> str:
        return join_url(self.config.api_url, endpoint)

    def attach_auth(self, request: RestRequest) -> RestRequest:
        return request.with_headers(
            {"User-Agent": self.config.user_agent, **self.config.auth_headers()}
        )


class HTTPClient(_ConfiguredClient, RestClient):
    """Synchronous client backed by a ``requests.Session``."""

    def __init__(self, config: ClientConfig, session: requests.Session | None = None) -> None:
        super().__init__(config)
        self._session = session or requests.Session()

    @property
    def session(self) -> requests.Session:
        return self._session

    def rest(self, request: RestRequest) -> RestResponse:
        try:
            response = self._session.request(
                request.method.value,
                request.url,
                headers=request.headers,
                data=request.body,
                timeout=self.config.timeout,
            )
        except requests.RequestException as e:
            raise TransportError(
                f"{type(e).__name__}: {e}", method=request.method.value, url=request.url
            ) from e
        return RestResponse(
            status=response.status_code,
            headers=dict(response.headers),
            body=response.content,
        )

    def close(self) -> None:
        """Close session."""
        self._session.close()

    def __enter__(self) -> HTTPClient:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()


class AsyncHTTPClient(_ConfiguredClient, AsyncRestClient):
    """Async client backed by an ``aiohttp.ClientSession``."""

    def __init__(self, config: ClientConfig) -> None:
        super().__init__(config)
        self.timeout = aiohttp.ClientTimeout(total=config.timeout)
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    async def rest_async(self, request: RestRequest) -> RestResponse:
        try:
            async with self.session.request(
                request.method.value,
                # Already escaped; keep %2F inside path segments intact
                URL(request.url, encoded=True),
                headers=request.headers,
                data=request.body,
            ) as response:
                body = await response.read()
                return RestResponse(
                    status=response.status,
                    headers=dict(response.headers),
                    body=body,
                )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(
                f"{type(e).__name__}: {e}", method=request.method.value, url=request.url
            ) from e

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> AsyncHTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
