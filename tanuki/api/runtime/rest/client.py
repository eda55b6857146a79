"""Client abstraction consumed by the query runner.

Architecture:
    The runner never talks to an HTTP library directly. It hands a fully
    formed ``RestRequest`` to a ``RestClient`` (or ``AsyncRestClient``) and
    gets a ``RestResponse`` envelope back. Clients own three things: the API
    root (``rest_endpoint``), credentials (``attach_auth``) and the transport
    call itself (``rest``), which must raise ``TransportError`` when the call
    cannot be completed.

Design Decisions:
    - Status codes are not interpreted here: classification is the runner's
    - Headers are stored lower-cased: lookups are case-insensitive
    - Clients hold no per-request state: one client serves concurrent calls
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from ...core.enums import Method
from ...core.exceptions import InvalidEndpointError


def join_url(base: str, endpoint: str) -> str:
    """Join an API root and a relative endpoint path.

    Plain concatenation: the path is already escaped and must not be
    re-interpreted (a leading ``name:`` segment is not a URL scheme here).
    """
    if "://" in endpoint:
        raise InvalidEndpointError(f"Endpoint path must be relative, got {endpoint!r}")
    return f"{base.rstrip('/')}/{endpoint.lstrip('/')}"


@dataclass(frozen=True)
class RestRequest:
    """Request handed to a client."""

    method: Method
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes | None = None

    def with_headers(self, headers: Mapping[str, str]) -> RestRequest:
        """Copy with ``headers`` merged over the existing ones."""
        return replace(self, headers={**self.headers, **headers})


@dataclass(frozen=True)
class RestResponse:
    """Raw response envelope returned by a client."""

    status: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", {k.lower(): v for k, v in self.headers.items()})

    @property
    def is_success(self) -> bool:
        return 200 <= self.status < 300

    def header(self, name: str, default: str | None = None) -> str | None:
        return self.headers.get(name.lower(), default)

    def json(self) -> Any:
        """Decode the body as JSON (raises ``ValueError`` on invalid JSON)."""
        return json.loads(self.body)


class RestClient(ABC):
    """Synchronous client capability."""

    @abstractmethod
    def rest_endpoint(self, endpoint: str) -> str:
        """Absolute URL for a relative endpoint path."""

    def attach_auth(self, request: RestRequest) -> RestRequest:
        """Return the request with credentials attached."""
        return request

    @abstractmethod
    def rest(self, request: RestRequest) -> RestResponse:
        """Perform the call.

        Raises:
            TransportError: If no response could be obtained
        """


class AsyncRestClient(ABC):
    """Asynchronous client capability."""

    @abstractmethod
    def rest_endpoint(self, endpoint: str) -> str:
        """Absolute URL for a relative endpoint path."""

    def attach_auth(self, request: RestRequest) -> RestRequest:
        """Return the request with credentials attached."""
        return request

    @abstractmethod
    async def rest_async(self, request: RestRequest) -> RestResponse:
        """Perform the call.

        Raises:
            TransportError: If no response could be obtained
        """
