"""Pagination driver for collection endpoints.

Architecture:
    ``paged(endpoint, pagination)`` wraps a ``Pageable`` endpoint. Iterating
    it issues one request per page, strictly in sequence, and yields the
    decoded items one at a time. A private ``_PageWalker`` holds the cursor
    and turns responses into items; the sync and async iterators only differ
    in how they perform the call.

Strategies (chosen per endpoint by ``Pageable.pagination_kind()``):
    - OFFSET: ``page``/``per_page`` query parameters, overriding any the
      endpoint set itself. ``X-Next-Page`` names the next page (empty means
      last). Without that header a short or empty page ends the run.
    - KEYSET: first request adds ``pagination=keyset``; later requests follow
      the ``Link: <...>; rel="next"`` URL verbatim until none is given.

Guarantees:
    - Items come out in server order; no reordering or deduplication
    - Iterators are lazy and single-use: call ``iter()`` again to restart
    - A failure on page 2 or later is raised as ``PaginationError`` chained
      to the original error; items already yielded stay valid
    - Items of a page whose pagination headers are unusable are yielded
      before the ``PaginationError``
    - Keyset links must stay under the client's API root, so credentials
      never leave it
"""

from __future__ import annotations

import re
from collections import deque
from collections.abc import AsyncIterator, Iterator
from dataclasses import dataclass
from typing import Any

from ...core.endpoint import Endpoint, Pageable
from ...core.enums import PaginationKind
from ...core.exceptions import InvalidEndpointError, PaginationError, TanukiError
from .client import AsyncRestClient, RestClient, RestRequest, RestResponse
from .runner import ENDPOINT_MODEL, check_status, decode, prepare_request, send, send_async
from .telemetry import log_page_fetched, log_pagination_complete

# Largest page the server hands out
MAX_PAGE_SIZE = 100

_PAGINATION_KEYS = ("page", "per_page", "pagination")


@dataclass(frozen=True)
class Pagination:
    """How many items to collect (None means all of them)."""

    limit: int | None = None

    def __post_init__(self) -> None:
        if self.limit is not None and self.limit < 1:
            raise ValueError("Pagination limit must be at least 1")

    @classmethod
    def all(cls) -> Pagination:
        return cls()

    @classmethod
    def with_limit(cls, limit: int) -> Pagination:
        return cls(limit=limit)

    def page_size(self) -> int:
        if self.limit is None:
            return MAX_PAGE_SIZE
        return min(self.limit, MAX_PAGE_SIZE)


@dataclass(frozen=True)
class PageCursor:
    """Position of the next page request."""

    page: int = 1
    next_url: str | None = None


_LINK_ENTRY = re.compile(r"<([^>]*)>((?:\s*;[^,<]*)*)")


def parse_link_header(value: str) -> dict[str, str]:
    """Parse an RFC 8288 ``Link`` header into a ``rel -> url`` mapping.

    URLs may contain commas, so entries are found by their ``<...>`` target
    rather than by splitting on ``,``.

    Raises:
        PaginationError: If anything besides ``<url>; params`` entries is present
    """
    links: dict[str, str] = {}
    for match in _LINK_ENTRY.finditer(value):
        url, params = match.groups()
        for param in params.split(";"):
            key, _, rel = param.strip().partition("=")
            if key.strip().lower() == "rel":
                for name in rel.strip().strip('"').split():
                    links[name] = url
    leftover = _LINK_ENTRY.sub("", value).replace(",", "").strip()
    if leftover:
        raise PaginationError(f"Malformed Link header: {value!r}")
    return links


class _PageWalker:
    """Cursor state shared by the sync and async iterators."""

    def __init__(
        self,
        endpoint: Endpoint,
        pagination: Pagination,
        client: RestClient | AsyncRestClient,
        model: Any,
    ) -> None:
        self.endpoint = endpoint
        self.pagination = pagination
        self.kind = endpoint.pagination_kind()  # type: ignore[attr-defined]
        self.model = endpoint.response_model if model is ENDPOINT_MODEL else model
        self.requests = 0
        self.total = 0
        self._client = client
        self._cursor: PageCursor | None = PageCursor()
        self._pending: PaginationError | None = None

    @property
    def done(self) -> bool:
        return self._cursor is None

    @property
    def name(self) -> str:
        return type(self.endpoint).__name__

    def next_request(self) -> RestRequest:
        cursor = self._cursor
        assert cursor is not None
        self.requests += 1

        if cursor.next_url is not None:
            url = cursor.next_url
        else:
            params = self.endpoint.parameters().without(*_PAGINATION_KEYS)
            if self.kind == PaginationKind.KEYSET:
                params.push("pagination", "keyset")
            else:
                params.push("page", cursor.page)
            params.push("per_page", self.pagination.page_size())
            url = params.add_to_url(self._client.rest_endpoint(self.endpoint.endpoint_path()))

        return prepare_request(self.endpoint.method(), url, self.endpoint.body(), self._client)

    def consume(self, request: RestRequest, response: RestResponse) -> list[Any]:
        check_status(request, response)
        items = self._decode_page(response)
        page_len = len(items)

        if self.pagination.limit is not None:
            items = items[: self.pagination.limit - self.total]
        self.total += len(items)
        log_page_fetched(endpoint=self.name, page=self.requests, items=page_len, total=self.total)

        if self.pagination.limit is not None and self.total >= self.pagination.limit:
            self._cursor = None
        else:
            try:
                self._cursor = self._advance(response, page_len)
            except PaginationError as e:
                # Items of this page are still handed out before the error
                self._cursor = None
                self._pending = e
        if self._cursor is None and self._pending is None:
            log_pagination_complete(endpoint=self.name, requests=self.requests, total=self.total)
        return items

    def take_pending(self) -> PaginationError | None:
        """Error deferred until the items of the last page were consumed."""
        pending, self._pending = self._pending, None
        return pending

    def wrap_failure(self, error: TanukiError) -> TanukiError:
        """Failures after the first page become PaginationError."""
        self._cursor = None
        if self.requests <= 1 or isinstance(error, PaginationError):
            return error
        return PaginationError(f"Fetching page {self.requests} failed: {error}", page=self.requests)

    def _decode_page(self, response: RestResponse) -> list[Any]:
        if self.model is None:
            data = decode(response, list[Any])
        else:
            data = decode(response, list[self.model])
        return list(data)

    def _advance(self, response: RestResponse, page_len: int) -> PageCursor | None:
        cursor = self._cursor
        assert cursor is not None
        if page_len == 0:
            return None

        if self.kind == PaginationKind.KEYSET:
            header = response.header("Link")
            links = parse_link_header(header) if header else {}
            next_url = links.get("next")
            if next_url is None:
                return None
            root = self._client.rest_endpoint("")
            if not next_url.startswith(root):
                raise PaginationError(
                    f"Next page link {next_url!r} is outside {root!r}", page=self.requests
                )
            if next_url == cursor.next_url:
                raise PaginationError(
                    f"Next page link repeats the current page: {next_url!r}", page=self.requests
                )
            return PageCursor(page=cursor.page + 1, next_url=next_url)

        next_page = response.header("X-Next-Page")
        if next_page is not None:
            next_page = next_page.strip()
            if not next_page:
                return None
            try:
                page = int(next_page)
            except ValueError as e:
                raise PaginationError(
                    f"Unparseable X-Next-Page header: {next_page!r}", page=self.requests
                ) from e
            if page <= cursor.page:
                raise PaginationError(
                    f"X-Next-Page {page} does not advance past page {cursor.page}",
                    page=self.requests,
                )
            return PageCursor(page=page)

        if page_len < self.pagination.page_size():
            return None
        return PageCursor(page=cursor.page + 1)


class LazilyPagedIter(Iterator[Any]):
    """Single-use iterator fetching pages on demand."""

    def __init__(self, walker: _PageWalker, client: RestClient) -> None:
        self._walker = walker
        self._client = client
        self._buffer: deque[Any] = deque()

    def __iter__(self) -> LazilyPagedIter:
        return self

    def __next__(self) -> Any:
        while not self._buffer:
            if self._walker.done:
                pending = self._walker.take_pending()
                if pending is not None:
                    raise pending
                raise StopIteration
            self._buffer.extend(self._fetch())
        return self._buffer.popleft()

    def _fetch(self) -> list[Any]:
        request = self._walker.next_request()
        try:
            return self._walker.consume(request, send(self._client, request))
        except TanukiError as e:
            failure = self._walker.wrap_failure(e)
            if failure is e:
                raise
            raise failure from e


class AsyncLazilyPagedIter(AsyncIterator[Any]):
    """Single-use async iterator fetching pages on demand."""

    def __init__(self, walker: _PageWalker, client: AsyncRestClient) -> None:
        self._walker = walker
        self._client = client
        self._buffer: deque[Any] = deque()

    def __aiter__(self) -> AsyncLazilyPagedIter:
        return self

    async def __anext__(self) -> Any:
        while not self._buffer:
            if self._walker.done:
                pending = self._walker.take_pending()
                if pending is not None:
                    raise pending
                raise StopAsyncIteration
            self._buffer.extend(await self._fetch())
        return self._buffer.popleft()

    async def _fetch(self) -> list[Any]:
        request = self._walker.next_request()
        try:
            return self._walker.consume(request, await send_async(self._client, request))
        except TanukiError as e:
            failure = self._walker.wrap_failure(e)
            if failure is e:
                raise
            raise failure from e


class Paged:
    """A pageable endpoint paired with a pagination limit."""

    def __init__(
        self,
        endpoint: Endpoint,
        pagination: Pagination | None = None,
        model: Any = ENDPOINT_MODEL,
    ) -> None:
        if not isinstance(endpoint, Pageable):
            raise InvalidEndpointError(f"{type(endpoint).__name__} does not support pagination")
        self.endpoint = endpoint
        self.pagination = pagination or Pagination.all()
        self.model = model

    def iter(self, client: RestClient) -> LazilyPagedIter:
        """Lazy iterator over all items."""
        return LazilyPagedIter(_PageWalker(self.endpoint, self.pagination, client, self.model), client)

    def aiter(self, client: AsyncRestClient) -> AsyncLazilyPagedIter:
        """Lazy async iterator over all items."""
        return AsyncLazilyPagedIter(
            _PageWalker(self.endpoint, self.pagination, client, self.model), client
        )

    def query(self, client: RestClient) -> list[Any]:
        """Collect every item into a list."""
        return list(self.iter(client))

    async def query_async(self, client: AsyncRestClient) -> list[Any]:
        """Collect every item into a list."""
        return [item async for item in self.aiter(client)]


def paged(endpoint: Endpoint, pagination: Pagination | None = None) -> Paged:
    """Wrap a pageable endpoint for multi-page execution."""
    return Paged(endpoint, pagination)
