"""Deterministic clients for testing request construction.

Architecture:
    Test clients implement both ``RestClient`` and ``AsyncRestClient``. They
    check every request they receive against an ``ExpectedUrl`` (method, raw
    escaped path, exact ordered query pairs, content type and body) and
    answer with canned responses, so endpoint tests never touch the network.

Example:
    >>> expected = ExpectedUrl(
    ...     method=Method.DELETE,
    ...     endpoint="projects/simple%2Fproject/protected_branches/branch%2Fname",
    ... )
    >>> client = SingleTestClient(expected, b"")
    >>> ignore(endpoint).query(client)
"""

from __future__ import annotations

import json
from abc import abstractmethod
from dataclasses import dataclass
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit

from .core.enums import Method
from .runtime.rest.client import AsyncRestClient, RestClient, RestRequest, RestResponse, join_url

TEST_API_URL = "https://tanuki.test/api/v4/"

_PAGE_KEYS = ("page", "per_page", "pagination", "id_after")


def _as_bytes(body: Any) -> bytes:
    if isinstance(body, bytes):
        return body
    if isinstance(body, str):
        return body.encode("utf-8")
    return json.dumps(body).encode("utf-8")


@dataclass(frozen=True)
class ExpectedUrl:
    """What a test client expects to receive."""

    endpoint: str
    method: Method = Method.GET
    query: tuple[tuple[str, str], ...] = ()
    content_type: str | None = None
    body: bytes = b""
    status: int = 200
    paginated: bool = False

    def check(self, request: RestRequest) -> None:
        """Assert that ``request`` matches.

        Raises:
            AssertionError: Describing the first mismatch
        """
        assert request.method == self.method, f"method {request.method} != {self.method}"

        url = urlsplit(request.url)
        expected_path = urlsplit(join_url(TEST_API_URL, self.endpoint)).path
        assert url.path == expected_path, f"path {url.path!r} != {expected_path!r}"

        pairs = parse_qsl(url.query, keep_blank_values=True)
        if self.paginated:
            pairs = [pair for pair in pairs if pair[0] not in _PAGE_KEYS]
        assert pairs == list(self.query), f"query {pairs!r} != {list(self.query)!r}"

        content_type = request.headers.get("Content-Type")
        assert content_type == self.content_type, (
            f"content type {content_type!r} != {self.content_type!r}"
        )
        assert (request.body or b"") == self.body, f"body {request.body!r} != {self.body!r}"


class _TestClient(RestClient, AsyncRestClient):
    """Shared plumbing: URL root, request log and async bridging."""

    def __init__(self) -> None:
        self.requests: list[RestRequest] = []

    def rest_endpoint(self, endpoint: str) -> str:
        return join_url(TEST_API_URL, endpoint)

    def rest(self, request: RestRequest) -> RestResponse:
        self.requests.append(request)
        return self.respond(request)

    async def rest_async(self, request: RestRequest) -> RestResponse:
        return self.rest(request)

    @abstractmethod
    def respond(self, request: RestRequest) -> RestResponse:
        """Check ``request`` and produce the canned response."""


class SingleTestClient(_TestClient):
    """Answers every matching request with the same response."""

    def __init__(
        self,
        expected: ExpectedUrl,
        body: Any = b"",
        headers: dict[str, str] | None = None,
    ) -> None:
        super().__init__()
        self.expected = expected
        self.body = _as_bytes(body)
        self.headers = headers or {}

    def respond(self, request: RestRequest) -> RestResponse:
        self.expected.check(request)
        return RestResponse(status=self.expected.status, headers=self.headers, body=self.body)


class PagedTestClient(_TestClient):
    """Serves ``items`` page by page like the real API.

    Offset requests are answered with ``page``/``per_page`` slices and, when
    ``next_page_header`` is set, the ``X-Next-Page`` header. Keyset requests
    get a ``Link: <...>; rel="next"`` header while items remain.
    """

    def __init__(
        self,
        expected: ExpectedUrl,
        items: list[Any],
        next_page_header: bool = True,
    ) -> None:
        super().__init__()
        self.expected = expected
        self.items = list(items)
        self.next_page_header = next_page_header

    def respond(self, request: RestRequest) -> RestResponse:
        self.expected.check(request)
        pairs = parse_qsl(urlsplit(request.url).query, keep_blank_values=True)
        query = dict(pairs)
        per_page = int(query.get("per_page", "20"))

        if query.get("pagination") == "keyset":
            return self._keyset_page(request, pairs, query, per_page)

        page = int(query.get("page", "1"))
        start = (page - 1) * per_page
        chunk = self.items[start : start + per_page]
        headers = {"X-Page": str(page), "X-Per-Page": str(per_page)}
        if self.next_page_header:
            more = start + per_page < len(self.items)
            headers["X-Next-Page"] = str(page + 1) if more else ""
        return RestResponse(status=200, headers=headers, body=_as_bytes(chunk))

    def _keyset_page(
        self,
        request: RestRequest,
        pairs: list[tuple[str, str]],
        query: dict[str, str],
        per_page: int,
    ) -> RestResponse:
        start = int(query.get("id_after", "0"))
        chunk = self.items[start : start + per_page]
        headers: dict[str, str] = {}
        end = start + len(chunk)
        if chunk and end < len(self.items):
            base = request.url.split("?", 1)[0]
            next_query = urlencode(
                [
                    *[(k, v) for k, v in pairs if k not in _PAGE_KEYS],
                    ("pagination", "keyset"),
                    ("per_page", str(per_page)),
                    ("id_after", str(end)),
                ]
            )
            headers["Link"] = f'<{base}?{next_query}>; rel="next"'
        return RestResponse(status=200, headers=headers, body=_as_bytes(chunk))
