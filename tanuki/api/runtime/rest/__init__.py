"""REST runtime: client abstraction, query runner and pagination."""

from .client import AsyncRestClient, RestClient, RestRequest, RestResponse
from .http_client import AsyncHTTPClient, HTTPClient
from .pagination import (
    AsyncLazilyPagedIter,
    LazilyPagedIter,
    PageCursor,
    Paged,
    Pagination,
    paged,
)
from .runner import Ignore, Raw, ignore, query, query_async, raw

__all__ = [
    "AsyncHTTPClient",
    "AsyncLazilyPagedIter",
    "AsyncRestClient",
    "HTTPClient",
    "Ignore",
    "LazilyPagedIter",
    "PageCursor",
    "Paged",
    "Pagination",
    "Raw",
    "RestClient",
    "RestRequest",
    "RestResponse",
    "ignore",
    "paged",
    "query",
    "query_async",
    "raw",
]
