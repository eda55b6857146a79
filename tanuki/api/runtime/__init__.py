"""Runtime layer executing endpoints."""

from .rest import (
    AsyncHTTPClient,
    AsyncRestClient,
    HTTPClient,
    Paged,
    Pagination,
    RestClient,
    ignore,
    paged,
    query,
    query_async,
    raw,
)

__all__ = [
    "AsyncHTTPClient",
    "AsyncRestClient",
    "HTTPClient",
    "Paged",
    "Pagination",
    "RestClient",
    "ignore",
    "paged",
    "query",
    "query_async",
    "raw",
]
