"""Tanuki API - typed endpoint core for a source hosting REST API."""

from .core import (
    AccessLevel,
    ApiError,
    AuthenticationError,
    AuthKind,
    ClientConfig,
    DeserializationError,
    Endpoint,
    EndpointBuilder,
    FormParams,
    Method,
    MissingFieldError,
    NameOrId,
    NotFoundError,
    Pageable,
    PaginationError,
    PaginationKind,
    PermissionDeniedError,
    QueryParams,
    RateLimitError,
    ServerError,
    TanukiError,
    TransportError,
    path_escaped,
)
from .runtime import (
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

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Endpoint contract
    "Endpoint",
    "EndpointBuilder",
    "Pageable",
    "FormParams",
    "QueryParams",
    "NameOrId",
    "path_escaped",
    # Enums
    "AccessLevel",
    "AuthKind",
    "Method",
    "PaginationKind",
    # Configuration and clients
    "ClientConfig",
    "RestClient",
    "AsyncRestClient",
    "HTTPClient",
    "AsyncHTTPClient",
    # Execution
    "query",
    "query_async",
    "ignore",
    "raw",
    "paged",
    "Paged",
    "Pagination",
    # Errors
    "TanukiError",
    "MissingFieldError",
    "TransportError",
    "ApiError",
    "AuthenticationError",
    "PermissionDeniedError",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    "DeserializationError",
    "PaginationError",
]
