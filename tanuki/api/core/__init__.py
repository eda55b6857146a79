"""Core components: endpoint contract, parameter encoding, errors, config."""

from .builder import EndpointBuilder
from .common import CommaSeparatedList, NameOrId, path_escaped
from .config import ClientConfig
from .endpoint import Endpoint, Pageable, optional, required
from .enums import (
    AccessLevel,
    AuthKind,
    EnableState,
    Method,
    PaginationKind,
    ProtectedAccessLevel,
    SortOrder,
    YesNo,
)
from .exceptions import (
    ApiError,
    AuthenticationError,
    ConflictError,
    DeserializationError,
    InvalidEndpointError,
    MissingFieldError,
    NotFoundError,
    PaginationError,
    PermissionDeniedError,
    RateLimitError,
    ServerError,
    TanukiError,
    TransportError,
)
from .params import FormParams, JsonParams, QueryParams, param_value

__all__ = [
    # Endpoint contract
    "Endpoint",
    "EndpointBuilder",
    "Pageable",
    "optional",
    "required",
    # Parameters
    "CommaSeparatedList",
    "FormParams",
    "JsonParams",
    "NameOrId",
    "QueryParams",
    "param_value",
    "path_escaped",
    # Configuration
    "ClientConfig",
    # Enums
    "AccessLevel",
    "AuthKind",
    "EnableState",
    "Method",
    "PaginationKind",
    "ProtectedAccessLevel",
    "SortOrder",
    "YesNo",
    # Errors
    "ApiError",
    "AuthenticationError",
    "ConflictError",
    "DeserializationError",
    "InvalidEndpointError",
    "MissingFieldError",
    "NotFoundError",
    "PaginationError",
    "PermissionDeniedError",
    "RateLimitError",
    "ServerError",
    "TanukiError",
    "TransportError",
]
