"""Custom exception hierarchy."""

from __future__ import annotations

import json
from http import HTTPStatus
from typing import Any


class TanukiError(Exception):
    """Base exception for all library errors."""

    pass


class MissingFieldError(TanukiError, ValueError):
    """A builder was finalized without a required field.

    Raised by ``EndpointBuilder.build()`` before any request is constructed.
    """

    def __init__(self, field: str, endpoint: str | None = None) -> None:
        super().__init__(f"`{field}` must be initialized")
        self.field = field
        self.endpoint = endpoint


class InvalidEndpointError(TanukiError):
    """Endpoint cannot be executed in the requested way."""

    pass


class TransportError(TanukiError):
    """The HTTP call could not be completed (DNS, connect, TLS, timeout)."""

    def __init__(
        self,
        message: str,
        method: str | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message)
        self.method = method
        self.url = url


class ApiError(TanukiError):
    """Server answered with a non-success status code."""

    def __init__(
        self,
        message: str,
        status: int,
        details: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.details = details

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.status < 500

    @property
    def is_server_error(self) -> bool:
        return self.status >= 500

    def __str__(self) -> str:
        return f"{self.message} (status: {self.status})"


class AuthenticationError(ApiError):
    """Missing or invalid credentials (401)."""

    pass


class PermissionDeniedError(ApiError):
    """Credentials lack permission for the resource (403)."""

    pass


class NotFoundError(ApiError):
    """Resource does not exist or is hidden from the caller (404)."""

    pass


class ConflictError(ApiError):
    """Request conflicts with the resource state (409)."""

    pass


class RateLimitError(ApiError):
    """Server rate limit exceeded (429)."""

    def __init__(
        self,
        message: str,
        status: int = 429,
        details: Any = None,
        retry_after: float | None = None,
    ) -> None:
        super().__init__(message, status, details)
        self.retry_after = retry_after


class ServerError(ApiError):
    """Server failed to handle the request (5xx)."""

    pass


class DeserializationError(TanukiError):
    """Success response whose body does not match the expected shape."""

    def __init__(self, message: str, body: bytes | None = None) -> None:
        super().__init__(message)
        self.body = body


class PaginationError(TanukiError):
    """A follow-up page could not be fetched or its page indicator was unusable.

    Items yielded before the failing page remain valid; the original failure
    (if any) is available as ``__cause__``.
    """

    def __init__(self, message: str, page: int | None = None) -> None:
        super().__init__(message)
        self.page = page


_STATUS_ERRORS: dict[int, type[ApiError]] = {
    401: AuthenticationError,
    403: PermissionDeniedError,
    404: NotFoundError,
    409: ConflictError,
    429: RateLimitError,
}


def status_description(status: int) -> str:
    """Generic description of a status code, e.g. ``"404 Not Found"``."""
    try:
        return f"{status} {HTTPStatus(status).phrase}"
    except ValueError:
        return f"HTTP status {status}"


def error_message_from_body(status: int, body: Any) -> str:
    """Extract the human-readable message from an API error body.

    Args:
        status: Response status code
        body: Decoded JSON body, or None if the body was not JSON

    Returns:
        Message from ``message`` or ``error`` fields, else a status description
    """
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str):
            return message
        if message is not None:
            # Validation failures come back as {"field": ["reason", ...]}
            return json.dumps(message, sort_keys=True, separators=(",", ":"))

        error = body.get("error")
        if isinstance(error, str):
            description = body.get("error_description")
            if isinstance(description, str) and description:
                return f"{error}: {description}"
            return error

    return status_description(status)


def api_error_for_status(
    status: int,
    body: Any = None,
    retry_after: float | None = None,
) -> ApiError:
    """Build the ApiError subclass matching a status code.

    Args:
        status: Non-success status code
        body: Decoded JSON error body (or None)
        retry_after: Seconds from a ``Retry-After`` header, for 429 responses

    Returns:
        ApiError instance (not raised)
    """
    message = error_message_from_body(status, body)
    if status == 429:
        return RateLimitError(message, status, body, retry_after=retry_after)
    error_cls = _STATUS_ERRORS.get(status)
    if error_cls is None:
        error_cls = ServerError if status >= 500 else ApiError
    return error_cls(message, status, body)
