"""Structured logging for request execution and pagination.

This module provides telemetry hooks for the runner and the pagination
driver, emitting structured logs for observability. Credentials never reach
these hooks: only method, URL and sizes are logged.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_request_sent(*, method: str, url: str, has_body: bool) -> None:
    """Log a request about to be handed to the client.

    Args:
        method: HTTP verb
        url: Absolute request URL (query string included)
        has_body: Whether a body is attached
    """
    logger.debug(
        "rest_request_sent",
        extra={"method": method, "url": url, "has_body": has_body},
    )


def log_response_received(
    *,
    method: str,
    url: str,
    status: int,
    size: int,
) -> None:
    """Log a response envelope returned by the client.

    Args:
        method: HTTP verb
        url: Absolute request URL
        status: Response status code
        size: Body size in bytes
    """
    logger.debug(
        "rest_response_received",
        extra={"method": method, "url": url, "status": status, "bytes": size},
    )


def log_request_failed(
    *,
    method: str,
    url: str,
    error_type: str,
    error_message: str,
) -> None:
    """Log a failed call (transport failure or error status).

    Args:
        method: HTTP verb
        url: Absolute request URL
        error_type: Exception class name (e.g., "NotFoundError")
        error_message: Error message
    """
    logger.error(
        "rest_request_failed",
        extra={
            "method": method,
            "url": url,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_page_fetched(*, endpoint: str, page: int, items: int, total: int) -> None:
    """Log one decoded page.

    Args:
        endpoint: Endpoint class name
        page: One-based page index within this pagination run
        items: Items on this page
        total: Items collected so far, this page included
    """
    logger.info(
        "page_fetched",
        extra={"endpoint": endpoint, "page": page, "items": items, "total": total},
    )


def log_pagination_complete(*, endpoint: str, requests: int, total: int) -> None:
    """Log the end of a pagination run.

    Args:
        endpoint: Endpoint class name
        requests: Number of page requests issued
        total: Number of items produced
    """
    logger.info(
        "pagination_complete",
        extra={"endpoint": endpoint, "requests": requests, "total": total},
    )
