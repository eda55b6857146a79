"""Query runner: executes endpoints against a client.

Architecture:
    Every request goes through the same steps: resolve the URL (client root +
    endpoint path + query string), attach the body and credentials, hand the
    request to the client, then classify the status code and decode the body.
    The sync and async paths share every step except the transport call, so
    the async binding suspends only at that boundary.

Execution modes:
    - ``query``: decode JSON into the endpoint's ``response_model``
    - ``ignore``: only check that the call succeeded
    - ``raw``: return undecoded body bytes (e.g. file contents)
    - ``paged``: see ``pagination``

No mode retries: every failure is raised to the caller as a distinct
``TanukiError`` subclass.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter, ValidationError

from ...core.endpoint import Endpoint
from ...core.enums import Method
from ...core.exceptions import DeserializationError, TransportError, api_error_for_status
from ...core.params import Body
from .client import AsyncRestClient, RestClient, RestRequest, RestResponse
from .telemetry import log_request_failed, log_request_sent, log_response_received

# Sentinel: decode into the endpoint's own response_model
ENDPOINT_MODEL: Any = object()


@lru_cache(maxsize=256)
def _adapter(model: Any) -> TypeAdapter[Any]:
    return TypeAdapter(model)


def prepare_request(
    method: Method,
    url: str,
    body: Body | None,
    client: RestClient | AsyncRestClient,
) -> RestRequest:
    """Assemble a request and let the client attach credentials."""
    headers: dict[str, str] = {}
    payload: bytes | None = None
    if body is not None:
        content_type, payload = body
        headers["Content-Type"] = content_type
    return client.attach_auth(RestRequest(method=method, url=url, headers=headers, body=payload))


def build_request(endpoint: Endpoint, client: RestClient | AsyncRestClient) -> RestRequest:
    """Build the full request for an endpoint."""
    url = client.rest_endpoint(endpoint.endpoint_path())
    url = endpoint.parameters().add_to_url(url)
    return prepare_request(endpoint.method(), url, endpoint.body(), client)


def send(client: RestClient, request: RestRequest) -> RestResponse:
    """Perform a request through a synchronous client."""
    log_request_sent(method=request.method.value, url=request.url, has_body=request.body is not None)
    try:
        response = client.rest(request)
    except TransportError as e:
        log_request_failed(
            method=request.method.value,
            url=request.url,
            error_type=type(e).__name__,
            error_message=str(e),
        )
        raise
    log_response_received(
        method=request.method.value, url=request.url, status=response.status, size=len(response.body)
    )
    return response


async def send_async(client: AsyncRestClient, request: RestRequest) -> RestResponse:
    """Perform a request through an asynchronous client."""
    log_request_sent(method=request.method.value, url=request.url, has_body=request.body is not None)
    try:
        response = await client.rest_async(request)
    except TransportError as e:
        log_request_failed(
            method=request.method.value,
            url=request.url,
            error_type=type(e).__name__,
            error_message=str(e),
        )
        raise
    log_response_received(
        method=request.method.value, url=request.url, status=response.status, size=len(response.body)
    )
    return response


def _retry_after(response: RestResponse) -> float | None:
    value = response.header("Retry-After")
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def check_status(request: RestRequest, response: RestResponse) -> None:
    """Raise the matching ApiError for a non-success response.

    Raises:
        ApiError: Or a status-specific subclass (NotFoundError, ...)
    """
    if response.is_success:
        return

    try:
        body = response.json()
    except ValueError:
        body = None

    error = api_error_for_status(response.status, body, retry_after=_retry_after(response))
    log_request_failed(
        method=request.method.value,
        url=request.url,
        error_type=type(error).__name__,
        error_message=error.message,
    )
    raise error


def decode(response: RestResponse, model: Any) -> Any:
    """Decode a success response body.

    Args:
        response: Response with a success status
        model: Type to validate into; None returns the plain JSON value

    Raises:
        DeserializationError: If the body is not JSON or does not fit ``model``
    """
    try:
        data = response.json()
    except ValueError as e:
        raise DeserializationError(f"Response body is not valid JSON: {e}", response.body) from e

    if model is None:
        return data

    try:
        return _adapter(model).validate_python(data)
    except ValidationError as e:
        name = getattr(model, "__name__", repr(model))
        raise DeserializationError(
            f"Response does not match {name}: {e.error_count()} validation error(s)",
            response.body,
        ) from e


def _resolve_model(endpoint: Endpoint, model: Any) -> Any:
    return endpoint.response_model if model is ENDPOINT_MODEL else model


def query(endpoint: Endpoint, client: RestClient, model: Any = ENDPOINT_MODEL) -> Any:
    """Execute an endpoint and decode its response.

    Args:
        endpoint: Built endpoint
        client: Synchronous client
        model: Override for the endpoint's ``response_model`` (None for raw JSON)

    Returns:
        Decoded response
    """
    request = build_request(endpoint, client)
    response = send(client, request)
    check_status(request, response)
    return decode(response, _resolve_model(endpoint, model))


async def query_async(
    endpoint: Endpoint, client: AsyncRestClient, model: Any = ENDPOINT_MODEL
) -> Any:
    """Asynchronous ``query``."""
    request = build_request(endpoint, client)
    response = await send_async(client, request)
    check_status(request, response)
    return decode(response, _resolve_model(endpoint, model))


class Ignore:
    """Execute an endpoint, discarding the response body."""

    def __init__(self, endpoint: Endpoint) -> None:
        self.endpoint = endpoint

    def query(self, client: RestClient) -> None:
        request = build_request(self.endpoint, client)
        check_status(request, send(client, request))

    async def query_async(self, client: AsyncRestClient) -> None:
        request = build_request(self.endpoint, client)
        check_status(request, await send_async(client, request))


class Raw:
    """Execute an endpoint, returning the undecoded response body."""

    def __init__(self, endpoint: Endpoint) -> None:
        self.endpoint = endpoint

    def query(self, client: RestClient) -> bytes:
        request = build_request(self.endpoint, client)
        response = send(client, request)
        check_status(request, response)
        return response.body

    async def query_async(self, client: AsyncRestClient) -> bytes:
        request = build_request(self.endpoint, client)
        response = await send_async(client, request)
        check_status(request, response)
        return response.body


def ignore(endpoint: Endpoint) -> Ignore:
    """Wrap an endpoint so only success or failure is reported."""
    return Ignore(endpoint)


def raw(endpoint: Endpoint) -> Raw:
    """Wrap an endpoint so the body is returned as bytes."""
    return Raw(endpoint)
