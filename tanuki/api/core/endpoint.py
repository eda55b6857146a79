"""Endpoint contract implemented by every catalog entry.

Architecture:
    An endpoint is a frozen dataclass describing one API call. The core only
    ever talks to this contract: the runner asks for ``method()``,
    ``endpoint_path()``, ``parameters()`` and ``body()`` and never inspects
    concrete catalog types.

Design Decisions:
    - Frozen dataclasses: a built endpoint is immutable and request-ready
    - Field converters: ``required(convert=...)`` coerces caller input once,
      at construction, so accessors stay pure
    - ``response_model`` class attribute: each entry declares the shape its
      success response decodes into (None keeps the raw JSON value)
    - Pageable mixin: collection endpoints opt in to pagination and pick the
      strategy per entry

See Also:
    - EndpointBuilder: Runtime-checked builder used by ``Endpoint.builder()``
    - tanuki.api.runtime.rest.runner: Executes endpoints against a client
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import MISSING, Field, field, fields
from typing import TYPE_CHECKING, Any, ClassVar

from .enums import Method, PaginationKind
from .params import Body, QueryParams

if TYPE_CHECKING:
    from ..runtime.rest.client import AsyncRestClient, RestClient
    from .builder import EndpointBuilder

_CONVERT = "tanuki_convert"


def required(*, convert: Any = None) -> Any:
    """Declare a field the builder must receive."""
    return field(metadata={_CONVERT: convert})


def optional(default: Any = None, *, convert: Any = None) -> Any:
    """Declare a field that may be left unset (defaults to None)."""
    return field(default=default, metadata={_CONVERT: convert})


def is_required(f: Field) -> bool:
    return f.default is MISSING and f.default_factory is MISSING


class Endpoint(ABC):
    """A single API call.

    Subclasses are ``@dataclass(frozen=True)`` classes declaring their inputs
    with ``required()`` and ``optional()``.
    """

    response_model: ClassVar[Any] = None

    def __post_init__(self) -> None:
        for f in fields(self):  # type: ignore[arg-type]
            convert = f.metadata.get(_CONVERT)
            value = getattr(self, f.name)
            if convert is not None and value is not None:
                object.__setattr__(self, f.name, convert(value))

    @classmethod
    def builder(cls) -> EndpointBuilder[Any]:
        """Create a builder for the endpoint."""
        from .builder import EndpointBuilder

        return EndpointBuilder(cls)

    @abstractmethod
    def method(self) -> Method:
        """HTTP verb of the call."""

    @abstractmethod
    def endpoint_path(self) -> str:
        """Path relative to the API root, with caller-supplied segments escaped."""

    def parameters(self) -> QueryParams:
        """Query string parameters."""
        return QueryParams()

    def body(self) -> Body | None:
        """Request body as ``(content type, bytes)``, if any."""
        return None

    def query(self, client: RestClient) -> Any:
        """Execute and decode into ``response_model``."""
        from ..runtime.rest.runner import query

        return query(self, client)

    async def query_async(self, client: AsyncRestClient) -> Any:
        """Execute asynchronously and decode into ``response_model``."""
        from ..runtime.rest.runner import query_async

        return await query_async(self, client)


class Pageable:
    """Mixin for endpoints returning a collection split across pages."""

    def pagination_kind(self) -> PaginationKind:
        """Pagination strategy the server uses for this call."""
        return PaginationKind.OFFSET
