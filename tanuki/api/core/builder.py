"""Runtime-checked builder for endpoint values.

Architecture:
    ``EndpointBuilder`` accumulates fields for one endpoint class and checks,
    at ``build()``, that every required field was supplied. Setters are
    derived from the dataclass fields, so catalog entries never write builder
    code of their own.

Design Decisions:
    - Fluent API: each setter returns the builder for chaining
    - Declaration-order validation: the first missing required field (in
      declaration order) is reported, whatever order setters were called in
    - Reusable: ``build()`` does not consume the builder
    - A required field set to None counts as missing
    - Field names may not shadow builder methods (``set``, ``build``, ...)

Example:
    >>> endpoint = (FileRaw.builder()
    ...     .project("group/project")
    ...     .file_path("docs/README.md")
    ...     .ref("main")
    ...     .build())
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import fields
from typing import Any, Generic, TypeVar

from .endpoint import Endpoint, is_required
from .exceptions import InvalidEndpointError, MissingFieldError

E = TypeVar("E", bound=Endpoint)


class EndpointBuilder(Generic[E]):
    """Fluent builder for an endpoint dataclass."""

    def __init__(self, endpoint_cls: type[E]) -> None:
        self._endpoint_cls = endpoint_cls
        self._fields = {f.name: f for f in fields(endpoint_cls) if f.init}  # type: ignore[arg-type]
        shadowed = sorted(set(self._fields) & _BUILDER_NAMES)
        if shadowed:
            raise InvalidEndpointError(
                f"{endpoint_cls.__name__} fields shadow builder methods: {', '.join(shadowed)}"
            )
        self._values: dict[str, Any] = {}

    def __getattr__(self, name: str) -> Callable[[Any], EndpointBuilder[E]]:
        # Only reached for names that are not regular attributes
        if name.startswith("_"):
            raise AttributeError(name)
        if name not in self._fields:
            raise AttributeError(
                f"{type(self).__name__} for {self._endpoint_cls.__name__} has no field {name!r}"
            )

        def setter(value: Any) -> EndpointBuilder[E]:
            self._values[name] = value
            return self

        setter.__name__ = name
        return setter

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self._fields))

    def set(self, **values: Any) -> EndpointBuilder[E]:
        """Set several fields at once."""
        for name, value in values.items():
            getattr(self, name)(value)
        return self

    def missing_fields(self) -> list[str]:
        """Required fields not yet supplied, in declaration order."""
        return [
            name
            for name, f in self._fields.items()
            if is_required(f) and self._values.get(name) is None
        ]

    def build(self) -> E:
        """Validate and produce the immutable endpoint.

        Raises:
            MissingFieldError: Naming the first unset required field
        """
        missing = self.missing_fields()
        if missing:
            raise MissingFieldError(missing[0], endpoint=self._endpoint_cls.__name__)
        return self._endpoint_cls(**self._values)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._endpoint_cls.__name__}, {self._values!r})"


_BUILDER_NAMES = frozenset(name for name in vars(EndpointBuilder) if not name.startswith("_"))
