"""Query string and request body parameter encoding.

Architecture:
    Endpoints describe their parameters through ordered pair lists rather than
    dicts, so repeated keys (``user_ids[]=1&user_ids[]=2``) survive and the
    produced query string is byte-for-byte reproducible.

Design Decisions:
    - Ordered pairs: insertion order is the wire order, never hash order
    - Values rendered eagerly: pushing converts to the wire string once
    - ``push_opt`` skips None: unset optional parameters leave no residue
    - Same API for query and form bodies: only the sink differs

Rendering rules (``param_value``):
    - bool -> ``true`` / ``false``
    - Enum -> rendering of its value
    - datetime -> UTC, RFC 3339 with seconds and ``Z`` suffix
    - date -> ``YYYY-MM-DD``
    - objects exposing ``as_param()`` -> its result
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator
from datetime import UTC, date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any
from urllib.parse import urlencode

from pydantic import BaseModel

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE = "application/json"

# (content type, encoded bytes)
Body = tuple[str, bytes]


def format_datetime(value: datetime) -> str:
    """Render a timestamp as ``2024-01-31T12:00:00Z``.

    Naive datetimes are taken to be in UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).strftime("%Y-%m-%dT%H:%M:%SZ")


def param_value(value: Any) -> str:
    """Render a single parameter value into its wire string.

    Raises:
        TypeError: If the value has no parameter representation
    """
    as_param = getattr(value, "as_param", None)
    if callable(as_param):
        return as_param()
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return param_value(value.value)
    # datetime is a date subclass; check it first
    if isinstance(value, datetime):
        return format_datetime(value)
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (int, float, Decimal)):
        return str(value)
    if isinstance(value, str):
        return value
    raise TypeError(f"Cannot use {type(value).__name__} as a parameter value")


class _ParamList:
    """Ordered list of rendered ``(key, value)`` pairs."""

    def __init__(self, pairs: Iterable[tuple[str, Any]] | None = None) -> None:
        self._pairs: list[tuple[str, str]] = []
        if pairs is not None:
            self.extend(pairs)

    def push(self, key: str, value: Any):
        """Add a parameter."""
        self._pairs.append((key, param_value(value)))
        return self

    def push_opt(self, key: str, value: Any | None):
        """Add a parameter only when a value is present."""
        if value is not None:
            self.push(key, value)
        return self

    def extend(self, pairs: Iterable[tuple[str, Any]]):
        """Add several ``(key, value)`` pairs in order."""
        for key, value in pairs:
            self.push(key, value)
        return self

    def extend_key(self, key: str, values: Iterable[Any] | None):
        """Push ``key`` once per element of ``values``; None pushes nothing."""
        if values is not None:
            for value in values:
                self.push(key, value)
        return self

    def without(self, *keys: str):
        """Copy of these parameters with every occurrence of ``keys`` removed."""
        copy = type(self)()
        copy._pairs = [pair for pair in self._pairs if pair[0] not in keys]
        return copy

    def get_all(self, key: str) -> list[str]:
        """All values pushed under ``key``, in order."""
        return [value for k, value in self._pairs if k == key]

    def pairs(self) -> list[tuple[str, str]]:
        return list(self._pairs)

    def encode(self) -> str:
        """URL-encode the pairs (``application/x-www-form-urlencoded`` rules)."""
        return urlencode(self._pairs)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __bool__(self) -> bool:
        return bool(self._pairs)

    def __contains__(self, key: object) -> bool:
        return any(k == key for k, _ in self._pairs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _ParamList):
            return NotImplemented
        return type(self) is type(other) and self._pairs == other._pairs

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._pairs!r})"


class QueryParams(_ParamList):
    """Parameters sent in the URL query string."""

    def add_to_url(self, url: str) -> str:
        """Append the encoded query string to ``url``."""
        if not self._pairs:
            return url
        separator = "&" if "?" in url else "?"
        return f"{url}{separator}{self.encode()}"


class FormParams(_ParamList):
    """Parameters sent as a form-encoded request body."""

    def into_body(self) -> Body:
        return FORM_CONTENT_TYPE, self.encode().encode("utf-8")


class JsonParams:
    """Helpers for endpoints that send a JSON document as the body."""

    @staticmethod
    def clean(value: Any) -> Any:
        """Convert models, enums and dates into JSON-compatible values."""
        if isinstance(value, BaseModel):
            return value.model_dump(mode="json", exclude_none=True)
        if isinstance(value, dict):
            return {k: JsonParams.clean(v) for k, v in value.items() if v is not None}
        if isinstance(value, (list, tuple)):
            return [JsonParams.clean(v) for v in value]
        if isinstance(value, bool) or value is None:
            return value
        if isinstance(value, Enum):
            return JsonParams.clean(value.value)
        if isinstance(value, (datetime, date, Decimal)) or callable(
            getattr(value, "as_param", None)
        ):
            return param_value(value)
        return value

    @staticmethod
    def into_body(value: Any) -> Body:
        """Serialize ``value`` into a compact JSON body."""
        document = json.dumps(JsonParams.clean(value), separators=(",", ":"))
        return JSON_CONTENT_TYPE, document.encode("utf-8")
