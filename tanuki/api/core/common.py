"""Value types shared by catalog entries."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

from .params import param_value

# Characters left as-is inside a path segment, in addition to the unreserved
# set (letters, digits, "_.-~") that quote() never escapes. Everything else,
# including "/", "%", "?", "#" and space, is percent-encoded.
_PATH_SEGMENT_SAFE = "!$&'()*+,;=:@[]\\^|"


def path_escaped(value: str) -> str:
    """Escape a caller-supplied string for use as a single path segment.

    Example:
        >>> path_escaped("branch/name")
        'branch%2Fname'
    """
    return quote(value, safe=_PATH_SEGMENT_SAFE)


@dataclass(frozen=True)
class NameOrId:
    """A resource referenced either by numeric id or by full path.

    Names are escaped when rendered into a URL path, so ``"group/project"``
    becomes the single segment ``group%2Fproject``.
    """

    value: int | str

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, (int, str)):
            raise TypeError(f"NameOrId expects int or str, got {type(self.value).__name__}")

    @classmethod
    def of(cls, value: NameOrId | int | str) -> NameOrId:
        """Coerce ids, names and existing instances."""
        if isinstance(value, cls):
            return value
        return cls(value)

    @property
    def is_id(self) -> bool:
        return isinstance(self.value, int)

    def path_segment(self) -> str:
        if isinstance(self.value, int):
            return str(self.value)
        return path_escaped(self.value)

    def as_param(self) -> str:
        return str(self.value)

    def __str__(self) -> str:
        return self.path_segment()


@dataclass(frozen=True)
class CommaSeparatedList:
    """Multiple values sent as a single ``a,b,c`` parameter."""

    items: tuple[Any, ...]

    @classmethod
    def of(cls, values: CommaSeparatedList | Iterable[Any]) -> CommaSeparatedList:
        if isinstance(values, cls):
            return values
        return cls(tuple(values))

    def as_param(self) -> str:
        return ",".join(param_value(item) for item in self.items)

    def __len__(self) -> int:
        return len(self.items)
