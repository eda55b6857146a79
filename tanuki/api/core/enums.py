"""Core enumerations shared by the endpoint core and the catalog.

Architecture:
    This module defines the standardized enums used throughout the library.
    The transport-facing enums (Method, PaginationKind, AuthKind) are used by
    the runtime; the value enums (AccessLevel, SortOrder, ...) are used by
    catalog entries and rendered into query/body parameters.

Design Decisions:
    - String enums: render directly into the wire format via ``.value``
    - Int enums for access levels: the API speaks numeric levels
    - ``as_str()`` helpers: catalog code never formats enum values by hand

Key Types:
    - Method: Fixed HTTP verb set
    - PaginationKind: Offset (page number) vs keyset (Link header) paging
    - AuthKind: How the token is attached to requests
    - AccessLevel / ProtectedAccessLevel: Membership and protection levels

See Also:
    - params.param_value: Renders enums into parameter strings
    - ClientConfig: Uses AuthKind
"""

from enum import Enum, IntEnum


class Method(str, Enum):
    """HTTP verbs an endpoint may use."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    HEAD = "HEAD"

    def __str__(self) -> str:
        """String representation returns the value."""
        return self.value


class PaginationKind(str, Enum):
    """How a collection endpoint advances between pages.

    Architecture:
        OFFSET endpoints take ``page``/``per_page`` query parameters and
        announce the following page through ``X-Next-Page``. KEYSET endpoints
        hand out an opaque ``Link: <...>; rel="next"`` URL instead.
    """

    OFFSET = "offset"
    KEYSET = "keyset"

    def __str__(self) -> str:
        return self.value


class AuthKind(str, Enum):
    """Authentication scheme used to attach the client token."""

    TOKEN = "token"
    OAUTH2 = "oauth2"
    JOB_TOKEN = "job_token"
    NONE = "none"

    def __str__(self) -> str:
        return self.value


class AccessLevel(IntEnum):
    """Access levels for project and group members."""

    NO_ACCESS = 0
    MINIMAL = 5
    GUEST = 10
    PLANNER = 15
    REPORTER = 20
    DEVELOPER = 30
    MAINTAINER = 40
    OWNER = 50
    ADMIN = 60

    def as_str(self) -> str:
        """Lowercase name of the level."""
        return self.name.lower().replace("_", " ")


class ProtectedAccessLevel(IntEnum):
    """Access levels which may be granted on protected branches."""

    NO_ACCESS = 0
    DEVELOPER = 30
    MAINTAINER = 40
    ADMIN = 60


class SortOrder(str, Enum):
    """Sort direction for list endpoints."""

    ASCENDING = "asc"
    DESCENDING = "desc"

    def __str__(self) -> str:
        return self.value


class EnableState(str, Enum):
    """Toggle used by settings-style parameters."""

    ENABLED = "enabled"
    DISABLED = "disabled"

    def __str__(self) -> str:
        return self.value


class YesNo(str, Enum):
    """Boolean flavour some endpoints expect as ``yes``/``no``."""

    YES = "yes"
    NO = "no"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_bool(cls, value: bool) -> "YesNo":
        """Map a boolean to the matching member."""
        return cls.YES if value else cls.NO
