"""Project members list endpoint definition."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from ....core.common import NameOrId
from ....core.endpoint import Endpoint, Pageable, optional, required
from ....core.enums import Method
from ....core.params import QueryParams
from ....models import Member


def _ids(values: Any) -> tuple[int, ...]:
    return tuple(int(v) for v in values)


@dataclass(frozen=True)
class ProjectMembers(Pageable, Endpoint):
    """Query the members of a project.

    Pageable: use ``paged(endpoint, pagination)`` to walk every page.
    """

    response_model: ClassVar[Any] = Member

    # The project to query for membership.
    project: NameOrId = required(convert=NameOrId.of)
    # Include members inherited from ancestor groups and invited groups.
    all_members: bool = optional(False)
    # A search string to filter members by (sent as `query`).
    search: str | None = optional()
    # Only return members with these user IDs.
    user_ids: tuple[int, ...] | None = optional(convert=_ids)
    # Leave out members with these user IDs.
    skip_users: tuple[int, ...] | None = optional(convert=_ids)

    def method(self) -> Method:
        return Method.GET

    def endpoint_path(self) -> str:
        if self.all_members:
            return f"projects/{self.project}/members/all"
        return f"projects/{self.project}/members"

    def parameters(self) -> QueryParams:
        params = QueryParams()
        (
            params.push_opt("query", self.search)
            .extend_key("user_ids[]", self.user_ids)
            .extend_key("skip_users[]", self.skip_users)
        )
        return params
