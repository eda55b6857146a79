"""Single project member endpoint definition."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from ....core.common import NameOrId
from ....core.endpoint import Endpoint, optional, required
from ....core.enums import Method
from ....models import Member


@dataclass(frozen=True)
class ProjectMember(Endpoint):
    """Query a single member of a project."""

    response_model: ClassVar[Any] = Member

    # The project to query for the membership.
    project: NameOrId = required(convert=NameOrId.of)
    # The ID of the user.
    user: int = required(convert=int)
    # Include memberships inherited from ancestor groups.
    all_members: bool = optional(False)

    def method(self) -> Method:
        return Method.GET

    def endpoint_path(self) -> str:
        members = "members/all" if self.all_members else "members"
        return f"projects/{self.project}/{members}/{self.user}"
