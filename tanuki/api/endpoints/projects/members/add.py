"""Add project member endpoint definition."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, ClassVar

from ....core.common import NameOrId
from ....core.endpoint import Endpoint, optional, required
from ....core.enums import AccessLevel, Method
from ....core.params import Body, FormParams
from ....models import Member


def _tasks(values: Any) -> tuple[str, ...]:
    return tuple(str(v) for v in values)


@dataclass(frozen=True)
class AddProjectMember(Endpoint):
    """Add a user as a member of a project."""

    response_model: ClassVar[Any] = Member

    # The project to add the user to.
    project: NameOrId = required(convert=NameOrId.of)
    # The user to add to the project.
    user: int = required(convert=int)
    # The access level for the user in the project.
    access_level: AccessLevel = required(convert=AccessLevel)
    # When the user's access expires.
    expires_at: date | None = optional()
    # The source of the invitation.
    invite_source: str | None = optional()
    # Onboarding tasks the user should focus on.
    tasks_to_be_done: tuple[str, ...] | None = optional(convert=_tasks)
    # The project ID in which to create the task issues.
    tasks_project_id: int | None = optional()

    def method(self) -> Method:
        return Method.POST

    def endpoint_path(self) -> str:
        return f"projects/{self.project}/members"

    def body(self) -> Body | None:
        params = FormParams()
        (
            params.push("user_id", self.user)
            .push("access_level", self.access_level)
            .push_opt("expires_at", self.expires_at)
            .push_opt("invite_source", self.invite_source)
            .extend_key("tasks_to_be_done[]", self.tasks_to_be_done)
            .push_opt("tasks_project_id", self.tasks_project_id)
        )
        return params.into_body()
