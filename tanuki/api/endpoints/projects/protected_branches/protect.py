"""Protect branch endpoint definition and access rules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from ....core.common import NameOrId
from ....core.endpoint import Endpoint, optional, required
from ....core.enums import Method, ProtectedAccessLevel
from ....core.params import Body, FormParams
from ....models import ProtectedBranch


@dataclass(frozen=True)
class ProtectedAccess:
    """A fine-grained grant on a protected branch: a user, a group or a level."""

    user_id: int | None = None
    group_id: int | None = None
    access_level: ProtectedAccessLevel | None = None

    def __post_init__(self) -> None:
        given = [v for v in (self.user_id, self.group_id, self.access_level) if v is not None]
        if len(given) != 1:
            raise ValueError("ProtectedAccess needs exactly one of user_id, group_id, access_level")

    @classmethod
    def user(cls, user_id: int) -> ProtectedAccess:
        return cls(user_id=user_id)

    @classmethod
    def group(cls, group_id: int) -> ProtectedAccess:
        return cls(group_id=group_id)

    @classmethod
    def level(cls, level: ProtectedAccessLevel | int) -> ProtectedAccess:
        return cls(access_level=ProtectedAccessLevel(level))

    def add_params(self, key: str, params: FormParams) -> None:
        """Push this rule as ``key[][user_id]`` (or group_id / access_level)."""
        params.push_opt(f"{key}[][user_id]", self.user_id)
        params.push_opt(f"{key}[][group_id]", self.group_id)
        params.push_opt(f"{key}[][access_level]", self.access_level)


def _access_list(values: Any) -> tuple[ProtectedAccess, ...]:
    return tuple(values)


def _level(value: Any) -> ProtectedAccessLevel:
    return ProtectedAccessLevel(value)


@dataclass(frozen=True)
class ProtectBranch(Endpoint):
    """Protect a branch or a wildcard pattern of branches."""

    response_model: ClassVar[Any] = ProtectedBranch

    # The project to protect a branch within.
    project: NameOrId = required(convert=NameOrId.of)
    # The name or glob of the branch to protect.
    name: str = required()
    push_access_level: ProtectedAccessLevel | None = optional(convert=_level)
    merge_access_level: ProtectedAccessLevel | None = optional(convert=_level)
    unprotect_access_level: ProtectedAccessLevel | None = optional(convert=_level)
    allow_force_push: bool | None = optional()
    code_owner_approval_required: bool | None = optional()
    allowed_to_push: tuple[ProtectedAccess, ...] | None = optional(convert=_access_list)
    allowed_to_merge: tuple[ProtectedAccess, ...] | None = optional(convert=_access_list)
    allowed_to_unprotect: tuple[ProtectedAccess, ...] | None = optional(convert=_access_list)

    def method(self) -> Method:
        return Method.POST

    def endpoint_path(self) -> str:
        return f"projects/{self.project}/protected_branches"

    def body(self) -> Body | None:
        params = FormParams()
        (
            params.push("name", self.name)
            .push_opt("push_access_level", self.push_access_level)
            .push_opt("merge_access_level", self.merge_access_level)
            .push_opt("unprotect_access_level", self.unprotect_access_level)
            .push_opt("allow_force_push", self.allow_force_push)
            .push_opt("code_owner_approval_required", self.code_owner_approval_required)
        )
        for key, rules in (
            ("allowed_to_push", self.allowed_to_push),
            ("allowed_to_merge", self.allowed_to_merge),
            ("allowed_to_unprotect", self.allowed_to_unprotect),
        ):
            for rule in rules or ():
                rule.add_params(key, params)
        return params.into_body()
