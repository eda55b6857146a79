"""Unprotect branch endpoint definition."""

from __future__ import annotations

from dataclasses import dataclass

from ....core.common import NameOrId, path_escaped
from ....core.endpoint import Endpoint, required
from ....core.enums import Method


@dataclass(frozen=True)
class UnprotectBranch(Endpoint):
    """Remove protection from a branch.

    The server answers with an empty body; run it through ``ignore()``.
    """

    # The project the branch belongs to.
    project: NameOrId = required(convert=NameOrId.of)
    # The name or glob of the branch to unprotect.
    name: str = required()

    def method(self) -> Method:
        return Method.DELETE

    def endpoint_path(self) -> str:
        return f"projects/{self.project}/protected_branches/{path_escaped(self.name)}"
