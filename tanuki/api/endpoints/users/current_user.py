"""Current user endpoint definition."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from ...core.endpoint import Endpoint
from ...core.enums import Method
from ...models import User


@dataclass(frozen=True)
class CurrentUser(Endpoint):
    """Query information about the API calling user."""

    response_model: ClassVar[Any] = User

    def method(self) -> Method:
        return Method.GET

    def endpoint_path(self) -> str:
        return "user"
