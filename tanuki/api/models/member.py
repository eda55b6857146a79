"""Project/group membership model."""

from datetime import date

from pydantic import Field

from ..core.enums import AccessLevel
from .user import UserBasic


class Member(UserBasic):
    """A user together with their access level on a project or group."""

    access_level: AccessLevel = Field(..., description="Granted access level")
    expires_at: date | None = Field(None, description="Membership expiry date")

    @property
    def is_expiring(self) -> bool:
        return self.expires_at is not None
