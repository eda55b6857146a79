"""User data models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class UserBasic(BaseModel):
    """Minimal user representation embedded in other resources."""

    id: int = Field(..., description="User ID")
    username: str = Field(..., min_length=1, description="Login name")
    name: str = Field(..., description="Display name")
    state: str = Field(..., description="Account state (active, blocked, ...)")
    avatar_url: str | None = Field(None, description="Avatar image URL")
    web_url: str | None = Field(None, description="Profile page URL")

    model_config = ConfigDict(frozen=True)


class User(UserBasic):
    """The authenticated user, as returned by ``GET user``."""

    created_at: datetime | None = Field(None, description="Account creation time")
    email: str | None = Field(None, description="Primary email (own account only)")
    is_admin: bool | None = Field(None, description="Instance administrator flag")
    bot: bool = Field(False, description="Bot account flag")
    two_factor_enabled: bool | None = Field(None, description="2FA status")
