"""Client configuration shared by every request of a client."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .enums import AuthKind

DEFAULT_USER_AGENT = "tanuki-api"
API_PREFIX = "api/v4/"


class ClientConfig(BaseModel):
    """Host, credentials and transport settings.

    Frozen so one instance can be shared by concurrent requests.
    """

    host: str = Field(..., min_length=1, description="Host name, optionally with a port")
    token: str | None = Field(None, repr=False, description="API token")
    auth: AuthKind = Field(AuthKind.TOKEN, description="How the token is sent")
    insecure: bool = Field(False, description="Use http instead of https")
    timeout: float = Field(30.0, gt=0, description="Total request timeout in seconds")
    user_agent: str = Field(DEFAULT_USER_AGENT, min_length=1)

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @field_validator("host")
    @classmethod
    def validate_host(cls, v: str) -> str:
        """Reject schemes and strip trailing slashes."""
        if "://" in v:
            raise ValueError("host must not include a scheme; use `insecure` for http")
        return v.rstrip("/")

    @field_validator("token")
    @classmethod
    def validate_token(cls, v: str | None) -> str | None:
        if v is not None and not v:
            raise ValueError("token must not be empty")
        return v

    @property
    def api_url(self) -> str:
        """Root every endpoint path is resolved against."""
        scheme = "http" if self.insecure else "https"
        return f"{scheme}://{self.host}/{API_PREFIX}"

    def auth_headers(self) -> dict[str, str]:
        """Headers carrying the credentials."""
        if self.token is None or self.auth == AuthKind.NONE:
            return {}
        if self.auth == AuthKind.OAUTH2:
            return {"Authorization": f"Bearer {self.token}"}
        if self.auth == AuthKind.JOB_TOKEN:
            return {"JOB-TOKEN": self.token}
        return {"PRIVATE-TOKEN": self.token}
