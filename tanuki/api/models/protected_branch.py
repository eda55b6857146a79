"""Protected branch models."""

from pydantic import BaseModel, ConfigDict, Field


class BranchAccess(BaseModel):
    """One access rule of a protected branch."""

    id: int | None = Field(None, description="Rule ID")
    access_level: int | None = Field(None, description="Access level granted")
    access_level_description: str | None = Field(None, description="Human-readable level")
    user_id: int | None = Field(None, description="User granted access")
    group_id: int | None = Field(None, description="Group granted access")

    model_config = ConfigDict(frozen=True)


class ProtectedBranch(BaseModel):
    """A protected branch (or wildcard pattern) of a project."""

    id: int | None = Field(None, description="Protected branch ID")
    name: str = Field(..., min_length=1, description="Branch name or glob")
    push_access_levels: list[BranchAccess] = Field(default_factory=list)
    merge_access_levels: list[BranchAccess] = Field(default_factory=list)
    unprotect_access_levels: list[BranchAccess] = Field(default_factory=list)
    allow_force_push: bool = Field(False, description="Whether force pushes are allowed")
    code_owner_approval_required: bool = Field(
        False, description="Whether code owner approval is required"
    )

    model_config = ConfigDict(frozen=True)
