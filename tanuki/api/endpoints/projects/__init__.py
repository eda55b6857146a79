"""Project API endpoints."""

from .members import AddProjectMember, ProjectMember, ProjectMembers
from .protected_branches import ProtectBranch, ProtectedAccess, UnprotectBranch
from .repository.files import FileRaw

__all__ = [
    "AddProjectMember",
    "FileRaw",
    "ProjectMember",
    "ProjectMembers",
    "ProtectBranch",
    "ProtectedAccess",
    "UnprotectBranch",
]
