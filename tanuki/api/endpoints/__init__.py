"""Endpoint catalog.

Each module defines one API call as a frozen ``Endpoint`` dataclass. Entries
carry no logic beyond path, parameters and body construction; execution,
pagination and error handling live in ``tanuki.api.runtime``.
"""

from .projects import (
    AddProjectMember,
    FileRaw,
    ProjectMember,
    ProjectMembers,
    ProtectBranch,
    ProtectedAccess,
    UnprotectBranch,
)
from .users import CurrentUser

__all__ = [
    "AddProjectMember",
    "CurrentUser",
    "FileRaw",
    "ProjectMember",
    "ProjectMembers",
    "ProtectBranch",
    "ProtectedAccess",
    "UnprotectBranch",
]
