"""Project protected branches API endpoints.

These endpoints are used for protecting and unprotecting a project's branches.
"""

from .protect import ProtectBranch, ProtectedAccess
from .unprotect import UnprotectBranch

__all__ = ["ProtectBranch", "ProtectedAccess", "UnprotectBranch"]
