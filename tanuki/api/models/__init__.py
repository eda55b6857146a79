"""Response models for catalog endpoints.

Architecture:
    Pydantic v2 models describing the success responses decoded by the
    runner. Models are frozen and ignore fields they do not declare, so new
    server-side fields never break decoding.

Model Categories:
    - Users: UserBasic, User
    - Membership: Member
    - Branches: ProtectedBranch, BranchAccess
"""

from .member import Member
from .protected_branch import BranchAccess, ProtectedBranch
from .user import User, UserBasic

__all__ = [
    "BranchAccess",
    "Member",
    "ProtectedBranch",
    "User",
    "UserBasic",
]
