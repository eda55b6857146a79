"""Project members API endpoints.

These endpoints are used for querying and adding project members.
"""

from .add import AddProjectMember
from .member import ProjectMember
from .members import ProjectMembers

__all__ = ["AddProjectMember", "ProjectMember", "ProjectMembers"]
