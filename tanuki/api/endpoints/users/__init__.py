"""User API endpoints."""

from .current_user import CurrentUser

__all__ = ["CurrentUser"]
