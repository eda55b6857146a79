"""Project repository file API endpoints."""

from .file_raw import FileRaw

__all__ = ["FileRaw"]
