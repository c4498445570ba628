"""Space commands."""

from .create_space import CreateSpaceCommand, CreateSpaceHandler
from .archive_space import ArchiveSpaceCommand, ArchiveSpaceHandler

__all__ = [
    "CreateSpaceCommand",
    "CreateSpaceHandler",
    "ArchiveSpaceCommand",
    "ArchiveSpaceHandler",
]
