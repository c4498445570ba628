"""Channel commands."""

from .create_channel import CreateChannelCommand, CreateChannelHandler
from .archive_channel import ArchiveChannelCommand, ArchiveChannelHandler

__all__ = [
    "CreateChannelCommand",
    "CreateChannelHandler",
    "ArchiveChannelCommand",
    "ArchiveChannelHandler",
]
