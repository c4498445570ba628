"""Community commands."""

from .create_community import CreateCommunityCommand, CreateCommunityHandler
from .update_community import UpdateCommunityCommand, UpdateCommunityHandler
from .transfer_ownership import TransferOwnershipCommand, TransferOwnershipHandler
from .archive_community import ArchiveCommunityCommand, ArchiveCommunityHandler

__all__ = [
    "CreateCommunityCommand",
    "CreateCommunityHandler",
    "UpdateCommunityCommand",
    "UpdateCommunityHandler",
    "TransferOwnershipCommand",
    "TransferOwnershipHandler",
    "ArchiveCommunityCommand",
    "ArchiveCommunityHandler",
]
