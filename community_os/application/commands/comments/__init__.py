"""Comment commands."""

from .create_comment import CreateCommentCommand, CreateCommentHandler
from .update_comment import UpdateCommentCommand, UpdateCommentHandler
from .archive_comment import ArchiveCommentCommand, ArchiveCommentHandler
from .like_comment import LikeCommentCommand, LikeCommentHandler

__all__ = [
    "CreateCommentCommand",
    "CreateCommentHandler",
    "UpdateCommentCommand",
    "UpdateCommentHandler",
    "ArchiveCommentCommand",
    "ArchiveCommentHandler",
    "LikeCommentCommand",
    "LikeCommentHandler",
]
