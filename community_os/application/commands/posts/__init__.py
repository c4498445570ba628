"""Post commands."""

from .create_post import CreatePostCommand, CreatePostHandler
from .update_post import UpdatePostCommand, UpdatePostHandler
from .publish_post import PublishPostCommand, PublishPostHandler
from .pin_post import PinPostCommand, PinPostHandler
from .mark_solved import MarkSolvedCommand, MarkSolvedHandler
from .archive_post import ArchivePostCommand, ArchivePostHandler
from .like_post import LikePostCommand, LikePostHandler
from .save_draft import SaveDraftCommand, SaveDraftHandler

__all__ = [
    "CreatePostCommand",
    "CreatePostHandler",
    "UpdatePostCommand",
    "UpdatePostHandler",
    "PublishPostCommand",
    "PublishPostHandler",
    "PinPostCommand",
    "PinPostHandler",
    "MarkSolvedCommand",
    "MarkSolvedHandler",
    "ArchivePostCommand",
    "ArchivePostHandler",
    "LikePostCommand",
    "LikePostHandler",
    "SaveDraftCommand",
    "SaveDraftHandler",
]
