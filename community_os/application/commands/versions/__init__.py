"""Content version commands."""

from .restore_post_version import RestorePostVersionCommand, RestorePostVersionHandler
from .restore_comment_version import RestoreCommentVersionCommand, RestoreCommentVersionHandler

__all__ = [
    "RestorePostVersionCommand",
    "RestorePostVersionHandler",
    "RestoreCommentVersionCommand",
    "RestoreCommentVersionHandler",
]
