"""Comment queries."""

from .get_comment import GetCommentQuery, GetCommentHandler
from .list_comments import ListCommentsQuery, ListCommentsHandler

__all__ = [
    "GetCommentQuery",
    "GetCommentHandler",
    "ListCommentsQuery",
    "ListCommentsHandler",
]
