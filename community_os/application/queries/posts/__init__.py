"""Post queries."""

from .get_post import GetPostQuery, GetPostHandler
from .get_post_thread import GetPostThreadQuery, GetPostThreadHandler
from .list_posts import ListPostsQuery, ListPostsHandler

__all__ = [
    "GetPostQuery",
    "GetPostHandler",
    "GetPostThreadQuery",
    "GetPostThreadHandler",
    "ListPostsQuery",
    "ListPostsHandler",
]
