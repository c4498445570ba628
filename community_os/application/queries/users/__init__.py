"""User queries."""

from .get_user import GetUserQuery, GetUserHandler
from .list_users import ListUsersQuery, ListUsersHandler
from .list_members import ListMembersQuery, ListMembersHandler
from .search_mentions import SearchMentionsQuery, SearchMentionsHandler

__all__ = [
    "GetUserQuery",
    "GetUserHandler",
    "ListUsersQuery",
    "ListUsersHandler",
    "ListMembersQuery",
    "ListMembersHandler",
    "SearchMentionsQuery",
    "SearchMentionsHandler",
]
