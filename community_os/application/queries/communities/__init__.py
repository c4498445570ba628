"""Community queries."""

from .get_community import GetCommunityQuery, GetCommunityHandler
from .list_communities import ListCommunitiesQuery, ListCommunitiesHandler
from .get_community_stats import GetCommunityStatsQuery, GetCommunityStatsHandler
from .get_leaderboard import GetLeaderboardQuery, GetLeaderboardHandler

__all__ = [
    "GetCommunityQuery",
    "GetCommunityHandler",
    "ListCommunitiesQuery",
    "ListCommunitiesHandler",
    "GetCommunityStatsQuery",
    "GetCommunityStatsHandler",
    "GetLeaderboardQuery",
    "GetLeaderboardHandler",
]
