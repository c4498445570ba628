"""
Search Query - case-insensitive substring search over posts, comments and members.

Scoring (higher first, ties keep repository order):
    post title match        1.0  (+0.2 when the title starts with the query)
    post content match      0.6
    comment match           0.5
    member name match       0.8
    member email match      0.4
"""

import logging
from dataclasses import dataclass
from typing import Optional

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Query, QueryHandler
from community_os.application.dto import SearchResponseDto, SearchResultDto
from community_os.application.errors import SearchError, SearchErrorCode
from community_os.domain.entities import Comment, Post, User
from community_os.domain.ports.repositories import CommunityRepository, SearchRepository
from community_os.domain.services import make_snippet

logger = logging.getLogger(__name__)

SEARCH_TYPES = ("posts", "comments", "users", "all")
MIN_QUERY_LENGTH = 2


@dataclass(frozen=True)
class SearchQuery(Query[SearchResponseDto]):
    q: str
    type: str = "all"
    community_id: Optional[str] = None
    limit: int = 20
    offset: int = 0


class SearchHandler(QueryHandler[SearchResponseDto]):
    def __init__(
        self,
        search_repository: SearchRepository,
        community_repository: CommunityRepository,
    ):
        self._search_repository = search_repository
        self._community_repository = community_repository

    @translate_errors(SearchError)
    async def execute(self, query: SearchQuery) -> SearchResponseDto:
        text = (query.q or "").strip()
        if not text:
            raise SearchError(SearchErrorCode.INVALID_QUERY, "Search query is required")
        if len(text) < MIN_QUERY_LENGTH:
            raise SearchError(
                SearchErrorCode.QUERY_TOO_SHORT,
                f"Search query must be at least {MIN_QUERY_LENGTH} characters",
            )
        if query.type not in SEARCH_TYPES:
            raise SearchError(SearchErrorCode.INVALID_TYPE)
        if query.limit < 1 or query.offset < 0:
            raise SearchError(SearchErrorCode.INVALID_QUERY, "Invalid pagination")

        if query.community_id:
            community = await self._community_repository.find_by_id(query.community_id)
            if community is None or community.is_archived:
                raise SearchError(SearchErrorCode.INVALID_COMMUNITY)

        # enough rows from each source to fill the requested page after merging
        window = query.offset + query.limit
        results: list[SearchResultDto] = []
        total_count = 0
        try:
            if query.type in ("posts", "all"):
                posts = await self._search_repository.search_posts(text, query.community_id, window)
                results.extend(_post_result(post, text) for post in posts)
                total_count += await self._search_repository.count_posts(text, query.community_id)
            if query.type in ("comments", "all"):
                pairs = await self._search_repository.search_comments(
                    text, query.community_id, window
                )
                results.extend(_comment_result(comment, post, text) for comment, post in pairs)
                total_count += await self._search_repository.count_comments(
                    text, query.community_id
                )
            if query.type in ("users", "all"):
                users = await self._search_repository.search_users(text, query.community_id, window)
                results.extend(_user_result(user, text) for user in users)
                total_count += await self._search_repository.count_users(text, query.community_id)
        except SearchError:
            raise
        except Exception as exc:
            logger.exception(f"[SEARCH] Backend failure for '{text}'")
            raise SearchError(SearchErrorCode.SEARCH_FAILED) from exc

        results.sort(key=lambda result: result.relevance_score, reverse=True)
        page = results[query.offset : query.offset + query.limit]
        return SearchResponseDto(results=page, total_count=total_count, query=text)


def _post_result(post: Post, text: str) -> SearchResultDto:
    needle = text.lower()
    title = post.title.lower()
    if needle in title:
        score = 1.2 if title.startswith(needle) else 1.0
    else:
        score = 0.6
    return SearchResultDto(
        id=post.id,
        type="post",
        title=post.title,
        snippet=make_snippet(post.content, text),
        url=f"/communities/{post.community_id}/posts/{post.id}",
        relevance_score=score,
    )


def _comment_result(comment: Comment, post: Post, text: str) -> SearchResultDto:
    return SearchResultDto(
        id=comment.id,
        type="comment",
        title=f"Comment on {post.title}",
        snippet=make_snippet(comment.content, text),
        url=f"/communities/{post.community_id}/posts/{post.id}#comment-{comment.id}",
        relevance_score=0.5,
    )


def _user_result(user: User, text: str) -> SearchResultDto:
    name_match = bool(user.name) and text.lower() in user.name.lower()
    return SearchResultDto(
        id=user.id,
        type="user",
        title=user.display_name,
        snippet=user.email.value,
        url=f"/communities/{user.community_id}/members/{user.id}",
        relevance_score=0.8 if name_match else 0.4,
    )
