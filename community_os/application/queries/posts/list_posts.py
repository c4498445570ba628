from dataclasses import dataclass

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Query, QueryHandler
from community_os.application.dto import PostDto
from community_os.application.errors import PostError, PostErrorCode
from community_os.application.mappers import to_post_dto
from community_os.domain.ports.repositories import PostRepository


@dataclass(frozen=True)
class ListPostsQuery(Query[list[PostDto]]):
    community_id: str
    limit: int = 20
    offset: int = 0


class ListPostsHandler(QueryHandler[list[PostDto]]):
    def __init__(self, post_repository: PostRepository):
        self._post_repository = post_repository

    @translate_errors(PostError)
    async def execute(self, query: ListPostsQuery) -> list[PostDto]:
        if not query.community_id or not query.community_id.strip():
            raise PostError(PostErrorCode.INVALID_INPUT, "Community ID is required")
        if query.limit < 1 or query.offset < 0:
            raise PostError(PostErrorCode.INVALID_INPUT, "Invalid pagination")
        posts = await self._post_repository.find_by_community_id(
            query.community_id, query.limit, query.offset
        )
        return [to_post_dto(post) for post in posts]
