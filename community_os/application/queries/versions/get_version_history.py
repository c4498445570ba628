from dataclasses import dataclass

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Query, QueryHandler
from community_os.application.dto import ContentVersionDto
from community_os.application.errors import ContentVersionError, ContentVersionErrorCode
from community_os.application.mappers import to_content_version_dto
from community_os.domain.ports.repositories import ContentVersionRepository


@dataclass(frozen=True)
class GetVersionHistoryQuery(Query[list[ContentVersionDto]]):
    content_id: str


class GetVersionHistoryHandler(QueryHandler[list[ContentVersionDto]]):
    def __init__(self, version_repository: ContentVersionRepository):
        self._version_repository = version_repository

    @translate_errors(ContentVersionError)
    async def execute(self, query: GetVersionHistoryQuery) -> list[ContentVersionDto]:
        if not query.content_id or not query.content_id.strip():
            raise ContentVersionError(
                ContentVersionErrorCode.INVALID_INPUT, "Content ID is required"
            )
        versions = await self._version_repository.find_by_content_id(query.content_id)
        return [to_content_version_dto(version) for version in versions]
