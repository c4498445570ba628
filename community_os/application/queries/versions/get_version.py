from dataclasses import dataclass

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Query, QueryHandler
from community_os.application.dto import ContentVersionDto
from community_os.application.errors import ContentVersionError, ContentVersionErrorCode
from community_os.application.mappers import to_content_version_dto
from community_os.domain.ports.repositories import ContentVersionRepository


@dataclass(frozen=True)
class GetVersionQuery(Query[ContentVersionDto]):
    content_id: str
    version_number: int


class GetVersionHandler(QueryHandler[ContentVersionDto]):
    def __init__(self, version_repository: ContentVersionRepository):
        self._version_repository = version_repository

    @translate_errors(ContentVersionError)
    async def execute(self, query: GetVersionQuery) -> ContentVersionDto:
        if not query.content_id or not query.content_id.strip():
            raise ContentVersionError(
                ContentVersionErrorCode.INVALID_INPUT, "Content ID is required"
            )
        if query.version_number < 1:
            raise ContentVersionError(
                ContentVersionErrorCode.INVALID_INPUT, "Version number must be at least 1"
            )
        version = await self._version_repository.find_by_number(
            query.content_id, query.version_number
        )
        if version is None:
            raise ContentVersionError(ContentVersionErrorCode.VERSION_NOT_FOUND)
        return to_content_version_dto(version)
