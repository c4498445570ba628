from dataclasses import dataclass

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Query, QueryHandler
from community_os.application.dto import VersionComparisonDto
from community_os.application.errors import ContentVersionError, ContentVersionErrorCode
from community_os.application.mappers import to_content_version_dto
from community_os.domain.ports.repositories import ContentVersionRepository


@dataclass(frozen=True)
class CompareVersionsQuery(Query[VersionComparisonDto]):
    content_id: str
    old_version: int
    new_version: int


class CompareVersionsHandler(QueryHandler[VersionComparisonDto]):
    def __init__(self, version_repository: ContentVersionRepository):
        self._version_repository = version_repository

    @translate_errors(ContentVersionError)
    async def execute(self, query: CompareVersionsQuery) -> VersionComparisonDto:
        if not query.content_id or not query.content_id.strip():
            raise ContentVersionError(
                ContentVersionErrorCode.INVALID_INPUT, "Content ID is required"
            )
        if query.old_version == query.new_version:
            raise ContentVersionError(
                ContentVersionErrorCode.INVALID_INPUT, "Cannot compare a version with itself"
            )

        old = await self._version_repository.find_by_number(query.content_id, query.old_version)
        new = await self._version_repository.find_by_number(query.content_id, query.new_version)
        if old is None or new is None:
            raise ContentVersionError(ContentVersionErrorCode.VERSION_NOT_FOUND)

        return VersionComparisonDto(
            old_version=to_content_version_dto(old),
            new_version=to_content_version_dto(new),
        )
