from dataclasses import dataclass

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Command, CommandHandler
from community_os.application.dto import CommunityDto
from community_os.application.errors import CommunityError, CommunityErrorCode
from community_os.application.mappers import to_community_dto
from community_os.domain.ports.repositories import CommunityRepository


@dataclass(frozen=True)
class ArchiveCommunityCommand(Command[CommunityDto]):
    community_id: str


class ArchiveCommunityHandler(CommandHandler[CommunityDto]):
    _community_repository: CommunityRepository

    def __init__(self, community_repository: CommunityRepository):
        self._community_repository = community_repository

    @translate_errors(CommunityError)
    async def execute(self, command: ArchiveCommunityCommand) -> CommunityDto:
        community = await self._community_repository.find_by_id(command.community_id)
        if community is None:
            raise CommunityError(CommunityErrorCode.COMMUNITY_NOT_FOUND)
        if community.is_archived:
            raise CommunityError(CommunityErrorCode.COMMUNITY_ALREADY_ARCHIVED)

        community.archive()
        await self._community_repository.delete(community.id)
        return to_community_dto(community)
