from dataclasses import dataclass

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Command, CommandHandler
from community_os.application.dto import CommunityDto
from community_os.application.errors import CommunityError, CommunityErrorCode
from community_os.application.mappers import to_community_dto
from community_os.domain.ports.repositories import CommunityRepository


@dataclass(frozen=True)
class TransferOwnershipCommand(Command[CommunityDto]):
    community_id: str
    new_owner_id: str


class TransferOwnershipHandler(CommandHandler[CommunityDto]):
    _community_repository: CommunityRepository

    def __init__(self, community_repository: CommunityRepository):
        self._community_repository = community_repository

    @translate_errors(CommunityError)
    async def execute(self, command: TransferOwnershipCommand) -> CommunityDto:
        if not command.community_id or not command.new_owner_id:
            raise CommunityError(
                CommunityErrorCode.INVALID_INPUT, "Community ID and new owner ID are required"
            )

        community = await self._community_repository.find_by_id(command.community_id)
        if community is None:
            raise CommunityError(CommunityErrorCode.COMMUNITY_NOT_FOUND)

        community.transfer_ownership(command.new_owner_id)
        updated = await self._community_repository.update(community)
        return to_community_dto(updated)
