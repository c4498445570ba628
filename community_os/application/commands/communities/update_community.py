from dataclasses import dataclass
from typing import Optional

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Command, CommandHandler
from community_os.application.dto import CommunityDto
from community_os.application.errors import CommunityError, CommunityErrorCode
from community_os.application.mappers import to_community_dto
from community_os.domain.ports.repositories import CommunityRepository


@dataclass(frozen=True)
class UpdateCommunityCommand(Command[CommunityDto]):
    community_id: str
    name: Optional[str] = None
    logo_url: Optional[str] = None
    primary_color: Optional[str] = None
    # logo_url=None means "unchanged"; set this to remove the logo
    clear_logo: bool = False


class UpdateCommunityHandler(CommandHandler[CommunityDto]):
    _community_repository: CommunityRepository

    def __init__(self, community_repository: CommunityRepository):
        self._community_repository = community_repository

    @translate_errors(CommunityError)
    async def execute(self, command: UpdateCommunityCommand) -> CommunityDto:
        if not command.community_id or not command.community_id.strip():
            raise CommunityError(CommunityErrorCode.INVALID_INPUT, "Community ID is required")

        community = await self._community_repository.find_by_id(command.community_id)
        if community is None:
            raise CommunityError(CommunityErrorCode.COMMUNITY_NOT_FOUND)

        community.update_branding(
            name=command.name,
            logo_url=command.logo_url,
            primary_color=command.primary_color,
            clear_logo=command.clear_logo,
        )
        updated = await self._community_repository.update(community)
        return to_community_dto(updated)
