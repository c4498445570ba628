"""
Save Draft Command - autosave upsert, one draft per (author, post).

post_id=None is the draft of a post that does not exist yet.
"""

from dataclasses import dataclass
from typing import Optional

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Command, CommandHandler
from community_os.application.dto import PostDraftDto
from community_os.application.errors import PostError, PostErrorCode
from community_os.application.mappers import to_post_draft_dto
from community_os.config.settings import Config
from community_os.domain.entities import PostDraft
from community_os.domain.ports.repositories import (
    PostDraftRepository,
    PostRepository,
    UserRepository,
)


@dataclass(frozen=True)
class SaveDraftCommand(Command[PostDraftDto]):
    community_id: str
    author_id: str
    post_id: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = None


class SaveDraftHandler(CommandHandler[PostDraftDto]):
    def __init__(
        self,
        draft_repository: PostDraftRepository,
        user_repository: UserRepository,
        post_repository: PostRepository,
    ):
        self._draft_repository = draft_repository
        self._user_repository = user_repository
        self._post_repository = post_repository

    @translate_errors(PostError)
    async def execute(self, command: SaveDraftCommand) -> PostDraftDto:
        if not command.author_id or not command.author_id.strip():
            raise PostError(PostErrorCode.USER_NOT_FOUND)
        if not (command.title or "").strip() and not (command.content or "").strip():
            raise PostError(PostErrorCode.EMPTY_DRAFT, "Draft must have a title or content")

        if await self._user_repository.find_by_id(command.author_id) is None:
            raise PostError(PostErrorCode.USER_NOT_FOUND)
        if command.post_id:
            post = await self._post_repository.find_by_id(command.post_id)
            if post is None:
                raise PostError(PostErrorCode.POST_NOT_FOUND)

        existing = await self._draft_repository.find_by_author_and_post(
            command.author_id, command.post_id
        )
        if existing:
            existing.update_content(command.title, command.content, Config.DRAFT_TTL_DAYS)
            saved = await self._draft_repository.update(existing)
        else:
            draft = PostDraft.create(
                community_id=command.community_id,
                author_id=command.author_id,
                ttl_days=Config.DRAFT_TTL_DAYS,
                post_id=command.post_id,
                title=command.title,
                content=command.content,
            )
            saved = await self._draft_repository.create(draft)
        return to_post_draft_dto(saved)
