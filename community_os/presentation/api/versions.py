"""Content version history API Router (posts and comments)."""

from fastapi import APIRouter, Query
from dishka.integrations.fastapi import FromDishka, inject

from community_os.application.commands.versions import (
    RestoreCommentVersionCommand,
    RestoreCommentVersionHandler,
    RestorePostVersionCommand,
    RestorePostVersionHandler,
)
from community_os.application.dto.comment import CommentDto
from community_os.application.dto.content_version import ContentVersionDto, VersionComparisonDto
from community_os.application.dto.post import PostDto
from community_os.application.queries.versions import (
    CompareVersionsHandler,
    CompareVersionsQuery,
    GetVersionHandler,
    GetVersionHistoryHandler,
    GetVersionHistoryQuery,
    GetVersionQuery,
)

router = APIRouter(prefix="/api", tags=["versions"])


@router.get("/versions/{content_id}", response_model=list[ContentVersionDto])
@inject
async def get_version_history(content_id: str, handler: FromDishka[GetVersionHistoryHandler]):
    """Newest version first."""
    return await handler.execute(GetVersionHistoryQuery(content_id=content_id))


@router.get("/versions/{content_id}/compare", response_model=VersionComparisonDto)
@inject
async def compare_versions(
    content_id: str,
    handler: FromDishka[CompareVersionsHandler],
    old: int = Query(ge=1),
    new: int = Query(ge=1),
):
    query = CompareVersionsQuery(content_id=content_id, old_version=old, new_version=new)
    return await handler.execute(query)


@router.get("/versions/{content_id}/{version_number}", response_model=ContentVersionDto)
@inject
async def get_version(
    content_id: str,
    version_number: int,
    handler: FromDishka[GetVersionHandler],
):
    query = GetVersionQuery(content_id=content_id, version_number=version_number)
    return await handler.execute(query)


@router.post("/posts/{post_id}/versions/{version_number}/restore", response_model=PostDto)
@inject
async def restore_post_version(
    post_id: str,
    version_number: int,
    handler: FromDishka[RestorePostVersionHandler],
):
    command = RestorePostVersionCommand(post_id=post_id, version_number=version_number)
    return await handler.execute(command)


@router.post(
    "/comments/{comment_id}/versions/{version_number}/restore", response_model=CommentDto
)
@inject
async def restore_comment_version(
    comment_id: str,
    version_number: int,
    handler: FromDishka[RestoreCommentVersionHandler],
):
    command = RestoreCommentVersionCommand(comment_id=comment_id, version_number=version_number)
    return await handler.execute(command)
