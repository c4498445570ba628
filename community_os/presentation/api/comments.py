"""Comments API Router."""

from fastapi import APIRouter, Depends, status
from dishka.integrations.fastapi import FromDishka, inject

from community_os.application.commands.comments import (
    ArchiveCommentCommand,
    ArchiveCommentHandler,
    CreateCommentCommand,
    CreateCommentHandler,
    LikeCommentCommand,
    LikeCommentHandler,
    UpdateCommentCommand,
    UpdateCommentHandler,
)
from community_os.application.dto.comment import CommentDto
from community_os.application.dto.post import LikeResultDto
from community_os.application.queries.comments import (
    GetCommentHandler,
    GetCommentQuery,
    ListCommentsHandler,
    ListCommentsQuery,
)
from community_os.presentation.dependencies.auth import AuthUser, get_current_user
from community_os.presentation.schemas.posts import CreateCommentSchema, UpdateCommentSchema

router = APIRouter(prefix="/api", tags=["comments"])


@router.post("/comments", response_model=CommentDto, status_code=status.HTTP_201_CREATED)
@inject
async def create_comment(
    body: CreateCommentSchema,
    handler: FromDishka[CreateCommentHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Comment on a published post, or reply to a root comment via parentId."""
    command = CreateCommentCommand(
        post_id=body.post_id,
        author_id=body.author_id or current_user.user_id,
        content=body.content,
        parent_id=body.parent_id,
    )
    return await handler.execute(command)


@router.get("/posts/{post_id}/comments", response_model=list[CommentDto])
@inject
async def list_comments(post_id: str, handler: FromDishka[ListCommentsHandler]):
    """Root comments, oldest first, each with its replies."""
    return await handler.execute(ListCommentsQuery(post_id=post_id))


@router.get("/comments/{comment_id}", response_model=CommentDto)
@inject
async def get_comment(comment_id: str, handler: FromDishka[GetCommentHandler]):
    return await handler.execute(GetCommentQuery(comment_id=comment_id))


@router.patch("/comments/{comment_id}", response_model=CommentDto)
@inject
async def update_comment(
    comment_id: str,
    body: UpdateCommentSchema,
    handler: FromDishka[UpdateCommentHandler],
):
    return await handler.execute(UpdateCommentCommand(comment_id=comment_id, content=body.content))


@router.delete("/comments/{comment_id}", response_model=CommentDto)
@inject
async def archive_comment(comment_id: str, handler: FromDishka[ArchiveCommentHandler]):
    return await handler.execute(ArchiveCommentCommand(comment_id=comment_id))


@router.post("/comments/{comment_id}/like", response_model=LikeResultDto)
@inject
async def like_comment(
    comment_id: str,
    handler: FromDishka[LikeCommentHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    command = LikeCommentCommand(comment_id=comment_id, user_id=current_user.user_id)
    return await handler.execute(command)
