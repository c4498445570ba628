"""
Posts API Router.

Publishing, pinning and solving take the post id in the body, matching
their validation schemas.
"""

from fastapi import APIRouter, Depends, Query, status
from dishka.integrations.fastapi import FromDishka, inject

from community_os.application.commands.posts import (
    ArchivePostCommand,
    ArchivePostHandler,
    CreatePostCommand,
    CreatePostHandler,
    LikePostCommand,
    LikePostHandler,
    MarkSolvedCommand,
    MarkSolvedHandler,
    PinPostCommand,
    PinPostHandler,
    PublishPostCommand,
    PublishPostHandler,
    SaveDraftCommand,
    SaveDraftHandler,
    UpdatePostCommand,
    UpdatePostHandler,
)
from community_os.application.dto.post import LikeResultDto, PostDraftDto, PostDto, PostThreadDto
from community_os.application.queries.posts import (
    GetPostHandler,
    GetPostQuery,
    GetPostThreadHandler,
    GetPostThreadQuery,
    ListPostsHandler,
    ListPostsQuery,
)
from community_os.config.settings import Config
from community_os.presentation.dependencies.auth import AuthUser, get_current_user
from community_os.presentation.schemas.posts import (
    CreatePostSchema,
    MarkSolvedSchema,
    PinPostSchema,
    PublishPostSchema,
    SaveDraftSchema,
    UpdatePostSchema,
)

router = APIRouter(prefix="/api", tags=["posts"])


@router.post("/posts", response_model=PostDto, status_code=status.HTTP_201_CREATED)
@inject
async def create_post(
    body: CreatePostSchema,
    handler: FromDishka[CreatePostHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Create a draft post. Mentioned members are notified."""
    command = CreatePostCommand(
        community_id=body.community_id,
        author_id=body.author_id or current_user.user_id,
        title=body.title,
        content=body.content,
    )
    return await handler.execute(command)


@router.put("/drafts", response_model=PostDraftDto)
@inject
async def save_draft(
    body: SaveDraftSchema,
    handler: FromDishka[SaveDraftHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    command = SaveDraftCommand(
        community_id=body.community_id,
        author_id=body.author_id or current_user.user_id,
        post_id=body.post_id,
        title=body.title,
        content=body.content,
    )
    return await handler.execute(command)


@router.post("/posts/publish", response_model=PostDto)
@inject
async def publish_post(body: PublishPostSchema, handler: FromDishka[PublishPostHandler]):
    return await handler.execute(PublishPostCommand(post_id=body.post_id))


@router.post("/posts/pin", response_model=PostDto)
@inject
async def pin_post(body: PinPostSchema, handler: FromDishka[PinPostHandler]):
    return await handler.execute(PinPostCommand(post_id=body.post_id, is_pinned=body.is_pinned))


@router.post("/posts/solve", response_model=PostDto)
@inject
async def mark_solved(body: MarkSolvedSchema, handler: FromDishka[MarkSolvedHandler]):
    command = MarkSolvedCommand(post_id=body.post_id, is_solved=body.is_solved)
    return await handler.execute(command)


@router.get("/communities/{community_id}/posts", response_model=list[PostDto])
@inject
async def list_posts(
    community_id: str,
    handler: FromDishka[ListPostsHandler],
    limit: int = Query(default=Config.POST_PAGE_SIZE, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
):
    """Pinned posts first, then newest first."""
    query = ListPostsQuery(community_id=community_id, limit=limit, offset=offset)
    return await handler.execute(query)


@router.get("/posts/{post_id}", response_model=PostDto)
@inject
async def get_post(post_id: str, handler: FromDishka[GetPostHandler]):
    return await handler.execute(GetPostQuery(post_id=post_id))


@router.get("/posts/{post_id}/thread", response_model=PostThreadDto)
@inject
async def get_post_thread(
    post_id: str,
    handler: FromDishka[GetPostThreadHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Post with author byline and threaded comments; counts a view when published."""
    query = GetPostThreadQuery(post_id=post_id, viewer_id=current_user.user_id)
    return await handler.execute(query)


@router.patch("/posts/{post_id}", response_model=PostDto)
@inject
async def update_post(
    post_id: str,
    body: UpdatePostSchema,
    handler: FromDishka[UpdatePostHandler],
):
    command = UpdatePostCommand(post_id=post_id, title=body.title, content=body.content)
    return await handler.execute(command)


@router.delete("/posts/{post_id}", response_model=PostDto)
@inject
async def archive_post(post_id: str, handler: FromDishka[ArchivePostHandler]):
    return await handler.execute(ArchivePostCommand(post_id=post_id))


@router.post("/posts/{post_id}/like", response_model=LikeResultDto)
@inject
async def like_post(
    post_id: str,
    handler: FromDishka[LikePostHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Toggle the caller's like."""
    return await handler.execute(LikePostCommand(post_id=post_id, user_id=current_user.user_id))
