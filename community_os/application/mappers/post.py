from typing import Optional

from community_os.application.dto import (
    CommentDto,
    ContentVersionDto,
    PostDraftDto,
    PostDto,
)
from community_os.application.mappers.common import to_iso
from community_os.domain.entities import Comment, ContentVersion, Post, PostDraft


def to_post_dto(post: Post) -> PostDto:
    return PostDto(
        id=post.id,
        community_id=post.community_id,
        author_id=post.author_id,
        title=post.title,
        content=post.content,
        is_pinned=post.is_pinned,
        is_solved=post.is_solved,
        like_count=post.like_count,
        helpful_count=post.helpful_count,
        comment_count=post.comment_count,
        view_count=post.view_count,
        created_at=post.created_at,
        updated_at=post.updated_at,
        published_at=post.published_at,
        is_archived=post.is_archived,
    )


def to_post_draft_dto(draft: PostDraft) -> PostDraftDto:
    return PostDraftDto(
        id=draft.id,
        community_id=draft.community_id,
        author_id=draft.author_id,
        post_id=draft.post_id,
        title=draft.title,
        content=draft.content,
        expires_at=to_iso(draft.expires_at),
        created_at=to_iso(draft.created_at),
        updated_at=to_iso(draft.updated_at),
    )


def to_comment_dto(
    comment: Comment,
    replies: list[CommentDto] | None = None,
    author_name: Optional[str] = None,
    author_avatar: Optional[str] = None,
) -> CommentDto:
    return CommentDto(
        id=comment.id,
        post_id=comment.post_id,
        author_id=comment.author_id,
        parent_id=comment.parent_id,
        content=comment.content,
        like_count=comment.like_count,
        helpful_count=comment.helpful_count,
        created_at=comment.created_at,
        updated_at=comment.updated_at,
        is_archived=comment.is_archived,
        replies=replies,
        author_name=author_name,
        author_avatar=author_avatar,
    )


def to_content_version_dto(version: ContentVersion) -> ContentVersionDto:
    return ContentVersionDto(
        id=version.id,
        content_type=version.content_type.value,
        content_id=version.content_id,
        content=version.content,
        version_number=version.version_number,
        created_at=to_iso(version.created_at),
    )
