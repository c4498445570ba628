from typing import Optional

from community_os.presentation.schemas.base import BoundedText, RequestSchema, UUIDString

PostTitle = BoundedText("Title", 3, 200)
PostContent = BoundedText("Content", 10, strip=False)


class CreatePostSchema(RequestSchema):
    community_id: UUIDString("Community ID must be a valid UUID")
    # Defaults to the authenticated user
    author_id: Optional[UUIDString("Author ID must be a valid UUID")] = None
    title: PostTitle
    content: PostContent


class UpdatePostSchema(RequestSchema):
    title: Optional[PostTitle] = None
    content: Optional[PostContent] = None


class PublishPostSchema(RequestSchema):
    post_id: UUIDString("Post ID must be a valid UUID")


class PinPostSchema(RequestSchema):
    post_id: UUIDString("Post ID must be a valid UUID")
    is_pinned: bool


class MarkSolvedSchema(RequestSchema):
    post_id: UUIDString("Post ID must be a valid UUID")
    is_solved: bool = True


class SaveDraftSchema(RequestSchema):
    post_id: Optional[UUIDString("Post ID must be a valid UUID")] = None
    community_id: UUIDString("Community ID must be a valid UUID")
    author_id: Optional[UUIDString("Author ID must be a valid UUID")] = None
    title: Optional[BoundedText("Title", 1, 200)] = None
    content: Optional[BoundedText("Content", 1, strip=False)] = None


class CreateCommentSchema(RequestSchema):
    post_id: UUIDString("Post ID must be a valid UUID")
    author_id: Optional[UUIDString("Author ID must be a valid UUID")] = None
    parent_id: Optional[UUIDString("Parent ID must be a valid UUID")] = None
    content: BoundedText("Content", 1, strip=False)


class UpdateCommentSchema(RequestSchema):
    content: BoundedText("Content", 1, strip=False)
