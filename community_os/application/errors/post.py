from enum import Enum

from community_os.application.common.errors import ApplicationError


class PostErrorCode(str, Enum):
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_TITLE = "INVALID_TITLE"
    INVALID_CONTENT = "INVALID_CONTENT"
    POST_NOT_FOUND = "POST_NOT_FOUND"
    COMMUNITY_NOT_FOUND = "COMMUNITY_NOT_FOUND"
    AUTHOR_NOT_FOUND = "AUTHOR_NOT_FOUND"
    POST_ALREADY_PUBLISHED = "POST_ALREADY_PUBLISHED"
    POST_NOT_PUBLISHED = "POST_NOT_PUBLISHED"
    POST_ALREADY_PINNED = "POST_ALREADY_PINNED"
    POST_NOT_PINNED = "POST_NOT_PINNED"
    POST_ALREADY_ARCHIVED = "POST_ALREADY_ARCHIVED"
    CANNOT_MODIFY_ARCHIVED_POST = "CANNOT_MODIFY_ARCHIVED_POST"
    EMPTY_DRAFT = "EMPTY_DRAFT"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class PostError(ApplicationError):
    feature = "posts"
    codes = PostErrorCode
    field_codes = {
        "title": PostErrorCode.INVALID_TITLE,
        "content": PostErrorCode.INVALID_CONTENT,
        "published": PostErrorCode.POST_ALREADY_PUBLISHED,
        "unpublished": PostErrorCode.POST_NOT_PUBLISHED,
        "pinned": PostErrorCode.POST_ALREADY_PINNED,
        "not_pinned": PostErrorCode.POST_NOT_PINNED,
        "archived": PostErrorCode.CANNOT_MODIFY_ARCHIVED_POST,
        "empty": PostErrorCode.EMPTY_DRAFT,
    }
    conflict_codes = frozenset({"POST_NOT_PUBLISHED", "POST_NOT_PINNED"})
