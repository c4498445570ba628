from enum import Enum

from community_os.application.common.errors import ApplicationError


class CommentErrorCode(str, Enum):
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_CONTENT = "INVALID_CONTENT"
    CONTENT_TOO_SHORT = "CONTENT_TOO_SHORT"
    MAX_NESTING_DEPTH_EXCEEDED = "MAX_NESTING_DEPTH_EXCEEDED"
    COMMENT_NOT_FOUND = "COMMENT_NOT_FOUND"
    POST_NOT_FOUND = "POST_NOT_FOUND"
    PARENT_COMMENT_NOT_FOUND = "PARENT_COMMENT_NOT_FOUND"
    PARENT_COMMENT_NOT_IN_POST = "PARENT_COMMENT_NOT_IN_POST"
    AUTHOR_NOT_FOUND = "AUTHOR_NOT_FOUND"
    COMMENT_ALREADY_ARCHIVED = "COMMENT_ALREADY_ARCHIVED"
    COMMENT_NOT_ARCHIVED = "COMMENT_NOT_ARCHIVED"
    CANNOT_MODIFY_ARCHIVED_COMMENT = "CANNOT_MODIFY_ARCHIVED_COMMENT"
    CANNOT_COMMENT_ON_ARCHIVED_POST = "CANNOT_COMMENT_ON_ARCHIVED_POST"
    CANNOT_REPLY_TO_ARCHIVED_COMMENT = "CANNOT_REPLY_TO_ARCHIVED_COMMENT"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class CommentError(ApplicationError):
    feature = "comments"
    codes = CommentErrorCode
    field_codes = {
        "content": CommentErrorCode.INVALID_CONTENT,
        "content_too_short": CommentErrorCode.CONTENT_TOO_SHORT,
        "archived": CommentErrorCode.CANNOT_MODIFY_ARCHIVED_COMMENT,
        "not_archived": CommentErrorCode.COMMENT_NOT_ARCHIVED,
    }
