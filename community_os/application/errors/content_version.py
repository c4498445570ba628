from enum import Enum

from community_os.application.common.errors import ApplicationError


class ContentVersionErrorCode(str, Enum):
    INVALID_INPUT = "INVALID_INPUT"
    VERSION_NOT_FOUND = "VERSION_NOT_FOUND"
    POST_NOT_FOUND = "POST_NOT_FOUND"
    COMMENT_NOT_FOUND = "COMMENT_NOT_FOUND"
    CANNOT_RESTORE_CURRENT_VERSION = "CANNOT_RESTORE_CURRENT_VERSION"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class ContentVersionError(ApplicationError):
    feature = "versions"
    codes = ContentVersionErrorCode
