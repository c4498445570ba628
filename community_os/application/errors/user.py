from enum import Enum

from community_os.application.common.errors import ApplicationError


class UserErrorCode(str, Enum):
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_EMAIL = "INVALID_EMAIL"
    INVALID_NAME = "INVALID_NAME"
    INVALID_ROLE = "INVALID_ROLE"
    INVALID_AVATAR_URL = "INVALID_AVATAR_URL"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    COMMUNITY_NOT_FOUND = "COMMUNITY_NOT_FOUND"
    EMAIL_ALREADY_EXISTS = "EMAIL_ALREADY_EXISTS"
    SAME_ROLE = "SAME_ROLE"
    USER_ALREADY_ARCHIVED = "USER_ALREADY_ARCHIVED"
    CANNOT_MODIFY_ARCHIVED_USER = "CANNOT_MODIFY_ARCHIVED_USER"
    INVALID_SIGNATURE = "INVALID_SIGNATURE"
    MISSING_EMAIL = "MISSING_EMAIL"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class UserError(ApplicationError):
    feature = "users"
    codes = UserErrorCode
    field_codes = {
        "email": UserErrorCode.INVALID_EMAIL,
        "name": UserErrorCode.INVALID_NAME,
        "role": UserErrorCode.INVALID_ROLE,
        "avatar_url": UserErrorCode.INVALID_AVATAR_URL,
        "same_role": UserErrorCode.SAME_ROLE,
        "archived": UserErrorCode.CANNOT_MODIFY_ARCHIVED_USER,
    }
