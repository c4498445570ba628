from enum import Enum

from community_os.application.common.errors import ApplicationError


class AccessErrorCode(str, Enum):
    INVALID_INPUT = "INVALID_INPUT"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class AccessError(ApplicationError):
    feature = "access"
    codes = AccessErrorCode
