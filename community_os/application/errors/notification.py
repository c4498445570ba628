from enum import Enum

from community_os.application.common.errors import ApplicationError


class NotificationErrorCode(str, Enum):
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_MESSAGE = "INVALID_MESSAGE"
    USER_ID_REQUIRED = "USER_ID_REQUIRED"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    ACTOR_NOT_FOUND = "ACTOR_NOT_FOUND"
    NOTIFICATION_NOT_FOUND = "NOTIFICATION_NOT_FOUND"
    NOT_OWNED_BY_USER = "NOT_OWNED_BY_USER"
    ALREADY_READ = "ALREADY_READ"
    NOTIFICATION_ARCHIVED = "NOTIFICATION_ARCHIVED"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class NotificationError(ApplicationError):
    feature = "notifications"
    codes = NotificationErrorCode
    field_codes = {
        "message": NotificationErrorCode.INVALID_MESSAGE,
        "type": NotificationErrorCode.INVALID_INPUT,
        "already_read": NotificationErrorCode.ALREADY_READ,
        "archived": NotificationErrorCode.NOTIFICATION_ARCHIVED,
    }
    conflict_codes = frozenset({"NOTIFICATION_ARCHIVED"})
