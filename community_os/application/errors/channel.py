from enum import Enum

from community_os.application.common.errors import ApplicationError


class ChannelErrorCode(str, Enum):
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_NAME = "INVALID_NAME"
    INVALID_DESCRIPTION = "INVALID_DESCRIPTION"
    INVALID_PERMISSION = "INVALID_PERMISSION"
    INVALID_POSITION = "INVALID_POSITION"
    COMMUNITY_NOT_FOUND = "COMMUNITY_NOT_FOUND"
    SPACE_NOT_FOUND = "SPACE_NOT_FOUND"
    TIER_NOT_FOUND = "TIER_NOT_FOUND"
    CHANNEL_NOT_FOUND = "CHANNEL_NOT_FOUND"
    CHANNEL_ALREADY_ARCHIVED = "CHANNEL_ALREADY_ARCHIVED"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class ChannelError(ApplicationError):
    feature = "channels"
    codes = ChannelErrorCode
    field_codes = {
        "name": ChannelErrorCode.INVALID_NAME,
        "description": ChannelErrorCode.INVALID_DESCRIPTION,
        "permission": ChannelErrorCode.INVALID_PERMISSION,
        "position": ChannelErrorCode.INVALID_POSITION,
        "archived": ChannelErrorCode.CHANNEL_ALREADY_ARCHIVED,
    }
