from enum import Enum

from community_os.application.common.errors import ApplicationError


class SpaceErrorCode(str, Enum):
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_NAME = "INVALID_NAME"
    INVALID_DESCRIPTION = "INVALID_DESCRIPTION"
    INVALID_POSITION = "INVALID_POSITION"
    COMMUNITY_NOT_FOUND = "COMMUNITY_NOT_FOUND"
    PARENT_SPACE_NOT_FOUND = "PARENT_SPACE_NOT_FOUND"
    MAX_NESTING_DEPTH_EXCEEDED = "MAX_NESTING_DEPTH_EXCEEDED"
    SPACE_NOT_FOUND = "SPACE_NOT_FOUND"
    SPACE_ALREADY_ARCHIVED = "SPACE_ALREADY_ARCHIVED"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class SpaceError(ApplicationError):
    feature = "spaces"
    codes = SpaceErrorCode
    field_codes = {
        "name": SpaceErrorCode.INVALID_NAME,
        "description": SpaceErrorCode.INVALID_DESCRIPTION,
        "position": SpaceErrorCode.INVALID_POSITION,
        "archived": SpaceErrorCode.SPACE_ALREADY_ARCHIVED,
    }
