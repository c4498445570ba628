from enum import Enum

from community_os.application.common.errors import ApplicationError


class CommunityErrorCode(str, Enum):
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_NAME = "INVALID_NAME"
    INVALID_LOGO_URL = "INVALID_LOGO_URL"
    INVALID_COLOR = "INVALID_COLOR"
    INVALID_PERIOD = "INVALID_PERIOD"
    INVALID_LIMIT = "INVALID_LIMIT"
    COMMUNITY_NOT_FOUND = "COMMUNITY_NOT_FOUND"
    COMMUNITY_ALREADY_ARCHIVED = "COMMUNITY_ALREADY_ARCHIVED"
    CANNOT_MODIFY_ARCHIVED_COMMUNITY = "CANNOT_MODIFY_ARCHIVED_COMMUNITY"
    SAME_OWNER = "SAME_OWNER"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class CommunityError(ApplicationError):
    feature = "communities"
    codes = CommunityErrorCode
    field_codes = {
        "name": CommunityErrorCode.INVALID_NAME,
        "logo_url": CommunityErrorCode.INVALID_LOGO_URL,
        "primary_color": CommunityErrorCode.INVALID_COLOR,
        "same_owner": CommunityErrorCode.SAME_OWNER,
        "archived": CommunityErrorCode.CANNOT_MODIFY_ARCHIVED_COMMUNITY,
    }
