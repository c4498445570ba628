from enum import Enum

from community_os.application.common.errors import ApplicationError


class SearchErrorCode(str, Enum):
    INVALID_QUERY = "INVALID_QUERY"
    QUERY_TOO_SHORT = "QUERY_TOO_SHORT"
    INVALID_TYPE = "INVALID_TYPE"
    INVALID_COMMUNITY = "INVALID_COMMUNITY"
    SEARCH_FAILED = "SEARCH_FAILED"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class SearchError(ApplicationError):
    feature = "search"
    codes = SearchErrorCode
