"""Content version queries."""

from .get_version_history import GetVersionHistoryQuery, GetVersionHistoryHandler
from .get_version import GetVersionQuery, GetVersionHandler
from .compare_versions import CompareVersionsQuery, CompareVersionsHandler

__all__ = [
    "GetVersionHistoryQuery",
    "GetVersionHistoryHandler",
    "GetVersionQuery",
    "GetVersionHandler",
    "CompareVersionsQuery",
    "CompareVersionsHandler",
]
