from community_os.application.common.interfaces import (
    Command,
    CommandHandler,
    Query,
    QueryHandler,
)
from community_os.application.common.errors import ApplicationError, translate_errors

__all__ = [
    "Command",
    "CommandHandler",
    "Query",
    "QueryHandler",
    "ApplicationError",
    "translate_errors",
]
