"""Notification queries."""

from .get_user_notifications import GetUserNotificationsQuery, GetUserNotificationsHandler
from .get_unread_count import GetUnreadCountQuery, GetUnreadCountHandler

__all__ = [
    "GetUserNotificationsQuery",
    "GetUserNotificationsHandler",
    "GetUnreadCountQuery",
    "GetUnreadCountHandler",
]
