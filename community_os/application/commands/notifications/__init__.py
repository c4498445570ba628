"""Notification commands."""

from .create_notification import (
    CreateNotificationCommand,
    CreateNotificationHandler,
    notify_safely,
)
from .mark_notification_read import MarkNotificationReadCommand, MarkNotificationReadHandler
from .mark_all_read import MarkAllReadCommand, MarkAllReadHandler

__all__ = [
    "CreateNotificationCommand",
    "CreateNotificationHandler",
    "notify_safely",
    "MarkNotificationReadCommand",
    "MarkNotificationReadHandler",
    "MarkAllReadCommand",
    "MarkAllReadHandler",
]
