"""User commands."""

from .create_user import CreateUserCommand, CreateUserHandler
from .update_user import UpdateUserCommand, UpdateUserHandler
from .change_user_role import ChangeUserRoleCommand, ChangeUserRoleHandler
from .archive_user import ArchiveUserCommand, ArchiveUserHandler
from .record_presence import RecordPresenceCommand, RecordPresenceHandler
from .handle_identity_webhook import HandleIdentityWebhookCommand, HandleIdentityWebhookHandler

__all__ = [
    "CreateUserCommand",
    "CreateUserHandler",
    "UpdateUserCommand",
    "UpdateUserHandler",
    "ChangeUserRoleCommand",
    "ChangeUserRoleHandler",
    "ArchiveUserCommand",
    "ArchiveUserHandler",
    "RecordPresenceCommand",
    "RecordPresenceHandler",
    "HandleIdentityWebhookCommand",
    "HandleIdentityWebhookHandler",
]
