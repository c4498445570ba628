"""
Identity provider webhook: keeps member profiles in step with the user account.

EVENTS:
    user.created / user.updated   copy email, name and avatar onto the member
                                  profile whose id is the account id
    user.deleted                  archive that member profile

Member profiles are created when someone joins a community, so an account
without one is acknowledged and counted as ignored.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Command, CommandHandler
from community_os.application.dto import WebhookReceiptDto
from community_os.application.errors import UserError, UserErrorCode
from community_os.domain.ports.repositories import UserRepository
from community_os.domain.ports.services import IdentityWebhookVerifier, InvalidWebhookSignature
from community_os.observability.metrics import WebhookOutcome, increment_webhook_event

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HandleIdentityWebhookCommand(Command[WebhookReceiptDto]):
    payload: bytes
    message_id: str
    timestamp: str
    signature: str


def _primary_email(account: dict[str, Any]) -> Optional[str]:
    addresses = account.get("email_addresses") or []
    if not addresses:
        return None
    return (addresses[0] or {}).get("email_address") or None


def _full_name(account: dict[str, Any]) -> Optional[str]:
    parts = [account.get("first_name"), account.get("last_name")]
    name = " ".join(part.strip() for part in parts if part and part.strip())
    return name or None


class HandleIdentityWebhookHandler(CommandHandler[WebhookReceiptDto]):
    def __init__(self, user_repository: UserRepository, verifier: IdentityWebhookVerifier):
        self._user_repository = user_repository
        self._verifier = verifier
        self._handlers = {
            "user.created": self._on_user_synced,
            "user.updated": self._on_user_synced,
            "user.deleted": self._on_user_deleted,
        }

    @translate_errors(UserError)
    async def execute(self, command: HandleIdentityWebhookCommand) -> WebhookReceiptDto:
        try:
            event = self._verifier.verify(
                command.payload, command.message_id, command.timestamp, command.signature
            )
        except InvalidWebhookSignature as exc:
            logger.warning(f"[IDENTITY WEBHOOK] Rejected payload: {exc}")
            raise UserError(UserErrorCode.INVALID_SIGNATURE, str(exc)) from exc

        handler = self._handlers.get(event.type)
        if handler is None:
            logger.info(f"[IDENTITY WEBHOOK] Unhandled event type {event.type} ({event.id})")
            increment_webhook_event(event.type, WebhookOutcome.IGNORED)
            return WebhookReceiptDto(received=True, event_type=event.type)

        try:
            processed = await handler(event.data)
        except Exception:
            increment_webhook_event(event.type, WebhookOutcome.FAILED)
            raise

        outcome = WebhookOutcome.PROCESSED if processed else WebhookOutcome.IGNORED
        increment_webhook_event(event.type, outcome)
        logger.info(f"[IDENTITY WEBHOOK] {event.type} ({event.id}): {outcome}")
        return WebhookReceiptDto(received=True, event_type=event.type)

    async def _on_user_synced(self, account: dict[str, Any]) -> bool:
        account_id = account.get("id")
        email = _primary_email(account)
        if not email:
            logger.warning(f"[IDENTITY WEBHOOK] Account {account_id} has no email address")
            raise UserError(UserErrorCode.MISSING_EMAIL, "No email address provided")

        user = await self._user_repository.find_by_id(account_id) if account_id else None
        if user is None or user.is_archived:
            return False

        owner = await self._user_repository.find_by_email(email)
        if owner is not None and owner.id != user.id:
            logger.warning(
                f"[IDENTITY WEBHOOK] {email} belongs to another member, keeping {user.email.value}"
            )
            email = None

        user.update_profile(
            email=email,
            name=_full_name(account),
            avatar_url=account.get("image_url") or None,
        )
        await self._user_repository.update(user)
        return True

    async def _on_user_deleted(self, account: dict[str, Any]) -> bool:
        account_id = account.get("id")
        user = await self._user_repository.find_by_id(account_id) if account_id else None
        if user is None or user.is_archived:
            return False
        user.archive()
        await self._user_repository.delete(user.id)
        return True
