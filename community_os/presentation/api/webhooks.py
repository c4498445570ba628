"""
Webhook receivers (Stripe payments, identity provider user sync).

Public routes: authenticity comes from the signature headers, checked
against the raw request body before any parsing.
"""

from fastapi import APIRouter, Header, Request
from dishka.integrations.fastapi import FromDishka, inject

from community_os.application.commands.subscriptions import (
    HandleStripeWebhookCommand,
    HandleStripeWebhookHandler,
)
from community_os.application.commands.users import (
    HandleIdentityWebhookCommand,
    HandleIdentityWebhookHandler,
)
from community_os.application.dto.payment import WebhookReceiptDto

router = APIRouter(prefix="/api/webhooks", tags=["webhooks"])


@router.post("/stripe", response_model=WebhookReceiptDto)
@inject
async def stripe_webhook(
    request: Request,
    handler: FromDishka[HandleStripeWebhookHandler],
    stripe_signature: str = Header(default="", alias="Stripe-Signature"),
):
    payload = await request.body()
    command = HandleStripeWebhookCommand(payload=payload, signature=stripe_signature)
    return await handler.execute(command)


@router.post("/identity", response_model=WebhookReceiptDto)
@inject
async def identity_webhook(
    request: Request,
    handler: FromDishka[HandleIdentityWebhookHandler],
    svix_id: str = Header(default="", alias="svix-id"),
    svix_timestamp: str = Header(default="", alias="svix-timestamp"),
    svix_signature: str = Header(default="", alias="svix-signature"),
):
    payload = await request.body()
    command = HandleIdentityWebhookCommand(
        payload=payload,
        message_id=svix_id,
        timestamp=svix_timestamp,
        signature=svix_signature,
    )
    return await handler.execute(command)
