"""
Create Coupon Command.

Only members of the community may create its coupons. Codes are stored upper
case and must be unique within the community; the gateway keeps a mirror so
checkout sessions can reference it.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Command, CommandHandler
from community_os.application.dto import CouponDto
from community_os.application.errors import CouponError, CouponErrorCode
from community_os.application.mappers import to_coupon_dto
from community_os.domain.entities import Coupon
from community_os.domain.entities.coupon import normalize_code
from community_os.domain.ports.repositories import CouponRepository
from community_os.domain.ports.services import PaymentGateway, PaymentGatewayError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateCouponCommand(Command[CouponDto]):
    community_id: str
    requester_community_id: Optional[str]
    code: str
    discount_type: str
    discount_value: int
    expires_at: Optional[datetime] = None
    max_uses: Optional[int] = None


class CreateCouponHandler(CommandHandler[CouponDto]):
    def __init__(
        self,
        coupon_repository: CouponRepository,
        payment_gateway: PaymentGateway,
    ):
        self._coupon_repository = coupon_repository
        self._payment_gateway = payment_gateway

    @translate_errors(CouponError)
    async def execute(self, command: CreateCouponCommand) -> CouponDto:
        if not command.community_id or not command.community_id.strip():
            raise CouponError(CouponErrorCode.INVALID_INPUT, "Community ID is required")
        if command.requester_community_id != command.community_id:
            raise CouponError(
                CouponErrorCode.UNAUTHORIZED, "You can only create coupons for your own community"
            )
        if command.max_uses is not None and command.max_uses < 1:
            raise CouponError(CouponErrorCode.INVALID_INPUT, "Max uses must be at least 1")

        code = normalize_code(command.code)
        coupon = Coupon.create(
            community_id=command.community_id,
            code=code,
            discount_type=command.discount_type,
            discount_value=command.discount_value,
            expires_at=command.expires_at,
            max_uses=command.max_uses,
        )
        if await self._coupon_repository.find_by_code(command.community_id, code):
            raise CouponError(
                CouponErrorCode.INVALID_CODE, f"Coupon code {code} already exists in this community"
            )

        try:
            coupon.stripe_coupon_id = await self._payment_gateway.create_coupon(
                coupon.code,
                coupon.discount_type.value,
                coupon.discount_value,
                expires_at=coupon.expires_at,
                max_uses=coupon.max_uses,
            )
        except PaymentGatewayError as exc:
            logger.error(f"[PAYMENTS] Gateway rejected coupon {code}: {exc}")
            raise CouponError(CouponErrorCode.STRIPE_ERROR, str(exc)) from exc

        created = await self._coupon_repository.create(coupon)
        return to_coupon_dto(created)
