from dataclasses import dataclass

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Query, QueryHandler
from community_os.application.dto import CouponDto
from community_os.application.errors import CouponError, CouponErrorCode
from community_os.application.mappers import to_coupon_dto
from community_os.domain.entities import Coupon
from community_os.domain.entities.coupon import normalize_code
from community_os.domain.ports.repositories import CouponRepository


def ensure_usable(coupon: Coupon) -> None:
    """Raise the specific reason a coupon cannot be redeemed right now."""
    if not coupon.is_active or coupon.is_archived:
        raise CouponError(CouponErrorCode.COUPON_INACTIVE)
    if coupon.is_expired():
        raise CouponError(CouponErrorCode.COUPON_EXPIRED)
    if coupon.uses_exhausted:
        raise CouponError(CouponErrorCode.MAX_USES_REACHED)


@dataclass(frozen=True)
class ApplyCouponQuery(Query[CouponDto]):
    code: str
    community_id: str


class ApplyCouponHandler(QueryHandler[CouponDto]):
    def __init__(self, coupon_repository: CouponRepository):
        self._coupon_repository = coupon_repository

    @translate_errors(CouponError)
    async def execute(self, query: ApplyCouponQuery) -> CouponDto:
        code = normalize_code(query.code)
        if not code or not query.community_id:
            raise CouponError(CouponErrorCode.INVALID_INPUT, "Code and community ID are required")

        coupon = await self._coupon_repository.find_by_code(query.community_id, code)
        if coupon is None:
            raise CouponError(CouponErrorCode.COUPON_NOT_FOUND)
        ensure_usable(coupon)
        return to_coupon_dto(coupon)
