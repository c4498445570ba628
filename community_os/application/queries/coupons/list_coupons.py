from dataclasses import dataclass

from community_os.application.common.errors import translate_errors
from community_os.application.common.interfaces import Query, QueryHandler
from community_os.application.dto import CouponDto
from community_os.application.errors import CouponError, CouponErrorCode
from community_os.application.mappers import to_coupon_dto
from community_os.domain.ports.repositories import CouponRepository


@dataclass(frozen=True)
class ListCouponsQuery(Query[list[CouponDto]]):
    community_id: str


class ListCouponsHandler(QueryHandler[list[CouponDto]]):
    def __init__(self, coupon_repository: CouponRepository):
        self._coupon_repository = coupon_repository

    @translate_errors(CouponError)
    async def execute(self, query: ListCouponsQuery) -> list[CouponDto]:
        if not query.community_id or not query.community_id.strip():
            raise CouponError(CouponErrorCode.INVALID_INPUT, "Community ID is required")
        coupons = await self._coupon_repository.find_by_community_id(query.community_id)
        return [to_coupon_dto(coupon) for coupon in coupons]
