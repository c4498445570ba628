"""
DTOs - Data Transfer Objects

Pydantic models returned by use cases and serialised by the API
(camelCase aliases, see base.CamelModel).

Note: These are different from domain entities.
DTOs are for API input/output, entities are for business logic.
"""

from community_os.application.dto.base import CamelModel
from community_os.application.dto.community import (
    CommunityDto,
    CommunityStatsDto,
    LeaderboardDto,
    LeaderboardEntryDto,
    MemberDto,
    MemberPageDto,
    MentionCandidateDto,
    PaginationDto,
    UserDto,
)
from community_os.application.dto.space import ChannelDto, SpaceDto
from community_os.application.dto.post import (
    LikeResultDto,
    PostDraftDto,
    PostDto,
    PostThreadDto,
)
from community_os.application.dto.content_version import (
    ContentVersionDto,
    VersionComparisonDto,
)
from community_os.application.dto.comment import CommentDto
from community_os.application.dto.course import (
    CertificateDto,
    CertificateVerificationDto,
    CourseDto,
    LessonDto,
    ProgressDto,
)
from community_os.application.dto.payment import (
    AccessCheckDto,
    CheckoutCalculationDto,
    CheckoutSessionDto,
    CouponDto,
    PaymentTierDto,
    SubscriptionDto,
    WebhookReceiptDto,
)
from community_os.application.dto.notification import NotificationDto, UnreadCountDto
from community_os.application.dto.search import SearchResponseDto, SearchResultDto

__all__ = [
    "CamelModel",
    "CommunityDto",
    "UserDto",
    "CommunityStatsDto",
    "LeaderboardEntryDto",
    "LeaderboardDto",
    "MemberDto",
    "PaginationDto",
    "MemberPageDto",
    "MentionCandidateDto",
    "SpaceDto",
    "ChannelDto",
    "PostDto",
    "PostDraftDto",
    "LikeResultDto",
    "PostThreadDto",
    "ContentVersionDto",
    "VersionComparisonDto",
    "CommentDto",
    "CourseDto",
    "LessonDto",
    "ProgressDto",
    "CertificateDto",
    "CertificateVerificationDto",
    "PaymentTierDto",
    "CouponDto",
    "CheckoutCalculationDto",
    "SubscriptionDto",
    "CheckoutSessionDto",
    "AccessCheckDto",
    "WebhookReceiptDto",
    "NotificationDto",
    "UnreadCountDto",
    "SearchResponseDto",
    "SearchResultDto",
]
