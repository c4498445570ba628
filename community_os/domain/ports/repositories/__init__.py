"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines methods the domain needs
- Does NOT specify implementation (Prisma, in-memory, etc.)
- delete() is a soft delete unless stated otherwise

Infrastructure layer provides implementations.
"""

from community_os.domain.ports.repositories.community_repository import CommunityRepository
from community_os.domain.ports.repositories.user_repository import (
    MEMBER_SORT_COLUMNS,
    UserRepository,
)
from community_os.domain.ports.repositories.space_repository import SpaceRepository
from community_os.domain.ports.repositories.channel_repository import ChannelRepository
from community_os.domain.ports.repositories.post_repository import PostRepository
from community_os.domain.ports.repositories.post_draft_repository import PostDraftRepository
from community_os.domain.ports.repositories.like_repository import LikeRepository
from community_os.domain.ports.repositories.comment_repository import CommentRepository
from community_os.domain.ports.repositories.content_version_repository import (
    ContentVersionRepository,
)
from community_os.domain.ports.repositories.course_repository import CourseRepository
from community_os.domain.ports.repositories.lesson_repository import LessonRepository
from community_os.domain.ports.repositories.course_progress_repository import (
    CourseProgressRepository,
)
from community_os.domain.ports.repositories.certificate_repository import (
    CertificateRepository,
)
from community_os.domain.ports.repositories.payment_tier_repository import (
    PaymentTierRepository,
)
from community_os.domain.ports.repositories.coupon_repository import CouponRepository
from community_os.domain.ports.repositories.subscription_repository import (
    SubscriptionRepository,
)
from community_os.domain.ports.repositories.notification_repository import (
    NotificationRepository,
)
from community_os.domain.ports.repositories.search_repository import SearchRepository
from community_os.domain.ports.repositories.activity_repository import ActivityRepository

__all__ = [
    "CommunityRepository",
    "UserRepository",
    "MEMBER_SORT_COLUMNS",
    "SpaceRepository",
    "ChannelRepository",
    "PostRepository",
    "PostDraftRepository",
    "LikeRepository",
    "CommentRepository",
    "ContentVersionRepository",
    "CourseRepository",
    "LessonRepository",
    "CourseProgressRepository",
    "CertificateRepository",
    "PaymentTierRepository",
    "CouponRepository",
    "SubscriptionRepository",
    "NotificationRepository",
    "SearchRepository",
    "ActivityRepository",
]
