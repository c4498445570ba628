"""In-memory repository implementations backed by a single InMemoryStore."""

from community_os.infrastructure.persistence.memory.store import InMemoryStore
from community_os.infrastructure.persistence.memory.community_repositories import (
    MemoryChannelRepository,
    MemoryCommunityRepository,
    MemorySpaceRepository,
    MemoryUserRepository,
)
from community_os.infrastructure.persistence.memory.content_repositories import (
    MemoryCommentRepository,
    MemoryContentVersionRepository,
    MemoryLikeRepository,
    MemoryPostDraftRepository,
    MemoryPostRepository,
)
from community_os.infrastructure.persistence.memory.learning_repositories import (
    MemoryCertificateRepository,
    MemoryCourseProgressRepository,
    MemoryCourseRepository,
    MemoryLessonRepository,
)
from community_os.infrastructure.persistence.memory.billing_repositories import (
    MemoryCouponRepository,
    MemoryPaymentTierRepository,
    MemorySubscriptionRepository,
)
from community_os.infrastructure.persistence.memory.notification_repository import (
    MemoryNotificationRepository,
)
from community_os.infrastructure.persistence.memory.search_repository import (
    MemorySearchRepository,
)
from community_os.infrastructure.persistence.memory.activity_repository import (
    MemoryActivityRepository,
)

__all__ = [
    "InMemoryStore",
    "MemoryCommunityRepository",
    "MemoryUserRepository",
    "MemorySpaceRepository",
    "MemoryChannelRepository",
    "MemoryPostRepository",
    "MemoryPostDraftRepository",
    "MemoryLikeRepository",
    "MemoryCommentRepository",
    "MemoryContentVersionRepository",
    "MemoryCourseRepository",
    "MemoryLessonRepository",
    "MemoryCourseProgressRepository",
    "MemoryCertificateRepository",
    "MemoryPaymentTierRepository",
    "MemoryCouponRepository",
    "MemorySubscriptionRepository",
    "MemoryNotificationRepository",
    "MemorySearchRepository",
    "MemoryActivityRepository",
]
