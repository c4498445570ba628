"""
Prisma-backed repositories.

Kept apart from container.py: importing prisma needs the generated client
(`prisma generate`), which memory-backed runs do not have.
"""

from typing import AsyncIterator

from dishka import Provider, Scope, provide
from prisma import Prisma

from community_os.domain.ports.repositories import (
    ActivityRepository,
    CertificateRepository,
    ChannelRepository,
    CommentRepository,
    CommunityRepository,
    ContentVersionRepository,
    CouponRepository,
    CourseProgressRepository,
    CourseRepository,
    LessonRepository,
    LikeRepository,
    NotificationRepository,
    PaymentTierRepository,
    PostDraftRepository,
    PostRepository,
    SearchRepository,
    SpaceRepository,
    SubscriptionRepository,
    UserRepository,
)
from community_os.infrastructure.persistence.prisma_activity_repository import (
    PrismaActivityRepository,
)
from community_os.infrastructure.persistence.prisma_billing_repositories import (
    PrismaCouponRepository,
    PrismaPaymentTierRepository,
    PrismaSubscriptionRepository,
)
from community_os.infrastructure.persistence.prisma_community_repositories import (
    PrismaChannelRepository,
    PrismaCommunityRepository,
    PrismaSpaceRepository,
    PrismaUserRepository,
)
from community_os.infrastructure.persistence.prisma_content_repositories import (
    PrismaCommentRepository,
    PrismaContentVersionRepository,
    PrismaLikeRepository,
    PrismaPostDraftRepository,
    PrismaPostRepository,
)
from community_os.infrastructure.persistence.prisma_learning_repositories import (
    PrismaCertificateRepository,
    PrismaCourseProgressRepository,
    PrismaCourseRepository,
    PrismaLessonRepository,
)
from community_os.infrastructure.persistence.prisma_notification_repository import (
    PrismaNotificationRepository,
)
from community_os.infrastructure.persistence.prisma_search_repository import (
    PrismaSearchRepository,
)


class PrismaPersistenceProvider(Provider):
    @provide(scope=Scope.APP)
    async def get_prisma(self) -> AsyncIterator[Prisma]:
        """
        Provide Prisma client (singleton, app-scoped).

        Connected on first use, disconnected when the container closes.
        """
        prisma = Prisma()
        await prisma.connect()
        try:
            yield prisma
        finally:
            await prisma.disconnect()

    scope = Scope.REQUEST

    communities = provide(PrismaCommunityRepository, provides=CommunityRepository)
    users = provide(PrismaUserRepository, provides=UserRepository)
    spaces = provide(PrismaSpaceRepository, provides=SpaceRepository)
    channels = provide(PrismaChannelRepository, provides=ChannelRepository)
    posts = provide(PrismaPostRepository, provides=PostRepository)
    drafts = provide(PrismaPostDraftRepository, provides=PostDraftRepository)
    likes = provide(PrismaLikeRepository, provides=LikeRepository)
    comments = provide(PrismaCommentRepository, provides=CommentRepository)
    versions = provide(PrismaContentVersionRepository, provides=ContentVersionRepository)
    courses = provide(PrismaCourseRepository, provides=CourseRepository)
    lessons = provide(PrismaLessonRepository, provides=LessonRepository)
    progress = provide(PrismaCourseProgressRepository, provides=CourseProgressRepository)
    certificates = provide(PrismaCertificateRepository, provides=CertificateRepository)
    payment_tiers = provide(PrismaPaymentTierRepository, provides=PaymentTierRepository)
    coupons = provide(PrismaCouponRepository, provides=CouponRepository)
    subscriptions = provide(PrismaSubscriptionRepository, provides=SubscriptionRepository)
    notifications = provide(PrismaNotificationRepository, provides=NotificationRepository)
    search = provide(PrismaSearchRepository, provides=SearchRepository)
    activity = provide(PrismaActivityRepository, provides=ActivityRepository)
