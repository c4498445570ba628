"""
Dishka DI Container Setup.

- CoreProvider: gateways (payments, PDF, email, identity webhooks) and every command/query handler
- MemoryPersistenceProvider / PrismaPersistenceProvider: repository ports
  mapped to one storage backend

Scope.APP objects live for the whole process (store, Prisma client, HTTP
client). Scope.REQUEST objects are built per HTTP request.

Flow:
  Container -> provides -> PrismaPostRepository -> to -> CreatePostHandler
                                  |
                          uses PostRepository interface
"""

import logging
from typing import AsyncIterator, Optional

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide, provide_all

from community_os.application.commands.certificates import GenerateCertificateHandler
from community_os.application.commands.channels import (
    ArchiveChannelHandler,
    CreateChannelHandler,
)
from community_os.application.commands.comments import (
    ArchiveCommentHandler,
    CreateCommentHandler,
    LikeCommentHandler,
    UpdateCommentHandler,
)
from community_os.application.commands.communities import (
    ArchiveCommunityHandler,
    CreateCommunityHandler,
    TransferOwnershipHandler,
    UpdateCommunityHandler,
)
from community_os.application.commands.coupons import CreateCouponHandler
from community_os.application.commands.courses import (
    ArchiveCourseHandler,
    CreateCourseHandler,
    PublishCourseHandler,
    UpdateCourseHandler,
)
from community_os.application.commands.lessons import (
    ArchiveLessonHandler,
    CreateLessonHandler,
    ReorderLessonHandler,
    SetDripScheduleHandler,
    UpdateLessonHandler,
)
from community_os.application.commands.notifications import (
    CreateNotificationHandler,
    MarkAllReadHandler,
    MarkNotificationReadHandler,
)
from community_os.application.commands.payment_tiers import (
    ActivatePaymentTierHandler,
    CreatePaymentTierHandler,
    DeactivatePaymentTierHandler,
    UpdatePaymentTierHandler,
)
from community_os.application.commands.posts import (
    ArchivePostHandler,
    CreatePostHandler,
    LikePostHandler,
    MarkSolvedHandler,
    PinPostHandler,
    PublishPostHandler,
    SaveDraftHandler,
    UpdatePostHandler,
)
from community_os.application.commands.progress import MarkCompleteHandler, TrackProgressHandler
from community_os.application.commands.spaces import ArchiveSpaceHandler, CreateSpaceHandler
from community_os.application.commands.subscriptions import (
    CancelSubscriptionHandler,
    CreateSubscriptionHandler,
    HandleStripeWebhookHandler,
)
from community_os.application.commands.users import (
    ArchiveUserHandler,
    ChangeUserRoleHandler,
    CreateUserHandler,
    HandleIdentityWebhookHandler,
    RecordPresenceHandler,
    UpdateUserHandler,
)
from community_os.application.commands.versions import (
    RestoreCommentVersionHandler,
    RestorePostVersionHandler,
)
from community_os.application.queries.access import CheckAccessHandler
from community_os.application.queries.certificates import (
    GetCertificateHandler,
    ListCertificatesHandler,
    VerifyCertificateHandler,
)
from community_os.application.queries.channels import ListChannelsHandler
from community_os.application.queries.checkout import CalculateCheckoutHandler
from community_os.application.queries.comments import GetCommentHandler, ListCommentsHandler
from community_os.application.queries.communities import (
    GetCommunityHandler,
    GetCommunityStatsHandler,
    GetLeaderboardHandler,
    ListCommunitiesHandler,
)
from community_os.application.queries.coupons import ApplyCouponHandler, ListCouponsHandler
from community_os.application.queries.courses import GetCourseHandler, ListCoursesHandler
from community_os.application.queries.lessons import GetLessonHandler, ListLessonsHandler
from community_os.application.queries.notifications import (
    GetUnreadCountHandler,
    GetUserNotificationsHandler,
)
from community_os.application.queries.payment_tiers import (
    GetPaymentTierHandler,
    ListPaymentTiersHandler,
)
from community_os.application.queries.posts import (
    GetPostHandler,
    GetPostThreadHandler,
    ListPostsHandler,
)
from community_os.application.queries.progress import GetProgressHandler
from community_os.application.queries.search import SearchHandler
from community_os.application.queries.spaces import ListSpacesHandler
from community_os.application.queries.subscriptions import GetSubscriptionHandler
from community_os.application.queries.users import (
    GetUserHandler,
    ListMembersHandler,
    ListUsersHandler,
    SearchMentionsHandler,
)
from community_os.application.queries.versions import (
    CompareVersionsHandler,
    GetVersionHandler,
    GetVersionHistoryHandler,
)
from community_os.config.settings import Config, get_config
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
from community_os.domain.ports.services import (
    CertificateRenderer,
    EmailSender,
    IdentityWebhookVerifier,
    PaymentGateway,
)
from community_os.infrastructure.email import SmtpEmailSender
from community_os.infrastructure.identity import SvixWebhookVerifier
from community_os.infrastructure.payments import OfflinePaymentGateway, StripeGateway
from community_os.infrastructure.pdf import ReportLabCertificateRenderer
from community_os.infrastructure.persistence.memory import (
    InMemoryStore,
    MemoryActivityRepository,
    MemoryCertificateRepository,
    MemoryChannelRepository,
    MemoryCommentRepository,
    MemoryCommunityRepository,
    MemoryContentVersionRepository,
    MemoryCouponRepository,
    MemoryCourseProgressRepository,
    MemoryCourseRepository,
    MemoryLessonRepository,
    MemoryLikeRepository,
    MemoryNotificationRepository,
    MemoryPaymentTierRepository,
    MemoryPostDraftRepository,
    MemoryPostRepository,
    MemorySearchRepository,
    MemorySpaceRepository,
    MemorySubscriptionRepository,
    MemoryUserRepository,
)

logger = logging.getLogger(__name__)


class CoreProvider(Provider):
    """
    Backend-independent dependencies.

    Handlers are registered by class; dishka wires their constructor
    arguments (repository ports, gateways, other handlers) by type.
    """

    # ==================== GATEWAYS ====================

    @provide(scope=Scope.APP)
    async def get_payment_gateway(self) -> AsyncIterator[PaymentGateway]:
        """
        Stripe over httpx when a secret key is configured, otherwise the
        offline gateway. The HTTP client is closed with the container.
        """
        if not Config.STRIPE_SECRET_KEY:
            logger.warning("[PAYMENTS] STRIPE_SECRET_KEY not set, using offline payment gateway")
            yield OfflinePaymentGateway(
                webhook_secret=Config.STRIPE_WEBHOOK_SECRET,
                webhook_tolerance=Config.STRIPE_WEBHOOK_TOLERANCE,
            )
            return

        client = StripeGateway.create_client(
            secret_key=Config.STRIPE_SECRET_KEY,
            api_base=Config.STRIPE_API_BASE,
            timeout=Config.STRIPE_TIMEOUT,
        )
        try:
            yield StripeGateway(
                client,
                webhook_secret=Config.STRIPE_WEBHOOK_SECRET,
                webhook_tolerance=Config.STRIPE_WEBHOOK_TOLERANCE,
                currency=Config.CURRENCY,
            )
        finally:
            await client.aclose()

    @provide(scope=Scope.APP)
    def get_certificate_renderer(self) -> CertificateRenderer:
        return ReportLabCertificateRenderer(
            output_dir=Config.CERTIFICATE_DIR,
            public_base_url=Config.PUBLIC_BASE_URL,
        )

    @provide(scope=Scope.APP)
    def get_email_sender(self) -> EmailSender:
        return SmtpEmailSender(
            server=Config.SMTP_SERVER,
            port=Config.SMTP_PORT,
            user=Config.SMTP_USER,
            password=Config.SMTP_PASSWORD,
            use_tls=Config.SMTP_USE_TLS,
        )

    @provide(scope=Scope.APP)
    def get_identity_webhook_verifier(self) -> IdentityWebhookVerifier:
        return SvixWebhookVerifier(
            secret=Config.IDENTITY_WEBHOOK_SECRET,
            tolerance=Config.IDENTITY_WEBHOOK_TOLERANCE,
        )

    # ==================== COMMUNITY HANDLERS ====================

    community_handlers = provide_all(
        CreateCommunityHandler,
        UpdateCommunityHandler,
        TransferOwnershipHandler,
        ArchiveCommunityHandler,
        GetCommunityHandler,
        ListCommunitiesHandler,
        GetCommunityStatsHandler,
        GetLeaderboardHandler,
        CreateUserHandler,
        UpdateUserHandler,
        ChangeUserRoleHandler,
        ArchiveUserHandler,
        GetUserHandler,
        ListUsersHandler,
        RecordPresenceHandler,
        ListMembersHandler,
        SearchMentionsHandler,
        HandleIdentityWebhookHandler,
        CreateSpaceHandler,
        ArchiveSpaceHandler,
        ListSpacesHandler,
        CreateChannelHandler,
        ArchiveChannelHandler,
        ListChannelsHandler,
        scope=Scope.REQUEST,
    )

    # ==================== CONTENT HANDLERS ====================

    content_handlers = provide_all(
        CreatePostHandler,
        UpdatePostHandler,
        PublishPostHandler,
        PinPostHandler,
        MarkSolvedHandler,
        ArchivePostHandler,
        LikePostHandler,
        SaveDraftHandler,
        GetPostHandler,
        GetPostThreadHandler,
        ListPostsHandler,
        RestorePostVersionHandler,
        RestoreCommentVersionHandler,
        GetVersionHistoryHandler,
        GetVersionHandler,
        CompareVersionsHandler,
        CreateCommentHandler,
        UpdateCommentHandler,
        ArchiveCommentHandler,
        LikeCommentHandler,
        GetCommentHandler,
        ListCommentsHandler,
        SearchHandler,
        scope=Scope.REQUEST,
    )

    # ==================== LEARNING HANDLERS ====================

    learning_handlers = provide_all(
        CreateCourseHandler,
        UpdateCourseHandler,
        PublishCourseHandler,
        ArchiveCourseHandler,
        GetCourseHandler,
        ListCoursesHandler,
        CreateLessonHandler,
        UpdateLessonHandler,
        ReorderLessonHandler,
        SetDripScheduleHandler,
        ArchiveLessonHandler,
        GetLessonHandler,
        ListLessonsHandler,
        TrackProgressHandler,
        MarkCompleteHandler,
        GetProgressHandler,
        GenerateCertificateHandler,
        GetCertificateHandler,
        ListCertificatesHandler,
        VerifyCertificateHandler,
        scope=Scope.REQUEST,
    )

    # ==================== BILLING HANDLERS ====================

    billing_handlers = provide_all(
        CreatePaymentTierHandler,
        UpdatePaymentTierHandler,
        ActivatePaymentTierHandler,
        DeactivatePaymentTierHandler,
        GetPaymentTierHandler,
        ListPaymentTiersHandler,
        CreateCouponHandler,
        ListCouponsHandler,
        ApplyCouponHandler,
        CalculateCheckoutHandler,
        CreateSubscriptionHandler,
        CancelSubscriptionHandler,
        HandleStripeWebhookHandler,
        GetSubscriptionHandler,
        CheckAccessHandler,
        scope=Scope.REQUEST,
    )

    # ==================== NOTIFICATION HANDLERS ====================

    notification_handlers = provide_all(
        CreateNotificationHandler,
        MarkNotificationReadHandler,
        MarkAllReadHandler,
        GetUserNotificationsHandler,
        GetUnreadCountHandler,
        scope=Scope.REQUEST,
    )


class MemoryPersistenceProvider(Provider):
    """Repositories over one process-wide InMemoryStore (tests, local runs)."""

    def __init__(self, store: Optional[InMemoryStore] = None):
        super().__init__()
        self._store = store

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryStore:
        return self._store if self._store is not None else InMemoryStore()

    scope = Scope.REQUEST

    communities = provide(MemoryCommunityRepository, provides=CommunityRepository)
    users = provide(MemoryUserRepository, provides=UserRepository)
    spaces = provide(MemorySpaceRepository, provides=SpaceRepository)
    channels = provide(MemoryChannelRepository, provides=ChannelRepository)
    posts = provide(MemoryPostRepository, provides=PostRepository)
    drafts = provide(MemoryPostDraftRepository, provides=PostDraftRepository)
    likes = provide(MemoryLikeRepository, provides=LikeRepository)
    comments = provide(MemoryCommentRepository, provides=CommentRepository)
    versions = provide(MemoryContentVersionRepository, provides=ContentVersionRepository)
    courses = provide(MemoryCourseRepository, provides=CourseRepository)
    lessons = provide(MemoryLessonRepository, provides=LessonRepository)
    progress = provide(MemoryCourseProgressRepository, provides=CourseProgressRepository)
    certificates = provide(MemoryCertificateRepository, provides=CertificateRepository)
    payment_tiers = provide(MemoryPaymentTierRepository, provides=PaymentTierRepository)
    coupons = provide(MemoryCouponRepository, provides=CouponRepository)
    subscriptions = provide(MemorySubscriptionRepository, provides=SubscriptionRepository)
    notifications = provide(MemoryNotificationRepository, provides=NotificationRepository)
    search = provide(MemorySearchRepository, provides=SearchRepository)
    activity = provide(MemoryActivityRepository, provides=ActivityRepository)


def persistence_provider(backend: Optional[str] = None) -> Provider:
    """Provider for the configured PERSISTENCE_BACKEND ("prisma" or "memory")."""
    backend = (backend or get_config().PERSISTENCE_BACKEND).lower()
    if backend == "memory":
        return MemoryPersistenceProvider()
    if backend == "prisma":
        # Importing prisma requires a generated client, so only load it when selected
        from community_os.setup.ioc.prisma_provider import PrismaPersistenceProvider

        return PrismaPersistenceProvider()
    raise ValueError(f"Unknown PERSISTENCE_BACKEND: {backend!r}")


def create_container(persistence: Optional[Provider] = None) -> AsyncContainer:
    """
    Create and configure the DI container.

    Call this ONCE per application. Pass a persistence provider to override
    the configured backend (tests pass a MemoryPersistenceProvider).
    """
    return make_async_container(CoreProvider(), persistence or persistence_provider())
