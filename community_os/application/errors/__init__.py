"""
Feature errors - one closed code enum per feature.

HTTP status is derived from the code category (see common/errors.py).
"""

from community_os.application.errors.community import CommunityError, CommunityErrorCode
from community_os.application.errors.user import UserError, UserErrorCode
from community_os.application.errors.space import SpaceError, SpaceErrorCode
from community_os.application.errors.channel import ChannelError, ChannelErrorCode
from community_os.application.errors.post import PostError, PostErrorCode
from community_os.application.errors.content_version import (
    ContentVersionError,
    ContentVersionErrorCode,
)
from community_os.application.errors.comment import CommentError, CommentErrorCode
from community_os.application.errors.course import CourseError, CourseErrorCode
from community_os.application.errors.lesson import LessonError, LessonErrorCode
from community_os.application.errors.progress import ProgressError, ProgressErrorCode
from community_os.application.errors.certificate import (
    CertificateError,
    CertificateErrorCode,
)
from community_os.application.errors.payment_tier import (
    PaymentTierError,
    PaymentTierErrorCode,
)
from community_os.application.errors.coupon import CouponError, CouponErrorCode
from community_os.application.errors.checkout import CheckoutError, CheckoutErrorCode
from community_os.application.errors.subscription import (
    SubscriptionError,
    SubscriptionErrorCode,
)
from community_os.application.errors.access import AccessError, AccessErrorCode
from community_os.application.errors.notification import (
    NotificationError,
    NotificationErrorCode,
)
from community_os.application.errors.search import SearchError, SearchErrorCode

__all__ = [
    "CommunityError",
    "CommunityErrorCode",
    "UserError",
    "UserErrorCode",
    "SpaceError",
    "SpaceErrorCode",
    "ChannelError",
    "ChannelErrorCode",
    "PostError",
    "PostErrorCode",
    "ContentVersionError",
    "ContentVersionErrorCode",
    "CommentError",
    "CommentErrorCode",
    "CourseError",
    "CourseErrorCode",
    "LessonError",
    "LessonErrorCode",
    "ProgressError",
    "ProgressErrorCode",
    "CertificateError",
    "CertificateErrorCode",
    "PaymentTierError",
    "PaymentTierErrorCode",
    "CouponError",
    "CouponErrorCode",
    "CheckoutError",
    "CheckoutErrorCode",
    "SubscriptionError",
    "SubscriptionErrorCode",
    "AccessError",
    "AccessErrorCode",
    "NotificationError",
    "NotificationErrorCode",
    "SearchError",
    "SearchErrorCode",
]
