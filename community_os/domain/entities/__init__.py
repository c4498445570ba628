"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier (UUID4 string)
- Has behavior (methods) that enforce its business rules
- Is soft-deleted through deleted_at where it can be archived
- Pure Python dataclasses (no ORM, no Pydantic)
"""

from community_os.domain.entities.community import Community, CommunityPrivacy
from community_os.domain.entities.user import User
from community_os.domain.entities.space import Space
from community_os.domain.entities.channel import Channel, ChannelPermission
from community_os.domain.entities.post import Post
from community_os.domain.entities.post_draft import PostDraft
from community_os.domain.entities.like import Like
from community_os.domain.entities.comment import Comment
from community_os.domain.entities.content_version import ContentType, ContentVersion
from community_os.domain.entities.course import Course
from community_os.domain.entities.lesson import Lesson, LessonType
from community_os.domain.entities.course_progress import CourseProgress
from community_os.domain.entities.certificate import Certificate
from community_os.domain.entities.payment_tier import PaymentTier
from community_os.domain.entities.coupon import Coupon, DiscountType
from community_os.domain.entities.subscription import (
    BillingInterval,
    Subscription,
    SubscriptionStatus,
)
from community_os.domain.entities.notification import Notification, NotificationType

__all__ = [
    "Community",
    "CommunityPrivacy",
    "User",
    "Space",
    "Channel",
    "ChannelPermission",
    "Post",
    "PostDraft",
    "Like",
    "Comment",
    "ContentType",
    "ContentVersion",
    "Course",
    "Lesson",
    "LessonType",
    "CourseProgress",
    "Certificate",
    "PaymentTier",
    "Coupon",
    "DiscountType",
    "BillingInterval",
    "Subscription",
    "SubscriptionStatus",
    "Notification",
    "NotificationType",
]
