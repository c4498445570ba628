"""
MAPPERS - entity -> DTO, one direction, no validation.
"""

from community_os.application.mappers.common import to_iso
from community_os.application.mappers.community import (
    to_community_dto,
    to_member_dto,
    to_mention_candidate_dto,
    to_user_dto,
)
from community_os.application.mappers.space import to_channel_dto, to_space_dto
from community_os.application.mappers.post import (
    to_comment_dto,
    to_content_version_dto,
    to_post_draft_dto,
    to_post_dto,
)
from community_os.application.mappers.course import (
    to_certificate_dto,
    to_course_dto,
    to_lesson_dto,
    to_progress_dto,
)
from community_os.application.mappers.payment import (
    to_coupon_dto,
    to_payment_tier_dto,
    to_subscription_dto,
)
from community_os.application.mappers.notification import to_notification_dto

__all__ = [
    "to_iso",
    "to_community_dto",
    "to_user_dto",
    "to_member_dto",
    "to_mention_candidate_dto",
    "to_space_dto",
    "to_channel_dto",
    "to_post_dto",
    "to_post_draft_dto",
    "to_comment_dto",
    "to_content_version_dto",
    "to_course_dto",
    "to_lesson_dto",
    "to_progress_dto",
    "to_certificate_dto",
    "to_payment_tier_dto",
    "to_coupon_dto",
    "to_subscription_dto",
    "to_notification_dto",
]
