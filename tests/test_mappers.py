"""Entity -> DTO mappers keep every field and serialize timestamps where the DTO says str."""

from datetime import datetime, timezone

from community_os.application.mappers import (
    to_content_version_dto,
    to_coupon_dto,
    to_post_draft_dto,
    to_post_dto,
)
from community_os.domain.entities import (
    ContentType,
    ContentVersion,
    Coupon,
    DiscountType,
    Post,
    PostDraft,
)

CREATED = datetime(2026, 3, 1, 9, 30, tzinfo=timezone.utc)
UPDATED = datetime(2026, 3, 2, 17, 5, 12, tzinfo=timezone.utc)
EXPIRES = datetime(2026, 3, 31, tzinfo=timezone.utc)


def test_post_dto_keeps_every_field():
    post = Post(
        id="post-1",
        community_id="community-1",
        author_id="author-1",
        title="Context managers",
        content="<p>with blocks guarantee cleanup on exit.</p>",
        created_at=CREATED,
        updated_at=UPDATED,
        published_at=UPDATED,
        is_pinned=True,
        is_solved=True,
        like_count=4,
        helpful_count=2,
        comment_count=7,
        view_count=31,
    )

    assert to_post_dto(post).model_dump() == {
        "id": "post-1",
        "community_id": "community-1",
        "author_id": "author-1",
        "title": "Context managers",
        "content": "<p>with blocks guarantee cleanup on exit.</p>",
        "is_pinned": True,
        "is_solved": True,
        "like_count": 4,
        "helpful_count": 2,
        "comment_count": 7,
        "view_count": 31,
        "created_at": CREATED,
        "updated_at": UPDATED,
        "published_at": UPDATED,
        "is_archived": False,
    }


def test_post_draft_dto_uses_iso_strings():
    draft = PostDraft(
        id="draft-1",
        community_id="community-1",
        author_id="author-1",
        expires_at=EXPIRES,
        created_at=CREATED,
        updated_at=UPDATED,
        post_id="post-1",
        title="Half an idea",
        content="<p>More later</p>",
    )

    assert to_post_draft_dto(draft).model_dump(by_alias=True) == {
        "id": "draft-1",
        "communityId": "community-1",
        "authorId": "author-1",
        "postId": "post-1",
        "title": "Half an idea",
        "content": "<p>More later</p>",
        "expiresAt": "2026-03-31T00:00:00+00:00",
        "createdAt": "2026-03-01T09:30:00+00:00",
        "updatedAt": "2026-03-02T17:05:12+00:00",
    }


def test_content_version_dto_uses_iso_strings():
    version = ContentVersion(
        id="version-1",
        content_type=ContentType.COMMENT,
        content_id="comment-1",
        content="First wording",
        version_number=2,
        created_at=CREATED,
    )

    assert to_content_version_dto(version).model_dump() == {
        "id": "version-1",
        "content_type": "COMMENT",
        "content_id": "comment-1",
        "content": "First wording",
        "version_number": 2,
        "created_at": "2026-03-01T09:30:00+00:00",
    }


def test_coupon_dto_uses_iso_strings():
    coupon = Coupon(
        id="coupon-1",
        community_id="community-1",
        code="SPRING",
        discount_type=DiscountType.PERCENTAGE,
        discount_value=15,
        created_at=CREATED,
        updated_at=UPDATED,
        expires_at=datetime(2099, 1, 1, tzinfo=timezone.utc),
        max_uses=50,
        used_count=3,
        stripe_coupon_id="coupon_stripe",
    )

    assert to_coupon_dto(coupon).model_dump() == {
        "id": "coupon-1",
        "community_id": "community-1",
        "code": "SPRING",
        "discount_type": "PERCENTAGE",
        "discount_value": 15,
        "expires_at": "2099-01-01T00:00:00+00:00",
        "max_uses": 50,
        "used_count": 3,
        "is_active": True,
        "is_available": True,
        "stripe_coupon_id": "coupon_stripe",
        "created_at": "2026-03-01T09:30:00+00:00",
        "updated_at": "2026-03-02T17:05:12+00:00",
    }
