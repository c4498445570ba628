"""Entity rules and rich-text helpers, without persistence."""

from datetime import datetime, timedelta, timezone

import pytest

from community_os.domain.entities import (
    BillingInterval,
    Channel,
    Comment,
    Community,
    Coupon,
    CourseProgress,
    Post,
    Subscription,
    SubscriptionStatus,
    User,
)
from community_os.domain.entities.community import slugify
from community_os.domain.exceptions import DomainValidationError
from community_os.domain.services import extract_mention_ids, make_snippet, strip_html
from community_os.domain.value_objects import Email, HexColor, Role


def make_post(**overrides) -> Post:
    values = dict(
        community_id="community-1",
        author_id="author-1",
        title="Type hints in practice",
        content="<p>Annotate the public surface first.</p>",
    )
    values.update(overrides)
    return Post.create(**values)


class TestCommunity:
    def test_slug_from_name(self):
        assert slugify("  Python  Guild!! ") == "python-guild"
        assert slugify("!!!") == "community"

    def test_transfer_to_same_owner(self):
        community = Community.create(name="Guild", owner_id="owner-1")
        with pytest.raises(DomainValidationError) as exc_info:
            community.transfer_ownership("owner-1")
        assert exc_info.value.field == "same_owner"

    def test_archived_community_is_frozen(self):
        community = Community.create(name="Guild", owner_id="owner-1")
        community.archive()
        with pytest.raises(DomainValidationError):
            community.update_branding(name="Renamed")

    def test_restore_only_archived(self):
        community = Community.create(name="Guild", owner_id="owner-1")
        with pytest.raises(DomainValidationError):
            community.restore()
        community.archive()
        community.restore()
        assert community.is_archived is False
        community.update_branding(name="Renamed")
        assert community.name == "Renamed"


class TestChannel:
    def make_channel(self, permission, required_tier_id=None):
        return Channel.create(
            community_id="community-1",
            name="announcements",
            description="",
            permission=permission,
            created_by="owner-1",
            required_tier_id=required_tier_id,
        )

    def test_tier_gated_access(self):
        channel = self.make_channel("TIER_GATED", required_tier_id="tier-pro")
        assert channel.has_access("tier-pro") is True
        assert channel.has_access("tier-basic") is False
        assert channel.has_access(None) is False

    def test_open_channels_admit_everyone(self):
        assert self.make_channel("PUBLIC").has_access(None) is True
        assert self.make_channel("MEMBERS_ONLY").has_access("tier-pro") is True

    @pytest.mark.parametrize(
        "permission,tier",
        [("TIER_GATED", None), ("PUBLIC", "tier-pro"), ("SECRET", None)],
    )
    def test_permission_rules(self, permission, tier):
        with pytest.raises(DomainValidationError) as exc_info:
            self.make_channel(permission, required_tier_id=tier)
        assert exc_info.value.field == "permission"


class TestComment:
    def test_restore_requires_archived(self):
        comment = Comment.create(post_id="post-1", author_id="author-1", content="Agreed")
        with pytest.raises(DomainValidationError) as exc_info:
            comment.restore()
        assert exc_info.value.field == "not_archived"
        comment.archive()
        comment.restore()
        assert comment.deleted_at is None


class TestValueObjects:
    def test_email_is_normalized(self):
        assert Email("  Ada@Example.COM ").value == "ada@example.com"

    @pytest.mark.parametrize("value", ["", "no-at-sign", "a@b", "two@@example.com"])
    def test_invalid_email(self, value):
        with pytest.raises(DomainValidationError):
            Email(value)

    @pytest.mark.parametrize("value", ["#fff", "#0066CC"])
    def test_hex_color(self, value):
        assert HexColor(value).value == value

    def test_role_hierarchy(self):
        assert Role.OWNER.has_role_or_higher(Role.MODERATOR)
        assert not Role.GUEST.has_role_or_higher(Role.MEMBER)
        with pytest.raises(DomainValidationError):
            Role.parse("SUPERUSER")


class TestPost:
    def test_content_length_counts_visible_text(self):
        with pytest.raises(DomainValidationError) as exc_info:
            make_post(content="<p><strong>short</strong></p>")
        assert exc_info.value.field == "content"

    def test_pin_requires_publish(self):
        post = make_post()
        with pytest.raises(DomainValidationError) as exc_info:
            post.pin()
        assert exc_info.value.field == "unpublished"
        post.publish()
        post.pin()
        assert post.is_pinned

    def test_version_snapshot(self):
        post = make_post()
        version = post.create_version_snapshot(3)
        assert version.content_id == post.id
        assert version.version_number == 3
        assert version.content == post.content


class TestUserPresence:
    def make_user(self) -> User:
        return User.create("ada@example.com", Role.MEMBER, "community-1", name="Ada")

    def test_never_seen_is_offline(self):
        assert self.make_user().is_online() is False

    def test_online_window(self):
        user = self.make_user()
        seen = datetime(2026, 5, 1, 12, 0, tzinfo=timezone.utc)
        user.mark_seen(seen)
        assert user.last_seen_at == seen
        assert user.updated_at == seen
        assert user.is_online(seen + timedelta(minutes=15))
        assert not user.is_online(seen + timedelta(minutes=15, seconds=1))

    def test_archived_user_cannot_report_presence(self):
        user = self.make_user()
        user.mark_seen()
        user.archive()
        assert not user.is_online()
        with pytest.raises(DomainValidationError):
            user.mark_seen()


class TestRichText:
    def test_strip_html(self):
        assert strip_html("<p>Hello <b>world</b></p>\n") == "Hello world"
        assert strip_html("Fish &amp; chips") == "Fish & chips"
        assert strip_html("") == ""

    def test_mentions_in_both_forms_without_duplicates(self):
        content = (
            '@[user-1:Ada] and <span data-mention-id="user-2">@Grace</span> '
            "and @[user-1:Ada] again"
        )
        assert extract_mention_ids(content) == ["user-1", "user-2"]

    def test_snippet_centres_on_match(self):
        text = "intro " * 50 + "needle in the haystack" + " outro" * 50
        snippet = make_snippet(text, "needle", length=60)
        assert "needle" in snippet
        assert snippet.startswith("...")
        assert snippet.endswith("...")


class TestCoupon:
    def test_percentage_rounds_half_up(self):
        coupon = Coupon.create("community-1", "half", "PERCENTAGE", 50)
        assert coupon.code == "HALF"
        assert coupon.discount_for(999) == 500
        assert coupon.discount_for(0) == 0

    def test_fixed_amount_never_exceeds_subtotal(self):
        coupon = Coupon.create("community-1", "GIFT", "FIXED_AMOUNT", 2500)
        assert coupon.discount_for(1000) == 1000
        assert coupon.discount_for(4000) == 2500

    def test_max_uses(self):
        coupon = Coupon.create("community-1", "ONCE", "FIXED_AMOUNT", 100, max_uses=1)
        coupon.use()
        assert not coupon.is_available()
        with pytest.raises(DomainValidationError):
            coupon.use()

    def test_expiry(self):
        past = datetime.now(timezone.utc) - timedelta(days=1)
        coupon = Coupon.create("community-1", "OLDCODE", "PERCENTAGE", 10, expires_at=past)
        assert coupon.is_expired()
        assert not coupon.is_available()

    def test_naive_expiry_is_utc(self):
        coupon = Coupon.create(
            "community-1", "LATER", "PERCENTAGE", 10, expires_at=datetime(2099, 1, 1)
        )
        assert coupon.expires_at == datetime(2099, 1, 1, tzinfo=timezone.utc)
        assert not coupon.is_expired()
        assert coupon.is_available()

    @pytest.mark.parametrize("code", ["abc", "has space", "x" * 21])
    def test_invalid_codes(self, code):
        with pytest.raises(DomainValidationError) as exc_info:
            Coupon.create("community-1", code, "PERCENTAGE", 10)
        assert exc_info.value.field == "code"


class TestCourseProgress:
    def test_percentage_is_recomputed_against_current_lessons(self):
        progress = CourseProgress.create(course_id="course-1", user_id="user-1")
        progress.mark_lesson_complete("lesson-1")
        progress.recalculate(["lesson-1", "lesson-2", "lesson-3"])
        assert progress.completion_percentage == 33

        # lesson-1 was removed from the course
        progress.recalculate(["lesson-2", "lesson-3"])
        assert progress.completion_percentage == 0

    def test_lesson_cannot_be_completed_twice(self):
        progress = CourseProgress.create(course_id="course-1", user_id="user-1")
        progress.mark_lesson_complete("lesson-1")
        with pytest.raises(DomainValidationError):
            progress.mark_lesson_complete("lesson-1")


class TestSubscription:
    def test_trial(self):
        subscription = Subscription.start_trial(
            user_id="user-1",
            community_id="community-1",
            payment_tier_id="tier-1",
            interval=BillingInterval.MONTHLY,
            trial_days=7,
        )
        assert subscription.status == SubscriptionStatus.TRIALING
        assert subscription.is_active
        assert subscription.trial_ends_at == subscription.current_period_end

    def test_cancel_then_cancel_again(self):
        subscription = Subscription.start_trial(
            user_id="user-1",
            community_id="community-1",
            payment_tier_id="tier-1",
            interval=BillingInterval.ANNUAL,
            trial_days=0,
        )
        subscription.cancel()
        assert subscription.cancel_at_period_end
        assert subscription.is_active
        with pytest.raises(DomainValidationError):
            subscription.cancel()

        subscription.cancel_immediately()
        assert subscription.status == SubscriptionStatus.CANCELLED
        assert not subscription.is_active
