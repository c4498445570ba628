"""Payment tiers, coupons, checkout, subscriptions and access checks."""

import uuid

import pytest

SUCCESS_URL = "https://app.example.com/welcome"
CANCEL_URL = "https://app.example.com/pricing"


@pytest.fixture()
def paid_tier(client, auth_headers, community):
    response = client.post(
        "/api/payment-tiers",
        headers=auth_headers,
        json={
            "communityId": community["id"],
            "name": "Pro Members",
            "description": "Every course and the private channels",
            "priceMonthly": 1999,
            "priceAnnual": 19900,
            "features": ["Courses", "Private channels"],
        },
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture()
def coupon(client, auth_headers, community, member):
    response = client.post(
        "/api/coupons",
        headers=auth_headers,
        json={
            "communityId": community["id"],
            "code": "launch25",
            "discountType": "PERCENTAGE",
            "discountValue": 25,
        },
    )
    assert response.status_code == 201, response.text
    return response.json()


def create_free_tier(client, headers, community):
    return client.post(
        "/api/payment-tiers",
        headers=headers,
        json={
            "communityId": community["id"],
            "name": "Free Members",
            "description": "Forum access for everyone",
            "priceMonthly": 0,
            "priceAnnual": 0,
        },
    )


def checkout(client, headers, community, tier, **extra):
    body = {"tierId": tier["id"], "communityId": community["id"], "interval": "MONTHLY"}
    body.update(extra)
    return client.post("/api/checkout/calculate", headers=headers, json=body)


def test_paid_tier_is_mirrored_to_gateway(paid_tier):
    assert paid_tier["isFree"] is False
    assert paid_tier["isActive"] is True
    assert paid_tier["stripeProductId"].startswith("prod_offline_")
    assert paid_tier["stripePriceMonthlyId"].startswith("price_offline_")
    assert paid_tier["stripePriceAnnualId"].startswith("price_offline_")


def test_tier_name_is_validated(client, auth_headers, community):
    response = client.post(
        "/api/payment-tiers",
        headers=auth_headers,
        json={
            "communityId": community["id"],
            "name": "X",
            "description": "Too short a name for a tier",
            "priceMonthly": 100,
            "priceAnnual": 1000,
        },
    )
    assert response.status_code == 400
    assert response.json()["error"] == "INVALID_NAME"


def test_only_one_free_tier(client, auth_headers, community):
    assert create_free_tier(client, auth_headers, community).status_code == 201
    second = create_free_tier(client, auth_headers, community)
    assert second.status_code == 409
    assert second.json()["error"] == "FREE_TIER_EXISTS"


def test_at_most_two_tiers(client, auth_headers, community, paid_tier):
    assert create_free_tier(client, auth_headers, community).status_code == 201
    third = client.post(
        "/api/payment-tiers",
        headers=auth_headers,
        json={
            "communityId": community["id"],
            "name": "Patrons",
            "description": "Support the community directly",
            "priceMonthly": 5000,
            "priceAnnual": 50000,
        },
    )
    assert third.status_code == 409
    assert third.json()["error"] == "MAX_TIERS_REACHED"

    tiers = client.get(f"/api/communities/{community['id']}/payment-tiers", headers=auth_headers)
    assert len(tiers.json()) == 2


def test_deactivate_and_activate(client, auth_headers, paid_tier):
    url = f"/api/payment-tiers/{paid_tier['id']}"
    assert client.post(f"{url}/deactivate", headers=auth_headers).json()["isActive"] is False
    again = client.post(f"{url}/deactivate", headers=auth_headers)
    assert again.status_code == 409
    assert again.json()["error"] == "TIER_ALREADY_INACTIVE"
    assert client.post(f"{url}/activate", headers=auth_headers).json()["isActive"] is True


def test_coupon_code_is_normalized(coupon):
    assert coupon["code"] == "LAUNCH25"
    assert coupon["usedCount"] == 0
    assert coupon["isAvailable"] is True
    assert coupon["stripeCouponId"].startswith("coupon_offline_")


def test_duplicate_coupon_code(client, auth_headers, community, coupon):
    response = client.post(
        "/api/coupons",
        headers=auth_headers,
        json={
            "communityId": community["id"],
            "code": "LAUNCH25",
            "discountType": "FIXED_AMOUNT",
            "discountValue": 500,
        },
    )
    assert response.status_code == 400
    assert response.json()["error"] == "INVALID_CODE"


def test_percentage_over_100_is_rejected(client, auth_headers, community, member):
    response = client.post(
        "/api/coupons",
        headers=auth_headers,
        json={
            "communityId": community["id"],
            "code": "TOOMUCH",
            "discountType": "PERCENTAGE",
            "discountValue": 150,
        },
    )
    assert response.status_code == 400
    assert response.json()["error"] == "INVALID_DISCOUNT"


def test_coupons_only_for_own_community(client, auth_headers, community):
    response = client.post(
        "/api/coupons",
        headers=auth_headers,
        json={
            "communityId": community["id"],
            "code": "SNEAKY",
            "discountType": "FIXED_AMOUNT",
            "discountValue": 100,
        },
    )
    assert response.status_code == 403
    assert response.json()["error"] == "UNAUTHORIZED"


def test_apply_coupon(client, auth_headers, community, coupon):
    response = client.post(
        "/api/coupons/apply",
        headers=auth_headers,
        json={"code": "launch25", "communityId": community["id"]},
    )
    assert response.status_code == 200
    assert response.json()["id"] == coupon["id"]


def test_coupon_expiry_without_offset_is_utc(
    client, auth_headers, community, member, paid_tier
):
    response = client.post(
        "/api/coupons",
        headers=auth_headers,
        json={
            "communityId": community["id"],
            "code": "NEWYEAR",
            "discountType": "PERCENTAGE",
            "discountValue": 10,
            "expiresAt": "2099-01-01T00:00:00",
        },
    )
    assert response.status_code == 201, response.text
    assert response.json()["expiresAt"] == "2099-01-01T00:00:00+00:00"
    assert response.json()["isAvailable"] is True

    applied = client.post(
        "/api/coupons/apply",
        headers=auth_headers,
        json={"code": "newyear", "communityId": community["id"]},
    )
    assert applied.status_code == 200, applied.text

    body = checkout(client, auth_headers, community, paid_tier, couponCode="NEWYEAR").json()
    assert body["couponApplied"] is True
    assert body["discount"] == 200


def test_checkout_without_coupon(client, auth_headers, community, paid_tier):
    response = checkout(client, auth_headers, community, paid_tier, interval="ANNUAL")
    assert response.status_code == 200, response.text
    assert response.json() == {
        "subtotal": 19900,
        "discount": 0,
        "total": 19900,
        "couponApplied": False,
        "couponCode": None,
        "trialDays": 7,
        "interval": "ANNUAL",
        "tierName": "Pro Members",
    }


def test_checkout_with_percentage_coupon_rounds_half_up(
    client, auth_headers, community, paid_tier, coupon
):
    # 25% of 1999 is 499.75
    response = checkout(client, auth_headers, community, paid_tier, couponCode="launch25")
    body = response.json()
    assert body["discount"] == 500
    assert body["total"] == 1499
    assert body["couponApplied"] is True
    assert body["couponCode"] == "LAUNCH25"


def test_fixed_discount_is_capped(client, auth_headers, community, member, paid_tier):
    client.post(
        "/api/coupons",
        headers=auth_headers,
        json={
            "communityId": community["id"],
            "code": "BIGGIFT",
            "discountType": "FIXED_AMOUNT",
            "discountValue": 5000,
        },
    )
    body = checkout(client, auth_headers, community, paid_tier, couponCode="BIGGIFT").json()
    assert body["discount"] == 1999
    assert body["total"] == 0


def test_checkout_unknown_coupon(client, auth_headers, community, paid_tier):
    response = checkout(client, auth_headers, community, paid_tier, couponCode="NOPE1234")
    assert response.status_code == 404
    assert response.json()["error"] == "COUPON_NOT_FOUND"


def test_checkout_session_uses_offline_gateway(client, auth_headers, community, member, paid_tier):
    response = client.post(
        "/api/checkout/session",
        headers=auth_headers,
        json={
            "tierId": paid_tier["id"],
            "communityId": community["id"],
            "interval": "MONTHLY",
            "successUrl": SUCCESS_URL,
            "cancelUrl": CANCEL_URL,
        },
    )
    assert response.status_code == 200, response.text
    body = response.json()
    assert body["sessionId"].startswith("cs_offline_")
    assert body["checkoutUrl"] == f"{SUCCESS_URL}?session_id={body['sessionId']}"


def test_free_tier_has_no_checkout(client, auth_headers, community, member):
    tier = create_free_tier(client, auth_headers, community).json()
    response = client.post(
        "/api/checkout/session",
        headers=auth_headers,
        json={
            "tierId": tier["id"],
            "communityId": community["id"],
            "interval": "MONTHLY",
            "successUrl": SUCCESS_URL,
            "cancelUrl": CANCEL_URL,
        },
    )
    assert response.status_code == 500
    assert response.json()["error"] == "STRIPE_ERROR"


def test_subscription_lifecycle_and_access(
    client, auth_headers, user_id, community, member, paid_tier, send_webhook
):
    course = client.post(
        "/api/courses",
        headers=auth_headers,
        json={
            "communityId": community["id"],
            "title": "Members only",
            "description": "Only for paying members of the guild.",
            "paymentTierId": paid_tier["id"],
        },
    ).json()
    access_url = f"/api/access/course/{course['id']}"

    denied = client.get(access_url, headers=auth_headers).json()
    assert denied == {
        "hasAccess": False,
        "reason": "No active subscription",
        "requiredTier": "Pro Members",
    }

    assert client.get(
        f"/api/communities/{community['id']}/subscription", headers=auth_headers
    ).json() is None

    received = send_webhook(
        {
            "id": "evt_1",
            "type": "checkout.session.completed",
            "data": {
                "object": {
                    "subscription": "sub_123",
                    "customer": "cus_123",
                    "metadata": {
                        "user_id": user_id,
                        "community_id": community["id"],
                        "tier_id": paid_tier["id"],
                        "interval": "MONTHLY",
                    },
                }
            },
        }
    )
    assert received.status_code == 200, received.text

    subscription = client.get(
        f"/api/communities/{community['id']}/subscription", headers=auth_headers
    ).json()
    assert subscription["status"] == "TRIALING"
    assert subscription["paymentTierName"] == "Pro Members"
    assert subscription["stripeSubscriptionId"] == "sub_123"

    assert client.get(access_url, headers=auth_headers).json()["hasAccess"] is True

    cancelled = client.post(
        f"/api/subscriptions/{subscription['id']}/cancel", headers=auth_headers
    )
    assert cancelled.status_code == 200
    assert cancelled.json()["cancelAtPeriodEnd"] is True
    # Access lasts until the end of the period
    assert client.get(access_url, headers=auth_headers).json()["hasAccess"] is True

    twice = client.post(f"/api/subscriptions/{subscription['id']}/cancel", headers=auth_headers)
    assert twice.status_code == 409
    assert twice.json()["error"] == "ALREADY_CANCELLED"

    send_webhook(
        {
            "id": "evt_2",
            "type": "customer.subscription.deleted",
            "data": {"object": {"id": "sub_123"}},
        }
    )
    expired = client.get(access_url, headers=auth_headers).json()
    assert expired["hasAccess"] is False
    assert expired["reason"] == "Subscription expired or cancelled"


def test_cancel_someone_elses_subscription(
    client, make_headers, user_id, community, member, paid_tier, send_webhook
):
    send_webhook(
        {
            "id": "evt_3",
            "type": "checkout.session.completed",
            "data": {
                "object": {
                    "metadata": {
                        "user_id": user_id,
                        "community_id": community["id"],
                        "tier_id": paid_tier["id"],
                    }
                }
            },
        }
    )
    subscription = client.get(
        f"/api/communities/{community['id']}/subscription", headers=make_headers(user_id)
    ).json()

    response = client.post(
        f"/api/subscriptions/{subscription['id']}/cancel",
        headers=make_headers(str(uuid.uuid4())),
    )
    assert response.status_code == 403
    assert response.json()["error"] == "UNAUTHORIZED"


def test_free_tier_grants_access(client, auth_headers, community, member):
    tier = create_free_tier(client, auth_headers, community).json()
    course = client.post(
        "/api/courses",
        headers=auth_headers,
        json={
            "communityId": community["id"],
            "title": "Open course",
            "description": "Free for every member.",
            "paymentTierId": tier["id"],
        },
    ).json()
    response = client.get(f"/api/access/course/{course['id']}", headers=auth_headers)
    assert response.json()["hasAccess"] is True


def test_access_for_unknown_resource(client, auth_headers):
    response = client.get("/api/access/course/missing", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["error"] == "RESOURCE_NOT_FOUND"
