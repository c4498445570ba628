"""Update, archive and nesting rules for members, sections, comments, courses and tiers."""

import uuid

import pytest

CONTENT = "<p>Context managers pair setup with teardown.</p>"


@pytest.fixture()
def published_post(client, auth_headers, community, member):
    created = client.post(
        "/api/posts",
        headers=auth_headers,
        json={"communityId": community["id"], "title": "With statements", "content": CONTENT},
    )
    assert created.status_code == 201, created.text
    published = client.post(
        "/api/posts/publish", headers=auth_headers, json={"postId": created.json()["id"]}
    )
    assert published.status_code == 200, published.text
    return published.json()


@pytest.fixture()
def comment(client, auth_headers, published_post):
    response = client.post(
        "/api/comments",
        headers=auth_headers,
        json={"postId": published_post["id"], "content": "Use contextlib for the simple ones."},
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture()
def course(client, auth_headers, community, member):
    response = client.post(
        "/api/courses",
        headers=auth_headers,
        json={
            "communityId": community["id"],
            "title": "Packaging",
            "description": "Wheels, sdists and entry points.",
        },
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture()
def lesson(client, auth_headers, course):
    response = client.post(
        f"/api/courses/{course['id']}/lessons",
        headers=auth_headers,
        json={"title": "pyproject.toml", "type": "TEXT", "content": "One file to configure them all."},
    )
    assert response.status_code == 201, response.text
    return response.json()


# ==================== MEMBERS ====================


def test_get_and_update_member(client, auth_headers, member):
    response = client.get(f"/api/users/{member['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["email"] == "owner@example.com"

    response = client.patch(
        f"/api/users/{member['id']}", headers=auth_headers, json={"name": "Ada L."}
    )
    assert response.status_code == 200, response.text
    assert response.json()["name"] == "Ada L."


def test_change_role(client, auth_headers, member):
    response = client.put(
        f"/api/users/{member['id']}/role", headers=auth_headers, json={"role": "ADMIN"}
    )
    assert response.status_code == 200
    assert response.json()["role"] == "ADMIN"


def test_unknown_role_is_rejected(client, auth_headers, member):
    response = client.put(
        f"/api/users/{member['id']}/role", headers=auth_headers, json={"role": "SUPERUSER"}
    )
    assert response.status_code == 400


def test_archived_member_is_frozen(client, auth_headers, member):
    response = client.delete(f"/api/users/{member['id']}", headers=auth_headers)
    assert response.status_code == 200

    again = client.delete(f"/api/users/{member['id']}", headers=auth_headers)
    assert again.status_code == 409
    assert again.json()["error"] == "USER_ALREADY_ARCHIVED"

    update = client.patch(f"/api/users/{member['id']}", headers=auth_headers, json={"name": "X"})
    assert update.status_code == 409
    assert update.json()["error"] == "CANNOT_MODIFY_ARCHIVED_USER"


def test_unknown_member(client, auth_headers):
    response = client.get(f"/api/users/{uuid.uuid4()}", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["error"] == "USER_NOT_FOUND"


# ==================== SPACES AND CHANNELS ====================


def create_space(client, headers, community, **extra):
    body = {"communityId": community["id"], "name": "Learning"}
    body.update(extra)
    return client.post("/api/spaces", headers=headers, json=body)


def test_child_spaces_are_listed_under_their_parent(client, auth_headers, community):
    parent = create_space(client, auth_headers, community).json()
    second = create_space(
        client, auth_headers, community, name="Workshops", parentSpaceId=parent["id"], position=1
    )
    first = create_space(
        client, auth_headers, community, name="Reading", parentSpaceId=parent["id"], position=0
    )
    assert second.status_code == 201 and first.status_code == 201

    roots = client.get(f"/api/communities/{community['id']}/spaces", headers=auth_headers)
    assert [s["id"] for s in roots.json()] == [parent["id"]]

    children = client.get(
        f"/api/communities/{community['id']}/spaces",
        headers=auth_headers,
        params={"parentSpaceId": parent["id"]},
    )
    assert [s["name"] for s in children.json()] == ["Reading", "Workshops"]


def test_spaces_nest_one_level(client, auth_headers, community):
    parent = create_space(client, auth_headers, community).json()
    child = create_space(
        client, auth_headers, community, name="Reading", parentSpaceId=parent["id"]
    ).json()

    response = create_space(
        client, auth_headers, community, name="Too deep", parentSpaceId=child["id"]
    )
    assert response.status_code == 400
    assert response.json()["error"] == "MAX_NESTING_DEPTH_EXCEEDED"


def test_unknown_parent_space(client, auth_headers, community):
    response = create_space(client, auth_headers, community, parentSpaceId=str(uuid.uuid4()))
    assert response.status_code == 404
    assert response.json()["error"] == "PARENT_SPACE_NOT_FOUND"


def test_archive_space(client, auth_headers, community):
    space = create_space(client, auth_headers, community).json()
    response = client.delete(f"/api/spaces/{space['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["deletedAt"] is not None

    listing = client.get(f"/api/communities/{community['id']}/spaces", headers=auth_headers)
    assert listing.json() == []

    again = client.delete(f"/api/spaces/{space['id']}", headers=auth_headers)
    assert again.status_code == 409
    assert again.json()["error"] == "SPACE_ALREADY_ARCHIVED"


def create_channel(client, headers, community, **extra):
    body = {"communityId": community["id"], "name": "general"}
    body.update(extra)
    return client.post("/api/channels", headers=headers, json=body)


def test_standalone_and_space_channels_are_listed_separately(client, auth_headers, community):
    space = create_space(client, auth_headers, community).json()
    create_channel(client, auth_headers, community, name="lobby")
    create_channel(client, auth_headers, community, name="homework", spaceId=space["id"])

    standalone = client.get(f"/api/communities/{community['id']}/channels", headers=auth_headers)
    assert [c["name"] for c in standalone.json()] == ["lobby"]

    in_space = client.get(
        f"/api/communities/{community['id']}/channels",
        headers=auth_headers,
        params={"spaceId": space["id"]},
    )
    assert [c["name"] for c in in_space.json()] == ["homework"]


def test_tier_gated_channel_needs_a_tier(client, auth_headers, community):
    response = create_channel(client, auth_headers, community, permission="TIER_GATED")
    assert response.status_code == 400
    assert response.json()["error"] == "INVALID_PERMISSION"

    response = create_channel(
        client,
        auth_headers,
        community,
        permission="TIER_GATED",
        requiredTierId=str(uuid.uuid4()),
    )
    assert response.status_code == 404
    assert response.json()["error"] == "TIER_NOT_FOUND"


def test_tier_gated_channel(client, auth_headers, community):
    tier = client.post(
        "/api/payment-tiers",
        headers=auth_headers,
        json={
            "communityId": community["id"],
            "name": "Supporters",
            "description": "Backstage access",
            "priceMonthly": 500,
            "priceAnnual": 5000,
        },
    ).json()
    response = create_channel(
        client,
        auth_headers,
        community,
        name="backstage",
        permission="TIER_GATED",
        requiredTierId=tier["id"],
    )
    assert response.status_code == 201, response.text
    assert response.json()["permission"] == "TIER_GATED"
    assert response.json()["requiredTierId"] == tier["id"]


def test_archive_channel(client, auth_headers, community):
    channel = create_channel(client, auth_headers, community).json()
    assert client.delete(f"/api/channels/{channel['id']}", headers=auth_headers).status_code == 200

    again = client.delete(f"/api/channels/{channel['id']}", headers=auth_headers)
    assert again.status_code == 409
    assert again.json()["error"] == "CHANNEL_ALREADY_ARCHIVED"


# ==================== COMMENTS ====================


def test_get_comment(client, auth_headers, comment):
    response = client.get(f"/api/comments/{comment['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["content"] == comment["content"]


def test_editing_a_comment_records_a_version(client, auth_headers, comment):
    response = client.patch(
        f"/api/comments/{comment['id']}",
        headers=auth_headers,
        json={"content": "Or write a class with __enter__ and __exit__."},
    )
    assert response.status_code == 200, response.text
    assert response.json()["content"].startswith("Or write a class")

    history = client.get(f"/api/versions/{comment['id']}", headers=auth_headers)
    assert [v["versionNumber"] for v in history.json()] == [2, 1]
    assert history.json()[0]["contentType"] == "COMMENT"


def test_archive_comment(client, auth_headers, published_post, comment):
    response = client.delete(f"/api/comments/{comment['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["isArchived"] is True

    post = client.get(f"/api/posts/{published_post['id']}", headers=auth_headers)
    assert post.json()["commentCount"] == 0

    again = client.delete(f"/api/comments/{comment['id']}", headers=auth_headers)
    assert again.status_code == 409
    assert again.json()["error"] == "COMMENT_ALREADY_ARCHIVED"

    edit = client.patch(
        f"/api/comments/{comment['id']}", headers=auth_headers, json={"content": "Edited"}
    )
    assert edit.status_code == 409
    assert edit.json()["error"] == "CANNOT_MODIFY_ARCHIVED_COMMENT"


def test_like_comment_toggles(client, auth_headers, comment):
    liked = client.post(f"/api/comments/{comment['id']}/like", headers=auth_headers)
    assert liked.json() == {"isLiked": True, "likeCount": 1}

    unliked = client.post(f"/api/comments/{comment['id']}/like", headers=auth_headers)
    assert unliked.json() == {"isLiked": False, "likeCount": 0}


# ==================== COURSES AND LESSONS ====================


def test_update_course(client, auth_headers, course):
    response = client.patch(
        f"/api/courses/{course['id']}", headers=auth_headers, json={"title": "Packaging in 2026"}
    )
    assert response.status_code == 200, response.text
    assert response.json()["title"] == "Packaging in 2026"


def test_update_course_needs_a_field(client, auth_headers, course):
    response = client.patch(f"/api/courses/{course['id']}", headers=auth_headers, json={})
    assert response.status_code == 400
    assert response.json()["error"] == "INVALID_INPUT"


def test_only_instructor_can_update_course(client, make_headers, course):
    response = client.patch(
        f"/api/courses/{course['id']}",
        headers=make_headers(str(uuid.uuid4())),
        json={"title": "Hijacked"},
    )
    assert response.status_code == 403
    assert response.json()["error"] == "UNAUTHORIZED"


def test_published_course_cannot_be_archived(client, auth_headers, course):
    client.post(f"/api/courses/{course['id']}/publish", headers=auth_headers)
    response = client.delete(f"/api/courses/{course['id']}", headers=auth_headers)
    assert response.status_code == 409
    assert response.json()["error"] == "CANNOT_ARCHIVE_PUBLISHED_COURSE"


def test_archived_course_is_hidden_and_frozen(client, auth_headers, community, course):
    response = client.delete(f"/api/courses/{course['id']}", headers=auth_headers)
    assert response.status_code == 200

    listing = client.get(f"/api/communities/{community['id']}/courses", headers=auth_headers)
    assert listing.json() == []

    update = client.patch(
        f"/api/courses/{course['id']}", headers=auth_headers, json={"title": "Revived"}
    )
    assert update.status_code == 409
    assert update.json()["error"] == "CANNOT_MODIFY_ARCHIVED_COURSE"


def test_get_and_update_lesson(client, auth_headers, lesson):
    response = client.get(f"/api/lessons/{lesson['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["isAvailable"] is True

    response = client.patch(
        f"/api/lessons/{lesson['id']}", headers=auth_headers, json={"title": "The pyproject file"}
    )
    assert response.status_code == 200, response.text
    assert response.json()["title"] == "The pyproject file"


def test_unknown_lesson(client, auth_headers):
    response = client.get(f"/api/lessons/{uuid.uuid4()}", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["error"] == "LESSON_NOT_FOUND"


def test_archive_lesson(client, auth_headers, course, lesson):
    response = client.delete(f"/api/lessons/{lesson['id']}", headers=auth_headers)
    assert response.status_code == 200

    lessons = client.get(f"/api/courses/{course['id']}/lessons", headers=auth_headers)
    assert lessons.json() == []

    again = client.delete(f"/api/lessons/{lesson['id']}", headers=auth_headers)
    assert again.status_code == 409
    assert again.json()["error"] == "LESSON_ALREADY_ARCHIVED"

    edit = client.patch(f"/api/lessons/{lesson['id']}", headers=auth_headers, json={"title": "Back"})
    assert edit.status_code == 409
    assert edit.json()["error"] == "CANNOT_MODIFY_ARCHIVED_LESSON"


# ==================== PAYMENT TIERS ====================


def test_repricing_a_tier_mints_a_new_gateway_price(client, auth_headers, community):
    tier = client.post(
        "/api/payment-tiers",
        headers=auth_headers,
        json={
            "communityId": community["id"],
            "name": "Pro Members",
            "description": "Everything we publish",
            "priceMonthly": 1999,
            "priceAnnual": 19900,
        },
    ).json()

    response = client.patch(
        f"/api/payment-tiers/{tier['id']}", headers=auth_headers, json={"priceMonthly": 2499}
    )
    assert response.status_code == 200, response.text
    updated = response.json()
    assert updated["priceMonthly"] == 2499
    assert updated["stripePriceMonthlyId"] != tier["stripePriceMonthlyId"]
    assert updated["stripePriceAnnualId"] == tier["stripePriceAnnualId"]

    fetched = client.get(f"/api/payment-tiers/{tier['id']}", headers=auth_headers)
    assert fetched.json()["priceMonthly"] == 2499


def test_free_tier_cannot_become_paid(client, auth_headers, community):
    tier = client.post(
        "/api/payment-tiers",
        headers=auth_headers,
        json={
            "communityId": community["id"],
            "name": "Free Members",
            "description": "Forum access",
            "priceMonthly": 0,
            "priceAnnual": 0,
        },
    ).json()

    response = client.patch(
        f"/api/payment-tiers/{tier['id']}", headers=auth_headers, json={"priceMonthly": 999}
    )
    assert response.status_code == 400
    assert response.json()["error"] == "INVALID_PRICE"


def test_unknown_tier(client, auth_headers):
    response = client.get(f"/api/payment-tiers/{uuid.uuid4()}", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["error"] == "TIER_NOT_FOUND"
