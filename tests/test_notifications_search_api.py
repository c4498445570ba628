"""Notifications inbox and full-text search over HTTP."""

import uuid

import pytest


@pytest.fixture()
def notification(client, auth_headers, community, member):
    response = client.post(
        "/api/notifications",
        headers=auth_headers,
        json={
            "userId": member["id"],
            "communityId": community["id"],
            "type": "NEW_POST",
            "message": "A new post is waiting for you",
            "linkUrl": f"/communities/{community['id']}",
        },
    )
    assert response.status_code == 201, response.text
    return response.json()


def test_create_notification(notification, member):
    assert notification["userId"] == member["id"]
    assert notification["isRead"] is False
    assert notification["actorName"] is None


def test_notification_for_unknown_user(client, auth_headers, community):
    response = client.post(
        "/api/notifications",
        headers=auth_headers,
        json={
            "userId": str(uuid.uuid4()),
            "communityId": community["id"],
            "type": "LIKE",
            "message": "Someone liked your post",
        },
    )
    assert response.status_code == 404
    assert response.json()["error"] == "USER_NOT_FOUND"


def test_mark_read_and_count(client, auth_headers, notification):
    assert client.get("/api/notifications/unread-count", headers=auth_headers).json() == {
        "count": 1
    }

    read = client.post(
        "/api/notifications/read",
        headers=auth_headers,
        json={"notificationId": notification["id"]},
    )
    assert read.status_code == 200
    assert read.json()["isRead"] is True
    assert client.get("/api/notifications/unread-count", headers=auth_headers).json() == {
        "count": 0
    }


def test_cannot_read_someone_elses_notification(client, make_headers, notification):
    response = client.post(
        "/api/notifications/read",
        headers=make_headers(str(uuid.uuid4())),
        json={"notificationId": notification["id"]},
    )
    assert response.status_code == 403
    assert response.json()["error"] == "NOT_OWNED_BY_USER"


def test_mark_all_read(client, auth_headers, community, member, notification):
    client.post(
        "/api/notifications",
        headers=auth_headers,
        json={
            "userId": member["id"],
            "communityId": community["id"],
            "type": "REPLY",
            "message": "Someone replied",
        },
    )
    response = client.post("/api/notifications/read-all", headers=auth_headers)
    assert response.json() == {"count": 2}

    inbox = client.get("/api/notifications", headers=auth_headers).json()
    assert len(inbox) == 2
    assert all(n["isRead"] for n in inbox)


@pytest.fixture()
def searchable(client, auth_headers, community, member):
    post = client.post(
        "/api/posts",
        headers=auth_headers,
        json={
            "communityId": community["id"],
            "title": "Understanding asyncio",
            "content": "<p>The event loop schedules coroutines cooperatively.</p>",
        },
    ).json()
    client.post("/api/posts/publish", headers=auth_headers, json={"postId": post["id"]})
    client.post(
        "/api/comments",
        headers=auth_headers,
        json={"postId": post["id"], "content": "asyncio finally clicked for me"},
    )
    draft = client.post(
        "/api/posts",
        headers=auth_headers,
        json={
            "communityId": community["id"],
            "title": "asyncio draft",
            "content": "<p>Not published yet, so nobody can find it.</p>",
        },
    ).json()
    return post, draft


def test_search_finds_posts_and_comments(client, auth_headers, community, searchable):
    post, draft = searchable
    response = client.get(
        f"/api/search?q=asyncio&communityId={community['id']}", headers=auth_headers
    )
    assert response.status_code == 200, response.text
    body = response.json()
    assert body["query"] == "asyncio"
    types = [result["type"] for result in body["results"]]
    assert types == ["post", "comment"]
    assert body["results"][0]["id"] == post["id"]
    assert body["results"][0]["relevanceScore"] > body["results"][1]["relevanceScore"]
    assert draft["id"] not in [result["id"] for result in body["results"]]
    assert body["totalCount"] == 2


def test_search_members_by_name(client, auth_headers, member):
    response = client.get("/api/search?q=ada&type=users", headers=auth_headers)
    results = response.json()["results"]
    assert [r["id"] for r in results] == [member["id"]]
    assert results[0]["title"] == "Ada Owner"


def test_search_query_too_short(client, auth_headers):
    response = client.get("/api/search?q=a", headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["error"] == "QUERY_TOO_SHORT"


def test_search_requires_query(client, auth_headers):
    response = client.get("/api/search", headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["error"] == "Validation error"


def test_search_rejects_unknown_type(client, auth_headers):
    response = client.get("/api/search?q=python&type=videos", headers=auth_headers)
    assert response.status_code == 400


@pytest.fixture()
def many_members(client, auth_headers, community, member):
    for n in range(21):
        response = client.post(
            "/api/users",
            headers=auth_headers,
            json={
                "email": f"pythonista{n}@example.com",
                "name": f"Pythonista {n:02d}",
                "communityId": community["id"],
                "userId": str(uuid.uuid4()),
            },
        )
        assert response.status_code == 201, response.text


def test_search_pages_default_to_twenty_from_the_start(client, auth_headers, many_members):
    response = client.get("/api/search?q=pythonista&type=users", headers=auth_headers)
    assert response.status_code == 200, response.text
    body = response.json()
    assert len(body["results"]) == 20
    assert body["results"][0]["title"] == "Pythonista 00"
    assert body["totalCount"] == 21

    rest = client.get("/api/search?q=pythonista&type=users&offset=20", headers=auth_headers)
    assert [r["title"] for r in rest.json()["results"]] == ["Pythonista 20"]


def test_total_count_covers_every_match(client, auth_headers, community, searchable):
    response = client.get(
        f"/api/search?q=asyncio&communityId={community['id']}&limit=1", headers=auth_headers
    )
    body = response.json()
    assert len(body["results"]) == 1
    assert body["totalCount"] == 2
