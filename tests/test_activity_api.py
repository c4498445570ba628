"""Community stats, leaderboard, presence, member directory and mention search."""

import uuid

import pytest


def add_member(client, headers, community, name, role="MEMBER"):
    member_id = str(uuid.uuid4())
    response = client.post(
        "/api/users",
        headers=headers,
        json={
            "email": f"{member_id[:8]}@example.com",
            "name": name,
            "role": role,
            "communityId": community["id"],
            "userId": member_id,
        },
    )
    assert response.status_code == 201, response.text
    return member_id


@pytest.fixture()
def grace(client, auth_headers, community, member):
    return add_member(client, auth_headers, community, "Grace Member")


@pytest.fixture()
def linus(client, auth_headers, community, member):
    return add_member(client, auth_headers, community, "Linus Admin", role="ADMIN")


@pytest.fixture()
def busy_community(client, auth_headers, make_headers, community, member, grace, linus):
    """Ada publishes one post; Grace comments on it three times and likes it."""
    post = client.post(
        "/api/posts",
        headers=auth_headers,
        json={
            "communityId": community["id"],
            "title": "Generators explained",
            "content": "<p>yield hands control back to the caller.</p>",
        },
    ).json()
    client.post("/api/posts/publish", headers=auth_headers, json={"postId": post["id"]})

    grace_headers = make_headers(grace)
    for text in ("Lovely", "Very clear", "Bookmarked"):
        response = client.post(
            "/api/comments", headers=grace_headers, json={"postId": post["id"], "content": text}
        )
        assert response.status_code == 201, response.text
    client.post(f"/api/posts/{post['id']}/like", headers=grace_headers)
    return community


def test_stats_counts(client, auth_headers, busy_community):
    response = client.get(f"/api/communities/{busy_community['id']}/stats", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == {
        "communityId": busy_community["id"],
        "totalMembers": 3,
        "onlineMembers": 0,
        "totalAdmins": 1,
        "totalPosts": 1,
        "totalComments": 3,
    }


def test_presence_counts_member_online(client, auth_headers, community, member):
    seen = client.post("/api/users/me/presence", headers=auth_headers)
    assert seen.status_code == 200
    assert seen.json()["lastSeenAt"] is not None

    stats = client.get(f"/api/communities/{community['id']}/stats", headers=auth_headers)
    assert stats.json()["onlineMembers"] == 1


def test_presence_without_profile_returns_404(client, auth_headers):
    response = client.post("/api/users/me/presence", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["error"] == "USER_NOT_FOUND"


def test_stats_for_unknown_community(client, auth_headers):
    response = client.get(f"/api/communities/{uuid.uuid4()}/stats", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["error"] == "COMMUNITY_NOT_FOUND"


def test_leaderboard_ranks_by_points(client, auth_headers, busy_community, member, grace, linus):
    response = client.get(
        f"/api/communities/{busy_community['id']}/leaderboard", headers=auth_headers
    )
    assert response.status_code == 200
    body = response.json()
    assert body["period"] == "all-time"
    assert [(e["userId"], e["points"], e["rank"]) for e in body["entries"]] == [
        (grace, 7, 1),
        (member["id"], 5, 2),
        (linus, 0, 3),
    ]
    top = body["entries"][0]
    assert (top["postCount"], top["commentCount"], top["likeCount"]) == (0, 3, 1)
    assert top["userName"] == "Grace Member"


def test_leaderboard_limit_and_period(client, auth_headers, busy_community, grace):
    response = client.get(
        f"/api/communities/{busy_community['id']}/leaderboard?limit=1&period=week",
        headers=auth_headers,
    )
    assert response.status_code == 200
    assert [e["userId"] for e in response.json()["entries"]] == [grace]
    assert response.json()["period"] == "week"


@pytest.mark.parametrize(
    "params, error",
    [
        ("period=decade", "INVALID_PERIOD"),
        ("limit=0", "INVALID_LIMIT"),
        ("limit=101", "INVALID_LIMIT"),
    ],
)
def test_leaderboard_rejects_bad_params(client, auth_headers, community, params, error):
    response = client.get(
        f"/api/communities/{community['id']}/leaderboard?{params}", headers=auth_headers
    )
    assert response.status_code == 400
    assert response.json()["error"] == error


def test_member_directory_pages_by_name(client, auth_headers, busy_community, member):
    url = f"/api/members?communityId={busy_community['id']}&sortBy=name&sortOrder=asc&limit=2"
    first = client.get(url, headers=auth_headers)
    assert first.status_code == 200
    body = first.json()
    assert [m["name"] for m in body["members"]] == ["Ada Owner", "Grace Member"]
    assert body["pagination"] == {"total": 3, "page": 1, "limit": 2, "totalPages": 2}
    ada = body["members"][0]
    assert ada["postsCount"] == 1
    assert ada["role"] == "OWNER"
    assert ada["isOnline"] is False

    second = client.get(url + "&page=2", headers=auth_headers).json()
    assert [m["name"] for m in second["members"]] == ["Linus Admin"]


def test_member_directory_sorts_by_last_activity(client, auth_headers, community, member, grace):
    client.post("/api/users/me/presence", headers=auth_headers)

    response = client.get(
        f"/api/members?communityId={community['id']}&sortBy=lastActiveAt", headers=auth_headers
    )
    members = response.json()["members"]
    assert [m["id"] for m in members] == [member["id"], grace]
    assert members[0]["isOnline"] is True


@pytest.mark.parametrize("params", ["sortBy=email", "sortOrder=up", "page=0", "limit=500"])
def test_member_directory_rejects_bad_params(client, auth_headers, community, params):
    response = client.get(
        f"/api/members?communityId={community['id']}&{params}", headers=auth_headers
    )
    assert response.status_code == 400
    assert response.json()["error"] == "INVALID_INPUT"


def test_member_directory_for_unknown_community(client, auth_headers):
    response = client.get(f"/api/members?communityId={uuid.uuid4()}", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["error"] == "COMMUNITY_NOT_FOUND"


@pytest.mark.parametrize(
    "q, names",
    [
        ("gr", ["Grace Member"]),
        ("MEM", ["Grace Member"]),
        ("a", ["Ada Owner", "Linus Admin"]),
        ("zz", []),
    ],
)
def test_mention_search_matches_any_name_word(
    client, auth_headers, community, grace, linus, q, names
):
    response = client.get(
        f"/api/mentions/search?q={q}&communityId={community['id']}", headers=auth_headers
    )
    assert response.status_code == 200
    assert [c["name"] for c in response.json()] == names


def test_mention_search_requires_query(client, auth_headers, community):
    response = client.get(
        f"/api/mentions/search?q=&communityId={community['id']}", headers=auth_headers
    )
    assert response.status_code == 400
    assert response.json()["error"] == "INVALID_INPUT"
