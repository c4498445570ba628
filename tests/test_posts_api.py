"""Forum posts, drafts, likes, versions and comments over HTTP."""

import uuid

import pytest

CONTENT = "<p>Decorators wrap a function and return another one.</p>"


@pytest.fixture()
def post(client, auth_headers, community, member):
    response = client.post(
        "/api/posts",
        headers=auth_headers,
        json={"communityId": community["id"], "title": "Decorators 101", "content": CONTENT},
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture()
def published_post(client, auth_headers, post):
    response = client.post("/api/posts/publish", headers=auth_headers, json={"postId": post["id"]})
    assert response.status_code == 200, response.text
    return response.json()


def add_member(client, headers, community, name="Grace Member"):
    member_id = str(uuid.uuid4())
    response = client.post(
        "/api/users",
        headers=headers,
        json={
            "email": f"{member_id[:8]}@example.com",
            "name": name,
            "communityId": community["id"],
            "userId": member_id,
        },
    )
    assert response.status_code == 201, response.text
    return member_id


def test_create_post_starts_as_draft(post, member):
    assert post["authorId"] == member["id"]
    assert post["publishedAt"] is None
    assert post["likeCount"] == 0
    assert post["isPinned"] is False


def test_create_post_validates_title_and_content(client, auth_headers, community, member):
    response = client.post(
        "/api/posts",
        headers=auth_headers,
        json={"communityId": community["id"], "title": "Hi", "content": CONTENT},
    )
    assert response.status_code == 400

    response = client.post(
        "/api/posts",
        headers=auth_headers,
        json={"communityId": community["id"], "title": "Short body", "content": "<b>tiny</b>      "},
    )
    assert response.status_code == 400
    assert response.json()["error"] == "INVALID_CONTENT"


def test_create_post_requires_existing_community(client, auth_headers, member):
    response = client.post(
        "/api/posts",
        headers=auth_headers,
        json={"communityId": str(uuid.uuid4()), "title": "Lost post", "content": CONTENT},
    )
    assert response.status_code == 404
    assert response.json()["error"] == "COMMUNITY_NOT_FOUND"


def test_create_post_requires_author_profile(client, auth_headers, community):
    response = client.post(
        "/api/posts",
        headers=auth_headers,
        json={"communityId": community["id"], "title": "Nobody", "content": CONTENT},
    )
    assert response.status_code == 404
    assert response.json()["error"] == "AUTHOR_NOT_FOUND"


def test_publish_twice_conflicts(client, auth_headers, published_post):
    assert published_post["publishedAt"] is not None
    response = client.post(
        "/api/posts/publish", headers=auth_headers, json={"postId": published_post["id"]}
    )
    assert response.status_code == 409
    assert response.json()["error"] == "POST_ALREADY_PUBLISHED"


def test_draft_cannot_be_pinned(client, auth_headers, post):
    response = client.post(
        "/api/posts/pin", headers=auth_headers, json={"postId": post["id"], "isPinned": True}
    )
    assert response.status_code == 409
    assert response.json()["error"] == "POST_NOT_PUBLISHED"


def test_pinned_posts_list_first(client, auth_headers, community, published_post):
    newer = client.post(
        "/api/posts",
        headers=auth_headers,
        json={"communityId": community["id"], "title": "Generators", "content": CONTENT},
    ).json()

    listing = client.get(f"/api/communities/{community['id']}/posts", headers=auth_headers)
    assert [p["id"] for p in listing.json()] == [newer["id"], published_post["id"]]

    pinned = client.post(
        "/api/posts/pin",
        headers=auth_headers,
        json={"postId": published_post["id"], "isPinned": True},
    )
    assert pinned.json()["isPinned"] is True

    listing = client.get(f"/api/communities/{community['id']}/posts", headers=auth_headers)
    assert [p["id"] for p in listing.json()] == [published_post["id"], newer["id"]]

    page = client.get(
        f"/api/communities/{community['id']}/posts?limit=1&offset=1", headers=auth_headers
    )
    assert [p["id"] for p in page.json()] == [newer["id"]]


def test_mark_solved(client, auth_headers, published_post):
    response = client.post(
        "/api/posts/solve", headers=auth_headers, json={"postId": published_post["id"]}
    )
    assert response.status_code == 200
    assert response.json()["isSolved"] is True


def test_like_toggles(client, auth_headers, published_post):
    url = f"/api/posts/{published_post['id']}/like"
    first = client.post(url, headers=auth_headers)
    assert first.json() == {"isLiked": True, "likeCount": 1}
    second = client.post(url, headers=auth_headers)
    assert second.json() == {"isLiked": False, "likeCount": 0}


def test_like_without_profile(client, make_headers, published_post):
    response = client.post(
        f"/api/posts/{published_post['id']}/like", headers=make_headers(str(uuid.uuid4()))
    )
    assert response.status_code == 404
    assert response.json()["error"] == "USER_NOT_FOUND"


def test_archived_post_is_hidden_and_frozen(client, auth_headers, community, post):
    response = client.delete(f"/api/posts/{post['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["isArchived"] is True

    listing = client.get(f"/api/communities/{community['id']}/posts", headers=auth_headers)
    assert listing.json() == []

    update = client.patch(
        f"/api/posts/{post['id']}", headers=auth_headers, json={"title": "Revived title"}
    )
    assert update.status_code == 409
    assert update.json()["error"] == "CANNOT_MODIFY_ARCHIVED_POST"


def test_content_edits_create_versions(client, auth_headers, post):
    title_only = client.patch(
        f"/api/posts/{post['id']}", headers=auth_headers, json={"title": "Decorators 102"}
    )
    assert title_only.status_code == 200

    history = client.get(f"/api/versions/{post['id']}", headers=auth_headers).json()
    assert [v["versionNumber"] for v in history] == [1]

    edited = "<p>Decorators wrap a function and may keep its metadata.</p>"
    client.patch(f"/api/posts/{post['id']}", headers=auth_headers, json={"content": edited})

    history = client.get(f"/api/versions/{post['id']}", headers=auth_headers).json()
    assert [v["versionNumber"] for v in history] == [2, 1]
    assert history[0]["content"] == edited

    version = client.get(f"/api/versions/{post['id']}/1", headers=auth_headers)
    assert version.json()["content"] == CONTENT

    comparison = client.get(
        f"/api/versions/{post['id']}/compare?old=1&new=2", headers=auth_headers
    ).json()
    assert comparison["oldVersion"]["content"] == CONTENT
    assert comparison["newVersion"]["content"] == edited


def test_restore_version(client, auth_headers, post):
    client.patch(
        f"/api/posts/{post['id']}",
        headers=auth_headers,
        json={"content": "<p>Completely different body text.</p>"},
    )

    restored = client.post(f"/api/posts/{post['id']}/versions/1/restore", headers=auth_headers)
    assert restored.status_code == 200
    assert restored.json()["content"] == CONTENT

    history = client.get(f"/api/versions/{post['id']}", headers=auth_headers).json()
    assert [v["versionNumber"] for v in history] == [3, 2, 1]

    current = client.post(f"/api/posts/{post['id']}/versions/3/restore", headers=auth_headers)
    assert current.status_code == 409
    assert current.json()["error"] == "CANNOT_RESTORE_CURRENT_VERSION"


def test_unknown_version_returns_404(client, auth_headers, post):
    response = client.get(f"/api/versions/{post['id']}/9", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["error"] == "VERSION_NOT_FOUND"


def test_comments_on_drafts_are_rejected(client, auth_headers, post):
    response = client.post(
        "/api/comments", headers=auth_headers, json={"postId": post["id"], "content": "Nice!"}
    )
    assert response.status_code == 409
    assert response.json()["error"] == "CANNOT_COMMENT_ON_ARCHIVED_POST"


def test_comment_thread(client, auth_headers, published_post):
    top = client.post(
        "/api/comments",
        headers=auth_headers,
        json={"postId": published_post["id"], "content": "Great write-up"},
    )
    assert top.status_code == 201, top.text
    reply = client.post(
        "/api/comments",
        headers=auth_headers,
        json={"postId": published_post["id"], "parentId": top.json()["id"], "content": "Thanks"},
    )
    assert reply.status_code == 201, reply.text

    too_deep = client.post(
        "/api/comments",
        headers=auth_headers,
        json={"postId": published_post["id"], "parentId": reply.json()["id"], "content": "Deeper"},
    )
    assert too_deep.status_code == 400
    assert too_deep.json()["error"] == "MAX_NESTING_DEPTH_EXCEEDED"

    thread = client.get(f"/api/posts/{published_post['id']}/comments", headers=auth_headers)
    assert len(thread.json()) == 1
    assert [r["id"] for r in thread.json()[0]["replies"]] == [reply.json()["id"]]

    post = client.get(f"/api/posts/{published_post['id']}", headers=auth_headers)
    assert post.json()["commentCount"] == 2


def test_mention_notifies_member(client, auth_headers, make_headers, community, published_post):
    grace = add_member(client, auth_headers, community)
    response = client.post(
        "/api/comments",
        headers=auth_headers,
        json={
            "postId": published_post["id"],
            "content": f"Ping @[{grace}:Grace Member] about this",
        },
    )
    assert response.status_code == 201, response.text

    notifications = client.get("/api/notifications", headers=make_headers(grace)).json()
    assert [n["type"] for n in notifications] == ["MENTION"]
    assert notifications[0]["actorName"] == "Ada Owner"


def test_comment_by_member_notifies_post_author(
    client, auth_headers, make_headers, community, published_post
):
    grace = add_member(client, auth_headers, community)
    response = client.post(
        "/api/comments",
        headers=make_headers(grace),
        json={"postId": published_post["id"], "content": "Very helpful"},
    )
    assert response.status_code == 201, response.text

    unread = client.get("/api/notifications/unread-count", headers=auth_headers)
    assert unread.json() == {"count": 1}


def test_save_draft(client, auth_headers, community, member):
    response = client.put(
        "/api/drafts",
        headers=auth_headers,
        json={"communityId": community["id"], "title": "Half an idea"},
    )
    assert response.status_code == 200, response.text
    assert response.json()["title"] == "Half an idea"
    assert response.json()["authorId"] == member["id"]


@pytest.mark.parametrize(
    "post_id",
    [
        "not-a-uuid",
        uuid.uuid4().hex,
        "{" + str(uuid.uuid4()) + "}",
        "urn:uuid:" + str(uuid.uuid4()),
    ],
)
def test_comment_post_id_must_be_canonical_uuid(client, auth_headers, published_post, post_id):
    response = client.post(
        "/api/comments", headers=auth_headers, json={"postId": post_id, "content": "Nice!"}
    )
    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Validation error"
    assert body["details"][0]["loc"] == ["body", "postId"]
    assert "Post ID must be a valid UUID" in body["details"][0]["msg"]


def test_reply_parent_must_belong_to_same_post(client, auth_headers, community, published_post):
    other = client.post(
        "/api/posts",
        headers=auth_headers,
        json={"communityId": community["id"], "title": "Generators 101", "content": CONTENT},
    ).json()
    client.post("/api/posts/publish", headers=auth_headers, json={"postId": other["id"]})
    foreign = client.post(
        "/api/comments",
        headers=auth_headers,
        json={"postId": other["id"], "content": "Over on the other thread"},
    )
    assert foreign.status_code == 201, foreign.text

    response = client.post(
        "/api/comments",
        headers=auth_headers,
        json={
            "postId": published_post["id"],
            "parentId": foreign.json()["id"],
            "content": "Wrong thread",
        },
    )
    assert response.status_code == 400
    assert response.json()["error"] == "PARENT_COMMENT_NOT_IN_POST"


def test_post_thread(client, auth_headers, make_headers, community, published_post):
    grace = add_member(client, auth_headers, community)
    top = client.post(
        "/api/comments",
        headers=auth_headers,
        json={"postId": published_post["id"], "content": "Questions welcome"},
    ).json()
    client.post(
        "/api/comments",
        headers=make_headers(grace),
        json={
            "postId": published_post["id"],
            "parentId": top["id"],
            "content": "What about classes?",
        },
    )
    client.post(f"/api/posts/{published_post['id']}/like", headers=auth_headers)

    response = client.get(f"/api/posts/{published_post['id']}/thread", headers=auth_headers)
    assert response.status_code == 200
    thread = response.json()
    assert thread["authorName"] == "Ada Owner"
    assert thread["userHasLiked"] is True
    assert thread["post"]["viewCount"] == 1
    assert [c["authorName"] for c in thread["comments"]] == ["Ada Owner"]
    assert [r["authorName"] for r in thread["comments"][0]["replies"]] == ["Grace Member"]

    again = client.get(f"/api/posts/{published_post['id']}/thread", headers=make_headers(grace))
    assert again.json()["post"]["viewCount"] == 2
    assert again.json()["userHasLiked"] is False


def test_post_thread_of_draft_counts_no_view(client, auth_headers, post):
    response = client.get(f"/api/posts/{post['id']}/thread", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["post"]["viewCount"] == 0
    assert response.json()["comments"] == []


def test_post_thread_of_archived_post(client, auth_headers, published_post):
    client.delete(f"/api/posts/{published_post['id']}", headers=auth_headers)
    response = client.get(f"/api/posts/{published_post['id']}/thread", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["error"] == "POST_NOT_FOUND"


def test_restore_comment_version(client, auth_headers, published_post):
    comment = client.post(
        "/api/comments",
        headers=auth_headers,
        json={"postId": published_post["id"], "content": "First take"},
    ).json()
    client.patch(
        f"/api/comments/{comment['id']}", headers=auth_headers, json={"content": "Second take"}
    )

    restored = client.post(
        f"/api/comments/{comment['id']}/versions/1/restore", headers=auth_headers
    )
    assert restored.status_code == 200
    assert restored.json()["content"] == "First take"

    history = client.get(f"/api/versions/{comment['id']}", headers=auth_headers).json()
    assert [v["versionNumber"] for v in history] == [3, 2, 1]
    assert {v["contentType"] for v in history} == {"COMMENT"}

    current = client.post(
        f"/api/comments/{comment['id']}/versions/3/restore", headers=auth_headers
    )
    assert current.status_code == 409
    assert current.json()["error"] == "CANNOT_RESTORE_CURRENT_VERSION"

    missing = client.post(
        f"/api/comments/{comment['id']}/versions/9/restore", headers=auth_headers
    )
    assert missing.status_code == 404
    assert missing.json()["error"] == "VERSION_NOT_FOUND"


def test_restore_version_of_unknown_comment(client, auth_headers):
    response = client.post(f"/api/comments/{uuid.uuid4()}/versions/1/restore", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["error"] == "COMMENT_NOT_FOUND"
