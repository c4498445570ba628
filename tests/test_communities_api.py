"""Communities, members, spaces and channels over HTTP."""


def test_create_community_applies_defaults(community, user_id):
    assert community["name"] == "Python Guild"
    assert community["ownerId"] == user_id
    assert community["primaryColor"] == "#0066CC"
    assert community["slug"] == "python-guild"
    assert community["privacy"] == "PUBLIC"
    assert community["isArchived"] is False


def test_create_community_rejects_short_name(client, auth_headers):
    response = client.post("/api/communities", headers=auth_headers, json={"name": "ab"})
    assert response.status_code == 400
    assert response.json()["error"] == "Validation error"


def test_create_community_rejects_bad_color(client, auth_headers):
    response = client.post(
        "/api/communities",
        headers=auth_headers,
        json={"name": "Color Club", "primaryColor": "blue"},
    )
    assert response.status_code == 400


def test_get_unknown_community_returns_404(client, auth_headers):
    response = client.get("/api/communities/does-not-exist", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["error"] == "COMMUNITY_NOT_FOUND"


def test_update_branding(client, auth_headers, community):
    response = client.patch(
        f"/api/communities/{community['id']}",
        headers=auth_headers,
        json={"name": "Python Guild 2", "primaryColor": "#112233"},
    )
    assert response.status_code == 200
    assert response.json()["name"] == "Python Guild 2"
    assert response.json()["primaryColor"] == "#112233"


def test_transfer_ownership_to_same_owner_conflicts(client, auth_headers, community, user_id):
    response = client.post(
        f"/api/communities/{community['id']}/transfer",
        headers=auth_headers,
        json={"newOwnerId": user_id},
    )
    assert response.status_code == 409
    assert response.json()["error"] == "SAME_OWNER"


def test_transfer_ownership(client, auth_headers, community):
    response = client.post(
        f"/api/communities/{community['id']}/transfer",
        headers=auth_headers,
        json={"newOwnerId": "new-owner"},
    )
    assert response.status_code == 200
    assert response.json()["ownerId"] == "new-owner"


def test_archive_hides_community_from_listing(client, auth_headers, community):
    response = client.delete(f"/api/communities/{community['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["isArchived"] is True

    listing = client.get("/api/communities", headers=auth_headers)
    assert listing.json() == []

    again = client.delete(f"/api/communities/{community['id']}", headers=auth_headers)
    assert again.status_code == 409
    assert again.json()["error"] == "COMMUNITY_ALREADY_ARCHIVED"


def test_archived_community_cannot_be_rebranded(client, auth_headers, community):
    client.delete(f"/api/communities/{community['id']}", headers=auth_headers)
    response = client.patch(
        f"/api/communities/{community['id']}",
        headers=auth_headers,
        json={"name": "Too Late"},
    )
    assert response.status_code == 409
    assert response.json()["error"] == "CANNOT_MODIFY_ARCHIVED_COMMUNITY"


def test_me_returns_the_callers_profile(client, auth_headers, member):
    response = client.get("/api/users/me", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["email"] == "owner@example.com"
    assert response.json()["role"] == "OWNER"


def test_me_without_profile_returns_404(client, auth_headers):
    response = client.get("/api/users/me", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["error"] == "USER_NOT_FOUND"


def test_duplicate_email_conflicts(client, auth_headers, community, member):
    response = client.post(
        "/api/users",
        headers=auth_headers,
        json={
            "email": "Owner@Example.com",
            "communityId": community["id"],
            "userId": "someone-else",
        },
    )
    assert response.status_code == 409
    assert response.json()["error"] == "EMAIL_ALREADY_EXISTS"


def test_members_listing(client, auth_headers, community, member):
    response = client.get(f"/api/communities/{community['id']}/members", headers=auth_headers)
    assert response.status_code == 200
    assert [user["id"] for user in response.json()] == [member["id"]]


def test_change_role_to_same_role_conflicts(client, auth_headers, member):
    response = client.put(
        f"/api/users/{member['id']}/role", headers=auth_headers, json={"role": "OWNER"}
    )
    assert response.status_code == 409
    assert response.json()["error"] == "SAME_ROLE"


def test_spaces_and_channels(client, auth_headers, community):
    space = client.post(
        "/api/spaces",
        headers=auth_headers,
        json={"communityId": community["id"], "name": "General"},
    )
    assert space.status_code == 201, space.text
    listing = client.get(f"/api/communities/{community['id']}/spaces", headers=auth_headers)
    assert [s["name"] for s in listing.json()] == ["General"]

    channel = client.post(
        "/api/channels",
        headers=auth_headers,
        json={"communityId": community["id"], "name": "announcements", "spaceId": space.json()["id"]},
    )
    assert channel.status_code == 201, channel.text
