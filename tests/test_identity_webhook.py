"""Identity provider user sync: svix signatures and profile updates."""

import json
import time

import pytest

from community_os.domain.ports.services import InvalidWebhookSignature
from community_os.infrastructure.identity import SvixWebhookVerifier, compute_svix_signature

SECRET = "whsec_aWRlbnRpdHktdGVzdC1zZWNyZXQ="
OTHER_SECRET = "whsec_d3Jvbmctc2VjcmV0"


def account(user_id, email="ada@lovelace.dev", **fields):
    data = {
        "id": user_id,
        "email_addresses": [{"email_address": email}] if email else [],
        "first_name": "Ada",
        "last_name": "Lovelace",
    }
    data.update(fields)
    return data


def test_user_updated_syncs_profile(client, auth_headers, user_id, member, send_identity_webhook):
    event = {
        "type": "user.updated",
        "data": account(user_id, image_url="https://img.example.com/ada.png"),
    }
    response = send_identity_webhook(event)
    assert response.status_code == 200
    assert response.json() == {"received": True, "eventType": "user.updated"}

    me = client.get("/api/users/me", headers=auth_headers).json()
    assert me["name"] == "Ada Lovelace"
    assert me["email"] == "ada@lovelace.dev"
    assert me["avatarUrl"] == "https://img.example.com/ada.png"
    assert me["role"] == "OWNER"


def test_email_owned_by_another_member_is_kept(
    client, auth_headers, user_id, community, member, send_identity_webhook
):
    client.post(
        "/api/users",
        headers=auth_headers,
        json={"email": "grace@example.com", "communityId": community["id"], "userId": "grace"},
    )

    response = send_identity_webhook(
        {"type": "user.updated", "data": account(user_id, email="grace@example.com")}
    )
    assert response.status_code == 200

    me = client.get("/api/users/me", headers=auth_headers).json()
    assert me["email"] == "owner@example.com"
    assert me["name"] == "Ada Lovelace"


def test_account_without_email_is_rejected(user_id, member, send_identity_webhook):
    response = send_identity_webhook({"type": "user.created", "data": account(user_id, email=None)})
    assert response.status_code == 400
    assert response.json()["error"] == "MISSING_EMAIL"


def test_account_without_profile_is_acknowledged(client, auth_headers, send_identity_webhook):
    response = send_identity_webhook({"type": "user.created", "data": account("stranger")})
    assert response.status_code == 200
    assert client.get("/api/users/stranger", headers=auth_headers).status_code == 404


def test_user_deleted_archives_member(
    client, auth_headers, user_id, community, member, send_identity_webhook
):
    response = send_identity_webhook({"type": "user.deleted", "data": {"id": user_id}})
    assert response.status_code == 200

    members = client.get(f"/api/communities/{community['id']}/members", headers=auth_headers)
    assert members.json() == []


def test_unknown_event_is_acknowledged(send_identity_webhook):
    response = send_identity_webhook({"type": "session.created", "data": {"id": "sess_1"}})
    assert response.status_code == 200
    assert response.json()["eventType"] == "session.created"


def test_wrong_secret_is_rejected(send_identity_webhook):
    response = send_identity_webhook(
        {"type": "user.updated", "data": {"id": "x"}}, secret=OTHER_SECRET
    )
    assert response.status_code == 400
    assert response.json()["error"] == "INVALID_SIGNATURE"


def test_missing_headers_are_rejected(client):
    response = client.post("/api/webhooks/identity", content=b'{"type": "user.updated"}')
    assert response.status_code == 400
    assert response.json()["error"] == "INVALID_SIGNATURE"


class TestSvixWebhookVerifier:
    payload = json.dumps({"type": "user.updated", "data": {"id": "user_1"}}).encode()

    def sign(self, timestamp, secret=SECRET, message_id="msg_1"):
        return compute_svix_signature(message_id, str(timestamp), self.payload, secret)

    def test_valid_signature(self):
        now = int(time.time())
        event = SvixWebhookVerifier(SECRET).verify(
            self.payload, "msg_1", str(now), f"v1,{self.sign(now)}"
        )
        assert (event.id, event.type, event.data) == ("msg_1", "user.updated", {"id": "user_1"})

    def test_any_listed_signature_may_match(self):
        now = int(time.time())
        header = f"v1,bm90LWl0 v2,{self.sign(now)} v1,{self.sign(now)}"
        event = SvixWebhookVerifier(SECRET).verify(self.payload, "msg_1", str(now), header)
        assert event.type == "user.updated"

    @pytest.mark.parametrize("skew", [-301, 301])
    def test_timestamp_outside_tolerance(self, skew):
        now = 1_700_000_000
        sent = now + skew
        verifier = SvixWebhookVerifier(SECRET, tolerance=300)
        with pytest.raises(InvalidWebhookSignature, match="tolerance"):
            verifier.verify(self.payload, "msg_1", str(sent), f"v1,{self.sign(sent)}", now=now)

    def test_signature_is_bound_to_message_id(self):
        now = int(time.time())
        signature = self.sign(now, message_id="msg_other")
        with pytest.raises(InvalidWebhookSignature):
            SvixWebhookVerifier(SECRET).verify(self.payload, "msg_1", str(now), f"v1,{signature}")

    def test_unconfigured_secret(self):
        with pytest.raises(InvalidWebhookSignature, match="not configured"):
            SvixWebhookVerifier("").verify(self.payload, "msg_1", "1", "v1,abc")

    def test_malformed_timestamp(self):
        with pytest.raises(InvalidWebhookSignature, match="timestamp"):
            SvixWebhookVerifier(SECRET).verify(self.payload, "msg_1", "yesterday", "v1,abc")
