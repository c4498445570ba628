import json
import os
import sys
import tempfile
import time
import uuid

# Must be set before community_os.config.settings is imported
os.environ["PERSISTENCE_BACKEND"] = "memory"
os.environ["SERVICE_AUTH_SECRET"] = "test-secret"
os.environ["SERVICE_AUTH_ISSUER"] = "test-issuer"
os.environ["SERVICE_AUTH_AUDIENCE"] = "test-audience"
os.environ["STRIPE_SECRET_KEY"] = ""
os.environ["STRIPE_WEBHOOK_SECRET"] = "whsec_test"
os.environ["IDENTITY_WEBHOOK_SECRET"] = "whsec_aWRlbnRpdHktdGVzdC1zZWNyZXQ="
os.environ["SMTP_USER"] = ""
os.environ["SEARCH_RATE_LIMIT"] = "1000/minute"
os.environ["CHECKOUT_RATE_LIMIT"] = "5/minute"
os.environ["CERTIFICATE_DIR"] = tempfile.mkdtemp(prefix="certificates-")
os.environ["LOG_PATH"] = ""

# Add repository root to path
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__) + "/.."))

import pytest
from fastapi.testclient import TestClient

from community_os.fastapi_app import create_fastapi_app
from community_os.infrastructure.identity import compute_svix_signature
from community_os.infrastructure.payments.signature import compute_signature
from community_os.infrastructure.persistence.memory import InMemoryStore
from community_os.presentation.rate_limit import limiter
from community_os.setup.ioc import MemoryPersistenceProvider, create_container
from jwt_generation import generate_jwt_token


@pytest.fixture()
def store():
    return InMemoryStore()


@pytest.fixture()
def app(store):
    """Create a new FastAPI app over a fresh in-memory store for each test."""
    limiter.reset()
    return create_fastapi_app(create_container(MemoryPersistenceProvider(store)))


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def make_headers():
    def _make(user_id: str) -> dict:
        return {"Authorization": f"Bearer {generate_jwt_token(user_id)}"}

    return _make


@pytest.fixture()
def user_id():
    return str(uuid.uuid4())


@pytest.fixture()
def auth_headers(make_headers, user_id):
    """Authentication headers with valid JWT token."""
    return make_headers(user_id)


@pytest.fixture()
def community(client, auth_headers):
    response = client.post(
        "/api/communities",
        headers=auth_headers,
        json={"name": "Python Guild", "description": "A place for Pythonistas"},
    )
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture()
def member(client, auth_headers, community, user_id):
    """Profile of the authenticated user inside `community`."""
    response = client.post(
        "/api/users",
        headers=auth_headers,
        json={
            "email": "owner@example.com",
            "name": "Ada Owner",
            "role": "OWNER",
            "communityId": community["id"],
        },
    )
    assert response.status_code == 201, response.text
    assert response.json()["id"] == user_id
    return response.json()


@pytest.fixture()
def send_webhook(client):
    """POST a Stripe-signed event to the webhook receiver."""

    def _send(event: dict, secret: str = "whsec_test"):
        payload = json.dumps(event).encode()
        timestamp = int(time.time())
        signature = compute_signature(payload, timestamp, secret)
        return client.post(
            "/api/webhooks/stripe",
            content=payload,
            headers={"Stripe-Signature": f"t={timestamp},v1={signature}"},
        )

    return _send


@pytest.fixture()
def send_identity_webhook(client):
    """POST a svix-signed identity provider event to the user sync receiver."""

    def _send(event: dict, secret: str = os.environ["IDENTITY_WEBHOOK_SECRET"]):
        payload = json.dumps(event).encode()
        message_id = f"msg_{uuid.uuid4().hex}"
        timestamp = str(int(time.time()))
        signature = compute_svix_signature(message_id, timestamp, payload, secret)
        return client.post(
            "/api/webhooks/identity",
            content=payload,
            headers={
                "svix-id": message_id,
                "svix-timestamp": timestamp,
                "svix-signature": f"v1,{signature}",
            },
        )

    return _send
