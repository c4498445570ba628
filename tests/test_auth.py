"""Bearer-token gate in front of every non-public route."""

from datetime import timedelta

import pytest

from jwt_generation import generate_jwt_token


@pytest.mark.parametrize("path", ["/", "/health", "/metrics"])
def test_public_paths_do_not_need_a_token(client, path):
    response = client.get(path)
    assert response.status_code == 200


def test_missing_token_is_rejected(client):
    response = client.get("/api/communities")
    assert response.status_code == 401
    assert response.json() == {"error": "Missing bearer token"}


def test_expired_token_is_rejected(client, user_id):
    token = generate_jwt_token(user_id, expires_in=timedelta(hours=-1))
    response = client.get("/api/communities", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401
    assert response.json() == {"error": "Token has expired"}


def test_token_for_another_audience_is_rejected(client, user_id):
    token = generate_jwt_token(user_id, aud="someone-else")
    response = client.get("/api/communities", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401
    assert response.json()["error"].startswith("Invalid token")


def test_valid_token_passes(client, auth_headers):
    response = client.get("/api/communities", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == []


def test_correlation_id_is_echoed(client, auth_headers):
    response = client.get(
        "/api/communities", headers={**auth_headers, "X-Correlation-ID": "abc-123"}
    )
    assert response.headers["X-Correlation-ID"] == "abc-123"


def test_correlation_id_is_generated_when_missing(client):
    response = client.get("/health")
    correlation_id = response.headers["X-Correlation-ID"]
    assert len(correlation_id) == 32
    assert client.get("/health").headers["X-Correlation-ID"] != correlation_id
