def test_checkout_rate_limit(client, auth_headers, community):
    tier = client.post(
        "/api/payment-tiers",
        headers=auth_headers,
        json={
            "communityId": community["id"],
            "name": "Pro Members",
            "description": "Every course and the private channels",
            "priceMonthly": 1999,
            "priceAnnual": 19900,
        },
    ).json()
    payload = {"tierId": tier["id"], "communityId": community["id"], "interval": "MONTHLY"}

    status_codes = []
    for _ in range(8):
        res = client.post("/api/checkout/calculate", headers=auth_headers, json=payload)
        status_codes.append(res.status_code)

    # CHECKOUT_RATE_LIMIT is 5/minute under test
    assert status_codes[:5] == [200] * 5
    assert all(code == 429 for code in status_codes[5:]), "Expected 429 Too Many Requests responses"


def test_rate_limit_error_shape(client, auth_headers, community):
    payload = {"tierId": "missing", "communityId": community["id"], "interval": "MONTHLY"}
    for _ in range(5):
        client.post("/api/checkout/calculate", headers=auth_headers, json=payload)

    res = client.post("/api/checkout/calculate", headers=auth_headers, json=payload)
    assert res.status_code == 429
    assert res.json()["error"].startswith("Rate limit exceeded")
