def test_healthz(logs_client):
    assert logs_client.get("/healthz").json() == {"status": "healthy"}


def test_create_access_log(logs_client):
    response = logs_client.post("/logs", json={"ip": "10.0.0.1", "userAgent": "curl/8.0"})

    assert response.status_code == 201
    body = response.json()
    assert body["ip"] == "10.0.0.1"
    assert body["userAgent"] == "curl/8.0"
    assert isinstance(body["id"], int)
    assert body["timestamp"].endswith("Z")


def test_create_access_log_requires_fields(logs_client):
    assert logs_client.post("/logs", json={"ip": "10.0.0.1"}).status_code == 422
    assert logs_client.post("/logs", json={"ip": 1, "userAgent": "curl"}).status_code == 422


def test_stats_counts_per_user_agent(logs_client):
    for user_agent in ("curl/8.0", "Mozilla/5.0", "curl/8.0", "httpie", "curl/8.0", "Mozilla/5.0"):
        logs_client.post("/logs", json={"ip": "127.0.0.1", "userAgent": user_agent})

    response = logs_client.get("/stats")

    assert response.status_code == 200
    assert response.json() == [
        {"userAgent": "curl/8.0", "count": 3},
        {"userAgent": "Mozilla/5.0", "count": 2},
        {"userAgent": "httpie", "count": 1},
    ]


def test_stats_empty(logs_client):
    assert logs_client.get("/stats").json() == []
