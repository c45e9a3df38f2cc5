def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json["status"] == "ok"


def test_api_index(client):
    r = client.get("/api")
    assert r.status_code == 200
    assert "endpoints" in r.json
    assert "/tiles" in r.json["endpoints"]["catalog"]


def test_request_id_is_echoed(client):
    r = client.get("/health", headers={"X-Request-ID": "abc-123"})
    assert r.headers["X-Request-ID"] == "abc-123"


def test_request_id_is_generated(client):
    r = client.get("/health")
    assert r.headers.get("X-Request-ID")


def test_unknown_api_route_uses_json_error(client):
    r = client.get("/api/nope", headers={"X-Request-ID": "rid-1"})
    assert r.status_code == 404
    assert r.json["error"]["code"] == "http_error"
    assert r.json["error"]["request_id"] == "rid-1"
