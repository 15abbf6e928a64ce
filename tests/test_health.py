def test_health_ok(client):
    """Test health check endpoint"""
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok", "database": "ok"}


def test_root_endpoint(client):
    """Test root endpoint"""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Employee Management API"
    assert data["status"] == "ok"
    assert data["employees"] == "/api/employees"


def test_unknown_route_uses_message_body(client):
    r = client.get("/api/nope")
    assert r.status_code == 404
    assert "message" in r.json()
