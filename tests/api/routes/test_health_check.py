from fastapi.testclient import TestClient


class TestHealthCheckAPI:
    """Test cases for the health check endpoint."""

    def test_health_check_returns_ok(self, client: TestClient):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_health_check_only_accepts_get(self, client: TestClient):
        """Other methods are rejected with the standard error body."""
        response = client.post("/health")
        assert response.status_code == 405
        assert "error" in response.json()

    def test_unknown_route_uses_error_body(self, client: TestClient):
        response = client.get("/api/nothing-here")
        assert response.status_code == 404
        assert "error" in response.json()
