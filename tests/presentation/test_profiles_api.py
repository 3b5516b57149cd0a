"""API tests for the profile snapshot and health endpoints."""

import json

from conftest import read_json


class TestSaveProfile:
    """POST /api/save-profile"""

    def test_snapshot_is_appended(self, client, settings):
        """Test that a profile snapshot is appended with the parsed cart."""
        cart = {"items": [{"title": "Ring", "qty": 1}]}
        response = client.post(
            "/api/save-profile",
            json={"email": " Ama@Example.com ", "name": "Ama", "cart": json.dumps(cart)},
            headers={"User-Agent": "pytest-browser"},
        )

        assert response.status_code == 200
        assert response.json() == {"success": True}
        stored = read_json(settings.data_dir / "profiles.json")[0]
        assert stored["email"] == "ama@example.com"
        assert stored["cartSnapshot"] == cart
        assert stored["loginAt"]
        assert stored["meta"]["userAgent"] == "pytest-browser"

    def test_unusable_cart_becomes_empty(self, client, settings):
        """Test that a list or unparseable cart is stored as an empty object."""
        client.post("/api/save-profile", json={"email": "a@b.c", "cart": [1, 2]})
        client.post("/api/save-profile", json={"email": "a@b.c", "cart": "{oops"})
        stored = read_json(settings.data_dir / "profiles.json")
        assert [p["cartSnapshot"] for p in stored] == [{}, {}]

    def test_missing_email(self, client):
        """Test that a profile without an email returns 400."""
        response = client.post("/api/save-profile", json={"name": "Ama"})
        assert response.status_code == 400
        assert response.json() == {"error": "Email is required"}

    def test_storage_failure(self, client, settings):
        """Test that an unwritable data directory returns 500."""
        settings.data_dir.parent.mkdir(parents=True, exist_ok=True)
        settings.data_dir.write_text("", encoding="utf-8")
        response = client.post("/api/save-profile", json={"email": "a@b.c"})
        assert response.status_code == 500
        assert response.json() == {"error": "Unable to save profile"}


class TestHealth:
    """GET /api/health and GET /"""

    def test_health(self, client):
        """Test the health endpoint."""
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "version": "1.0.0"}

    def test_root(self, client):
        """Test that the root endpoint reports the service running."""
        body = client.get("/").json()
        assert body["status"] == "running"

    def test_unknown_route(self, client):
        """Test that an unknown route returns 404 with an error body."""
        response = client.get("/api/nope")
        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}
