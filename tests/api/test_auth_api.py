"""
API tests for auth endpoints.

Tests cover:
- Register (201 + cookie, duplicates, shape validation)
- Login (200 + cookie, 401)
- Current user and logout
"""

from fastapi.testclient import TestClient

from tradesim.config.settings import get_settings


class TestRegisterAPI:
    """Tests for POST /api/register."""

    def test_register_success_sets_cookie(self, client: TestClient):
        """
        GIVEN no users
        WHEN I POST /api/register
        THEN response is 201 with camelCase user JSON and a session cookie
        """
        response = client.post("/api/register", json={"username": "alice", "password": "secret123"})

        assert response.status_code == 201
        data = response.json()
        assert data["username"] == "alice"
        assert data["walletBalance"] == 100000.0
        assert "createdAt" in data
        assert "passwordHash" not in data
        assert "password_hash" not in data
        assert get_settings().session_cookie_name in response.cookies

    def test_duplicate_username_returns_400(self, client: TestClient):
        client.post("/api/register", json={"username": "alice", "password": "secret123"})

        response = client.post("/api/register", json={"username": "alice", "password": "other123"})

        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"
        assert response.json()["message"] == "Username already exists"

    def test_short_password_returns_400(self, client: TestClient):
        response = client.post("/api/register", json={"username": "alice", "password": "x"})

        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"
        assert response.json()["errors"]

    def test_password_over_72_bytes_returns_400(self, client: TestClient):
        """
        GIVEN a 100-character password (within the length limit)
        WHEN I POST /api/register
        THEN response is 400 because bcrypt cannot hash more than 72 bytes
        """
        response = client.post("/api/register", json={"username": "alice", "password": "a" * 100})

        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"

    def test_multibyte_password_over_72_bytes_returns_400(self, client: TestClient):
        # 30 characters, 90 bytes in UTF-8
        response = client.post("/api/register", json={"username": "alice", "password": "é" * 30})

        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"

    def test_password_of_exactly_72_bytes_is_accepted(self, client: TestClient):
        response = client.post("/api/register", json={"username": "alice", "password": "a" * 72})

        assert response.status_code == 201


class TestLoginAPI:
    """Tests for POST /api/login."""

    def test_login_success(self, client: TestClient):
        client.post("/api/register", json={"username": "alice", "password": "secret123"})
        client.cookies.clear()

        response = client.post("/api/login", json={"username": "alice", "password": "secret123"})

        assert response.status_code == 200
        assert response.json()["username"] == "alice"
        assert client.get("/api/user").status_code == 200

    def test_login_password_over_72_bytes_returns_400(self, client: TestClient):
        response = client.post("/api/login", json={"username": "alice", "password": "a" * 100})

        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"

    def test_wrong_password_returns_401(self, client: TestClient):
        client.post("/api/register", json={"username": "alice", "password": "secret123"})
        client.cookies.clear()

        response = client.post("/api/login", json={"username": "alice", "password": "wrong-pass"})

        assert response.status_code == 401
        assert response.json()["error"] == "AUTHENTICATION_ERROR"


class TestSessionAPI:
    """Tests for GET /api/user and POST /api/logout."""

    def test_current_user_requires_session(self, client: TestClient):
        response = client.get("/api/user")

        assert response.status_code == 401

    def test_current_user_with_session(self, logged_in_client: TestClient):
        response = logged_in_client.get("/api/user")

        assert response.status_code == 200
        assert response.json()["username"] == "alice"

    def test_logout_ends_session(self, logged_in_client: TestClient):
        """
        GIVEN a logged-in client
        WHEN I POST /api/logout
        THEN the session no longer authenticates
        """
        token = logged_in_client.cookies.get(get_settings().session_cookie_name)

        response = logged_in_client.post("/api/logout")

        assert response.status_code == 200
        assert response.json() == {"message": "Logged out"}

        logged_in_client.cookies.set(get_settings().session_cookie_name, token)
        assert logged_in_client.get("/api/user").status_code == 401

    def test_logout_without_session_is_ok(self, client: TestClient):
        response = client.post("/api/logout")

        assert response.status_code == 200
