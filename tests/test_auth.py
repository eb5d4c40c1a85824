"""Tests for login and token authentication"""

import time

import jwt
from fastapi.testclient import TestClient

from conftest import ADMIN_PASSWORD, ADMIN_USERNAME
from ffportal.config import Config


class TestLogin:
    """Test exchange of credentials for a token"""

    def test_login(self, anonymous_client: TestClient, test_config: Config):
        response = anonymous_client.post(
            "/login", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD}
        )
        assert response.status_code == 200
        data = response.json()
        assert data["user"]["username"] == ADMIN_USERNAME
        assert "password_hash" not in data["user"]

        payload = jwt.decode(
            data["token"], test_config.secret_key, algorithms=["HS256"]
        )
        assert payload["sub"] == str(data["user"]["id"])
        assert payload["username"] == ADMIN_USERNAME
        # token lives for seven days
        assert payload["exp"] - payload["iat"] == 7 * 24 * 60 * 60

    def test_login_username_is_case_insensitive(self, anonymous_client: TestClient):
        response = anonymous_client.post(
            "/login",
            json={"username": ADMIN_USERNAME.upper(), "password": ADMIN_PASSWORD},
        )
        assert response.status_code == 200

    def test_login_wrong_password(self, anonymous_client: TestClient):
        response = anonymous_client.post(
            "/login", json={"username": ADMIN_USERNAME, "password": "wrong"}
        )
        assert response.status_code == 401
        assert response.json()["message"] == "Invalid credentials"

    def test_login_unknown_user(self, anonymous_client: TestClient):
        # same answer as for a wrong password
        response = anonymous_client.post(
            "/login", json={"username": "nobody", "password": ADMIN_PASSWORD}
        )
        assert response.status_code == 401
        assert response.json()["message"] == "Invalid credentials"

    def test_login_missing_field(self, anonymous_client: TestClient):
        response = anonymous_client.post("/login", json={"username": ADMIN_USERNAME})
        assert response.status_code == 400
        assert "password" in response.json()["message"]


class TestTokenAuth:
    """Test security of protected API endpoints"""

    def test_verify(self, test_app: TestClient):
        response = test_app.get("/verify")
        assert response.status_code == 200
        assert response.json()["user"]["username"] == ADMIN_USERNAME

    def test_access_protected_route_with_valid_token(self, test_app: TestClient):
        response = test_app.get("/programs")
        assert response.status_code == 200

    def test_access_protected_route_without_token(self, anonymous_client: TestClient):
        response = anonymous_client.get("/programs")
        assert response.status_code == 401
        assert response.json()["error_code"] == 3003

    def test_access_protected_route_with_wrong_scheme(
        self, anonymous_client: TestClient
    ):
        response = anonymous_client.get(
            "/programs", headers={"Authorization": "Token abc"}
        )
        assert response.status_code == 401
        assert response.json()["error_code"] == 3002

    def test_access_protected_route_with_garbage_token(
        self, anonymous_client: TestClient
    ):
        response = anonymous_client.get(
            "/verify", headers={"Authorization": "Bearer not-a-jwt"}
        )
        assert response.status_code == 401
        assert response.json()["message"] == "Token is invalid"

    def test_access_with_foreign_signature(self, anonymous_client: TestClient):
        now = int(time.time())
        token = jwt.encode(
            {"sub": "1", "iat": now, "exp": now + 60}, "other-secret", algorithm="HS256"
        )
        response = anonymous_client.get(
            "/verify", headers={"Authorization": f"Bearer {token}"}
        )
        assert response.status_code == 401

    def test_access_with_expired_token(
        self, anonymous_client: TestClient, test_config: Config
    ):
        now = int(time.time())
        token = jwt.encode(
            {"sub": "1", "iat": now - 120, "exp": now - 60},
            test_config.secret_key,
            algorithm="HS256",
        )
        response = anonymous_client.get(
            "/verify", headers={"Authorization": f"Bearer {token}"}
        )
        assert response.status_code == 401
        assert response.json()["error_code"] == 3002

    def test_access_with_token_of_removed_user(
        self, anonymous_client: TestClient, test_config: Config
    ):
        now = int(time.time())
        token = jwt.encode(
            {"sub": "999", "iat": now, "exp": now + 60},
            test_config.secret_key,
            algorithm="HS256",
        )
        response = anonymous_client.get(
            "/verify", headers={"Authorization": f"Bearer {token}"}
        )
        assert response.status_code == 401


class TestHealth:
    """Test public endpoints"""

    def test_welcome(self, anonymous_client: TestClient):
        response = anonymous_client.get("/")
        assert response.status_code == 200

    def test_health(self, anonymous_client: TestClient):
        response = anonymous_client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "OK"
