# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Integration tests for authentication endpoints."""

from bizadmin.config import settings


class TestRegisterEndpoint:
    """Tests for POST /api/auth/register."""

    def test_first_user_becomes_admin(self, client):
        response = client.post(
            "/api/auth/register",
            json={
                "email": "founder@example.com",
                "password": "founderpass123",
                "first_name": "Fiona",
            },
        )
        assert response.status_code == 201
        data = response.json()
        assert data["role"] == "admin"
        assert "hashed_password" not in data
        assert "session" in response.cookies

        me = client.get("/api/auth/user")
        assert me.status_code == 200
        assert me.json()["email"] == "founder@example.com"

    def test_registration_closed_after_first_user(self, client, test_user):
        response = client.post(
            "/api/auth/register",
            json={"email": "late@example.com", "password": "latecomer123"},
        )
        assert response.status_code == 403
        assert response.json()["message"] == "Registration is disabled"

    def test_registration_open_when_enabled(self, client, test_user, monkeypatch):
        monkeypatch.setattr(settings, "registration_enabled", True)
        response = client.post(
            "/api/auth/register",
            json={"email": "late@example.com", "password": "latecomer123"},
        )
        assert response.status_code == 201
        assert response.json()["role"] == "user"

    def test_registration_rejects_email_in_other_case(
        self, client, test_user, monkeypatch
    ):
        monkeypatch.setattr(settings, "registration_enabled", True)
        response = client.post(
            "/api/auth/register",
            json={"email": "TEST@example.com", "password": "latecomer123"},
        )
        assert response.status_code == 400
        assert response.json()["message"] == "Email already in use"

    def test_invalid_payload(self, client):
        response = client.post(
            "/api/auth/register",
            json={"email": "not-an-email", "password": "short"},
        )
        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Invalid data"
        assert len(body["errors"]) == 2


class TestLoginEndpoint:
    """Tests for POST /api/auth/login and /api/auth/logout."""

    def test_login_success(self, client, test_user):
        response = client.post(
            "/api/auth/login",
            json={"email": "test@example.com", "password": "testpassword123"},
        )
        assert response.status_code == 200
        assert response.json()["id"] == str(test_user.id)
        assert "session" in response.cookies

    def test_login_ignores_email_case(self, client, test_user):
        response = client.post(
            "/api/auth/login",
            json={"email": "Test@Example.COM", "password": "testpassword123"},
        )
        assert response.status_code == 200
        assert response.json()["email"] == "test@example.com"

    def test_login_bad_password(self, client, test_user):
        response = client.post(
            "/api/auth/login",
            json={"email": "test@example.com", "password": "wrong-password"},
        )
        assert response.status_code == 401
        assert response.json() == {"message": "Invalid credentials"}

    def test_logout_ends_session(self, authenticated_client):
        response = authenticated_client.post("/api/auth/logout")
        assert response.status_code == 204

        response = authenticated_client.get("/api/auth/user")
        assert response.status_code == 401


class TestCurrentUserEndpoint:
    """Tests for GET/PUT /api/auth/user."""

    def test_requires_authentication(self, client):
        response = client.get("/api/auth/user")
        assert response.status_code == 401
        assert response.json()["message"] == "Not authenticated"

    def test_get_current_user(self, authenticated_client, test_user):
        response = authenticated_client.get("/api/auth/user")
        assert response.status_code == 200
        data = response.json()
        assert data["email"] == "test@example.com"
        assert data["role"] == "user"

    def test_update_own_profile(self, authenticated_client):
        response = authenticated_client.put(
            "/api/auth/user", json={"first_name": "Renamed"}
        )
        assert response.status_code == 200
        assert response.json()["first_name"] == "Renamed"
        assert response.json()["last_name"] == "User"

    def test_change_password_requires_current(self, authenticated_client):
        response = authenticated_client.put(
            "/api/auth/user", json={"new_password": "brandnewpass1"}
        )
        assert response.status_code == 400

        response = authenticated_client.put(
            "/api/auth/user",
            json={"current_password": "testpassword123", "new_password": "brandnewpass1"},
        )
        assert response.status_code == 200

        authenticated_client.post("/api/auth/logout")
        response = authenticated_client.post(
            "/api/auth/login",
            json={"email": "test@example.com", "password": "brandnewpass1"},
        )
        assert response.status_code == 200
