# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Integration tests for user management endpoints."""

import uuid

from bizadmin.models import UserRole
from bizadmin.models.enums import UserRoleTier
from bizadmin.services import rbac_service


class TestUserAccess:
    def test_requires_authentication(self, client):
        assert client.get("/api/users").status_code == 401

    def test_plain_user_can_read(self, authenticated_client):
        response = authenticated_client.get("/api/users")
        assert response.status_code == 200
        assert len(response.json()) == 1

    def test_plain_user_cannot_write(self, authenticated_client):
        response = authenticated_client.post(
            "/api/users", json={"email": "new@example.com"}
        )
        assert response.status_code == 403
        assert response.json()["message"] == "Permission denied: users.write"


class TestUserRoleChanges:
    def test_manager_cannot_promote_self(self, manager_client, manager_user):
        response = manager_client.put(
            f"/api/users/{manager_user.id}", json={"role": "admin"}
        )
        assert response.status_code == 403
        assert manager_client.get(f"/api/users/{manager_user.id}").json()["role"] == (
            "manager"
        )
        assert manager_client.post("/api/roles", json={"name": "Root"}).status_code == 403

    def test_manager_cannot_create_admin(self, manager_client):
        response = manager_client.post(
            "/api/users", json={"email": "sneaky@example.com", "role": "admin"}
        )
        assert response.status_code == 403
        assert manager_client.get("/api/users/search?q=sneaky").json() == []

    def test_manager_cannot_reset_other_password(
        self, manager_client, user_factory
    ):
        admin = user_factory(
            "boss@example.com", password="bosspassword123", role=UserRoleTier.ADMIN
        )
        response = manager_client.put(
            f"/api/users/{admin.id}", json={"password": "takeover1234"}
        )
        assert response.status_code == 403
        assert response.json()["message"] == "Permission denied: roles.write"

    def test_manager_cannot_demote_admin(self, manager_client, user_factory):
        admin = user_factory("boss@example.com", role=UserRoleTier.ADMIN)
        response = manager_client.put(f"/api/users/{admin.id}", json={"role": "user"})
        assert response.status_code == 403

    def test_manager_creates_plain_user(self, manager_client):
        response = manager_client.post(
            "/api/users", json={"email": "plain@example.com", "first_name": "Pat"}
        )
        assert response.status_code == 201
        assert response.json()["role"] == "user"

    def test_manager_edits_without_role_change(self, manager_client, test_user):
        response = manager_client.put(
            f"/api/users/{test_user.id}", json={"last_name": "Renamed", "role": "user"}
        )
        assert response.status_code == 200
        assert response.json()["last_name"] == "Renamed"

    def test_manager_changes_own_password(self, manager_client, manager_user):
        response = manager_client.put(
            f"/api/users/{manager_user.id}", json={"password": "newmanager1234"}
        )
        assert response.status_code == 200


class TestUserCrud:
    def test_create_and_get_user(self, admin_client):
        response = admin_client.post(
            "/api/users",
            json={
                "email": "jane@example.com",
                "first_name": "Jane",
                "last_name": "Doe",
                "role": "manager",
            },
        )
        assert response.status_code == 201
        created = response.json()
        assert created["role"] == "manager"
        assert created["is_active"] is True

        response = admin_client.get(f"/api/users/{created['id']}")
        assert response.status_code == 200
        assert response.json()["email"] == "jane@example.com"

    def test_create_duplicate_email(self, admin_client):
        response = admin_client.post("/api/users", json={"email": "admin@example.com"})
        assert response.status_code == 400
        assert response.json()["message"] == "Email already in use"

    def test_create_invalid_payload(self, admin_client):
        response = admin_client.post("/api/users", json={"first_name": "NoEmail"})
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid data"

    def test_get_unknown_user(self, admin_client):
        response = admin_client.get(f"/api/users/{uuid.uuid4()}")
        assert response.status_code == 404
        assert response.json() == {"message": "User not found"}

    def test_update_user(self, admin_client, test_user):
        response = admin_client.put(
            f"/api/users/{test_user.id}",
            json={"last_name": "Updated", "role": "manager"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["last_name"] == "Updated"
        assert data["first_name"] == "Test"
        assert data["role"] == "manager"

    def test_update_unknown_user(self, admin_client):
        response = admin_client.put(f"/api/users/{uuid.uuid4()}", json={"first_name": "X"})
        assert response.status_code == 404

    def test_cannot_deactivate_self(self, admin_client, admin_user):
        response = admin_client.put(
            f"/api/users/{admin_user.id}", json={"is_active": False}
        )
        assert response.status_code == 400

    def test_delete_user(self, admin_client, test_user, db_session):
        user_id = test_user.id
        response = admin_client.delete(f"/api/users/{user_id}")
        assert response.status_code == 204
        assert admin_client.get(f"/api/users/{user_id}").status_code == 404
        assert db_session.query(UserRole).filter(UserRole.user_id == user_id).count() == 0

    def test_cannot_delete_self(self, admin_client, admin_user):
        response = admin_client.delete(f"/api/users/{admin_user.id}")
        assert response.status_code == 400


class TestUserSearch:
    def test_search_matches_name_and_email(self, admin_client, user_factory):
        user_factory("jdoe@x.com", first_name="John", last_name="Smith")
        user_factory("jane@example.com", first_name="Jane", last_name="Doe")
        user_factory("other@example.com", first_name="Alice")

        response = admin_client.get("/api/users/search", params={"q": "doe"})
        assert response.status_code == 200
        emails = {u["email"] for u in response.json()}
        assert emails == {"jdoe@x.com", "jane@example.com"}

    def test_search_requires_query(self, admin_client):
        response = admin_client.get("/api/users/search")
        assert response.status_code == 400
        assert response.json()["message"] == "Query parameter required"


class TestUserRoleEdges:
    def test_assign_and_remove_role(self, admin_client, test_user, db_session):
        response = admin_client.post("/api/roles", json={"name": "Auditor"})
        role_id = response.json()["id"]

        response = admin_client.post(
            f"/api/users/{test_user.id}/roles", json={"role_id": role_id}
        )
        assert response.status_code == 201
        assert response.json()["role"]["name"] == "Auditor"

        response = admin_client.get(f"/api/users/{test_user.id}/roles")
        assert {ur["role"]["name"] for ur in response.json()} == {"user", "Auditor"}

        response = admin_client.post(
            f"/api/users/{test_user.id}/roles", json={"role_id": role_id}
        )
        assert response.status_code == 400

        response = admin_client.delete(f"/api/users/{test_user.id}/roles/{role_id}")
        assert response.status_code == 204
        count = (
            db_session.query(UserRole)
            .filter(UserRole.user_id == test_user.id, UserRole.role_id == uuid.UUID(role_id))
            .count()
        )
        assert count == 0

    def test_remove_missing_assignment(self, admin_client, test_user, db_session):
        role = rbac_service.get_role_by_name(db_session, "manager")
        response = admin_client.delete(f"/api/users/{test_user.id}/roles/{role.id}")
        assert response.status_code == 404


class TestUserApplicationEdges:
    def test_grant_and_revoke_application(self, admin_client, test_user):
        app = admin_client.post(
            "/api/mini-applications",
            json={"name": "Wiki", "category": "Docs", "icon": "book"},
        ).json()

        response = admin_client.post(
            f"/api/users/{test_user.id}/applications",
            json={"app_id": app["id"], "access_level": "write"},
        )
        assert response.status_code == 201
        assert response.json()["access_level"] == "write"

        response = admin_client.get(f"/api/users/{test_user.id}/applications")
        assert response.status_code == 200
        assert [a["name"] for a in response.json()] == ["Wiki"]

        response = admin_client.delete(
            f"/api/users/{test_user.id}/applications/{app['id']}"
        )
        assert response.status_code == 204
        assert admin_client.get(f"/api/users/{test_user.id}/applications").json() == []
