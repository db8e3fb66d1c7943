# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Integration tests for role and permission endpoints."""

import uuid

from bizadmin.schemas.rbac import RoleCreateSchema
from bizadmin.services import rbac_service


class TestRoleEndpoints:
    def test_requires_authentication(self, client):
        assert client.get("/api/roles").status_code == 401

    def test_plain_user_cannot_read_roles(self, authenticated_client):
        response = authenticated_client.get("/api/roles")
        assert response.status_code == 403
        assert response.json()["message"] == "Permission denied: roles.read"

    def test_manager_reads_but_cannot_write(self, manager_client):
        assert manager_client.get("/api/roles").status_code == 200
        response = manager_client.post("/api/roles", json={"name": "Auditor"})
        assert response.status_code == 403

    def test_list_roles(self, admin_client):
        response = admin_client.get("/api/roles")
        assert response.status_code == 200
        assert [r["name"] for r in response.json()] == ["admin", "manager", "user"]

    def test_get_role_with_permissions(self, admin_client, db_session):
        role = rbac_service.get_role_by_name(db_session, "user")
        response = admin_client.get(f"/api/roles/{role.id}")
        assert response.status_code == 200
        data = response.json()
        assert data["is_system"] is True
        assert [p["name"] for p in data["permissions"]] == [
            "applications.read",
            "departments.read",
            "users.read",
        ]

    def test_role_lifecycle(self, admin_client, db_session):
        response = admin_client.post(
            "/api/roles", json={"name": "Auditor", "description": "Reads reports"}
        )
        assert response.status_code == 201
        role_id = response.json()["id"]

        response = admin_client.post("/api/roles", json={"name": "Auditor"})
        assert response.status_code == 400

        response = admin_client.put(f"/api/roles/{role_id}", json={"name": "Reviewer"})
        assert response.status_code == 200
        assert response.json()["name"] == "Reviewer"
        assert response.json()["description"] == "Reads reports"

        permission = rbac_service.get_permission_by_name(db_session, "analytics.read")
        response = admin_client.post(
            f"/api/roles/{role_id}/permissions",
            json={"permission_id": str(permission.id)},
        )
        assert response.status_code == 201

        data = admin_client.get(f"/api/roles/{role_id}").json()
        assert [p["name"] for p in data["permissions"]] == ["analytics.read"]

        response = admin_client.delete(
            f"/api/roles/{role_id}/permissions/{permission.id}"
        )
        assert response.status_code == 204
        assert admin_client.get(f"/api/roles/{role_id}").json()["permissions"] == []

        assert admin_client.delete(f"/api/roles/{role_id}").status_code == 204
        assert admin_client.get(f"/api/roles/{role_id}").status_code == 404

    def test_system_role_is_protected(self, admin_client, db_session):
        role = rbac_service.get_role_by_name(db_session, "admin")
        response = admin_client.put(f"/api/roles/{role.id}", json={"name": "root"})
        assert response.status_code == 400
        response = admin_client.delete(f"/api/roles/{role.id}")
        assert response.status_code == 400

    def test_system_role_cannot_be_deactivated(self, admin_client, db_session):
        role = rbac_service.get_role_by_name(db_session, "admin")
        response = admin_client.put(f"/api/roles/{role.id}", json={"is_active": False})
        assert response.status_code == 400
        assert response.json()["message"] == "System roles cannot be deactivated"
        # Admin still has access
        assert admin_client.get("/api/roles").status_code == 200

    def test_unknown_role(self, admin_client):
        assert admin_client.get(f"/api/roles/{uuid.uuid4()}").status_code == 404

    def test_granting_custom_role_opens_access(self, client, test_user, admin_user, db_session):
        role = rbac_service.create_role(db_session, RoleCreateSchema(name="Analyst"))
        permission = rbac_service.get_permission_by_name(db_session, "analytics.read")
        rbac_service.assign_permission_to_role(db_session, role.id, permission.id)

        client.post(
            "/api/auth/login",
            json={"email": "test@example.com", "password": "testpassword123"},
        )
        assert client.get("/api/analytics/statistics").status_code == 403

        rbac_service.assign_role_to_user(db_session, test_user.id, role.id)
        assert client.get("/api/analytics/statistics").status_code == 200


class TestPermissionEndpoints:
    def test_list_permissions(self, admin_client):
        response = admin_client.get("/api/permissions")
        assert response.status_code == 200
        names = [p["name"] for p in response.json()]
        assert "users.read" in names
        assert names == sorted(names)

    def test_plain_user_cannot_read_permissions(self, authenticated_client):
        assert authenticated_client.get("/api/permissions").status_code == 403

    def test_permission_lifecycle(self, admin_client):
        response = admin_client.post(
            "/api/permissions",
            json={"name": "reports.export", "resource": "reports", "action": "export"},
        )
        assert response.status_code == 201
        permission_id = response.json()["id"]

        response = admin_client.post(
            "/api/permissions",
            json={"name": "reports.export", "resource": "reports", "action": "export"},
        )
        assert response.status_code == 400

        response = admin_client.get(f"/api/permissions/{permission_id}")
        assert response.json()["resource"] == "reports"

        response = admin_client.put(
            f"/api/permissions/{permission_id}",
            json={"description": "Export reports", "is_active": False},
        )
        assert response.status_code == 200
        assert response.json()["is_active"] is False

        assert admin_client.delete(f"/api/permissions/{permission_id}").status_code == 204
        assert admin_client.get(f"/api/permissions/{permission_id}").status_code == 404

    def test_create_permission_invalid(self, admin_client):
        response = admin_client.post("/api/permissions", json={"name": "incomplete"})
        assert response.status_code == 400
