# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for the default roles and permissions seed."""

from bizadmin.models import Permission, Role, RolePermission
from bizadmin.rbac.permissions import CORE_PERMISSIONS
from bizadmin.rbac.roles import DEFAULT_ROLES
from bizadmin.schemas.rbac import RoleUpdateSchema
from bizadmin.services import rbac_service
from bizadmin.services.rbac_seed_service import seed_rbac_data


def test_seed_creates_permissions_and_roles(db_session):
    seed_rbac_data(db_session)

    assert db_session.query(Permission).count() == len(CORE_PERMISSIONS)
    roles = {r.name: r for r in db_session.query(Role).all()}
    assert set(roles) == {"admin", "manager", "user"}
    assert all(role.is_system for role in roles.values())

    for role_data in DEFAULT_ROLES:
        granted = {
            p.name for p in rbac_service.get_role_permissions(db_session, roles[role_data["name"]].id)
        }
        assert granted == set(role_data["permissions"])


def test_seed_is_idempotent(db_session):
    seed_rbac_data(db_session)
    grants = db_session.query(RolePermission).count()

    seed_rbac_data(db_session)

    assert db_session.query(Permission).count() == len(CORE_PERMISSIONS)
    assert db_session.query(Role).count() == 3
    assert db_session.query(RolePermission).count() == grants


def test_seed_keeps_edited_roles(db_session):
    seed_rbac_data(db_session)
    role = rbac_service.get_role_by_name(db_session, "manager")
    rbac_service.update_role(db_session, role.id, RoleUpdateSchema(description="Edited"))

    seed_rbac_data(db_session)

    assert rbac_service.get_role_by_name(db_session, "manager").description == "Edited"
