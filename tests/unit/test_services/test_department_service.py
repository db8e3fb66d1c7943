# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for department_service."""

import uuid
from datetime import datetime, timedelta

import pytest

from bizadmin.exceptions import NotFoundError, ValidationError
from bizadmin.schemas.department import DepartmentCreate, DepartmentUpdate
from bizadmin.services import department_service, user_service


def test_create_and_get_department(seeded_db):
    department = department_service.create_department(
        seeded_db, DepartmentCreate(name="Engineering", description="Builds things")
    )

    fetched = department_service.get_department(seeded_db, department.id)
    assert fetched is not None
    assert fetched.name == "Engineering"
    assert fetched.manager_id is None
    assert fetched.is_active is True


def test_get_departments_ordered_by_name(seeded_db):
    department_service.create_department(seeded_db, DepartmentCreate(name="Sales"))
    department_service.create_department(seeded_db, DepartmentCreate(name="Finance"))

    names = [d.name for d in department_service.get_departments(seeded_db)]
    assert names == ["Finance", "Sales"]


def test_create_department_with_unknown_manager(seeded_db):
    with pytest.raises(ValidationError):
        department_service.create_department(
            seeded_db, DepartmentCreate(name="Ghosts", manager_id=uuid.uuid4())
        )


def test_user_counts(seeded_db, user_factory):
    engineering = department_service.create_department(
        seeded_db, DepartmentCreate(name="Engineering")
    )
    empty = department_service.create_department(
        seeded_db, DepartmentCreate(name="Empty")
    )
    user_factory("a@example.com", department_id=engineering.id)
    user_factory("b@example.com", department_id=engineering.id)
    user_factory("c@example.com")

    assert department_service.count_users(seeded_db, engineering.id) == 2
    assert department_service.count_users(seeded_db, empty.id) == 0
    counts = department_service.get_user_counts(seeded_db)
    assert counts == {engineering.id: 2}


def test_update_department(seeded_db, user_factory):
    manager = user_factory("boss@example.com")
    department = department_service.create_department(
        seeded_db, DepartmentCreate(name="Ops")
    )
    department.updated_at = datetime.utcnow() - timedelta(hours=1)
    seeded_db.commit()
    before = department.updated_at

    updated = department_service.update_department(
        seeded_db, department.id, DepartmentUpdate(manager_id=manager.id)
    )
    assert updated.manager_id == manager.id
    assert updated.name == "Ops"
    assert updated.updated_at > before

    cleared = department_service.update_department(
        seeded_db, department.id, DepartmentUpdate(manager_id=None)
    )
    assert cleared.manager_id is None


def test_update_department_not_found(seeded_db):
    with pytest.raises(NotFoundError):
        department_service.update_department(
            seeded_db, uuid.uuid4(), DepartmentUpdate(name="Nope")
        )


def test_delete_department_detaches_members(seeded_db, user_factory):
    department = department_service.create_department(
        seeded_db, DepartmentCreate(name="Closing")
    )
    member = user_factory("member@example.com", department_id=department.id)
    department_id = department.id

    department_service.delete_department(seeded_db, department_id)

    assert department_service.get_department(seeded_db, department_id) is None
    member = user_service.get_user(seeded_db, member.id)
    assert member is not None
    assert member.department_id is None


def test_delete_department_not_found(seeded_db):
    with pytest.raises(NotFoundError):
        department_service.delete_department(seeded_db, uuid.uuid4())
