# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Department service."""

import logging
import uuid
from datetime import datetime

from sqlalchemy import func
from sqlalchemy.orm import Session

from bizadmin.exceptions import NotFoundError, ValidationError
from bizadmin.models import Department, User
from bizadmin.schemas.department import DepartmentCreate, DepartmentUpdate

logger = logging.getLogger(__name__)


def get_departments(db: Session) -> list[Department]:
    """Get all departments ordered by name."""
    return db.query(Department).order_by(Department.name).all()


def get_department(db: Session, department_id: uuid.UUID) -> Department | None:
    """Get a single department by ID."""
    return db.query(Department).filter(Department.id == department_id).first()


def get_department_or_404(db: Session, department_id: uuid.UUID) -> Department:
    department = get_department(db, department_id)
    if not department:
        raise NotFoundError("Department", department_id)
    return department


def count_users(db: Session, department_id: uuid.UUID) -> int:
    """Count the members of a department."""
    return db.query(User).filter(User.department_id == department_id).count()


def get_user_counts(db: Session) -> dict[uuid.UUID, int]:
    """Member count per department, for departments with at least one member."""
    rows = (
        db.query(User.department_id, func.count(User.id))
        .filter(User.department_id.isnot(None))
        .group_by(User.department_id)
        .all()
    )
    return {department_id: count for department_id, count in rows}


def _check_manager_exists(db: Session, manager_id: uuid.UUID | None) -> None:
    if manager_id is None:
        return
    if not db.query(User).filter(User.id == manager_id).first():
        raise ValidationError(
            "Invalid data",
            [
                {
                    "loc": ["body", "manager_id"],
                    "msg": "User does not exist",
                    "type": "value_error",
                }
            ],
        )


def create_department(db: Session, data: DepartmentCreate) -> Department:
    """Create a new department."""
    _check_manager_exists(db, data.manager_id)

    department = Department(
        name=data.name,
        description=data.description,
        manager_id=data.manager_id,
        is_active=data.is_active,
    )
    db.add(department)
    db.commit()
    db.refresh(department)
    logger.info(f"Created department {department.id} ({department.name})")
    return department


def update_department(
    db: Session, department_id: uuid.UUID, data: DepartmentUpdate
) -> Department:
    """Partially update a department."""
    department = get_department_or_404(db, department_id)
    update_data = data.model_dump(exclude_unset=True)

    if "manager_id" in update_data:
        _check_manager_exists(db, update_data["manager_id"])

    for key, value in update_data.items():
        if value is None and key in ("name", "is_active"):
            continue
        setattr(department, key, value)
    department.updated_at = datetime.utcnow()

    db.commit()
    db.refresh(department)
    logger.info(f"Updated department {department.id}")
    return department


def delete_department(db: Session, department_id: uuid.UUID) -> None:
    """Delete a department and detach its members in the same transaction."""
    department = get_department_or_404(db, department_id)

    detached = (
        db.query(User)
        .filter(User.department_id == department_id)
        .update({User.department_id: None}, synchronize_session=False)
    )
    db.delete(department)
    db.commit()
    logger.info(f"Deleted department {department_id}, detached {detached} users")
