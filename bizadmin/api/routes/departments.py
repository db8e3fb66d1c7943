# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Department API endpoints."""

import uuid

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from bizadmin.api.deps import require_permission
from bizadmin.database import get_db
from bizadmin.models import Department, User
from bizadmin.schemas.department import (
    DepartmentCreate,
    DepartmentResponse,
    DepartmentUpdate,
)
from bizadmin.schemas.user import UserResponse
from bizadmin.services import department_service, user_service

router = APIRouter()


def _to_response(department: Department, user_count: int) -> DepartmentResponse:
    response = DepartmentResponse.model_validate(department)
    response.user_count = user_count
    return response


@router.get("", response_model=list[DepartmentResponse])
def list_departments(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission("departments", "read")),
) -> list[DepartmentResponse]:
    """List all departments with their member counts."""
    counts = department_service.get_user_counts(db)
    return [
        _to_response(d, counts.get(d.id, 0))
        for d in department_service.get_departments(db)
    ]


@router.get("/{department_id}", response_model=DepartmentResponse)
def get_department(
    department_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission("departments", "read")),
) -> DepartmentResponse:
    """Get a specific department."""
    department = department_service.get_department_or_404(db, department_id)
    return _to_response(department, department_service.count_users(db, department_id))


@router.get("/{department_id}/users", response_model=list[UserResponse])
def list_department_users(
    department_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission("users", "read")),
) -> list[UserResponse]:
    """List the members of a department."""
    department_service.get_department_or_404(db, department_id)
    return [
        UserResponse.model_validate(u)
        for u in user_service.get_users_by_department(db, department_id)
    ]


@router.post(
    "",
    response_model=DepartmentResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_department(
    data: DepartmentCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission("departments", "write")),
) -> DepartmentResponse:
    """Create a new department."""
    department = department_service.create_department(db, data)
    return _to_response(department, 0)


@router.put("/{department_id}", response_model=DepartmentResponse)
def update_department(
    department_id: uuid.UUID,
    data: DepartmentUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission("departments", "write")),
) -> DepartmentResponse:
    """Partially update a department."""
    department = department_service.update_department(db, department_id, data)
    return _to_response(department, department_service.count_users(db, department_id))


@router.delete("/{department_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_department(
    department_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission("departments", "write")),
) -> None:
    """Delete a department. Its members are left without a department."""
    department_service.delete_department(db, department_id)
