# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""User management API endpoints."""

import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from bizadmin.api.deps import require_permission
from bizadmin.database import get_db
from bizadmin.models import User
from bizadmin.models.enums import UserRoleTier
from bizadmin.schemas.mini_application import (
    ApplicationAssignmentRequest,
    ApplicationAssignmentResponse,
    UserMiniApplicationResponse,
)
from bizadmin.schemas.rbac import UserRoleAssignmentSchema, UserRoleSchema
from bizadmin.schemas.user import UserCreate, UserResponse, UserUpdate
from bizadmin.services import mini_application_service, rbac_service, user_service

router = APIRouter()


def _check_tier_grant(db: Session, current_user: User, tier: UserRoleTier) -> None:
    if not rbac_service.can_grant_tier(db, current_user, tier):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Permission denied: cannot grant the {tier.value} role",
        )


@router.get(
    "/users",
    response_model=list[UserResponse],
    summary="List all users",
)
def list_users(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission("users", "read")),
) -> list[UserResponse]:
    """Retrieve all users, newest first, each with its derived role."""
    return [UserResponse.model_validate(u) for u in user_service.get_users(db)]


@router.get(
    "/users/search",
    response_model=list[UserResponse],
    summary="Search users",
)
def search_users(
    q: str | None = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission("users", "read")),
) -> list[UserResponse]:
    """Case-insensitive substring search over names and email."""
    if not q:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Query parameter required",
        )
    return [UserResponse.model_validate(u) for u in user_service.search_users(db, q)]


@router.post(
    "/users",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new user",
)
def create_user(
    user_in: UserCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission("users", "write")),
) -> UserResponse:
    """Create a new user. Requires users.write permission.

    Any role other than the default user tier also requires roles.write.
    """
    if user_in.role != UserRoleTier.USER:
        _check_tier_grant(db, current_user, user_in.role)
    user = user_service.create_user(db, user_in)
    return UserResponse.model_validate(user)


@router.get(
    "/users/{user_id}",
    response_model=UserResponse,
    summary="Get a user by ID",
)
def get_user(
    user_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission("users", "read")),
) -> UserResponse:
    """Retrieve a specific user by ID."""
    return UserResponse.model_validate(user_service.get_user_or_404(db, user_id))


@router.put(
    "/users/{user_id}",
    response_model=UserResponse,
    summary="Update a user",
)
def update_user(
    user_id: uuid.UUID,
    user_in: UserUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission("users", "write")),
) -> UserResponse:
    """Partially update a user. Only the supplied fields change.

    Changing the role, or the password of another account, requires roles.write.
    """
    if user_id == current_user.id and user_in.is_active is False:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Cannot deactivate your own account",
        )
    target = user_service.get_user_or_404(db, user_id)
    if user_in.role is not None and user_in.role != rbac_service.primary_role(target):
        _check_tier_grant(db, current_user, user_in.role)
        _check_tier_grant(db, current_user, rbac_service.primary_role(target))
    if (
        user_in.password is not None
        and user_id != current_user.id
        and not rbac_service.user_has_permission(db, current_user, "roles", "write")
    ):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Permission denied: roles.write",
        )
    user = user_service.update_user(db, user_id, user_in)
    return UserResponse.model_validate(user)


@router.delete(
    "/users/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a user",
)
def delete_user(
    user_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission("users", "write")),
) -> None:
    """Delete a user and every association row that references it."""
    if user_id == current_user.id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Cannot delete your own account",
        )
    user_service.delete_user(db, user_id)


# Role assignments


@router.get(
    "/users/{user_id}/roles",
    response_model=list[UserRoleSchema],
    summary="Get a user's role assignments",
)
def get_user_role_assignments(
    user_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission("roles", "read")),
):
    """Retrieve all role assignments for a specific user."""
    return rbac_service.get_user_roles(db, user_id)


@router.post(
    "/users/{user_id}/roles",
    response_model=UserRoleSchema,
    status_code=status.HTTP_201_CREATED,
    summary="Assign a role to a user",
)
def assign_role_to_user(
    user_id: uuid.UUID,
    assignment: UserRoleAssignmentSchema,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission("roles", "write")),
):
    """Assign a role to a user."""
    return rbac_service.assign_role_to_user(db, user_id, assignment.role_id)


@router.delete(
    "/users/{user_id}/roles/{role_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove a role from a user",
)
def remove_role_from_user(
    user_id: uuid.UUID,
    role_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission("roles", "write")),
) -> None:
    """Remove a role assignment from a user."""
    rbac_service.remove_role_from_user(db, user_id, role_id)


# Application grants


@router.get(
    "/users/{user_id}/applications",
    response_model=list[UserMiniApplicationResponse],
    summary="List applications granted to a user",
)
def get_user_applications(
    user_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission("applications", "read")),
) -> list[UserMiniApplicationResponse]:
    user_service.get_user_or_404(db, user_id)
    return mini_application_service.get_mini_applications_for_user(db, user_id)


@router.post(
    "/users/{user_id}/applications",
    response_model=ApplicationAssignmentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Grant an application to a user",
)
def assign_application_to_user(
    user_id: uuid.UUID,
    assignment: ApplicationAssignmentRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission("applications", "write")),
):
    return mini_application_service.assign_app_to_user(
        db, user_id, assignment.app_id, assignment.access_level
    )


@router.delete(
    "/users/{user_id}/applications/{app_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Revoke an application from a user",
)
def remove_application_from_user(
    user_id: uuid.UUID,
    app_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission("applications", "write")),
) -> None:
    mini_application_service.remove_app_from_user(db, user_id, app_id)
