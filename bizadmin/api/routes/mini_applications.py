# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Mini application catalog API endpoints."""

import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from bizadmin.api.deps import get_current_user, require_permission
from bizadmin.database import get_db
from bizadmin.models import User
from bizadmin.schemas.mini_application import (
    MiniApplicationCreate,
    MiniApplicationResponse,
    MiniApplicationUpdate,
    UserMiniApplicationResponse,
)
from bizadmin.services import mini_application_service, rbac_service, user_service

router = APIRouter()


@router.get("", response_model=list[MiniApplicationResponse])
def list_mini_applications(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission("applications", "read")),
) -> list[MiniApplicationResponse]:
    """List the whole catalog, newest first."""
    apps = mini_application_service.get_mini_applications(db)
    return [MiniApplicationResponse.model_validate(a) for a in apps]


@router.get("/search", response_model=list[MiniApplicationResponse])
def search_mini_applications(
    q: str | None = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission("applications", "read")),
) -> list[MiniApplicationResponse]:
    """Case-insensitive substring search over name and description."""
    if not q:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Query parameter required",
        )
    apps = mini_application_service.search_mini_applications(db, q)
    return [MiniApplicationResponse.model_validate(a) for a in apps]


@router.get("/user/{user_id}", response_model=list[UserMiniApplicationResponse])
def list_user_mini_applications(
    user_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> list[UserMiniApplicationResponse]:
    """List the applications granted to a user.

    Users may always list their own applications.
    """
    if user_id != current_user.id and not rbac_service.user_has_permission(
        db, current_user, "applications", "read"
    ):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Permission denied: applications.read",
        )
    user_service.get_user_or_404(db, user_id)
    return mini_application_service.get_mini_applications_for_user(db, user_id)


@router.get("/{app_id}", response_model=MiniApplicationResponse)
def get_mini_application(
    app_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission("applications", "read")),
) -> MiniApplicationResponse:
    app = mini_application_service.get_mini_application_or_404(db, app_id)
    return MiniApplicationResponse.model_validate(app)


@router.post(
    "",
    response_model=MiniApplicationResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_mini_application(
    data: MiniApplicationCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission("applications", "write")),
) -> MiniApplicationResponse:
    """Add an entry to the catalog."""
    app = mini_application_service.create_mini_application(db, data)
    return MiniApplicationResponse.model_validate(app)


@router.put("/{app_id}", response_model=MiniApplicationResponse)
def update_mini_application(
    app_id: uuid.UUID,
    data: MiniApplicationUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission("applications", "write")),
) -> MiniApplicationResponse:
    app = mini_application_service.update_mini_application(db, app_id, data)
    return MiniApplicationResponse.model_validate(app)


@router.delete("/{app_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_mini_application(
    app_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission("applications", "write")),
) -> None:
    """Remove an entry and every grant of it."""
    mini_application_service.delete_mini_application(db, app_id)
