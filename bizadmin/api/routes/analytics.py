# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Analytics API endpoints."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from bizadmin.api.deps import require_permission
from bizadmin.config import settings
from bizadmin.database import get_db
from bizadmin.models import User
from bizadmin.schemas.analytics import ActivityItem, Statistics
from bizadmin.services import analytics_service

router = APIRouter()


@router.get("/statistics", response_model=Statistics)
def get_statistics(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission("analytics", "read")),
) -> Statistics:
    """Get total apps, active users, departments and role count."""
    return analytics_service.get_statistics(db)


@router.get("/activity", response_model=list[ActivityItem])
def get_recent_activity(
    limit: int | None = Query(default=None, ge=1, le=100),
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission("analytics", "read")),
) -> list[ActivityItem]:
    """Get the most recent user-creation events as a feed."""
    return analytics_service.get_recent_activity(
        db, limit or settings.recent_activity_limit
    )
