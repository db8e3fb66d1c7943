# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Analytics service for the dashboard counters and activity feed."""

from sqlalchemy.orm import Session

from bizadmin.models import Department, MiniApplication, Role, User
from bizadmin.schemas.analytics import ActivityItem, Statistics


def get_statistics(db: Session) -> Statistics:
    """Get aggregate counts, consistent with the tables at call time."""
    return Statistics(
        total_apps=db.query(MiniApplication).count(),
        active_users=db.query(User).filter(User.is_active == True).count(),  # noqa: E712
        departments=db.query(Department).count(),
        permission_groups=db.query(Role).count(),
    )


def get_recent_activity(db: Session, limit: int = 5) -> list[ActivityItem]:
    """Synthesize an activity feed from the most recent user creations."""
    users = db.query(User).order_by(User.created_at.desc()).limit(limit).all()

    return [
        ActivityItem(
            type="user_created",
            user=user.full_name or user.email,
            action="was added to the system",
            timestamp=user.created_at,
        )
        for user in users
    ]
