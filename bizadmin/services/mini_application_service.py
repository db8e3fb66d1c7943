# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Mini application catalog service."""

import logging
import uuid
from datetime import datetime

from sqlalchemy import or_
from sqlalchemy.orm import Session

from bizadmin.database import like_pattern
from bizadmin.exceptions import DuplicateError, NotFoundError
from bizadmin.models import MiniApplication, User, UserMiniApplication
from bizadmin.models.enums import AccessLevel
from bizadmin.schemas.mini_application import (
    MiniApplicationCreate,
    MiniApplicationUpdate,
    UserMiniApplicationResponse,
)

logger = logging.getLogger(__name__)


def get_mini_applications(db: Session) -> list[MiniApplication]:
    """Get the whole catalog, newest first."""
    return db.query(MiniApplication).order_by(MiniApplication.created_at.desc()).all()


def get_mini_application(db: Session, app_id: uuid.UUID) -> MiniApplication | None:
    """Get a catalog entry by ID."""
    return db.query(MiniApplication).filter(MiniApplication.id == app_id).first()


def get_mini_application_or_404(db: Session, app_id: uuid.UUID) -> MiniApplication:
    app = get_mini_application(db, app_id)
    if not app:
        raise NotFoundError("Mini application", app_id)
    return app


def search_mini_applications(db: Session, query: str) -> list[MiniApplication]:
    """Case-insensitive substring search over name and description."""
    pattern = like_pattern(query)
    return (
        db.query(MiniApplication)
        .filter(
            or_(
                MiniApplication.name.ilike(pattern, escape="\\"),
                MiniApplication.description.ilike(pattern, escape="\\"),
            )
        )
        .order_by(MiniApplication.name)
        .all()
    )


def create_mini_application(db: Session, data: MiniApplicationCreate) -> MiniApplication:
    """Add an entry to the catalog."""
    app = MiniApplication(**data.model_dump())
    db.add(app)
    db.commit()
    db.refresh(app)
    logger.info(f"Created mini application {app.id} ({app.name})")
    return app


def update_mini_application(
    db: Session, app_id: uuid.UUID, data: MiniApplicationUpdate
) -> MiniApplication:
    """Partially update a catalog entry."""
    app = get_mini_application_or_404(db, app_id)

    for key, value in data.model_dump(exclude_unset=True).items():
        # description and url are the only nullable columns
        if value is None and key not in ("description", "url"):
            continue
        setattr(app, key, value)
    app.updated_at = datetime.utcnow()

    db.commit()
    db.refresh(app)
    logger.info(f"Updated mini application {app.id}")
    return app


def delete_mini_application(db: Session, app_id: uuid.UUID) -> None:
    """Remove a catalog entry together with its user grants."""
    app = get_mini_application_or_404(db, app_id)
    db.delete(app)
    db.commit()
    logger.info(f"Deleted mini application {app_id}")


def get_mini_applications_for_user(
    db: Session, user_id: uuid.UUID
) -> list[UserMiniApplicationResponse]:
    """Catalog entries granted to a user, with the granted access level."""
    rows = (
        db.query(MiniApplication, UserMiniApplication.access_level)
        .join(
            UserMiniApplication,
            UserMiniApplication.mini_application_id == MiniApplication.id,
        )
        .filter(UserMiniApplication.user_id == user_id)
        .order_by(MiniApplication.name)
        .all()
    )
    return [
        UserMiniApplicationResponse(
            id=app.id,
            name=app.name,
            description=app.description,
            category=app.category,
            icon=app.icon,
            url=app.url,
            status=app.status,
            access_level=access_level,
        )
        for app, access_level in rows
    ]


def assign_app_to_user(
    db: Session,
    user_id: uuid.UUID,
    app_id: uuid.UUID,
    access_level: AccessLevel = AccessLevel.READ,
) -> UserMiniApplication:
    """Grant a mini application to a user."""
    if not db.query(User).filter(User.id == user_id).first():
        raise NotFoundError("User", user_id)
    get_mini_application_or_404(db, app_id)

    existing = (
        db.query(UserMiniApplication)
        .filter(
            UserMiniApplication.user_id == user_id,
            UserMiniApplication.mini_application_id == app_id,
        )
        .first()
    )
    if existing:
        raise DuplicateError("User already has access to this application")

    assignment = UserMiniApplication(
        user_id=user_id,
        mini_application_id=app_id,
        access_level=AccessLevel(access_level).value,
    )
    db.add(assignment)
    db.commit()
    db.refresh(assignment)
    logger.info(f"Granted application {app_id} to user {user_id}")
    return assignment


def remove_app_from_user(db: Session, user_id: uuid.UUID, app_id: uuid.UUID) -> None:
    """Revoke a user's access to a mini application."""
    assignment = (
        db.query(UserMiniApplication)
        .filter(
            UserMiniApplication.user_id == user_id,
            UserMiniApplication.mini_application_id == app_id,
        )
        .first()
    )
    if not assignment:
        raise NotFoundError("Application assignment", (user_id, app_id))

    db.delete(assignment)
    db.commit()
    logger.info(f"Revoked application {app_id} from user {user_id}")
