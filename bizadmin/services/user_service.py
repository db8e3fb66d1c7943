# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""User management service."""

import logging
import uuid
from datetime import datetime

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from bizadmin.database import like_pattern
from bizadmin.exceptions import DuplicateError, NotFoundError, ValidationError
from bizadmin.models import Department, User
from bizadmin.schemas.user import UserCreate, UserProfileUpdate, UserUpdate
from bizadmin.security import get_password_hash, verify_password
from bizadmin.services import rbac_service

logger = logging.getLogger(__name__)


def get_users(db: Session) -> list[User]:
    """Get all users, newest first."""
    return db.query(User).order_by(User.created_at.desc()).all()


def get_user(db: Session, user_id: uuid.UUID) -> User | None:
    """Get a user by ID."""
    return db.query(User).filter(User.id == user_id).first()


def get_user_or_404(db: Session, user_id: uuid.UUID) -> User:
    """Get a user by ID or raise NotFoundError."""
    user = get_user(db, user_id)
    if not user:
        raise NotFoundError("User", user_id)
    return user


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email, ignoring case."""
    return db.query(User).filter(func.lower(User.email) == email.lower()).first()


def get_users_by_department(db: Session, department_id: uuid.UUID) -> list[User]:
    """Get the members of a department."""
    return (
        db.query(User)
        .filter(User.department_id == department_id)
        .order_by(User.last_name, User.first_name)
        .all()
    )


def search_users(db: Session, query: str) -> list[User]:
    """Case-insensitive substring search over first name, last name and email."""
    pattern = like_pattern(query)
    return (
        db.query(User)
        .filter(
            or_(
                User.first_name.ilike(pattern, escape="\\"),
                User.last_name.ilike(pattern, escape="\\"),
                User.email.ilike(pattern, escape="\\"),
            )
        )
        .order_by(User.created_at.desc())
        .all()
    )


def _check_email_available(
    db: Session, email: str, exclude_id: uuid.UUID | None = None
) -> None:
    existing = get_user_by_email(db, email)
    if existing and existing.id != exclude_id:
        raise DuplicateError("Email already in use")


def _check_department_exists(db: Session, department_id: uuid.UUID | None) -> None:
    if department_id is None:
        return
    if not db.query(Department).filter(Department.id == department_id).first():
        raise ValidationError(
            "Invalid data",
            [
                {
                    "loc": ["body", "department_id"],
                    "msg": "Department does not exist",
                    "type": "value_error",
                }
            ],
        )


def create_user(db: Session, data: UserCreate) -> User:
    """Create a user and assign its tier role."""
    _check_email_available(db, data.email)
    _check_department_exists(db, data.department_id)

    user = User(
        email=data.email,
        first_name=data.first_name,
        last_name=data.last_name,
        profile_image_url=data.profile_image_url,
        hashed_password=get_password_hash(data.password) if data.password else None,
        department_id=data.department_id,
        is_active=data.is_active,
    )
    db.add(user)
    rbac_service.set_tier_role(db, user, data.role)

    db.commit()
    db.refresh(user)
    logger.info(f"Created user {user.id}")
    return user


def update_user(db: Session, user_id: uuid.UUID, data: UserUpdate) -> User:
    """Partially update a user; only fields present in ``data`` change."""
    user = get_user_or_404(db, user_id)
    update_data = data.model_dump(exclude_unset=True)

    if update_data.get("email") is not None:
        _check_email_available(db, update_data["email"], exclude_id=user.id)
    if "department_id" in update_data:
        _check_department_exists(db, update_data["department_id"])

    password = update_data.pop("password", None)
    if password:
        user.hashed_password = get_password_hash(password)

    tier = update_data.pop("role", None)
    if tier is not None:
        rbac_service.set_tier_role(db, user, tier)

    for key, value in update_data.items():
        if value is None and key in ("email", "is_active"):
            continue
        setattr(user, key, value)
    user.updated_at = datetime.utcnow()

    db.commit()
    db.refresh(user)
    logger.info(f"Updated user {user.id}")
    return user


def update_profile(db: Session, user: User, data: UserProfileUpdate) -> User:
    """Update the signed-in user's own profile.

    Changing the password requires the current one.
    """
    update_data = data.model_dump(exclude_unset=True)
    current_password = update_data.pop("current_password", None)
    new_password = update_data.pop("new_password", None)

    if new_password:
        if not current_password:
            raise ValidationError("Current password is required to change password")
        if not verify_password(current_password, user.hashed_password):
            raise ValidationError("Current password is incorrect")
        user.hashed_password = get_password_hash(new_password)

    if update_data.get("email") is not None:
        _check_email_available(db, update_data["email"], exclude_id=user.id)
    if "department_id" in update_data:
        _check_department_exists(db, update_data["department_id"])

    for key, value in update_data.items():
        if value is None and key == "email":
            continue
        setattr(user, key, value)
    user.updated_at = datetime.utcnow()

    db.commit()
    db.refresh(user)
    logger.info(f"User {user.id} updated own profile")
    return user


def delete_user(db: Session, user_id: uuid.UUID) -> None:
    """Delete a user.

    Role, application and session rows go with it, and departments it managed
    lose their manager, all in one transaction.
    """
    user = get_user_or_404(db, user_id)

    db.query(Department).filter(Department.manager_id == user_id).update(
        {Department.manager_id: None}, synchronize_session=False
    )
    db.delete(user)
    db.commit()
    logger.info(f"Deleted user {user_id}")
