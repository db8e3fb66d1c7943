# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Authentication service."""

import logging
import secrets
import uuid
from datetime import datetime, timedelta

from sqlalchemy.orm import Session

from bizadmin.config import settings
from bizadmin.exceptions import DuplicateError
from bizadmin.models import User
from bizadmin.models.enums import UserRoleTier
from bizadmin.models.session import Session as SessionModel
from bizadmin.schemas.auth import RegisterRequest
from bizadmin.security import get_password_hash, hash_session_token, verify_password
from bizadmin.services import user_service

logger = logging.getLogger(__name__)


def is_first_run(db: Session) -> bool:
    """Check if this is the first run (no users exist)."""
    return db.query(User).count() == 0


def register_user(db: Session, data: RegisterRequest) -> User:
    """Register a new user. First user becomes admin."""
    from bizadmin.services import rbac_service
    from bizadmin.services.rbac_seed_service import seed_rbac_data

    first_run = is_first_run(db)
    if first_run:
        seed_rbac_data(db)

    if user_service.get_user_by_email(db, data.email):
        raise DuplicateError("Email already in use")

    user = User(
        email=data.email,
        hashed_password=get_password_hash(data.password),
        first_name=data.first_name,
        last_name=data.last_name,
        is_active=True,
    )
    db.add(user)
    tier = UserRoleTier.ADMIN if first_run else UserRoleTier.USER
    rbac_service.set_tier_role(db, user, tier)

    db.commit()
    db.refresh(user)
    logger.info(f"Registered user {user.id} as {tier.value}")
    return user


def authenticate(db: Session, email: str, password: str) -> User | None:
    """Authenticate a user by email and password."""
    user = user_service.get_user_by_email(db, email)
    if not user:
        logger.warning("Login failed: unknown email")
        return None
    if not verify_password(password, user.hashed_password):
        logger.warning(f"Login failed for user {user.id}: bad password")
        return None
    if not user.is_active:
        logger.warning(f"Login failed for user {user.id}: inactive")
        return None
    return user


def create_session(
    db: Session, user_id: uuid.UUID, user_agent: str | None = None
) -> str:
    """Create a new session for a user.

    Returns the cookie value; only its digest is stored.
    """
    token = secrets.token_urlsafe(32)
    expires_at = datetime.utcnow() + timedelta(days=settings.session_expiry_days)

    session = SessionModel(
        user_id=user_id,
        token=hash_session_token(token),
        user_agent=user_agent[:255] if user_agent else None,
        expires_at=expires_at,
    )
    db.add(session)
    db.commit()
    logger.info(f"Session created for user {user_id}")
    return token


def get_session(db: Session, token: str) -> SessionModel | None:
    """Get a valid session by token."""
    digest = hash_session_token(token)
    session = db.query(SessionModel).filter(SessionModel.token == digest).first()
    if not session:
        return None
    if session.is_expired:
        db.delete(session)
        db.commit()
        return None
    return session


def delete_session(db: Session, token: str) -> bool:
    """Delete a session by token."""
    digest = hash_session_token(token)
    session = db.query(SessionModel).filter(SessionModel.token == digest).first()
    if session:
        user_id = session.user_id
        db.delete(session)
        db.commit()
        logger.info(f"Session ended for user {user_id}")
        return True
    return False


def cleanup_expired_sessions(db: Session) -> int:
    """Delete all expired sessions. Returns count of deleted sessions."""
    count = (
        db.query(SessionModel)
        .filter(SessionModel.expires_at < datetime.utcnow())
        .delete()
    )
    db.commit()
    return count
