# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Password hashing and session token helpers."""

import hashlib
import hmac

from passlib.context import CryptContext

from bizadmin.config import settings

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str | None) -> bool:
    """Check a plain password against a stored hash."""
    if not hashed_password:
        return False
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password for storage."""
    return pwd_context.hash(password)


def hash_session_token(token: str) -> str:
    """Digest of a session cookie value as stored in the sessions table.

    Keyed with ``SECRET_KEY``; rotating the key ends every open session.
    """
    return hmac.new(
        settings.secret_key.encode(), token.encode(), hashlib.sha256
    ).hexdigest()
