# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Authentication API endpoints."""

from fastapi import APIRouter, Cookie, Depends, HTTPException, Request, Response, status
from sqlalchemy.orm import Session

from bizadmin.api.deps import SESSION_COOKIE, get_current_user
from bizadmin.config import settings
from bizadmin.database import get_db
from bizadmin.models import User
from bizadmin.schemas.auth import LoginRequest, RegisterRequest
from bizadmin.schemas.user import UserProfileUpdate, UserResponse
from bizadmin.services import auth_service, user_service

router = APIRouter()


def _set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=SESSION_COOKIE,
        value=token,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
        max_age=86400 * settings.session_expiry_days,
    )


@router.post(
    "/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED
)
def register(
    data: RegisterRequest,
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
) -> UserResponse:
    """Register a new user.

    Only works during first run or if registration is enabled.
    """
    if not auth_service.is_first_run(db) and not settings.registration_enabled:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Registration is disabled",
        )

    user = auth_service.register_user(db, data)
    token = auth_service.create_session(
        db, user.id, request.headers.get("user-agent")
    )
    _set_session_cookie(response, token)

    # Re-query user after session creation commit to avoid expired object error
    user = user_service.get_user_or_404(db, user.id)
    return UserResponse.model_validate(user)


@router.post("/login", response_model=UserResponse)
def login(
    data: LoginRequest,
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
) -> UserResponse:
    """Login with email and password."""
    user = auth_service.authenticate(db, data.email, data.password)

    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )

    user_id = user.id
    token = auth_service.create_session(
        db, user_id, request.headers.get("user-agent")
    )
    _set_session_cookie(response, token)

    user = user_service.get_user_or_404(db, user_id)
    return UserResponse.model_validate(user)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def logout(
    response: Response,
    db: Session = Depends(get_db),
    session: str | None = Cookie(default=None),
    current_user: User = Depends(get_current_user),
) -> None:
    """Logout current user."""
    if session:
        auth_service.delete_session(db, session)
    response.delete_cookie(key=SESSION_COOKIE)


@router.get("/user", response_model=UserResponse)
def get_current_user_info(
    current_user: User = Depends(get_current_user),
) -> UserResponse:
    """Get current authenticated user."""
    return UserResponse.model_validate(current_user)


@router.put("/user", response_model=UserResponse)
def update_current_user_profile(
    data: UserProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> UserResponse:
    """Update current user's profile."""
    user = user_service.update_profile(db, current_user, data)
    return UserResponse.model_validate(user)
