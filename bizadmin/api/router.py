# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Main API router."""

from fastapi import APIRouter

from bizadmin.api.routes import (
    analytics,
    auth,
    departments,
    mini_applications,
    rbac,
    users,
)
from bizadmin.schemas.common import ErrorResponse

api_router = APIRouter(
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    }
)

# Auth routes
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])

# User management routes (including role and application assignments)
api_router.include_router(users.router, tags=["users"])

# Department routes
api_router.include_router(
    departments.router, prefix="/departments", tags=["departments"]
)

# Role and permission routes
api_router.include_router(rbac.router, tags=["rbac"])

# Mini application catalog routes
api_router.include_router(
    mini_applications.router, prefix="/mini-applications", tags=["mini-applications"]
)

# Analytics routes
api_router.include_router(analytics.router, prefix="/analytics", tags=["analytics"])
