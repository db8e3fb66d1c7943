# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Pydantic schemas package."""
from bizadmin.schemas.analytics import ActivityItem, Statistics
from bizadmin.schemas.auth import LoginRequest, RegisterRequest
from bizadmin.schemas.common import ErrorResponse, HealthResponse
from bizadmin.schemas.department import (
    DepartmentCreate,
    DepartmentResponse,
    DepartmentUpdate,
)
from bizadmin.schemas.mini_application import (
    ApplicationAssignmentRequest,
    ApplicationAssignmentResponse,
    MiniApplicationCreate,
    MiniApplicationResponse,
    MiniApplicationUpdate,
    UserMiniApplicationResponse,
)
from bizadmin.schemas.user import (
    UserCreate,
    UserProfileUpdate,
    UserResponse,
    UserUpdate,
)

__all__ = [
    # Analytics
    "ActivityItem",
    "Statistics",
    # Auth
    "LoginRequest",
    "RegisterRequest",
    # Common
    "ErrorResponse",
    "HealthResponse",
    # Departments
    "DepartmentCreate",
    "DepartmentResponse",
    "DepartmentUpdate",
    # Mini applications
    "ApplicationAssignmentRequest",
    "ApplicationAssignmentResponse",
    "MiniApplicationCreate",
    "MiniApplicationResponse",
    "MiniApplicationUpdate",
    "UserMiniApplicationResponse",
    # Users
    "UserCreate",
    "UserProfileUpdate",
    "UserResponse",
    "UserUpdate",
]
