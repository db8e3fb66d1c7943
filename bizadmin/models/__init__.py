# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Database models package."""

from bizadmin.models.base import Base, TimestampMixin
from bizadmin.models.department import Department
from bizadmin.models.enums import AccessLevel, MiniApplicationStatus, UserRoleTier
from bizadmin.models.mini_application import MiniApplication
from bizadmin.models.permission import Permission
from bizadmin.models.role import Role
from bizadmin.models.role_permission import RolePermission
from bizadmin.models.session import Session
from bizadmin.models.user import User
from bizadmin.models.user_mini_application import UserMiniApplication
from bizadmin.models.user_role import UserRole

__all__ = [
    "AccessLevel",
    "Base",
    "Department",
    "MiniApplication",
    "MiniApplicationStatus",
    "Permission",
    "Role",
    "RolePermission",
    "Session",
    "TimestampMixin",
    "User",
    "UserMiniApplication",
    "UserRole",
    "UserRoleTier",
]
