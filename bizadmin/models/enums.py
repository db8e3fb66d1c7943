# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Enumeration types for database models."""

from enum import Enum


class UserRoleTier(str, Enum):
    """Display tier of a user, derived from the roles assigned to them.

    Ordered from most to least privileged.
    """

    ADMIN = "admin"
    MANAGER = "manager"
    USER = "user"


class MiniApplicationStatus(str, Enum):
    """Lifecycle status of a catalog entry."""

    ACTIVE = "active"
    MAINTENANCE = "maintenance"
    INACTIVE = "inactive"
    DEVELOPMENT = "development"


class AccessLevel(str, Enum):
    """Tier granted on a user to mini application assignment."""

    READ = "read"
    WRITE = "write"
    ADMIN = "admin"
