# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""User model."""

from __future__ import annotations

import uuid as uuid_lib
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bizadmin.models.base import Base, TimestampMixin
from bizadmin.models.enums import UserRoleTier

if TYPE_CHECKING:
    from bizadmin.models.session import Session
    from bizadmin.models.user_mini_application import UserMiniApplication
    from bizadmin.models.user_role import UserRole


class User(Base, TimestampMixin):
    """A person in the organization, optionally able to log in."""

    __tablename__ = "users"

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    first_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    profile_image_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    # NULL = created by an administrator, cannot log in yet
    hashed_password: Mapped[str | None] = mapped_column(String(255), nullable=True)
    department_id: Mapped[uuid_lib.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("departments.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    # Relationships
    sessions: Mapped[list[Session]] = relationship(
        "Session",
        back_populates="user",
        cascade="all, delete-orphan",
    )
    user_roles: Mapped[list[UserRole]] = relationship(
        "UserRole",
        back_populates="user",
        cascade="all, delete-orphan",
    )
    application_assignments: Mapped[list[UserMiniApplication]] = relationship(
        "UserMiniApplication",
        back_populates="user",
        cascade="all, delete-orphan",
    )

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)

    @property
    def role(self) -> str:
        """Highest tier among the assigned role names, user when none match."""
        names = {user_role.role.name for user_role in self.user_roles}
        for tier in UserRoleTier:
            if tier.value in names:
                return tier.value
        return UserRoleTier.USER.value
