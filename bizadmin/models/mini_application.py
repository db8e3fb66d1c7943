# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Mini application catalog model."""

from __future__ import annotations

import uuid as uuid_lib
from typing import TYPE_CHECKING

from sqlalchemy import Enum, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bizadmin.models.base import Base, TimestampMixin
from bizadmin.models.enums import MiniApplicationStatus

if TYPE_CHECKING:
    from bizadmin.models.user_mini_application import UserMiniApplication


class MiniApplication(Base, TimestampMixin):
    """A launchable internal tool entry."""

    __tablename__ = "mini_applications"

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[str] = mapped_column(String(100), nullable=False)
    icon: Mapped[str] = mapped_column(String(100), nullable=False)
    url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    status: Mapped[MiniApplicationStatus] = mapped_column(
        Enum(
            MiniApplicationStatus,
            native_enum=False,
            values_callable=lambda e: [m.value for m in e],
            length=20,
        ),
        default=MiniApplicationStatus.ACTIVE,
        nullable=False,
    )
    active_users: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    user_assignments: Mapped[list[UserMiniApplication]] = relationship(
        "UserMiniApplication",
        back_populates="mini_application",
        cascade="all, delete-orphan",
    )
