# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Mini application schemas."""

import datetime
import uuid

from pydantic import BaseModel, Field

from bizadmin.models.enums import AccessLevel, MiniApplicationStatus


class MiniApplicationBase(BaseModel):
    """Base mini application schema."""

    name: str = Field(..., min_length=1, max_length=200)
    description: str | None = None
    category: str = Field(..., min_length=1, max_length=100)
    icon: str = Field(..., min_length=1, max_length=100)
    url: str | None = Field(None, max_length=500)
    status: MiniApplicationStatus = MiniApplicationStatus.ACTIVE
    active_users: int = Field(default=0, ge=0)


class MiniApplicationCreate(MiniApplicationBase):
    """Schema for creating a mini application."""

    pass


class MiniApplicationUpdate(BaseModel):
    """Schema for a partial mini application update."""

    name: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None
    category: str | None = Field(None, min_length=1, max_length=100)
    icon: str | None = Field(None, min_length=1, max_length=100)
    url: str | None = Field(None, max_length=500)
    status: MiniApplicationStatus | None = None
    active_users: int | None = Field(None, ge=0)


class MiniApplicationResponse(BaseModel):
    """Schema for mini application response."""

    id: uuid.UUID
    name: str
    description: str | None
    category: str
    icon: str
    url: str | None
    status: MiniApplicationStatus
    active_users: int
    created_at: datetime.datetime
    updated_at: datetime.datetime

    model_config = {"from_attributes": True}


class UserMiniApplicationResponse(BaseModel):
    """A catalog entry as granted to a specific user."""

    id: uuid.UUID
    name: str
    description: str | None
    category: str
    icon: str
    url: str | None
    status: MiniApplicationStatus
    access_level: AccessLevel


class ApplicationAssignmentRequest(BaseModel):
    """Schema for granting a mini application to a user."""

    app_id: uuid.UUID
    access_level: AccessLevel = AccessLevel.READ


class ApplicationAssignmentResponse(BaseModel):
    """Schema representing a user to application grant."""

    id: uuid.UUID
    user_id: uuid.UUID
    mini_application_id: uuid.UUID
    access_level: AccessLevel
    created_at: datetime.datetime

    model_config = {"from_attributes": True}
