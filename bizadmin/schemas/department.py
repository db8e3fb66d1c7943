# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Department schemas."""

import datetime
import uuid

from pydantic import BaseModel, Field


class DepartmentBase(BaseModel):
    """Base department schema."""

    name: str = Field(..., min_length=1, max_length=200)
    description: str | None = None
    manager_id: uuid.UUID | None = None
    is_active: bool = True


class DepartmentCreate(DepartmentBase):
    """Schema for creating a department."""

    pass


class DepartmentUpdate(BaseModel):
    """Schema for a partial department update."""

    name: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None
    manager_id: uuid.UUID | None = None
    is_active: bool | None = None


class DepartmentResponse(BaseModel):
    """Schema for department response."""

    id: uuid.UUID
    name: str
    description: str | None
    manager_id: uuid.UUID | None
    is_active: bool
    user_count: int = 0
    created_at: datetime.datetime
    updated_at: datetime.datetime

    model_config = {"from_attributes": True}
