# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""User schemas."""
import datetime
import uuid
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from bizadmin.models.enums import UserRoleTier
from bizadmin.schemas.common import normalize_email


class UserBase(BaseModel):
    """Base user schema."""

    email: EmailStr
    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    profile_image_url: Optional[str] = Field(None, max_length=500)
    department_id: Optional[uuid.UUID] = None

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, v: str) -> str:
        return normalize_email(v)


class UserCreate(UserBase):
    """Schema for creating a user (admin use).

    password may be omitted; such a user cannot log in until one is set.
    """

    password: Optional[str] = Field(None, min_length=8)
    role: UserRoleTier = UserRoleTier.USER
    is_active: bool = True


class UserUpdate(BaseModel):
    """Schema for a partial user update (admin use)."""

    email: Optional[EmailStr] = None
    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    profile_image_url: Optional[str] = Field(None, max_length=500)
    department_id: Optional[uuid.UUID] = None
    password: Optional[str] = Field(None, min_length=8)
    role: Optional[UserRoleTier] = None
    is_active: Optional[bool] = None

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, v: str | None) -> str | None:
        return normalize_email(v)


class UserProfileUpdate(BaseModel):
    """Schema for updating the current user's own profile."""

    email: Optional[EmailStr] = None
    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    profile_image_url: Optional[str] = Field(None, max_length=500)
    department_id: Optional[uuid.UUID] = None
    current_password: Optional[str] = None
    new_password: Optional[str] = Field(None, min_length=8)

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, v: str | None) -> str | None:
        return normalize_email(v)


class UserResponse(BaseModel):
    """Schema for user response.

    role is derived from the user's role assignments.
    """

    id: uuid.UUID
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    role: UserRoleTier
    department_id: Optional[uuid.UUID] = None
    is_active: bool
    created_at: datetime.datetime
    updated_at: datetime.datetime

    model_config = {"from_attributes": True}
