# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Authentication schemas."""
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from bizadmin.schemas.common import normalize_email


class LoginRequest(BaseModel):
    """Login with email and password."""

    email: EmailStr
    password: str

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, v: str) -> str:
        return normalize_email(v)


class RegisterRequest(BaseModel):
    """Self-registration request."""

    email: EmailStr
    password: str = Field(..., min_length=8)
    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, v: str) -> str:
        return normalize_email(v)
