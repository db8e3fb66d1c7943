# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Common schema types."""
from typing import Any

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str


class ErrorResponse(BaseModel):
    """Body of every non-2xx response."""

    message: str
    errors: list[dict[str, Any]] | None = None


def normalize_email(v: str | None) -> str | None:
    """Lowercase an email so lookups and uniqueness ignore case."""
    if v is not None:
        return v.strip().lower()
    return v
