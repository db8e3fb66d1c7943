# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Analytics schemas."""

import datetime

from pydantic import BaseModel


class Statistics(BaseModel):
    """Aggregate counts shown on the admin dashboard."""

    total_apps: int = 0
    active_users: int = 0
    departments: int = 0
    permission_groups: int = 0


class ActivityItem(BaseModel):
    """One entry of the recent activity feed."""

    type: str
    user: str
    action: str
    timestamp: datetime.datetime
