"""Services package."""
from bizadmin.services import (
    analytics_service,
    auth_service,
    department_service,
    mini_application_service,
    rbac_service,
    user_service,
)

__all__ = [
    "analytics_service",
    "auth_service",
    "department_service",
    "mini_application_service",
    "rbac_service",
    "user_service",
]
