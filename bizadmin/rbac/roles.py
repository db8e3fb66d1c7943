# bizadmin/rbac/roles.py
from bizadmin.models.enums import UserRoleTier

from .permissions import CORE_PERMISSIONS

# Admin always gets all core permissions
ADMIN_PERMISSIONS = [p["name"] for p in CORE_PERMISSIONS]

# The three tier roles are system roles: they back User.role and cannot be
# renamed or deleted. Their permission sets can still be edited.
DEFAULT_ROLES = [
    {
        "name": UserRoleTier.ADMIN.value,
        "is_system": True,
        "description": "Full access to every resource.",
        "permissions": ADMIN_PERMISSIONS,
    },
    {
        "name": UserRoleTier.MANAGER.value,
        "is_system": True,
        "description": "Manages people, departments and the application catalog.",
        "permissions": [
            "users.read",
            "users.write",
            "departments.read",
            "departments.write",
            "roles.read",
            "permissions.read",
            "applications.read",
            "applications.write",
            "analytics.read",
        ],
    },
    {
        "name": UserRoleTier.USER.value,
        "is_system": True,
        "description": "Browses the directory and launches granted applications.",
        "permissions": [
            "users.read",
            "departments.read",
            "applications.read",
        ],
    },
]
