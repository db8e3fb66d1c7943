# bizadmin/rbac/permissions.py
def _perm(resource: str, action: str, description: str) -> dict:
    return {
        "name": f"{resource}.{action}",
        "resource": resource,
        "action": action,
        "description": description,
    }


CORE_PERMISSIONS = [
    # User management
    _perm("users", "read", "View users and the employee directory"),
    _perm("users", "write", "Create, update, deactivate and delete users"),
    # Departments
    _perm("departments", "read", "View departments"),
    _perm("departments", "write", "Create and manage departments"),
    # Roles and permissions
    _perm("roles", "read", "View roles and role assignments"),
    _perm("roles", "write", "Create roles and assign them to users"),
    _perm("permissions", "read", "View permissions"),
    _perm("permissions", "write", "Create and manage permissions"),
    # Application catalog
    _perm("applications", "read", "View the mini application catalog"),
    _perm("applications", "write", "Manage mini applications and grants"),
    # Dashboard
    _perm("analytics", "read", "View dashboard statistics and activity"),
]
