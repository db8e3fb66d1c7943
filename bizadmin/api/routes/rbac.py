# bizadmin/api/routes/rbac.py
import uuid

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from bizadmin.api.deps import require_permission
from bizadmin.database import get_db
from bizadmin.models import User
from bizadmin.schemas.rbac import (
    PermissionCreateSchema,
    PermissionSchema,
    PermissionUpdateSchema,
    RoleCreateSchema,
    RolePermissionAssignmentSchema,
    RolePermissionSchema,
    RoleSchema,
    RoleUpdateSchema,
    RoleWithPermissionsSchema,
)
from bizadmin.services import rbac_service

router = APIRouter()

# Roles

@router.get("/roles", response_model=list[RoleSchema], summary="List all roles")
def list_roles(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission("roles", "read")),
):
    """Retrieve a list of all roles, ordered by name."""
    return rbac_service.get_roles(db)

@router.get("/roles/{role_id}", response_model=RoleWithPermissionsSchema, summary="Get a role by ID with its permissions")
def get_role(
    role_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission("roles", "read")),
):
    """Retrieve a specific role by its ID, including all granted permissions."""
    role = rbac_service.get_role_or_404(db, role_id)
    permissions = rbac_service.get_role_permissions(db, role_id)
    return RoleWithPermissionsSchema(
        **RoleSchema.model_validate(role).model_dump(),
        permissions=[PermissionSchema.model_validate(p) for p in permissions],
    )

@router.post("/roles", response_model=RoleSchema, status_code=status.HTTP_201_CREATED, summary="Create a new custom role")
def create_role(
    role_in: RoleCreateSchema,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission("roles", "write")),
):
    """Create a new custom role. Role names are unique."""
    return rbac_service.create_role(db, role_in)

@router.put("/roles/{role_id}", response_model=RoleSchema, summary="Update an existing role")
def update_role(
    role_id: uuid.UUID,
    role_in: RoleUpdateSchema,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission("roles", "write")),
):
    """Partially update a role. System roles cannot be renamed or deactivated."""
    return rbac_service.update_role(db, role_id, role_in)

@router.delete("/roles/{role_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a custom role")
def delete_role(
    role_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission("roles", "write")),
):
    """Delete a custom role and its assignments. System roles cannot be deleted."""
    rbac_service.delete_role(db, role_id)

@router.post("/roles/{role_id}/permissions", response_model=RolePermissionSchema, status_code=status.HTTP_201_CREATED, summary="Grant a permission to a role")
def assign_permission_to_role(
    role_id: uuid.UUID,
    assignment: RolePermissionAssignmentSchema,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission("roles", "write")),
):
    return rbac_service.assign_permission_to_role(db, role_id, assignment.permission_id)

@router.delete("/roles/{role_id}/permissions/{permission_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Revoke a permission from a role")
def remove_permission_from_role(
    role_id: uuid.UUID,
    permission_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission("roles", "write")),
):
    rbac_service.remove_permission_from_role(db, role_id, permission_id)

# Permissions

@router.get("/permissions", response_model=list[PermissionSchema], summary="List all permissions")
def list_permissions(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission("permissions", "read")),
):
    """Retrieve a list of all permissions, ordered by name."""
    return rbac_service.get_permissions(db)

@router.get("/permissions/{permission_id}", response_model=PermissionSchema, summary="Get a permission by ID")
def get_permission(
    permission_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission("permissions", "read")),
):
    return rbac_service.get_permission_or_404(db, permission_id)

@router.post("/permissions", response_model=PermissionSchema, status_code=status.HTTP_201_CREATED, summary="Create a permission")
def create_permission(
    permission_in: PermissionCreateSchema,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission("permissions", "write")),
):
    """Create a permission. Permission names are unique."""
    return rbac_service.create_permission(db, permission_in)

@router.put("/permissions/{permission_id}", response_model=PermissionSchema, summary="Update a permission")
def update_permission(
    permission_id: uuid.UUID,
    permission_in: PermissionUpdateSchema,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission("permissions", "write")),
):
    return rbac_service.update_permission(db, permission_id, permission_in)

@router.delete("/permissions/{permission_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a permission")
def delete_permission(
    permission_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_permission("permissions", "write")),
):
    """Delete a permission and revoke it from every role."""
    rbac_service.delete_permission(db, permission_id)
