# bizadmin/schemas/rbac.py
import datetime
import uuid

from pydantic import BaseModel, ConfigDict, Field


class PermissionSchema(BaseModel):
    """Schema representing a permission."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    description: str | None
    resource: str
    action: str
    is_active: bool
    created_at: datetime.datetime


class PermissionCreateSchema(BaseModel):
    """Schema for creating a permission."""

    name: str = Field(..., min_length=1, max_length=100)
    description: str | None = None
    resource: str = Field(..., min_length=1, max_length=100)
    action: str = Field(..., min_length=1, max_length=50)
    is_active: bool = True


class PermissionUpdateSchema(BaseModel):
    """Schema for updating a permission."""

    name: str | None = Field(None, min_length=1, max_length=100)
    description: str | None = None
    resource: str | None = Field(None, min_length=1, max_length=100)
    action: str | None = Field(None, min_length=1, max_length=50)
    is_active: bool | None = None


class RoleSchema(BaseModel):
    """Schema representing a role."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    description: str | None
    is_active: bool
    is_system: bool
    created_at: datetime.datetime
    updated_at: datetime.datetime


class RoleWithPermissionsSchema(RoleSchema):
    """Schema representing a role along with its permissions."""

    permissions: list[PermissionSchema]


class RoleCreateSchema(BaseModel):
    """Schema for creating a new role."""

    name: str = Field(..., min_length=1, max_length=100)
    description: str | None = None
    is_active: bool = True


class RoleUpdateSchema(BaseModel):
    """Schema for updating a role."""

    name: str | None = Field(None, min_length=1, max_length=100)
    description: str | None = None
    is_active: bool | None = None


class UserRoleSchema(BaseModel):
    """Schema representing a user's role assignment."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    user_id: uuid.UUID
    role_id: uuid.UUID
    created_at: datetime.datetime
    role: RoleSchema


class UserRoleAssignmentSchema(BaseModel):
    """Schema for assigning a role to a user."""

    role_id: uuid.UUID


class RolePermissionSchema(BaseModel):
    """Schema representing a role's permission grant."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    role_id: uuid.UUID
    permission_id: uuid.UUID
    created_at: datetime.datetime


class RolePermissionAssignmentSchema(BaseModel):
    """Schema for granting a permission to a role."""

    permission_id: uuid.UUID
