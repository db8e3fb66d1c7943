# bizadmin/services/rbac_service.py
import logging
import uuid
from datetime import datetime

from sqlalchemy.orm import Session, joinedload

from bizadmin.exceptions import DuplicateError, NotFoundError, ValidationError
from bizadmin.models import Permission, Role, RolePermission, User, UserRole
from bizadmin.models.enums import UserRoleTier
from bizadmin.schemas.rbac import (
    PermissionCreateSchema,
    PermissionUpdateSchema,
    RoleCreateSchema,
    RoleUpdateSchema,
)

logger = logging.getLogger(__name__)

TIER_ROLE_NAMES = {tier.value for tier in UserRoleTier}


# Permission resolution


def is_admin(user: User) -> bool:
    """Check for the admin tier role."""
    return any(
        user_role.role.name == UserRoleTier.ADMIN.value and user_role.role.is_active
        for user_role in user.user_roles
    )


def get_user_permissions(db: Session, user: User) -> set[tuple[str, str]]:
    """Get the (resource, action) pairs granted by the user's active roles.

    Inactive roles and inactive permissions grant nothing.
    """
    rows = (
        db.query(Permission.resource, Permission.action)
        .join(RolePermission, RolePermission.permission_id == Permission.id)
        .join(Role, Role.id == RolePermission.role_id)
        .join(UserRole, UserRole.role_id == Role.id)
        .filter(
            UserRole.user_id == user.id,
            Role.is_active == True,  # noqa: E712
            Permission.is_active == True,  # noqa: E712
        )
        .distinct()
        .all()
    )
    return {(resource, action) for resource, action in rows}


def user_has_permission(db: Session, user: User, resource: str, action: str) -> bool:
    """Check if a user may perform ``action`` on ``resource``."""
    if not user.is_active:
        return False

    # Admin has all permissions
    if is_admin(user):
        return True

    return (resource, action) in get_user_permissions(db, user)


def primary_role(user: User) -> UserRoleTier:
    """Display tier of a user: admin > manager > user among assigned roles."""
    return UserRoleTier(user.role)


def tier_rank(tier: UserRoleTier) -> int:
    """Lower is more privileged."""
    return list(UserRoleTier).index(tier)


def can_grant_tier(db: Session, user: User, tier: UserRoleTier) -> bool:
    """Check if a user may give ``tier`` to someone.

    Needs roles.write, and the tier may not outrank the user's own.
    """
    if not user_has_permission(db, user, "roles", "write"):
        return False
    return tier_rank(tier) >= tier_rank(primary_role(user))


# Roles


def get_roles(db: Session) -> list[Role]:
    """Get all roles ordered by name."""
    return db.query(Role).order_by(Role.name).all()


def get_role(db: Session, role_id: uuid.UUID) -> Role | None:
    """Get a role by ID."""
    return db.query(Role).filter(Role.id == role_id).first()


def get_role_or_404(db: Session, role_id: uuid.UUID) -> Role:
    role = get_role(db, role_id)
    if not role:
        raise NotFoundError("Role", role_id)
    return role


def get_role_by_name(db: Session, name: str) -> Role | None:
    """Get a role by its name."""
    return db.query(Role).filter(Role.name == name).first()


def create_role(db: Session, data: RoleCreateSchema) -> Role:
    """Create a custom role."""
    if get_role_by_name(db, data.name):
        raise DuplicateError("Role with this name already exists")

    role = Role(
        name=data.name,
        description=data.description,
        is_active=data.is_active,
        is_system=False,
    )
    db.add(role)
    db.commit()
    db.refresh(role)
    logger.info(f"Created role {role.id} ({role.name})")
    return role


def update_role(db: Session, role_id: uuid.UUID, data: RoleUpdateSchema) -> Role:
    """Partially update a role. System roles keep their name and stay active."""
    role = get_role_or_404(db, role_id)
    update_data = data.model_dump(exclude_unset=True)

    new_name = update_data.get("name")
    if new_name is not None and new_name != role.name:
        if role.is_system:
            raise ValidationError("System roles cannot be renamed")
        existing = get_role_by_name(db, new_name)
        if existing and existing.id != role.id:
            raise DuplicateError("Role with this name already exists")
    if role.is_system and update_data.get("is_active") is False:
        raise ValidationError("System roles cannot be deactivated")

    for key, value in update_data.items():
        if value is None and key != "description":
            continue
        setattr(role, key, value)
    role.updated_at = datetime.utcnow()

    db.commit()
    db.refresh(role)
    logger.info(f"Updated role {role.id}")
    return role


def delete_role(db: Session, role_id: uuid.UUID) -> None:
    """Delete a custom role together with its assignments and grants."""
    role = get_role_or_404(db, role_id)
    if role.is_system:
        raise ValidationError("System roles cannot be deleted")

    db.delete(role)
    db.commit()
    logger.info(f"Deleted role {role_id}")


def get_role_permissions(db: Session, role_id: uuid.UUID) -> list[Permission]:
    """Get the permissions granted by a role."""
    get_role_or_404(db, role_id)
    return (
        db.query(Permission)
        .join(RolePermission, RolePermission.permission_id == Permission.id)
        .filter(RolePermission.role_id == role_id)
        .order_by(Permission.name)
        .all()
    )


# Permissions


def get_permissions(db: Session) -> list[Permission]:
    """Get all permissions ordered by name."""
    return db.query(Permission).order_by(Permission.name).all()


def get_permission(db: Session, permission_id: uuid.UUID) -> Permission | None:
    """Get a permission by ID."""
    return db.query(Permission).filter(Permission.id == permission_id).first()


def get_permission_or_404(db: Session, permission_id: uuid.UUID) -> Permission:
    permission = get_permission(db, permission_id)
    if not permission:
        raise NotFoundError("Permission", permission_id)
    return permission


def get_permission_by_name(db: Session, name: str) -> Permission | None:
    """Get a permission by its name."""
    return db.query(Permission).filter(Permission.name == name).first()


def create_permission(db: Session, data: PermissionCreateSchema) -> Permission:
    """Create a permission."""
    if get_permission_by_name(db, data.name):
        raise DuplicateError("Permission with this name already exists")

    permission = Permission(**data.model_dump())
    db.add(permission)
    db.commit()
    db.refresh(permission)
    logger.info(f"Created permission {permission.id} ({permission.name})")
    return permission


def register_permission(
    db: Session,
    name: str,
    resource: str,
    action: str,
    description: str | None = None,
) -> Permission:
    """Register a new permission if it does not already exist."""
    permission = get_permission_by_name(db, name)
    if not permission:
        permission = Permission(
            name=name, resource=resource, action=action, description=description
        )
        db.add(permission)
        db.commit()
    return permission


def update_permission(
    db: Session, permission_id: uuid.UUID, data: PermissionUpdateSchema
) -> Permission:
    """Partially update a permission."""
    permission = get_permission_or_404(db, permission_id)
    update_data = data.model_dump(exclude_unset=True)

    new_name = update_data.get("name")
    if new_name is not None:
        existing = get_permission_by_name(db, new_name)
        if existing and existing.id != permission.id:
            raise DuplicateError("Permission with this name already exists")

    for key, value in update_data.items():
        if value is None and key != "description":
            continue
        setattr(permission, key, value)

    db.commit()
    db.refresh(permission)
    logger.info(f"Updated permission {permission.id}")
    return permission


def delete_permission(db: Session, permission_id: uuid.UUID) -> None:
    """Delete a permission together with its role grants."""
    permission = get_permission_or_404(db, permission_id)
    db.delete(permission)
    db.commit()
    logger.info(f"Deleted permission {permission_id}")


# Assignments


def _get_user_or_404(db: Session, user_id: uuid.UUID) -> User:
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFoundError("User", user_id)
    return user


def get_user_roles(db: Session, user_id: uuid.UUID) -> list[UserRole]:
    """Get all role assignments of a user."""
    _get_user_or_404(db, user_id)
    return (
        db.query(UserRole)
        .options(joinedload(UserRole.role))
        .filter(UserRole.user_id == user_id)
        .order_by(UserRole.created_at)
        .all()
    )


def add_user_role(db: Session, user: User, role: Role) -> UserRole:
    """Stage a role assignment without committing."""
    user_role = UserRole(user=user, role=role)
    db.add(user_role)
    return user_role


def set_tier_role(db: Session, user: User, tier: UserRoleTier) -> None:
    """Make ``tier`` the user's only tier role without committing.

    Custom (non-tier) roles are left alone.
    """
    role = get_role_by_name(db, tier.value)
    if not role:
        raise ValidationError(f"Role '{tier.value}' is not configured")

    for user_role in list(user.user_roles):
        if user_role.role.name in TIER_ROLE_NAMES and user_role.role_id != role.id:
            user.user_roles.remove(user_role)
    if not any(user_role.role_id == role.id for user_role in user.user_roles):
        add_user_role(db, user, role)


def assign_role_to_user(
    db: Session, user_id: uuid.UUID, role_id: uuid.UUID
) -> UserRole:
    """Assign a role to a user."""
    user = _get_user_or_404(db, user_id)
    role = get_role_or_404(db, role_id)

    existing = (
        db.query(UserRole)
        .filter(UserRole.user_id == user_id, UserRole.role_id == role_id)
        .first()
    )
    if existing:
        raise DuplicateError("User already has this role assignment")

    user_role = add_user_role(db, user, role)
    db.commit()
    db.refresh(user_role)
    logger.info(f"Assigned role {role_id} to user {user_id}")
    return user_role


def remove_role_from_user(db: Session, user_id: uuid.UUID, role_id: uuid.UUID) -> None:
    """Remove a role from a user."""
    user_role = (
        db.query(UserRole)
        .filter(UserRole.user_id == user_id, UserRole.role_id == role_id)
        .first()
    )
    if not user_role:
        raise NotFoundError("Role assignment", (user_id, role_id))

    db.delete(user_role)
    db.commit()
    logger.info(f"Removed role {role_id} from user {user_id}")


def assign_permission_to_role(
    db: Session, role_id: uuid.UUID, permission_id: uuid.UUID
) -> RolePermission:
    """Grant a permission to a role."""
    get_role_or_404(db, role_id)
    get_permission_or_404(db, permission_id)

    existing = (
        db.query(RolePermission)
        .filter(
            RolePermission.role_id == role_id,
            RolePermission.permission_id == permission_id,
        )
        .first()
    )
    if existing:
        raise DuplicateError("Role already has this permission")

    role_permission = RolePermission(role_id=role_id, permission_id=permission_id)
    db.add(role_permission)
    db.commit()
    db.refresh(role_permission)
    logger.info(f"Granted permission {permission_id} to role {role_id}")
    return role_permission


def remove_permission_from_role(
    db: Session, role_id: uuid.UUID, permission_id: uuid.UUID
) -> None:
    """Revoke a permission from a role."""
    role_permission = (
        db.query(RolePermission)
        .filter(
            RolePermission.role_id == role_id,
            RolePermission.permission_id == permission_id,
        )
        .first()
    )
    if not role_permission:
        raise NotFoundError("Role permission", (role_id, permission_id))

    db.delete(role_permission)
    db.commit()
    logger.info(f"Revoked permission {permission_id} from role {role_id}")
