# bizadmin/services/rbac_seed_service.py
import logging

from sqlalchemy.orm import Session

from bizadmin.models import Role, RolePermission
from bizadmin.rbac.permissions import CORE_PERMISSIONS
from bizadmin.rbac.roles import DEFAULT_ROLES

from . import rbac_service

logger = logging.getLogger(__name__)


def seed_rbac_data(db: Session) -> None:
    """Seeds the database with core permissions and the tier roles.

    This function is idempotent: existing permissions and roles are left
    untouched, so edits made through the API survive a restart.
    @param db: SQLAlchemy Session object
    """
    # Seed permissions
    for perm_data in CORE_PERMISSIONS:
        rbac_service.register_permission(db, **perm_data)

    # Seed roles and role-permissions
    created = 0
    for role_data in DEFAULT_ROLES:
        role = rbac_service.get_role_by_name(db, role_data["name"])
        if role:
            continue
        role = Role(
            name=role_data["name"],
            is_system=role_data["is_system"],
            description=role_data["description"],
        )
        db.add(role)
        db.flush()  # Flush to get the role ID

        for perm_name in role_data["permissions"]:
            permission = rbac_service.get_permission_by_name(db, perm_name)
            if permission:
                db.add(RolePermission(role_id=role.id, permission_id=permission.id))
        created += 1
    db.commit()
    if created:
        logger.info(f"Seeded {created} default roles")
