# bizadmin/models/user_role.py
import datetime
import uuid

from sqlalchemy import Column, DateTime, ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import relationship

from bizadmin.models.base import Base


class UserRole(Base):
    """Association between a user and a role."""

    __tablename__ = "user_roles"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    role_id = Column(
        Uuid(as_uuid=True), ForeignKey("roles.id", ondelete="CASCADE"), nullable=False
    )
    created_at = Column(DateTime, default=datetime.datetime.utcnow, nullable=False)

    __table_args__ = (UniqueConstraint("user_id", "role_id", name="_user_role_uc"),)

    user = relationship("User", back_populates="user_roles")
    role = relationship("Role", back_populates="user_roles", lazy="joined")
