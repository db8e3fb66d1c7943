# bizadmin/models/user_mini_application.py
import datetime
import uuid

from sqlalchemy import Column, DateTime, ForeignKey, String, UniqueConstraint, Uuid
from sqlalchemy.orm import relationship

from bizadmin.models.base import Base
from bizadmin.models.enums import AccessLevel


class UserMiniApplication(Base):
    """Grant of a mini application to a user, carrying the access level."""

    __tablename__ = "user_mini_applications"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    mini_application_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("mini_applications.id", ondelete="CASCADE"),
        nullable=False,
    )
    access_level = Column(String(20), default=AccessLevel.READ.value, nullable=False)
    created_at = Column(DateTime, default=datetime.datetime.utcnow, nullable=False)

    __table_args__ = (
        UniqueConstraint(
            "user_id", "mini_application_id", name="_user_mini_application_uc"
        ),
    )

    user = relationship("User", back_populates="application_assignments")
    mini_application = relationship(
        "MiniApplication", back_populates="user_assignments"
    )
