"""
User model for HR office accounts.

Users authenticate with email/password and their display name is recorded
as the actor on status changes and evaluations.
"""

import enum
from sqlalchemy import Column, Integer, String, Boolean, DateTime, Enum, func
from app.core.database import Base


class UserRole(str, enum.Enum):
    """
    - ADMIN: may delete records
    - STAFF: may create and update records
    """
    ADMIN = "admin"
    STAFF = "staff"


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, nullable=False, index=True)
    role = Column(
        Enum(UserRole, values_callable=lambda e: [m.value for m in e]),
        default=UserRole.STAFF,
        nullable=False,
    )
    hashed_password = Column(String, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}', role={self.role.value})>"
