"""User model definitions."""

import enum

from sqlalchemy import Column, DateTime, Enum, Integer, String

from appointment_api.database import Base, utcnow


class Role(str, enum.Enum):
    STUDENT = "student"
    PROFESSOR = "professor"


class User(Base):
    """Represents a registered student or professor."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    role = Column(
        Enum(Role, name="user_role", values_callable=lambda roles: [role.value for role in roles]),
        nullable=False,
    )
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)
