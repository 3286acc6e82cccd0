"""Availability model definitions."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from appointment_api.database import Base, utcnow


class Availability(Base):
    """A slot label a professor has declared open for booking."""
    __tablename__ = "availability"

    id = Column(Integer, primary_key=True)
    professor_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    time_slot = Column(String, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

    professor = relationship("User")
