"""Event model"""
import enum
import uuid
from datetime import datetime

from sqlalchemy import Column, Date, DateTime, Enum, String, Text, Time
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from app.database import Base


class EventStatus(str, enum.Enum):
    """Enum for event status"""
    IN_PROGRESS = "IN_PROGRESS"
    FINISHED = "FINISHED"


class Event(Base):
    """Shared event whose expenses get settled between participants"""

    __tablename__ = "events"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    name = Column(String(255), nullable=False)
    location = Column(String(255), nullable=True)
    event_date = Column(Date, nullable=False)
    event_time = Column(Time, nullable=True)
    description = Column(Text, nullable=True)
    status = Column(Enum(EventStatus), default=EventStatus.IN_PROGRESS, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # Relationships
    entries = relationship("EventParticipant", back_populates="event", cascade="all, delete-orphan")

    def __repr__(self) -> str:
        return f"<Event(id={self.id}, name={self.name}, status={self.status})>"
