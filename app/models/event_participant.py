"""Event participant model"""
import uuid
from datetime import datetime
from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Numeric, Text, UniqueConstraint, CheckConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from app.database import Base


class EventParticipant(Base):
    """Links a participant to an event with what they spent on it"""

    __tablename__ = "event_participants"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    event_id = Column(UUID(as_uuid=True), ForeignKey("events.id", ondelete="CASCADE"), nullable=False, index=True)
    participant_id = Column(UUID(as_uuid=True), ForeignKey("participants.id"), nullable=False, index=True)
    amount_spent = Column(Numeric(12, 2), default=0, nullable=False)
    description = Column(Text, nullable=True)
    confirmed = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # Constraints
    __table_args__ = (
        UniqueConstraint('event_id', 'participant_id', name='uq_event_participant'),
        CheckConstraint('amount_spent >= 0', name='check_amount_spent_non_negative'),
    )

    # Relationships
    event = relationship("Event", back_populates="entries")
    participant = relationship("Participant", back_populates="entries")

    def __repr__(self) -> str:
        return f"<EventParticipant(event_id={self.event_id}, participant_id={self.participant_id}, spent={self.amount_spent})>"
