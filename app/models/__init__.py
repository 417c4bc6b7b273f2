"""SQLAlchemy models"""
from app.models.participant import Participant
from app.models.event import Event, EventStatus
from app.models.event_participant import EventParticipant

__all__ = ["Participant", "Event", "EventParticipant", "EventStatus"]
