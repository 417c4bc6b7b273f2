"""Event data access"""
from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.event import Event


class EventRepository:
    """Repository for Event database operations"""

    @staticmethod
    async def get_by_id(db: AsyncSession, event_id: UUID) -> Optional[Event]:
        """
        Get event by ID.

        Args:
            db: Database session
            event_id: Event UUID

        Returns:
            Event if found, None otherwise
        """
        result = await db.execute(select(Event).where(Event.id == event_id))
        return result.scalar_one_or_none()
