"""Event expense data access"""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.event_participant import EventParticipant
from app.schemas.settlement import ExpenseRecord


class ExpenseRepository:
    """Repository for per-participant event spend"""

    @staticmethod
    async def get_entries(db: AsyncSession, event_id: UUID) -> List[EventParticipant]:
        """
        Get all participant entries of an event with participant details loaded.

        Args:
            db: Database session
            event_id: Event UUID

        Returns:
            List of entries
        """
        result = await db.execute(
            select(EventParticipant)
            .where(EventParticipant.event_id == event_id)
            .options(selectinload(EventParticipant.participant))
        )
        return list(result.scalars().all())

    @staticmethod
    async def load_expenses(db: AsyncSession, event_id: UUID) -> List[ExpenseRecord]:
        """
        Load the spend snapshot of an event.

        Args:
            db: Database session
            event_id: Event UUID

        Returns:
            One ExpenseRecord per participant of the event
        """
        entries = await ExpenseRepository.get_entries(db, event_id)
        return [
            ExpenseRecord(
                participant_id=entry.participant_id,
                display_name=entry.participant.name,
                payout_address=entry.participant.payout_address,
                amount_spent=entry.amount_spent,
            )
            for entry in entries
        ]

    @staticmethod
    async def get_entry(
        db: AsyncSession, event_id: UUID, participant_id: UUID
    ) -> Optional[EventParticipant]:
        """
        Get a single participant's entry for an event.

        Args:
            db: Database session
            event_id: Event UUID
            participant_id: Participant UUID

        Returns:
            Entry if the participant belongs to the event, None otherwise
        """
        result = await db.execute(
            select(EventParticipant)
            .where(
                EventParticipant.event_id == event_id,
                EventParticipant.participant_id == participant_id,
            )
            .options(selectinload(EventParticipant.participant))
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def update(db: AsyncSession, entry: EventParticipant) -> EventParticipant:
        """
        Persist changes to an entry.

        Args:
            db: Database session
            entry: Modified entry

        Returns:
            Refreshed entry
        """
        await db.flush()
        await db.refresh(entry)
        return entry
