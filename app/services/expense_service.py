"""Expense recording logic"""
import logging
from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import InvalidAmount, NotFoundError
from app.models.event_participant import EventParticipant
from app.repositories.event_repository import EventRepository
from app.repositories.expense_repository import ExpenseRepository
from app.schemas.expense import ExpenseInput
from app.services.settlement_service import SettlementService
from app.utils.decimal_utils import MAX_AMOUNT, round_decimal

logger = logging.getLogger(__name__)


class ExpenseService:
    """Service for recording participant spend on events"""

    @staticmethod
    def _append_description(current: Optional[str], extra: Optional[str]) -> Optional[str]:
        """Join spend notes one per line"""
        if not extra:
            return current
        if not current:
            return extra
        return f"{current}\n{extra}"

    @staticmethod
    async def _get_entry(
        db: AsyncSession, event_id: UUID, participant_id: UUID
    ) -> EventParticipant:
        """
        Get the entry to modify.

        Raises:
            NotFoundError: If the event does not exist or the participant is not part of it
        """
        event = await EventRepository.get_by_id(db, event_id)
        if not event:
            raise NotFoundError(f"Event with ID {event_id} not found")

        entry = await ExpenseRepository.get_entry(db, event_id, participant_id)
        if not entry:
            raise NotFoundError(
                f"Participant {participant_id} is not part of event {event_id}"
            )
        return entry

    @staticmethod
    async def _save(db: AsyncSession, entry: EventParticipant) -> EventParticipant:
        updated = await ExpenseRepository.update(db, entry)
        await db.commit()
        await SettlementService.invalidate(entry.event_id)
        return updated

    @staticmethod
    async def add_expense(
        event_id: UUID,
        participant_id: UUID,
        expense_data: ExpenseInput,
        db: AsyncSession
    ) -> EventParticipant:
        """
        Add a new spend on top of what the participant already spent.

        Args:
            event_id: Event ID
            participant_id: Participant ID
            expense_data: Amount and optional note
            db: Database session

        Returns:
            Updated entry

        Raises:
            NotFoundError: If the event or the participant's entry is missing
            InvalidAmount: If the new total does not fit the amount column
        """
        entry = await ExpenseService._get_entry(db, event_id, participant_id)

        new_total = round_decimal((entry.amount_spent or 0) + expense_data.amount)
        if new_total > MAX_AMOUNT:
            raise InvalidAmount(
                f"Total spent by participant {participant_id} would exceed {MAX_AMOUNT}"
            )

        entry.amount_spent = new_total
        entry.description = ExpenseService._append_description(
            entry.description, expense_data.description
        )

        logger.info(
            "Added %s to participant %s on event %s",
            expense_data.amount, participant_id, event_id
        )
        return await ExpenseService._save(db, entry)

    @staticmethod
    async def set_expense(
        event_id: UUID,
        participant_id: UUID,
        expense_data: ExpenseInput,
        db: AsyncSession
    ) -> EventParticipant:
        """
        Replace the participant's recorded spend and note.

        Args:
            event_id: Event ID
            participant_id: Participant ID
            expense_data: New amount and note
            db: Database session

        Returns:
            Updated entry

        Raises:
            NotFoundError: If the event or the participant's entry is missing
        """
        entry = await ExpenseService._get_entry(db, event_id, participant_id)

        entry.amount_spent = round_decimal(expense_data.amount)
        entry.description = expense_data.description

        logger.info(
            "Set spend of participant %s on event %s to %s",
            participant_id, event_id, expense_data.amount
        )
        return await ExpenseService._save(db, entry)
