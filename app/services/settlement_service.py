"""Event settlement orchestration"""

import logging
from decimal import Decimal
from typing import List
from uuid import UUID

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.core.exceptions import NotFoundError
from app.repositories.event_repository import EventRepository
from app.repositories.expense_repository import ExpenseRepository
from app.schemas.settlement import EventSettlement, ExpenseRecord
from app.services.cache_service import CacheService
from app.services.settlement import build_balances, build_positions, settle
from app.utils.decimal_utils import round_decimal, sum_decimals

logger = logging.getLogger(__name__)

settings = get_settings()


class SettlementService:
    """Service for settling an event's expenses"""

    @staticmethod
    def _version_key(event_id: UUID) -> str:
        return f"settlement-version:{event_id}"

    @staticmethod
    def _cache_key(event_id: UUID, version: int) -> str:
        return f"settlement:{event_id}:v{version}"

    @staticmethod
    def compute(event_id: UUID, records: List[ExpenseRecord]) -> EventSettlement:
        """
        Settle a spend snapshot.

        Args:
            event_id: Event the records belong to
            records: One spend record per participant

        Returns:
            EventSettlement with totals, per-participant positions and transfers

        Raises:
            InvalidAmount: If a spend value is invalid
            BalanceInvariantViolation: If the computed balances do not sum to zero
        """
        balances = build_balances(records)
        total_spent = sum_decimals([balance.amount_spent for balance in balances])
        fair_share = balances[0].fair_share if balances else Decimal("0")
        transfers = settle(balances)

        return EventSettlement(
            event_id=event_id,
            participant_count=len(records),
            total_spent=round_decimal(total_spent),
            fair_share=round_decimal(fair_share),
            positions=build_positions(balances, transfers),
            transfers=transfers,
        )

    @staticmethod
    async def get_event_settlement(
        event_id: UUID, db: AsyncSession, use_cache: bool = True
    ) -> EventSettlement:
        """
        Get the settlement of an event.

        Args:
            event_id: Event ID
            db: Database session
            use_cache: Whether to use cache (default: True)

        Returns:
            EventSettlement for the current expenses of the event

        Raises:
            NotFoundError: If the event does not exist
        """
        if use_cache:
            # Read the version before the snapshot so a result computed from
            # data older than a concurrent write lands under a retired key
            version = await CacheService.get_counter(
                SettlementService._version_key(event_id)
            )
            cache_key = SettlementService._cache_key(event_id, version)
            cached_data = await CacheService.get(cache_key)
            if cached_data:
                try:
                    return EventSettlement.model_validate_json(cached_data)
                except PydanticValidationError:
                    logger.warning("Discarding unreadable cached settlement for %s", event_id)

        event = await EventRepository.get_by_id(db, event_id)
        if not event:
            raise NotFoundError(f"Event with ID {event_id} not found")

        records = await ExpenseRepository.load_expenses(db, event_id)
        settlement = SettlementService.compute(event_id, records)
        logger.info(
            "Computed settlement for event %s: %d participants, %d transfers",
            event_id,
            settlement.participant_count,
            len(settlement.transfers),
        )

        if use_cache:
            await CacheService.set(
                cache_key,
                settlement.model_dump_json(),
                ttl=settings.settlement_cache_ttl,
            )

        return settlement

    @staticmethod
    async def invalidate(event_id: UUID) -> bool:
        """
        Retire the cached settlement of an event.

        Bumps the event's cache version, so every settlement cached so far,
        and any still being computed from an older snapshot, is never read
        again. Retired entries expire with their TTL.

        Args:
            event_id: Event ID

        Returns:
            True if successful
        """
        return await CacheService.incr(SettlementService._version_key(event_id))
