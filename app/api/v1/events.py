"""Event settlement endpoints"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.settlement import EventSettlement
from app.services.settlement_service import SettlementService

router = APIRouter(prefix="/events", tags=["Events"])


@router.get("/{event_id}/settlement", response_model=EventSettlement)
async def get_event_settlement(
    event_id: UUID,
    use_cache: bool = Query(True, description="Serve a cached result when available"),
    db: AsyncSession = Depends(get_db),
):
    """
    Get who owes whom for an event.

    Returns the total spent, the fair share per participant, each
    participant's balance with the payments they make or receive, and the
    full list of transfers that settles the event, sorted by payer name.

    Args:
        event_id: Event ID
        use_cache: Whether to use the cached settlement
        db: Database session

    Returns:
        Settlement of the event

    Raises:
        404: If the event doesn't exist
        400: If a recorded spend is invalid
    """
    return await SettlementService.get_event_settlement(event_id, db, use_cache=use_cache)
