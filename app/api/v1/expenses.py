"""Expense endpoints"""
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.expense import ExpenseEntryResponse, ExpenseInput
from app.services.expense_service import ExpenseService

router = APIRouter(
    prefix="/events/{event_id}/participants/{participant_id}/expenses",
    tags=["Expenses"],
)


@router.post("", response_model=ExpenseEntryResponse)
async def add_expense(
    event_id: UUID,
    participant_id: UUID,
    expense_data: ExpenseInput,
    db: AsyncSession = Depends(get_db),
):
    """
    Add a spend to a participant's total for the event.

    The amount is added to what the participant already spent and the
    description is appended as a new line.

    Raises:
        422: If the amount is missing or negative
        404: If the event or participant entry doesn't exist
    """
    entry = await ExpenseService.add_expense(event_id, participant_id, expense_data, db)
    return ExpenseEntryResponse.model_validate(entry)


@router.put("", response_model=ExpenseEntryResponse)
async def set_expense(
    event_id: UUID,
    participant_id: UUID,
    expense_data: ExpenseInput,
    db: AsyncSession = Depends(get_db),
):
    """
    Replace a participant's recorded spend and description.

    Raises:
        422: If the amount is missing or negative
        404: If the event or participant entry doesn't exist
    """
    entry = await ExpenseService.set_expense(event_id, participant_id, expense_data, db)
    return ExpenseEntryResponse.model_validate(entry)
