"""Expense schemas"""

from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.utils.decimal_utils import MAX_AMOUNT


class ExpenseInput(BaseModel):
    """Input schema for recording what a participant spent"""

    amount: Decimal = Field(..., ge=0, le=MAX_AMOUNT)
    description: Optional[str] = Field(default=None, max_length=500)

    @field_validator("amount", mode="before")
    @classmethod
    def convert_to_decimal(cls, v):
        """Convert numeric values to Decimal"""
        if v is None:
            return v
        try:
            return Decimal(str(v))
        except InvalidOperation:
            raise ValueError(f"Amount is not a number: {v!r}")


class ExpenseEntryResponse(BaseModel):
    """A participant's recorded spend for an event"""

    event_id: UUID
    participant_id: UUID
    amount_spent: Decimal
    description: Optional[str] = None
    confirmed: bool
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
