"""Settlement schemas"""
from decimal import Decimal, InvalidOperation
from typing import List
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.exceptions import InvalidAmount


class ExpenseRecord(BaseModel):
    """What one participant spent on an event"""

    participant_id: UUID
    display_name: str
    payout_address: str = ""
    amount_spent: Decimal = Field(default=Decimal("0"), allow_inf_nan=True)

    model_config = ConfigDict(frozen=True)

    @field_validator("amount_spent", mode="before")
    @classmethod
    def convert_to_decimal(cls, v):
        """Convert numeric values to Decimal, treating a missing amount as 0"""
        if v is None:
            return Decimal("0")
        if isinstance(v, Decimal):
            return v
        try:
            return Decimal(str(v))
        except InvalidOperation:
            raise InvalidAmount(f"Amount spent is not a number: {v!r}")

    @field_validator("payout_address", mode="before")
    @classmethod
    def default_payout_address(cls, v):
        return v or ""


class Balance(BaseModel):
    """A participant's net position after subtracting the fair share"""

    participant_id: UUID
    display_name: str
    payout_address: str
    amount_spent: Decimal
    fair_share: Decimal
    net_balance: Decimal  # positive = is owed money, negative = owes money

    model_config = ConfigDict(frozen=True)

    @property
    def is_creditor(self) -> bool:
        return self.net_balance > 0


class Transfer(BaseModel):
    """A single payment from a debtor to a creditor"""

    from_id: UUID
    from_name: str
    from_payout_address: str
    to_id: UUID
    to_name: str
    to_payout_address: str
    amount: Decimal

    model_config = ConfigDict(frozen=True)


class ParticipantPosition(BaseModel):
    """One participant's balance together with the payments they take part in"""

    participant_id: UUID
    display_name: str
    payout_address: str
    amount_spent: Decimal
    net_balance: Decimal
    is_receiving: bool
    pays: List[Transfer]
    receives: List[Transfer]


class EventSettlement(BaseModel):
    """Full settlement of an event"""

    event_id: UUID
    participant_count: int
    total_spent: Decimal
    fair_share: Decimal
    positions: List[ParticipantPosition]
    transfers: List[Transfer]
