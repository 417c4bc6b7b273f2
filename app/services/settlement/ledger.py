"""Ledger builder: spend records to per-participant balances"""

from decimal import Decimal
from typing import List, Sequence, Tuple

from app.core.exceptions import InvalidAmount, ValidationError
from app.schemas.settlement import Balance, ExpenseRecord
from app.utils.decimal_utils import MAX_AMOUNT, sum_decimals


def _validate_records(records: Sequence[ExpenseRecord]) -> None:
    """
    Check every record before any arithmetic happens.

    Raises:
        InvalidAmount: If a spend is negative, not finite or too large
        ValidationError: If a participant appears twice
    """
    seen = set()
    for record in records:
        amount = record.amount_spent
        if not amount.is_finite():
            raise InvalidAmount(
                f"Amount spent by {record.display_name} is not a finite number",
                details={"participant_id": str(record.participant_id)},
            )
        if amount < 0:
            raise InvalidAmount(
                f"Amount spent by {record.display_name} cannot be negative ({amount})",
                details={"participant_id": str(record.participant_id)},
            )
        if amount > MAX_AMOUNT:
            raise InvalidAmount(
                f"Amount spent by {record.display_name} exceeds {MAX_AMOUNT}",
                details={"participant_id": str(record.participant_id)},
            )
        if record.participant_id in seen:
            raise ValidationError(
                f"Participant {record.participant_id} appears more than once"
            )
        seen.add(record.participant_id)


def summarize(records: Sequence[ExpenseRecord]) -> Tuple[Decimal, Decimal]:
    """
    Compute the event totals.

    Args:
        records: Spend records, one per participant

    Returns:
        Tuple of (total spent, fair share per participant). Both are 0
        for an empty list. Neither value is rounded.
    """
    _validate_records(records)

    total_spent = sum_decimals([record.amount_spent for record in records])
    if not records:
        return total_spent, Decimal("0")

    return total_spent, total_spent / len(records)


def build_balances(records: Sequence[ExpenseRecord]) -> List[Balance]:
    """
    Turn spend records into balances.

    Each participant owes the same fair share of the total. Whatever they
    spent above it is owed back to them (positive net balance), whatever
    they spent below it they owe (negative net balance).

    Args:
        records: Spend records, one per participant

    Returns:
        One Balance per record, in input order

    Raises:
        InvalidAmount: If a spend is negative, not finite or too large
        ValidationError: If a participant appears twice
    """
    _, fair_share = summarize(records)

    return [
        Balance(
            participant_id=record.participant_id,
            display_name=record.display_name,
            payout_address=record.payout_address,
            amount_spent=record.amount_spent,
            fair_share=fair_share,
            net_balance=record.amount_spent - fair_share,
        )
        for record in records
    ]
