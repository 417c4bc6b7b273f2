"""Settlement solver: balances to a short list of transfers"""

import logging
from decimal import Decimal
from typing import List, Sequence, Tuple

from app.core.exceptions import BalanceInvariantViolation
from app.schemas.settlement import Balance, Transfer
from app.services.settlement.presentation import to_display_list
from app.utils.decimal_utils import (SETTLEMENT_EPSILON, is_settled,
                                     round_decimal, sum_decimals)

logger = logging.getLogger(__name__)


def _settlement_order(balance: Balance) -> Tuple[Decimal, str, str]:
    """Largest creditor first, largest debtor last, ties by name then id"""
    return (-balance.net_balance, balance.display_name, str(balance.participant_id))


def _check_zero_sum(balances: Sequence[Balance]) -> None:
    """
    Raises:
        BalanceInvariantViolation: If the balances are off by more than a cent
    """
    drift = sum_decimals([balance.net_balance for balance in balances])
    if abs(drift) > SETTLEMENT_EPSILON:
        raise BalanceInvariantViolation(
            f"Balances sum to {drift} instead of 0",
            details={"drift": str(drift)},
        )


def settle(balances: Sequence[Balance]) -> List[Transfer]:
    """
    Compute the payments that bring every balance to zero.

    Greedy two-pointer sweep: the largest remaining creditor is paid by the
    largest remaining debtor, for as much as the smaller of the two
    positions allows. Every payment closes at least one position, so there
    are never more than ``len(balances) - 1`` transfers.

    Working values keep full precision; amounts are rounded to cents only
    when a transfer is emitted. The input balances are not modified.

    Args:
        balances: Balances produced by the ledger builder

    Returns:
        Transfers sorted by debtor name

    Raises:
        BalanceInvariantViolation: If the balances do not sum to zero
    """
    if not balances:
        return []

    _check_zero_sum(balances)

    ordered = sorted(balances, key=_settlement_order)
    remaining = [balance.net_balance for balance in ordered]
    transfers: List[Transfer] = []

    i = 0
    j = len(ordered) - 1
    while i < j:
        if is_settled(remaining[i]):
            i += 1
            continue
        if is_settled(remaining[j]):
            j -= 1
            continue

        amount = min(remaining[i], -remaining[j])
        if amount <= 0:
            # Creditor and debtor cursors crossed signs; nothing left to pair
            logger.debug("Settlement stopped with i=%d j=%d, no progress", i, j)
            break

        creditor = ordered[i]
        debtor = ordered[j]
        transfers.append(
            Transfer(
                from_id=debtor.participant_id,
                from_name=debtor.display_name,
                from_payout_address=debtor.payout_address,
                to_id=creditor.participant_id,
                to_name=creditor.display_name,
                to_payout_address=creditor.payout_address,
                amount=round_decimal(amount),
            )
        )

        remaining[i] -= amount
        remaining[j] += amount

        if is_settled(remaining[i]):
            i += 1
        if is_settled(remaining[j]):
            j -= 1

    logger.debug(
        "Settled %d balances with %d transfers", len(balances), len(transfers)
    )
    return to_display_list(transfers)
