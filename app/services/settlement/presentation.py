"""Presentation mapping for transfers"""

from typing import List, Sequence

from app.schemas.settlement import Balance, ParticipantPosition, Transfer
from app.utils.decimal_utils import round_decimal


def to_display_list(transfers: Sequence[Transfer]) -> List[Transfer]:
    """
    Order transfers for display.

    Sorted by debtor name. The sort is stable, so transfers from the same
    debtor keep their computation order and sorting twice changes nothing.

    Args:
        transfers: Transfers in any order

    Returns:
        New list of transfers sorted by debtor name
    """
    return sorted(transfers, key=lambda transfer: transfer.from_name)


def build_positions(
    balances: Sequence[Balance], transfers: Sequence[Transfer]
) -> List[ParticipantPosition]:
    """
    Attach to each participant the payments they make and receive.

    Args:
        balances: Balances from the ledger builder
        transfers: Transfers from the solver

    Returns:
        One position per participant, sorted by name
    """
    positions = []
    for balance in sorted(balances, key=lambda b: b.display_name):
        pays = [t for t in transfers if t.from_id == balance.participant_id]
        receives = [t for t in transfers if t.to_id == balance.participant_id]
        positions.append(
            ParticipantPosition(
                participant_id=balance.participant_id,
                display_name=balance.display_name,
                payout_address=balance.payout_address,
                amount_spent=round_decimal(balance.amount_spent),
                net_balance=round_decimal(balance.net_balance),
                is_receiving=balance.is_creditor,
                pays=pays,
                receives=receives,
            )
        )

    return positions
