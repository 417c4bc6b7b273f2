"""Settlement computation: ledger, solver and presentation"""

from app.services.settlement.ledger import build_balances, summarize
from app.services.settlement.presentation import (build_positions,
                                                  to_display_list)
from app.services.settlement.solver import settle

__all__ = [
    "build_balances",
    "summarize",
    "settle",
    "to_display_list",
    "build_positions",
]
