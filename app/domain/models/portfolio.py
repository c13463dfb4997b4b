"""
DOMAIN MODELS — PORTFOLIO & PnL

Immutable structures derived from a sequence of holdings.
Never stored. Recomputed on every read.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Tuple

from app.domain.models.holding import HoldingRecord


ZERO = Decimal("0")


@dataclass(frozen=True)
class HoldingRow:
    """
    Derived figures for a single holding.
    """
    holding: HoldingRecord
    row_value: Decimal
    row_profit_loss: Decimal
    todays_profit_loss: Decimal

    @property
    def symbol(self) -> str:
        return self.holding.symbol


@dataclass(frozen=True)
class PortfolioSummary:
    """
    Portfolio-wide totals at full precision.
    """
    total_profit_loss: Decimal = ZERO
    total_current_value: Decimal = ZERO
    total_investment: Decimal = ZERO
    todays_profit_loss: Decimal = ZERO

    @property
    def total_profit_loss_pct(self) -> Decimal:
        if self.total_investment == 0:
            return ZERO
        return (self.total_profit_loss / self.total_investment) * 100


@dataclass(frozen=True)
class PortfolioView:
    """
    Rows plus summary for one holdings sequence.
    """
    rows: Tuple[HoldingRow, ...] = ()
    summary: PortfolioSummary = field(default_factory=PortfolioSummary)
    incomplete_symbols: Tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.rows
