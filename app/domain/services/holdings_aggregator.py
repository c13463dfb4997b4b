"""
HOLDINGS AGGREGATOR

Derives per-row and portfolio-wide P&L figures from holding records.

RULES:
- Pure functions, no I/O, no logging
- Full Decimal precision; rounding belongs to the presentation layer
- Missing price or cost fields count as 0 in value and cost terms
- Today's P&L term is 0 unless close, ltp and quantity are all present
- profit/loss is always value - cost
- Never raises on numeric content
"""

from decimal import Decimal
from typing import Iterable, List, Optional

from app.domain.models import (
    HoldingRecord,
    HoldingRow,
    PortfolioSummary,
    PortfolioView,
)


ZERO = Decimal("0")


def _or_zero(value: Optional[Decimal]) -> Decimal:
    return ZERO if value is None else value


def holding_cost(holding: HoldingRecord) -> Decimal:
    """avg_price x quantity, with missing fields as 0."""
    return _or_zero(holding.avg_price) * _or_zero(holding.quantity)


def build_row(holding: HoldingRecord) -> HoldingRow:
    quantity = _or_zero(holding.quantity)
    value = _or_zero(holding.ltp) * quantity

    if holding.close is None or holding.ltp is None:
        todays = ZERO
    else:
        todays = (holding.close - holding.ltp) * quantity

    return HoldingRow(
        holding=holding,
        row_value=value,
        row_profit_loss=value - holding_cost(holding),
        todays_profit_loss=todays,
    )


def _summarize_rows(rows: Iterable[HoldingRow]) -> PortfolioSummary:
    current_value = ZERO
    investment = ZERO
    todays = ZERO

    for row in rows:
        current_value += row.row_value
        investment += holding_cost(row.holding)
        todays += row.todays_profit_loss

    return PortfolioSummary(
        total_profit_loss=current_value - investment,
        total_current_value=current_value,
        total_investment=investment,
        todays_profit_loss=todays,
    )


def summarize(holdings: Iterable[HoldingRecord]) -> PortfolioSummary:
    """Portfolio totals for `holdings`; all zero for an empty sequence."""
    return _summarize_rows(build_row(h) for h in holdings)


def aggregate(holdings: Iterable[HoldingRecord]) -> PortfolioView:
    """Rows in input order, their summary, and the symbols with missing fields."""
    rows: List[HoldingRow] = [build_row(h) for h in holdings]
    return PortfolioView(
        rows=tuple(rows),
        summary=_summarize_rows(rows),
        incomplete_symbols=tuple(r.symbol for r in rows if not r.holding.is_complete),
    )
