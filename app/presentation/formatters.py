"""
Presentation formatting for the holdings screen.

Rounds to two decimals and prefixes the currency symbol. Domain values
arrive at full precision; this is the only place they are rounded.
"""

from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import List, Optional

from app.domain.models import HoldingRow, PortfolioSummary, PortfolioView, ViewState

CENTS = Decimal("0.01")
NOT_AVAILABLE = "N/A"


def _to_cents(value: Decimal) -> Decimal:
    # room for every integer digit plus the two decimals
    with localcontext() as ctx:
        ctx.prec = max(28, value.adjusted() + 3)
        return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def format_currency(value: Optional[Decimal], symbol: str = "₹") -> str:
    if value is None:
        return NOT_AVAILABLE
    amount = _to_cents(value)
    if amount == 0:
        # avoid "-0.00"
        amount = abs(amount)
    return f"{symbol}{amount}"


def format_quantity(value: Optional[Decimal]) -> str:
    if value is None:
        return NOT_AVAILABLE
    return format(value.normalize(), "f")


def render_row(row: HoldingRow, currency: str = "₹") -> str:
    holding = row.holding
    return (
        f"{holding.symbol}  {format_currency(holding.ltp, currency)}\n"
        f"Qty: {format_quantity(holding.quantity)}\n"
        f"Total Value: {format_currency(row.row_value, currency)}  "
        f"P&L: {format_currency(row.row_profit_loss, currency)}"
    )


def render_summary_button(summary: PortfolioSummary, currency: str = "₹") -> str:
    return f"Total P&L: {format_currency(summary.total_profit_loss, currency)}"


def render_summary_panel(summary: PortfolioSummary, currency: str = "₹") -> str:
    return (
        f"Current Value: {format_currency(summary.total_current_value, currency)}\n"
        f"Total Investment: {format_currency(summary.total_investment, currency)}\n"
        f"Today's P&L: {format_currency(summary.todays_profit_loss, currency)}\n"
        f"{render_summary_button(summary, currency)}"
    )


def render_screen(state: ViewState, view: PortfolioView, currency: str = "₹") -> str:
    """Plain-text rendering of the whole holdings screen."""
    parts: List[str] = ["My Holdings"]

    if state.is_loading:
        parts.append("Please Wait...")
    elif not state.has_holdings:
        parts.append("No data available")
    else:
        parts.extend(render_row(row, currency) for row in view.rows)
        parts.append(render_summary_button(view.summary, currency))
        if state.panel_visible:
            parts.append(render_summary_panel(view.summary, currency))

    return "\n\n".join(parts)


def round_amount(value: Optional[Decimal]) -> Optional[float]:
    """Two-decimal float for JSON output."""
    if value is None:
        return None
    return float(_to_cents(value))
