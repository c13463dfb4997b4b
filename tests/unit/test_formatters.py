from decimal import Decimal

import pytest

from app.domain.models import HoldingRecord, LoadingPhase, PanelState, ViewState
from app.domain.services.holdings_aggregator import aggregate, build_row
from app.presentation.formatters import (
    format_currency,
    format_quantity,
    render_row,
    render_screen,
    render_summary_panel,
    round_amount,
)


HOLDING = HoldingRecord.create("X", quantity=10, ltp=150, avg_price=100, close=145)


@pytest.mark.unit
@pytest.mark.parametrize(
    "value,expected",
    [
        (Decimal("1500"), "₹1500.00"),
        (Decimal("-50"), "₹-50.00"),
        (Decimal("2.345"), "₹2.35"),
        (Decimal("-0.001"), "₹0.00"),
        (Decimal("-0"), "₹0.00"),
        (None, "N/A"),
    ],
)
def test_format_currency(value, expected):
    assert format_currency(value) == expected


@pytest.mark.unit
def test_format_currency_symbol():
    assert format_currency(Decimal("1"), symbol="$") == "$1.00"


@pytest.mark.unit
def test_format_quantity():
    assert format_quantity(Decimal("10")) == "10"
    assert format_quantity(Decimal("100")) == "100"
    assert format_quantity(Decimal("10.50")) == "10.5"
    assert format_quantity(Decimal("-3")) == "-3"
    assert format_quantity(None) == "N/A"


@pytest.mark.unit
def test_round_amount():
    assert round_amount(Decimal("477.555")) == 477.56
    assert round_amount(None) is None


@pytest.mark.unit
def test_render_row():
    assert render_row(build_row(HOLDING)) == (
        "X  ₹150.00\n"
        "Qty: 10\n"
        "Total Value: ₹1500.00  P&L: ₹500.00"
    )


@pytest.mark.unit
def test_render_row_with_missing_ltp():
    row = build_row(HoldingRecord.create("M", quantity=1, ltp=None, avg_price=5, close=4))

    assert render_row(row).startswith("M  N/A\n")


@pytest.mark.unit
def test_render_summary_panel():
    text = render_summary_panel(aggregate([HOLDING]).summary)

    assert text == (
        "Current Value: ₹1500.00\n"
        "Total Investment: ₹1000.00\n"
        "Today's P&L: ₹-50.00\n"
        "Total P&L: ₹500.00"
    )


@pytest.mark.unit
def test_render_screen_while_loading():
    text = render_screen(ViewState(), aggregate([]))

    assert text == "My Holdings\n\nPlease Wait..."


@pytest.mark.unit
@pytest.mark.parametrize("phase", [LoadingPhase.FAILED, LoadingPhase.LOADED])
def test_render_screen_without_holdings(phase):
    state = ViewState(loading_phase=phase, panel_state=PanelState.OPEN)

    text = render_screen(state, aggregate([]))

    assert "No data available" in text
    assert "Current Value" not in text


@pytest.mark.unit
def test_render_screen_panel_toggle():
    view = aggregate([HOLDING])
    closed = ViewState(loading_phase=LoadingPhase.LOADED, holdings=(HOLDING,))
    opened = ViewState(loading_phase=LoadingPhase.LOADED, holdings=(HOLDING,), panel_state=PanelState.OPEN)

    closed_text = render_screen(closed, view)
    assert "Total P&L: ₹500.00" in closed_text
    assert "Current Value" not in closed_text

    opened_text = render_screen(opened, view)
    assert "Current Value: ₹1500.00" in opened_text
    assert "Today's P&L: ₹-50.00" in opened_text


@pytest.mark.unit
def test_large_amounts_keep_every_digit():
    assert format_currency(Decimal("1e30")) == "₹1000000000000000000000000000000.00"
    assert format_currency(Decimal("-123456789012345678901234567890.125")) == "₹-123456789012345678901234567890.13"
    assert round_amount(Decimal("1e30")) == 1e30


@pytest.mark.unit
def test_render_row_with_large_price():
    row = build_row(HoldingRecord.create("BIG", quantity=2, ltp=1e30, avg_price=1, close=1e30))

    text = render_row(row)

    assert text.startswith("BIG  ₹1000000000000000000000000000000.00\n")
    assert "Total Value: ₹2000000000000000000000000000000.00" in text
