"""
Holdings API Routes
Holdings list, portfolio summary and summary panel commands
"""

import logging
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from app.config import settings
from app.domain.models import HoldingRow, PortfolioSummary, ViewState
from app.domain.services.view_state_controller import ViewStateController
from app.presentation.formatters import (
    format_currency,
    format_quantity,
    render_screen,
    round_amount,
)

logger = logging.getLogger(__name__)
router = APIRouter()


def get_controller(request: Request) -> ViewStateController:
    controller = getattr(request.app.state, "holdings_controller", None)
    if controller is None:
        raise HTTPException(status_code=503, detail="Holdings screen is not initialised")
    return controller


# Response models
class HoldingRowResponse(BaseModel):
    symbol: str
    quantity: Optional[float]
    ltp: Optional[float]
    avg_price: Optional[float]
    close: Optional[float]
    current_value: float
    pnl: float
    todays_pnl: float
    missing_fields: List[str]
    display: Dict[str, str]


class PortfolioSummaryResponse(BaseModel):
    total_profit_loss: float
    total_current_value: float
    total_investment: float
    todays_profit_loss: float
    total_profit_loss_pct: float
    display: Dict[str, str]


class HoldingsScreenResponse(BaseModel):
    loading_phase: str
    panel_state: str
    panel_visible: bool
    error: Optional[str]
    holdings: List[HoldingRowResponse]
    summary: PortfolioSummaryResponse


class PanelResponse(BaseModel):
    panel_state: str
    panel_visible: bool


class LoadResponse(BaseModel):
    requested: bool
    loading_phase: str
    generation: int


def _row_response(row: HoldingRow) -> HoldingRowResponse:
    holding = row.holding
    currency = settings.CURRENCY_SYMBOL
    return HoldingRowResponse(
        symbol=holding.symbol,
        quantity=float(holding.quantity) if holding.quantity is not None else None,
        ltp=round_amount(holding.ltp),
        avg_price=round_amount(holding.avg_price),
        close=round_amount(holding.close),
        current_value=round_amount(row.row_value),
        pnl=round_amount(row.row_profit_loss),
        todays_pnl=round_amount(row.todays_profit_loss),
        missing_fields=list(holding.missing_fields),
        display={
            "ltp": format_currency(holding.ltp, currency),
            "quantity": format_quantity(holding.quantity),
            "current_value": format_currency(row.row_value, currency),
            "pnl": format_currency(row.row_profit_loss, currency),
        },
    )


def _summary_response(summary: PortfolioSummary) -> PortfolioSummaryResponse:
    currency = settings.CURRENCY_SYMBOL
    return PortfolioSummaryResponse(
        total_profit_loss=round_amount(summary.total_profit_loss),
        total_current_value=round_amount(summary.total_current_value),
        total_investment=round_amount(summary.total_investment),
        todays_profit_loss=round_amount(summary.todays_profit_loss),
        total_profit_loss_pct=round_amount(summary.total_profit_loss_pct),
        display={
            "total_profit_loss": format_currency(summary.total_profit_loss, currency),
            "total_current_value": format_currency(summary.total_current_value, currency),
            "total_investment": format_currency(summary.total_investment, currency),
            "todays_profit_loss": format_currency(summary.todays_profit_loss, currency),
        },
    )


def _panel_response(state: ViewState) -> PanelResponse:
    return PanelResponse(
        panel_state=state.panel_state.value,
        panel_visible=state.panel_visible,
    )


@router.get("", response_model=HoldingsScreenResponse)
async def get_holdings(controller: ViewStateController = Depends(get_controller)):
    state = controller.get_state()
    view = controller.get_portfolio()
    return HoldingsScreenResponse(
        loading_phase=state.loading_phase.value,
        panel_state=state.panel_state.value,
        panel_visible=state.panel_visible,
        error=state.error,
        holdings=[_row_response(row) for row in view.rows],
        summary=_summary_response(view.summary),
    )


@router.get("/screen", response_class=PlainTextResponse)
async def get_holdings_screen(controller: ViewStateController = Depends(get_controller)):
    return render_screen(
        controller.get_state(),
        controller.get_portfolio(),
        currency=settings.CURRENCY_SYMBOL,
    )


@router.post("/load", response_model=LoadResponse)
async def request_load(controller: ViewStateController = Depends(get_controller)):
    task = controller.request_load()
    state = controller.get_state()
    return LoadResponse(
        requested=task is not None,
        loading_phase=state.loading_phase.value,
        generation=state.generation,
    )


@router.post("/panel/open", response_model=PanelResponse)
async def open_panel(controller: ViewStateController = Depends(get_controller)):
    return _panel_response(controller.open_panel())


@router.post("/panel/close", response_model=PanelResponse)
async def close_panel(controller: ViewStateController = Depends(get_controller)):
    return _panel_response(controller.close_panel())


@router.post("/panel/dismiss", response_model=PanelResponse)
async def dismiss_panel(controller: ViewStateController = Depends(get_controller)):
    return _panel_response(controller.dismiss_panel())
