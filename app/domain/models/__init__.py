"""
Domain Models Package
Export all domain entities
"""

from .holding import HoldingRecord, to_decimal
from .portfolio import HoldingRow, PortfolioSummary, PortfolioView
from .view_state import LoadingPhase, PanelState, ViewState

__all__ = [
    # Enums
    "LoadingPhase",
    "PanelState",

    # Entities
    "HoldingRecord",
    "HoldingRow",
    "PortfolioSummary",
    "PortfolioView",
    "ViewState",

    # Helpers
    "to_decimal",
]
