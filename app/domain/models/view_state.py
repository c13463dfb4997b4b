"""
Domain Models - View State
Snapshot of the holdings screen as seen by readers
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from app.domain.models.holding import HoldingRecord


class LoadingPhase(str, Enum):
    """Progress of the holdings load"""
    LOADING = "LOADING"
    LOADED = "LOADED"
    FAILED = "FAILED"


class PanelState(str, Enum):
    """Visibility of the summary panel"""
    CLOSED = "CLOSED"
    OPEN = "OPEN"


@dataclass(frozen=True)
class ViewState:
    """
    Immutable snapshot handed out by the view state controller.

    `generation` is the id of the most recent load request and `error`
    describes the last data source failure.
    """
    loading_phase: LoadingPhase = LoadingPhase.LOADING
    holdings: Tuple[HoldingRecord, ...] = ()
    panel_state: PanelState = PanelState.CLOSED
    generation: int = 0
    error: Optional[str] = None

    @property
    def is_loading(self) -> bool:
        return self.loading_phase == LoadingPhase.LOADING

    @property
    def has_holdings(self) -> bool:
        return self.loading_phase == LoadingPhase.LOADED and bool(self.holdings)

    @property
    def panel_visible(self) -> bool:
        """The panel is only shown once holdings are on screen."""
        return self.panel_state == PanelState.OPEN and self.has_holdings
