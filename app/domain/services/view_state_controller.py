"""
VIEW STATE CONTROLLER

Owns the holdings screen state: load phase, holdings and summary panel.

RESPONSIBILITIES:
- Fetch holdings from the data source once per activation
- Apply only the newest load response (generation counter)
- Record panel open/close commands
- Hand out immutable ViewState snapshots

RULES:
- One asyncio event loop, no locking
- Data source failures end in FAILED, never in a propagating exception
- LOADED and FAILED are terminal; no automatic retry
- Stale responses are dropped, in-flight requests are not cancelled
"""

import asyncio
import logging
from dataclasses import replace
from typing import Optional, Set

from app.domain.models import (
    HoldingRecord,
    LoadingPhase,
    PanelState,
    PortfolioView,
    ViewState,
)
from app.domain.schemas.holdings import parse_holdings_payload
from app.domain.services.holdings_aggregator import aggregate
from app.infrastructure.holdings_source.types import HoldingsDataSource

logger = logging.getLogger(__name__)


class ViewStateController:
    """
    State machine for one activation of the holdings screen.

    Initial state is LOADING with the panel CLOSED. Create a new
    controller to start over.
    """

    def __init__(
        self,
        data_source: HoldingsDataSource,
        fetch_timeout: Optional[float] = None,
    ):
        self._source = data_source
        self._fetch_timeout = fetch_timeout
        self._state = ViewState()
        self._generation = 0
        self._tasks: Set[asyncio.Task] = set()

    # ------------------------------------------------------------------
    # READS
    # ------------------------------------------------------------------

    def get_state(self) -> ViewState:
        return self._state

    def get_portfolio(self) -> PortfolioView:
        return aggregate(self._state.holdings)

    @property
    def pending_loads(self) -> int:
        return len(self._tasks)

    # ------------------------------------------------------------------
    # LOADING
    # ------------------------------------------------------------------

    def request_load(self) -> Optional[asyncio.Task]:
        """
        Start one fetch and return its task.

        Returns None without fetching once the load has settled. Must be
        called from a running event loop.
        """
        if self._state.loading_phase != LoadingPhase.LOADING:
            logger.info(
                "Holdings load already %s; ignoring load request",
                self._state.loading_phase.value,
            )
            return None

        self._generation += 1
        generation = self._generation
        self._state = replace(self._state, generation=generation)

        logger.info("Requesting holdings (generation=%d)", generation)
        task = asyncio.create_task(self._load(generation))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _fetch(self):
        if self._fetch_timeout is None:
            return await self._source.fetch_holdings()
        return await asyncio.wait_for(self._source.fetch_holdings(), timeout=self._fetch_timeout)

    async def _load(self, generation: int) -> None:
        try:
            payload = await self._fetch()
            holdings = parse_holdings_payload(payload)
        except Exception as exc:
            self._apply_failure(generation, exc)
            return
        self._apply_success(generation, holdings)

    def _is_current(self, generation: int) -> bool:
        if generation != self._generation or self._state.loading_phase != LoadingPhase.LOADING:
            logger.debug(
                "Discarding stale holdings response (generation=%d, latest=%d)",
                generation,
                self._generation,
            )
            return False
        return True

    def _apply_success(self, generation: int, holdings: tuple[HoldingRecord, ...]) -> None:
        if not self._is_current(generation):
            return

        for holding in holdings:
            if not holding.is_complete:
                logger.warning(
                    "Holding %s is missing %s; counted as 0 in totals",
                    holding.symbol,
                    ", ".join(holding.missing_fields),
                )

        self._state = replace(
            self._state,
            loading_phase=LoadingPhase.LOADED,
            holdings=holdings,
            error=None,
        )
        logger.info("✅ Holdings loaded: %d positions", len(holdings))

    def _apply_failure(self, generation: int, exc: Exception) -> None:
        if not self._is_current(generation):
            return

        reason = str(exc) or type(exc).__name__
        logger.error(f"❌ Failed to fetch holdings: {reason}")
        self._state = replace(
            self._state,
            loading_phase=LoadingPhase.FAILED,
            holdings=(),
            error=reason,
        )

    async def wait_for_load(self) -> ViewState:
        """Wait until no fetch is in flight and return the resulting state."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)
        return self._state

    async def aclose(self) -> None:
        for task in list(self._tasks):
            task.cancel()
        if self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    # ------------------------------------------------------------------
    # PANEL
    # ------------------------------------------------------------------

    def open_panel(self) -> ViewState:
        if not self._state.has_holdings:
            logger.debug("Summary panel opened with no holdings on screen")
        self._state = replace(self._state, panel_state=PanelState.OPEN)
        return self._state

    def close_panel(self) -> ViewState:
        self._state = replace(self._state, panel_state=PanelState.CLOSED)
        return self._state

    def dismiss_panel(self) -> ViewState:
        """Panel swiped away by the user; same outcome as close_panel."""
        logger.debug("Summary panel dismissed by gesture")
        return self.close_panel()
