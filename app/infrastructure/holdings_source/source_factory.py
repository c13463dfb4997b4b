"""
Holdings data source factory (config-driven).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from app.config import Settings, settings as default_settings
from app.infrastructure.holdings_source.http_source import HttpHoldingsSource
from app.infrastructure.holdings_source.static_source import StaticHoldingsSource
from app.infrastructure.holdings_source.types import HoldingsDataSource

logger = logging.getLogger(__name__)


def get_holdings_source(config: Optional[Settings] = None) -> HoldingsDataSource:
    config = config or default_settings
    name = config.HOLDINGS_SOURCE.lower()

    if name == "static":
        if not config.HOLDINGS_FIXTURE_PATH:
            raise ValueError("HOLDINGS_FIXTURE_PATH is required for the static holdings source")
        path = Path(config.HOLDINGS_FIXTURE_PATH)
        logger.info("Using static holdings source: %s", path)
        return StaticHoldingsSource(path=path)

    logger.info("Using HTTP holdings source: %s", config.HOLDINGS_API_URL)
    return HttpHoldingsSource(
        url=config.HOLDINGS_API_URL,
        timeout_seconds=config.HOLDINGS_FETCH_TIMEOUT_SECONDS,
        token=config.HOLDINGS_API_TOKEN,
    )
