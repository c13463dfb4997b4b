"""
Static holdings data source (mock mode and tests).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping, Optional

from app.infrastructure.holdings_source.errors import HoldingsSourceError


class StaticHoldingsSource:
    """Serves a fixed payload, or the contents of a JSON file read on each fetch."""

    def __init__(
        self,
        payload: Optional[Mapping[str, Any]] = None,
        path: Optional[Path] = None,
    ):
        if payload is not None and path is not None:
            raise ValueError("Pass either payload or path, not both")
        self._payload = payload
        self._path = Path(path) if path is not None else None

    async def fetch_holdings(self) -> Optional[Mapping[str, Any]]:
        if self._path is None:
            return self._payload

        try:
            with open(self._path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            raise HoldingsSourceError(f"Cannot read holdings fixture {self._path}: {exc}") from exc
