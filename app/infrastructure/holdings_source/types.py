"""
Holdings data source protocol for type hints.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol


class HoldingsDataSource(Protocol):
    async def fetch_holdings(self) -> Optional[Mapping[str, Any]]:
        ...
