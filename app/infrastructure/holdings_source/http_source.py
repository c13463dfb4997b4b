"""
HTTP holdings data source.
Single GET against the holdings endpoint; no retries.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping, Optional

import httpx

from app.infrastructure.holdings_source.errors import HoldingsSourceError

logger = logging.getLogger(__name__)


class HttpHoldingsSource:
    def __init__(
        self,
        url: str,
        timeout_seconds: float = 10.0,
        token: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not url:
            raise ValueError("Holdings API URL is required")
        self.url = url
        self.timeout_seconds = timeout_seconds
        self.token = (token or "").strip() or None
        self._transport = transport

    def _headers(self) -> dict:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def fetch_holdings(self) -> Optional[Mapping[str, Any]]:
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.get(self.url, headers=self._headers())
        except httpx.HTTPError as exc:
            raise HoldingsSourceError(f"Holdings request failed: {exc}") from exc

        if response.status_code != 200:
            logger.debug(f"Holdings API {response.status_code}: {response.text}")
            raise HoldingsSourceError(
                f"Holdings API returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        if not response.content:
            return None

        try:
            return response.json()
        except json.JSONDecodeError as exc:
            raise HoldingsSourceError("Holdings API returned invalid JSON") from exc
