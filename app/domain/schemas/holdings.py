"""
Holdings payload schema.

Wire shape: {"userHolding": [{"symbol", "quantity", "ltp", "avgPrice", "close"}]}
"""

import logging
from decimal import Decimal
from typing import Any, List, Optional, Set, Tuple
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.domain.models import HoldingRecord, to_decimal

logger = logging.getLogger(__name__)


class UserHoldingSchema(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    symbol: Optional[str] = None
    quantity: Optional[Decimal] = None
    ltp: Optional[Decimal] = None
    avg_price: Optional[Decimal] = Field(default=None, alias="avgPrice")
    close: Optional[Decimal] = None

    @field_validator("quantity", "ltp", "avg_price", "close", mode="before")
    @classmethod
    def _coerce_number(cls, value: Any) -> Optional[Decimal]:
        # unusable numbers become None, never a validation error
        return to_decimal(value)

    @field_validator("symbol", mode="before")
    @classmethod
    def _clean_symbol(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        text = str(value).strip()
        return text or None

    def to_record(self) -> Optional[HoldingRecord]:
        if not self.symbol:
            return None
        return HoldingRecord(
            symbol=self.symbol,
            quantity=self.quantity,
            ltp=self.ltp,
            avg_price=self.avg_price,
            close=self.close,
        )


class HoldingsPayloadSchema(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    user_holding: Optional[List[Any]] = Field(default=None, alias="userHolding")

    @field_validator("user_holding", mode="before")
    @classmethod
    def _list_or_none(cls, value: Any) -> Optional[List[Any]]:
        if value is None or isinstance(value, list):
            return value
        logger.warning("userHolding is not a list (%s); treating as empty", type(value).__name__)
        return None


def parse_holdings_payload(payload: Any) -> Tuple[HoldingRecord, ...]:
    """
    Convert a raw data source payload into holding records.

    A missing payload or missing userHolding means zero holdings.
    Entries without a symbol are dropped, and so are repeated symbols
    after their first occurrence.
    """
    if not isinstance(payload, Mapping):
        if payload is not None:
            logger.warning("Holdings payload is not an object (%s); treating as empty", type(payload).__name__)
        return ()

    entries = HoldingsPayloadSchema.model_validate(dict(payload)).user_holding or []

    records: List[HoldingRecord] = []
    seen: Set[str] = set()
    for index, entry in enumerate(entries):
        if not isinstance(entry, Mapping):
            logger.warning("Skipping holding #%d: not an object", index)
            continue

        record = UserHoldingSchema.model_validate(dict(entry)).to_record()
        if record is None:
            logger.warning("Skipping holding #%d: missing symbol", index)
            continue
        if record.symbol in seen:
            logger.warning("Skipping duplicate holding for %s", record.symbol)
            continue

        seen.add(record.symbol)
        records.append(record)

    return tuple(records)
