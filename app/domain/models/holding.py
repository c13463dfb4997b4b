"""
DOMAIN MODELS — HOLDING

Immutable holding record as delivered by the holdings data source.
No network access. No arithmetic beyond field inspection.
"""

import math
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Optional, Tuple


NUMERIC_FIELDS = ("quantity", "ltp", "avg_price", "close")


def to_decimal(value: Any) -> Optional[Decimal]:
    """
    Coerce a raw payload value into a finite Decimal.

    Returns None for missing, non-numeric, NaN and infinite values, and for
    magnitudes a double cannot hold (e.g. "1e999999").
    Booleans are rejected even though they are ints in Python.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except (InvalidOperation, ValueError):
            return None
    if not result.is_finite() or not math.isfinite(float(result)):
        return None
    return result


@dataclass(frozen=True)
class HoldingRecord:
    """
    One portfolio position identified by its symbol.

    Numeric fields are None when the source did not provide a usable value.
    Quantity may be zero or negative (short position).
    """
    symbol: str
    quantity: Optional[Decimal]
    ltp: Optional[Decimal]
    avg_price: Optional[Decimal]
    close: Optional[Decimal]

    def __post_init__(self) -> None:
        if not self.symbol:
            raise ValueError("HoldingRecord.symbol must be non-empty")
        for name in NUMERIC_FIELDS:
            object.__setattr__(self, name, to_decimal(getattr(self, name)))

    @property
    def missing_fields(self) -> Tuple[str, ...]:
        return tuple(name for name in NUMERIC_FIELDS if getattr(self, name) is None)

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields

    @classmethod
    def create(
        cls,
        symbol: str,
        quantity: Any = None,
        ltp: Any = None,
        avg_price: Any = None,
        close: Any = None,
    ) -> "HoldingRecord":
        """Build a record from loose values (ints, floats, strings)."""
        return cls(
            symbol=symbol,
            quantity=to_decimal(quantity),
            ltp=to_decimal(ltp),
            avg_price=to_decimal(avg_price),
            close=to_decimal(close),
        )
