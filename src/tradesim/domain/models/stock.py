"""Stock (instrument) and price history domain models."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass
class Stock:
    """
    A tradable simulated stock.

    current_price is always > 0; previous_close holds the price
    immediately before the last simulator tick.
    """

    stock_id: Optional[int]
    symbol: str
    name: str
    current_price: Decimal
    previous_close: Decimal
    updated_at: Optional[datetime] = field(default=None)

    @property
    def change(self) -> Decimal:
        return self.current_price - self.previous_close

    @property
    def change_percentage(self) -> Decimal:
        if self.previous_close == 0:
            return Decimal("0")
        return self.change / self.previous_close * 100


@dataclass
class PriceHistoryEntry:
    """Append-only price observation for a stock."""

    entry_id: Optional[int]
    stock_id: int
    price: Decimal
    timestamp: datetime
