"""Stock and price history repository protocol."""

from datetime import datetime
from decimal import Decimal
from typing import Protocol, Optional

from tradesim.domain.models import Stock, PriceHistoryEntry


class StockRepository(Protocol):
    """Interface for the price store."""

    def create(self, stock: Stock) -> Stock:
        """Persist a new stock."""
        ...

    def get_by_id(self, stock_id: int) -> Optional[Stock]:
        """Retrieve stock by ID."""
        ...

    def get_by_symbol(self, symbol: str) -> Optional[Stock]:
        """Retrieve stock by symbol."""
        ...

    def list_all(self) -> list[Stock]:
        """List all stocks ordered by ID."""
        ...

    def count(self) -> int:
        """Number of stocks."""
        ...

    def update_price(self, stock_id: int, price: Decimal, at: datetime) -> Stock:
        """Move current price to previous_close and set the new current price."""
        ...

    def add_history(self, entry: PriceHistoryEntry) -> PriceHistoryEntry:
        """Append a price history entry."""
        ...

    def list_history(self, stock_id: int, limit: int) -> list[PriceHistoryEntry]:
        """Price history for a stock, newest first."""
        ...
