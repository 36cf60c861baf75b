"""Read access to the price store."""

from tradesim.core.exceptions import NotFoundError
from tradesim.domain.models import Stock, PriceHistoryEntry
from tradesim.repositories.protocols import UnitOfWork


class StockService:
    """Service for browsing stocks and their price history."""

    def __init__(self, uow: UnitOfWork):
        self._uow = uow

    def list_stocks(self) -> list[Stock]:
        return self._uow.stocks.list_all()

    def get_stock(self, stock_id: int) -> Stock:
        """Get stock by ID."""
        stock = self._uow.stocks.get_by_id(stock_id)
        if not stock:
            raise NotFoundError("Stock", str(stock_id))
        return stock

    def get_price_history(self, stock_id: int, limit: int = 100) -> list[PriceHistoryEntry]:
        """Newest-first price history; empty for an unknown stock."""
        return self._uow.stocks.list_history(stock_id, limit)
