"""SQLAlchemy implementation of StockRepository."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

from tradesim.core.timezone import to_utc
from tradesim.domain.models import Stock, PriceHistoryEntry
from tradesim.repositories.sqlalchemy.orm_models import StockORM, PriceHistoryORM


class SqlAlchemyStockRepository:
    """SQLAlchemy-backed price store."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, stock: Stock) -> Stock:
        """Stage a new stock; the ID is assigned on flush."""
        orm_stock = StockORM(
            symbol=stock.symbol,
            name=stock.name,
            current_price=stock.current_price,
            previous_close=stock.previous_close,
            updated_at=stock.updated_at,
        )
        self._db.add(orm_stock)
        self._db.flush()
        return self._to_domain(orm_stock)

    def get_by_id(self, stock_id: int) -> Optional[Stock]:
        """Retrieve stock by ID."""
        orm_stock = self._db.query(StockORM).filter(StockORM.id == stock_id).first()
        return self._to_domain(orm_stock) if orm_stock else None

    def get_by_symbol(self, symbol: str) -> Optional[Stock]:
        """Retrieve stock by symbol."""
        orm_stock = self._db.query(StockORM).filter(
            StockORM.symbol == symbol.upper()
        ).first()
        return self._to_domain(orm_stock) if orm_stock else None

    def list_all(self) -> list[Stock]:
        """List all stocks ordered by ID."""
        orm_stocks = self._db.query(StockORM).order_by(StockORM.id).all()
        return [self._to_domain(s) for s in orm_stocks]

    def count(self) -> int:
        """Number of stocks."""
        return self._db.query(StockORM).count()

    def update_price(self, stock_id: int, price: Decimal, at: datetime) -> Stock:
        """Roll current price into previous_close and set the new price."""
        orm_stock = self._db.query(StockORM).filter(StockORM.id == stock_id).first()
        if not orm_stock:
            raise ValueError(f"Stock not found: {stock_id}")

        orm_stock.previous_close = orm_stock.current_price
        orm_stock.current_price = price
        orm_stock.updated_at = at

        self._db.flush()
        return self._to_domain(orm_stock)

    def add_history(self, entry: PriceHistoryEntry) -> PriceHistoryEntry:
        """Append a price history entry."""
        orm_entry = PriceHistoryORM(
            stock_id=entry.stock_id,
            price=entry.price,
            timestamp=entry.timestamp,
        )
        self._db.add(orm_entry)
        self._db.flush()
        return self._history_to_domain(orm_entry)

    def list_history(self, stock_id: int, limit: int) -> list[PriceHistoryEntry]:
        """Price history for a stock, newest first."""
        orm_entries = (
            self._db.query(PriceHistoryORM)
            .filter(PriceHistoryORM.stock_id == stock_id)
            .order_by(PriceHistoryORM.timestamp.desc(), PriceHistoryORM.id.desc())
            .limit(limit)
            .all()
        )
        return [self._history_to_domain(e) for e in orm_entries]

    @staticmethod
    def _to_domain(orm: StockORM) -> Stock:
        """Convert ORM model to domain model."""
        return Stock(
            stock_id=orm.id,
            symbol=orm.symbol,
            name=orm.name,
            current_price=Decimal(str(orm.current_price)),
            previous_close=Decimal(str(orm.previous_close)),
            updated_at=to_utc(orm.updated_at),
        )

    @staticmethod
    def _history_to_domain(orm: PriceHistoryORM) -> PriceHistoryEntry:
        """Convert ORM history row to domain model."""
        return PriceHistoryEntry(
            entry_id=orm.id,
            stock_id=orm.stock_id,
            price=Decimal(str(orm.price)),
            timestamp=to_utc(orm.timestamp),
        )
