"""Pydantic schemas for stock endpoints."""

from datetime import datetime
from typing import Optional

from tradesim.api.schemas.base import ApiModel
from tradesim.domain.models import Stock, PriceHistoryEntry


class StockResponse(ApiModel):
    """Response schema for a single stock."""

    id: int
    symbol: str
    name: str
    current_price: float
    previous_close: float
    change: float
    change_percentage: float
    updated_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, stock: Stock) -> "StockResponse":
        return cls(
            id=stock.stock_id,
            symbol=stock.symbol,
            name=stock.name,
            current_price=float(stock.current_price),
            previous_close=float(stock.previous_close),
            change=float(stock.change),
            change_percentage=float(stock.change_percentage),
            updated_at=stock.updated_at,
        )


class PriceHistoryResponse(ApiModel):
    """Response schema for one price history entry."""

    id: int
    stock_id: int
    price: float
    timestamp: datetime

    @classmethod
    def from_domain(cls, entry: PriceHistoryEntry) -> "PriceHistoryResponse":
        return cls(
            id=entry.entry_id,
            stock_id=entry.stock_id,
            price=float(entry.price),
            timestamp=entry.timestamp,
        )
