"""Pydantic schemas for trade and transaction endpoints."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from tradesim.api.schemas.base import ApiModel
from tradesim.api.schemas.stock import StockResponse
from tradesim.domain.models import Transaction, TradeType, TransactionStatus
from tradesim.domain.views import TransactionView


class TradeOrderRequest(ApiModel):
    """Request schema for placing an order."""

    stock_id: int = Field(..., description="Stock ID")
    type: TradeType = Field(..., description="BUY or SELL")
    quantity: int = Field(..., gt=0, description="Whole number of shares")
    price: Decimal = Field(..., gt=0, max_digits=18, decimal_places=4, description="Execution price per share")


class TransactionResponse(ApiModel):
    """Response schema for a single transaction."""

    id: int
    user_id: int
    stock_id: int
    type: TradeType
    quantity: int
    price: float
    total: float
    status: TransactionStatus
    created_at: datetime
    stock: Optional[StockResponse] = None

    @classmethod
    def from_domain(cls, transaction: Transaction, stock=None) -> "TransactionResponse":
        return cls(
            id=transaction.transaction_id,
            user_id=transaction.user_id,
            stock_id=transaction.stock_id,
            type=transaction.trade_type,
            quantity=transaction.quantity,
            price=float(transaction.price),
            total=float(transaction.total),
            status=transaction.status,
            created_at=transaction.created_at,
            stock=StockResponse.from_domain(stock) if stock else None,
        )

    @classmethod
    def from_view(cls, view: TransactionView) -> "TransactionResponse":
        return cls.from_domain(view.transaction, view.stock)
