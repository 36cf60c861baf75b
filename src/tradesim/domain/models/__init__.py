"""Domain models package."""

from tradesim.domain.models.enums import TradeType, TransactionStatus
from tradesim.domain.models.user import User, UserSession
from tradesim.domain.models.stock import Stock, PriceHistoryEntry
from tradesim.domain.models.position import Position
from tradesim.domain.models.transaction import Transaction

__all__ = [
    "TradeType",
    "TransactionStatus",
    "User",
    "UserSession",
    "Stock",
    "PriceHistoryEntry",
    "Position",
    "Transaction",
]
