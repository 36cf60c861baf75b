"""Domain layer - pure business models with no external dependencies."""

from tradesim.domain.models import (
    User,
    UserSession,
    Stock,
    PriceHistoryEntry,
    Position,
    Transaction,
    TradeType,
    TransactionStatus,
)

__all__ = [
    "User",
    "UserSession",
    "Stock",
    "PriceHistoryEntry",
    "Position",
    "Transaction",
    "TradeType",
    "TransactionStatus",
]
