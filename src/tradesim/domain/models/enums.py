"""Enumerations for domain models."""

from enum import Enum


class TradeType(str, Enum):
    """Order side."""

    BUY = "BUY"
    SELL = "SELL"


class TransactionStatus(str, Enum):
    """Outcome recorded for an attempted trade."""

    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    PENDING = "PENDING"
