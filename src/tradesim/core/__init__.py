"""Core utilities and shared functionality."""

from tradesim.core.timezone import now_utc, to_utc, UTC
from tradesim.core.exceptions import (
    AppError,
    ValidationError,
    AuthenticationError,
    NotFoundError,
    TradeError,
    InsufficientFundsError,
    InsufficientSharesError,
    InvalidTradeTypeError,
    StorageError,
)

__all__ = [
    "now_utc",
    "to_utc",
    "UTC",
    "AppError",
    "ValidationError",
    "AuthenticationError",
    "NotFoundError",
    "TradeError",
    "InsufficientFundsError",
    "InsufficientSharesError",
    "InvalidTradeTypeError",
    "StorageError",
]
