"""Repository layer - data access abstractions and implementations."""

from tradesim.repositories.protocols import (
    UserRepository,
    StockRepository,
    PositionRepository,
    TransactionRepository,
    SessionRepository,
    UnitOfWork,
)

__all__ = [
    "UserRepository",
    "StockRepository",
    "PositionRepository",
    "TransactionRepository",
    "SessionRepository",
    "UnitOfWork",
]
