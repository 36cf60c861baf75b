"""Unit of work protocol."""

from typing import Protocol

from tradesim.repositories.protocols.user_repo import UserRepository
from tradesim.repositories.protocols.stock_repo import StockRepository
from tradesim.repositories.protocols.position_repo import PositionRepository
from tradesim.repositories.protocols.transaction_repo import TransactionRepository
from tradesim.repositories.protocols.session_repo import SessionRepository


class UnitOfWork(Protocol):
    """
    Groups repositories that share one database transaction.

    Repositories only stage changes; nothing is durable until commit().
    """

    users: UserRepository
    stocks: StockRepository
    positions: PositionRepository
    transactions: TransactionRepository
    sessions: SessionRepository

    def commit(self) -> None:
        ...

    def rollback(self) -> None:
        ...

    def close(self) -> None:
        ...

    def __enter__(self) -> "UnitOfWork":
        ...

    def __exit__(self, exc_type, exc, tb) -> None:
        ...
