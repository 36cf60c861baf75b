"""Repository protocol definitions (interfaces)."""

from tradesim.repositories.protocols.user_repo import UserRepository
from tradesim.repositories.protocols.stock_repo import StockRepository
from tradesim.repositories.protocols.position_repo import PositionRepository
from tradesim.repositories.protocols.transaction_repo import TransactionRepository
from tradesim.repositories.protocols.session_repo import SessionRepository
from tradesim.repositories.protocols.unit_of_work import UnitOfWork

__all__ = [
    "UserRepository",
    "StockRepository",
    "PositionRepository",
    "TransactionRepository",
    "SessionRepository",
    "UnitOfWork",
]
