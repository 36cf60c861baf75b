"""SQLAlchemy repository implementations."""

from tradesim.repositories.sqlalchemy.database import (
    build_engine,
    get_engine,
    get_session_factory,
    get_db,
    init_db,
    Base,
)
from tradesim.repositories.sqlalchemy.user_repo import SqlAlchemyUserRepository
from tradesim.repositories.sqlalchemy.stock_repo import SqlAlchemyStockRepository
from tradesim.repositories.sqlalchemy.position_repo import SqlAlchemyPositionRepository
from tradesim.repositories.sqlalchemy.transaction_repo import SqlAlchemyTransactionRepository
from tradesim.repositories.sqlalchemy.session_repo import SqlAlchemySessionRepository
from tradesim.repositories.sqlalchemy.unit_of_work import (
    SqlAlchemyUnitOfWork,
    unit_of_work_factory,
)

__all__ = [
    "build_engine",
    "get_engine",
    "get_session_factory",
    "get_db",
    "init_db",
    "Base",
    "SqlAlchemyUserRepository",
    "SqlAlchemyStockRepository",
    "SqlAlchemyPositionRepository",
    "SqlAlchemyTransactionRepository",
    "SqlAlchemySessionRepository",
    "SqlAlchemyUnitOfWork",
    "unit_of_work_factory",
]
