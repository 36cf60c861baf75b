"""SQLAlchemy unit of work: one session shared by all repositories."""

from typing import Callable

from sqlalchemy.orm import Session

from tradesim.repositories.sqlalchemy.user_repo import SqlAlchemyUserRepository
from tradesim.repositories.sqlalchemy.stock_repo import SqlAlchemyStockRepository
from tradesim.repositories.sqlalchemy.position_repo import SqlAlchemyPositionRepository
from tradesim.repositories.sqlalchemy.transaction_repo import SqlAlchemyTransactionRepository
from tradesim.repositories.sqlalchemy.session_repo import SqlAlchemySessionRepository


class SqlAlchemyUnitOfWork:
    """
    Repositories bound to a single SQLAlchemy session.

    Repositories flush but never commit; services call commit() once per
    business operation so related changes land together.
    """

    def __init__(self, db: Session):
        self._db = db
        self.users = SqlAlchemyUserRepository(db)
        self.stocks = SqlAlchemyStockRepository(db)
        self.positions = SqlAlchemyPositionRepository(db)
        self.transactions = SqlAlchemyTransactionRepository(db)
        self.sessions = SqlAlchemySessionRepository(db)

    def commit(self) -> None:
        self._db.commit()

    def rollback(self) -> None:
        self._db.rollback()

    def close(self) -> None:
        self._db.close()

    def __enter__(self) -> "SqlAlchemyUnitOfWork":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is not None:
            self.rollback()
        self.close()


def unit_of_work_factory(session_factory: Callable[[], Session]) -> Callable[[], SqlAlchemyUnitOfWork]:
    """Build a callable that opens a fresh unit of work per call."""

    def _open() -> SqlAlchemyUnitOfWork:
        return SqlAlchemyUnitOfWork(session_factory())

    return _open
