"""SQLAlchemy implementation of TransactionRepository."""

from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

from tradesim.core.timezone import to_utc
from tradesim.domain.models import Transaction
from tradesim.repositories.sqlalchemy.orm_models import TransactionORM


class SqlAlchemyTransactionRepository:
    """SQLAlchemy-backed trade audit trail."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, transaction: Transaction) -> Transaction:
        """Stage a new transaction; the ID is assigned on flush."""
        orm_txn = TransactionORM(
            user_id=transaction.user_id,
            stock_id=transaction.stock_id,
            type=transaction.trade_type,
            quantity=transaction.quantity,
            price=transaction.price,
            total=transaction.total,
            status=transaction.status,
            created_at=transaction.created_at,
        )
        self._db.add(orm_txn)
        self._db.flush()
        return self._to_domain(orm_txn)

    def list_by_user(self, user_id: int, limit: Optional[int] = None) -> list[Transaction]:
        """List a user's transactions, newest first."""
        query = (
            self._db.query(TransactionORM)
            .filter(TransactionORM.user_id == user_id)
            .order_by(TransactionORM.created_at.desc(), TransactionORM.id.desc())
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_domain(t) for t in query.all()]

    @staticmethod
    def _to_domain(orm: TransactionORM) -> Transaction:
        """Convert ORM model to domain model."""
        return Transaction(
            transaction_id=orm.id,
            user_id=orm.user_id,
            stock_id=orm.stock_id,
            trade_type=orm.type,
            quantity=orm.quantity,
            price=Decimal(str(orm.price)),
            total=Decimal(str(orm.total)),
            status=orm.status,
            created_at=to_utc(orm.created_at),
        )
