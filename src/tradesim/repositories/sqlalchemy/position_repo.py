"""SQLAlchemy implementation of PositionRepository."""

from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

from tradesim.core.timezone import to_utc
from tradesim.domain.models import Position
from tradesim.repositories.sqlalchemy.orm_models import PositionORM


class SqlAlchemyPositionRepository:
    """SQLAlchemy-backed holdings repository."""

    def __init__(self, db: Session):
        self._db = db

    def get(self, user_id: int, stock_id: int) -> Optional[Position]:
        """Retrieve the position for a user/stock pair."""
        orm_pos = self._query_one(user_id, stock_id)
        return self._to_domain(orm_pos) if orm_pos else None

    def list_by_user(self, user_id: int) -> list[Position]:
        """List all open positions for a user."""
        orm_positions = (
            self._db.query(PositionORM)
            .filter(PositionORM.user_id == user_id)
            .order_by(PositionORM.stock_id)
            .all()
        )
        return [self._to_domain(p) for p in orm_positions]

    def upsert(self, position: Position) -> Position:
        """Insert or update a position."""
        orm_pos = self._query_one(position.user_id, position.stock_id)

        if orm_pos:
            orm_pos.quantity = position.quantity
            orm_pos.average_buy_price = position.average_buy_price
            orm_pos.updated_at = position.updated_at
        else:
            orm_pos = PositionORM(
                user_id=position.user_id,
                stock_id=position.stock_id,
                quantity=position.quantity,
                average_buy_price=position.average_buy_price,
                updated_at=position.updated_at,
            )
            self._db.add(orm_pos)

        self._db.flush()
        return self._to_domain(orm_pos)

    def delete(self, user_id: int, stock_id: int) -> None:
        """Remove a position."""
        self._db.query(PositionORM).filter(
            PositionORM.user_id == user_id,
            PositionORM.stock_id == stock_id,
        ).delete()
        self._db.flush()

    def _query_one(self, user_id: int, stock_id: int) -> Optional[PositionORM]:
        return (
            self._db.query(PositionORM)
            .filter(
                PositionORM.user_id == user_id,
                PositionORM.stock_id == stock_id,
            )
            .first()
        )

    @staticmethod
    def _to_domain(orm: PositionORM) -> Position:
        """Convert ORM position to domain model."""
        return Position(
            user_id=orm.user_id,
            stock_id=orm.stock_id,
            quantity=orm.quantity,
            average_buy_price=Decimal(str(orm.average_buy_price)),
            updated_at=to_utc(orm.updated_at),
        )
