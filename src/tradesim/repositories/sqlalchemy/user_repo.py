"""SQLAlchemy implementation of UserRepository."""

from decimal import Decimal
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from tradesim.core.timezone import to_utc
from tradesim.domain.models import User
from tradesim.repositories.sqlalchemy.orm_models import UserORM, PositionORM, StockORM


class SqlAlchemyUserRepository:
    """SQLAlchemy-backed user repository."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, user: User) -> User:
        """Stage a new user; the ID is assigned on flush."""
        orm_user = UserORM(
            username=user.username,
            password_hash=user.password_hash,
            wallet_balance=user.wallet_balance,
            created_at=user.created_at,
        )
        self._db.add(orm_user)
        self._db.flush()
        return self._to_domain(orm_user)

    def get_by_id(self, user_id: int, for_update: bool = False) -> Optional[User]:
        """Retrieve user by ID."""
        query = self._db.query(UserORM).filter(UserORM.id == user_id)
        if for_update:
            query = query.with_for_update()
        orm_user = query.first()
        return self._to_domain(orm_user) if orm_user else None

    def get_by_username(self, username: str) -> Optional[User]:
        """Retrieve user by username."""
        orm_user = self._db.query(UserORM).filter(
            UserORM.username == username
        ).first()
        return self._to_domain(orm_user) if orm_user else None

    def update_wallet_balance(self, user_id: int, balance: Decimal) -> User:
        """Set a user's wallet balance."""
        orm_user = self._db.query(UserORM).filter(UserORM.id == user_id).first()
        if not orm_user:
            raise ValueError(f"User not found: {user_id}")
        orm_user.wallet_balance = balance
        self._db.flush()
        return self._to_domain(orm_user)

    def list_by_net_worth(self, limit: int) -> list[tuple[int, str, Decimal]]:
        """
        Rank users by wallet balance plus mark-to-market holdings.

        Users without positions still appear (LEFT JOIN); ties keep ID order.
        """
        holdings_value = func.coalesce(
            func.sum(PositionORM.quantity * StockORM.current_price), 0
        )
        net_worth = (holdings_value + UserORM.wallet_balance).label("portfolio_value")

        rows = (
            self._db.query(UserORM.id, UserORM.username, net_worth)
            .outerjoin(PositionORM, PositionORM.user_id == UserORM.id)
            .outerjoin(StockORM, StockORM.id == PositionORM.stock_id)
            .group_by(UserORM.id, UserORM.username, UserORM.wallet_balance)
            .order_by(net_worth.desc(), UserORM.id)
            .limit(limit)
            .all()
        )
        return [(row[0], row[1], Decimal(str(row[2]))) for row in rows]

    @staticmethod
    def _to_domain(orm: UserORM) -> User:
        """Convert ORM model to domain model."""
        return User(
            user_id=orm.id,
            username=orm.username,
            password_hash=orm.password_hash,
            wallet_balance=Decimal(str(orm.wallet_balance)) if orm.wallet_balance is not None else Decimal("0"),
            created_at=to_utc(orm.created_at),
        )
