"""
Integration tests for the SQLAlchemy repositories against SQLite.

Tests cover:
- Unique usernames at the database level
- Position upsert/delete on the composite key
- Unit of work commit and rollback boundaries
- Timestamps come back timezone-aware
"""

from decimal import Decimal

import pytest
from sqlalchemy.exc import IntegrityError

from tradesim.domain.models import User, Position
from tradesim.core.timezone import now_utc


class TestUserRepository:
    """Tests for SqlAlchemyUserRepository."""

    def test_duplicate_username_violates_constraint(self, uow, user_factory):
        user_factory(username="alice")

        with pytest.raises(IntegrityError):
            uow.users.create(User(user_id=None, username="alice", password_hash="x"))

        uow.rollback()

    def test_timestamps_are_aware(self, uow, user_factory):
        user = user_factory()
        uow.rollback()

        loaded = uow.users.get_by_id(user.user_id)

        assert loaded.created_at.tzinfo is not None


class TestPositionRepository:
    """Tests for SqlAlchemyPositionRepository."""

    def test_upsert_updates_in_place(self, uow, user_factory, stock_factory):
        user = user_factory()
        stock = stock_factory()

        uow.positions.upsert(Position(user.user_id, stock.stock_id, 5, Decimal("10"), now_utc()))
        uow.positions.upsert(Position(user.user_id, stock.stock_id, 8, Decimal("12.5"), now_utc()))
        uow.commit()

        [position] = uow.positions.list_by_user(user.user_id)
        assert position.quantity == 8
        assert position.average_buy_price == Decimal("12.5")

    def test_delete(self, uow, user_factory, stock_factory, position_factory):
        user = user_factory()
        stock = stock_factory()
        position_factory(user.user_id, stock.stock_id, 5, Decimal("10"))

        uow.positions.delete(user.user_id, stock.stock_id)
        uow.commit()

        assert uow.positions.get(user.user_id, stock.stock_id) is None


class TestUnitOfWork:
    """Tests for commit/rollback boundaries."""

    def test_rollback_discards_flushed_changes(self, uow, user_factory):
        """
        GIVEN a flushed but uncommitted balance change
        WHEN the unit of work rolls back
        THEN the stored balance is unchanged
        """
        user = user_factory(wallet_balance=Decimal("100"))

        uow.users.update_wallet_balance(user.user_id, Decimal("1"))
        uow.rollback()

        assert uow.users.get_by_id(user.user_id).wallet_balance == Decimal("100")

    def test_context_manager_rolls_back_on_error(self, uow_factory, uow, user_factory):
        user = user_factory(wallet_balance=Decimal("100"))

        with pytest.raises(RuntimeError):
            with uow_factory() as other:
                other.users.update_wallet_balance(user.user_id, Decimal("1"))
                raise RuntimeError("boom")

        uow.rollback()
        assert uow.users.get_by_id(user.user_id).wallet_balance == Decimal("100")
