"""Unit tests for LeaderboardService."""

from decimal import Decimal

import pytest

from tradesim.services import LeaderboardService
from tradesim.core.exceptions import ValidationError


class TestLeaderboard:
    """Tests for ranking by net worth."""

    def test_ranks_by_wallet_plus_holdings(
        self, leaderboard_service: LeaderboardService, user_factory, stock_factory, position_factory
    ):
        """
        GIVEN a cash-only user and a user whose holdings push them ahead
        WHEN the leaderboard is read
        THEN the holder ranks first with wallet + quantity * current price
        """
        cash_only = user_factory(username="cash", wallet_balance=Decimal("100000"))
        holder = user_factory(username="holder", wallet_balance=Decimal("95000"))
        stock = stock_factory(price=Decimal("120"))
        position_factory(holder.user_id, stock.stock_id, 50, Decimal("100"))

        entries = leaderboard_service.top(10)

        assert [e.username for e in entries] == ["holder", "cash"]
        assert [e.rank for e in entries] == [1, 2]
        assert entries[0].portfolio_value == Decimal("101000.00")
        assert entries[1].portfolio_value == Decimal("100000.00")
        assert entries[0].user_id == holder.user_id
        assert entries[1].user_id == cash_only.user_id

    def test_limit_applies(self, leaderboard_service: LeaderboardService, user_factory):
        for i in range(5):
            user_factory(wallet_balance=Decimal(1000 * (i + 1)))

        entries = leaderboard_service.top(3)

        assert len(entries) == 3
        assert [e.portfolio_value for e in entries] == [
            Decimal("5000.00"), Decimal("4000.00"), Decimal("3000.00"),
        ]

    def test_empty_store(self, leaderboard_service: LeaderboardService):
        assert leaderboard_service.top() == []

    def test_non_positive_limit_rejected(self, leaderboard_service: LeaderboardService):
        with pytest.raises(ValidationError):
            leaderboard_service.top(0)
