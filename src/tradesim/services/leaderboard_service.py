"""Leaderboard ranking by net worth."""

from decimal import Decimal

from tradesim.core.exceptions import ValidationError
from tradesim.domain.views import LeaderboardEntry
from tradesim.repositories.protocols import UnitOfWork


class LeaderboardService:
    """Ranks users by wallet balance plus mark-to-market holdings."""

    def __init__(self, uow: UnitOfWork):
        self._uow = uow

    def top(self, limit: int = 10) -> list[LeaderboardEntry]:
        """Top `limit` users, richest first."""
        if limit <= 0:
            raise ValidationError("limit must be greater than 0")

        rows = self._uow.users.list_by_net_worth(limit)
        return [
            LeaderboardEntry(
                rank=index,
                user_id=user_id,
                username=username,
                portfolio_value=value.quantize(Decimal("0.01")),
            )
            for index, (user_id, username, value) in enumerate(rows, start=1)
        ]
