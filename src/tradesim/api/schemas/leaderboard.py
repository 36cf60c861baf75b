"""Pydantic schemas for the leaderboard endpoint."""

from tradesim.api.schemas.base import ApiModel


class LeaderboardEntryResponse(ApiModel):
    """One ranked user."""

    rank: int
    user_id: int
    username: str
    portfolio_value: float
