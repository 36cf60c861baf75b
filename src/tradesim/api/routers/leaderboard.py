"""Leaderboard endpoint."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from tradesim.api.deps import get_leaderboard_service
from tradesim.api.schemas import LeaderboardEntryResponse
from tradesim.config.settings import get_settings
from tradesim.services import LeaderboardService

router = APIRouter(prefix="/api/leaderboard", tags=["leaderboard"])


@router.get("", response_model=list[LeaderboardEntryResponse])
def get_leaderboard(
    limit: Optional[int] = Query(None, ge=1, le=100, description="Number of users to rank"),
    service: LeaderboardService = Depends(get_leaderboard_service),
) -> list[LeaderboardEntryResponse]:
    """Top users by wallet balance plus holdings value."""
    if limit is None:
        limit = get_settings().default_leaderboard_limit
    return [
        LeaderboardEntryResponse(
            rank=e.rank,
            user_id=e.user_id,
            username=e.username,
            portfolio_value=float(e.portfolio_value),
        )
        for e in service.top(limit)
    ]
