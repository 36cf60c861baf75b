"""Holdings and portfolio summary endpoints."""

from fastapi import APIRouter, Depends

from tradesim.api.deps import get_current_user, get_portfolio_service
from tradesim.api.schemas import HoldingResponse, PortfolioSummaryResponse
from tradesim.domain.models import User
from tradesim.services import PortfolioService

router = APIRouter(prefix="/api/portfolio", tags=["portfolio"])


@router.get("", response_model=list[HoldingResponse])
def get_holdings(
    user: User = Depends(get_current_user),
    service: PortfolioService = Depends(get_portfolio_service),
) -> list[HoldingResponse]:
    """The current user's positions marked to market."""
    return [HoldingResponse.from_view(h) for h in service.get_holdings(user.user_id)]


@router.get("/summary", response_model=PortfolioSummaryResponse)
def get_summary(
    user: User = Depends(get_current_user),
    service: PortfolioService = Depends(get_portfolio_service),
) -> PortfolioSummaryResponse:
    """Totals, profit/loss and asset allocation for the current user."""
    return PortfolioSummaryResponse.from_view(service.get_summary(user.user_id))
