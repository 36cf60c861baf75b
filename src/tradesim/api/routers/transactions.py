"""Trade placement and transaction history endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from tradesim.api.deps import get_current_user, get_portfolio_service, get_trade_service
from tradesim.api.schemas import TradeOrderRequest, TransactionResponse
from tradesim.config.settings import get_settings
from tradesim.domain.models import User
from tradesim.services import PortfolioService, TradeOrder, TradeService

router = APIRouter(prefix="/api", tags=["transactions"])


@router.post("/trade", response_model=TransactionResponse, status_code=201)
def place_trade(
    data: TradeOrderRequest,
    user: User = Depends(get_current_user),
    service: TradeService = Depends(get_trade_service),
) -> TransactionResponse:
    """Settle a BUY or SELL order for the current user."""
    transaction = service.execute_trade(
        user.user_id,
        TradeOrder(
            stock_id=data.stock_id,
            trade_type=data.type,
            quantity=data.quantity,
            price=data.price,
        ),
    )
    return TransactionResponse.from_domain(transaction)


@router.get("/transactions", response_model=list[TransactionResponse])
def list_transactions(
    limit: Optional[int] = Query(None, ge=1, le=1000, description="Max transactions, newest first"),
    user: User = Depends(get_current_user),
    service: PortfolioService = Depends(get_portfolio_service),
) -> list[TransactionResponse]:
    """The current user's transactions, newest first."""
    if limit is None:
        limit = get_settings().default_transactions_limit
    return [TransactionResponse.from_view(v) for v in service.get_transactions(user.user_id, limit)]
