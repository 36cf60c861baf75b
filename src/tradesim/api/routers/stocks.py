"""Stock listing and price history endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from tradesim.api.deps import get_stock_service
from tradesim.api.schemas import StockResponse, PriceHistoryResponse
from tradesim.config.settings import get_settings
from tradesim.services import StockService

router = APIRouter(prefix="/api/stocks", tags=["stocks"])


@router.get("", response_model=list[StockResponse])
def list_stocks(
    service: StockService = Depends(get_stock_service),
) -> list[StockResponse]:
    """List all stocks with their current prices."""
    return [StockResponse.from_domain(s) for s in service.list_stocks()]


@router.get("/{stock_id}", response_model=StockResponse)
def get_stock(
    stock_id: int,
    service: StockService = Depends(get_stock_service),
) -> StockResponse:
    """Get a single stock."""
    return StockResponse.from_domain(service.get_stock(stock_id))


@router.get("/{stock_id}/history", response_model=list[PriceHistoryResponse])
def get_price_history(
    stock_id: int,
    limit: Optional[int] = Query(None, ge=1, le=1000, description="Max entries, newest first"),
    service: StockService = Depends(get_stock_service),
) -> list[PriceHistoryResponse]:
    """Price history for a stock, newest first."""
    if limit is None:
        limit = get_settings().default_history_limit
    return [PriceHistoryResponse.from_domain(e) for e in service.get_price_history(stock_id, limit)]
