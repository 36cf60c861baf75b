"""Pydantic schemas for portfolio endpoints."""

from datetime import datetime
from typing import Optional

from tradesim.api.schemas.base import ApiModel
from tradesim.api.schemas.stock import StockResponse
from tradesim.domain.views import HoldingView, PortfolioSummaryView


class HoldingResponse(ApiModel):
    """A position with its stock and mark-to-market figures."""

    user_id: int
    stock_id: int
    quantity: int
    average_buy_price: float
    updated_at: Optional[datetime] = None
    stock: Optional[StockResponse] = None
    current_value: float
    profit_loss: float
    profit_loss_percentage: float

    @classmethod
    def from_view(cls, view: HoldingView) -> "HoldingResponse":
        position = view.position
        return cls(
            user_id=position.user_id,
            stock_id=position.stock_id,
            quantity=position.quantity,
            average_buy_price=float(position.average_buy_price),
            updated_at=position.updated_at,
            stock=StockResponse.from_domain(view.stock) if view.stock else None,
            current_value=float(view.current_value),
            profit_loss=float(view.profit_loss),
            profit_loss_percentage=float(view.profit_loss_percentage),
        )


class AllocationItemResponse(ApiModel):
    """Single item in allocation breakdown."""

    stock_id: int
    symbol: str
    name: str
    value: float
    percentage: float


class PortfolioSummaryResponse(ApiModel):
    """Aggregate valuation of wallet and holdings."""

    total_invested_value: float
    total_current_value: float
    total_value: float
    wallet_balance: float
    profit_loss: float
    profit_loss_percentage: float
    asset_allocation: list[AllocationItemResponse]

    @classmethod
    def from_view(cls, view: PortfolioSummaryView) -> "PortfolioSummaryResponse":
        return cls(
            total_invested_value=float(view.total_invested_value),
            total_current_value=float(view.total_current_value),
            total_value=float(view.total_value),
            wallet_balance=float(view.wallet_balance),
            profit_loss=float(view.profit_loss),
            profit_loss_percentage=float(view.profit_loss_percentage),
            asset_allocation=[
                AllocationItemResponse(
                    stock_id=item.stock_id,
                    symbol=item.symbol,
                    name=item.name,
                    value=float(item.value),
                    percentage=float(item.percentage),
                )
                for item in view.asset_allocation
            ],
        )
