"""Portfolio valuation: holdings, summary and allocation."""

from decimal import Decimal
from typing import Optional

from tradesim.core.exceptions import NotFoundError
from tradesim.domain.models import Stock
from tradesim.domain.views import (
    AllocationItem,
    HoldingView,
    PortfolioSummaryView,
    TransactionView,
)
from tradesim.repositories.protocols import UnitOfWork


def _percentage(part: Decimal, whole: Decimal) -> Decimal:
    """part / whole * 100, or 0 when whole is 0."""
    if whole == 0:
        return Decimal("0")
    return part / whole * 100


class PortfolioService:
    """
    Read-side projections over the ledger and the price store.

    Positions are marked to market at each stock's current price.
    Positions whose stock cannot be resolved are reported without a stock
    and left out of totals and allocation.
    """

    def __init__(self, uow: UnitOfWork):
        self._uow = uow

    def get_holdings(self, user_id: int) -> list[HoldingView]:
        """Positions enriched with current value and unrealized P/L."""
        positions = self._uow.positions.list_by_user(user_id)
        stocks = self._resolve_stocks([p.stock_id for p in positions])

        holdings = []
        for position in positions:
            stock = stocks.get(position.stock_id)
            if stock is None:
                holdings.append(HoldingView(position=position))
                continue

            current_value = stock.current_price * position.quantity
            profit_loss = (stock.current_price - position.average_buy_price) * position.quantity
            holdings.append(
                HoldingView(
                    position=position,
                    stock=stock,
                    current_value=current_value,
                    profit_loss=profit_loss,
                    profit_loss_percentage=_percentage(
                        stock.current_price - position.average_buy_price,
                        position.average_buy_price,
                    ),
                )
            )
        return holdings

    def get_summary(self, user_id: int) -> PortfolioSummaryView:
        """
        Aggregate valuation for a user.

        total_value = total_current_value + wallet_balance, always.
        """
        user = self._uow.users.get_by_id(user_id)
        if not user:
            raise NotFoundError("User", str(user_id))

        positions = self._uow.positions.list_by_user(user_id)
        stocks = self._resolve_stocks([p.stock_id for p in positions])

        total_invested = Decimal("0")
        total_current = Decimal("0")
        valued: list[tuple[Stock, Decimal]] = []
        for position in positions:
            stock = stocks.get(position.stock_id)
            if stock is None:
                continue
            value = stock.current_price * position.quantity
            total_invested += position.cost_basis
            total_current += value
            valued.append((stock, value))

        allocation = [
            AllocationItem(
                stock_id=stock.stock_id,
                symbol=stock.symbol,
                name=stock.name,
                value=value,
                percentage=_percentage(value, total_current),
            )
            for stock, value in valued
        ]

        profit_loss = total_current - total_invested
        return PortfolioSummaryView(
            total_invested_value=total_invested,
            total_current_value=total_current,
            total_value=total_current + user.wallet_balance,
            wallet_balance=user.wallet_balance,
            profit_loss=profit_loss,
            profit_loss_percentage=_percentage(profit_loss, total_invested),
            asset_allocation=allocation,
        )

    def get_transactions(self, user_id: int, limit: Optional[int] = 10) -> list[TransactionView]:
        """A user's transactions, newest first, with their stock attached."""
        transactions = self._uow.transactions.list_by_user(user_id, limit=limit)
        stocks = self._resolve_stocks([t.stock_id for t in transactions])
        return [
            TransactionView(transaction=t, stock=stocks.get(t.stock_id))
            for t in transactions
        ]

    def _resolve_stocks(self, stock_ids: list[int]) -> dict[int, Stock]:
        resolved: dict[int, Stock] = {}
        for stock_id in set(stock_ids):
            stock = self._uow.stocks.get_by_id(stock_id)
            if stock:
                resolved[stock_id] = stock
        return resolved
