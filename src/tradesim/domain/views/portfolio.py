"""View models for portfolio, transaction and leaderboard outputs."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from tradesim.domain.models import Position, Stock, Transaction


@dataclass
class HoldingView:
    """A position marked to market."""

    position: Position
    stock: Optional[Stock] = None
    current_value: Decimal = field(default_factory=lambda: Decimal("0"))
    profit_loss: Decimal = field(default_factory=lambda: Decimal("0"))
    profit_loss_percentage: Decimal = field(default_factory=lambda: Decimal("0"))


@dataclass
class AllocationItem:
    """Single item in allocation breakdown."""

    stock_id: int
    symbol: str
    name: str
    value: Decimal
    percentage: Decimal


@dataclass
class PortfolioSummaryView:
    """Point-in-time valuation of a user's wallet and holdings."""

    total_invested_value: Decimal = field(default_factory=lambda: Decimal("0"))
    total_current_value: Decimal = field(default_factory=lambda: Decimal("0"))
    total_value: Decimal = field(default_factory=lambda: Decimal("0"))
    wallet_balance: Decimal = field(default_factory=lambda: Decimal("0"))
    profit_loss: Decimal = field(default_factory=lambda: Decimal("0"))
    profit_loss_percentage: Decimal = field(default_factory=lambda: Decimal("0"))
    asset_allocation: list[AllocationItem] = field(default_factory=list)


@dataclass
class TransactionView:
    """Transaction with its stock resolved."""

    transaction: Transaction
    stock: Optional[Stock] = None


@dataclass
class LeaderboardEntry:
    """One ranked user."""

    rank: int
    user_id: int
    username: str
    portfolio_value: Decimal
