"""Service layer - business logic orchestration."""

from tradesim.services.auth_service import AuthService
from tradesim.services.stock_service import StockService
from tradesim.services.trade_service import TradeService, TradeOrder, UserLockRegistry
from tradesim.services.portfolio_service import PortfolioService
from tradesim.services.leaderboard_service import LeaderboardService
from tradesim.services.price_simulator import (
    PriceSimulator,
    SimulatorRunner,
    TickResult,
    INITIAL_STOCKS,
)

__all__ = [
    "AuthService",
    "StockService",
    "TradeService",
    "TradeOrder",
    "UserLockRegistry",
    "PortfolioService",
    "LeaderboardService",
    "PriceSimulator",
    "SimulatorRunner",
    "TickResult",
    "INITIAL_STOCKS",
]
