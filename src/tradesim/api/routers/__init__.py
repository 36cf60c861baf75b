"""API routers package."""

from tradesim.api.routers.auth import router as auth_router
from tradesim.api.routers.stocks import router as stocks_router
from tradesim.api.routers.portfolio import router as portfolio_router
from tradesim.api.routers.transactions import router as transactions_router
from tradesim.api.routers.leaderboard import router as leaderboard_router

__all__ = [
    "auth_router",
    "stocks_router",
    "portfolio_router",
    "transactions_router",
    "leaderboard_router",
]
