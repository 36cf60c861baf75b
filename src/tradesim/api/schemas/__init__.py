"""Pydantic schemas for API request/response."""

from tradesim.api.schemas.user import (
    RegisterRequest,
    LoginRequest,
    UserResponse,
    MessageResponse,
)
from tradesim.api.schemas.stock import StockResponse, PriceHistoryResponse
from tradesim.api.schemas.transaction import TradeOrderRequest, TransactionResponse
from tradesim.api.schemas.portfolio import (
    HoldingResponse,
    AllocationItemResponse,
    PortfolioSummaryResponse,
)
from tradesim.api.schemas.leaderboard import LeaderboardEntryResponse

__all__ = [
    "RegisterRequest",
    "LoginRequest",
    "UserResponse",
    "MessageResponse",
    "StockResponse",
    "PriceHistoryResponse",
    "TradeOrderRequest",
    "TransactionResponse",
    "HoldingResponse",
    "AllocationItemResponse",
    "PortfolioSummaryResponse",
    "LeaderboardEntryResponse",
]
