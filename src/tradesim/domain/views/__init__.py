"""View models for service outputs."""

from tradesim.domain.views.portfolio import (
    HoldingView,
    AllocationItem,
    PortfolioSummaryView,
    TransactionView,
    LeaderboardEntry,
)

__all__ = [
    "HoldingView",
    "AllocationItem",
    "PortfolioSummaryView",
    "TransactionView",
    "LeaderboardEntry",
]
