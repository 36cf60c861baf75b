"""Dependency injection for FastAPI."""

from typing import Optional

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from tradesim.config.settings import get_settings
from tradesim.domain.models import User
from tradesim.repositories.sqlalchemy.database import get_db
from tradesim.repositories.sqlalchemy import SqlAlchemyUnitOfWork
from tradesim.services import (
    AuthService,
    StockService,
    TradeService,
    UserLockRegistry,
    PortfolioService,
    LeaderboardService,
)

# Shared across requests so a user's trades are settled one at a time
_trade_locks = UserLockRegistry()


def get_unit_of_work(db: Session = Depends(get_db)) -> SqlAlchemyUnitOfWork:
    """Provide a UnitOfWork bound to the request's session."""
    return SqlAlchemyUnitOfWork(db)


def get_auth_service(uow: SqlAlchemyUnitOfWork = Depends(get_unit_of_work)) -> AuthService:
    """Provide AuthService instance."""
    settings = get_settings()
    return AuthService(
        uow=uow,
        starting_balance=settings.starting_balance,
        bcrypt_rounds=settings.bcrypt_rounds,
        session_ttl_seconds=settings.session_ttl_seconds,
    )


def get_stock_service(uow: SqlAlchemyUnitOfWork = Depends(get_unit_of_work)) -> StockService:
    """Provide StockService instance."""
    return StockService(uow=uow)


def get_trade_service(uow: SqlAlchemyUnitOfWork = Depends(get_unit_of_work)) -> TradeService:
    """Provide TradeService instance."""
    return TradeService(
        uow=uow,
        locks=_trade_locks,
        enforce_market_price=get_settings().enforce_market_price,
    )


def get_portfolio_service(uow: SqlAlchemyUnitOfWork = Depends(get_unit_of_work)) -> PortfolioService:
    """Provide PortfolioService instance."""
    return PortfolioService(uow=uow)


def get_leaderboard_service(uow: SqlAlchemyUnitOfWork = Depends(get_unit_of_work)) -> LeaderboardService:
    """Provide LeaderboardService instance."""
    return LeaderboardService(uow=uow)


def get_session_token(request: Request) -> Optional[str]:
    """Read the session token from the request cookie."""
    return request.cookies.get(get_settings().session_cookie_name)


def get_current_user(
    token: Optional[str] = Depends(get_session_token),
    auth: AuthService = Depends(get_auth_service),
) -> User:
    """Resolve the logged-in user or raise AuthenticationError (401)."""
    return auth.resolve_session(token)
