"""
Pytest configuration and fixtures for trading simulator tests.

This module provides:
- In-memory SQLite database fixtures
- Unit of work and service fixtures
- Factory helpers for users, stocks and positions
- A FastAPI test client bound to the test database
"""

import os

# Configure the app for tests before anything reads settings
os.environ.setdefault("TRADESIM_DATABASE_URL", "sqlite://")
os.environ.setdefault("TRADESIM_SIMULATOR_ENABLED", "false")
os.environ.setdefault("TRADESIM_SEED_ON_STARTUP", "false")
os.environ.setdefault("TRADESIM_BCRYPT_ROUNDS", "4")

import random
import uuid
from decimal import Decimal
from typing import Callable, Optional

import pytest
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker, Session
from fastapi.testclient import TestClient

from tradesim.main import app
from tradesim.repositories.sqlalchemy.database import Base, get_db
# Import ORM models to register them with Base before creating tables
from tradesim.repositories.sqlalchemy import orm_models  # noqa: F401
from tradesim.repositories.sqlalchemy import SqlAlchemyUnitOfWork, unit_of_work_factory
from tradesim.services import (
    AuthService,
    StockService,
    TradeService,
    UserLockRegistry,
    PortfolioService,
    LeaderboardService,
    PriceSimulator,
)
from tradesim.domain.models import User, Stock, Position, PriceHistoryEntry
from tradesim.core.timezone import now_utc
from tradesim.config.settings import reset_settings


STARTING_BALANCE = Decimal("100000")


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    # Reset settings for clean state
    reset_settings()

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def session_factory(test_engine) -> sessionmaker:
    """Session factory bound to the test engine."""
    return sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture(scope="function")
def test_session(session_factory) -> Session:
    """Create test database session."""
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def uow(test_session) -> SqlAlchemyUnitOfWork:
    """Provide a unit of work over the test session."""
    return SqlAlchemyUnitOfWork(test_session)


@pytest.fixture
def uow_factory(session_factory) -> Callable[[], SqlAlchemyUnitOfWork]:
    """Opens a fresh unit of work per call, as the simulator does."""
    return unit_of_work_factory(session_factory)


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def auth_service(uow) -> AuthService:
    """Provide test AuthService with cheap hashing."""
    return AuthService(
        uow=uow,
        starting_balance=STARTING_BALANCE,
        bcrypt_rounds=4,
        session_ttl_seconds=3600,
    )


@pytest.fixture
def stock_service(uow) -> StockService:
    """Provide test StockService."""
    return StockService(uow=uow)


@pytest.fixture
def trade_service(uow) -> TradeService:
    """Provide test TradeService."""
    return TradeService(uow=uow, locks=UserLockRegistry())


@pytest.fixture
def portfolio_service(uow) -> PortfolioService:
    """Provide test PortfolioService."""
    return PortfolioService(uow=uow)


@pytest.fixture
def leaderboard_service(uow) -> LeaderboardService:
    """Provide test LeaderboardService."""
    return LeaderboardService(uow=uow)


@pytest.fixture
def price_simulator(uow_factory) -> PriceSimulator:
    """Provide a simulator with a seeded RNG."""
    return PriceSimulator(uow_factory, rng=random.Random(42))


# =============================================================================
# FACTORY FIXTURES
# =============================================================================


@pytest.fixture
def user_factory(uow) -> Callable[..., User]:
    """Factory for creating test users directly in the store."""

    def _create_user(
        username: Optional[str] = None,
        wallet_balance: Decimal = STARTING_BALANCE,
    ) -> User:
        if username is None:
            username = f"user_{uuid.uuid4().hex[:8]}"
        user = uow.users.create(
            User(
                user_id=None,
                username=username,
                password_hash="not-a-real-hash",
                wallet_balance=wallet_balance,
                created_at=now_utc(),
            )
        )
        uow.commit()
        return user

    return _create_user


@pytest.fixture
def stock_factory(uow) -> Callable[..., Stock]:
    """Factory for creating test stocks with one history entry."""

    def _create_stock(
        symbol: Optional[str] = None,
        price: Decimal = Decimal("100"),
        previous_close: Optional[Decimal] = None,
        name: Optional[str] = None,
    ) -> Stock:
        if symbol is None:
            symbol = f"S{uuid.uuid4().hex[:6].upper()}"
        now = now_utc()
        stock = uow.stocks.create(
            Stock(
                stock_id=None,
                symbol=symbol,
                name=name or f"{symbol} Ltd.",
                current_price=price,
                previous_close=previous_close if previous_close is not None else price,
                updated_at=now,
            )
        )
        uow.stocks.add_history(
            PriceHistoryEntry(entry_id=None, stock_id=stock.stock_id, price=price, timestamp=now)
        )
        uow.commit()
        return stock

    return _create_stock


@pytest.fixture
def position_factory(uow) -> Callable[..., Position]:
    """Factory for placing a position without going through a trade."""

    def _create_position(
        user_id: int,
        stock_id: int,
        quantity: int,
        average_buy_price: Decimal,
    ) -> Position:
        position = uow.positions.upsert(
            Position(
                user_id=user_id,
                stock_id=stock_id,
                quantity=quantity,
                average_buy_price=average_buy_price,
                updated_at=now_utc(),
            )
        )
        uow.commit()
        return position

    return _create_position


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def client(session_factory) -> TestClient:
    """Provide FastAPI test client with test database."""

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def logged_in_client(client) -> TestClient:
    """A client holding the session cookie of a freshly registered user."""
    response = client.post("/api/register", json={"username": "alice", "password": "secret123"})
    assert response.status_code == 201
    return client
