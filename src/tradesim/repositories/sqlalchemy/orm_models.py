"""SQLAlchemy ORM model definitions."""

from decimal import Decimal

from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    ForeignKey,
    Numeric,
    Enum as SqlEnum,
)
from sqlalchemy.orm import relationship

from tradesim.core.timezone import now_utc
from tradesim.repositories.sqlalchemy.database import Base
from tradesim.domain.models.enums import TradeType, TransactionStatus


class UserORM(Base):
    """SQLAlchemy model for User."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(50), unique=True, nullable=False)
    password_hash = Column(String(128), nullable=False)
    wallet_balance = Column(Numeric(precision=18, scale=4), nullable=False, default=Decimal("0"))
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)

    positions = relationship("PositionORM", back_populates="user")
    transactions = relationship("TransactionORM", back_populates="user")


class StockORM(Base):
    """SQLAlchemy model for Stock."""

    __tablename__ = "stocks"

    id = Column(Integer, primary_key=True, autoincrement=True)
    symbol = Column(String(20), unique=True, nullable=False)
    name = Column(String(255), nullable=False)
    current_price = Column(Numeric(precision=18, scale=4), nullable=False)
    previous_close = Column(Numeric(precision=18, scale=4), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)

    price_history = relationship("PriceHistoryORM", back_populates="stock")


class PriceHistoryORM(Base):
    """SQLAlchemy model for PriceHistoryEntry (append-only)."""

    __tablename__ = "stock_price_history"

    id = Column(Integer, primary_key=True, autoincrement=True)
    stock_id = Column(Integer, ForeignKey("stocks.id"), nullable=False, index=True)
    price = Column(Numeric(precision=18, scale=4), nullable=False)
    timestamp = Column(DateTime(timezone=True), nullable=False, default=now_utc, index=True)

    stock = relationship("StockORM", back_populates="price_history")


class PositionORM(Base):
    """SQLAlchemy model for Position (one row per user/stock pair)."""

    __tablename__ = "portfolios"

    user_id = Column(Integer, ForeignKey("users.id"), primary_key=True)
    stock_id = Column(Integer, ForeignKey("stocks.id"), primary_key=True)
    quantity = Column(Integer, nullable=False)
    average_buy_price = Column(Numeric(precision=18, scale=6), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)

    user = relationship("UserORM", back_populates="positions")
    stock = relationship("StockORM")


class TransactionORM(Base):
    """SQLAlchemy model for Transaction (trade audit trail)."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    stock_id = Column(Integer, ForeignKey("stocks.id"), nullable=False)
    type = Column(SqlEnum(TradeType), nullable=False)
    quantity = Column(Integer, nullable=False)
    price = Column(Numeric(precision=18, scale=4), nullable=False)
    total = Column(Numeric(precision=18, scale=4), nullable=False)
    status = Column(
        SqlEnum(TransactionStatus),
        nullable=False,
        default=TransactionStatus.COMPLETED,
    )
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc, index=True)

    user = relationship("UserORM", back_populates="transactions")
    stock = relationship("StockORM")


class SessionORM(Base):
    """SQLAlchemy model for UserSession (server-side session store)."""

    __tablename__ = "sessions"

    token = Column(String(64), primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)
    expires_at = Column(DateTime(timezone=True), nullable=False, index=True)
