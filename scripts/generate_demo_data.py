#!/usr/bin/env python3
"""
Generate demo data: a few traders with random buys and sells, and some
price history so the leaderboard and charts have something to show.

Uses the database configured through TRADESIM_DATABASE_URL.
"""

import random
from decimal import Decimal

from tradesim.config.logging_config import setup_logging
from tradesim.core.exceptions import TradeError, ValidationError
from tradesim.repositories.sqlalchemy import init_db, get_session_factory, unit_of_work_factory
from tradesim.services import (
    AuthService,
    PriceSimulator,
    TradeService,
    TradeOrder,
    UserLockRegistry,
)
from tradesim.domain.models import TradeType

DEMO_USERS = ["alice", "bob", "carol", "dave", "erin"]
DEMO_PASSWORD = "demo1234"


def generate_demo_data(trades_per_user: int = 15, ticks: int = 30, seed: int = 7) -> None:
    """Register demo users, trade randomly and advance prices."""
    rng = random.Random(seed)
    open_uow = unit_of_work_factory(get_session_factory())
    simulator = PriceSimulator(open_uow, rng=rng)
    locks = UserLockRegistry()

    simulator.seed_if_empty()
    print("=" * 60)

    for username in DEMO_USERS:
        with open_uow() as uow:
            auth = AuthService(uow, bcrypt_rounds=4)
            try:
                user = auth.register(username, DEMO_PASSWORD)
                print(f"✓ Registered {username}")
            except ValidationError:
                user = auth.authenticate(username, DEMO_PASSWORD)
                print(f"✓ {username} already exists")

            trades = TradeService(uow, locks, enforce_market_price=True)
            stocks = uow.stocks.list_all()
            completed = failed = 0
            for _ in range(trades_per_user):
                stock = rng.choice(stocks)
                side = rng.choice([TradeType.BUY, TradeType.BUY, TradeType.SELL])
                order = TradeOrder(
                    stock_id=stock.stock_id,
                    trade_type=side,
                    quantity=rng.randint(1, 20),
                    price=stock.current_price,
                )
                try:
                    trades.execute_trade(user.user_id, order)
                    completed += 1
                except TradeError:
                    failed += 1
            print(f"  {completed} completed, {failed} failed trades")

    print(f"\nAdvancing prices {ticks} times...")
    for _ in range(ticks):
        simulator.tick()

    print("\n✓ Demo data generation complete!")
    print("\nYou can now:")
    print("  - Log in as any demo user with password", DEMO_PASSWORD)
    print("  - View the leaderboard: GET /api/leaderboard")


if __name__ == "__main__":
    setup_logging()
    init_db()
    generate_demo_data()
