"""
Unit tests for PriceSimulator and SimulatorRunner.

Tests cover:
- Seeding the initial catalog once
- Bounded random steps that never go below the floor
- previous_close and history bookkeeping on each tick
- Overlapping ticks are skipped
- A failure on one stock does not stop the others
"""

import asyncio
import random
from decimal import Decimal
from unittest.mock import patch

import pytest

from tradesim.services import PriceSimulator, SimulatorRunner, INITIAL_STOCKS
from tradesim.repositories.sqlalchemy import SqlAlchemyStockRepository


# =============================================================================
# SEEDING TESTS
# =============================================================================


class TestSeeding:
    """Tests for seed_if_empty."""

    def test_seeds_catalog_into_empty_store(self, price_simulator: PriceSimulator, uow):
        """
        GIVEN an empty store
        WHEN the simulator seeds
        THEN every catalog stock exists with one history entry at its opening price
        """
        seeded = price_simulator.seed_if_empty()

        assert seeded == len(INITIAL_STOCKS)
        stocks = uow.stocks.list_all()
        assert {s.symbol for s in stocks} == {symbol for symbol, _, _ in INITIAL_STOCKS}

        reliance = uow.stocks.get_by_symbol("RELIANCE")
        assert reliance.current_price == Decimal("2540.75")
        assert reliance.previous_close == reliance.current_price
        [entry] = uow.stocks.list_history(reliance.stock_id, 10)
        assert entry.price == Decimal("2540.75")

    def test_second_seed_is_noop(self, price_simulator: PriceSimulator, uow):
        price_simulator.seed_if_empty()

        assert price_simulator.seed_if_empty() == 0
        assert uow.stocks.count() == len(INITIAL_STOCKS)


# =============================================================================
# PRICE STEP TESTS
# =============================================================================


class TestNextPrice:
    """Tests for the random walk step."""

    def test_step_stays_within_bounds(self, uow_factory):
        simulator = PriceSimulator(uow_factory, rng=random.Random(7), max_change_pct=Decimal("3"))
        current = Decimal("100.00")

        for _ in range(500):
            price = simulator.next_price(current)
            assert Decimal("97.00") <= price <= Decimal("103.00")
            assert price == price.quantize(Decimal("0.01"))

    def test_price_never_drops_below_floor(self, uow_factory):
        """
        GIVEN a stock at the floor and a walk that always falls
        WHEN many steps are applied
        THEN the price stays at the floor and never reaches zero
        """
        simulator = PriceSimulator(uow_factory, rng=random.Random(1), max_change_pct=Decimal("50"))
        price = Decimal("0.01")

        with patch.object(simulator._rng, "uniform", return_value=-50.0):
            for _ in range(50):
                price = simulator.next_price(price)
                assert price >= Decimal("0.01")

        assert price == Decimal("0.01")

    def test_same_seed_same_walk(self, uow_factory):
        first = PriceSimulator(uow_factory, rng=random.Random(42))
        second = PriceSimulator(uow_factory, rng=random.Random(42))

        assert [first.next_price(Decimal("500")) for _ in range(10)] == [
            second.next_price(Decimal("500")) for _ in range(10)
        ]

    def test_floor_below_one_cent_rejected(self, uow_factory):
        with pytest.raises(ValueError):
            PriceSimulator(uow_factory, min_price=Decimal("0"))


# =============================================================================
# TICK TESTS
# =============================================================================


class TestTick:
    """Tests for a full update pass."""

    def test_tick_rolls_previous_close_and_appends_history(
        self, price_simulator: PriceSimulator, stock_factory, uow
    ):
        """
        GIVEN a stock at 100
        WHEN one tick runs
        THEN previous_close is 100, current is the new price, and history has it
        """
        stock = stock_factory(price=Decimal("100"))

        result = price_simulator.tick()

        assert result.updated == 1
        assert result.failed == 0
        uow.rollback()
        updated = uow.stocks.get_by_id(stock.stock_id)
        assert updated.previous_close == Decimal("100")
        history = uow.stocks.list_history(stock.stock_id, 10)
        assert len(history) == 2
        assert history[0].price == updated.current_price

    def test_overlapping_tick_is_skipped(self, price_simulator: PriceSimulator, stock_factory):
        stock_factory()

        price_simulator._tick_lock.acquire()
        try:
            assert price_simulator.tick() is None
        finally:
            price_simulator._tick_lock.release()

        assert price_simulator.tick().updated == 1

    def test_failure_on_one_stock_does_not_stop_others(
        self, price_simulator: PriceSimulator, stock_factory, uow
    ):
        """
        GIVEN three stocks where updating the second fails
        WHEN a tick runs
        THEN the other two are updated and the failure is counted
        """
        stocks = [stock_factory(symbol=s, price=Decimal("100")) for s in ("AAA", "BBB", "CCC")]
        real_update = SqlAlchemyStockRepository.update_price

        def flaky_update(repo, stock_id, price, at):
            if stock_id == stocks[1].stock_id:
                raise RuntimeError("write failed")
            return real_update(repo, stock_id, price, at)

        with patch.object(SqlAlchemyStockRepository, "update_price", flaky_update):
            result = price_simulator.tick()

        assert result.updated == 2
        assert result.failed == 1
        uow.rollback()
        assert len(uow.stocks.list_history(stocks[0].stock_id, 10)) == 2
        assert len(uow.stocks.list_history(stocks[1].stock_id, 10)) == 1
        assert len(uow.stocks.list_history(stocks[2].stock_id, 10)) == 2


# =============================================================================
# RUNNER TESTS
# =============================================================================


class TestSimulatorRunner:
    """Tests for the periodic runner."""

    def test_runs_first_tick_immediately_and_stops(self, price_simulator: PriceSimulator, stock_factory):
        stock_factory()
        calls = []

        async def scenario():
            runner = SimulatorRunner(price_simulator, interval_seconds=3600, after_tick=lambda: calls.append(1))
            runner.start()
            for _ in range(100):
                if calls:
                    break
                await asyncio.sleep(0.01)
            assert runner.is_running
            await runner.stop()
            assert not runner.is_running

        asyncio.run(scenario())

        assert calls == [1]
