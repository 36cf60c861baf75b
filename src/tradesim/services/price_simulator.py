"""Random-walk price simulator and its periodic runner."""

import asyncio
import logging
import random
import threading
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Callable, Optional

from tradesim.core.timezone import now_utc
from tradesim.domain.models import Stock, PriceHistoryEntry
from tradesim.repositories.protocols import UnitOfWork

logger = logging.getLogger(__name__)

PRICE_QUANT = Decimal("0.01")

# Catalog seeded into an empty database: (symbol, name, opening price)
INITIAL_STOCKS: list[tuple[str, str, Decimal]] = [
    ("RELIANCE", "Reliance Industries Ltd.", Decimal("2540.75")),
    ("TCS", "Tata Consultancy Services Ltd.", Decimal("3421.30")),
    ("HDFCBANK", "HDFC Bank Ltd.", Decimal("1678.20")),
    ("INFY", "Infosys Ltd.", Decimal("1452.85")),
    ("TATASTEEL", "Tata Steel Ltd.", Decimal("126.40")),
    ("BHARTIARTL", "Bharti Airtel Ltd.", Decimal("875.60")),
    ("ITC", "ITC Ltd.", Decimal("435.25")),
    ("WIPRO", "Wipro Ltd.", Decimal("425.50")),
    ("SBIN", "State Bank of India", Decimal("625.75")),
    ("MARUTI", "Maruti Suzuki India Ltd.", Decimal("10245.60")),
    ("SUNPHARMA", "Sun Pharmaceutical Industries Ltd.", Decimal("1120.35")),
    ("ICICIBANK", "ICICI Bank Ltd.", Decimal("963.45")),
    ("AXISBANK", "Axis Bank Ltd.", Decimal("1023.70")),
    ("KOTAKBANK", "Kotak Mahindra Bank Ltd.", Decimal("1745.20")),
    ("POWERGRID", "Power Grid Corporation of India Ltd.", Decimal("245.80")),
    ("ASIANPAINT", "Asian Paints Ltd.", Decimal("3145.65")),
    ("ADANIPORTS", "Adani Ports and Special Economic Zone Ltd.", Decimal("875.40")),
    ("TECHM", "Tech Mahindra Ltd.", Decimal("1256.90")),
    ("TITAN", "Titan Company Ltd.", Decimal("3256.75")),
    ("HCLTECH", "HCL Technologies Ltd.", Decimal("1175.50")),
]


@dataclass
class TickResult:
    """Outcome of one price update pass."""

    updated: int = 0
    failed: int = 0


class PriceSimulator:
    """
    Moves every stock's price by a bounded random factor on each tick.

    Holds no price state of its own: each tick reads the stocks from the
    store and writes back through a fresh unit of work. Each stock is
    committed separately so one failure does not sink the rest of the tick.
    """

    def __init__(
        self,
        uow_factory: Callable[[], UnitOfWork],
        rng: Optional[random.Random] = None,
        max_change_pct: Decimal = Decimal("3"),
        min_price: Decimal = PRICE_QUANT,
        catalog: Optional[list[tuple[str, str, Decimal]]] = None,
    ):
        if min_price < PRICE_QUANT:
            raise ValueError(f"min_price must be at least {PRICE_QUANT}")
        if max_change_pct < 0:
            raise ValueError("max_change_pct cannot be negative")

        self._uow_factory = uow_factory
        self._rng = rng or random.Random()
        self._max_change_pct = max_change_pct
        self._min_price = min_price
        self._catalog = catalog if catalog is not None else INITIAL_STOCKS
        self._tick_lock = threading.Lock()

    def seed_if_empty(self) -> int:
        """Insert the initial catalog if there are no stocks; returns the number seeded."""
        with self._uow_factory() as uow:
            existing = uow.stocks.count()
            if existing:
                logger.info("Loaded %d stocks from database", existing)
                return 0

            logger.info("No stocks found in database. Seeding with initial stock data...")
            now = now_utc()
            for symbol, name, price in self._catalog:
                stock = uow.stocks.create(
                    Stock(
                        stock_id=None,
                        symbol=symbol,
                        name=name,
                        current_price=price,
                        previous_close=price,
                        updated_at=now,
                    )
                )
                uow.stocks.add_history(
                    PriceHistoryEntry(entry_id=None, stock_id=stock.stock_id, price=price, timestamp=now)
                )
            uow.commit()

        logger.info("Seeded database with %d stocks", len(self._catalog))
        return len(self._catalog)

    def next_price(self, current: Decimal) -> Decimal:
        """Apply one random step to a price, floored at min_price and rounded to cents."""
        bound = float(self._max_change_pct)
        factor = Decimal(str(self._rng.uniform(-bound, bound))) / 100
        candidate = max(current * (1 + factor), self._min_price)
        return candidate.quantize(PRICE_QUANT, rounding=ROUND_HALF_UP)

    def tick(self) -> Optional[TickResult]:
        """
        Run one price update pass over all stocks.

        Returns None without doing anything if another tick is still running.
        """
        if not self._tick_lock.acquire(blocking=False):
            logger.warning("Previous price update still in progress; skipping tick")
            return None
        try:
            return self._update_prices()
        finally:
            self._tick_lock.release()

    def _update_prices(self) -> TickResult:
        logger.info("Updating stock prices...")
        result = TickResult()

        with self._uow_factory() as uow:
            for stock in uow.stocks.list_all():
                try:
                    new_price = self.next_price(stock.current_price)
                    now = now_utc()
                    uow.stocks.update_price(stock.stock_id, new_price, now)
                    uow.stocks.add_history(
                        PriceHistoryEntry(entry_id=None, stock_id=stock.stock_id, price=new_price, timestamp=now)
                    )
                    uow.commit()
                    result.updated += 1
                except Exception:
                    uow.rollback()
                    result.failed += 1
                    logger.exception("Error updating price for %s", stock.symbol)

        logger.info(
            "Stock prices updated: %d updated, %d failed", result.updated, result.failed
        )
        return result


class SimulatorRunner:
    """Runs PriceSimulator.tick() immediately and then on a fixed interval."""

    def __init__(
        self,
        simulator: PriceSimulator,
        interval_seconds: float = 60,
        after_tick: Optional[Callable[[], None]] = None,
    ):
        self._simulator = simulator
        self._interval = interval_seconds
        self._after_tick = after_tick
        self._task: Optional[asyncio.Task] = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Schedule the loop on the running event loop (restarts if already running)."""
        if self._task is not None:
            self._task.cancel()
        self._task = asyncio.create_task(self._run())
        logger.info("Stock simulator started. Updating prices every %s seconds", self._interval)

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("Stock simulator stopped")

    async def _run(self) -> None:
        while True:
            try:
                await asyncio.to_thread(self._run_once)
            except Exception:
                logger.exception("Price simulator tick crashed")
            await asyncio.sleep(self._interval)

    def _run_once(self) -> None:
        self._simulator.tick()
        if self._after_tick is not None:
            self._after_tick()
