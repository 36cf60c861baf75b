"""Trade execution: validate and atomically settle one order."""

import logging
import threading
from dataclasses import dataclass
from decimal import Decimal
from typing import Union

from sqlalchemy.exc import SQLAlchemyError

from tradesim.core.exceptions import (
    InsufficientFundsError,
    InsufficientSharesError,
    InvalidTradeTypeError,
    NotFoundError,
    StorageError,
    TradeError,
    ValidationError,
)
from tradesim.core.timezone import now_utc
from tradesim.domain.models import (
    Position,
    Stock,
    Transaction,
    TradeType,
    TransactionStatus,
    User,
)
from tradesim.repositories.protocols import UnitOfWork

logger = logging.getLogger(__name__)

AVERAGE_PRICE_QUANT = Decimal("0.000001")


@dataclass
class TradeOrder:
    """Input data for a single order."""

    stock_id: int
    trade_type: Union[TradeType, str]
    quantity: int
    price: Decimal


class UserLockRegistry:
    """
    Hands out one lock per user so a user's trades settle one at a time.

    Shared by every request in the process.
    """

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: dict[int, threading.Lock] = {}

    def lock_for(self, user_id: int) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(user_id)
            if lock is None:
                lock = threading.Lock()
                self._locks[user_id] = lock
            return lock


class TradeService:
    """
    Service that settles BUY/SELL orders against the account ledger.

    Wallet balance, position and the COMPLETED transaction row are committed
    together. A rejected order leaves the ledger untouched and is recorded
    as a FAILED transaction.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        locks: UserLockRegistry,
        enforce_market_price: bool = False,
    ):
        self._uow = uow
        self._locks = locks
        self._enforce_market_price = enforce_market_price

    def execute_trade(self, user_id: int, order: TradeOrder) -> Transaction:
        """
        Settle an order for a user.

        Raises:
            ValidationError: non-positive quantity or price.
            InvalidTradeTypeError: side is not BUY or SELL.
            NotFoundError: unknown user or stock.
            InsufficientFundsError / InsufficientSharesError: order rejected
                (a FAILED transaction is recorded first).
            StorageError: the database failed mid-settlement.
        """
        trade_type = self._parse_trade_type(order.trade_type)
        if order.quantity is None or order.quantity <= 0:
            raise ValidationError("Quantity must be greater than 0")
        if order.price is None or order.price <= 0:
            raise ValidationError("Price must be greater than 0")

        with self._locks.lock_for(user_id):
            # Discard any snapshot read before the lock was held
            self._uow.rollback()
            # Replaced by the market price once the stock is loaded, if enforced
            price = order.price
            try:
                user = self._uow.users.get_by_id(user_id, for_update=True)
                if not user:
                    raise NotFoundError("User", str(user_id))
                stock = self._uow.stocks.get_by_id(order.stock_id)
                if not stock:
                    raise NotFoundError("Stock", str(order.stock_id))

                price = stock.current_price if self._enforce_market_price else order.price
                total = price * order.quantity

                if trade_type == TradeType.BUY:
                    self._settle_buy(user, stock, order.quantity, total)
                else:
                    self._settle_sell(user, stock, order.quantity, total)

                transaction = self._uow.transactions.create(
                    Transaction(
                        transaction_id=None,
                        user_id=user_id,
                        stock_id=stock.stock_id,
                        trade_type=trade_type,
                        quantity=order.quantity,
                        price=price,
                        total=total,
                        status=TransactionStatus.COMPLETED,
                        created_at=now_utc(),
                    )
                )
                self._uow.commit()
            except TradeError as exc:
                self._uow.rollback()
                logger.warning(
                    "Rejected %s of %d x stock %s for user %s: %s",
                    trade_type.value, order.quantity, order.stock_id, user_id, exc.message,
                )
                self._record_failure(user_id, order, trade_type, price)
                raise
            except NotFoundError:
                self._uow.rollback()
                raise
            except SQLAlchemyError as exc:
                self._uow.rollback()
                logger.exception("Storage failure while settling trade for user %s", user_id)
                raise StorageError("Trade could not be settled") from exc

        logger.info(
            "Completed %s of %d x %s @ %s for user %s",
            trade_type.value, order.quantity, stock.symbol, price, user_id,
        )
        return transaction

    def _settle_buy(self, user: User, stock: Stock, quantity: int, total: Decimal) -> None:
        if user.wallet_balance < total:
            raise InsufficientFundsError(str(total), str(user.wallet_balance))

        position = self._uow.positions.get(user.user_id, stock.stock_id)
        old_quantity = position.quantity if position else 0
        old_cost = position.cost_basis if position else Decimal("0")

        new_quantity = old_quantity + quantity
        new_average = ((old_cost + total) / new_quantity).quantize(AVERAGE_PRICE_QUANT)

        self._uow.users.update_wallet_balance(user.user_id, user.wallet_balance - total)
        self._uow.positions.upsert(
            Position(
                user_id=user.user_id,
                stock_id=stock.stock_id,
                quantity=new_quantity,
                average_buy_price=new_average,
                updated_at=now_utc(),
            )
        )

    def _settle_sell(self, user: User, stock: Stock, quantity: int, total: Decimal) -> None:
        position = self._uow.positions.get(user.user_id, stock.stock_id)
        held = position.quantity if position else 0
        if position is None or held < quantity:
            raise InsufficientSharesError(stock.symbol, str(quantity), str(held))

        self._uow.users.update_wallet_balance(user.user_id, user.wallet_balance + total)

        remaining = held - quantity
        if remaining == 0:
            self._uow.positions.delete(user.user_id, stock.stock_id)
        else:
            # Average cost is unchanged by a sale
            self._uow.positions.upsert(
                Position(
                    user_id=user.user_id,
                    stock_id=stock.stock_id,
                    quantity=remaining,
                    average_buy_price=position.average_buy_price,
                    updated_at=now_utc(),
                )
            )

    def _record_failure(
        self, user_id: int, order: TradeOrder, trade_type: TradeType, price: Decimal
    ) -> None:
        """Write the FAILED audit row for a rejected order, at the price it was checked at."""
        try:
            self._uow.transactions.create(
                Transaction(
                    transaction_id=None,
                    user_id=user_id,
                    stock_id=order.stock_id,
                    trade_type=trade_type,
                    quantity=order.quantity,
                    price=price,
                    total=price * order.quantity,
                    status=TransactionStatus.FAILED,
                    created_at=now_utc(),
                )
            )
            self._uow.commit()
        except SQLAlchemyError:
            self._uow.rollback()
            logger.exception("Could not record failed trade for user %s", user_id)

    @staticmethod
    def _parse_trade_type(value: Union[TradeType, str]) -> TradeType:
        if isinstance(value, TradeType):
            return value
        try:
            return TradeType(str(value).upper())
        except ValueError:
            raise InvalidTradeTypeError(str(value))
