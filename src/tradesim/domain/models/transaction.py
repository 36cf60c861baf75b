"""Transaction domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from tradesim.domain.models.enums import TradeType, TransactionStatus


@dataclass
class Transaction:
    """
    Audit record of one attempted trade (write-once).

    One row per attempt regardless of outcome; failed attempts carry the
    parameters that were requested.
    """

    transaction_id: Optional[int]
    user_id: int
    stock_id: int
    trade_type: TradeType
    quantity: int
    price: Decimal
    total: Decimal
    status: TransactionStatus = TransactionStatus.COMPLETED
    created_at: Optional[datetime] = field(default=None)

    def __post_init__(self) -> None:
        if isinstance(self.trade_type, str):
            self.trade_type = TradeType(self.trade_type)
        if isinstance(self.status, str):
            self.status = TransactionStatus(self.status)
