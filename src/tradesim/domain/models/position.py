"""Position domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass
class Position:
    """
    A user's holding in one stock.

    Exists only while quantity > 0. average_buy_price is the weighted
    average cost of all open lots; it changes on BUY only.
    """

    user_id: int
    stock_id: int
    quantity: int
    average_buy_price: Decimal
    updated_at: Optional[datetime] = field(default=None)

    @property
    def cost_basis(self) -> Decimal:
        """Total amount paid for the open lots."""
        return self.average_buy_price * self.quantity
