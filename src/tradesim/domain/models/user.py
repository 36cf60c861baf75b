"""User and session domain models."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass
class User:
    """A registered trader and their cash wallet."""

    user_id: Optional[int]
    username: str
    password_hash: str
    wallet_balance: Decimal = field(default_factory=lambda: Decimal("0"))
    created_at: Optional[datetime] = field(default=None)


@dataclass
class UserSession:
    """
    Server-side login session.

    The token is the only credential held by the client (in a cookie).
    """

    token: str
    user_id: int
    created_at: datetime
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at
