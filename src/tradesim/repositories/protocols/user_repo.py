"""User repository protocol."""

from decimal import Decimal
from typing import Protocol, Optional

from tradesim.domain.models import User


class UserRepository(Protocol):
    """Interface for user data access."""

    def create(self, user: User) -> User:
        """Persist a new user; raises on duplicate username."""
        ...

    def get_by_id(self, user_id: int, for_update: bool = False) -> Optional[User]:
        """Retrieve user by ID, optionally locking the row until commit."""
        ...

    def get_by_username(self, username: str) -> Optional[User]:
        """Retrieve user by username."""
        ...

    def update_wallet_balance(self, user_id: int, balance: Decimal) -> User:
        """Set a user's wallet balance."""
        ...

    def list_by_net_worth(self, limit: int) -> list[tuple[int, str, Decimal]]:
        """Return (user_id, username, cash + holdings value), richest first."""
        ...
