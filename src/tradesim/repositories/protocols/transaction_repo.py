"""Transaction repository protocol."""

from typing import Protocol, Optional

from tradesim.domain.models import Transaction


class TransactionRepository(Protocol):
    """Interface for the append-only trade audit trail."""

    def create(self, transaction: Transaction) -> Transaction:
        """Persist a new transaction."""
        ...

    def list_by_user(self, user_id: int, limit: Optional[int] = None) -> list[Transaction]:
        """List a user's transactions, newest first."""
        ...
