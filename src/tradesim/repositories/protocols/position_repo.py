"""Position repository protocol."""

from typing import Protocol, Optional

from tradesim.domain.models import Position


class PositionRepository(Protocol):
    """Interface for per-user holdings."""

    def get(self, user_id: int, stock_id: int) -> Optional[Position]:
        """Retrieve the position for a user/stock pair."""
        ...

    def list_by_user(self, user_id: int) -> list[Position]:
        """List all open positions for a user."""
        ...

    def upsert(self, position: Position) -> Position:
        """Insert or update a position."""
        ...

    def delete(self, user_id: int, stock_id: int) -> None:
        """Remove a position."""
        ...
