"""Session repository protocol."""

from datetime import datetime
from typing import Protocol, Optional

from tradesim.domain.models import UserSession


class SessionRepository(Protocol):
    """Interface for the server-side session store."""

    def create(self, session: UserSession) -> UserSession:
        """Persist a new session."""
        ...

    def get(self, token: str) -> Optional[UserSession]:
        """Retrieve session by token."""
        ...

    def delete(self, token: str) -> None:
        """Remove a session (no-op if absent)."""
        ...

    def delete_expired(self, now: datetime) -> int:
        """Remove all sessions expired at `now`; returns the number removed."""
        ...
