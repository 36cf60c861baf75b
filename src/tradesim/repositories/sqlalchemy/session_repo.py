"""SQLAlchemy implementation of SessionRepository."""

from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from tradesim.core.timezone import to_utc
from tradesim.domain.models import UserSession
from tradesim.repositories.sqlalchemy.orm_models import SessionORM


class SqlAlchemySessionRepository:
    """SQLAlchemy-backed server-side session store."""

    def __init__(self, db: Session):
        self._db = db

    def create(self, session: UserSession) -> UserSession:
        """Stage a new session."""
        orm_session = SessionORM(
            token=session.token,
            user_id=session.user_id,
            created_at=session.created_at,
            expires_at=session.expires_at,
        )
        self._db.add(orm_session)
        self._db.flush()
        return self._to_domain(orm_session)

    def get(self, token: str) -> Optional[UserSession]:
        """Retrieve session by token."""
        orm_session = self._db.query(SessionORM).filter(SessionORM.token == token).first()
        return self._to_domain(orm_session) if orm_session else None

    def delete(self, token: str) -> None:
        """Remove a session (no-op if absent)."""
        self._db.query(SessionORM).filter(SessionORM.token == token).delete()
        self._db.flush()

    def delete_expired(self, now: datetime) -> int:
        """Remove all sessions expired at `now`."""
        removed = self._db.query(SessionORM).filter(SessionORM.expires_at <= now).delete()
        self._db.flush()
        return removed

    @staticmethod
    def _to_domain(orm: SessionORM) -> UserSession:
        """Convert ORM session to domain model."""
        return UserSession(
            token=orm.token,
            user_id=orm.user_id,
            created_at=to_utc(orm.created_at),
            expires_at=to_utc(orm.expires_at),
        )
