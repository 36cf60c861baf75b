"""Registration, login and server-side session management."""

import logging
from datetime import timedelta
from decimal import Decimal
from typing import Optional

from sqlalchemy.exc import IntegrityError

from tradesim.core.exceptions import AuthenticationError, ValidationError
from tradesim.core.security import (
    MAX_PASSWORD_BYTES,
    hash_password,
    new_session_token,
    password_too_long,
    verify_password,
)
from tradesim.core.timezone import now_utc
from tradesim.domain.models import User, UserSession
from tradesim.repositories.protocols import UnitOfWork

logger = logging.getLogger(__name__)


class AuthService:
    """
    Service for user accounts and login sessions.

    Sessions live in the database; the client only ever holds the opaque
    token. Passwords are stored as salted bcrypt hashes.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        starting_balance: Decimal = Decimal("100000"),
        bcrypt_rounds: int = 12,
        session_ttl_seconds: int = 24 * 60 * 60,
    ):
        self._uow = uow
        self._starting_balance = starting_balance
        self._bcrypt_rounds = bcrypt_rounds
        self._session_ttl = timedelta(seconds=session_ttl_seconds)

    def register(self, username: str, password: str) -> User:
        """
        Create a user credited with the starting balance.

        Raises:
            ValidationError: if the username is empty or already taken, or the
                password is empty or longer than bcrypt accepts.
        """
        username = username.strip()
        if not username:
            raise ValidationError("Username is required")
        if not password:
            raise ValidationError("Password is required")
        if password_too_long(password):
            raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")

        if self._uow.users.get_by_username(username):
            raise ValidationError("Username already exists")

        user = User(
            user_id=None,
            username=username,
            password_hash=hash_password(password, rounds=self._bcrypt_rounds),
            wallet_balance=self._starting_balance,
            created_at=now_utc(),
        )
        try:
            created = self._uow.users.create(user)
            self._uow.commit()
        except IntegrityError:
            # Lost a race with a concurrent registration
            self._uow.rollback()
            raise ValidationError("Username already exists")

        logger.info("Registered user %s (id=%s)", created.username, created.user_id)
        return created

    def authenticate(self, username: str, password: str) -> User:
        """Return the user for valid credentials, else raise AuthenticationError."""
        user = self._uow.users.get_by_username(username.strip())
        if not user or not verify_password(password, user.password_hash):
            logger.info("Failed login attempt for username %r", username)
            raise AuthenticationError("Invalid username or password")
        return user

    def open_session(self, user: User) -> UserSession:
        """Start a new login session for the user."""
        now = now_utc()
        session = UserSession(
            token=new_session_token(),
            user_id=user.user_id,
            created_at=now,
            expires_at=now + self._session_ttl,
        )
        created = self._uow.sessions.create(session)
        self._uow.commit()
        return created

    def resolve_session(self, token: Optional[str]) -> User:
        """
        Return the user owning a live session.

        Expired sessions are removed on sight.
        """
        if not token:
            raise AuthenticationError()

        session = self._uow.sessions.get(token)
        if not session:
            raise AuthenticationError()

        if session.is_expired(now_utc()):
            self._uow.sessions.delete(token)
            self._uow.commit()
            raise AuthenticationError("Session expired")

        user = self._uow.users.get_by_id(session.user_id)
        if not user:
            raise AuthenticationError()
        return user

    def close_session(self, token: Optional[str]) -> None:
        """End a session (idempotent)."""
        if not token:
            return
        self._uow.sessions.delete(token)
        self._uow.commit()

    def purge_expired_sessions(self) -> int:
        """Delete every expired session; returns the number removed."""
        removed = self._uow.sessions.delete_expired(now_utc())
        self._uow.commit()
        if removed:
            logger.info("Purged %d expired sessions", removed)
        return removed
