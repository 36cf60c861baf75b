"""Pydantic schemas for auth endpoints."""

from datetime import datetime

from pydantic import Field, field_validator

from tradesim.api.schemas.base import ApiModel
from tradesim.core.security import MAX_PASSWORD_BYTES, password_too_long
from tradesim.domain.models import User


def _check_password_bytes(v: str) -> str:
    if password_too_long(v):
        raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    return v


class RegisterRequest(ApiModel):
    """Request schema for registration."""

    username: str = Field(..., min_length=3, max_length=50, description="Unique username")
    password: str = Field(..., min_length=6, max_length=128, description="Plain-text password")

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, v: str) -> str:
        return _check_password_bytes(v)


class LoginRequest(ApiModel):
    """Request schema for login."""

    username: str = Field(..., min_length=1, max_length=50)
    password: str = Field(..., min_length=1, max_length=128)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, v: str) -> str:
        return _check_password_bytes(v)


class UserResponse(ApiModel):
    """Public view of a user (never includes the password hash)."""

    id: int
    username: str
    wallet_balance: float
    created_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.user_id,
            username=user.username,
            wallet_balance=float(user.wallet_balance),
            created_at=user.created_at,
        )


class MessageResponse(ApiModel):
    """Plain acknowledgement."""

    message: str
