"""Registration, login, logout and current-user endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Response

from tradesim.api.deps import get_auth_service, get_current_user, get_session_token
from tradesim.api.schemas import (
    RegisterRequest,
    LoginRequest,
    UserResponse,
    MessageResponse,
)
from tradesim.config.settings import get_settings
from tradesim.domain.models import User, UserSession
from tradesim.services import AuthService

router = APIRouter(prefix="/api", tags=["auth"])


def _set_session_cookie(response: Response, session: UserSession) -> None:
    settings = get_settings()
    response.set_cookie(
        key=settings.session_cookie_name,
        value=session.token,
        max_age=settings.session_ttl_seconds,
        httponly=True,
        samesite="lax",
        secure=settings.cookie_secure,
    )


@router.post("/register", response_model=UserResponse, status_code=201)
def register(
    data: RegisterRequest,
    response: Response,
    auth: AuthService = Depends(get_auth_service),
) -> UserResponse:
    """Create an account with the starting balance and log it in."""
    user = auth.register(data.username, data.password)
    _set_session_cookie(response, auth.open_session(user))
    return UserResponse.from_domain(user)


@router.post("/login", response_model=UserResponse)
def login(
    data: LoginRequest,
    response: Response,
    auth: AuthService = Depends(get_auth_service),
) -> UserResponse:
    """Check credentials and start a session."""
    user = auth.authenticate(data.username, data.password)
    _set_session_cookie(response, auth.open_session(user))
    return UserResponse.from_domain(user)


@router.post("/logout", response_model=MessageResponse)
def logout(
    response: Response,
    token: Optional[str] = Depends(get_session_token),
    auth: AuthService = Depends(get_auth_service),
) -> MessageResponse:
    """End the current session. Succeeds even without one."""
    auth.close_session(token)
    response.delete_cookie(get_settings().session_cookie_name)
    return MessageResponse(message="Logged out")


@router.get("/user", response_model=UserResponse)
def current_user(user: User = Depends(get_current_user)) -> UserResponse:
    """Return the logged-in user."""
    return UserResponse.from_domain(user)
