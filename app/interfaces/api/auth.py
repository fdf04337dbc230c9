"""Auth API routes — register, login, me, one-time admin setup."""

from typing import Optional

from fastapi import APIRouter, Depends, Header, status

from app.config import get_settings
from app.application.services.auth_service import (
    authenticate_user,
    create_access_token,
    create_user,
    is_admin,
    setup_first_admin,
)
from app.core.exceptions import ForbiddenException, UnauthorizedException
from app.domain.models.user import User
from app.domain.repositories.user_repository import UserRepository
from app.domain.schemas.auth import LoginRequest, SessionRead, TokenResponse, UserCreate, UserRead
from app.interfaces.api.deps import get_current_user
from app.interfaces.deps import get_user_repository

settings = get_settings()
router = APIRouter(prefix="/api/auth", tags=["Auth"])


def _token_response(repo: UserRepository, user: User) -> TokenResponse:
    access_token = create_access_token(data={"sub": user.email})
    return TokenResponse(
        access_token=access_token,
        user=UserRead.model_validate(user),
        is_admin=is_admin(repo, user),
    )


@router.post("/login", response_model=TokenResponse)
def login(body: LoginRequest, repo: UserRepository = Depends(get_user_repository)):
    user = authenticate_user(repo, body.email, body.password)
    if not user:
        raise UnauthorizedException("Invalid email or password.")
    return _token_response(repo, user)


@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register(body: UserCreate, repo: UserRepository = Depends(get_user_repository)):
    user = create_user(
        repo,
        username=body.username,
        email=body.email,
        password=body.password,
        external_auth_id=body.external_auth_id,
    )
    return UserRead.model_validate(user)


@router.get("/me", response_model=SessionRead)
def get_me(
    user: User = Depends(get_current_user),
    repo: UserRepository = Depends(get_user_repository),
):
    return SessionRead(user=UserRead.model_validate(user), is_admin=is_admin(repo, user))


@router.post("/setup", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
def setup_admin(
    body: UserCreate,
    x_setup_token: Optional[str] = Header(default=None),
    repo: UserRepository = Depends(get_user_repository),
):
    """Create the first administrator. Works once per installation."""
    if settings.ADMIN_SETUP_TOKEN and x_setup_token != settings.ADMIN_SETUP_TOKEN:
        raise ForbiddenException("Invalid setup token")

    user = setup_first_admin(repo, body.username, body.email, body.password)
    return _token_response(repo, user)
