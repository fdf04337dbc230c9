"""FastAPI dependency — JWT auth and admin guard."""

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from app.application.services.auth_service import decode_access_token, is_admin
from app.core.exceptions import ForbiddenException, UnauthorizedException
from app.domain.models.user import User
from app.domain.repositories.user_repository import UserRepository
from app.interfaces.deps import get_user_repository

security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    repo: UserRepository = Depends(get_user_repository),
) -> User:
    """Extract and validate the current user from JWT token."""
    if credentials is None:
        raise UnauthorizedException("Not authenticated")

    payload = decode_access_token(credentials.credentials)
    if payload is None:
        raise UnauthorizedException("Invalid or expired token")

    email = payload.get("sub")
    if email is None:
        raise UnauthorizedException("Invalid token")

    user = repo.get_by_email(email)
    if user is None or not user.is_active:
        raise UnauthorizedException("User not found or inactive")

    return user


def require_admin(
    user: User = Depends(get_current_user),
    repo: UserRepository = Depends(get_user_repository),
) -> User:
    """Require admin privileges."""
    if not is_admin(repo, user):
        raise ForbiddenException("Administrator access required")
    return user
