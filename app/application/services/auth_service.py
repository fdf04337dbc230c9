"""Auth service — JWT token management, password hashing and admin status."""

from datetime import datetime, timedelta, timezone
from typing import Optional

import structlog
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.config import get_settings
from app.core.exceptions import (
    BadRequestException,
    BusinessRuleViolationException,
    EntityNotFoundException,
    ForbiddenException,
)
from app.domain.models.user import User
from app.domain.repositories.user_repository import UserRepository

settings = get_settings()
logger = structlog.get_logger(__name__)
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.JWT_EXPIRATION_MINUTES)
    )
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> Optional[dict]:
    try:
        payload = jwt.decode(
            token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM]
        )
        return payload
    except JWTError:
        return None


def authenticate_user(repo: UserRepository, email: str, password: str) -> Optional[User]:
    user = repo.get_by_email(email.strip().lower())
    if not user or not verify_password(password, user.password_hash):
        return None
    if not user.is_active:
        return None
    return user


def _new_user(username: str, email: str, password: str, external_auth_id: Optional[str] = None) -> User:
    return User(
        username=username.strip(),
        email=email.strip().lower(),
        password_hash=hash_password(password),
        external_auth_id=external_auth_id,
        is_admin=False,
    )


def _check_unique(repo: UserRepository, username: str, email: str) -> None:
    if repo.get_by_email(email.strip().lower()):
        raise BadRequestException("Email already registered")
    if repo.get_by_username(username.strip()):
        raise BadRequestException("Username already taken")


def create_user(
    repo: UserRepository,
    username: str,
    email: str,
    password: str,
    external_auth_id: Optional[str] = None,
) -> User:
    _check_unique(repo, username, email)
    user = repo.create({
        "username": username.strip(),
        "email": email.strip().lower(),
        "password_hash": hash_password(password),
        "external_auth_id": external_auth_id,
    })
    logger.info("User registered", user_id=user.id)
    return user


def is_admin(repo: UserRepository, user: User) -> bool:
    """Admin record first, then the profile flag.

    A store failure resolves to False so privileges are never granted by
    accident.
    """
    try:
        if repo.get_admin_record(user.id) is not None:
            return True
        return bool(user.is_admin)
    except SQLAlchemyError as e:
        logger.warning("Admin status check failed; treating as non-admin", user_id=user.id, error=str(e))
        return False


def setup_first_admin(repo: UserRepository, username: str, email: str, password: str) -> User:
    """One-time bootstrap of the first administrator.

    Allowed exactly once per database: the setup marker is written in the same
    transaction as the grant, and stays even if users or admins are removed.
    An existing account can be promoted by supplying its password.
    """
    if repo.is_setup_completed():
        raise ForbiddenException("Admin setup has already been completed")

    existing = repo.get_by_email(email.strip().lower())
    if existing is not None:
        if not verify_password(password, existing.password_hash):
            raise BadRequestException("Email already registered")
        user = existing
    else:
        _check_unique(repo, username, email)
        user = _new_user(username, email, password)

    try:
        user = repo.complete_admin_setup(user)
    except IntegrityError:
        # Lost a race with a concurrent setup call
        raise ForbiddenException("Admin setup has already been completed")

    logger.info("Admin setup completed", user_id=user.id)
    return user


def set_admin_status(repo: UserRepository, user_id: int, make_admin: bool, acting_user: User) -> User:
    target = repo.get_by_id(user_id)
    if target is None:
        raise EntityNotFoundException("User not found")
    if target.id == acting_user.id and not make_admin:
        raise BusinessRuleViolationException("You cannot revoke your own admin access")

    user = repo.set_admin(target, make_admin, granted_by=acting_user.id)
    logger.info(
        "Admin status changed",
        user_id=user.id,
        is_admin=make_admin,
        changed_by=acting_user.id,
    )
    return user
