"""Pydantic schemas for User and Auth."""

from datetime import datetime
from typing import Optional

from app.domain.schemas.base import CamelModel, RequiredStr


class UserCreate(CamelModel):
    username: RequiredStr
    email: RequiredStr
    password: RequiredStr
    external_auth_id: Optional[str] = None


class UserRead(CamelModel):
    id: int
    username: str
    email: str
    is_admin: bool
    external_auth_id: Optional[str] = None
    is_active: bool
    created_at: Optional[datetime] = None


class LoginRequest(CamelModel):
    email: RequiredStr
    password: RequiredStr


class SessionRead(CamelModel):
    """Current user plus the resolved admin status."""
    user: UserRead
    is_admin: bool


class TokenResponse(CamelModel):
    access_token: str
    token_type: str = "bearer"
    user: UserRead
    is_admin: bool


class AdminStatusUpdate(CamelModel):
    is_admin: bool
