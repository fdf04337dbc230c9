"""
User Repository Interface.
"""

from typing import Optional

from app.domain.repositories.base import BaseRepository
from app.domain.models.user import User
from app.domain.models.admin_record import AdminRecord


class UserRepository(BaseRepository[User]):
    """Interface for users, admin records and the setup marker."""

    def get_by_email(self, email: str) -> Optional[User]:
        ...

    def get_by_username(self, username: str) -> Optional[User]:
        ...

    def get_by_external_auth_id(self, external_auth_id: str) -> Optional[User]:
        ...

    def get_admin_record(self, user_id: int) -> Optional[AdminRecord]:
        ...

    def set_admin(self, user: User, is_admin: bool, granted_by: Optional[int] = None) -> User:
        """Create or remove the admin record and keep the profile flag in sync."""
        ...

    def is_setup_completed(self) -> bool:
        ...

    def complete_admin_setup(self, user: User) -> User:
        """Make `user` (new or existing) an admin and write the setup marker atomically."""
        ...
