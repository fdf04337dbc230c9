"""
SQLAlchemy Implementation of User Repository.
"""

from typing import Optional

from app.domain.models.admin_record import AdminRecord
from app.domain.models.site_setting import ADMIN_SETUP_COMPLETED, SiteSetting
from app.domain.models.user import User
from app.domain.repositories.user_repository import UserRepository
from app.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyUserRepository(SQLAlchemyRepository[User], UserRepository):
    """User repository implementation using SQLAlchemy."""

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def get_by_username(self, username: str) -> Optional[User]:
        return self.db.query(User).filter(User.username == username).first()

    def get_by_external_auth_id(self, external_auth_id: str) -> Optional[User]:
        return self.db.query(User).filter(User.external_auth_id == external_auth_id).first()

    def get_admin_record(self, user_id: int) -> Optional[AdminRecord]:
        return self.db.query(AdminRecord).filter(AdminRecord.user_id == user_id).first()

    def _apply_admin(self, user: User, is_admin: bool, granted_by: Optional[int]) -> None:
        record = self.get_admin_record(user.id)
        if is_admin and record is None:
            self.db.add(AdminRecord(user_id=user.id, granted_by=granted_by))
        elif not is_admin and record is not None:
            self.db.delete(record)
        user.is_admin = is_admin

    def set_admin(self, user: User, is_admin: bool, granted_by: Optional[int] = None) -> User:
        self._apply_admin(user, is_admin, granted_by)
        self.db.commit()
        self.db.refresh(user)
        return user

    def is_setup_completed(self) -> bool:
        return self.db.get(SiteSetting, ADMIN_SETUP_COMPLETED) is not None

    def complete_admin_setup(self, user: User) -> User:
        self.db.add(user)
        try:
            self.db.flush()
            self._apply_admin(user, True, None)
            self.db.add(SiteSetting(key=ADMIN_SETUP_COMPLETED, value=str(user.id)))
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(user)
        return user
