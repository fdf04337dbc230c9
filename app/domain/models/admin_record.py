"""Admin records — explicit grants of administrative privileges."""

from sqlalchemy import Column, Integer, DateTime, ForeignKey
from sqlalchemy.sql import func

from app.infrastructure.database import Base


class AdminRecord(Base):
    __tablename__ = "admins"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    granted_by = Column(Integer, nullable=True)  # None for bootstrap grants
    granted_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<AdminRecord user={self.user_id}>"
