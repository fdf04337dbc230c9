"""Key/value site settings (setup markers and similar one-off flags)."""

from sqlalchemy import Column, String, DateTime
from sqlalchemy.sql import func

from app.infrastructure.database import Base

ADMIN_SETUP_COMPLETED = "admin_setup_completed"


class SiteSetting(Base):
    __tablename__ = "site_settings"

    key = Column(String(100), primary_key=True)
    value = Column(String(500), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<SiteSetting {self.key}={self.value}>"
