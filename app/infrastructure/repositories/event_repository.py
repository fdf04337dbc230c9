"""
SQLAlchemy Implementation of Event Repository.
"""

from datetime import datetime
from typing import List

from app.domain.models.event import Event
from app.domain.repositories.event_repository import EventRepository
from app.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyEventRepository(SQLAlchemyRepository[Event], EventRepository):
    """Event repository implementation using SQLAlchemy."""

    def _ordering(self) -> tuple:
        # Newest date first
        return (Event.date.desc(), Event.id.desc())

    def list_upcoming(self, now: datetime) -> List[Event]:
        return (
            self.db.query(Event)
            .filter(Event.date >= now)
            .order_by(Event.date.asc(), Event.id.asc())
            .all()
        )
