"""
Event Repository Interface.
"""

from datetime import datetime
from typing import List

from app.domain.repositories.base import BaseRepository
from app.domain.models.event import Event


class EventRepository(BaseRepository[Event]):
    """Interface for Event-specific operations."""

    def list_upcoming(self, now: datetime) -> List[Event]:
        """Events dated at or after `now`, soonest first."""
        ...
