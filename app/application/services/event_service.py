"""Event service — admin CRUD for events."""

from datetime import datetime, timezone
from typing import List

import structlog

from app.core.exceptions import EntityNotFoundException
from app.domain.models.event import Event
from app.domain.repositories.event_repository import EventRepository
from app.domain.schemas.event import EventCreate, EventUpdate

logger = structlog.get_logger(__name__)


def list_events(repo: EventRepository, upcoming: bool = False) -> List[Event]:
    if upcoming:
        return repo.list_upcoming(datetime.now(timezone.utc))
    return repo.list()


def get_event(repo: EventRepository, event_id: int) -> Event:
    event = repo.get_by_id(event_id)
    if event is None:
        raise EntityNotFoundException("Event not found", {"id": event_id})
    return event


def create_event(repo: EventRepository, data: EventCreate) -> Event:
    event = repo.create(data)
    logger.info("Event created", event_id=event.id, title=event.title)
    return event


def update_event(repo: EventRepository, event_id: int, data: EventUpdate) -> Event:
    event = repo.update(get_event(repo, event_id), data)
    logger.info("Event updated", event_id=event.id, fields=sorted(data.model_fields_set))
    return event


def delete_event(repo: EventRepository, event_id: int) -> None:
    if repo.delete(event_id) is None:
        raise EntityNotFoundException("Event not found", {"id": event_id})
    logger.info("Event deleted", event_id=event_id)
