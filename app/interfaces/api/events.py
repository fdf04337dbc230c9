"""Events API routes — public reads, admin writes."""

from typing import List

from fastapi import APIRouter, Depends, status

from app.application.services.event_service import (
    create_event,
    delete_event,
    get_event,
    list_events,
    update_event,
)
from app.domain.models.user import User
from app.domain.repositories.event_repository import EventRepository
from app.domain.schemas.event import EventCreate, EventRead, EventUpdate
from app.interfaces.api.deps import require_admin
from app.interfaces.deps import get_event_repository

router = APIRouter(prefix="/api/events", tags=["Events"])


@router.get("", response_model=List[EventRead])
def list_all(upcoming: bool = False, repo: EventRepository = Depends(get_event_repository)):
    return list_events(repo, upcoming=upcoming)


@router.get("/{event_id}", response_model=EventRead)
def get_one(event_id: int, repo: EventRepository = Depends(get_event_repository)):
    return get_event(repo, event_id)


@router.post("", response_model=EventRead, status_code=status.HTTP_201_CREATED)
def create(
    body: EventCreate,
    repo: EventRepository = Depends(get_event_repository),
    admin: User = Depends(require_admin),
):
    return create_event(repo, body)


@router.put("/{event_id}", response_model=EventRead)
def update(
    event_id: int,
    body: EventUpdate,
    repo: EventRepository = Depends(get_event_repository),
    admin: User = Depends(require_admin),
):
    return update_event(repo, event_id, body)


@router.delete("/{event_id}")
def delete(
    event_id: int,
    repo: EventRepository = Depends(get_event_repository),
    admin: User = Depends(require_admin),
):
    delete_event(repo, event_id)
    return {"success": True}
