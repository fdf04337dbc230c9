"""Newsletter and contact API routes."""

from typing import List

from fastapi import APIRouter, Depends

from app.application.services.outreach_service import list_subscribers, submit_contact, subscribe
from app.domain.models.user import User
from app.domain.repositories.donation_repository import SubscriberRepository
from app.domain.schemas.subscriber import (
    ContactRequest,
    SubscribeRequest,
    SubscribeResponse,
    SubscriberRead,
)
from app.interfaces.api.deps import require_admin
from app.interfaces.deps import get_subscriber_repository

router = APIRouter(prefix="/api", tags=["Outreach"])


@router.post("/subscribe", response_model=SubscribeResponse)
def subscribe_newsletter(
    body: SubscribeRequest,
    repo: SubscriberRepository = Depends(get_subscriber_repository),
):
    subscriber, created = subscribe(repo, body.email)
    return SubscribeResponse(
        message="Subscription successful" if created else "Already subscribed",
        subscriber=SubscriberRead.model_validate(subscriber),
    )


@router.get("/subscribers", response_model=List[SubscriberRead])
def subscribers(
    repo: SubscriberRepository = Depends(get_subscriber_repository),
    admin: User = Depends(require_admin),
):
    return list_subscribers(repo)


@router.post("/contact")
def contact(body: ContactRequest):
    submit_contact(body)
    return {"success": True, "message": "Message sent successfully"}
