"""Newsletter signup and contact form."""

from typing import List, Tuple

import structlog

from app.core.exceptions import BadRequestException
from app.domain.models.subscriber import Subscriber
from app.domain.repositories.donation_repository import SubscriberRepository
from app.domain.schemas.subscriber import ContactRequest

logger = structlog.get_logger(__name__)


def subscribe(repo: SubscriberRepository, email: str | None) -> Tuple[Subscriber, bool]:
    email = (email or "").strip().lower()
    if "@" not in email:
        raise BadRequestException("Please provide a valid email address")

    subscriber, created = repo.add_if_absent(email)
    if created:
        logger.info("Subscriber added", subscriber_id=subscriber.id)
    return subscriber, created


def list_subscribers(repo: SubscriberRepository) -> List[Subscriber]:
    return repo.list()


def submit_contact(data: ContactRequest) -> None:
    # Messages are acknowledged and logged only; there is no inbox to deliver to
    logger.info(
        "Contact message received",
        name=data.name,
        email=data.email,
        subject=data.subject,
        length=len(data.message),
    )
