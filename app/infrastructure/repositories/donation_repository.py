"""
SQLAlchemy Implementations of Donation and Subscriber Repositories.
"""

from typing import Any, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError

from app.domain.models.donation import Donation
from app.domain.models.subscriber import Subscriber
from app.domain.repositories.donation_repository import DonationRepository, SubscriberRepository
from app.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyDonationRepository(SQLAlchemyRepository[Donation], DonationRepository):
    """Donation repository implementation using SQLAlchemy."""

    def _ordering(self) -> tuple:
        return (Donation.created_at.desc(), Donation.id.desc())

    def get_by_payment_id(self, payment_id: str) -> Optional[Donation]:
        return self.db.query(Donation).filter(Donation.payment_id == payment_id).first()

    def create_if_absent(self, obj_in: Any) -> Tuple[Donation, bool]:
        existing = self.get_by_payment_id(obj_in.payment_id)
        if existing is not None:
            return existing, False
        try:
            return self.create(obj_in), True
        except IntegrityError:
            # Webhook and checkout verification raced on the same payment
            self.db.rollback()
            return self.get_by_payment_id(obj_in.payment_id), False

    def total_amount(self) -> float:
        total = self.db.query(func.coalesce(func.sum(Donation.amount), 0)).scalar()
        return float(total)


class SQLAlchemySubscriberRepository(SQLAlchemyRepository[Subscriber], SubscriberRepository):
    """Subscriber repository implementation using SQLAlchemy."""

    def _ordering(self) -> tuple:
        return (Subscriber.subscribed_at.desc(), Subscriber.id.desc())

    def get_by_email(self, email: str) -> Optional[Subscriber]:
        return self.db.query(Subscriber).filter(Subscriber.email == email).first()

    def add_if_absent(self, email: str) -> Tuple[Subscriber, bool]:
        existing = self.get_by_email(email)
        if existing is not None:
            return existing, False
        try:
            return self.create({"email": email}), True
        except IntegrityError:
            self.db.rollback()
            return self.get_by_email(email), False
