"""
Donation and Subscriber Repository Interfaces.
"""

from typing import Any, Optional, Tuple

from app.domain.repositories.base import BaseRepository
from app.domain.models.donation import Donation
from app.domain.models.subscriber import Subscriber


class DonationRepository(BaseRepository[Donation]):
    """Interface for Donation-specific operations."""

    def get_by_payment_id(self, payment_id: str) -> Optional[Donation]:
        ...

    def create_if_absent(self, obj_in: Any) -> Tuple[Donation, bool]:
        """Insert unless a donation with the same payment id exists; returns (row, created)."""
        ...

    def total_amount(self) -> float:
        ...


class SubscriberRepository(BaseRepository[Subscriber]):
    """Interface for Subscriber-specific operations."""

    def get_by_email(self, email: str) -> Optional[Subscriber]:
        ...

    def add_if_absent(self, email: str) -> Tuple[Subscriber, bool]:
        """Insert the email unless already subscribed; returns (row, created)."""
        ...
