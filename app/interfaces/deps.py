"""
API Dependencies.
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.orm import Session

from app.infrastructure.database import get_db
from app.domain.models.donation import Donation
from app.domain.models.event import Event
from app.domain.models.menu_item import MenuItem
from app.domain.models.news_post import NewsPost
from app.domain.models.subscriber import Subscriber
from app.domain.models.user import User
from app.domain.repositories.donation_repository import DonationRepository, SubscriberRepository
from app.domain.repositories.event_repository import EventRepository
from app.domain.repositories.menu_repository import MenuRepository
from app.domain.repositories.news_repository import NewsRepository
from app.domain.repositories.user_repository import UserRepository
from app.infrastructure.media_storage import MediaStorage
from app.infrastructure.razorpay_api import RazorpayClient
from app.infrastructure.repositories.donation_repository import (
    SQLAlchemyDonationRepository,
    SQLAlchemySubscriberRepository,
)
from app.infrastructure.repositories.event_repository import SQLAlchemyEventRepository
from app.infrastructure.repositories.menu_repository import SQLAlchemyMenuRepository
from app.infrastructure.repositories.news_repository import SQLAlchemyNewsRepository
from app.infrastructure.repositories.user_repository import SQLAlchemyUserRepository


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    return SQLAlchemyUserRepository(db, User)


def get_event_repository(db: Session = Depends(get_db)) -> EventRepository:
    return SQLAlchemyEventRepository(db, Event)


def get_news_repository(db: Session = Depends(get_db)) -> NewsRepository:
    return SQLAlchemyNewsRepository(db, NewsPost)


def get_menu_repository(db: Session = Depends(get_db)) -> MenuRepository:
    return SQLAlchemyMenuRepository(db, MenuItem)


def get_donation_repository(db: Session = Depends(get_db)) -> DonationRepository:
    return SQLAlchemyDonationRepository(db, Donation)


def get_subscriber_repository(db: Session = Depends(get_db)) -> SubscriberRepository:
    return SQLAlchemySubscriberRepository(db, Subscriber)


@lru_cache
def get_payment_gateway() -> RazorpayClient:
    return RazorpayClient()


@lru_cache
def get_media_storage() -> MediaStorage:
    return MediaStorage()
