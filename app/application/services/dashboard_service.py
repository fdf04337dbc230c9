"""Dashboard service — headline counts for the admin dashboard."""

from typing import Callable

import structlog
from sqlalchemy.exc import SQLAlchemyError

from app.domain.repositories.donation_repository import DonationRepository, SubscriberRepository
from app.domain.repositories.event_repository import EventRepository
from app.domain.repositories.news_repository import NewsRepository
from app.domain.schemas.site import DashboardStats

logger = structlog.get_logger(__name__)


def _safe(name: str, fn: Callable, default=0):
    """A failing count shows as zero rather than breaking the dashboard."""
    try:
        return fn()
    except SQLAlchemyError as e:
        logger.warning("Dashboard stat unavailable", stat=name, error=str(e))
        return default


def get_dashboard_stats(
    events: EventRepository,
    news: NewsRepository,
    subscribers: SubscriberRepository,
    donations: DonationRepository,
) -> DashboardStats:
    return DashboardStats(
        events=_safe("events", events.count),
        news_posts=_safe("news_posts", news.count),
        subscribers=_safe("subscribers", subscribers.count),
        donations=_safe("donations", donations.count),
        donation_total=_safe("donation_total", donations.total_amount, 0.0),
    )
