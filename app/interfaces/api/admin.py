"""Admin API routes — dashboard stats and user privileges."""

from typing import List

from fastapi import APIRouter, Depends

from app.application.services.auth_service import set_admin_status
from app.application.services.dashboard_service import get_dashboard_stats
from app.domain.models.user import User
from app.domain.repositories.donation_repository import DonationRepository, SubscriberRepository
from app.domain.repositories.event_repository import EventRepository
from app.domain.repositories.news_repository import NewsRepository
from app.domain.repositories.user_repository import UserRepository
from app.domain.schemas.auth import AdminStatusUpdate, UserRead
from app.domain.schemas.site import DashboardStats
from app.interfaces.api.deps import require_admin
from app.interfaces.deps import (
    get_donation_repository,
    get_event_repository,
    get_news_repository,
    get_subscriber_repository,
    get_user_repository,
)

router = APIRouter(prefix="/api/admin", tags=["Admin"])


@router.get("/stats", response_model=DashboardStats)
def stats(
    events: EventRepository = Depends(get_event_repository),
    news: NewsRepository = Depends(get_news_repository),
    subscribers: SubscriberRepository = Depends(get_subscriber_repository),
    donations: DonationRepository = Depends(get_donation_repository),
    admin: User = Depends(require_admin),
):
    return get_dashboard_stats(events, news, subscribers, donations)


@router.get("/users", response_model=List[UserRead])
def list_users(
    repo: UserRepository = Depends(get_user_repository),
    admin: User = Depends(require_admin),
):
    return repo.list()


@router.put("/users/{user_id}/admin", response_model=UserRead)
def update_admin_status(
    user_id: int,
    body: AdminStatusUpdate,
    repo: UserRepository = Depends(get_user_repository),
    admin: User = Depends(require_admin),
):
    return set_admin_status(repo, user_id, body.is_admin, acting_user=admin)
