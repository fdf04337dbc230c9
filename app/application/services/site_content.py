"""Public site reads with placeholder fallback.

The public pages never render empty: when the store has nothing (or fails),
a fixed placeholder set is served instead.
"""

from datetime import datetime, timedelta, timezone
from typing import List, Optional

import structlog
from sqlalchemy.exc import SQLAlchemyError

from app.domain.repositories.event_repository import EventRepository
from app.domain.repositories.menu_repository import MenuRepository
from app.domain.repositories.news_repository import NewsRepository
from app.domain.schemas.event import EventRead
from app.domain.schemas.menu import MenuItemRead
from app.domain.schemas.news import NewsFilter, NewsPostRead
from app.domain.schemas.site import SiteEvents, SiteMenu, SiteNews

logger = structlog.get_logger(__name__)

_UNSPLASH = "https://images.unsplash.com"


def placeholder_events(now: Optional[datetime] = None) -> List[EventRead]:
    now = now or datetime.now(timezone.utc)
    return [
        EventRead(
            id=1,
            title="Community Garden Cleanup",
            description=(
                "Help us restore the downtown community garden and prepare for summer "
                "planting. Tools and refreshments provided."
            ),
            date=now + timedelta(days=7),
            location="Central Park, Downtown",
            image_url=f"{_UNSPLASH}/photo-1546015452-af9d0e235665?auto=format&fit=crop&w=600&q=80",
            created_at=now,
        ),
        EventRead(
            id=2,
            title="Summer Food Drive",
            description=(
                "Help us collect non-perishable food items for local families in need. "
                "Drop-off locations throughout the city."
            ),
            date=now + timedelta(days=14),
            location="Multiple Locations",
            image_url=f"{_UNSPLASH}/photo-1593113630400-ea4288922497?auto=format&fit=crop&w=600&q=80",
            created_at=now,
        ),
        EventRead(
            id=3,
            title="Hope 5K Charity Run",
            description=(
                "Join our annual charity run to raise funds for youth education programs. "
                "All fitness levels welcome."
            ),
            date=now + timedelta(days=28),
            location="Riverview Park",
            image_url=f"{_UNSPLASH}/photo-1531482615713-2afd69097998?auto=format&fit=crop&w=600&q=80",
            created_at=now,
        ),
    ]


def placeholder_news(now: Optional[datetime] = None) -> List[NewsPostRead]:
    now = now or datetime.now(timezone.utc)
    return [
        NewsPostRead(
            id=1,
            title="Urban Reforestation Project Completes First Phase",
            content=(
                "Over 500 trees planted across downtown neighborhoods thanks to our "
                "amazing volunteers and donors."
            ),
            category="News",
            image_url=f"{_UNSPLASH}/photo-1544027993-37dbfe43562a?auto=format&fit=crop&w=600&q=80",
            author_name="Emma Rodriguez",
            author_image_url=f"{_UNSPLASH}/photo-1534528741775-53994a69daeb?auto=format&fit=facearea&w=256&h=256&q=80",
            published_at=now - timedelta(days=7),
        ),
        NewsPostRead(
            id=2,
            title="Scholarship Program Helps 30 Students Achieve College Dreams",
            content=(
                "Our annual scholarship fund awarded $150,000 to deserving students from "
                "underserved communities."
            ),
            category="Success Story",
            image_url=f"{_UNSPLASH}/photo-1608555855762-2b657eb1c348?auto=format&fit=crop&w=600&q=80",
            author_name="Michael Chen",
            author_image_url=f"{_UNSPLASH}/photo-1500648767791-00dcc994a43e?auto=format&fit=facearea&w=256&h=256&q=80",
            published_at=now - timedelta(days=21),
        ),
        NewsPostRead(
            id=3,
            title="New Community Center Opening in Westside",
            content=(
                "Join us for the grand opening of our new community center offering "
                "resources, classes, and support services."
            ),
            category="Announcement",
            image_url=f"{_UNSPLASH}/photo-1560252829-804f1aedf1be?auto=format&fit=crop&w=600&q=80",
            author_name="Sarah Johnson",
            author_image_url=f"{_UNSPLASH}/photo-1519699047748-de8e457a634e?auto=format&fit=facearea&w=256&h=256&q=80",
            published_at=now - timedelta(days=35),
        ),
    ]


def default_menu() -> List[MenuItemRead]:
    entries = [("Home", "/"), ("About", "/about"), ("Events", "/events"), ("News", "/news"), ("Contact", "/contact")]
    return [
        MenuItemRead(id=position, title=title, path=path, order=position, is_active=True)
        for position, (title, path) in enumerate(entries, start=1)
    ]


def site_events(repo: EventRepository) -> SiteEvents:
    try:
        events = repo.list()
    except SQLAlchemyError as e:
        logger.warning("Events unavailable, serving placeholders", error=str(e))
        events = []

    if not events:
        return SiteEvents(items=placeholder_events(), placeholder=True)
    return SiteEvents(items=[EventRead.model_validate(e) for e in events], placeholder=False)


def site_news(repo: NewsRepository, category: Optional[str] = None, q: Optional[str] = None) -> SiteNews:
    try:
        total = repo.count()
        posts = repo.get_with_filters(NewsFilter(category=category, q=q)) if total else []
    except SQLAlchemyError as e:
        logger.warning("News unavailable, serving placeholders", error=str(e))
        total, posts = 0, []

    if not total:
        items = placeholder_news()
        if category and category != "all":
            items = [p for p in items if p.category == category]
        if q and q.strip():
            # Same fields and case-insensitive match as the stored search
            needle = q.strip().lower()
            items = [p for p in items if any(needle in s.lower() for s in (p.title, p.content, p.category))]
        return SiteNews(items=items, placeholder=True)
    return SiteNews(items=[NewsPostRead.model_validate(p) for p in posts], placeholder=False)


def site_menu(repo: MenuRepository) -> SiteMenu:
    try:
        items = repo.list_active()
    except SQLAlchemyError as e:
        logger.warning("Menu unavailable, serving defaults", error=str(e))
        items = []

    if not items:
        return SiteMenu(items=default_menu(), placeholder=True)
    return SiteMenu(items=[MenuItemRead.model_validate(i) for i in items], placeholder=False)
