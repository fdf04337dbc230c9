"""Public site API — what the visitor pages render, never empty."""

from typing import Optional

from fastapi import APIRouter, Depends

from app.application.services.site_content import site_events, site_menu, site_news
from app.domain.repositories.event_repository import EventRepository
from app.domain.repositories.menu_repository import MenuRepository
from app.domain.repositories.news_repository import NewsRepository
from app.domain.schemas.site import SiteEvents, SiteMenu, SiteNews
from app.interfaces.deps import get_event_repository, get_menu_repository, get_news_repository

router = APIRouter(prefix="/api/site", tags=["Site"])


@router.get("/events", response_model=SiteEvents)
def events(repo: EventRepository = Depends(get_event_repository)):
    return site_events(repo)


@router.get("/news", response_model=SiteNews)
def news(
    category: Optional[str] = None,
    q: Optional[str] = None,
    repo: NewsRepository = Depends(get_news_repository),
):
    return site_news(repo, category=category, q=q)


@router.get("/menu", response_model=SiteMenu)
def menu(repo: MenuRepository = Depends(get_menu_repository)):
    return site_menu(repo)
