"""Schemas for public site reads and dashboard stats."""

from app.domain.schemas.base import CamelModel
from app.domain.schemas.event import EventRead
from app.domain.schemas.menu import MenuItemRead
from app.domain.schemas.news import NewsPostRead


class SiteEvents(CamelModel):
    items: list[EventRead]
    placeholder: bool


class SiteNews(CamelModel):
    items: list[NewsPostRead]
    placeholder: bool


class SiteMenu(CamelModel):
    items: list[MenuItemRead]
    placeholder: bool


class DashboardStats(CamelModel):
    events: int
    news_posts: int
    subscribers: int
    donations: int
    donation_total: float
