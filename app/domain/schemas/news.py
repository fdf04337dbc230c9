"""Pydantic schemas for NewsPost domain."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import field_validator, model_validator

from app.domain.schemas.base import CamelModel, RequiredStr, as_utc, require_non_null

NewsCategory = Literal["News", "Success Story", "Announcement", "Event Recap", "Community Spotlight"]


class NewsPostCreate(CamelModel):
    title: RequiredStr
    content: RequiredStr
    category: NewsCategory
    image_url: Optional[str] = None
    author_name: RequiredStr
    author_image_url: Optional[str] = None


class NewsPostUpdate(CamelModel):
    title: Optional[RequiredStr] = None
    content: Optional[RequiredStr] = None
    category: Optional[NewsCategory] = None
    image_url: Optional[str] = None
    author_name: Optional[RequiredStr] = None
    author_image_url: Optional[str] = None

    @model_validator(mode="after")
    def _required_not_null(self):
        return require_non_null(self, "title", "content", "category", "author_name")


class NewsPostRead(CamelModel):
    id: int
    title: str
    content: str
    category: str
    image_url: Optional[str] = None
    author_name: str
    author_image_url: Optional[str] = None
    published_at: Optional[datetime] = None

    @field_validator("published_at")
    @classmethod
    def _utc(cls, v):
        return as_utc(v) if v is not None else v


class NewsFilter(CamelModel):
    category: Optional[str] = None
    q: Optional[str] = None
