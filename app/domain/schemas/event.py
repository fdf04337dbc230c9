"""Pydantic schemas for Event domain."""

from datetime import datetime
from typing import Optional

from pydantic import field_validator, model_validator

from app.domain.schemas.base import CamelModel, RequiredStr, UTCDateTime, as_utc, require_non_null


class EventCreate(CamelModel):
    title: RequiredStr
    description: RequiredStr
    date: UTCDateTime
    location: RequiredStr
    image_url: Optional[str] = None


class EventUpdate(CamelModel):
    title: Optional[RequiredStr] = None
    description: Optional[RequiredStr] = None
    date: Optional[UTCDateTime] = None
    location: Optional[RequiredStr] = None
    image_url: Optional[str] = None

    @model_validator(mode="after")
    def _required_not_null(self):
        return require_non_null(self, "title", "description", "date", "location")


class EventRead(CamelModel):
    id: int
    title: str
    description: str
    date: datetime
    location: str
    image_url: Optional[str] = None
    created_at: Optional[datetime] = None

    @field_validator("date", "created_at")
    @classmethod
    def _utc(cls, v):
        return as_utc(v) if v is not None else v
