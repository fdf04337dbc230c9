"""Pydantic schemas for newsletter and contact form."""

from datetime import datetime
from typing import Optional

from app.domain.schemas.base import CamelModel, RequiredStr


class SubscribeRequest(CamelModel):
    email: Optional[str] = None


class SubscriberRead(CamelModel):
    id: int
    email: str
    subscribed_at: Optional[datetime] = None


class SubscribeResponse(CamelModel):
    success: bool = True
    message: str
    subscriber: SubscriberRead


class ContactRequest(CamelModel):
    name: RequiredStr
    email: RequiredStr
    subject: Optional[str] = None
    message: RequiredStr
