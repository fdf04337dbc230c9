"""Pydantic schemas for donations and payment orders."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import field_validator

from app.domain.schemas.base import CamelModel, RequiredStr, as_utc

DONATION_PURPOSES = ("General Fund", "Education", "Environment", "Community", "Emergency Relief")


class OrderCreate(CamelModel):
    # Checked by the service so that a missing/low amount maps to one message
    amount: Optional[float] = None
    name: Optional[str] = None
    email: Optional[str] = None
    message: Optional[str] = None
    purpose: Optional[str] = "General Fund"
    is_recurring: bool = False


class OrderRead(CamelModel):
    order_id: str
    amount: float
    currency: str
    key_id: str


class PaymentVerification(CamelModel):
    order_id: RequiredStr
    payment_id: RequiredStr
    signature: RequiredStr


class DonationCreate(CamelModel):
    amount: Decimal
    currency: str
    payment_id: str
    order_id: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    message: Optional[str] = None
    purpose: Optional[str] = None
    is_recurring: bool = False


class DonationRead(CamelModel):
    id: int
    amount: float
    currency: str
    name: Optional[str] = None
    email: Optional[str] = None
    message: Optional[str] = None
    is_recurring: bool
    purpose: Optional[str] = None
    payment_id: str
    order_id: Optional[str] = None
    created_at: Optional[datetime] = None

    @field_validator("created_at")
    @classmethod
    def _utc(cls, v):
        return as_utc(v) if v is not None else v
