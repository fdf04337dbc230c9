"""Donation service — Razorpay order creation and server-side payment confirmation.

A Donation row is written only after the provider confirms the payment,
either through the checkout signature + payment lookup or through a signed
webhook. Both paths are idempotent on the provider payment id.
"""

import json
import math
import uuid
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Optional

import structlog

from app.config import get_settings
from app.core.exceptions import (
    BadRequestException,
    ExternalServiceException,
    PaymentRequiredException,
)
from app.domain.models.donation import Donation
from app.domain.repositories.donation_repository import DonationRepository
from app.domain.schemas.donation import DonationCreate, OrderCreate, OrderRead, PaymentVerification
from app.infrastructure.razorpay_api import PaymentGatewayError, RazorpayClient

settings = get_settings()
logger = structlog.get_logger(__name__)

CONFIRMED_PAYMENT_STATUSES = ("captured", "authorized")
_CENT = Decimal("0.01")
# Largest value Numeric(12, 2) holds
MAX_DONATION_AMOUNT = 9_999_999_999.99


def to_minor_units(amount: Decimal) -> int:
    return int((amount * 100).to_integral_value(rounding=ROUND_HALF_UP))


def _order_notes(data: OrderCreate) -> dict:
    notes = {
        "name": data.name,
        "email": data.email,
        "message": data.message,
        "purpose": data.purpose,
        "is_recurring": "true" if data.is_recurring else "false",
    }
    # Razorpay notes are flat string values
    return {k: str(v)[:256] for k, v in notes.items() if v}


async def create_order(gateway: RazorpayClient, data: OrderCreate) -> OrderRead:
    if data.amount is None or not math.isfinite(data.amount) or not 1 <= data.amount <= MAX_DONATION_AMOUNT:
        raise BadRequestException("Invalid donation amount")

    amount = Decimal(str(data.amount)).quantize(_CENT, rounding=ROUND_HALF_UP)
    currency = settings.PAYMENT_CURRENCY
    receipt = f"donation_{uuid.uuid4().hex[:16]}"

    try:
        order = await gateway.create_order(to_minor_units(amount), currency, receipt, _order_notes(data))
    except PaymentGatewayError as e:
        raise ExternalServiceException(f"Error creating Razorpay order: {e.message}")

    return OrderRead(
        order_id=order["id"],
        amount=float(amount),
        currency=order.get("currency", currency),
        key_id=gateway.key_id,
    )


def _donation_from_payment(payment: dict, notes: dict) -> DonationCreate:
    return DonationCreate(
        amount=Decimal(int(payment["amount"])) / 100,
        currency=payment.get("currency") or settings.PAYMENT_CURRENCY,
        payment_id=payment["id"],
        order_id=payment.get("order_id"),
        name=notes.get("name") or None,
        email=notes.get("email") or payment.get("email") or None,
        message=notes.get("message") or None,
        purpose=notes.get("purpose") or None,
        is_recurring=str(notes.get("is_recurring", "")).lower() == "true",
    )


def record_payment(repo: DonationRepository, payment: dict, notes: Optional[dict] = None) -> Donation:
    donation, created = repo.create_if_absent(_donation_from_payment(payment, notes or {}))
    if created:
        logger.info(
            "Donation recorded",
            donation_id=donation.id,
            payment_id=donation.payment_id,
            amount=str(donation.amount),
            currency=donation.currency,
        )
    else:
        logger.info("Donation already recorded", payment_id=donation.payment_id)
    return donation


async def _order_notes_for(gateway: RazorpayClient, order_id: Optional[str]) -> dict:
    if not order_id:
        return {}
    try:
        order = await gateway.fetch_order(order_id)
    except PaymentGatewayError as e:
        logger.warning("Could not load order notes", order_id=order_id, error=e.message)
        return {}
    return order.get("notes") or {}


async def verify_and_record(
    repo: DonationRepository, gateway: RazorpayClient, data: PaymentVerification
) -> Donation:
    """Confirm a checkout result with the provider, then record the donation."""
    if not gateway.verify_payment_signature(data.order_id, data.payment_id, data.signature):
        logger.warning("Payment signature mismatch", order_id=data.order_id, payment_id=data.payment_id)
        raise BadRequestException("Invalid payment signature")

    existing = repo.get_by_payment_id(data.payment_id)
    if existing is not None:
        return existing

    try:
        payment = await gateway.fetch_payment(data.payment_id)
    except PaymentGatewayError as e:
        raise ExternalServiceException(f"Error confirming payment: {e.message}")

    if payment.get("order_id") != data.order_id:
        raise BadRequestException("Payment does not belong to this order")
    if payment.get("status") not in CONFIRMED_PAYMENT_STATUSES:
        raise PaymentRequiredException(
            "Payment has not been completed",
            {"status": payment.get("status")},
        )

    notes = {**(payment.get("notes") or {}), **await _order_notes_for(gateway, data.order_id)}
    return record_payment(repo, payment, notes)


async def handle_webhook(
    repo: DonationRepository, gateway: RazorpayClient, body: bytes, signature: Optional[str]
) -> dict:
    if not signature or not gateway.verify_webhook_signature(body, signature):
        logger.warning("Rejected webhook with invalid signature")
        raise BadRequestException("Invalid webhook signature")

    try:
        payload = json.loads(body)
    except ValueError:
        raise BadRequestException("Invalid JSON body")

    event = payload.get("event")
    if event != "payment.captured":
        return {"status": "ignored", "event": event}

    payment = payload.get("payload", {}).get("payment", {}).get("entity")
    if not payment or "id" not in payment or "amount" not in payment:
        raise BadRequestException("Webhook payload has no payment entity")

    notes = payment.get("notes") or {}
    if not notes:
        notes = await _order_notes_for(gateway, payment.get("order_id"))

    donation = record_payment(repo, payment, notes)
    return {"status": "processed", "event": event, "donationId": donation.id}


def list_donations(repo: DonationRepository) -> List[Donation]:
    return repo.list()
