"""Razorpay webhook — the provider's own confirmation of captured payments."""

from typing import Optional

from fastapi import APIRouter, Depends, Header, Request

from app.application.services.donation_service import handle_webhook
from app.domain.repositories.donation_repository import DonationRepository
from app.infrastructure.razorpay_api import RazorpayClient
from app.interfaces.deps import get_donation_repository, get_payment_gateway

router = APIRouter(prefix="/api/webhooks", tags=["Webhooks"])


@router.post("/razorpay")
async def razorpay_webhook(
    request: Request,
    x_razorpay_signature: Optional[str] = Header(default=None),
    repo: DonationRepository = Depends(get_donation_repository),
    gateway: RazorpayClient = Depends(get_payment_gateway),
):
    # Signature covers the exact bytes sent, so read the raw body
    body = await request.body()
    return await handle_webhook(repo, gateway, body, x_razorpay_signature)
