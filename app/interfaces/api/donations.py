"""Donation API routes — order creation, checkout verification, admin listing."""

from typing import List

from fastapi import APIRouter, Depends, status

from app.application.services.donation_service import create_order, list_donations, verify_and_record
from app.domain.models.user import User
from app.domain.repositories.donation_repository import DonationRepository
from app.domain.schemas.donation import DonationRead, OrderCreate, OrderRead, PaymentVerification
from app.infrastructure.razorpay_api import RazorpayClient
from app.interfaces.api.deps import require_admin
from app.interfaces.deps import get_donation_repository, get_payment_gateway

router = APIRouter(prefix="/api", tags=["Donations"])


@router.post("/create-order", response_model=OrderRead)
async def create_payment_order(
    body: OrderCreate,
    gateway: RazorpayClient = Depends(get_payment_gateway),
):
    return await create_order(gateway, body)


@router.post("/donations/verify", response_model=DonationRead, status_code=status.HTTP_201_CREATED)
async def verify_payment(
    body: PaymentVerification,
    repo: DonationRepository = Depends(get_donation_repository),
    gateway: RazorpayClient = Depends(get_payment_gateway),
):
    return await verify_and_record(repo, gateway, body)


@router.get("/donations", response_model=List[DonationRead])
def list_all(
    repo: DonationRepository = Depends(get_donation_repository),
    admin: User = Depends(require_admin),
):
    return list_donations(repo)
