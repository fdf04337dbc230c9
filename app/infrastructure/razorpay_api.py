"""Razorpay Orders/Payments HTTP client.

Only the server-side pieces of the checkout flow live here: order creation,
payment lookup and signature checks. The hosted checkout itself runs in the
browser.
"""

import hashlib
import hmac
from typing import Optional

import httpx
import structlog

from app.config import get_settings

settings = get_settings()
logger = structlog.get_logger(__name__)


class PaymentGatewayError(Exception):
    """The provider rejected a call or could not be reached."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


def _hmac_sha256(secret: str, payload: bytes) -> str:
    return hmac.new(secret.encode("utf-8"), payload, hashlib.sha256).hexdigest()


class RazorpayClient:
    """Client for the Razorpay REST API (basic auth with key id/secret)."""

    def __init__(
        self,
        key_id: Optional[str] = None,
        key_secret: Optional[str] = None,
        webhook_secret: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: float = 30,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.key_id = key_id if key_id is not None else settings.RAZORPAY_KEY_ID
        self.key_secret = key_secret if key_secret is not None else settings.RAZORPAY_KEY_SECRET
        self.webhook_secret = (
            webhook_secret if webhook_secret is not None else settings.RAZORPAY_WEBHOOK_SECRET
        )
        self.base_url = (base_url or settings.RAZORPAY_API_URL).rstrip("/")
        self.timeout = timeout
        self.transport = transport

    @property
    def is_configured(self) -> bool:
        return bool(self.key_id and self.key_secret)

    async def _request(self, method: str, path: str, json: Optional[dict] = None) -> dict:
        if not self.is_configured:
            raise PaymentGatewayError("Razorpay is not configured.")

        url = f"{self.base_url}{path}"
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                auth=(self.key_id, self.key_secret),
                transport=self.transport,
            ) as client:
                response = await client.request(method, url, json=json)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as e:
            # Razorpay errors look like {"error": {"code": ..., "description": ...}}
            try:
                description = e.response.json().get("error", {}).get("description")
            except ValueError:
                description = None
            message = description or e.response.text[:200] or str(e)
            logger.warning(
                "Razorpay API error",
                method=method,
                path=path,
                status_code=e.response.status_code,
                error=message,
            )
            raise PaymentGatewayError(message, e.response.status_code) from e
        except httpx.HTTPError as e:
            logger.error("Razorpay connection error", method=method, path=path, error=str(e))
            raise PaymentGatewayError(f"Could not reach Razorpay: {e}") from e

    async def create_order(self, amount_minor: int, currency: str, receipt: str, notes: Optional[dict] = None) -> dict:
        """Create an order. `amount_minor` is in the currency's smallest unit."""
        payload = {
            "amount": amount_minor,
            "currency": currency,
            "receipt": receipt,
            "notes": notes or {},
        }
        order = await self._request("POST", "/orders", json=payload)
        logger.info("Razorpay order created", order_id=order.get("id"), amount=amount_minor, currency=currency)
        return order

    async def fetch_order(self, order_id: str) -> dict:
        return await self._request("GET", f"/orders/{order_id}")

    async def fetch_payment(self, payment_id: str) -> dict:
        return await self._request("GET", f"/payments/{payment_id}")

    def verify_payment_signature(self, order_id: str, payment_id: str, signature: str) -> bool:
        """Checkout handler signature: HMAC-SHA256 of "order_id|payment_id"."""
        if not self.key_secret:
            return False
        expected = _hmac_sha256(self.key_secret, f"{order_id}|{payment_id}".encode("utf-8"))
        return hmac.compare_digest(expected, signature)

    def verify_webhook_signature(self, body: bytes, signature: str) -> bool:
        """Webhook signature: HMAC-SHA256 of the raw request body."""
        if not self.webhook_secret:
            return False
        return hmac.compare_digest(_hmac_sha256(self.webhook_secret, body), signature)
