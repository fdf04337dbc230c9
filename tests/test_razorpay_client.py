import asyncio
import hashlib
import hmac
import json

import httpx
import pytest

from app.infrastructure.razorpay_api import PaymentGatewayError, RazorpayClient


def _client(handler, **kwargs):
    options = {
        "key_id": "rzp_test_key",
        "key_secret": "rzp_test_secret",
        "webhook_secret": "whsec",
        "base_url": "https://api.razorpay.test/v1",
        "transport": httpx.MockTransport(handler),
    }
    options.update(kwargs)
    return RazorpayClient(**options)


def test_create_order_posts_minor_units_with_basic_auth():
    seen = {}

    def handler(request):
        seen["url"] = str(request.url)
        seen["auth"] = request.headers["Authorization"]
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"id": "order_abc", "amount": 50000, "currency": "INR"})

    order = asyncio.run(_client(handler).create_order(50000, "INR", "donation_1", {"email": "a@b.com"}))

    assert order["id"] == "order_abc"
    assert seen["url"] == "https://api.razorpay.test/v1/orders"
    assert seen["auth"].startswith("Basic ")
    assert seen["body"] == {
        "amount": 50000,
        "currency": "INR",
        "receipt": "donation_1",
        "notes": {"email": "a@b.com"},
    }


def test_provider_error_description_is_surfaced():
    def handler(request):
        return httpx.Response(
            400,
            json={"error": {"code": "BAD_REQUEST_ERROR", "description": "The amount must be atleast INR 1.00"}},
        )

    with pytest.raises(PaymentGatewayError) as exc_info:
        asyncio.run(_client(handler).fetch_payment("pay_x"))

    assert exc_info.value.status_code == 400
    assert exc_info.value.message == "The amount must be atleast INR 1.00"


def test_connection_failure_is_a_gateway_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(PaymentGatewayError):
        asyncio.run(_client(handler).fetch_order("order_x"))


def test_unconfigured_client_refuses_calls():
    client = _client(lambda request: httpx.Response(200, json={}), key_id="", key_secret="")
    assert client.is_configured is False
    with pytest.raises(PaymentGatewayError):
        asyncio.run(client.fetch_order("order_x"))


def test_payment_signature():
    client = _client(lambda request: httpx.Response(200))
    good = hmac.new(b"rzp_test_secret", b"order_1|pay_1", hashlib.sha256).hexdigest()

    assert client.verify_payment_signature("order_1", "pay_1", good) is True
    assert client.verify_payment_signature("order_1", "pay_2", good) is False


def test_webhook_signature_covers_raw_body():
    client = _client(lambda request: httpx.Response(200))
    body = b'{"event":"payment.captured"}'
    good = hmac.new(b"whsec", body, hashlib.sha256).hexdigest()

    assert client.verify_webhook_signature(body, good) is True
    assert client.verify_webhook_signature(body + b" ", good) is False
    assert _client(lambda r: httpx.Response(200), webhook_secret="").verify_webhook_signature(body, good) is False
